"""Fatal error types for codefeed.

Anything raised from this hierarchy aborts the whole run. Per-file problems
are never raised this far; they are recorded as skip records instead.
"""


class CodefeedError(Exception):
    """Base class for errors that abort a run."""


class RootResolutionError(CodefeedError):
    """The current working directory could not be resolved."""


class WalkerError(CodefeedError):
    """The directory walker could not be set up or could not list a directory."""


class PathOutsideRootError(CodefeedError):
    """A traversed path does not live under the traversal root."""

    def __init__(self, path, root):
        self.path = path
        self.root = root
        super().__init__(f"Failed to strip prefix {root} from path: {path}")


class TokenizerError(CodefeedError):
    """The tokenizer could not be initialized."""
