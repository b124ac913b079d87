"""Local filesystem entry source with ignore-rule pruning."""
import logging
import os
from pathlib import Path
from typing import Iterator

from ..core.errors import WalkerError
from ..core.models import Config, Entry
from ..utils.file_filter import FileFilter
from ..utils.path_utils import PathUtils
from .base import EntrySource

logger = logging.getLogger(__name__)


class LocalWalker(EntrySource):
    """Depth-first walker over a local directory, siblings sorted by name."""

    def __init__(self, root: Path, config: Config):
        """Initialize the walker and the ignore rules for the root."""
        super().__init__(root, config)

        if not os.path.isdir(root):
            raise WalkerError(f"Path is not a directory: {root}")

        self.file_filter = FileFilter(root, config)

    def walk(self) -> Iterator[Entry]:
        """Yield the root, then every entry that survives the ignore rules."""
        yield Entry(path=self.root, kind='dir', depth=0)
        yield from self._walk_directory(self.root)

    def _walk_directory(self, directory: Path) -> Iterator[Entry]:
        self.file_filter.load_directory(directory)

        try:
            with os.scandir(directory) as it:
                children = sorted(it, key=lambda e: e.name)
        except OSError as e:
            raise WalkerError(f"Error during directory traversal of {directory}: {e}") from e

        for child in children:
            path = Path(child.path)
            depth = len(PathUtils.relative_parts(path, self.root))

            # Directory symlinks are not followed; file symlinks are read through
            if child.is_dir(follow_symlinks=False):
                if self.file_filter.is_ignored(path, is_dir=True):
                    logger.debug(f"Ignoring directory {path}")
                    continue
                yield Entry(path=path, kind='dir', depth=depth)
                yield from self._walk_directory(path)
            elif child.is_file():
                if self.file_filter.is_ignored(path):
                    logger.debug(f"Ignoring file {path}")
                    continue
                yield Entry(path=path, kind='file', depth=depth)
            else:
                logger.debug(f"Skipping non-regular entry {path}")
