"""Path utilities for resolving entries against the traversal root."""

from pathlib import Path, PurePath
from typing import Tuple

from ..core.errors import PathOutsideRootError


class PathUtils:
    """Utilities for consistent path handling across platforms."""

    @staticmethod
    def relative_to(path: PurePath, root: PurePath) -> PurePath:
        """
        Strip the root prefix from a path.

        Args:
            path: Absolute path of a traversed entry
            root: Traversal root

        Returns:
            The path relative to root (empty for the root itself)

        Raises:
            PathOutsideRootError: If path does not live under root
        """
        try:
            return PurePath(path).relative_to(root)
        except ValueError as e:
            raise PathOutsideRootError(path, root) from e

    @staticmethod
    def relative_parts(path: PurePath, root: PurePath) -> Tuple[str, ...]:
        """
        Split a path into its components relative to root.

        The number of components is the entry's depth in the tree.
        """
        relative = PathUtils.relative_to(path, root)
        return tuple(part for part in relative.parts if part not in ('', '.'))

    @staticmethod
    def match_path(path: PurePath, root: PurePath, is_dir: bool = False) -> str:
        """
        Build the forward-slash form of a path used for ignore matching.

        Directories get a trailing slash so that directory-only patterns
        such as ``build/`` apply to them.
        """
        relative = PathUtils.relative_to(path, root).as_posix()
        return relative + '/' if is_dir else relative

    @staticmethod
    def display_name(path: Path) -> str:
        """Final component of a path, or '.' when there is none."""
        return path.name or '.'
