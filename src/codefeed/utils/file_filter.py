"""
Ignore-rule filtering for codefeed.

Patterns come from the version-control ignore files: ``.gitignore`` and
``.ignore`` in every walked directory and in each parent of the root up to
the repository root, plus ``.git/info/exclude`` at the repository root.
Patterns apply to the subtree of the directory holding the file, and the
deepest directory with a matching pattern decides, so a nested
``!pattern`` can re-include what a parent ignored.
"""

import logging
from pathlib import Path
from typing import Dict, List, Optional

from pathspec import GitIgnoreSpec

from ..core.models import Config
from .path_utils import PathUtils

# Later files take precedence over earlier ones in the same directory
IGNORE_FILE_NAMES = ('.gitignore', '.ignore')
GIT_DIR = '.git'
EXCLUDE_FILE = Path(GIT_DIR) / 'info' / 'exclude'

logger = logging.getLogger(__name__)


def find_repository_root(start: Path) -> Optional[Path]:
    """
    Find the closest directory at or above ``start`` that holds ``.git``.

    Args:
        start: Directory to search from

    Returns:
        The repository root, or None when ``start`` is not inside a repository
    """
    for directory in (start, *start.parents):
        if (directory / GIT_DIR).exists():
            return directory
    return None


class FileFilter:
    """Handles hidden-entry and ignore-pattern filtering."""

    def __init__(self, root: Path, config: Config):
        self.root = root
        self.show_hidden = config.show_hidden
        self._specs: Dict[Path, GitIgnoreSpec] = {}

        # Outside a repository only the root and its subtree contribute rules
        self.repository_root = find_repository_root(root) or root
        self._exclude_lines = self._read_patterns(self.repository_root / EXCLUDE_FILE)

        for ancestor in root.parents:
            if ancestor.is_relative_to(self.repository_root):
                self.load_directory(ancestor)

    def _read_patterns(self, ignore_file: Path) -> List[str]:
        """Read pattern lines from an ignore file, or nothing if it is absent."""
        if not ignore_file.is_file():
            return []
        try:
            with open(ignore_file, 'r', encoding='utf-8') as f:
                return f.read().splitlines()
        except (OSError, UnicodeDecodeError) as e:
            logger.warning(f"Could not read {ignore_file}: {e}")
            return []

    def load_directory(self, directory: Path) -> Optional[GitIgnoreSpec]:
        """
        Load the ignore files of a directory before its children are filtered.

        Args:
            directory: Directory about to be listed.

        Returns:
            The compiled spec for this directory, or None if it has no patterns.
        """
        lines: List[str] = []
        if directory == self.repository_root:
            lines.extend(self._exclude_lines)
        for name in IGNORE_FILE_NAMES:
            lines.extend(self._read_patterns(directory / name))

        if not lines:
            return None

        spec = GitIgnoreSpec.from_lines(lines)
        self._specs[directory] = spec
        logger.debug(f"Loaded {len(spec.patterns)} ignore patterns for {directory}")
        return spec

    def is_hidden_file(self, path: Path) -> bool:
        """
        Check if an entry is hidden (name starts with a dot).

        Args:
            path: Path to the entry.

        Returns:
            True if the entry is hidden, False otherwise.
        """
        return path.name.startswith('.')

    def is_ignored(self, path: Path, is_dir: bool = False) -> bool:
        """
        Check if an entry should be pruned from traversal.

        Args:
            path: Absolute path of the entry.
            is_dir: Whether the entry is a directory.

        Returns:
            True if the entry is hidden or matched by an ignore pattern.
        """
        if not self.show_hidden and self.is_hidden_file(path):
            return True

        for directory in path.parents:
            spec = self._specs.get(directory)
            if spec is not None:
                result = spec.check_file(PathUtils.match_path(path, directory, is_dir))
                if result.include is not None:
                    return result.include
            if directory == self.repository_root:
                break

        return False
