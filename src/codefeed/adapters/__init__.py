"""Entry sources for traversal."""
from pathlib import Path
from typing import Union

from ..core.models import Config
from .base import EntrySource
from .local import LocalWalker


def create_walker(root: Union[str, Path], config: Config) -> EntrySource:
    """
    Create the entry source for a traversal root.

    Args:
        root: Directory to traverse
        config: Configuration object

    Returns:
        EntrySource yielding ignore-pruned entries under root

    Raises:
        WalkerError: If root is not a directory
    """
    return LocalWalker(Path(root), config)


__all__ = ['EntrySource', 'LocalWalker', 'create_walker']
