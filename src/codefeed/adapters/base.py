"""
Base entry source interface.

This module defines the abstract interface for traversal collaborators:
anything that produces a lazy, finite stream of entries for the
aggregator to consume.
"""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Iterator

from ..core.models import Config, Entry


class EntrySource(ABC):
    """
    Abstract base class for entry sources.

    The stream starts with the root (depth 0) and yields directories
    before their children. Paths already pruned by the source never
    appear in it.
    """

    def __init__(self, root: Path, config: Config):
        """Initialize source with the traversal root and configuration."""
        self.root = root
        self.config = config

    @abstractmethod
    def walk(self) -> Iterator[Entry]:
        """
        Traverse the tree.

        Returns:
            Iterator over directory and file entries in traversal order.
        """
        pass

    def __iter__(self) -> Iterator[Entry]:
        return self.walk()
