"""Incremental tree rendering for traversed entries."""

from pathlib import Path
from typing import List

from ..core.models import Entry, Outcome
from .path_utils import PathUtils

INDENT = "    "
DIR_CONNECTOR = "├── "
FILE_CONNECTOR = "└── "
NON_TEXT_SUFFIX = " [Non-text file]"


class TreeRenderer:
    """
    Builds the tree text one line per visited entry.

    Lines are produced in traversal order, so the tree mirrors exactly what
    the walker yielded. Only directories, admitted files and non-text files
    are drawn; files skipped for a limit or an error get no line and are
    explained by the skip list instead.
    """

    def __init__(self):
        self.lines: List[str] = []

    def render_root(self, root: Path) -> str:
        """
        Render the traversal root line.

        Args:
            root: Traversal root directory

        Returns:
            The rendered line
        """
        line = f"{FILE_CONNECTOR}{PathUtils.display_name(root)}"
        self.lines.append(line)
        return line

    def visit(self, entry: Entry, outcome: Outcome) -> str:
        """
        Render the line for a directory or a file.

        Args:
            entry: Entry being drawn (depth >= 1)
            outcome: How the entry was handled

        Returns:
            The rendered line
        """
        indent = INDENT * (entry.depth - 1)
        name = PathUtils.display_name(entry.path)

        if outcome is Outcome.DIRECTORY:
            line = f"{indent}{DIR_CONNECTOR}{name}"
        elif outcome is Outcome.NON_TEXT:
            line = f"{indent}{FILE_CONNECTOR}{name}{NON_TEXT_SUFFIX}"
        else:
            line = f"{indent}{FILE_CONNECTOR}{name}"

        self.lines.append(line)
        return line

    def text(self) -> str:
        """Full tree text with trailing whitespace trimmed."""
        return "\n".join(self.lines).rstrip()
