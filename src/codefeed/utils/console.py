"""Console output with theme support and a plain-text fallback.

File contents and the tree are written untouched through ``echo``: they are
the payload handed to a language model, so they must never be wrapped or
re-styled. Rich styling is only applied to the report and to fatal errors,
and only when the stream is an interactive terminal.
"""

import os
import sys
from dataclasses import dataclass
from enum import Enum
from typing import Any, List, Optional, Tuple

from rich.console import Console
from rich.text import Text
from rich.theme import Theme


class StatusType(Enum):
    """Standard status types with associated symbols."""
    ERROR = ("[x]", "error", "red")


@dataclass
class ThemeColors:
    """Color definitions for a theme."""
    info: str
    warning: str
    error: str
    success: str
    highlight: str
    path: str
    number: str
    dim: str
    heading: str = "bright_yellow"


THEMES = {
    'manhattan': ThemeColors(
        info='cyan',
        warning='yellow',
        error='red',
        success='green',
        highlight='bright_cyan',
        path='white',
        number='bright_blue',
        dim='bright_black',
        heading='bright_yellow'
    ),
}


class ConsoleManager:
    """Console writer with Rich formatting on terminals and plain text elsewhere."""

    def __init__(self, theme: str = "manhattan", file: Optional[Any] = None,
                 force_plain: bool = False):
        """Initialize console.

        Args:
            theme: Theme name from THEMES
            file: Output stream (defaults to the current sys.stdout)
            force_plain: Force plain output even on a terminal
        """
        self.theme_name = theme
        self.theme_colors = THEMES.get(theme, THEMES['manhattan'])
        self.file = file or sys.stdout

        self.use_rich = not force_plain and self._should_use_rich_terminal()

        if self.use_rich:
            self.console = Console(
                theme=self._create_rich_theme(),
                file=self.file,
                highlight=False
            )
        else:
            self.console = None

    def _should_use_rich_terminal(self) -> bool:
        """Use Rich only on a TTY, unless NO_COLOR is set."""
        if os.environ.get('NO_COLOR'):
            return False
        return hasattr(self.file, 'isatty') and self.file.isatty()

    def _create_rich_theme(self) -> Theme:
        """Create Rich theme from our theme colors."""
        return Theme({
            'info': self.theme_colors.info,
            'warning': self.theme_colors.warning,
            'error': self.theme_colors.error,
            'success': self.theme_colors.success,
            'highlight': self.theme_colors.highlight,
            'path': self.theme_colors.path,
            'number': self.theme_colors.number,
            'dim': self.theme_colors.dim,
            'heading': self.theme_colors.heading,
        })

    def echo(self, text: str = "") -> None:
        """Write text followed by a newline, bypassing any styling."""
        self.file.write(text + "\n")

    def print_status(self, status: StatusType, message: str):
        """Print a status line with icon."""
        icon, _, color = status.value

        if self.use_rich:
            status_text = Text()
            status_text.append(f"{icon} ", style=color)
            status_text.append(message)
            self.console.print(status_text, soft_wrap=True)
        else:
            print(f"{icon} {message}", file=self.file)

    def print_error(self, message: str):
        """Print an error message."""
        self.print_status(StatusType.ERROR, message)

    def print_report(self, rows: List[Tuple[str, str]]):
        """Print report rows as '<heading> <value>' lines."""
        for heading, value in rows:
            if self.use_rich:
                text = Text()
                text.append(heading, style=self.theme_colors.heading)
                text.append(f" {value}", style=self.theme_colors.number)
                self.console.print(text, soft_wrap=True)
            else:
                print(f"{heading} {value}", file=self.file)

    def print_exception(self):
        """Print exception traceback with Rich formatting if available."""
        if self.use_rich:
            self.console.print_exception()
        else:
            import traceback
            traceback.print_exc(file=self.file)
