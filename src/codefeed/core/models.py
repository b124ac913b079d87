"""
Core data models for codefeed.

This module contains the fundamental data structures used throughout
the application for configuration, traversal entries, admission decisions
and run results.
"""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import List, Optional


DEFAULT_MAX_FILE_SIZE = 1024 * 1024  # 1MB
DEFAULT_MAX_TOTAL_SIZE = 1024 * 1024 * 100  # 100MB
DEFAULT_MAX_FILES = 10000


@dataclass
class Config:
    """Configuration settings for codefeed."""

    # Resource limits
    max_file_size: int = DEFAULT_MAX_FILE_SIZE
    max_total_size: int = DEFAULT_MAX_TOTAL_SIZE
    max_files: int = DEFAULT_MAX_FILES

    report: bool = False  # Print the summary report after the content
    token_encoder: str = "cl100k_base"
    sample_size: int = 1024  # Bytes sampled for text/binary classification
    show_hidden: bool = False  # Walk entries whose name starts with a dot
    debug: bool = False


@dataclass(frozen=True)
class Entry:
    """A filesystem entry yielded by traversal."""

    path: Path
    kind: str  # 'file' or 'dir'
    depth: int  # Path segments relative to the traversal root

    def is_file(self) -> bool:
        """Check if this entry represents a file."""
        return self.kind == 'file'

    def is_directory(self) -> bool:
        """Check if this entry represents a directory."""
        return self.kind == 'dir'

    @property
    def is_root(self) -> bool:
        return self.depth == 0


class SkipReason(str, Enum):
    """Why a file was left out of the content and the running totals."""
    FILE_COUNT_LIMIT = "file-count-limit"
    TOTAL_SIZE_LIMIT = "total-size-limit"
    PER_FILE_SIZE_LIMIT = "per-file-size-limit"
    READ_ERROR = "read-error"
    CLASSIFICATION_ERROR = "classification-error"


class Outcome(Enum):
    """How a visited entry is drawn in the tree."""
    DIRECTORY = "dir"
    ADMITTED = "admitted"
    NON_TEXT = "non-text"


@dataclass(frozen=True)
class AdmitDecision:
    """Result of a limiter admission check."""

    admitted: bool
    reason: Optional[SkipReason] = None
    limit: Optional[int] = None  # The ceiling that rejected the candidate

    @classmethod
    def reject(cls, reason: SkipReason, limit: int) -> 'AdmitDecision':
        return cls(admitted=False, reason=reason, limit=limit)


ADMIT = AdmitDecision(admitted=True)


@dataclass
class AdmittedFile:
    """A file that passed every check, with its decoded content."""

    path: Path
    content: str
    size: int  # On-disk size used for admission


@dataclass
class SkipRecord:
    """A file excluded from the output, with the line reported for it."""

    path: Path
    reason: SkipReason
    message: str


@dataclass
class RunningTotals:
    """Counters for everything committed so far in a run."""

    files_admitted: int = 0
    bytes_admitted: int = 0


@dataclass
class RunResult:
    """Result of a single traversal-and-filtering run."""

    # Required fields first
    root: Path
    tree: str
    totals: RunningTotals

    # Optional fields with defaults
    admitted: List[AdmittedFile] = field(default_factory=list)
    skipped: List[SkipRecord] = field(default_factory=list)
    entries_seen: int = 0
    directories: int = 0
    non_text_files: int = 0

    def has_errors(self) -> bool:
        """Check if any file was skipped during the run."""
        return len(self.skipped) > 0

    def get_error_summary(self) -> str:
        """Get a summary of all skipped files."""
        if not self.skipped:
            return "No errors encountered."
        return f"{len(self.skipped)} errors encountered:\n" + "\n".join(f"- {s.message}" for s in self.skipped)


@dataclass
class Report:
    """Summary statistics printed after the file contents."""

    root: Path
    files_analyzed: int
    estimated_tokens: int
    elapsed: float  # Seconds since the run started

