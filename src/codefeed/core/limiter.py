"""
Resource limits for codefeed.

The limiter holds the running totals for a run together with the three
configured ceilings. Admission and commit are separate calls: ``admit`` only
answers whether a candidate fits, and the caller commits the size once the
file content has actually been stored.
"""

from typing import Callable, List, Tuple

from .models import ADMIT, AdmitDecision, Config, RunningTotals, SkipReason


class Limiter:
    """Gatekeeper for file count, cumulative size and per-file size."""

    def __init__(self, max_files: int, max_total_size: int, max_file_size: int):
        """
        Initialize the limiter.

        Args:
            max_files: Maximum number of files admitted in a run.
            max_total_size: Maximum cumulative bytes admitted in a run.
            max_file_size: Maximum bytes for a single file.
        """
        if min(max_files, max_total_size, max_file_size) < 0:
            raise ValueError("Limits must be non-negative")

        self._max_files = max_files
        self._max_total_size = max_total_size
        self._max_file_size = max_file_size
        self.totals = RunningTotals()

        # Evaluated in order; the first matching rule rejects the candidate.
        self._rules: List[Tuple[SkipReason, int, Callable[[int], bool]]] = [
            (SkipReason.FILE_COUNT_LIMIT, max_files,
             lambda size: self.totals.files_admitted >= self._max_files),
            (SkipReason.TOTAL_SIZE_LIMIT, max_total_size,
             lambda size: self.totals.bytes_admitted + size > self._max_total_size),
            (SkipReason.PER_FILE_SIZE_LIMIT, max_file_size,
             lambda size: size > self._max_file_size),
        ]

    @classmethod
    def from_config(cls, config: Config) -> 'Limiter':
        """Create a limiter from the configured ceilings."""
        return cls(
            max_files=config.max_files,
            max_total_size=config.max_total_size,
            max_file_size=config.max_file_size,
        )

    @property
    def max_files(self) -> int:
        return self._max_files

    @property
    def max_total_size(self) -> int:
        return self._max_total_size

    @property
    def max_file_size(self) -> int:
        return self._max_file_size

    def admit(self, candidate_size: int) -> AdmitDecision:
        """
        Check a candidate file size against all limits.

        Does not change the running totals.

        Args:
            candidate_size: On-disk size of the candidate in bytes.

        Returns:
            ADMIT, or a rejection carrying the reason and the ceiling hit.
        """
        for reason, limit, exceeded in self._rules:
            if exceeded(candidate_size):
                return AdmitDecision.reject(reason, limit)
        return ADMIT

    def commit(self, size: int) -> None:
        """Add an admitted and stored file to the running totals."""
        self.totals.files_admitted += 1
        self.totals.bytes_admitted += size
