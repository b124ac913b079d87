"""Summary report for a run."""
from pathlib import Path
from typing import List, Sequence, Tuple

from ..utils.formatting import format_elapsed
from .models import AdmittedFile, Report
from .tokenizer import TokenCounter


class Reporter:
    """Derives the token estimate and summary statistics from admitted files."""

    def __init__(self, token_counter: TokenCounter):
        self.token_counter = token_counter

    def summarize(self, root: Path, admitted_files: Sequence[AdmittedFile],
                  elapsed: float, files_admitted: int) -> Report:
        """
        Build the report for a finished run.

        Contents are concatenated with no separator before tokenizing, so a
        token may straddle the boundary between two files.

        Args:
            root: Traversal root
            admitted_files: Admitted files in traversal order
            elapsed: Seconds since the run started
            files_admitted: Number of files committed by the limiter

        Returns:
            Report with the estimated token count
        """
        combined_content = "".join(f.content for f in admitted_files)

        return Report(
            root=root,
            files_analyzed=files_admitted,
            estimated_tokens=self.token_counter.count(combined_content),
            elapsed=elapsed,
        )

    @staticmethod
    def rows(report: Report) -> List[Tuple[str, str]]:
        """Report fields as (heading, value) pairs in print order."""
        return [
            ("Analyzing:", str(report.root)),
            ("Files analyzed:", str(report.files_analyzed)),
            ("Estimated tokens:", str(report.estimated_tokens)),
            ("Time elapsed:", format_elapsed(report.elapsed)),
        ]
