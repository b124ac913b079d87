"""Main traversal-and-filtering orchestrator."""
import logging
from pathlib import Path
from typing import Iterable, List, Optional

from ..utils.console import ConsoleManager
from ..utils.formatting import format_size
from ..utils.path_utils import PathUtils
from ..utils.tree_builder import TreeRenderer
from .classifier import FileClassifier
from .limiter import Limiter
from .models import (
    AdmitDecision, AdmittedFile, Config, Entry, Outcome, RunResult,
    SkipReason, SkipRecord,
)

SEPARATOR = "=" * 50

logger = logging.getLogger(__name__)


class ContextAggregator:
    """
    Consumes an entry stream and collects the files to feed to a model.

    Each file goes through the same steps: size lookup, limiter admission,
    text classification and a full read. Running totals are committed only
    after the read succeeds, so a file that fails late never counts against
    the limits.
    """

    def __init__(self, config: Config, root: Path,
                 classifier: Optional[FileClassifier] = None,
                 limiter: Optional[Limiter] = None,
                 renderer: Optional[TreeRenderer] = None):
        """Initialize the aggregator for one run rooted at ``root``."""
        self.config = config
        self.root = root
        self.classifier = classifier or FileClassifier(config)
        self.limiter = limiter or Limiter.from_config(config)
        self.renderer = renderer or TreeRenderer()

        self.admitted: List[AdmittedFile] = []
        self.skipped: List[SkipRecord] = []
        self.entries_seen = 0
        self.directories = 0
        self.non_text_files = 0

    def run(self, entries: Iterable[Entry]) -> RunResult:
        """
        Process every entry of a traversal.

        Args:
            entries: Entry stream starting with the root

        Returns:
            RunResult with the tree, admitted files and skip records
        """
        for entry in entries:
            self.entries_seen += 1

            if entry.is_root:
                self.directories += 1
                self.renderer.render_root(entry.path)
            elif entry.is_directory():
                self.directories += 1
                self.renderer.visit(entry, Outcome.DIRECTORY)
            else:
                self._process_file(entry)

        return RunResult(
            root=self.root,
            tree=self.renderer.text(),
            totals=self.limiter.totals,
            admitted=self.admitted,
            skipped=self.skipped,
            entries_seen=self.entries_seen,
            directories=self.directories,
            non_text_files=self.non_text_files,
        )

    def _process_file(self, entry: Entry) -> None:
        path = entry.path

        try:
            file_size = path.stat().st_size
        except OSError as e:
            self._skip(path, SkipReason.READ_ERROR, f"Error reading metadata for file {path}: {e}")
            return

        decision = self.limiter.admit(file_size)
        if not decision.admitted:
            self._skip(path, decision.reason, self._limit_message(path, decision))
            return

        try:
            is_text = self.classifier.is_text(path)
        except OSError as e:
            self._skip(path, SkipReason.CLASSIFICATION_ERROR, f"Error checking if file is text {path}: {e}")
            return

        if not is_text:
            self.non_text_files += 1
            self.renderer.visit(entry, Outcome.NON_TEXT)
            return

        try:
            # newline='' keeps the text byte-for-byte equal to the file
            with open(path, 'r', encoding='utf-8', newline='') as f:
                content = f.read()
        except (OSError, UnicodeDecodeError) as e:
            self._skip(path, SkipReason.READ_ERROR, f"Error reading file {path}: {e}")
            return

        self.limiter.commit(file_size)
        self.admitted.append(AdmittedFile(path=path, content=content, size=file_size))
        self.renderer.visit(entry, Outcome.ADMITTED)
        logger.debug(f"Admitted {path} ({file_size} bytes)")

    def _limit_message(self, path: Path, decision: AdmitDecision) -> str:
        """Build the skip line for a limiter rejection."""
        if decision.reason is SkipReason.FILE_COUNT_LIMIT:
            return f"Skipping file {path}: Maximum file limit ({decision.limit}) reached"
        if decision.reason is SkipReason.TOTAL_SIZE_LIMIT:
            return f"Skipping file {path}: Total size limit ({format_size(decision.limit)}) reached"
        return f"Skipping file {path}: File exceeds maximum size ({format_size(decision.limit)})"

    def _skip(self, path: Path, reason: SkipReason, message: str) -> None:
        logger.debug(f"Skipped {path}: {reason.value}")
        self.skipped.append(SkipRecord(path=path, reason=reason, message=message))

    @staticmethod
    def write(result: RunResult, out: ConsoleManager, err: ConsoleManager) -> None:
        """
        Write a run's output.

        The tree comes first, then one block per admitted file in traversal
        order on ``out``, then one line per skipped file on ``err``.

        Raises:
            PathOutsideRootError: If an admitted path is not under the root
        """
        out.echo(result.tree)

        for admitted in result.admitted:
            out.echo(SEPARATOR)
            out.echo(f"File: {PathUtils.relative_to(admitted.path, result.root)}")
            out.echo(SEPARATOR)
            out.echo(admitted.content.rstrip())

        for skip in result.skipped:
            err.echo(skip.message)
