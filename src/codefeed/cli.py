"""Command-line interface for codefeed."""
import os
import sys
import time
import logging
from pathlib import Path

import click
from .adapters import create_walker
from .core.aggregator import ContextAggregator
from .core.errors import CodefeedError, RootResolutionError
from .core.models import (
    Config, RunResult, DEFAULT_MAX_FILE_SIZE, DEFAULT_MAX_TOTAL_SIZE, DEFAULT_MAX_FILES,
)
from .core.reporter import Reporter
from .core.tokenizer import TokenCounter
from .utils.console import ConsoleManager

logger = logging.getLogger(__name__)


def setup_logging(debug: bool) -> None:
    """Configure logging based on debug flag."""
    level = logging.DEBUG if debug else logging.WARNING
    format_string = '[%(levelname)s] %(message)s'

    logging.basicConfig(
        level=level,
        format=format_string,
        handlers=[logging.StreamHandler(sys.stderr)]
    )


def resolve_root() -> Path:
    """Return the current working directory as the traversal root."""
    try:
        return Path(os.getcwd())
    except OSError as e:
        raise RootResolutionError(f"Failed to get current directory: {e}") from e


def run(root: Path, config: Config) -> RunResult:
    """Walk ``root`` and collect everything that passes the filters."""
    walker = create_walker(root, config)
    aggregator = ContextAggregator(config, root)
    return aggregator.run(walker)


@click.command()
@click.option('--report', '-r', is_flag=True, help='Output the report.')
@click.option('--file-size', '-f', 'max_file_size', type=click.IntRange(min=0),
              default=DEFAULT_MAX_FILE_SIZE, show_default=True,
              help='Maximum file size to process (in bytes).')
@click.option('--total-size', '-t', 'max_total_size', type=click.IntRange(min=0),
              default=DEFAULT_MAX_TOTAL_SIZE, show_default=True,
              help='Maximum total size of files to process (in bytes).')
@click.option('--num-files', '-n', 'max_files', type=click.IntRange(min=0),
              default=DEFAULT_MAX_FILES, show_default=True,
              help='Maximum number of files to process.')
@click.option('--debug', is_flag=True, help='Enable debug logging on stderr.')
@click.version_option(package_name='codefeed')
def main(report: bool, max_file_size: int, max_total_size: int,
         max_files: int, debug: bool) -> None:
    """
    Feed your codebase into any LLM.

    Walks the current directory, honoring .gitignore and .ignore files,
    and prints a tree followed by the content of every text file that
    fits within the limits. Skipped files are listed on stderr.

    Examples:

        codefeed | pbcopy

        codefeed -r -n 200 -t 500000 > context.txt
    """
    start_time = time.perf_counter()
    setup_logging(debug)

    out = ConsoleManager(file=sys.stdout)
    err = ConsoleManager(file=sys.stderr)

    try:
        root = resolve_root()
        config = Config(
            max_file_size=max_file_size,
            max_total_size=max_total_size,
            max_files=max_files,
            report=report,
            debug=debug
        )

        result = run(root, config)
        ContextAggregator.write(result, out, err)

        if result.has_errors():
            logger.debug(result.get_error_summary())

        if config.report:
            reporter = Reporter(TokenCounter(config.token_encoder))
            summary = reporter.summarize(
                root,
                result.admitted,
                elapsed=time.perf_counter() - start_time,
                files_admitted=result.totals.files_admitted
            )
            out.print_report(Reporter.rows(summary))

    except KeyboardInterrupt:
        err.print_error("Process terminated by user")
        sys.exit(1)

    except CodefeedError as e:
        err.print_error(str(e))
        if debug:
            err.print_exception()
        sys.exit(1)


if __name__ == '__main__':
    main()
