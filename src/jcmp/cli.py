"""Command-line entry point: ``jcmp FILE1 FILE2 [options]``.

Glue only: parse options, load both documents, stream the report.  Load
failures stop the run before any comparison starts.
"""

from __future__ import annotations

import logging
import sys

import click

from jcmp.config import CompareConfig
from jcmp.engine import PathComparator
from jcmp.errors import DocumentLoadError, InvalidPathError
from jcmp.loader import load_document
from jcmp.reporter import Reporter

__all__ = ["main"]

logger = logging.getLogger(__name__)


def _split_blacklist(raw: str | None) -> tuple[str, ...]:
    if not raw:
        return ()
    return tuple(entry for entry in raw.split(",") if entry)


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.argument("file1", type=click.Path(dir_okay=False))
@click.argument("file2", type=click.Path(dir_okay=False))
@click.option("-p", "--path", "start_path", default="", help="Path to compare.")
@click.option(
    "-bl",
    "--blacklist",
    default="",
    help="Comma-separated list of path substrings to skip.",
)
@click.option(
    "-s", "--strict", is_flag=True, help="Strict mode (don't print equal keys)."
)
@click.option("-nc", "--no-color", is_flag=True, help="Disable color output.")
@click.option("-v", "--verbose", is_flag=True, help="Log debug details to stderr.")
def main(
    file1: str,
    file2: str,
    start_path: str,
    blacklist: str,
    strict: bool,
    no_color: bool,
    verbose: bool,
) -> None:
    """Compare two JSON files path by path.

    FILE1 is treated as the old document and FILE2 as the new one: paths
    only in FILE2 are reported as added, paths only in FILE1 as deleted.
    """
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(levelname)s %(name)s: %(message)s",
            stream=sys.stderr,
        )

    reporter = Reporter(color=False if no_color else None)
    reporter.line("[CMD] " + " ".join(sys.argv))

    try:
        left = load_document(file1)
        right = load_document(file2)
    except DocumentLoadError as exc:
        raise click.ClickException(str(exc)) from exc

    config = CompareConfig(strict=strict, blacklist=_split_blacklist(blacklist))
    try:
        events = PathComparator(config).compare(left, right, start_path)
    except InvalidPathError as exc:
        raise click.BadParameter(str(exc), param_hint="'-p'") from exc

    count = reporter.report(events)
    logger.debug("%d events reported", count)


if __name__ == "__main__":
    main()
