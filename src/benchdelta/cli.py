"""Command line entry point."""

from __future__ import annotations

import argparse
import logging
from collections.abc import Sequence

from rich.console import Console
from rich.logging import RichHandler

from benchdelta.config import ReportConfig
from benchdelta.reporters import print_results
from benchdelta.results import ResultSet, ResultsError, load_result_set

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="benchdelta",
        description="Compare local benchmark results against a remote baseline",
    )
    parser.add_argument(
        "--remote",
        metavar="PATH",
        help="Baseline results JSON (e.g. from the merge base)",
    )
    parser.add_argument(
        "--local",
        metavar="PATH",
        help="Candidate results JSON (e.g. from the current branch)",
    )
    parser.add_argument("--title", default=None, help="Table title")
    parser.add_argument("--unit", default="ms", help="Unit shown after means (Default: ms)")
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    return parser


def setup_logging(verbose: bool = False) -> None:
    """Route log records through Rich on stderr."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


def main(argv: Sequence[str] | None = None, console: Console | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.remote is None and args.local is None:
        parser.error("at least one of --remote or --local is required")

    setup_logging(args.verbose)

    try:
        control: ResultSet | None = load_result_set(args.remote) if args.remote else None
        test: ResultSet | None = load_result_set(args.local) if args.local else None
    except ResultsError as e:
        logger.error(str(e))
        return 1

    config = ReportConfig(title=args.title, unit=args.unit)
    print_results(control, test, config=config, console=console)
    return 0
