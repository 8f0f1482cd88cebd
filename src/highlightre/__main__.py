"""Main entry point for the HighlightRe command-line interface."""

import argparse
import logging
import sys
from pathlib import Path

import regex
import yaml

from . import __version__, catalog, paths
from .config import load_suite
from .highlighter import find_spans, highlight, substitute
from .logging_utils import setup_logging
from .reporters import MarkdownReporter, SummaryReporter
from .runner import run_suite, select
from .templates import STARTER_SUITE_YAML
from .types import Pattern, Sample

logger = logging.getLogger(__name__)

Suite = tuple[str, list[Sample]]


def _add_suite_arguments(parser: argparse.ArgumentParser) -> None:
    """Add the arguments shared by commands that load suites."""
    parser.add_argument(
        "suites",
        nargs="*",
        help="Suite files, or directories of *.yaml/*.yml suite files, to load.",
    )
    parser.add_argument(
        "--no-catalog",
        action="store_true",
        help="Do not include the built-in example catalog.",
    )
    parser.add_argument(
        "-k",
        "--keyword",
        default=None,
        help="Only keep cases whose section or name contains this text (case-insensitive).",
    )


def _parse_args() -> argparse.Namespace:
    """
    Parse command-line arguments for the HighlightRe CLI.

    Returns:
        argparse.Namespace: An object containing the parsed command-line arguments.

    """
    parser = argparse.ArgumentParser(description="HighlightRe: learn regular expressions by highlighting matches")
    parser.add_argument(
        "-v",
        "--version",
        action="version",
        version=f"HighlightRe {__version__}",
        help="Show the version number and exit.",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug level logging.",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # 'run' command
    run_parser = subparsers.add_parser("run", help="Run the example catalog and any suite files.")
    _add_suite_arguments(run_parser)
    run_parser.add_argument(
        "--report",
        metavar="DIR",
        nargs="?",
        const="",
        default=None,
        help="Also write a Markdown report per suite (default directory: .highlightre/reports).",
    )
    run_parser.add_argument("--debug", action="store_true", help="Enable debug level logging.")

    # 'list' command
    list_parser = subparsers.add_parser("list", help="List the sections and cases that would run.")
    _add_suite_arguments(list_parser)
    list_parser.add_argument("--debug", action="store_true", help="Enable debug level logging.")

    # 'highlight' command
    highlight_parser = subparsers.add_parser("highlight", help="Highlight the matches of a pattern in a text.")
    highlight_parser.add_argument("text", help="The text to scan.")
    highlight_parser.add_argument("pattern", help="The regular expression.")
    highlight_parser.add_argument(
        "--flags",
        default="g",
        help="Pattern flags: any combination of g (global), i (ignore case), m (multiline). Default: g.",
    )
    mode_group = highlight_parser.add_mutually_exclusive_group()
    mode_group.add_argument("--group", default=None, help="Highlight only this capture group (number or name).")
    mode_group.add_argument("--template", default=None, help="Substitute matches with this template instead.")
    highlight_parser.add_argument("--debug", action="store_true", help="Enable debug level logging.")

    # 'init' command
    init_parser = subparsers.add_parser("init", help="Write a starter suite file.")
    init_parser.add_argument(
        "path",
        nargs="?",
        default=".",
        help="The directory to write the starter suite into (default: current directory).",
    )
    init_parser.add_argument("--debug", action="store_true", help="Enable debug level logging.")

    # If no arguments are provided, print help
    if len(sys.argv) == 1:
        parser.print_help(sys.stderr)
        sys.exit(1)

    return parser.parse_args()


def _load_suites(suite_paths: list[str], *, include_catalog: bool) -> list[Suite] | None:
    """
    Gather the catalog and the requested suite files.

    Returns:
        A list of (suite name, samples) pairs, or None if a suite could not be loaded.

    """
    suites: list[Suite] = []
    if include_catalog:
        suites.append(("catalog", catalog.all_samples()))

    try:
        for suite_file in paths.discover_suite_files(suite_paths):
            logger.info("Loading suite from: %s", suite_file)
            suite = load_suite(suite_file)
            suites.append((suite.name, suite.samples()))
    except FileNotFoundError:
        logger.exception("Could not find a suite file.")
        return None
    except (yaml.YAMLError, ValueError):
        logger.exception("Could not load a suite file.")
        return None

    return suites


def _run_suites(suites: list[Suite], *, keyword: str | None, report_dir: Path | None) -> bool:
    """
    Run every suite and report it.

    Returns:
        True if every case of every suite passed.

    """
    all_ok = True
    markdown_reporter = MarkdownReporter(report_dir) if report_dir is not None else None
    for name, samples in suites:
        selected = select(samples, keyword)
        logger.debug("Running suite '%s' with %d of %d case(s)", name, len(selected), len(samples))
        result = run_suite(selected, name=name)
        SummaryReporter().generate(result)
        if markdown_reporter is not None:
            markdown_reporter.generate(result)
        all_ok = all_ok and result.ok
    return all_ok


def _resolve_report_dir(report: str | None) -> Path | None:
    """Map the --report option to a directory: absent, bare flag (default dir), or explicit path."""
    if report is None:
        return None
    return Path(report) if report else paths.get_report_dir(Path.cwd())


def _list_suites(suites: list[Suite], *, keyword: str | None) -> None:
    """Log the sections and case names of every suite."""
    for name, samples in suites:
        logger.info("Suite '%s':", name)
        current_section = None
        for sample in select(samples, keyword):
            if sample.section != current_section:
                current_section = sample.section
                logger.info("  %s", current_section or "(no section)")
            logger.info("    - %s  %s", sample.name, sample.pattern)


def _highlight_once(args: argparse.Namespace) -> str:
    """Evaluate the 'highlight' command's text and pattern."""
    pattern = Pattern.from_flags(args.pattern, args.flags)
    logger.debug("Match spans: %s", find_spans(args.text, pattern))
    if args.template is not None:
        return substitute(args.text, pattern, args.template)
    group = int(args.group) if args.group is not None and args.group.isdigit() else args.group
    return highlight(args.text, pattern, group=group)


def _init_suite(target_path: Path) -> None:
    """Write the starter suite file into the target directory."""
    suite_file = target_path / paths.STARTER_SUITE_NAME
    if suite_file.exists():
        logger.warning("Suite file already exists at: %s", suite_file)
        return

    try:
        suite_file.write_text(STARTER_SUITE_YAML, encoding="utf-8")
    except OSError:
        logger.exception("Failed to write the starter suite")
        sys.exit(1)
    logger.info("Created starter suite at: %s", suite_file)


def main() -> None:
    """
    Run the main entry point for the HighlightRe command-line interface.

    Exits with status 1 when any case fails, a suite cannot be loaded, or an
    unexpected error occurs.
    """
    try:
        args = _parse_args()
        setup_logging(version=__version__, debug=args.debug, log_dir=paths.get_log_dir(Path.cwd()))

        if args.command == "init":
            init_path = Path(args.path).resolve()
            if not init_path.is_dir():
                logger.error("Path is not a directory: %s", init_path)
                sys.exit(1)
            _init_suite(init_path)
            return

        if args.command == "highlight":
            try:
                output = _highlight_once(args)
            except (regex.error, ValueError, IndexError):
                logger.exception("Could not highlight with pattern %r", args.pattern)
                sys.exit(1)
            print(output)  # noqa: T201
            return

        # Default to 'run' command logic
        suites = _load_suites(
            getattr(args, "suites", []),
            include_catalog=not getattr(args, "no_catalog", False),
        )
        if suites is None:
            logger.critical("Failed to load suites. Aborting.")
            sys.exit(1)

        keyword = getattr(args, "keyword", None)
        if args.command == "list":
            _list_suites(suites, keyword=keyword)
            return

        report_dir = _resolve_report_dir(getattr(args, "report", None))
        if not _run_suites(suites, keyword=keyword, report_dir=report_dir):
            logger.error("Some cases did not produce their expected output.")
            sys.exit(1)

    except Exception:
        logger.exception("An unexpected error occurred")
        logger.critical("An unrecoverable error occurred. Please check the logs for details.")
        sys.exit(1)

    logger.info("All cases passed.")


if __name__ == "__main__":
    main()
