"""themereport - check a Ghost theme and print a severity-grouped report.

Usage: themereport [options] <theme_path>

The checking engine is any package registered under the
"themereport.checkers" entry-point group. Pick one with --checker or the
THEMEREPORT_CHECKER environment variable (default: gscan).

Exit codes:
  0  no errors (warnings and recommendations allowed)
  1  at least one error
  2  the checker could not run
"""

from __future__ import annotations

import argparse
import asyncio
import os
import sys
from collections.abc import Sequence

from rich.console import Console

from themereport import __version__
from themereport.application.options import resolve_options
from themereport.application.reporters.console import ConsoleConfig, ConsoleReporter
from themereport.application.services.orchestrator import run_check
from themereport.domain.exceptions import ThemeReportError
from themereport.domain.model.enums import ExitCode
from themereport.infrastructure.adapters.entry_points import load_checker
from themereport.infrastructure.logging import configure_logging

CHECKER_ENV_VAR = "THEMEREPORT_CHECKER"
DEFAULT_CHECKER = "gscan"


def _existing_path(value: str) -> str:
    """argparse type: path must exist."""
    if not os.path.exists(value):
        raise argparse.ArgumentTypeError(f"path does not exist: {value}")
    return value


def build_parser() -> argparse.ArgumentParser:
    """Build the themereport argument parser."""
    parser = argparse.ArgumentParser(
        prog="themereport",
        description="Check a Ghost theme for compatibility and report findings by severity.",
        epilog=(
            "Examples:\n"
            "  themereport ./my-theme\n"
            "  themereport -z my-theme.zip --verbose\n"
            "  themereport -3 --fatal ./my-theme\n"
        ),
        formatter_class=argparse.RawTextHelpFormatter,
    )
    parser.add_argument("theme_path", type=_existing_path, help="Theme folder or .zip file path")

    sources = parser.add_argument_group("Sources")
    sources.add_argument("-z", "--zip", action="store_true", help="Theme path points to a zip file")

    versions = parser.add_argument_group("Versions")
    versions.add_argument("-1", "--v1", action="store_true", help="Check theme for Ghost 1.0 compatibility")
    versions.add_argument("-2", "--v2", action="store_true", help="Check theme for Ghost 2.0 compatibility")
    versions.add_argument("-3", "--v3", action="store_true", help="Check theme for Ghost 3.0 compatibility")
    # Reserved: accepted but not advertised.
    versions.add_argument("--v4", action="store_true", help=argparse.SUPPRESS)
    versions.add_argument(
        "-c",
        "--canary",
        action="store_true",
        help="Check theme for upcoming Ghost version compatibility",
    )

    options = parser.add_argument_group("Options")
    options.add_argument(
        "-f",
        "--fatal",
        action="store_true",
        help="Only show fatal errors that prevent upgrading Ghost",
    )
    options.add_argument("--verbose", action="store_true", help="Output check details")
    options.add_argument(
        "--checker",
        default=os.environ.get(CHECKER_ENV_VAR, DEFAULT_CHECKER),
        help=f"Registered checker to run (default: ${CHECKER_ENV_VAR} or {DEFAULT_CHECKER})",
    )
    options.add_argument("--no-color", action="store_true", help="Disable coloured output")
    options.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Diagnostic log level (default: WARNING)",
    )
    options.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def run(argv: Sequence[str] | None = None) -> int:
    """Parse argv, run the check, return the exit code."""
    parser = build_parser()
    args = parser.parse_args(argv)

    configure_logging(args.log_level, Console(stderr=True, no_color=args.no_color))
    config = resolve_options(args)

    try:
        checker = load_checker(args.checker)
    except (ThemeReportError, ImportError) as err:
        print(f"Error: {err}", file=sys.stderr)
        return ExitCode.INVOCATION_FAILED

    reporter = ConsoleReporter(ConsoleConfig(no_color=args.no_color, force_terminal=sys.stdout.isatty()))
    return asyncio.run(run_check(checker, args.theme_path, args.zip, config, reporter=reporter))


def main() -> None:
    """Console script entry point: run and exit with the resulting code."""
    sys.exit(int(run()))


if __name__ == "__main__":
    main()
