"""CLI application entry point for latest-change.

This module is the **sole error boundary** for the entire application.
It catches :class:`~latest_change.exceptions.LatestChangeError`,
``KeyboardInterrupt``, and any unexpected ``Exception``, rendering
messages on stderr and returning well-defined exit codes.

Architecture notes
------------------
* No business logic lives here — all work is delegated to the core and
  infrastructure layers.
* stdout carries exactly one line: the commit hash (optionally marked
  dirty) or the commit date.  Everything else goes to stderr.
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import NoReturn

from latest_change.cli import exit_codes
from latest_change.cli.console import console
from latest_change.cli.logs import LOG_LEVELS, configure_logging, resolve_log_level
from latest_change.exceptions import LatestChangeError
from latest_change.utils import DEPENDENCIES_FILENAME, LOG_LEVEL_ENV_VAR
from latest_change.version import __version__

log = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

class _ArgumentParser(argparse.ArgumentParser):
    """Argument parser that reports usage errors with :data:`GENERAL_ERROR`."""

    def error(self, message: str) -> NoReturn:
        self.print_usage(sys.stderr)
        self.exit(exit_codes.GENERAL_ERROR, f"{self.prog}: error: {message}\n")


def _build_parser() -> argparse.ArgumentParser:
    """Construct the argument parser.

    * ``latest-change <filename>``         — latest commit hash (+ `` DIRTY``)
    * ``latest-change <filename> --date``  — date of that commit
    * ``latest-change --version``
    """
    parser = _ArgumentParser(
        prog="latest-change",
        description=(
            "Print the latest git commit affecting a file and the files it "
            f"depends on, as declared in {DEPENDENCIES_FILENAME}."
        ),
    )
    parser.add_argument(
        "-v",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "filename",
        nargs="?",
        default=None,
        help="File whose latest change is reported.",
    )
    parser.add_argument(
        "--date",
        action="store_true",
        help="Print the committer date (YYYY-MM-DD) instead of the commit hash.",
    )
    parser.add_argument(
        "--deps-file",
        default=DEPENDENCIES_FILENAME,
        metavar="NAME",
        help=(
            "Dependency file, relative to the file's directory "
            f"(default: {DEPENDENCIES_FILENAME})."
        ),
    )
    parser.add_argument(
        "--log-level",
        default=None,
        type=str.upper,
        choices=LOG_LEVELS,
        help=f"Diagnostic verbosity on stderr (default: ${LOG_LEVEL_ENV_VAR} or WARNING).",
    )
    return parser


# ---------------------------------------------------------------------------
# Command dispatch
# ---------------------------------------------------------------------------

def _handle_query(filename: str, *, date: bool, deps_file: str) -> int:
    """Resolve the query set for *filename* and print its latest change.

    Flow:
    1. Locate git and resolve the target path.
    2. Load the dependency file next to the target, if any.
    3. Build the query plan and ask git for the latest commit; the
       service checks the target lives inside a git work tree first.
    4. Print the result line to stdout.
    """
    from latest_change.core.change_service import LatestChangeService
    from latest_change.core.models import ReportMode
    from latest_change.core.query_plan import build_query_plan
    from latest_change.infra.deps_file import load_dependency_file
    from latest_change.infra.filesystem import missing_paths, resolve_target
    from latest_change.infra.git_detector import require_git
    from latest_change.infra.git_provider import GitCliProvider

    git = require_git()
    target = resolve_target(filename)
    base_directory = target.parent
    log.info("Monitor changes for file: %s", target)

    service = LatestChangeService(GitCliProvider(cwd=base_directory, git=git))

    dependency_file = load_dependency_file(base_directory / deps_file)
    plan = build_query_plan(target, dependency_file)
    log.debug("Query paths (%s): %s", plan.scope.value, [str(p) for p in plan.paths])

    for path in missing_paths(plan.paths):
        log.warning("%s does not exist", path)

    mode = ReportMode.DATE if date else ReportMode.COMMIT
    result = service.latest_change(plan, mode)

    print(result.render())
    return exit_codes.SUCCESS


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(argv: list[str] | None = None) -> int:
    """Run the latest-change CLI.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.

    Returns
    -------
    int
        OS process exit code.
    """
    parser = _build_parser()
    args = parser.parse_args(argv)

    configure_logging(resolve_log_level(args.log_level))

    if args.filename is None:
        parser.print_usage(sys.stderr)
        console.print_error("the following arguments are required: filename")
        return exit_codes.GENERAL_ERROR

    return _handle_query(args.filename, date=args.date, deps_file=args.deps_file)


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point.

    Wraps :func:`main` and guarantees the process never exits with a raw
    stack trace during normal usage.
    """
    try:
        code = main()
        sys.exit(code)
    except LatestChangeError as exc:
        console.print_error(str(exc), exc.hint)
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        console.print("\n[yellow]Aborted by user.[/yellow]")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        console.print_error(
            "Unexpected error. Please report this issue.\n"
            f"  {type(exc).__name__}: {exc}",
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)
