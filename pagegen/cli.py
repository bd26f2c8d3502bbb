"""pagegen command-line entry point.

Usage::

    pagegen init
    pagegen make:page Booking/Flight
    pagegen make:controller Booking/Flight --project-dir ./my_app
    python -m pagegen make:page Booking/Flight --dry-run
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import NoReturn

from pydantic import ValidationError
from rich.markup import escape

from pagegen import __version__
from pagegen.config import ScaffoldConfig
from pagegen.dispatcher import COMMANDS, CommandDispatcher, CommandOutcome
from pagegen.fs import FileSystem, LocalFileSystem, MemoryFileSystem
from pagegen.utils import (
    configure_logging,
    console,
    print_error,
    print_success,
    print_summary_table,
    print_warning,
)


class _ArgumentParser(argparse.ArgumentParser):
    """Usage errors exit 1 like every other failure."""

    def error(self, message: str) -> NoReturn:
        self.print_usage(sys.stderr)
        self.exit(1, f"{self.prog}: error: {message}\n")


def build_parser() -> argparse.ArgumentParser:
    parser = _ArgumentParser(
        prog="pagegen",
        description="Scaffold GetX controllers, bindings and screens for a Flutter app",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Commands:\n"
            + "".join(f"  {name}\n" for name in COMMANDS)
            + "\nExamples:\n"
            "  pagegen init\n"
            "  pagegen make:page Booking/Flight\n"
            "  pagegen make:screen Settings --dry-run\n"
        ),
    )
    # Free-form so that an unknown command reaches the dispatcher and exits 1.
    parser.add_argument("command", help="Command to run (see below)")
    parser.add_argument(
        "path",
        nargs="?",
        default=None,
        help="Resource path such as Booking/Flight (required by make:* commands)",
    )
    parser.add_argument(
        "--project-dir", "-C",
        default=None,
        help="Flutter project root (default: current directory)",
    )
    parser.add_argument(
        "--config",
        default=None,
        help="JSON file overriding the default path conventions",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Show what would be generated without writing anything",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable debug logging",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def load_config(args: argparse.Namespace) -> ScaffoldConfig:
    """Resolve configuration: ``--config`` file, else environment, then CLI overrides."""
    config = ScaffoldConfig.load(Path(args.config)) if args.config else ScaffoldConfig.from_env()
    if args.project_dir:
        config = config.model_copy(update={"project_dir": Path(args.project_dir)})
    return config


def report(outcome: CommandOutcome) -> None:
    """Print a human-readable summary of *outcome*."""
    if outcome.success:
        rows: dict[str, str] = {}
        for path in outcome.created:
            rows[path] = "would create" if outcome.dry_run else "created"
        for path in outcome.updated:
            rows[path] = "would update" if outcome.dry_run else "updated"
        for path in outcome.skipped:
            rows[path] = "skipped (exists)"
        if outcome.route_name:
            rows["route"] = outcome.route_name
        if rows:
            print_summary_table(rows, title=f"pagegen {outcome.command}")
        if outcome.dry_run:
            print_warning("Dry run: no files were written.")
        else:
            print_success("Done.")
        return

    print_error(f"Error [{outcome.error_code}]: {outcome.message}")
    for path in outcome.conflicts:
        console.print(f"  [red]exists[/red]      {escape(path)}")
    if outcome.route_conflict and outcome.route_name:
        console.print(f"  [red]registered[/red]  {escape(outcome.route_name)}")
    if outcome.created:
        print_warning(
            "Partially generated before the failure: " + ", ".join(outcome.created)
        )


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for ``pagegen`` and ``python -m pagegen``."""
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        config = load_config(args)
    except (OSError, UnicodeDecodeError, ValidationError) as exc:
        print_error(f"Error: invalid configuration: {exc}")
        sys.exit(1)

    configure_logging("DEBUG" if args.verbose else config.log_level)

    fs: FileSystem = LocalFileSystem(config.project_dir)
    if args.dry_run:
        fs = MemoryFileSystem(base=fs)

    dispatcher = CommandDispatcher(config, fs, dry_run=args.dry_run)
    outcome = dispatcher.run(args.command, args.path)
    report(outcome)

    if not outcome.success:
        sys.exit(outcome.exit_code)


if __name__ == "__main__":
    main()
