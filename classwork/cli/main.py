# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""
CLI entrypoint for classwork.

This is the single root command. Every program is a subcommand of
`classwork`. The `grade-statistics` and `matrix-multiplier` scripts are thin
shortcuts for `classwork grades` and `classwork matrix`.

The global options (--log-level, --log-file, --strict-exit) are inherited by
every subcommand through argparse's parent parser mechanism, and may be given
before or after the subcommand name.

Usage:
    classwork <subcommand> [options]
    classwork grades
    classwork matrix --strict-exit
    classwork --log-level INFO grades
"""

import argparse
import sys
from typing import Optional, Sequence

from classwork.cli.commands import handle_grades, handle_matrix
from classwork.cli.exit_codes import USER_ERROR


def _build_global_parser() -> argparse.ArgumentParser:
    """
    Build the parent parser with global options.

    These options get inherited by every subcommand. Defaults are suppressed
    so an option given before the subcommand isn't overwritten by the
    subcommand's own default; load_config fills in whatever is missing.
    """
    parent = argparse.ArgumentParser(add_help=False)
    parent.add_argument(
        "--log-level",
        type=str,
        default=argparse.SUPPRESS,
        dest="log_level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Set the diagnostic logging verbosity (default: WARNING).",
    )
    parent.add_argument(
        "--log-file",
        type=str,
        default=argparse.SUPPRESS,
        dest="log_file",
        help="Also write JSON diagnostic logs to this file.",
    )
    parent.add_argument(
        "--strict-exit",
        action="store_true",
        default=argparse.SUPPRESS,
        dest="strict_exit",
        help="Exit with a non-zero code when the input is invalid.",
    )
    return parent


def _register_subcommands(
    subparsers: argparse._SubParsersAction,  # type: ignore[type-arg]
    parent: argparse.ArgumentParser,
) -> None:
    """
    Register all subcommands with their handler functions.

    Each subcommand gets the global options from the parent parser and sets
    its handler function via set_defaults(func=...).
    """
    commands = [
        ("grades", "Score statistics and a grade distribution graph.", handle_grades),
        ("matrix", "Multiply two matrices read from standard input.", handle_matrix),
    ]

    for name, help_text, handler in commands:
        parser = subparsers.add_parser(name, parents=[parent], help=help_text)
        parser.set_defaults(func=handler)


def build_parser() -> argparse.ArgumentParser:
    parent = _build_global_parser()

    root_parser = argparse.ArgumentParser(
        prog="classwork",
        description="classwork: grade statistics and matrix multiplication exercises.",
        parents=[parent],
    )
    subparsers = root_parser.add_subparsers(dest="command")
    _register_subcommands(subparsers, parent)
    return root_parser


def main(argv: Optional[Sequence[str]] = None) -> None:
    """
    Main CLI entrypoint. This is what pyproject.toml's [project.scripts] points to.

      1. Build the argument parser with global options and all subcommands
      2. Parse the command line
      3. Call the handler function for the chosen subcommand
      4. Exit with the handler's return code

    If no subcommand is given, we show help and exit with USER_ERROR.
    """
    root_parser = build_parser()
    args = root_parser.parse_args(argv)

    if getattr(args, "func", None) is None:
        root_parser.print_help()
        sys.exit(USER_ERROR)

    exit_code = args.func(args)
    sys.exit(exit_code)


def grade_statistics() -> None:
    """Entrypoint for the `grade-statistics` script."""
    main(["grades", *sys.argv[1:]])


def matrix_multiplier() -> None:
    """Entrypoint for the `matrix-multiplier` script."""
    main(["matrix", *sys.argv[1:]])


if __name__ == "__main__":
    main()
