"""CLI application entry point and command routing for scriptkit.

This module is the **sole error boundary** for the command line.  It
catches :class:`~scriptkit.exceptions.ScriptkitError`, ``KeyboardInterrupt``
and any unexpected ``Exception``, rendering user-friendly messages via
Rich and returning well-defined exit codes.

Commands
--------
* ``scriptkit flag VALUE...``          — ``Y``/``N`` flags to ``true``/``false``
* ``scriptkit bool VALUE...``          — ``true``/``false`` words to ``Y``/``N``
* ``scriptkit check KIND FLAG...``     — all-y / some-y / all-n / some-n
* ``scriptkit json [TEXT|-]``          — validate and pretty-print JSON

All work is delegated to :mod:`scriptkit.core`; this module only parses
arguments, renders results, and maps outcomes to exit codes.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from collections.abc import Callable, Iterable, Sequence
from typing import Any

from scriptkit.cli import exit_codes
from scriptkit.cli.console import console, escape_markup, output
from scriptkit.cli.logging import logging_session
from scriptkit.core.flags import all_n, all_y, bool_to_yn, some_n, some_y, yn_to_bool
from scriptkit.core.lang import is_empty_data, try_parse_json
from scriptkit.exceptions import EmptyDataError, JsonInputError, ScriptkitError
from scriptkit.version import __version__

logger = logging.getLogger(__name__)

CHECKS: dict[str, Callable[[Iterable[Any]], bool]] = {
    "all-y": all_y,
    "some-y": some_y,
    "all-n": all_n,
    "some-n": some_n,
}

_BOOL_WORDS: dict[str, bool] = {"true": True, "false": False}

_NO_RESULT = object()


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

def _build_parser() -> argparse.ArgumentParser:
    """Construct the top-level argument parser and its sub-commands."""
    parser = argparse.ArgumentParser(
        prog="scriptkit",
        description="Small helpers for shell scripts: Y/N flags and JSON checks.",
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log debug output to stderr.",
    )
    parser.add_argument(
        "--no-color",
        action="store_true",
        help="Disable coloured output.",
    )

    commands = parser.add_subparsers(dest="command", metavar="COMMAND")

    flag = commands.add_parser("flag", help="Convert Y/N flags to true/false.")
    flag.add_argument("values", nargs="+", metavar="VALUE")

    boolean = commands.add_parser("bool", help="Convert true/false to Y/N flags.")
    boolean.add_argument("values", nargs="+", metavar="VALUE")

    check = commands.add_parser(
        "check",
        help="Check a list of Y/N flags; exits 3 when the check fails.",
    )
    check.add_argument("kind", choices=sorted(CHECKS))
    check.add_argument("values", nargs="*", metavar="FLAG")

    parse = commands.add_parser("json", help="Validate and pretty-print JSON.")
    parse.add_argument(
        "text",
        nargs="?",
        default="-",
        help="JSON text, or '-' (default) to read stdin.",
    )
    parse.add_argument(
        "--require-data",
        action="store_true",
        help="Fail when the document is null, blank, or an empty array/object.",
    )
    return parser


# ---------------------------------------------------------------------------
# Command handlers
# ---------------------------------------------------------------------------

def _render_bool(value: bool) -> str:
    return "true" if value else "false"


def _handle_flag(values: Sequence[str]) -> int:
    """Print ``true``/``false`` for every flag, in order."""
    for value in values:
        output.print(_render_bool(yn_to_bool(value)), markup=False, highlight=False)
    return exit_codes.SUCCESS


def _handle_bool(values: Sequence[str]) -> int:
    """Print ``Y``/``N`` for every ``true``/``false`` word, in order.

    Unknown words are handed to :func:`bool_to_yn` unchanged so that it
    reports them.
    """
    for value in values:
        word: Any = _BOOL_WORDS.get(value.lower(), value)
        output.print(bool_to_yn(word), markup=False, highlight=False)
    return exit_codes.SUCCESS


def _handle_check(kind: str, values: Sequence[str]) -> int:
    """Run one batch check and map the answer to an exit code."""
    result = CHECKS[kind](values)
    logger.debug("check %s over %d flag(s) -> %s", kind, len(values), result)
    output.print(_render_bool(result), markup=False, highlight=False)
    return exit_codes.SUCCESS if result else exit_codes.CHECK_FAILED


def _read_text(text: str) -> str:
    if text == "-":
        logger.debug("reading JSON from stdin")
        return sys.stdin.read()
    return text


def _handle_json(text: str, *, require_data: bool) -> int:
    """Parse JSON input and pretty-print it.

    Raises
    ------
    JsonInputError
        If the input is not valid JSON.
    EmptyDataError
        If *require_data* is set and the document holds no data.
    """
    errors: list[Exception] = []
    result = try_parse_json(_read_text(text), errors.append, default=_NO_RESULT)

    if result is _NO_RESULT:
        cause = errors[0]
        hint: str | None = None
        if isinstance(cause, json.JSONDecodeError):
            hint = f"Parser stopped at line {cause.lineno}, column {cause.colno}."
        raise JsonInputError(f"Invalid JSON input: {cause}", hint=hint) from cause

    if require_data and is_empty_data(result):
        raise EmptyDataError(
            "JSON input contains no data.",
            hint="Drop --require-data to accept null, blank or empty documents.",
        )

    output.print_json(json.dumps(result, indent=2, ensure_ascii=False))
    return exit_codes.SUCCESS


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(argv: list[str] | None = None) -> int:
    """Run the scriptkit CLI.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.  Accepting *argv* enables deterministic testing without
        monkeypatching.

    Returns
    -------
    int
        OS process exit code.
    """
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return exit_codes.SUCCESS

    color = not args.no_color
    console.color = color
    output.color = color

    with logging_session(verbose=args.verbose, color=color):
        logger.debug("dispatching %r", args.command)

        if args.command == "flag":
            return _handle_flag(args.values)
        if args.command == "bool":
            return _handle_bool(args.values)
        if args.command == "check":
            return _handle_check(args.kind, args.values)
        return _handle_json(args.text, require_data=args.require_data)


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point.

    This function wraps :func:`main` and guarantees the process never
    exits with a raw stack trace during normal usage.
    """
    try:
        code = main()
        sys.exit(code)
    except ScriptkitError as exc:
        console.print(f"[bold red]Error:[/bold red] {escape_markup(exc)}")
        if exc.hint:
            console.print(f"[yellow]Hint:[/yellow] {escape_markup(exc.hint)}")
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        console.print("\n[yellow]Aborted by user.[/yellow]")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        console.print(
            "[bold red]Unexpected error.[/bold red] "
            "Please report this issue.\n"
            f"  {type(exc).__name__}: {escape_markup(exc)}"
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)
