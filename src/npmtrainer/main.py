"""CLI entrypoint for checking and exploring npm commands."""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Callable

from . import __version__
from .content_loader import load_catalog_from_file
from .service import CommandChecker

InputFn = Callable[[str], str]
PrintFn = Callable[[str], None]
SHELL_EXIT_COMMANDS = {":quit", ":exit", ":q"}
EXIT_OK = 0
EXIT_MISMATCH = 1
EXIT_USAGE = 2

logger = logging.getLogger("npmtrainer")


def _service(catalog_path: str | None = None) -> CommandChecker:
    """Create the checker with the bundled or a user-supplied catalog."""
    if catalog_path is None:
        return CommandChecker()
    return CommandChecker(load_catalog_from_file(catalog_path))


def _configure_logging(verbosity: int) -> None:
    """Attach a stderr handler to the package logger: 0 warning, 1 info, 2+ debug."""
    level = logging.WARNING
    if verbosity == 1:
        level = logging.INFO
    elif verbosity >= 2:
        level = logging.DEBUG
    logger.setLevel(level)
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter("%(levelname)s %(name)s: %(message)s"))
        logger.addHandler(handler)


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(prog="npmtrainer", description="Check typed npm commands")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("--catalog", default=None, help="path to a JSON command catalog")
    parser.add_argument("-v", "--verbose", action="count", default=0, help="increase log verbosity")
    subparsers = parser.add_subparsers(dest="action")

    check = subparsers.add_parser("check", help="compare a typed command with a reference command")
    check.add_argument("expected")
    check.add_argument("actual")

    explain = subparsers.add_parser("explain", help="show how a command line is parsed")
    explain.add_argument("line")

    subparsers.add_parser("commands", help="list known commands, aliases and flags")
    subparsers.add_parser("shell", help="type commands and see simulated output")
    return parser


def run(argv: list[str] | None = None, input_fn: InputFn = input, print_fn: PrintFn = print) -> int:
    """Run the CLI application."""
    args = build_parser().parse_args(argv)
    _configure_logging(args.verbose)
    try:
        service = _service(args.catalog)
    except (OSError, ValueError) as exc:
        print_fn(f"Could not load catalog: {exc}")
        return EXIT_USAGE

    action = args.action or "shell"
    if action == "check":
        return _check(service, args.expected, args.actual, print_fn)
    if action == "explain":
        return _explain(service, args.line, print_fn)
    if action == "commands":
        return _commands(service, print_fn)
    return shell(service, input_fn, print_fn)


def _check(service: CommandChecker, expected: str, actual: str, print_fn: PrintFn) -> int:
    """Print the verdict for one expected/actual pair."""
    expected_parsed = service.parse(expected)
    if not expected_parsed.is_valid:
        print_fn(f"Reference command is invalid: {expected_parsed.error_message}")
        return EXIT_MISMATCH
    actual_parsed = service.parse(actual)
    if not actual_parsed.is_valid:
        print_fn(f"Invalid command: {actual_parsed.error_message}")
        return EXIT_MISMATCH

    result = service.commands_match(expected_parsed, actual_parsed)
    if result.matches:
        print_fn("Match.")
        return EXIT_OK
    print_fn(f"No match: {result.reason}")
    return EXIT_MISMATCH


def _explain(service: CommandChecker, line: str, print_fn: PrintFn) -> int:
    """Print the parsed structure of one line."""
    parsed = service.parse(line)
    if not parsed.is_valid:
        print_fn(f"Invalid ({parsed.error_kind}): {parsed.error_message}")
        return EXIT_MISMATCH

    values = dict(parsed.flag_values)
    print_fn(f"Command: {parsed.command_name}")
    if parsed.flags:
        print_fn("Flags:")
        for flag in sorted(parsed.flags):
            suffix = f" = {values[flag]}" if flag in values else ""
            marker = " (unknown)" if flag in parsed.unknown_flags else ""
            print_fn(f"- {flag}{suffix}{marker}")
    else:
        print_fn("Flags: none")
    print_fn(f"Positionals: {', '.join(parsed.positionals) if parsed.positionals else 'none'}")
    print_fn("Output:")
    print_fn(service.mock_output(parsed))
    return EXIT_OK


def _commands(service: CommandChecker, print_fn: PrintFn) -> int:
    """Print the command reference table."""
    rows = [
        (ref.name, ", ".join(ref.aliases) or "-", " ".join(ref.flags) or "-")
        for ref in service.command_references()
    ]
    if not rows:
        print_fn("No commands in catalog.")
        return EXIT_OK

    name_width = max(len("Command"), max(len(row[0]) for row in rows))
    alias_width = max(len("Aliases"), max(len(row[1]) for row in rows))
    print_fn(f"{'Command':<{name_width}} {'Aliases':<{alias_width}} Flags")
    print_fn(f"{'-' * name_width} {'-' * alias_width} -----")
    for name, aliases, flags in rows:
        print_fn(f"{name:<{name_width}} {aliases:<{alias_width}} {flags}")
    return EXIT_OK


def shell(service: CommandChecker, input_fn: InputFn = input, print_fn: PrintFn = print) -> int:
    """Run a simulated terminal until the user exits."""
    print_fn(f"Simulated {service.catalog.program} terminal. Type :q to exit.")
    while True:
        try:
            line = input_fn("$ ").strip()
        except EOFError:
            return EXIT_OK
        if line.lower() in SHELL_EXIT_COMMANDS:
            return EXIT_OK
        if not line:
            continue
        parsed = service.parse(line)
        if not parsed.is_valid:
            print_fn(f"Error: {parsed.error_message}")
            continue
        print_fn(service.mock_output(parsed))


def main_entry() -> None:
    """Console script entrypoint."""
    raise SystemExit(run())


if __name__ == "__main__":  # pragma: no cover
    main_entry()
