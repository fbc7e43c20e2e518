"""Resolve a typed command line against the catalog."""

from __future__ import annotations

import logging

from .catalog import CommandCatalog
from .models import CommandSpec, ParsedCommand, ParseErrorKind
from .tokenizer import tokenize

logger = logging.getLogger(__name__)


def parse(text: str, catalog: CommandCatalog) -> ParsedCommand:
    """Parse `text` into a command, flags and positionals.

    Failures are returned as invalid results, never raised.
    """
    tokens = tokenize(text.strip())
    if not tokens:
        return ParsedCommand.failure(ParseErrorKind.EMPTY_COMMAND, "Empty command")

    if tokens[0].lower() == catalog.program.lower():
        tokens = tokens[1:]
    if not tokens:
        return ParsedCommand.failure(ParseErrorKind.MISSING_COMMAND, "No command specified")

    command_token = tokens[0]
    command = catalog.resolve_command(command_token)
    if command is None:
        logger.debug("Unknown command token %r", command_token)
        return ParsedCommand.failure(ParseErrorKind.UNKNOWN_COMMAND, f"Unknown command: {command_token}")

    return _classify_arguments(command, tokens[1:])


def _classify_arguments(command: CommandSpec, args: tuple[str, ...]) -> ParsedCommand:
    """Split arguments into canonical flags and positionals."""
    flags: set[str] = set()
    unknown: set[str] = set()
    values: dict[str, str] = {}
    positionals: list[str] = []

    index = 0
    while index < len(args):
        arg = args[index]
        index += 1
        if not arg.startswith("-"):
            positionals.append(arg)
            continue

        key, has_value, value = arg.partition("=")
        parameter = command.resolve_flag(key)
        if parameter is None:
            flag = key
            unknown.add(flag)
            logger.debug("Recording unknown flag %r for %s", flag, command.name)
        else:
            flag = parameter.name
        flags.add(flag)

        if has_value:
            values[flag] = value
        elif parameter is not None and parameter.requires_value:
            # A following flag-like token means the value was omitted.
            if index < len(args) and not args[index].startswith("-"):
                values[flag] = args[index]
                index += 1
            else:
                logger.debug("Flag %s of %s given without a value", flag, command.name)

    logger.debug("Parsed %s flags=%s positionals=%s", command.name, sorted(flags), positionals)
    return ParsedCommand(
        is_valid=True,
        command=command,
        flags=frozenset(flags),
        unknown_flags=frozenset(unknown),
        flag_values=tuple(sorted(values.items())),
        positionals=tuple(positionals),
    )
