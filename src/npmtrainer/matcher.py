"""Decide whether two parsed commands denote the same operation."""

from __future__ import annotations

import logging
from collections import Counter

from .models import MatchResult, ParsedCommand

# Lifecycle scripts npm runs directly or through `npm run <name>`.
SHORTCUT_COMMANDS = frozenset({"test", "start", "stop", "restart"})
RUN_COMMAND = "run"

logger = logging.getLogger(__name__)


def commands_match(expected: ParsedCommand, actual: ParsedCommand) -> MatchResult:
    """Compare command, flag set and positional multiset, in that order."""
    if not expected.is_valid or not actual.is_valid:
        return _no_match("invalid command")

    expected_name = expected.command_name
    actual_name = actual.command_name

    if expected_name in SHORTCUT_COMMANDS and actual_name == RUN_COMMAND and expected_name in actual.positionals:
        return MatchResult(matches=True)
    if (
        expected_name == RUN_COMMAND
        and len(expected.positionals) == 1
        and expected.positionals[0] in SHORTCUT_COMMANDS
        and actual_name == expected.positionals[0]
    ):
        return MatchResult(matches=True)

    if expected_name != actual_name:
        return _no_match("different command")

    if len(expected.flags) != len(actual.flags):
        return _no_match("different number of parameters")
    if expected.flags != actual.flags:
        return _no_match("different parameters")

    if len(expected.positionals) != len(actual.positionals):
        return _no_match("different number of packages")
    if Counter(expected.positionals) != Counter(actual.positionals):
        return _no_match("different package names")

    return MatchResult(matches=True)


def _no_match(reason: str) -> MatchResult:
    logger.debug("No match: %s", reason)
    return MatchResult(matches=False, reason=reason)
