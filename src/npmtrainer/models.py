"""Core value types for command parsing and matching."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum


@dataclass(frozen=True)
class ParameterSpec:
    """One flag a command accepts, with its alternate spellings."""

    name: str
    aliases: tuple[str, ...] = ()
    requires_value: bool = False
    description: str = ""

    def spellings(self) -> tuple[str, ...]:
        """Canonical name followed by every alias."""
        return (self.name, *self.aliases)


@dataclass(frozen=True)
class CommandSpec:
    """Catalog entry for one npm command."""

    name: str
    aliases: tuple[str, ...] = ()
    parameters: tuple[ParameterSpec, ...] = ()
    description: str = ""
    mock_output: str = ""

    def resolve_flag(self, token: str) -> ParameterSpec | None:
        """Find the parameter spelled `token` (name or alias, any case)."""
        lowered = token.lower()
        for parameter in self.parameters:
            if parameter.name.lower() == lowered:
                return parameter
        for parameter in self.parameters:
            if any(alias.lower() == lowered for alias in parameter.aliases):
                return parameter
        return None


class ParseErrorKind(StrEnum):
    """Why a line could not be parsed into a command."""

    EMPTY_COMMAND = "empty_command"
    MISSING_COMMAND = "missing_command"
    UNKNOWN_COMMAND = "unknown_command"


@dataclass(frozen=True)
class ParsedCommand:
    """Structured form of one typed command line.

    `flags` holds canonical flag names (unresolved flags verbatim) and
    `unknown_flags` is the subset that matched no parameter of the command.
    `flag_values` keeps the last value seen per flag; it is informational and
    never compared.
    """

    is_valid: bool
    command: CommandSpec | None = None
    flags: frozenset[str] = frozenset()
    unknown_flags: frozenset[str] = frozenset()
    flag_values: tuple[tuple[str, str], ...] = ()
    positionals: tuple[str, ...] = ()
    error_kind: ParseErrorKind | None = None
    error_message: str | None = None

    @classmethod
    def failure(cls, kind: ParseErrorKind, message: str) -> ParsedCommand:
        """Build an invalid result."""
        return cls(is_valid=False, error_kind=kind, error_message=message)

    @property
    def command_name(self) -> str | None:
        """Canonical name of the resolved command, if any."""
        return self.command.name if self.command is not None else None


@dataclass(frozen=True)
class MatchResult:
    """Outcome of comparing an expected command against an actual one."""

    matches: bool
    reason: str | None = None


@dataclass(frozen=True)
class AnswerVerdict:
    """User-facing result of checking one typed answer."""

    is_correct: bool
    message: str
    output: str | None = None


@dataclass(frozen=True)
class CommandReference:
    """Command name, aliases and flags for reference listings."""

    name: str
    aliases: tuple[str, ...]
    flags: tuple[str, ...]
    description: str
