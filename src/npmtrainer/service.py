"""Application service for checking typed npm commands against reference answers."""

from __future__ import annotations

from collections.abc import Iterable

from .catalog import CommandCatalog
from .content_loader import load_catalog
from .matcher import commands_match
from .models import AnswerVerdict, CommandReference, MatchResult, ParsedCommand
from .parser import parse

INVALID_OUTPUT = "Error: Invalid command"
CORRECT_MESSAGE = "Correct! Task completed."


class CommandChecker:
    """Binds a catalog to the parse and match operations."""

    def __init__(self, catalog: CommandCatalog | None = None) -> None:
        """Initialize with `catalog`, or the bundled one."""
        self.catalog = catalog if catalog is not None else load_catalog()

    def parse(self, raw_line: str) -> ParsedCommand:
        """Parse one typed line."""
        return parse(raw_line, self.catalog)

    def commands_match(self, expected: ParsedCommand, actual: ParsedCommand) -> MatchResult:
        """Compare two parsed commands."""
        return commands_match(expected, actual)

    def mock_output(self, parsed: ParsedCommand) -> str:
        """Canned terminal output for a parsed command."""
        if not parsed.is_valid or parsed.command is None:
            return INVALID_OUTPUT
        return parsed.command.mock_output

    def validate_answer(self, expected: str, user_input: str) -> AnswerVerdict:
        """Check `user_input` against one reference command."""
        actual = self.parse(user_input)
        if not actual.is_valid:
            return AnswerVerdict(is_correct=False, message=actual.error_message or "Invalid command")

        result = commands_match(self.parse(expected), actual)
        if result.matches:
            return AnswerVerdict(is_correct=True, message=CORRECT_MESSAGE, output=self.mock_output(actual))
        return AnswerVerdict(is_correct=False, message=f"Not quite right. {result.reason or 'Try again!'}")

    def is_accepted(self, answers: Iterable[str], user_input: str) -> bool:
        """Return whether `user_input` matches any accepted answer."""
        actual = self.parse(user_input)
        if not actual.is_valid:
            return False
        for answer in answers:
            expected = self.parse(answer)
            if not expected.is_valid:
                continue
            if commands_match(expected, actual).matches:
                return True
        return False

    def command_references(self) -> list[CommandReference]:
        """Return reference rows for every catalog command, sorted by name."""
        references = [
            CommandReference(
                name=spec.name,
                aliases=tuple(sorted(spec.aliases)),
                flags=tuple(sorted(parameter.name for parameter in spec.parameters)),
                description=spec.description,
            )
            for spec in self.catalog
        ]
        references.sort(key=lambda item: item.name)
        return references
