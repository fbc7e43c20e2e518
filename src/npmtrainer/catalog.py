"""Immutable lookup table of npm commands and their flags."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from types import MappingProxyType

from .models import CommandSpec

DEFAULT_PROGRAM = "npm"


class CommandCatalog:
    """Read-only table of command specs keyed by canonical name.

    Construction validates that command names and aliases are unique across
    the whole catalog and that no two parameters of one command share a
    spelling. All lookups are case-insensitive.
    """

    __slots__ = ("_program", "_version", "_commands", "_by_name", "_by_alias")

    def __init__(self, commands: Iterable[CommandSpec], program: str = DEFAULT_PROGRAM, version: int = 1) -> None:
        """Build and validate the catalog."""
        program = program.strip()
        if not program:
            raise ValueError("Catalog program name is required.")
        specs = tuple(commands)
        by_name: dict[str, CommandSpec] = {}
        for spec in specs:
            key = spec.name.strip().lower()
            if not key:
                raise ValueError("Command with empty name in catalog.")
            if key in by_name:
                raise ValueError(f"Duplicate command name: {spec.name}")
            by_name[key] = spec

        by_alias: dict[str, CommandSpec] = {}
        for spec in specs:
            for alias in spec.aliases:
                key = alias.strip().lower()
                if not key:
                    continue
                owner = by_name.get(key) or by_alias.get(key)
                if owner is not None and owner is not spec:
                    raise ValueError(f"Alias '{alias}' of '{spec.name}' collides with command '{owner.name}'.")
                by_alias[key] = spec
            _validate_parameters(spec)

        self._program = program
        self._version = version
        self._commands = specs
        self._by_name = MappingProxyType(by_name)
        self._by_alias = MappingProxyType(by_alias)

    @property
    def program(self) -> str:
        """Program-name literal that may prefix a command line."""
        return self._program

    @property
    def version(self) -> int:
        """Catalog content version."""
        return self._version

    @property
    def commands(self) -> tuple[CommandSpec, ...]:
        """All command specs in declaration order."""
        return self._commands

    def get(self, name: str) -> CommandSpec | None:
        """Return the spec with canonical `name`, ignoring case."""
        return self._by_name.get(name.lower())

    def resolve_command(self, token: str) -> CommandSpec | None:
        """Resolve a typed command token; canonical names win over aliases."""
        lowered = token.lower()
        spec = self._by_name.get(lowered)
        if spec is not None:
            return spec
        return self._by_alias.get(lowered)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and name.lower() in self._by_name

    def __iter__(self) -> Iterator[CommandSpec]:
        return iter(self._commands)

    def __len__(self) -> int:
        return len(self._commands)


def _validate_parameters(spec: CommandSpec) -> None:
    """Validate flag spellings of one command are flags and unique."""
    seen: dict[str, str] = {}
    for parameter in spec.parameters:
        for spelling in parameter.spellings():
            if not spelling.startswith("-"):
                raise ValueError(f"Parameter '{spelling}' of '{spec.name}' is not a flag.")
            key = spelling.lower()
            previous = seen.get(key)
            if previous is not None:
                raise ValueError(
                    f"Duplicate flag '{spelling}' in command '{spec.name}' (in {previous} and {parameter.name})"
                )
            seen[key] = parameter.name
