"""Load the npm command catalog from bundled JSON resources."""

from __future__ import annotations

import json
import logging
from importlib import resources
from pathlib import Path
from typing import Any

from .catalog import DEFAULT_PROGRAM, CommandCatalog
from .models import CommandSpec, ParameterSpec

CATALOG_PACKAGE = "npmtrainer.content"
CATALOG_RESOURCE = "commands.json"

logger = logging.getLogger(__name__)


def _strings(raw: Any) -> tuple[str, ...]:
    """Stripped, non-empty strings from a JSON list, in order."""
    if not isinstance(raw, list):
        return ()
    values = (str(value).strip() for value in raw)
    return tuple(value for value in values if value)


def _parameter_from_dict(command_name: str, raw: dict[str, Any]) -> ParameterSpec:
    """Build a parameter spec from raw JSON content."""
    name = str(raw.get("name", "")).strip()
    if not name:
        raise ValueError(f"Command '{command_name}' has a parameter without a name.")
    return ParameterSpec(
        name=name,
        aliases=_strings(raw.get("aliases", [])),
        requires_value=bool(raw.get("requires_value", False)),
        description=str(raw.get("description", "")),
    )


def _command_from_dict(raw: dict[str, Any]) -> CommandSpec:
    """Build a command spec from raw JSON content."""
    name = str(raw.get("name", "")).strip()
    if not name:
        raise ValueError("Catalog command without a name.")
    parameters = tuple(_parameter_from_dict(name, item) for item in raw.get("parameters", []))
    return CommandSpec(
        name=name,
        aliases=_strings(raw.get("aliases", [])),
        parameters=parameters,
        description=str(raw.get("description", "")),
        mock_output=str(raw.get("mock_output", "")),
    )


def _catalog_from_dict(raw: Any) -> CommandCatalog:
    """Build and validate a catalog from the decoded JSON document."""
    if not isinstance(raw, dict):
        raise ValueError("Catalog document must be a JSON object.")
    commands = raw.get("commands")
    if not isinstance(commands, list):
        raise ValueError("Catalog document has no 'commands' list.")
    catalog = CommandCatalog(
        (_command_from_dict(item) for item in commands),
        program=str(raw.get("program", DEFAULT_PROGRAM)),
        version=int(raw.get("catalog_version", 1)),
    )
    logger.info("Loaded %d commands (catalog version %d)", len(catalog), catalog.version)
    return catalog


def load_catalog() -> CommandCatalog:
    """Load the bundled catalog."""
    entry = resources.files(CATALOG_PACKAGE).joinpath(CATALOG_RESOURCE)
    return _catalog_from_dict(json.loads(entry.read_text(encoding="utf-8-sig")))


def load_catalog_from_file(path: Path | str) -> CommandCatalog:
    """Load a catalog from a JSON file for tests/tools."""
    raw = json.loads(Path(path).read_text(encoding="utf-8-sig"))
    return _catalog_from_dict(raw)
