"""npmtrainer: decide whether a typed npm command is equivalent to a reference one."""

from __future__ import annotations

import tomllib
from importlib.metadata import PackageNotFoundError, version
from pathlib import Path


def _version_from_pyproject() -> str | None:
    """Version from a source checkout's pyproject.toml, if this is one."""
    for base in Path(__file__).resolve().parents:
        pyproject = base / "pyproject.toml"
        if not pyproject.exists():
            continue
        with pyproject.open("rb") as handle:
            project = tomllib.load(handle).get("project", {})
        if project.get("name") != "npmtrainer":
            continue
        value = project.get("version")
        return str(value) if value else None
    return None


_project_version = _version_from_pyproject()
if _project_version is not None:
    __version__ = _project_version
else:
    try:
        __version__ = version("npmtrainer")
    except PackageNotFoundError:
        __version__ = "0+unknown"

from .catalog import CommandCatalog  # noqa: E402
from .matcher import commands_match  # noqa: E402
from .models import CommandSpec, MatchResult, ParameterSpec, ParsedCommand, ParseErrorKind  # noqa: E402
from .parser import parse  # noqa: E402
from .tokenizer import tokenize  # noqa: E402

__all__ = [
    "CommandCatalog",
    "CommandSpec",
    "MatchResult",
    "ParameterSpec",
    "ParseErrorKind",
    "ParsedCommand",
    "__version__",
    "commands_match",
    "parse",
    "tokenize",
]
