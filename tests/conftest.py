from __future__ import annotations

import shutil
import sys
from collections.abc import Iterator
from pathlib import Path
from uuid import uuid4

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from npmtrainer.catalog import CommandCatalog  # noqa: E402
from npmtrainer.models import CommandSpec, ParameterSpec  # noqa: E402


def build_catalog() -> CommandCatalog:
    """Small synthetic catalog independent of the bundled content."""
    return CommandCatalog(
        [
            CommandSpec(
                name="install",
                aliases=("i", "add"),
                parameters=(
                    ParameterSpec("-g", ("--global",)),
                    ParameterSpec("--save-dev", ("-D",)),
                    ParameterSpec("--save-exact", ("-E",)),
                    ParameterSpec("--registry", requires_value=True),
                ),
                mock_output="added 1 package",
            ),
            CommandSpec(name="init", parameters=(ParameterSpec("-y", ("--yes",)), ParameterSpec("--scope", (), True))),
            CommandSpec(name="run", aliases=("run-script",), parameters=(ParameterSpec("--silent"),)),
            CommandSpec(name="test", aliases=("t", "tst")),
            CommandSpec(name="start"),
            CommandSpec(name="stop"),
            CommandSpec(name="restart"),
        ]
    )


@pytest.fixture
def catalog() -> CommandCatalog:
    return build_catalog()


def _tmp_path_fixture() -> Iterator[Path]:
    """Per-test scratch directory kept under the project at ``.tmp_pytest/``.

    Replaces pytest's builtin ``tmp_path`` so catalog files written by tests
    never depend on the system temp location.
    """
    base = ROOT / ".tmp_pytest"
    base.mkdir(parents=True, exist_ok=True)
    path = base / str(uuid4())
    path.mkdir(parents=True, exist_ok=False)
    try:
        yield path
    finally:
        shutil.rmtree(path, ignore_errors=True)
        try:
            next(base.iterdir())
        except StopIteration:
            base.rmdir()
        except FileNotFoundError:
            pass


tmp_path = pytest.fixture(name="tmp_path")(_tmp_path_fixture)
