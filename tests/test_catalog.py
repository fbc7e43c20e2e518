import pytest

from npmtrainer.catalog import CommandCatalog
from npmtrainer.models import CommandSpec, ParameterSpec


def test_resolve_command_by_name_and_alias_any_case(catalog: CommandCatalog) -> None:
    install = catalog.get("install")
    assert install is not None
    assert catalog.resolve_command("install") is install
    assert catalog.resolve_command("INSTALL") is install
    assert catalog.resolve_command("I") is install
    assert catalog.resolve_command("Add") is install
    assert catalog.resolve_command("frobnicate") is None


def test_canonical_name_wins_over_alias() -> None:
    catalog = CommandCatalog([CommandSpec("ls", aliases=()), CommandSpec("list", aliases=("la",))])
    assert catalog.resolve_command("ls").name == "ls"
    assert catalog.resolve_command("la").name == "list"


def test_catalog_container_protocol(catalog: CommandCatalog) -> None:
    assert "install" in catalog
    assert "INSTALL" in catalog
    assert "i" not in catalog
    assert 3 not in catalog
    assert len(catalog) == len(list(catalog)) == len(catalog.commands)
    assert catalog.program == "npm"
    assert catalog.version == 1


def test_resolve_flag_name_and_alias_any_case(catalog: CommandCatalog) -> None:
    install = catalog.get("install")
    assert install is not None
    assert install.resolve_flag("-D").name == "--save-dev"
    assert install.resolve_flag("-d").name == "--save-dev"
    assert install.resolve_flag("--GLOBAL").name == "-g"
    assert install.resolve_flag("--registry").requires_value is True
    assert install.resolve_flag("--nope") is None


def test_duplicate_command_name_rejected() -> None:
    with pytest.raises(ValueError, match="Duplicate command name"):
        CommandCatalog([CommandSpec("install"), CommandSpec("Install")])


def test_alias_colliding_with_other_command_rejected() -> None:
    with pytest.raises(ValueError, match="collides"):
        CommandCatalog([CommandSpec("version", aliases=("v",)), CommandSpec("view", aliases=("v",))])
    with pytest.raises(ValueError, match="collides"):
        CommandCatalog([CommandSpec("ls"), CommandSpec("list", aliases=("LS",))])


def test_empty_command_name_rejected() -> None:
    with pytest.raises(ValueError, match="empty name"):
        CommandCatalog([CommandSpec("  ")])


def test_empty_program_rejected() -> None:
    with pytest.raises(ValueError, match="program"):
        CommandCatalog([], program=" ")


def test_duplicate_flag_spelling_within_command_rejected() -> None:
    spec = CommandSpec("install", parameters=(ParameterSpec("--save", ("-S",)), ParameterSpec("--silent", ("-s",))))
    with pytest.raises(ValueError, match="Duplicate flag"):
        CommandCatalog([spec])


def test_non_flag_parameter_rejected() -> None:
    spec = CommandSpec("config", parameters=(ParameterSpec("set", requires_value=True),))
    with pytest.raises(ValueError, match="is not a flag"):
        CommandCatalog([spec])


def test_same_flag_on_different_commands_is_allowed() -> None:
    catalog = CommandCatalog(
        [
            CommandSpec("install", parameters=(ParameterSpec("-g", ("--global",)),)),
            CommandSpec("uninstall", parameters=(ParameterSpec("-g", ("--global",)),)),
        ]
    )
    assert len(catalog) == 2


def test_non_flag_parameter_alias_rejected() -> None:
    spec = CommandSpec("install", parameters=(ParameterSpec("-g", ("global",)),))
    with pytest.raises(ValueError, match="'global' of 'install' is not a flag"):
        CommandCatalog([spec])
