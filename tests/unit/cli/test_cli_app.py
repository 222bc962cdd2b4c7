"""Tests for the root application: global options and entry point."""

from unittest.mock import patch

import pytest

from typeorm_extender import __version__
from typeorm_extender.cli.app import (
    COMMAND_MODULES,
    PROG_NAME,
    language_from_args,
    main,
)


@pytest.mark.parametrize(
    "args, expected",
    [
        (["--language", "es", "init"], "es"),
        (["-l", "pt-BR", "init"], "pt-BR"),
        (["--language=pt", "seed:list"], "pt"),
        (["init", "--language", "es"], None),
        (["config", "--language", "es"], None),
        (["--language"], None),
        ([], None),
    ],
)
def test_language_from_args(args, expected):
    assert language_from_args(args) == expected


def test_version(run_cli):
    result = run_cli(["--version"])

    assert result.exit_code == 0
    assert result.output.strip() == f"{PROG_NAME} {__version__}"


def test_help_lists_every_command(run_cli):
    result = run_cli(["--help"])

    assert result.exit_code == 0
    for command in (
        "init",
        "migration:create",
        "migration:run",
        "migration:revert",
        "migration:status",
        "factory:create",
        "seed:create",
        "seed:run",
        "seed:list",
        "db:setup",
        "config",
    ):
        assert command in result.output
    assert "CLI for SQLAlchemy projects" in result.output


def test_help_is_translated(run_cli):
    result = run_cli(["--language", "es", "--help"])

    assert result.exit_code == 0
    assert "Inicializa" in result.output


def test_global_language_applies_to_command_output(run_cli, project_dir):
    result = run_cli(["--language", "es", "init", "--database", "sqlite"])

    assert result.exit_code == 0, result.output
    assert "¡Proyecto inicializado con éxito!" in result.output


def test_global_language_accepts_short_code(run_cli, project_dir):
    result = run_cli(["-l", "pt", "init", "--database", "sqlite"])

    assert result.exit_code == 0, result.output
    assert "Project initialized successfully" not in result.output


def test_unsupported_global_language_falls_back_to_english(run_cli, project_dir):
    result = run_cli(["--language", "fr", "init", "--database", "sqlite"])

    assert result.exit_code == 0, result.output
    assert "✅ Project initialized successfully!" in result.output


def test_every_command_module_registers():
    for module in COMMAND_MODULES:
        assert callable(getattr(module, "register", None))


def test_main_builds_services_with_language_flag(services):
    with patch(
        "typeorm_extender.cli.app.build_services", return_value=services
    ) as build, patch("typeorm_extender.cli.app.create_app") as create_app:
        main(["--language", "es", "seed:list"])

    build.assert_called_once_with(language="es")
    create_app.assert_called_once_with(services.i18n)
    create_app.return_value.assert_called_once_with(
        args=["--language", "es", "seed:list"], obj=services, prog_name=PROG_NAME
    )
