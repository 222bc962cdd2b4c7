"""Shared fixtures.

Every test runs with the locale and database environment variables removed
and inside its own temporary working directory, so neither the developer's
shell nor a stray ``.env`` file can change which language or defaults a
command picks.
"""

from pathlib import Path
from typing import Callable, List, Optional

import pytest
from typer.testing import CliRunner

from typeorm_extender.cli.app import create_app, language_from_args
from typeorm_extender.infrastructure.configuration import (
    DatabaseSettings,
    LocaleSettings,
    Settings,
)
from typeorm_extender.infrastructure.i18n import Translator, create_translator
from typeorm_extender.infrastructure.services import CliServices, build_services

ISOLATED_ENV_VARS = (
    "TYPEORM_EXTENDER_LANG",
    "LANG",
    "DB_HOST",
    "DB_PORT",
    "DB_USERNAME",
    "DB_PASSWORD",
    "DB_DATABASE",
    "DB_PATH",
)


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch):
    for name in ISOLATED_ENV_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture(scope="session")
def translator() -> Translator:
    """Translator over the catalogs shipped with the package, loaded once."""
    return create_translator()


@pytest.fixture
def project_dir(tmp_path, monkeypatch) -> Path:
    """Empty project root, also the process working directory."""
    root = tmp_path / "project"
    root.mkdir()
    monkeypatch.chdir(root)
    return root


@pytest.fixture
def settings(project_dir) -> Settings:
    return Settings(
        locale=LocaleSettings(TYPEORM_EXTENDER_LANG=None, LANG=None),
        database=DatabaseSettings(),
    )


@pytest.fixture
def make_services(project_dir, settings, translator) -> Callable[..., CliServices]:
    """Build CliServices for the project directory.

    Usage:
        services = make_services(language="es")
    """

    def _make(
        language: Optional[str] = None,
        cwd: Optional[Path] = None,
        settings_override: Optional[Settings] = None,
    ) -> CliServices:
        return build_services(
            language=language,
            cwd=cwd or project_dir,
            settings=settings_override or settings,
            translator=translator,
        )

    return _make


@pytest.fixture
def services(make_services) -> CliServices:
    return make_services()


@pytest.fixture
def run_cli(make_services):
    """Invoke the CLI the way the console script does.

    The services are built with the ``--language`` value found before the
    command, then the app is created with help texts in that language.

    Usage:
        result = run_cli(["init", "--database", "sqlite"])
        assert result.exit_code == 0
    """
    runner = CliRunner()

    def _run(args: List[str], services: Optional[CliServices] = None):
        services = services or make_services(language=language_from_args(args))
        app = create_app(services.i18n)
        return runner.invoke(app, args, obj=services)

    return _run


@pytest.fixture
def sqlite_project(project_dir, run_cli) -> Path:
    """Project initialized for SQLite with ``typeorm-extender init``."""
    result = run_cli(["init", "--database", "sqlite"])
    assert result.exit_code == 0, result.output
    return project_dir
