"""Helpers shared by the command handlers: output and error rendering."""

from contextlib import contextmanager
from pathlib import Path
from typing import Any, Dict, Iterator, List, Optional, Sequence

import typer
from sqlalchemy.exc import SQLAlchemyError

from typeorm_extender.core.errors import ExtenderError
from typeorm_extender.infrastructure.i18n import TranslationService
from typeorm_extender.infrastructure.logging import get_module_logger
from typeorm_extender.infrastructure.services import CliServices
from typeorm_extender.modules.database import (
    DataSource,
    load_data_source,
    resolve_seeds_dir,
)

logger = get_module_logger()

# (needles, suggestion keys) checked in order against the lower-cased error text
SUGGESTION_RULES = (
    (
        ("connection refused", "could not connect", "can't connect"),
        ("checkDatabase", "checkConnection"),
    ),
    (
        ("authentication", "access denied", "password"),
        ("checkCredentials", "checkEnvironment"),
    ),
    (
        ("unknown database",),
        ("createDatabase", "checkDatabaseName"),
    ),
    (
        ("no module named", "cannot find module"),
        ("checkFiles", "checkImports"),
    ),
)


def echo(
    i18n: TranslationService,
    key: str,
    variables: Optional[Dict[str, Any]] = None,
    err: bool = False,
) -> None:
    """Print a translated message."""
    typer.echo(i18n.translate(key, variables), err=err)


def suggestion_keys(error_text: str) -> List[str]:
    """Catalog keys of the hints that apply to an error message."""
    text = error_text.lower()
    keys: List[str] = []
    for needles, suggestions in SUGGESTION_RULES:
        if any(needle in text for needle in needles):
            keys.extend(suggestions)
    if "does not exist" in text and "database" in text:
        for key in ("createDatabase", "checkDatabaseName"):
            if key not in keys:
                keys.append(key)
    return [f"errors.suggestions.{key}" for key in keys]


def error_message(i18n: TranslationService, error: Exception) -> str:
    if isinstance(error, ExtenderError):
        return i18n.translate(error.message_key, error.variables)
    return str(error)


@contextmanager
def command_errors(
    i18n: TranslationService, title_key: str, hint_keys: Sequence[str] = ()
) -> Iterator[None]:
    """Render command failures as translated output and exit with status 1.

    Args:
        i18n: Translation service of the invocation.
        title_key: Catalog key of the command's error headline.
        hint_keys: Command specific lines printed after the generic hints.

    Raises:
        typer.Exit: With code 1 when the block raises a handled error.
    """
    try:
        yield
    except (ExtenderError, SQLAlchemyError, ImportError, OSError) as e:
        logger.exception("command_failed", title=title_key, error=str(e))
        echo(i18n, title_key, err=True)
        typer.echo(error_message(i18n, e), err=True)

        cause = e.__cause__ if e.__cause__ is not None else e
        details = str(cause)
        if not isinstance(e, ExtenderError) or e.__cause__ is not None:
            echo(i18n, "errors.details", {"details": details}, err=True)

        suggestions = suggestion_keys(f"{e} {details}")
        if suggestions:
            echo(i18n, "errors.suggestions.title", err=True)
            for key in suggestions:
                echo(i18n, key, err=True)
        for key in hint_keys:
            echo(i18n, key, err=True)
        raise typer.Exit(code=1) from e


@contextmanager
def open_data_source(
    services: CliServices,
    config: Optional[str],
    datasource: Optional[str],
    closed_key: Optional[str] = None,
) -> Iterator[DataSource]:
    """Load and check the data source of a command, disposing it on exit.

    Args:
        services: Services of the invocation.
        config: ``--config`` value.
        datasource: ``--datasource`` value.
        closed_key: Message printed after the engine is disposed.
    """
    source = load_data_source(services.cwd, config=config, datasource=datasource)
    try:
        source.check()
        yield source
    finally:
        source.dispose()
        if closed_key:
            echo(services.i18n, closed_key)


def migrations_dir(
    services: CliServices, source: DataSource, directory: Optional[str]
) -> Path:
    """``--dir``, then ormconfig, then the project config or its default."""
    return services.cwd / (
        directory
        or source.migrations_dir
        or services.config_manager.get_directory("migrations")
    )


def seeds_dir(
    services: CliServices, source: Optional[DataSource], directory: Optional[str]
) -> Path:
    """``--dir`` or ormconfig exactly, else the project config or a known location."""
    explicit = directory or (source.seeds_dir if source is not None else None)
    if explicit:
        return resolve_seeds_dir(services.cwd, explicit, explicit=True)
    return resolve_seeds_dir(
        services.cwd, services.config_manager.get_directory("seeds")
    )
