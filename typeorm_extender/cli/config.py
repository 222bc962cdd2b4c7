"""``config`` command: show, list and persist CLI preferences.

Only one action runs per call, checked in the order ``--show``, ``--list``,
``--language``, ``--reset``. Without any option a short help is printed.
"""

from typing import Optional

import typer

from typeorm_extender.cli.utils import command_errors, echo
from typeorm_extender.infrastructure.i18n import TranslationService
from typeorm_extender.infrastructure.services import CliServices

SEPARATOR_WIDTH = 40

HELP_LINES = (
    "availableOptions",
    "showOption",
    "listOption",
    "languageOption",
    "resetOption",
    "examples",
    "exampleShow",
    "exampleLanguage",
    "exampleList",
)

DIRECTORY_LINES = (
    ("migrations", "migrationsDir"),
    ("factories", "factoriesDir"),
    ("seeds", "seedsDir"),
)

PREFIX = "commands.config.messages"


def show_config(services: CliServices) -> None:
    i18n = services.i18n
    manager = services.config_manager
    config = manager.get_config()
    config_path = manager.get_config_path()

    language = config.language or i18n.translate(f"{PREFIX}.languageDefault")
    path = str(config_path) if config_path else i18n.translate(f"{PREFIX}.notFound")

    echo(i18n, f"{PREFIX}.currentConfig")
    typer.echo("─" * SEPARATOR_WIDTH)
    echo(i18n, f"{PREFIX}.language", {"language": language})
    echo(i18n, f"{PREFIX}.configFile", {"path": path})
    if config.database is not None:
        db_type = config.database.type or i18n.translate(f"{PREFIX}.notSet")
        echo(i18n, f"{PREFIX}.databaseType", {"type": db_type})
    if config.directories is not None:
        echo(i18n, f"{PREFIX}.directories")
        for kind, key in DIRECTORY_LINES:
            echo(i18n, f"{PREFIX}.{key}", {"dir": manager.get_directory(kind)})
    typer.echo("─" * SEPARATOR_WIDTH)


def list_languages(i18n: TranslationService) -> None:
    current = i18n.get_language()

    echo(i18n, f"{PREFIX}.supportedLanguages")
    typer.echo("─" * SEPARATOR_WIDTH)
    for language in i18n.get_supported_languages():
        marker = "→" if language == current else " "
        typer.echo(f"{marker} {language} - {i18n.language_name(language)}")
    typer.echo("─" * SEPARATOR_WIDTH)
    echo(i18n, f"{PREFIX}.usage")
    echo(i18n, f"{PREFIX}.usageConfig")
    echo(i18n, f"{PREFIX}.usageGlobal")
    echo(i18n, f"{PREFIX}.usageEnv")


def set_language(services: CliServices, language: str) -> None:
    """Persist a language in the project config and switch to it.

    Raises:
        typer.Exit: With code 1 if the language is not supported.
    """
    i18n = services.i18n
    if not i18n.is_supported(language):
        echo(i18n, f"{PREFIX}.unsupportedLanguage", {"language": language}, err=True)
        echo(
            i18n,
            f"{PREFIX}.supportedList",
            {"languages": ", ".join(i18n.get_supported_languages())},
            err=True,
        )
        raise typer.Exit(code=1)

    code = i18n.normalize(language)
    services.config_manager.set_language(code)
    i18n.set_language(code)

    echo(
        i18n,
        f"{PREFIX}.languageSet",
        {"language": code, "languageName": i18n.language_name(code)},
    )
    echo(
        i18n,
        f"{PREFIX}.configSaved",
        {"path": str(services.config_manager.get_config_path())},
    )


def reset_config(services: CliServices) -> None:
    services.config_manager.create_default_config()
    services.i18n.set_language("en")
    echo(services.i18n, f"{PREFIX}.configReset")
    echo(
        services.i18n,
        f"{PREFIX}.configFileCreated",
        {"path": str(services.config_manager.get_config_path())},
    )


def show_help(i18n: TranslationService) -> None:
    echo(i18n, f"{PREFIX}.configManagement")
    typer.echo("─" * SEPARATOR_WIDTH)
    for line in HELP_LINES:
        echo(i18n, f"{PREFIX}.{line}")


def register(app: typer.Typer, i18n: TranslationService) -> None:
    t = i18n.translate

    @app.command("config", help=t("commands.config.description"))
    def config(
        ctx: typer.Context,
        show: bool = typer.Option(
            False, "--show", help=t("commands.config.options.show")
        ),
        list_: bool = typer.Option(
            False, "--list", help=t("commands.config.options.list")
        ),
        language: Optional[str] = typer.Option(
            None, "--language", help=t("commands.config.options.language")
        ),
        reset: bool = typer.Option(
            False, "--reset", help=t("commands.config.options.reset")
        ),
    ) -> None:
        services: CliServices = ctx.obj

        with command_errors(services.i18n, f"{PREFIX}.error"):
            if show:
                show_config(services)
            elif list_:
                list_languages(services.i18n)
            elif language:
                set_language(services, language)
            elif reset:
                reset_config(services)
            else:
                show_help(services.i18n)
