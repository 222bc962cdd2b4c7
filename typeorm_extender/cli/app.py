"""Root Typer application and console script entry point.

Help texts are translated, so the active language has to be known before the
application is built. ``main`` scans the arguments for ``--language`` first,
builds the services of the invocation and only then creates the app.
"""

import sys
from typing import List, Optional, Sequence

import typer

from typeorm_extender import __version__
from typeorm_extender.cli import config, db, factory, migration, project, seed
from typeorm_extender.infrastructure.i18n import TranslationService
from typeorm_extender.infrastructure.logging import configure_logging
from typeorm_extender.infrastructure.services import CliServices, build_services

PROG_NAME = "typeorm-extender"

COMMAND_MODULES = (project, migration, factory, seed, db, config)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"{PROG_NAME} {__version__}")
        raise typer.Exit()


def create_app(i18n: TranslationService) -> typer.Typer:
    """Build the application with help texts in the active language.

    Command handlers find the ``CliServices`` of the invocation in
    ``ctx.obj``; pass it with ``app(obj=services)`` or
    ``CliRunner().invoke(app, args, obj=services)``.
    """
    t = i18n.translate
    app = typer.Typer(
        name=PROG_NAME,
        help=t("cli.description"),
        no_args_is_help=True,
        add_completion=False,
    )

    @app.callback()
    def main_callback(
        ctx: typer.Context,
        language: Optional[str] = typer.Option(
            None, "--language", "-l", help=t("cli.options.language")
        ),
        version: Optional[bool] = typer.Option(
            None,
            "--version",
            "-V",
            help=t("cli.options.version"),
            callback=_version_callback,
            is_eager=True,
        ),
    ) -> None:
        services: CliServices = ctx.obj
        if language:
            services.i18n.set_language(language)

    for module in COMMAND_MODULES:
        module.register(app, i18n)

    return app


def language_from_args(args: Sequence[str]) -> Optional[str]:
    """Value of the global ``--language`` option, if given before the command.

    Only tokens ahead of the first positional argument are global options;
    ``config --language es`` belongs to the ``config`` command.
    """
    tokens = list(args)
    for index, token in enumerate(tokens):
        if token.startswith("--language="):
            return token.split("=", 1)[1]
        if token in ("--language", "-l"):
            return tokens[index + 1] if index + 1 < len(tokens) else None
        if not token.startswith("-"):
            return None
    return None


def main(argv: Optional[List[str]] = None) -> None:
    """Console script entry point."""
    configure_logging()
    args = list(argv) if argv is not None else sys.argv[1:]
    services = build_services(language=language_from_args(args))
    app = create_app(services.i18n)
    app(args=args, obj=services, prog_name=PROG_NAME)
