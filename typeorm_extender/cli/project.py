"""``init`` command."""

from typing import Optional

import typer

from typeorm_extender.cli.utils import command_errors, echo
from typeorm_extender.infrastructure.i18n import TranslationService
from typeorm_extender.infrastructure.services import CliServices
from typeorm_extender.modules.scaffolding import init_project
from typeorm_extender.modules.scaffolding.files import display_path

NEXT_STEPS = (
    "configureEnv",
    "createMigration",
    "runMigration",
    "createFactory",
    "createSeed",
)


def register(app: typer.Typer, i18n: TranslationService) -> None:
    t = i18n.translate

    @app.command("init", help=t("commands.init.description"))
    def init(
        ctx: typer.Context,
        database: str = typer.Option(
            "postgres",
            "--database",
            "-d",
            help=t("commands.init.options.database"),
        ),
        datasource: Optional[str] = typer.Option(
            None, "--datasource", help=t("commands.init.options.datasource")
        ),
    ) -> None:
        services: CliServices = ctx.obj
        i18n = services.i18n
        root = services.cwd
        prefix = "commands.init.messages"

        with command_errors(i18n, f"{prefix}.error"):
            echo(i18n, f"{prefix}.initializing")
            echo(i18n, f"{prefix}.creatingStructure")
            if datasource:
                echo(i18n, f"{prefix}.usingCustomDatasource", {"path": datasource})

            result = init_project(
                root, database, services.settings.database, datasource=datasource
            )

            for directory in result.created_directories:
                echo(
                    i18n,
                    f"{prefix}.directoryCreated",
                    {"dir": display_path(directory, root)},
                )

            echo(i18n, f"{prefix}.creatingConfig")
            for path in result.written:
                echo(i18n, f"{prefix}.fileCreated", {"path": display_path(path, root)})
            for path in result.skipped:
                echo(i18n, f"{prefix}.fileSkipped", {"path": display_path(path, root)})

        echo(i18n, f"{prefix}.success")
        echo(i18n, f"{prefix}.nextSteps")
        for step in NEXT_STEPS:
            echo(i18n, f"{prefix}.{step}")
