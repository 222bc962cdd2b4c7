"""``migration:*`` commands."""

from typing import Optional

import typer

from typeorm_extender.cli.utils import (
    command_errors,
    echo,
    migrations_dir,
    open_data_source,
)
from typeorm_extender.infrastructure.i18n import TranslationService
from typeorm_extender.infrastructure.services import CliServices
from typeorm_extender.modules.database import MigrationRunner
from typeorm_extender.modules.scaffolding import create_migration
from typeorm_extender.modules.scaffolding.files import display_path


def register(app: typer.Typer, i18n: TranslationService) -> None:
    t = i18n.translate

    @app.command("migration:create", help=t("commands.migration.create.description"))
    def migration_create(
        ctx: typer.Context,
        name: str = typer.Argument(...),
        directory: Optional[str] = typer.Option(
            None, "--dir", "-d", help=t("commands.migration.create.options.dir")
        ),
    ) -> None:
        services: CliServices = ctx.obj
        i18n = services.i18n
        root = services.cwd
        prefix = "commands.migration.create.messages"

        with command_errors(i18n, f"{prefix}.error"):
            echo(i18n, f"{prefix}.creating", {"name": name})
            target = directory or services.config_manager.get_directory("migrations")
            generated = create_migration(root, name, target)

        if generated.created_directory is not None:
            echo(
                i18n,
                f"{prefix}.directoryCreated",
                {"dir": display_path(generated.created_directory, root)},
            )
        echo(i18n, f"{prefix}.success", {"name": generated.class_name})
        echo(i18n, f"{prefix}.file", {"path": display_path(generated.path, root)})
        echo(i18n, f"{prefix}.nextSteps")
        echo(i18n, f"{prefix}.editMigration")
        echo(i18n, f"{prefix}.runMigration")

    @app.command("migration:run", help=t("commands.migration.run.description"))
    def migration_run(
        ctx: typer.Context,
        config: Optional[str] = typer.Option(
            None, "--config", "-c", help=t("commands.migration.run.options.config")
        ),
        datasource: Optional[str] = typer.Option(
            None, "--datasource", help=t("commands.migration.run.options.datasource")
        ),
        directory: Optional[str] = typer.Option(
            None, "--dir", help=t("commands.migration.run.options.dir")
        ),
    ) -> None:
        services: CliServices = ctx.obj
        i18n = services.i18n
        prefix = "commands.migration.run.messages"

        with command_errors(i18n, f"{prefix}.error"):
            echo(i18n, f"{prefix}.executing")
            echo(i18n, f"{prefix}.connecting")
            with open_data_source(
                services, config, datasource, f"{prefix}.connectionClosed"
            ) as source:
                echo(i18n, f"{prefix}.connectionSuccess")
                runner = MigrationRunner(
                    source.engine,
                    migrations_dir(services, source, directory),
                    services.cwd,
                )
                applied = runner.run()

                if not applied:
                    echo(i18n, f"{prefix}.noPending")
                else:
                    echo(i18n, f"{prefix}.executed", {"count": len(applied)})
                    for migration in applied:
                        echo(i18n, f"{prefix}.executedItem", {"name": migration.name})
                    echo(i18n, f"{prefix}.success")

    @app.command("migration:revert", help=t("commands.migration.revert.description"))
    def migration_revert(
        ctx: typer.Context,
        config: Optional[str] = typer.Option(
            None, "--config", "-c", help=t("commands.migration.revert.options.config")
        ),
        datasource: Optional[str] = typer.Option(
            None,
            "--datasource",
            help=t("commands.migration.revert.options.datasource"),
        ),
        directory: Optional[str] = typer.Option(
            None, "--dir", help=t("commands.migration.revert.options.dir")
        ),
        steps: int = typer.Option(
            1, "--steps", min=1, help=t("commands.migration.revert.options.steps")
        ),
    ) -> None:
        services: CliServices = ctx.obj
        i18n = services.i18n
        prefix = "commands.migration.revert.messages"

        with command_errors(i18n, f"{prefix}.error"):
            echo(i18n, f"{prefix}.executing")
            with open_data_source(
                services, config, datasource, f"{prefix}.connectionClosed"
            ) as source:
                echo(i18n, f"{prefix}.connectionSuccess")
                runner = MigrationRunner(
                    source.engine,
                    migrations_dir(services, source, directory),
                    services.cwd,
                )
                reverted = runner.revert(steps)

                if not reverted:
                    echo(i18n, f"{prefix}.nothingToRevert")
                else:
                    echo(i18n, f"{prefix}.reverted", {"count": len(reverted)})
                    for entry in reverted:
                        echo(i18n, f"{prefix}.revertedItem", {"name": entry.name})

    @app.command("migration:status", help=t("commands.migration.status.description"))
    def migration_status(
        ctx: typer.Context,
        config: Optional[str] = typer.Option(
            None, "--config", "-c", help=t("commands.migration.status.options.config")
        ),
        datasource: Optional[str] = typer.Option(
            None,
            "--datasource",
            help=t("commands.migration.status.options.datasource"),
        ),
        directory: Optional[str] = typer.Option(
            None, "--dir", help=t("commands.migration.status.options.dir")
        ),
    ) -> None:
        services: CliServices = ctx.obj
        i18n = services.i18n
        prefix = "commands.migration.status.messages"

        with command_errors(i18n, f"{prefix}.error"):
            echo(i18n, f"{prefix}.checking")
            with open_data_source(services, config, datasource) as source:
                runner = MigrationRunner(
                    source.engine,
                    migrations_dir(services, source, directory),
                    services.cwd,
                )
                status = runner.status()

        echo(i18n, f"{prefix}.statusTitle")
        if status.executed:
            echo(i18n, f"{prefix}.executedTitle")
            for entry in status.executed:
                echo(
                    i18n,
                    f"{prefix}.executedItem",
                    {"name": entry.name, "timestamp": entry.timestamp},
                )
        else:
            echo(i18n, f"{prefix}.noExecuted")

        if status.up_to_date:
            echo(i18n, f"{prefix}.allUpdated")
        else:
            echo(i18n, f"{prefix}.pendingExists")
            for migration in status.pending:
                echo(i18n, f"{prefix}.pendingItem", {"name": migration.name})
            echo(i18n, f"{prefix}.runCommand")
