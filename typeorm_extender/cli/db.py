"""``db:setup`` command: migrations then seeds in one go."""

from typing import Optional

import typer

from typeorm_extender.cli.utils import (
    command_errors,
    echo,
    migrations_dir,
    open_data_source,
    seeds_dir,
)
from typeorm_extender.infrastructure.i18n import TranslationService
from typeorm_extender.infrastructure.services import CliServices
from typeorm_extender.modules.database import MigrationRunner, SeedRunner


def register(app: typer.Typer, i18n: TranslationService) -> None:
    t = i18n.translate
    options = "commands.db.setup.options"

    @app.command("db:setup", help=t("commands.db.setup.description"))
    def db_setup(
        ctx: typer.Context,
        config: Optional[str] = typer.Option(
            None, "--config", "-c", help=t(f"{options}.config")
        ),
        datasource: Optional[str] = typer.Option(
            None, "--datasource", help=t(f"{options}.datasource")
        ),
        reset: bool = typer.Option(False, "--reset", help=t(f"{options}.reset")),
        seeds_only: bool = typer.Option(
            False, "--seeds-only", help=t(f"{options}.seedsOnly")
        ),
        migrations_only: bool = typer.Option(
            False, "--migrations-only", help=t(f"{options}.migrationsOnly")
        ),
    ) -> None:
        services: CliServices = ctx.obj
        i18n = services.i18n
        prefix = "commands.db.setup.messages"
        hints = (
            f"{prefix}.suggestions",
            f"{prefix}.checkConnection",
            f"{prefix}.checkMigrations",
            f"{prefix}.checkSeeds",
        )

        with command_errors(i18n, f"{prefix}.error", hints):
            echo(i18n, f"{prefix}.start")
            with open_data_source(services, config, datasource) as source:
                migrations = MigrationRunner(
                    source.engine,
                    migrations_dir(services, source, None),
                    services.cwd,
                )

                if reset:
                    echo(i18n, f"{prefix}.resetting")
                    migrations.revert(len(migrations.executed()))
                    echo(i18n, f"{prefix}.resetComplete")

                if seeds_only:
                    echo(i18n, f"{prefix}.skippingMigrations")
                else:
                    echo(i18n, f"{prefix}.runningMigrations")
                    applied = migrations.run()
                    if applied:
                        echo(
                            i18n,
                            f"{prefix}.migrationsComplete",
                            {"count": len(applied)},
                        )
                    else:
                        echo(i18n, f"{prefix}.noMigrationsFound")

                if migrations_only:
                    echo(i18n, f"{prefix}.skippingSeeds")
                else:
                    echo(i18n, f"{prefix}.runningSeeds")
                    seeds = SeedRunner(
                        source.engine,
                        seeds_dir(services, source, None),
                        services.cwd,
                    )
                    executed = seeds.run()
                    if executed:
                        echo(
                            i18n,
                            f"{prefix}.seedsComplete",
                            {"count": len(executed)},
                        )
                    else:
                        echo(i18n, f"{prefix}.noSeedsFound")

        echo(i18n, f"{prefix}.success")
