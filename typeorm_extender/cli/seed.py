"""``seed:*`` commands."""

from typing import Optional

import typer

from typeorm_extender.cli.utils import (
    command_errors,
    echo,
    open_data_source,
    seeds_dir,
)
from typeorm_extender.infrastructure.i18n import TranslationService
from typeorm_extender.infrastructure.services import CliServices
from typeorm_extender.modules.database import SeedRunner
from typeorm_extender.modules.database.seeds import find_seed_files
from typeorm_extender.modules.scaffolding import create_seed
from typeorm_extender.modules.scaffolding.files import display_path


def register(app: typer.Typer, i18n: TranslationService) -> None:
    t = i18n.translate

    @app.command("seed:create", help=t("commands.seed.create.description"))
    def seed_create(
        ctx: typer.Context,
        name: str = typer.Argument(...),
        directory: Optional[str] = typer.Option(
            None, "--dir", "-d", help=t("commands.seed.create.options.dir")
        ),
        factory: Optional[str] = typer.Option(
            None, "--factory", "-f", help=t("commands.seed.create.options.factory")
        ),
    ) -> None:
        services: CliServices = ctx.obj
        i18n = services.i18n
        root = services.cwd
        manager = services.config_manager
        prefix = "commands.seed.create.messages"

        with command_errors(i18n, f"{prefix}.error"):
            echo(i18n, f"{prefix}.creating", {"name": name})
            generated = create_seed(
                root,
                name,
                directory or manager.get_directory("seeds"),
                factory=factory,
                factories_directory=manager.get_directory("factories"),
            )

        if generated.created_directory is not None:
            echo(
                i18n,
                f"{prefix}.directoryCreated",
                {"dir": display_path(generated.created_directory, root)},
            )
        if generated.name_normalized:
            echo(
                i18n,
                f"{prefix}.nameRecommendation",
                {"className": generated.class_name},
            )
        if factory and generated.related_path is None:
            echo(i18n, f"{prefix}.factoryNotFound", {"factory": factory})

        echo(i18n, f"{prefix}.success", {"name": generated.class_name})
        echo(i18n, f"{prefix}.file", {"path": display_path(generated.path, root)})
        echo(i18n, f"{prefix}.nextSteps")
        echo(i18n, f"{prefix}.editSeed")
        echo(i18n, f"{prefix}.runSeed")
        echo(i18n, f"{prefix}.runSpecificSeed", {"name": generated.path.stem})

    @app.command("seed:run", help=t("commands.seed.run.description"))
    def seed_run(
        ctx: typer.Context,
        config: Optional[str] = typer.Option(
            None, "--config", "-c", help=t("commands.seed.run.options.config")
        ),
        datasource: Optional[str] = typer.Option(
            None, "--datasource", help=t("commands.seed.run.options.datasource")
        ),
        seed: Optional[str] = typer.Option(
            None, "--seed", "-s", help=t("commands.seed.run.options.seed")
        ),
        directory: Optional[str] = typer.Option(
            None, "--dir", help=t("commands.seed.run.options.dir")
        ),
    ) -> None:
        services: CliServices = ctx.obj
        i18n = services.i18n
        prefix = "commands.seed.run.messages"

        with command_errors(i18n, f"{prefix}.error"):
            echo(i18n, f"{prefix}.executing")
            echo(i18n, f"{prefix}.connecting")
            with open_data_source(
                services, config, datasource, f"{prefix}.connectionClosed"
            ) as source:
                echo(i18n, f"{prefix}.connectionSuccess")
                runner = SeedRunner(
                    source.engine,
                    seeds_dir(services, source, directory),
                    services.cwd,
                )
                files = runner.discover(seed)

                if not files:
                    if seed:
                        echo(i18n, f"{prefix}.seedNotFound", {"name": seed})
                    else:
                        echo(i18n, f"{prefix}.noSeeds")
                    return

                echo(i18n, f"{prefix}.found", {"count": len(files)})
                for path in files:
                    echo(i18n, f"{prefix}.executingSeed", {"name": path.stem})
                    runner.run_seed(path)
                    echo(i18n, f"{prefix}.seedSuccess", {"name": path.stem})
                echo(i18n, f"{prefix}.success")

    @app.command("seed:list", help=t("commands.seed.list.description"))
    def seed_list(
        ctx: typer.Context,
        directory: Optional[str] = typer.Option(
            None, "--dir", help=t("commands.seed.list.options.dir")
        ),
    ) -> None:
        services: CliServices = ctx.obj
        i18n = services.i18n
        prefix = "commands.seed.list.messages"

        with command_errors(i18n, f"{prefix}.listError"):
            echo(i18n, f"{prefix}.listing")
            files = find_seed_files(seeds_dir(services, None, directory))

        if not files:
            echo(i18n, f"{prefix}.listEmpty")
            return

        echo(i18n, f"{prefix}.found", {"count": len(files)})
        for index, path in enumerate(files, start=1):
            echo(i18n, f"{prefix}.item", {"index": index, "name": path.stem})
        echo(i18n, f"{prefix}.listUsage")
        command = i18n.translate(f"{prefix}.listCommand")
        typer.echo(f"  {command}")
