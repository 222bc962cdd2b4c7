"""``factory:create`` command."""

from typing import Optional

import typer

from typeorm_extender.cli.utils import command_errors, echo
from typeorm_extender.infrastructure.i18n import TranslationService
from typeorm_extender.infrastructure.services import CliServices
from typeorm_extender.modules.scaffolding import create_factory
from typeorm_extender.modules.scaffolding.files import display_path


def register(app: typer.Typer, i18n: TranslationService) -> None:
    t = i18n.translate

    @app.command("factory:create", help=t("commands.factory.create.description"))
    def factory_create(
        ctx: typer.Context,
        name: str = typer.Argument(...),
        directory: Optional[str] = typer.Option(
            None, "--dir", "-d", help=t("commands.factory.create.options.dir")
        ),
        entity: Optional[str] = typer.Option(
            None, "--entity", "-e", help=t("commands.factory.create.options.entity")
        ),
    ) -> None:
        services: CliServices = ctx.obj
        i18n = services.i18n
        root = services.cwd
        prefix = "commands.factory.create.messages"

        with command_errors(i18n, f"{prefix}.error"):
            echo(i18n, f"{prefix}.creating", {"name": name})
            target = directory or services.config_manager.get_directory("factories")
            generated = create_factory(root, name, target, entity=entity)

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
        if generated.related_path is None:
            echo(i18n, f"{prefix}.entityNotFound", {"entity": generated.related_name})

        echo(i18n, f"{prefix}.success", {"name": generated.class_name})
        echo(i18n, f"{prefix}.file", {"path": display_path(generated.path, root)})
        echo(i18n, f"{prefix}.nextSteps")
        echo(i18n, f"{prefix}.editFactory")
        echo(i18n, f"{prefix}.useFactory")
        echo(i18n, f"{prefix}.exampleUsage", {"className": generated.class_name})
