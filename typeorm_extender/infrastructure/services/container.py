"""Per-invocation service container.

The CLI entry point builds one ``CliServices`` before dispatching a command
and hands it to every handler through ``typer.Context.obj``. Tests build their
own with an isolated working directory.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

from typeorm_extender.infrastructure.configuration import ConfigManager, Settings
from typeorm_extender.infrastructure.i18n import (
    LocaleResolver,
    TranslationService,
    Translator,
    create_translator,
)
from typeorm_extender.infrastructure.services.providers import get_settings


@dataclass
class CliServices:
    """Everything a command handler needs besides its own arguments."""

    settings: Settings
    config_manager: ConfigManager
    i18n: TranslationService

    @property
    def cwd(self) -> Path:
        return self.config_manager.cwd


def build_services(
    language: Optional[str] = None,
    cwd: Optional[Union[str, Path]] = None,
    settings: Optional[Settings] = None,
    translator: Optional[Translator] = None,
) -> CliServices:
    """Build the services of one invocation.

    The active locale is fixed here, once: ``language`` (the ``--language``
    flag), then the environment, then the project config file, then English.

    Args:
        language: Value of the ``--language`` flag, if given.
        cwd: Working directory. Defaults to the process working directory.
        settings: Environment settings. Defaults to the cached process settings.
        translator: Pre-loaded translator, mostly for tests.

    Returns:
        CliServices ready to be passed to command handlers.
    """
    settings = settings or get_settings()
    config_manager = ConfigManager(cwd)
    resolver = LocaleResolver()

    locale = resolver.resolve(
        requested=language,
        environment=settings.locale.candidates,
        config=config_manager.get_language(),
    )

    i18n = TranslationService(
        translator=translator or create_translator(),
        locale=locale,
        resolver=resolver,
    )
    return CliServices(settings=settings, config_manager=config_manager, i18n=i18n)
