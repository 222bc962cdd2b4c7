"""Infrastructure configuration module - public API.

Two kinds of configuration exist:

- environment settings (``Settings``), read with pydantic-settings from the
  process environment and an optional ``.env`` file;
- the project config file (``ProjectConfig``) managed by ``ConfigManager``,
  a JSON document discovered by walking up from the working directory.

Example:
    ```python
    from typeorm_extender.infrastructure.configuration import ConfigManager

    manager = ConfigManager()
    language = manager.get_language()
    ```
"""

from typeorm_extender.infrastructure.configuration.project import (
    CONFIG_FILE_NAMES,
    DEFAULT_CONFIG_FILE_NAME,
    ConfigManager,
    DatabaseConfig,
    DirectoriesConfig,
    ProjectConfig,
)
from typeorm_extender.infrastructure.configuration.settings import (
    DatabaseSettings,
    LocaleSettings,
    Settings,
)

__all__ = [
    "CONFIG_FILE_NAMES",
    "DEFAULT_CONFIG_FILE_NAME",
    "ConfigManager",
    "DatabaseConfig",
    "DatabaseSettings",
    "DirectoriesConfig",
    "LocaleSettings",
    "ProjectConfig",
    "Settings",
]
