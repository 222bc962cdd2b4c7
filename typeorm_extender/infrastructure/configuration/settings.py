"""typeorm-extender environment settings - main aggregator."""

from typing import List, Optional

from pydantic import Field
from pydantic_settings import SettingsConfigDict

from typeorm_extender.infrastructure.configuration.base import ExtenderSettings


class LocaleSettings(ExtenderSettings):
    """Locale selection read from the environment.

    Environment Variables:
        TYPEORM_EXTENDER_LANG: Tool specific language (checked first)
        LANG: Generic system locale
    """

    TYPEORM_EXTENDER_LANG: Optional[str] = None
    LANG: Optional[str] = None

    @property
    def candidates(self) -> List[Optional[str]]:
        """Environment values in precedence order."""
        return [self.TYPEORM_EXTENDER_LANG, self.LANG]


class DatabaseSettings(ExtenderSettings):
    """Connection defaults written into a freshly generated ``ormconfig.json``.

    Environment Variables:
        DB_HOST, DB_PORT, DB_USERNAME, DB_PASSWORD, DB_DATABASE: server databases
        DB_PATH: SQLite database file

    DB_PORT stays a string here; ``init`` decides what a bad value means.
    """

    HOST: Optional[str] = Field(default=None, alias="DB_HOST")
    PORT: Optional[str] = Field(default=None, alias="DB_PORT")
    USERNAME: Optional[str] = Field(default=None, alias="DB_USERNAME")
    PASSWORD: Optional[str] = Field(default=None, alias="DB_PASSWORD")
    DATABASE: Optional[str] = Field(default=None, alias="DB_DATABASE")
    PATH: Optional[str] = Field(default=None, alias="DB_PATH")


class Settings(ExtenderSettings):
    """Application settings aggregated by concern.

    Environment Variables:
        LOG_LEVEL: Logging level (DEBUG, INFO, WARNING, ERROR)
        ENVIRONMENT: "production" switches log output to JSON

    Example:
        ```python
        from typeorm_extender.infrastructure.services.providers import get_settings

        settings = get_settings()
        env_languages = settings.locale.candidates
        db_host = settings.database.HOST
        ```
    """

    LOG_LEVEL: str = "WARNING"
    ENVIRONMENT: str = "development"

    locale: LocaleSettings
    database: DatabaseSettings

    @property
    def is_production(self) -> bool:
        """Check if the tool runs with production logging."""
        return self.ENVIRONMENT.lower() == "production"

    def __init__(self, **kwargs):
        """Initialize Settings with automatic subsettings instantiation.

        Args:
            **kwargs: Optional overrides for specific settings sections.
        """
        settings_map = {
            "locale": LocaleSettings,
            "database": DatabaseSettings,
        }

        for setting_name, setting_class in settings_map.items():
            if setting_name not in kwargs:
                kwargs[setting_name] = setting_class()

        super().__init__(**kwargs)

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        env_ignore_empty=True,
        extra="ignore",
    )
