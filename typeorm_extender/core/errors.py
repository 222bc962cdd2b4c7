"""Exceptions raised by typeorm-extender commands.

Every error carries the catalog key of its user facing message plus the
variables to interpolate, so the CLI layer can render it in the active
language without knowing which operation failed.
"""

from typing import Any, Dict, Optional


class ExtenderError(Exception):
    """Base exception for all command errors.

    Example:
        try:
            runner.run()
        except ExtenderError as e:
            print(i18n.translate(e.message_key, e.variables))
    """

    message_key = "errors.unexpected"

    def __init__(
        self,
        message: str,
        variables: Optional[Dict[str, Any]] = None,
        message_key: Optional[str] = None,
    ):
        super().__init__(message)
        self.variables: Dict[str, Any] = dict(variables or {})
        if message_key is not None:
            self.message_key = message_key


class ConfigFileNotFoundError(ExtenderError):
    """Raised when the ormconfig file given with ``--config`` does not exist."""

    message_key = "errors.configNotFound"


class DataSourceNotFoundError(ExtenderError):
    """Raised when the file given with ``--datasource`` does not exist."""

    message_key = "errors.datasourceNotFound"


class DataSourceLoadError(ExtenderError):
    """Raised when a data source module or ormconfig cannot produce an engine."""

    message_key = "errors.datasourceLoadFailed"


class MigrationError(ExtenderError):
    """Raised when a migration module is invalid or fails while running."""

    message_key = "errors.migrationFailed"


class SeedError(ExtenderError):
    """Raised when a seed module is invalid or fails while running."""

    message_key = "errors.seedFailed"


class ScaffoldError(ExtenderError):
    """Raised when a file cannot be generated.

    Example:
        >>> create_factory(Path("."), "User")  # user_factory.py already there
        Traceback (most recent call last):
        ...
        ScaffoldError: File already exists: src/factories/user_factory.py
    """

    message_key = "errors.fileExists"
