"""Project configuration file discovery and persistence.

The project config is a small JSON document that the CLI looks for in the
working directory and its parents. It records the preferred language, database
defaults and where generated files go.
"""

import copy
import json
from pathlib import Path
from typing import Any, Dict, Optional, Tuple, Union

import structlog
from pydantic import BaseModel, ConfigDict, ValidationError

logger = structlog.stdlib.get_logger().bind(component="config")

CONFIG_FILE_NAMES = (
    "typeorm-extender.config.json",
    ".typeorm-extender.json",
    "typeorm-extender.json",
)
DEFAULT_CONFIG_FILE_NAME = CONFIG_FILE_NAMES[0]

DEFAULT_DIRECTORIES = {
    "migrations": "src/migrations",
    "factories": "src/factories",
    "seeds": "src/seeds",
}


class DatabaseConfig(BaseModel):
    """Database defaults stored in the project config."""

    model_config = ConfigDict(extra="allow")

    type: Optional[str] = None
    host: Optional[str] = None
    port: Optional[int] = None
    username: Optional[str] = None
    password: Optional[str] = None
    database: Optional[str] = None


class DirectoriesConfig(BaseModel):
    """Output directories for generated files."""

    model_config = ConfigDict(extra="allow")

    migrations: Optional[str] = None
    factories: Optional[str] = None
    seeds: Optional[str] = None


class ProjectConfig(BaseModel):
    """The flat settings record persisted in the project config file.

    ``language`` is kept as a plain string; the translation service decides
    whether it names a supported locale.
    """

    model_config = ConfigDict(extra="allow")

    language: Optional[str] = None
    database: Optional[DatabaseConfig] = None
    directories: Optional[DirectoriesConfig] = None

    @classmethod
    def default(cls) -> "ProjectConfig":
        return cls(
            language="en",
            database=DatabaseConfig(type="postgres"),
            directories=DirectoriesConfig(**DEFAULT_DIRECTORIES),
        )

    def to_json(self) -> str:
        return json.dumps(self.model_dump(mode="json", exclude_none=True), indent=2)


def _drop_field(data: Dict[str, Any], loc: Tuple[Any, ...]) -> bool:
    """Remove the entry at ``loc`` from nested dicts; False if it is not there."""
    parent: Any = data
    for key in loc[:-1]:
        if not isinstance(parent, dict) or key not in parent:
            return False
        parent = parent[key]
    if not isinstance(parent, dict) or not loc or loc[-1] not in parent:
        return False
    del parent[loc[-1]]
    return True


def _validate_leniently(data: Dict[str, Any], path: Path) -> Optional[ProjectConfig]:
    """Validate a config document, ignoring the fields that fail validation.

    A bad value in one field does not discard the rest of the file: the
    offending entries are dropped and validation is retried.
    """
    data = copy.deepcopy(data)
    while True:
        try:
            return ProjectConfig.model_validate(data)
        except ValidationError as e:
            dropped = [
                ".".join(str(part) for part in error["loc"])
                for error in e.errors()
                if _drop_field(data, tuple(error["loc"]))
            ]
            if not dropped:
                logger.warning("config_file_invalid", path=str(path), error=str(e))
                return None
            logger.warning("config_fields_ignored", path=str(path), fields=dropped)


class ConfigManager:
    """Handle to the project config file of one CLI invocation.

    The search for a config file happens once, in the constructor. Every write
    overwrites the whole file.

    Attributes:
        cwd: Directory the search starts from and where new files are created.
    """

    def __init__(self, cwd: Optional[Union[str, Path]] = None):
        """Initialize the manager and discover the config file.

        Args:
            cwd: Starting directory. Defaults to the process working directory.
        """
        self.cwd = Path(cwd) if cwd is not None else Path.cwd()
        self._config = ProjectConfig()
        self._config_path: Optional[Path] = None
        self._load()

    def _load(self) -> None:
        current = self.cwd.resolve()
        root = Path(current.anchor)

        while current != root:
            for file_name in CONFIG_FILE_NAMES:
                candidate = current / file_name
                if not candidate.is_file():
                    continue
                config = self._read(candidate)
                if config is not None:
                    self._config = config
                    self._config_path = candidate
                    logger.debug("config_file_loaded", path=str(candidate))
                    return
            current = current.parent

        logger.debug("config_file_not_found", start=str(self.cwd))

    @staticmethod
    def _read(path: Path) -> Optional[ProjectConfig]:
        try:
            data = json.loads(path.read_text(encoding="utf-8"))
            if not isinstance(data, dict):
                raise ValueError("config root must be a JSON object")
        except (OSError, ValueError) as e:
            logger.warning("config_file_invalid", path=str(path), error=str(e))
            return None
        return _validate_leniently(data, path)

    def get_config(self) -> ProjectConfig:
        return self._config

    def get_language(self) -> Optional[str]:
        return self._config.language

    def get_config_path(self) -> Optional[Path]:
        return self._config_path

    def get_directory(self, kind: str) -> str:
        """Return the configured output directory for a kind of generated file.

        Args:
            kind: One of "migrations", "factories" or "seeds".

        Returns:
            The directory from the config file, or the built-in default.
        """
        configured: Dict[str, Any] = {}
        if self._config.directories is not None:
            configured = self._config.directories.model_dump(exclude_none=True)
        return configured.get(kind) or DEFAULT_DIRECTORIES[kind]

    def set_language(self, language: str) -> None:
        """Record the language and persist the config immediately."""
        self._config.language = language
        self._save()

    def create_default_config(self) -> None:
        """Replace the config with the defaults, written to the working directory."""
        self._config = ProjectConfig.default()
        self._config_path = self.cwd / DEFAULT_CONFIG_FILE_NAME
        self._save()

    def _save(self) -> None:
        if self._config_path is None:
            self._config_path = self.cwd / DEFAULT_CONFIG_FILE_NAME

        try:
            self._config_path.write_text(self._config.to_json(), encoding="utf-8")
            logger.debug("config_file_saved", path=str(self._config_path))
        except OSError as e:
            logger.warning(
                "config_save_failed", path=str(self._config_path), error=str(e)
            )
