"""Building a SQLAlchemy engine from ``ormconfig.json`` or a data source module."""

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

from sqlalchemy import create_engine
from sqlalchemy.engine import URL, Engine

from typeorm_extender.core.errors import (
    ConfigFileNotFoundError,
    DataSourceLoadError,
    DataSourceNotFoundError,
)
from typeorm_extender.infrastructure.logging import get_module_logger
from typeorm_extender.modules.database.loader import load_module, project_imports

logger = get_module_logger()

DEFAULT_ORM_CONFIG = "ormconfig.json"

# ormconfig "type" -> SQLAlchemy dialect+driver
DRIVERS = {
    "postgres": "postgresql+psycopg2",
    "postgresql": "postgresql+psycopg2",
    "mysql": "mysql+pymysql",
    "mariadb": "mysql+pymysql",
    "sqlite": "sqlite",
}


@dataclass
class DataSource:
    """An engine plus the directories its configuration points at.

    Attributes:
        engine: Engine used for every statement of the command.
        migrations_dir: Migrations directory from ormconfig, if any.
        seeds_dir: Seeds directory from ormconfig, if any.
    """

    engine: Engine
    migrations_dir: Optional[str] = None
    seeds_dir: Optional[str] = None

    def check(self) -> None:
        """Open and close one connection; raises if the database is unreachable."""
        with self.engine.connect():
            pass

    def dispose(self) -> None:
        self.engine.dispose()


def config_directory(value: Any) -> Optional[str]:
    """Directory part of an ormconfig path entry.

    Accepts a plain directory, a glob (``src/migrations/**/*.py``) or a list
    of either, in which case the first entry is used.
    """
    if isinstance(value, list):
        value = value[0] if value else None
    if not isinstance(value, str) or not value:
        return None
    directory = value.split("*", 1)[0].rstrip("/")
    return directory or None


def build_url(config: Dict[str, Any], root: Path) -> URL:
    """Translate an ormconfig mapping into a SQLAlchemy URL.

    Relative SQLite paths are resolved against ``root``.

    Raises:
        DataSourceLoadError: If the database type is missing or unsupported,
            or the port is not a number.
    """
    db_type = str(config.get("type", "")).lower()
    driver = DRIVERS.get(db_type)
    if driver is None:
        raise DataSourceLoadError(
            f"Unsupported database type: {db_type or '<none>'}"
        )

    if driver == "sqlite":
        database = str(config.get("database") or "database.sqlite")
        if database != ":memory:" and not Path(database).is_absolute():
            database = str(root / database)
        return URL.create(driver, database=database)

    port = config.get("port")
    if port is not None:
        try:
            port = int(port)
        except (TypeError, ValueError) as e:
            raise DataSourceLoadError(f"Invalid port: {port!r}") from e
    return URL.create(
        driver,
        username=config.get("username"),
        password=config.get("password"),
        host=config.get("host"),
        port=port,
        database=config.get("database"),
    )


def load_orm_config(path: Path) -> Dict[str, Any]:
    """Read an ormconfig file.

    Raises:
        ConfigFileNotFoundError: If the file does not exist.
        DataSourceLoadError: If it is not a JSON object.
    """
    if not path.is_file():
        raise ConfigFileNotFoundError(
            f"Configuration file not found: {path}", {"path": str(path)}
        )
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except ValueError as e:
        raise DataSourceLoadError(f"Invalid JSON in {path}: {e}") from e
    if not isinstance(data, dict):
        raise DataSourceLoadError(f"{path} must contain a JSON object")
    return data


def _engine_from_module(path: Path, root: Path) -> Engine:
    with project_imports(root):
        try:
            module = load_module(path)
        except Exception as e:
            raise DataSourceLoadError(f"Failed to import {path}: {e}") from e

        engine = getattr(module, "data_source", None)
        factory = getattr(module, "create_data_source", None)
        if engine is None and callable(factory):
            try:
                engine = factory()
            except Exception as e:
                raise DataSourceLoadError(f"create_data_source() failed: {e}") from e

    if not isinstance(engine, Engine):
        raise DataSourceLoadError(
            f"{path} must define a SQLAlchemy Engine named 'data_source' "
            "or a create_data_source() function returning one"
        )
    return engine


def load_data_source(
    root: Path,
    config: Optional[str] = None,
    datasource: Optional[str] = None,
) -> DataSource:
    """Resolve the data source of a command.

    A ``--datasource`` module takes precedence over ``--config``.

    Args:
        root: Project root, the base of relative paths.
        config: ormconfig path, ``ormconfig.json`` when omitted.
        datasource: Path of a Python module exposing ``data_source``.

    Returns:
        DataSource with a ready engine. The caller disposes it.

    Raises:
        DataSourceNotFoundError: If the data source module does not exist.
        ConfigFileNotFoundError: If the ormconfig file does not exist.
        DataSourceLoadError: If neither can produce an engine.
    """
    if datasource:
        path = root / datasource
        if not path.is_file():
            raise DataSourceNotFoundError(
                f"DataSource file not found: {datasource}", {"path": datasource}
            )
        engine = _engine_from_module(path, root)
        logger.debug("data_source_loaded", source="module", path=str(path))
        return DataSource(engine=engine)

    config_path = root / (config or DEFAULT_ORM_CONFIG)
    orm_config = load_orm_config(config_path)
    url = build_url(orm_config, root)
    engine = create_engine(url, echo=bool(orm_config.get("logging", False)))
    logger.debug("data_source_loaded", source="ormconfig", path=str(config_path))
    return DataSource(
        engine=engine,
        migrations_dir=config_directory(orm_config.get("migrations")),
        seeds_dir=config_directory(orm_config.get("seeds")),
    )
