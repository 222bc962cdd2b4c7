"""Project initialization: directory layout, ormconfig and base classes."""

import json
from pathlib import Path
from typing import Any, Dict, Optional

from typeorm_extender.core.errors import ScaffoldError
from typeorm_extender.infrastructure.configuration import DatabaseSettings
from typeorm_extender.infrastructure.logging import get_module_logger
from typeorm_extender.modules.scaffolding import templates
from typeorm_extender.modules.scaffolding.files import ensure_directory
from typeorm_extender.modules.scaffolding.models import InitResult

logger = get_module_logger()

SUPPORTED_DATABASES = ("postgres", "mysql", "sqlite")

PROJECT_DIRECTORIES = (
    "src/entities",
    "src/migrations",
    "src/factories",
    "src/seeds",
    "src/config",
)

ORM_CONFIG_FILE_NAME = "ormconfig.json"


def server_port(value: Optional[str], default: int) -> int:
    """``DB_PORT`` as a number, or the database default when unset or invalid."""
    if value is None:
        return default
    try:
        return int(value)
    except ValueError:
        logger.warning("invalid_db_port", value=value, default=default)
        return default


def build_orm_config(database: str, settings: DatabaseSettings) -> Dict[str, Any]:
    """Connection settings written to ``ormconfig.json``.

    Values come from the ``DB_*`` environment variables, with per-database
    defaults for the ones that are unset.
    """
    config: Dict[str, Any] = {"type": database}
    if database == "sqlite":
        config["database"] = settings.PATH or "database.sqlite"
    else:
        defaults = templates.SERVER_DEFAULTS[database]
        config.update(
            host=settings.HOST or "localhost",
            port=server_port(settings.PORT, defaults["port"]),
            username=settings.USERNAME or defaults["username"],
            password=settings.PASSWORD or "password",
            database=settings.DATABASE or "myapp",
        )
    config.update(
        entities="src/entities",
        migrations="src/migrations",
        seeds="src/seeds",
        synchronize=False,
        logging=False,
    )
    return config


def init_project(
    root: Path,
    database: str,
    settings: DatabaseSettings,
    datasource: Optional[str] = None,
) -> InitResult:
    """Create the project skeleton under ``root``.

    Existing files are left untouched and reported as skipped.

    Args:
        root: Project root.
        database: One of ``postgres``, ``mysql`` or ``sqlite``.
        settings: ``DB_*`` environment values used in ``ormconfig.json``.
        datasource: Path of a user provided data source module. When given,
            ``src/config/data_source.py`` is not generated.

    Raises:
        ScaffoldError: If the database type is not supported.
    """
    if database not in SUPPORTED_DATABASES:
        raise ScaffoldError(
            f"Unsupported database type: {database}",
            {"database": database},
            message_key="errors.unsupportedDatabase",
        )

    result = InitResult(database=database, datasource=datasource)

    for directory in PROJECT_DIRECTORIES:
        created = ensure_directory(root / directory)
        if created is not None:
            result.created_directories.append(created)

    for package in ("src",) + PROJECT_DIRECTORIES:
        marker = root / package / "__init__.py"
        if not marker.exists():
            marker.touch()

    files = {
        ORM_CONFIG_FILE_NAME: json.dumps(
            build_orm_config(database, settings), indent=2
        )
        + "\n",
        "src/entities/base.py": templates.ENTITY_BASE_TEMPLATE,
        "src/entities/user.py": templates.USER_ENTITY_TEMPLATE,
        "src/factories/base_factory.py": templates.BASE_FACTORY_TEMPLATE,
        "src/seeds/base_seed.py": templates.BASE_SEED_TEMPLATE,
    }
    if datasource is None:
        files["src/config/data_source.py"] = templates.data_source_template(database)

    for relative, content in files.items():
        path = root / relative
        if path.exists():
            result.skipped.append(path)
            continue
        path.write_text(content, encoding="utf-8")
        result.written.append(path)

    logger.info(
        "project_initialized",
        database=database,
        written=len(result.written),
        skipped=len(result.skipped),
    )
    return result
