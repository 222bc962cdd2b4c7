"""Migration file generator."""

from datetime import datetime
from pathlib import Path
from typing import Optional

from typeorm_extender.infrastructure.logging import get_module_logger
from typeorm_extender.modules.scaffolding.files import ensure_directory, write_new_file
from typeorm_extender.modules.scaffolding.models import GeneratedFile
from typeorm_extender.modules.scaffolding.naming import (
    migration_timestamp,
    to_pascal_case,
    to_snake_case,
    validate_name,
)
from typeorm_extender.modules.scaffolding.templates import migration_template

logger = get_module_logger()


def create_migration(
    root: Path,
    name: str,
    directory: str,
    now: Optional[datetime] = None,
) -> GeneratedFile:
    """Write ``<directory>/<YYYYMMDDHHMMSS>_<snake_name>.py``.

    Args:
        root: Project root; ``directory`` is resolved against it.
        name: Migration name, e.g. ``CreateUsersTable``.
        directory: Migrations directory.
        now: Clock override for the timestamp.

    Returns:
        GeneratedFile whose ``class_name`` is the migration's ``NAME``.
    """
    name = validate_name(name)
    timestamp = migration_timestamp(now)
    class_name = to_pascal_case(name)

    target_dir = root / directory
    created = ensure_directory(target_dir)
    path = target_dir / f"{timestamp}_{to_snake_case(name)}.py"
    write_new_file(path, migration_template(class_name, timestamp), root)

    logger.info("migration_created", path=str(path), name=class_name)
    return GeneratedFile(
        path=path,
        class_name=f"{class_name}{timestamp}",
        created_directory=created,
    )
