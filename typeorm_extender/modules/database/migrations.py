"""Migration runner backed by a ``migrations`` ledger table.

A migration is a Python module with ``up(connection)`` and
``down(connection)`` functions plus optional ``NAME`` and ``TIMESTAMP``
constants. Modules run in ``(TIMESTAMP, NAME)`` order, each one in its own
transaction together with its ledger row.
"""

import re
from dataclasses import dataclass, field
from pathlib import Path
from types import ModuleType
from typing import Callable, List, Optional

from sqlalchemy import (
    BigInteger,
    Column,
    Integer,
    MetaData,
    String,
    Table,
    delete,
    insert,
    select,
)
from sqlalchemy.engine import Connection, Engine

from typeorm_extender.core.errors import MigrationError
from typeorm_extender.infrastructure.logging import get_module_logger
from typeorm_extender.modules.database.loader import load_module, project_imports

logger = get_module_logger()

LEDGER_TABLE = "migrations"
TIMESTAMP_PREFIX = re.compile(r"^(\d+)")

metadata = MetaData()

migrations_table = Table(
    LEDGER_TABLE,
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("timestamp", BigInteger, nullable=False),
    Column("name", String(255), nullable=False),
)


@dataclass(frozen=True)
class Migration:
    name: str
    timestamp: int
    path: Path
    up: Callable[[Connection], None] = field(compare=False, repr=False)
    down: Callable[[Connection], None] = field(compare=False, repr=False)


@dataclass(frozen=True)
class ExecutedMigration:
    id: int
    timestamp: int
    name: str


@dataclass
class MigrationStatus:
    executed: List[ExecutedMigration]
    pending: List[Migration]

    @property
    def up_to_date(self) -> bool:
        return not self.pending


def _migration_from_module(module: ModuleType, path: Path) -> Migration:
    up = getattr(module, "up", None)
    down = getattr(module, "down", None)
    if not callable(up) or not callable(down):
        raise MigrationError(
            f"{path.name} must define up(connection) and down(connection)",
            {"name": path.stem},
        )

    timestamp = getattr(module, "TIMESTAMP", None)
    if timestamp is None:
        match = TIMESTAMP_PREFIX.match(path.stem)
        if match is None:
            raise MigrationError(
                f"{path.name} has no TIMESTAMP and no numeric file prefix",
                {"name": path.stem},
            )
        timestamp = match.group(1)
    try:
        timestamp = int(timestamp)
    except (TypeError, ValueError) as e:
        raise MigrationError(
            f"{path.name} has a non-numeric TIMESTAMP: {timestamp!r}",
            {"name": path.stem},
        ) from e

    return Migration(
        name=str(getattr(module, "NAME", path.stem)),
        timestamp=timestamp,
        path=path,
        up=up,
        down=down,
    )


class MigrationRunner:
    """Apply and revert the migrations of one directory.

    Args:
        engine: Target database.
        migrations_dir: Directory holding the migration modules.
        project_root: Put on ``sys.path`` while migration modules load.
    """

    def __init__(
        self,
        engine: Engine,
        migrations_dir: Path,
        project_root: Optional[Path] = None,
    ):
        self.engine = engine
        self.migrations_dir = Path(migrations_dir)
        self.project_root = project_root or self.migrations_dir.parent
        self._discovered: Optional[List[Migration]] = None

    def discover(self) -> List[Migration]:
        """Load every migration module of the directory, sorted.

        Raises:
            MigrationError: If a module fails to import or is incomplete.
        """
        if self._discovered is not None:
            return self._discovered

        if not self.migrations_dir.is_dir():
            logger.debug("migrations_dir_missing", path=str(self.migrations_dir))
            self._discovered = []
            return self._discovered

        migrations = []
        with project_imports(self.project_root):
            for path in sorted(self.migrations_dir.glob("*.py")):
                if path.name.startswith("_"):
                    continue
                try:
                    module = load_module(path)
                except Exception as e:
                    raise MigrationError(
                        f"Failed to import {path.name}: {e}", {"name": path.stem}
                    ) from e
                migrations.append(_migration_from_module(module, path))

        names = [m.name for m in migrations]
        duplicates = sorted({n for n in names if names.count(n) > 1})
        if duplicates:
            raise MigrationError(
                f"Duplicate migration names: {', '.join(duplicates)}",
                {"name": duplicates[0]},
            )

        migrations.sort(key=lambda m: (m.timestamp, m.name))
        self._discovered = migrations
        return migrations

    def ensure_ledger(self) -> None:
        metadata.create_all(self.engine, tables=[migrations_table])

    def executed(self) -> List[ExecutedMigration]:
        """Ledger rows, oldest first."""
        self.ensure_ledger()
        query = select(
            migrations_table.c.id,
            migrations_table.c.timestamp,
            migrations_table.c.name,
        ).order_by(migrations_table.c.timestamp, migrations_table.c.id)
        with self.engine.connect() as connection:
            return [
                ExecutedMigration(id=row.id, timestamp=row.timestamp, name=row.name)
                for row in connection.execute(query)
            ]

    def pending(self) -> List[Migration]:
        done = {m.name for m in self.executed()}
        return [m for m in self.discover() if m.name not in done]

    def status(self) -> MigrationStatus:
        return MigrationStatus(executed=self.executed(), pending=self.pending())

    def run(self) -> List[Migration]:
        """Apply all pending migrations.

        Returns:
            The migrations that were applied, in order.

        Raises:
            MigrationError: If a migration fails. Earlier migrations of the
                same run stay applied.
        """
        applied = []
        for migration in self.pending():
            try:
                with self.engine.begin() as connection:
                    migration.up(connection)
                    connection.execute(
                        insert(migrations_table).values(
                            timestamp=migration.timestamp, name=migration.name
                        )
                    )
            except Exception as e:
                logger.error("migration_failed", migration=migration.name, error=str(e))
                raise MigrationError(
                    f"Migration {migration.name} failed: {e}", {"name": migration.name}
                ) from e
            logger.info("migration_applied", migration=migration.name)
            applied.append(migration)
        return applied

    def revert(self, steps: int = 1) -> List[ExecutedMigration]:
        """Undo the most recently applied migrations.

        Args:
            steps: How many migrations to undo, newest first.

        Returns:
            The ledger entries that were removed.

        Raises:
            MigrationError: If a recorded migration has no module anymore or
                its ``down`` fails.
        """
        by_name = {m.name: m for m in self.discover()}
        reverted = []
        for entry in list(reversed(self.executed()))[: max(steps, 0)]:
            migration = by_name.get(entry.name)
            if migration is None:
                raise MigrationError(
                    f"Migration {entry.name} is recorded but its module is missing",
                    {"name": entry.name},
                )
            try:
                with self.engine.begin() as connection:
                    migration.down(connection)
                    connection.execute(
                        delete(migrations_table).where(
                            migrations_table.c.id == entry.id
                        )
                    )
            except Exception as e:
                logger.error(
                    "migration_revert_failed", migration=entry.name, error=str(e)
                )
                raise MigrationError(
                    f"Reverting {entry.name} failed: {e}", {"name": entry.name}
                ) from e
            logger.info("migration_reverted", migration=entry.name)
            reverted.append(entry)
        return reverted
