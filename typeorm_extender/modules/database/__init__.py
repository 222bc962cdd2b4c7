"""Database commands: data source loading, migrations and seeds."""

from typeorm_extender.modules.database.datasource import DataSource, load_data_source
from typeorm_extender.modules.database.migrations import (
    ExecutedMigration,
    Migration,
    MigrationRunner,
    MigrationStatus,
)
from typeorm_extender.modules.database.seeds import SeedRunner, resolve_seeds_dir

__all__ = [
    "DataSource",
    "ExecutedMigration",
    "Migration",
    "MigrationRunner",
    "MigrationStatus",
    "SeedRunner",
    "load_data_source",
    "resolve_seeds_dir",
]
