"""Generators for project files, migrations, factories and seeds."""

from typeorm_extender.modules.scaffolding.factories import create_factory
from typeorm_extender.modules.scaffolding.migrations import create_migration
from typeorm_extender.modules.scaffolding.models import GeneratedFile, InitResult
from typeorm_extender.modules.scaffolding.project import init_project
from typeorm_extender.modules.scaffolding.seeds import create_seed

__all__ = [
    "GeneratedFile",
    "InitResult",
    "create_factory",
    "create_migration",
    "create_seed",
    "init_project",
]
