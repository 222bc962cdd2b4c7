"""Factory file generator."""

from pathlib import Path
from typing import Optional

from typeorm_extender.infrastructure.logging import get_module_logger
from typeorm_extender.modules.scaffolding.files import (
    ensure_directory,
    module_path,
    write_new_file,
)
from typeorm_extender.modules.scaffolding.models import GeneratedFile
from typeorm_extender.modules.scaffolding.naming import (
    split_suffix,
    to_pascal_case,
    to_snake_case,
    validate_name,
)
from typeorm_extender.modules.scaffolding.templates import factory_template

logger = get_module_logger()

ENTITY_DIRECTORIES = ("src/entities", "src/entity", "entities", "entity")
FACTORY_SUFFIX = "Factory"


def find_entity_file(root: Path, entity_name: str) -> Optional[Path]:
    """Locate the module defining an entity.

    Each entity directory is searched for ``<snake_name>.py`` first, then for
    any module whose name contains the entity name.
    """
    exact = f"{to_snake_case(entity_name)}.py"
    needle = entity_name.lower()
    for directory in ENTITY_DIRECTORIES:
        base = root / directory
        if not base.is_dir():
            continue
        if (base / exact).is_file():
            return base / exact
        for candidate in sorted(base.glob("*.py")):
            if candidate.name == "__init__.py":
                continue
            if needle in candidate.stem.lower().replace("_", ""):
                return candidate
    return None


def create_factory(
    root: Path,
    name: str,
    directory: str,
    entity: Optional[str] = None,
) -> GeneratedFile:
    """Write ``<directory>/<snake_base>_factory.py``.

    The class is always named ``<Base>Factory``; ``User`` and ``UserFactory``
    both produce ``UserFactory`` in ``user_factory.py``. The entity defaults to
    the base name.

    Raises:
        ScaffoldError: If the name is invalid or the file already exists.
    """
    name = validate_name(name)
    base = split_suffix(name, FACTORY_SUFFIX)
    class_name = f"{base}{FACTORY_SUFFIX}"
    entity_name = to_pascal_case(validate_name(entity)) if entity else base

    entity_path = find_entity_file(root, entity_name)
    entity_module = module_path(entity_path, root) if entity_path else None

    target_dir = root / directory
    created = ensure_directory(target_dir)
    path = target_dir / f"{to_snake_case(base)}_factory.py"
    content = factory_template(class_name, entity_name, entity_module)
    write_new_file(path, content, root)

    logger.info(
        "factory_created",
        path=str(path),
        factory=class_name,
        entity=entity_name,
        entity_found=entity_path is not None,
    )
    return GeneratedFile(
        path=path,
        class_name=class_name,
        created_directory=created,
        name_normalized=class_name != to_pascal_case(name),
        related_name=entity_name,
        related_path=entity_path,
    )
