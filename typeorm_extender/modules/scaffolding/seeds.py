"""Seed file generator."""

from pathlib import Path
from typing import Optional, Sequence

from typeorm_extender.infrastructure.logging import get_module_logger
from typeorm_extender.modules.scaffolding.factories import FACTORY_SUFFIX
from typeorm_extender.modules.scaffolding.files import (
    ensure_directory,
    find_first,
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
from typeorm_extender.modules.scaffolding.templates import seed_template

logger = get_module_logger()

FACTORY_DIRECTORIES = ("src/factories", "src/factory", "factories", "factory")
SEED_SUFFIX = "Seed"


def find_factory_file(
    root: Path, factory: str, extra_directories: Sequence[str] = ()
) -> Optional[Path]:
    """Locate ``<snake_base>_factory.py`` for a factory name."""
    base = split_suffix(factory, FACTORY_SUFFIX)
    directories = list(extra_directories) + [
        d for d in FACTORY_DIRECTORIES if d not in extra_directories
    ]
    return find_first(root, directories, f"{to_snake_case(base)}_factory.py")


def create_seed(
    root: Path,
    name: str,
    directory: str,
    factory: Optional[str] = None,
    factories_directory: Optional[str] = None,
) -> GeneratedFile:
    """Write ``<directory>/<snake_base>_seed.py``.

    A missing factory is not an error: the import is left commented out and
    ``related_path`` is None.

    Args:
        root: Project root.
        name: Seed name, with or without the ``Seed`` suffix.
        directory: Seeds directory.
        factory: Factory to use in the generated ``run()``.
        factories_directory: Configured factories directory, searched first.

    Raises:
        ScaffoldError: If a name is invalid or the file already exists.
    """
    name = validate_name(name)
    base = split_suffix(name, SEED_SUFFIX)
    class_name = f"{base}{SEED_SUFFIX}"

    factory_class = None
    factory_path = None
    if factory:
        factory_base = split_suffix(validate_name(factory), FACTORY_SUFFIX)
        factory_class = f"{factory_base}{FACTORY_SUFFIX}"
        extra = (factories_directory,) if factories_directory else ()
        factory_path = find_factory_file(root, factory, extra)
    factory_module = module_path(factory_path, root) if factory_path else None

    target_dir = root / directory
    created = ensure_directory(target_dir)
    path = target_dir / f"{to_snake_case(base)}_seed.py"
    content = seed_template(class_name, factory_class, factory_module)
    write_new_file(path, content, root)

    logger.info(
        "seed_created",
        path=str(path),
        seed=class_name,
        factory=factory_class,
        factory_found=factory_path is not None,
    )
    return GeneratedFile(
        path=path,
        class_name=class_name,
        created_directory=created,
        name_normalized=class_name != to_pascal_case(name),
        related_name=factory_class,
        related_path=factory_path,
    )
