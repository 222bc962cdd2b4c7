"""Loading of user project modules (data sources, migrations, seeds).

User modules import their own project code (``from src.entities.user import
User``), so the project root is put on ``sys.path`` while they load. Modules
imported from the project are dropped from ``sys.modules`` afterwards, keeping
one invocation from leaking into the next within the same process.
"""

import importlib
import importlib.util
import itertools
import sys
from contextlib import contextmanager
from pathlib import Path
from types import ModuleType
from typing import Iterator

MODULE_PREFIX = "typeorm_extender_project_"

_counter = itertools.count()


def _is_within(file_name: str, root: Path) -> bool:
    try:
        Path(file_name).resolve().relative_to(root)
    except (ValueError, OSError):
        return False
    return True


@contextmanager
def project_imports(root: Path) -> Iterator[None]:
    """Make ``root`` importable for the duration of the block."""
    root = root.resolve()
    root_str = str(root)
    before = set(sys.modules)
    sys.path.insert(0, root_str)
    importlib.invalidate_caches()
    try:
        yield
    finally:
        if root_str in sys.path:
            sys.path.remove(root_str)
        for name in set(sys.modules) - before:
            module = sys.modules.get(name)
            module_file = getattr(module, "__file__", None)
            if name.startswith(MODULE_PREFIX) or (
                module_file and _is_within(module_file, root)
            ):
                del sys.modules[name]


def load_module(path: Path) -> ModuleType:
    """Execute a Python file as a fresh module.

    Each call gets a unique module name, so two files with the same stem in
    different directories never shadow each other.

    Raises:
        ImportError: If no loader can be created for the path.
        Exception: Whatever the module raises while executing.
    """
    name = f"{MODULE_PREFIX}{next(_counter)}_{path.stem}"
    spec = importlib.util.spec_from_file_location(name, path)
    if spec is None or spec.loader is None:
        raise ImportError(f"Cannot load module from {path}")

    module = importlib.util.module_from_spec(spec)
    sys.modules[name] = module
    try:
        spec.loader.exec_module(module)
    except Exception:
        sys.modules.pop(name, None)
        raise
    return module
