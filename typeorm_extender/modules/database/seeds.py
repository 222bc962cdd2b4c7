"""Seed discovery and execution.

A seed module is a ``*_seed.py`` file whose ``SEED`` attribute names the seed
class. The class is instantiated with the engine and its ``run(session)`` is
called inside a transaction that commits when it returns.
"""

from pathlib import Path
from typing import List, Optional, Sequence

from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session

from typeorm_extender.core.errors import SeedError
from typeorm_extender.infrastructure.logging import get_module_logger
from typeorm_extender.modules.database.loader import load_module, project_imports

logger = get_module_logger()

SEED_DIRECTORIES = ("src/seeds", "src/seed", "seeds", "seed")
SEED_FILE_SUFFIX = "_seed.py"
BASE_SEED_FILE = "base_seed.py"


def resolve_seeds_dir(root: Path, configured: str, explicit: bool = False) -> Path:
    """Pick the seeds directory.

    An explicit directory is used as is. Otherwise the configured one is
    tried first, then the conventional locations.
    """
    if explicit:
        return root / configured
    for candidate in (configured,) + SEED_DIRECTORIES:
        if (root / candidate).is_dir():
            return root / candidate
    return root / configured


def find_seed_files(seeds_dir: Path, only: Optional[str] = None) -> List[Path]:
    """List seed modules, sorted by file name.

    Args:
        seeds_dir: Directory to scan.
        only: Keep only files whose name contains this text, ignoring case.
    """
    if not seeds_dir.is_dir():
        return []
    files = [
        path
        for path in seeds_dir.glob(f"*{SEED_FILE_SUFFIX}")
        if path.name != BASE_SEED_FILE
    ]
    if only:
        needle = only.lower()
        files = [path for path in files if needle in path.stem.lower()]
    return sorted(files)


class SeedRunner:
    """Run seed modules against an engine.

    Args:
        engine: Target database.
        seeds_dir: Directory holding the seed modules.
        project_root: Put on ``sys.path`` while seed modules load.
    """

    def __init__(
        self,
        engine: Engine,
        seeds_dir: Path,
        project_root: Optional[Path] = None,
    ):
        self.engine = engine
        self.seeds_dir = Path(seeds_dir)
        self.project_root = project_root or self.seeds_dir.parent

    def discover(self, only: Optional[str] = None) -> List[Path]:
        return find_seed_files(self.seeds_dir, only)

    def run_seed(self, path: Path) -> None:
        """Import one seed module and run its ``SEED`` class.

        Raises:
            SeedError: If the module cannot be imported, has no usable
                ``SEED`` class, or the seed fails.
        """
        name = path.stem
        with project_imports(self.project_root):
            try:
                module = load_module(path)
            except Exception as e:
                raise SeedError(
                    f"Failed to import {path.name}: {e}", {"name": name}
                ) from e

            seed_class = getattr(module, "SEED", None)
            if not isinstance(seed_class, type) or not callable(
                getattr(seed_class, "run", None)
            ):
                raise SeedError(
                    f"{path.name} must set SEED to a class with a run(session) method",
                    {"name": name},
                )

            try:
                seed = seed_class(self.engine)
                with Session(self.engine) as session, session.begin():
                    seed.run(session)
            except Exception as e:
                logger.error("seed_failed", seed=name, error=str(e))
                raise SeedError(f"Seed {name} failed: {e}", {"name": name}) from e

        logger.info("seed_executed", seed=name)

    def run(self, only: Optional[str] = None) -> Sequence[str]:
        """Run every discovered seed in order.

        Returns:
            Names of the seeds that ran.
        """
        executed = []
        for path in self.discover(only):
            self.run_seed(path)
            executed.append(path.stem)
        return executed
