"""File system helpers shared by the generators."""

from pathlib import Path
from typing import Iterable, Optional

from typeorm_extender.core.errors import ScaffoldError


def ensure_directory(directory: Path) -> Optional[Path]:
    """Create ``directory`` if needed.

    Returns:
        The directory when it was created, None when it already existed.
    """
    if directory.is_dir():
        return None
    directory.mkdir(parents=True, exist_ok=True)
    return directory


def write_new_file(path: Path, content: str, root: Path) -> None:
    """Write a file that must not exist yet.

    Raises:
        ScaffoldError: If the file already exists.
    """
    if path.exists():
        raise ScaffoldError(
            f"File already exists: {path}", {"path": display_path(path, root)}
        )
    path.write_text(content, encoding="utf-8")


def find_first(
    root: Path, directories: Iterable[str], file_name: str
) -> Optional[Path]:
    """Return ``<root>/<dir>/<file_name>`` for the first directory holding it."""
    for directory in directories:
        candidate = root / directory / file_name
        if candidate.is_file():
            return candidate
    return None


def module_path(path: Path, root: Path) -> str:
    """Dotted import path of a source file relative to the project root.

    ``<root>/src/entities/user.py`` -> ``src.entities.user``
    """
    relative = path.resolve().relative_to(root.resolve()).with_suffix("")
    return ".".join(relative.parts)


def display_path(path: Path, root: Path) -> str:
    """Path relative to ``root`` in POSIX form, or absolute when outside it."""
    try:
        return path.resolve().relative_to(root.resolve()).as_posix()
    except ValueError:
        return str(path)
