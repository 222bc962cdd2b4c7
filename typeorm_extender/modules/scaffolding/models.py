"""Results returned by the generators.

Generators never print. The CLI layer turns these into translated messages.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional


@dataclass
class GeneratedFile:
    """A single generated source file.

    Attributes:
        path: Where the file was written.
        class_name: Main class (or migration name) defined in the file.
        created_directory: Output directory, if it had to be created.
        name_normalized: True when ``class_name`` differs from the given name.
        related_name: Entity or factory the file refers to.
        related_path: Where the related file was found, None if not found.
    """

    path: Path
    class_name: str
    created_directory: Optional[Path] = None
    name_normalized: bool = False
    related_name: Optional[str] = None
    related_path: Optional[Path] = None


@dataclass
class InitResult:
    database: str
    datasource: Optional[str] = None
    created_directories: List[Path] = field(default_factory=list)
    written: List[Path] = field(default_factory=list)
    skipped: List[Path] = field(default_factory=list)
