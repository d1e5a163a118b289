"""Domain datatypes for enumerated filesystem entries."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class FileRecord:
    """One visited entry that survived filtering, as consumed by renderers.

    ``size`` is 0 for directories and on stat failure; ``modified`` is the
    local ``YYYY-MM-DD HH:MM`` timestamp or ``""`` when unavailable.
    """

    path: Path
    relative_path: Path
    name: str
    is_dir: bool
    size: int = 0
    modified: str = ""
    depth: int = 1

    @property
    def extension(self) -> str:
        """Suffix of ``path`` without its leading dot, empty when none."""
        return self.path.suffix[1:]

    def display_path(self, relative: bool) -> str:
        """Return the relative or absolute path text used by renderers."""
        return str(self.relative_path if relative else self.path)


__all__ = ["FileRecord"]
