"""Plain one-path-per-line rendering."""

from __future__ import annotations

from collections.abc import Sequence

from ..file_tree_model import FileRecord
from ..options import ListOptions


def render_list(records: Sequence[FileRecord], root: str, options: ListOptions) -> str:
    """Render each record's relative or absolute path on its own line."""
    return "".join(f"{record.display_path(options.relative_paths)}\n" for record in records)


__all__ = ["render_list"]
