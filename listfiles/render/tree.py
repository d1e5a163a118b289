"""Indented tree rendering of enumerated records."""

from __future__ import annotations

from collections.abc import Sequence

from ..file_tree_model import FileRecord
from ..formatting import format_size
from ..options import ListOptions

TREE_INDENT = "│   "
TREE_BRANCH = "├── "
DIR_TAG = "[DIR]  "
FILE_TAG = "[FILE] "
SIZE_COLUMN = 50
TIME_COLUMN = 65


def tree_line(record: FileRecord, options: ListOptions) -> str:
    """Render one record row with optional size, time, and extension columns."""
    prefix = TREE_INDENT * (record.depth - 1)
    if record.depth > 0:
        prefix += TREE_BRANCH
    tag = DIR_TAG if record.is_dir else FILE_TAG
    label = str(record.relative_path) if options.relative_paths else record.name
    line = f"{prefix}{tag}{label}"

    if options.show_size and not record.is_dir:
        line = line.ljust(SIZE_COLUMN) + format_size(record.size)
    if options.show_time:
        line = line.ljust(TIME_COLUMN) + record.modified
    if options.show_type and not record.is_dir:
        line += " " + record.extension
    return line


def render_tree(records: Sequence[FileRecord], root: str, options: ListOptions) -> str:
    """Render the root label, a blank line, then one row per record."""
    lines = [root, ""]
    lines.extend(tree_line(record, options) for record in records)
    return "\n".join(lines) + "\n"


__all__ = ["TREE_INDENT", "TREE_BRANCH", "DIR_TAG", "FILE_TAG", "tree_line", "render_tree"]
