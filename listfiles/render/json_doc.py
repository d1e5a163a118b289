"""JSON document rendering of enumerated records.

The layout keeps one file object per line so large listings stay greppable.
Every string value goes through ``json.dumps``, so names containing quotes or
backslashes still produce a valid document.
"""

from __future__ import annotations

import json
from collections.abc import Sequence

from ..file_tree_model import FileRecord
from ..options import ListOptions


def _quote(value: str) -> str:
    return json.dumps(value, ensure_ascii=False)


def json_file_object(record: FileRecord, options: ListOptions) -> str:
    """Render one record as a single-line JSON object."""
    fields = [
        f'"path": {_quote(record.display_path(options.relative_paths))}',
        f'"type": {_quote("dir" if record.is_dir else "file")}',
        f'"name": {_quote(record.name)}',
    ]
    if options.show_size and not record.is_dir:
        fields.append(f'"size": {int(record.size)}')
    if options.show_time:
        fields.append(f'"modified": {_quote(record.modified)}')
    if options.show_type and not record.is_dir:
        fields.append(f'"ext": {_quote(record.extension)}')
    return "{" + ", ".join(fields) + "}"


def render_json(records: Sequence[FileRecord], root: str, options: ListOptions) -> str:
    """Render ``{"root": ..., "files": [...]}`` with no trailing comma."""
    out = ["{\n", f'  "root": {_quote(root)},\n', '  "files": [\n']
    last_idx = len(records) - 1
    for idx, record in enumerate(records):
        separator = "," if idx < last_idx else ""
        out.append(f"    {json_file_object(record, options)}{separator}\n")
    out.append("  ]\n}\n")
    return "".join(out)


__all__ = ["json_file_object", "render_json"]
