"""Domain model for enumerated filesystem entries.

This package contains non-rendering primitives:
- the immutable per-entry record datatype
- best-effort metadata accessors that return ``None`` instead of raising
- the depth-bounded, filter-aware directory walk
"""

from __future__ import annotations

from .types import FileRecord
from .fs import (
    enumerate_records,
    is_representable_name,
    list_files,
    safe_file_size,
    safe_is_dir,
    safe_is_symlink,
    safe_mtime,
    safe_relative_path,
)

__all__ = [
    "FileRecord",
    "safe_is_dir",
    "safe_is_symlink",
    "safe_file_size",
    "safe_mtime",
    "safe_relative_path",
    "is_representable_name",
    "enumerate_records",
    "list_files",
]
