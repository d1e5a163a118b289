"""Immutable run configuration built from command-line arguments."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from .errors import ArgumentError


class OutputFormat(str, Enum):
    """Document formats produced by the renderers."""

    TREE = "tree"
    JSON = "json"
    LIST = "list"


@dataclass(frozen=True)
class ListOptions:
    """Traversal, filter, and rendering switches for one listing run.

    ``depth`` of ``None`` means unbounded recursion. Empty filter strings mean
    no filter is configured.
    """

    depth: int | None = None
    show_size: bool = False
    show_time: bool = False
    show_type: bool = False
    include_filter: str = ""
    exclude_filter: str = ""
    dirs_only: bool = False
    files_only: bool = False
    output_format: OutputFormat = OutputFormat.TREE
    relative_paths: bool = False
    output_path: str | None = None
    compress: bool = False
    color: bool = True

    def validate(self) -> ListOptions:
        """Reject conflicting switch combinations before any traversal runs."""
        if self.dirs_only and self.files_only:
            raise ArgumentError("--dirs-only and --files-only cannot be used together")
        if self.compress and not self.output_path:
            raise ArgumentError("--compress requires --output")
        return self

    def depth_allows(self, depth: int) -> bool:
        """Return whether an entry at ``depth`` is within the configured bound."""
        return self.depth is None or depth <= self.depth

    def type_allows(self, is_dir: bool) -> bool:
        """Apply the dirs-only/files-only type filter."""
        if self.dirs_only and not is_dir:
            return False
        if self.files_only and is_dir:
            return False
        return True


__all__ = ["OutputFormat", "ListOptions"]
