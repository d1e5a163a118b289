"""Error taxonomy for listing runs.

Argument errors stop the run before any traversal. Path, traversal and output
errors are reported at the component boundary and never crash the process.
Per-entry access failures are not exceptions at all: metadata accessors return
``None`` and the walk skips or defaults the field.
"""

from __future__ import annotations


class ListFilesError(Exception):
    """Base class for all listfiles failures."""


class ArgumentError(ListFilesError):
    """Bad, missing, or conflicting command-line arguments."""


class PathError(ListFilesError):
    """The traversal root does not exist."""

    def __init__(self, root: str) -> None:
        super().__init__(f"Path does not exist - {root}")
        self.root = root


class TraversalError(ListFilesError):
    """Directory iteration failed mid-walk; partial results are kept."""


class OutputError(ListFilesError):
    """The output file could not be created."""

    def __init__(self, path: str) -> None:
        super().__init__(f"Cannot create output file - {path}")
        self.path = path


__all__ = [
    "ListFilesError",
    "ArgumentError",
    "PathError",
    "TraversalError",
    "OutputError",
]
