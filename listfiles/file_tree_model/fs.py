"""Filesystem walking and record construction for listing runs."""

from __future__ import annotations

import logging
import os
from pathlib import Path

from ..errors import PathError, TraversalError
from ..formatting import format_timestamp
from ..options import ListOptions
from ..patterns import NameFilter
from .types import FileRecord

logger = logging.getLogger(__name__)

NAME_ENCODING = "utf-8"


def safe_is_dir(entry: os.DirEntry[str]) -> bool | None:
    """Return whether ``entry`` is a directory (following links), ``None`` on failure.

    A symlink whose target cannot be stat'ed (dangling or unreadable) counts as
    a failed type check.
    """
    try:
        is_dir = entry.is_dir()
        if entry.is_symlink():
            entry.stat()
    except OSError:
        return None
    return is_dir


def safe_is_symlink(entry: os.DirEntry[str]) -> bool:
    """Return whether ``entry`` is a symlink, treating probe failures as links."""
    try:
        return entry.is_symlink()
    except OSError:
        return True


def safe_file_size(entry: os.DirEntry[str], is_dir: bool) -> int | None:
    """Return file size for files, otherwise ``None`` or on stat failure."""
    if is_dir:
        return None
    try:
        return int(entry.stat().st_size)
    except OSError:
        return None


def safe_mtime(entry: os.DirEntry[str]) -> str | None:
    """Return the formatted modification time for ``entry`` or ``None`` on failure."""
    try:
        return format_timestamp(entry.stat().st_mtime)
    except (OSError, OverflowError, ValueError):
        return None


def safe_relative_path(path: Path, root: Path) -> Path | None:
    """Return ``path`` relative to ``root`` or ``None`` when it cannot be expressed."""
    try:
        return Path(os.path.relpath(path, root))
    except ValueError:
        return None


def is_representable_name(name: str) -> bool:
    """Return whether ``name`` survives encoding into the working text encoding."""
    try:
        name.encode(NAME_ENCODING)
    except UnicodeEncodeError:
        return False
    return True


def _build_record(entry: os.DirEntry[str], path: Path, root: Path, is_dir: bool, depth: int) -> FileRecord:
    """Resolve best-effort metadata for one surviving entry."""
    size = safe_file_size(entry, is_dir)
    modified = safe_mtime(entry)
    relative_path = safe_relative_path(path, root)
    return FileRecord(
        path=path,
        relative_path=relative_path if relative_path is not None else path,
        name=entry.name,
        is_dir=is_dir,
        size=size if size is not None else 0,
        modified=modified if modified is not None else "",
        depth=depth,
    )


def enumerate_records(root: str | Path, options: ListOptions) -> list[FileRecord]:
    """Walk ``root`` depth-first and return records in pre-order.

    The root itself produces no record; its children are depth 1. Entries
    deeper than ``options.depth`` are pruned together with their subtrees.
    Filters only decide whether a record is emitted: directories that fail
    them are still descended into. Raises ``PathError`` when ``root`` does not
    exist. A directory iteration failure other than permission denied stops
    the walk with a warning and returns what was collected so far.
    """
    root_text = str(root)
    root_path = Path(os.path.abspath(root_text))
    if not root_path.exists():
        raise PathError(root_text)

    name_filter = NameFilter(include=options.include_filter, exclude=options.exclude_filter)
    records: list[FileRecord] = []

    def walk(directory: Path, depth: int, representable: bool) -> None:
        """Scan one directory and recurse into eligible subdirectories.

        ``representable`` is false below a directory whose name cannot be
        encoded; such subtrees are still walked but emit no records.
        """
        try:
            scan = os.scandir(directory)
        except PermissionError:
            logger.debug("skipping unreadable directory %s", directory)
            return

        with scan as entries:
            for entry in entries:
                is_dir = safe_is_dir(entry)
                if is_dir is None:
                    continue
                if not options.depth_allows(depth):
                    continue

                name = entry.name
                child_path = directory / name
                child_representable = representable and is_representable_name(name)
                if not child_representable:
                    logger.debug("skipping entry with unrepresentable path in %s", directory)
                elif name_filter.accepts(name) and options.type_allows(is_dir):
                    records.append(_build_record(entry, child_path, root_path, is_dir, depth))

                # Directory symlinks are listed but never followed.
                if is_dir and options.depth_allows(depth + 1) and not safe_is_symlink(entry):
                    walk(child_path, depth + 1, child_representable)

    try:
        walk(root_path, 1, True)
    except OSError as exc:
        logger.warning("%s", TraversalError(str(exc)))
    return records


def list_files(root: str | Path, options: ListOptions) -> list[FileRecord]:
    """Enumerate ``root``, reporting a missing root and returning no records."""
    try:
        return enumerate_records(root, options)
    except PathError as exc:
        logger.error("%s", exc)
        return []


__all__ = [
    "safe_is_dir",
    "safe_is_symlink",
    "safe_file_size",
    "safe_mtime",
    "safe_relative_path",
    "is_representable_name",
    "enumerate_records",
    "list_files",
]
