"""Human-readable size and timestamp formatting shared by records and renderers."""

from __future__ import annotations

from datetime import datetime

KIB = 1024
MIB = 1024 * 1024
TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M"


def format_size(size_bytes: int) -> str:
    """Format a byte count as ``B``, ``KB`` or ``MB`` with one decimal above bytes."""
    if size_bytes < KIB:
        return f"{size_bytes} B"
    if size_bytes < MIB:
        return f"{size_bytes / KIB:.1f} KB"
    return f"{size_bytes / MIB:.1f} MB"


def format_timestamp(epoch_seconds: float) -> str:
    """Format a POSIX timestamp as local wall-clock time truncated to the minute."""
    return datetime.fromtimestamp(epoch_seconds).strftime(TIMESTAMP_FORMAT)


__all__ = ["KIB", "MIB", "TIMESTAMP_FORMAT", "format_size", "format_timestamp"]
