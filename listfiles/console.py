"""Process startup for the CLI: console encoding and diagnostics logging.

Both steps are explicit and run once from ``cli.main`` before any output.
"""

from __future__ import annotations

import logging
import sys
from typing import TextIO

CONSOLE_ENCODING = "utf-8"
CONSOLE_ERRORS = "surrogateescape"
LOGGER_NAME = "listfiles"

_LEVEL_LABELS = {
    logging.DEBUG: "Debug",
    logging.INFO: "Info",
    logging.WARNING: "Warning",
    logging.ERROR: "Error",
    logging.CRITICAL: "Error",
}


class DiagnosticFormatter(logging.Formatter):
    """Render records as ``Warning: <message>`` / ``Error: <message>`` lines."""

    def format(self, record: logging.LogRecord) -> str:
        label = _LEVEL_LABELS.get(record.levelno, record.levelname.title())
        return f"{label}: {record.getMessage()}"


def prepare_console() -> None:
    """Switch stdout/stderr to UTF-8 so tree glyphs and names print everywhere.

    Surrogate-escaped bytes from a non-UTF-8 root argument are echoed back as
    the original bytes instead of failing the write.
    """
    for stream in (sys.stdout, sys.stderr):
        reconfigure = getattr(stream, "reconfigure", None)
        if reconfigure is None:
            continue
        encoding = (getattr(stream, "encoding", "") or "").lower().replace("_", "-")
        if encoding == CONSOLE_ENCODING and getattr(stream, "errors", None) == CONSOLE_ERRORS:
            continue
        try:
            reconfigure(encoding=CONSOLE_ENCODING, errors=CONSOLE_ERRORS)
        except (OSError, ValueError):
            continue


def configure_logging(verbose: bool = False, stream: TextIO | None = None) -> logging.Handler:
    """Attach a single stderr diagnostics handler to the package logger.

    Repeated calls replace the previously installed handler instead of
    stacking duplicates.
    """
    logger = logging.getLogger(LOGGER_NAME)
    for existing in list(logger.handlers):
        if isinstance(existing.formatter, DiagnosticFormatter):
            logger.removeHandler(existing)

    handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    handler.setFormatter(DiagnosticFormatter())
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    logger.propagate = False
    return handler


__all__ = ["DiagnosticFormatter", "prepare_console", "configure_logging"]
