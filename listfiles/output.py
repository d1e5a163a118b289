"""Output sink: stdout or a file, with the ``--compress`` suffix fallback."""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import TextIO

from .errors import OutputError
from .highlight import colorize_document
from .options import ListOptions

logger = logging.getLogger(__name__)

COMPRESSED_SUFFIX = ".gz"
OUTPUT_ENCODING = "utf-8"
OUTPUT_ERRORS = "surrogateescape"


def _stream_is_tty(stream: TextIO) -> bool:
    try:
        return bool(stream.isatty())
    except (AttributeError, ValueError):
        return False


def resolve_output_path(options: ListOptions) -> str | None:
    """Return the file name the document goes to, ``None`` for stdout."""
    if not options.output_path:
        return None
    if options.compress:
        return options.output_path + COMPRESSED_SUFFIX
    return options.output_path


def write_output_file(document: str, path: str) -> None:
    """Write ``document`` verbatim in binary mode, raising ``OutputError`` on failure.

    Surrogate-escaped bytes (from a non-UTF-8 root argument) are written back
    as the original bytes. The document is encoded before the file is opened,
    so an unencodable document leaves no file behind.
    """
    try:
        data = document.encode(OUTPUT_ENCODING, errors=OUTPUT_ERRORS)
    except UnicodeEncodeError as exc:
        raise OutputError(path) from exc
    try:
        handle = open(path, "wb")
    except OSError as exc:
        raise OutputError(path) from exc
    with handle:
        handle.write(data)


def emit(document: str, options: ListOptions, stream: TextIO | None = None) -> Path | None:
    """Deliver a rendered document and return the written file path, if any.

    Without an output path the document goes to ``stream`` (stdout by default),
    colorized only when ``options.color`` is set and the stream is a terminal.
    A file that cannot be created is reported and nothing is written.
    """
    out = stream if stream is not None else sys.stdout
    target = resolve_output_path(options)
    if target is None:
        if options.color and _stream_is_tty(out):
            document = colorize_document(document, options.output_format)
        out.write(document)
        out.flush()
        return None

    if options.compress:
        logger.warning("gzip compression not implemented, outputting uncompressed file")

    try:
        write_output_file(document, target)
    except OutputError as exc:
        logger.error("%s", exc)
        return None

    out.write(f"Output saved to: {target}\n")
    return Path(target)


__all__ = ["COMPRESSED_SUFFIX", "resolve_output_path", "write_output_file", "emit"]
