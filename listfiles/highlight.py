"""Terminal colorizing for rendered documents.

JSON goes through Pygments; tree documents get ANSI colors on their glyphs and
type tags. Terminal control bytes are neutralized first so entry names cannot
move the cursor or ring the bell.
"""

from __future__ import annotations

import re

from pygments import highlight as pygments_highlight
from pygments.formatters import TerminalFormatter
from pygments.lexers import JsonLexer

from .options import OutputFormat
from .render.tree import DIR_TAG, FILE_TAG, TREE_BRANCH, TREE_INDENT

_LAYOUT_CHARS = "\n\r\t"
_CONTROL_ESCAPES = {
    code: f"\\x{code:02x}" for code in (*range(0x20), *range(0x7F, 0xA0)) if chr(code) not in _LAYOUT_CHARS
}

DIR_COLOR = "\033[1;34m"
FILE_COLOR = "\033[38;5;252m"
BRANCH_COLOR = "\033[2;38;5;245m"
RESET = "\033[0m"

_TREE_ROW_RE = re.compile(
    rf"^((?:{re.escape(TREE_INDENT)})*{re.escape(TREE_BRANCH)})({re.escape(DIR_TAG)}|{re.escape(FILE_TAG)})"
)


def escape_control_chars(name: str) -> str:
    """Replace terminal control characters in ``name`` with visible ``\\xNN`` escapes.

    Line breaks and tabs pass through so the document layout survives.
    """
    return name.translate(_CONTROL_ESCAPES)


def colorize_json(document: str) -> str:
    """Highlight a JSON document with Pygments, returning it unchanged on failure."""
    try:
        return pygments_highlight(document, JsonLexer(), TerminalFormatter())
    except Exception:
        return document


def _colorize_tree_row(match: re.Match[str]) -> str:
    glyphs, tag = match.group(1), match.group(2)
    tag_color = DIR_COLOR if tag == DIR_TAG else FILE_COLOR
    return f"{BRANCH_COLOR}{glyphs}{RESET}{tag_color}{tag}{RESET}"


def colorize_tree(document: str) -> str:
    """Color tree glyphs and ``[DIR]``/``[FILE]`` tags row by row."""
    lines = document.split("\n")
    if lines and lines[0]:
        lines[0] = f"{DIR_COLOR}{lines[0]}{RESET}"
    for idx in range(1, len(lines)):
        lines[idx] = _TREE_ROW_RE.sub(_colorize_tree_row, lines[idx], count=1)
    return "\n".join(lines)


def colorize_document(document: str, output_format: OutputFormat) -> str:
    """Return a terminal-safe, colorized rendition of ``document``."""
    safe = escape_control_chars(document)
    if output_format is OutputFormat.JSON:
        return colorize_json(safe)
    if output_format is OutputFormat.TREE:
        return colorize_tree(safe)
    return safe


__all__ = [
    "escape_control_chars",
    "colorize_json",
    "colorize_tree",
    "colorize_document",
]
