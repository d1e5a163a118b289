"""Name matching for include/exclude filters.

A pattern-spec is either ``regex:<expression>`` (full-string regular
expression match) or a comma-separated list of shell-style wildcards where
``*`` matches any run of characters and ``?`` exactly one. Matching is
case-sensitive and always against the entry's base name.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from functools import lru_cache

REGEX_PREFIX = "regex:"
_PATTERN_STRIP_CHARS = " \t"


def wildcard_match(text: str, pattern: str) -> bool:
    """Match ``text`` against ``*``/``?`` wildcards with star backtracking.

    Keeps the position of the most recent ``*`` and the text index it started
    consuming from; on mismatch the star absorbs one more character and
    matching resumes just past it.
    """
    i = 0
    j = 0
    star_idx = -1
    match_idx = 0
    text_len = len(text)
    pattern_len = len(pattern)

    while i < text_len:
        if j < pattern_len and (pattern[j] == "?" or pattern[j] == text[i]):
            i += 1
            j += 1
        elif j < pattern_len and pattern[j] == "*":
            star_idx = j
            j += 1
            match_idx = i
        elif star_idx != -1:
            j = star_idx + 1
            match_idx += 1
            i = match_idx
        else:
            return False

    while j < pattern_len and pattern[j] == "*":
        j += 1
    return j == pattern_len


@lru_cache(maxsize=64)
def _compile_regex(expression: str) -> re.Pattern[str] | None:
    """Compile a ``regex:`` expression, returning ``None`` when malformed."""
    try:
        return re.compile(expression)
    except re.error:
        return None


@lru_cache(maxsize=64)
def split_wildcards(pattern_spec: str) -> tuple[str, ...]:
    """Split a comma-separated spec into trimmed wildcard sub-patterns."""
    return tuple(part.strip(_PATTERN_STRIP_CHARS) for part in pattern_spec.split(","))


def matches(name: str, pattern_spec: str) -> bool:
    """Return whether ``name`` satisfies ``pattern_spec``.

    An empty spec matches everything. A malformed ``regex:`` expression
    matches nothing.
    """
    if not pattern_spec:
        return True

    if pattern_spec.startswith(REGEX_PREFIX):
        compiled = _compile_regex(pattern_spec[len(REGEX_PREFIX) :])
        if compiled is None:
            return False
        return compiled.fullmatch(name) is not None

    return any(wildcard_match(name, pattern) for pattern in split_wildcards(pattern_spec))


def excluded(name: str, exclude_spec: str) -> bool:
    """Return whether ``name`` is rejected by a non-empty exclude spec."""
    if not exclude_spec:
        return False
    return matches(name, exclude_spec)


@dataclass(frozen=True)
class NameFilter:
    """Include/exclude pair applied to entry names during a walk."""

    include: str = ""
    exclude: str = ""

    def accepts(self, name: str) -> bool:
        """Return whether ``name`` passes the include filter and dodges the exclude."""
        if not matches(name, self.include):
            return False
        return not excluded(name, self.exclude)


__all__ = [
    "REGEX_PREFIX",
    "wildcard_match",
    "split_wildcards",
    "matches",
    "excluded",
    "NameFilter",
]
