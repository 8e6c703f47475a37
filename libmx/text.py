"""String helpers: searching, counting, splitting, trimming and replacing."""

from __future__ import annotations

import re

_WHITESPACE = "\t\n\v\f\r "
_WHITESPACE_RUN = re.compile(r"[\t\n\v\f\r ]+")


def str_reverse(s: str) -> str:
    """Return the string reversed."""
    return s[::-1]


def get_char_index(s: str, c: str) -> int:
    """Return the index of the first ``c`` in ``s``, or -1."""
    if len(c) != 1:
        raise ValueError("expected a single character")
    return s.find(c)


def strndup(s: str | None, n: int) -> str:
    """Return at most the first ``n`` characters of ``s``."""
    if s is None:
        if n == 0:
            return ""
        raise ValueError("no string to copy")
    return s[:n]


def strstr(haystack: str | None, needle: str) -> str | None:
    """Return the tail of ``haystack`` starting at ``needle``, or None."""
    if haystack is None:
        if not needle:
            return None
        raise ValueError("no string to search")
    index = haystack.find(needle)
    return haystack[index:] if index >= 0 else None


def get_substr_index(s: str, sub: str) -> int:
    """Return the index of the first ``sub`` in ``s``, or -1."""
    return s.find(sub)


def count_substr(s: str, sub: str) -> int:
    """Count occurrences of ``sub`` in ``s``, overlapping ones included."""
    if not sub:
        return 0
    count = 0
    start = s.find(sub)
    while start != -1:
        count += 1
        start = s.find(sub, start + 1)
    return count


def count_words(s: str, c: str) -> int:
    """Count the runs of characters other than the delimiter ``c``."""
    return sum(1 for part in s.split(c) if part)


def strtrim(s: str) -> str:
    """Strip leading and trailing whitespace."""
    return s.strip(_WHITESPACE)


def del_extra_spaces(s: str) -> str:
    """Trim ``s`` and collapse each inner whitespace run to a single space."""
    return " ".join(word for word in _WHITESPACE_RUN.split(s) if word)


def strsplit(s: str, c: str) -> list[str]:
    """Split ``s`` on ``c``, dropping empty pieces."""
    return [part for part in s.split(c) if part]


def strjoin(s1: str | None, s2: str | None) -> str | None:
    """Concatenate two strings; a missing one is treated as absent."""
    if s1 is None and s2 is None:
        return None
    return (s1 or "") + (s2 or "")


def file_to_str(path: str) -> str:
    """Return the whole contents of a text file."""
    with open(path, encoding="utf-8", newline="") as handle:
        return handle.read()


def replace_substr(s: str, sub: str, replace: str) -> str:
    """Replace every non-overlapping ``sub`` in ``s``, scanning left to right."""
    if not sub:
        return s
    return s.replace(sub, replace)