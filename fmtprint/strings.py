"""Searching and comparing NUL-terminated text.

A string ends at its first NUL character, if it has one; anything after it
is ignored, as in a C string.
"""

from __future__ import annotations

from itertools import zip_longest

_NUL = "\0"


def _terminated(s: str) -> str:
    """Return ``s`` up to, not including, its first NUL."""
    end = s.find(_NUL)
    return s if end < 0 else s[:end]


def _as_char(c: int | str) -> str:
    """Return ``c`` as a one-character string; integer codes wrap to a byte."""
    if isinstance(c, str):
        if len(c) != 1:
            raise TypeError(f"expected a single character, got a string of length {len(c)}")
        return c
    if isinstance(c, int):
        return chr(c % 256)
    raise TypeError(f"expected a character or an integer code, got {type(c).__name__}")


def _compare(s1: str, s2: str, limit: int | None = None) -> int:
    """Difference of the first differing characters, looking at most ``limit`` of them."""
    pairs = zip_longest(_terminated(s1), _terminated(s2), fillvalue=_NUL)
    for count, (a, b) in enumerate(pairs):
        if limit is not None and count >= limit:
            break
        if a != b:
            return ord(a) - ord(b)
    return 0


def strlen(s: str) -> int:
    """Number of characters before the terminator."""
    return len(_terminated(s))


def strchr(s: str, c: int | str) -> int | None:
    """Index of the first ``c`` in ``s``, or None.

    Searching for NUL finds the terminator at index ``strlen(s)``.
    """
    text = _terminated(s)
    char = _as_char(c)
    if char == _NUL:
        return len(text)
    index = text.find(char)
    return None if index < 0 else index


def strrchr(s: str, c: int | str) -> int | None:
    """Index of the last ``c`` in ``s``, or None.

    Searching for NUL finds the terminator at index ``strlen(s)``.
    """
    text = _terminated(s)
    char = _as_char(c)
    if char == _NUL:
        return len(text)
    index = text.rfind(char)
    return None if index < 0 else index


def strstr(haystack: str, needle: str) -> int | None:
    """Index of the first occurrence of ``needle`` in ``haystack``, or None.

    An empty needle is found at index 0.
    """
    text = _terminated(haystack)
    pattern = _terminated(needle)
    if not pattern:
        return 0
    index = text.find(pattern)
    return None if index < 0 else index


def strnstr(haystack: str, needle: str, length: int) -> int | None:
    """Like :func:`strstr`, but the match must lie in the first ``length`` characters."""
    text = _terminated(haystack)
    pattern = _terminated(needle)
    if not pattern:
        return 0
    last_start = min(len(text) - 1, length - len(pattern))
    index = text.find(pattern, 0, last_start + len(pattern)) if last_start >= 0 else -1
    return None if index < 0 else index


def strcmp(s1: str, s2: str) -> int:
    """Compare two strings; negative, zero or positive like the C function."""
    return _compare(s1, s2)


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most the first ``n`` characters of two strings."""
    if n <= 0:
        return 0
    return _compare(s1, s2, n)


def strequ(s1: str | None, s2: str | None) -> bool:
    """True when both strings are given and equal."""
    if s1 is None or s2 is None:
        return False
    return _compare(s1, s2) == 0


def strnequ(s1: str | None, s2: str | None, n: int) -> bool:
    """True when both strings are given and their first ``n`` characters match."""
    if s1 is None or s2 is None:
        return False
    if n <= 0:
        return True
    return _compare(s1, s2, n) == 0