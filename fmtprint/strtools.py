"""Building, transforming and splitting strings.

Input strings end at their first NUL character, if they have one, as C
strings do. Functions given ``None`` where a string is expected return
``None`` or do nothing, matching the library's handling of null pointers.
"""

from __future__ import annotations

from collections.abc import Callable

from .strings import strlen

_TRIMMED = " \n\t"


def _text(s: str) -> str:
    """``s`` up to, not including, its first NUL."""
    return s[:strlen(s)]


def _delimiter(c: int | str) -> str:
    if isinstance(c, str):
        if len(c) != 1:
            raise TypeError(f"expected a single character, got a string of length {len(c)}")
        return c
    if isinstance(c, int):
        return chr(c % 256)
    raise TypeError(f"expected a character or an integer code, got {type(c).__name__}")


def striter(s: str | None, f: Callable[[str], object] | None) -> None:
    """Call ``f`` on each character of ``s``."""
    if s is None or f is None:
        return
    for char in _text(s):
        f(char)


def striteri(s: str | None, f: Callable[[int, str], object] | None) -> None:
    """Call ``f`` with the index and the character for each character of ``s``."""
    if s is None or f is None:
        return
    for index, char in enumerate(_text(s)):
        f(index, char)


def strmap(s: str | None, f: Callable[[str], str] | None) -> str | None:
    """A new string of ``f`` applied to each character of ``s``."""
    if s is None or f is None:
        return None
    return "".join(f(char) for char in _text(s))


def strmapi(s: str | None, f: Callable[[int, str], str] | None) -> str | None:
    """A new string of ``f(index, char)`` for each character of ``s``."""
    if s is None or f is None:
        return None
    return "".join(f(index, char) for index, char in enumerate(_text(s)))


def strsub(s: str | None, start: int, length: int) -> str | None:
    """The ``length`` characters of ``s`` beginning at ``start``.

    Raises IndexError when the range does not lie within ``s``.
    """
    if s is None:
        return None
    if start < 0 or length < 0 or start + length > len(s):
        raise IndexError(
            f"substring [{start}, {start + length}) out of range for length {len(s)}"
        )
    return _text(s[start:start + length])


def strjoin(s1: str | None, s2: str | None) -> str | None:
    """``s1`` followed by ``s2``; None if either is missing."""
    if s1 is None or s2 is None:
        return None
    return _text(s1) + _text(s2)


def strtrim(s: str | None) -> str | None:
    """``s`` without leading and trailing spaces, newlines and tabs."""
    if s is None:
        return None
    return _text(s).strip(_TRIMMED)


def strsplit(s: str | None, c: int | str) -> list[str] | None:
    """The non-empty runs of ``s`` separated by the character ``c``."""
    if s is None:
        return None
    delimiter = _delimiter(c)
    return [word for word in _text(s).split(delimiter) if word]