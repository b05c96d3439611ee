"""Parsing of conversion specifications: flags, width, precision, length."""

from __future__ import annotations

import enum
import operator
from collections.abc import Iterator
from dataclasses import dataclass

from .chars import is_digit

_WHITESPACE = frozenset(" \t\v\f\r\n")


class Flag(enum.IntFlag):
    """Conversion flags."""

    NONE = 0
    SPACE = 1
    HASH = 2
    ZERO = 4
    MINUS = 8
    PLUS = 16


_FLAG_CHARS = {
    " ": Flag.SPACE,
    "#": Flag.HASH,
    "0": Flag.ZERO,
    "-": Flag.MINUS,
    "+": Flag.PLUS,
}


class Length(enum.IntEnum):
    """Length modifiers; a second modifier after the first adds one."""

    NONE = -1
    H = 0
    HH = 1
    L = 2
    LL = 3
    BIG_L = 4
    BIG_L_DOUBLED = 5


_LENGTH_CHARS = {"h": 0, "l": 2, "L": 4}


@dataclass(frozen=True)
class FormatSpec:
    """One parsed conversion. Width and precision are -1 when absent."""

    flags: Flag = Flag.NONE
    width: int = -1
    precision: int = -1
    length: Length = Length.NONE
    conversion: str = ""


def _wrap(value: int, bits: int) -> int:
    modulus = 1 << bits
    value %= modulus
    return value - modulus if value >= modulus // 2 else value


def parse_integer(text: str) -> int:
    """Parse a leading decimal integer after whitespace and one sign.

    Parsing stops at the first non-digit; no digits gives 0. The result
    wraps like a 64-bit signed integer.
    """
    pos = 0
    while pos < len(text) and text[pos] in _WHITESPACE:
        pos += 1
    sign = 1
    if pos < len(text) and text[pos] in "+-":
        if text[pos] == "-":
            sign = -1
        pos += 1
    value = 0
    while pos < len(text) and is_digit(text[pos]):
        value = value * 10 + int(text[pos])
        pos += 1
    return _wrap(value * sign, 64)


def _next_arg(args: Iterator[object], what: str) -> int:
    try:
        value = next(args)
    except StopIteration:
        raise ValueError(f"missing argument for {what}") from None
    return operator.index(value)


def _digits_end(text: str, pos: int) -> int:
    while pos < len(text) and is_digit(text[pos]):
        pos += 1
    return pos


def _parse_flags(text: str, pos: int) -> tuple[int, int]:
    flags = 0
    while pos < len(text) and text[pos] in _FLAG_CHARS:
        # Flags accumulate by addition in a byte, so a repeated flag
        # carries into the next bit.
        flags = (flags + _FLAG_CHARS[text[pos]]) & 0xFF
        pos += 1
    return flags, pos


def _parse_width(text: str, pos: int, args: Iterator[object], flags: int) -> tuple[int, int, int]:
    if pos < len(text) and is_digit(text[pos]):
        end = _digits_end(text, pos)
        return _wrap(parse_integer(text[pos:end]), 32), end, flags
    if pos < len(text) and text[pos] == "*":
        width = _wrap(_next_arg(args, "width"), 32)
        if width < 0:
            width = _wrap(-width, 32)
            flags = (flags + Flag.MINUS) & 0xFF
        return width, pos + 1, flags
    return -1, pos, flags


def _parse_precision(text: str, pos: int, args: Iterator[object]) -> tuple[int, int]:
    if pos >= len(text) or text[pos] != ".":
        return -1, pos
    pos += 1
    if pos < len(text) and text[pos] == "*":
        return _wrap(_next_arg(args, "precision"), 64), pos + 1
    if pos < len(text) and is_digit(text[pos]):
        end = _digits_end(text, pos)
        return parse_integer(text[pos:end]), end
    return 0, pos


def _parse_length(text: str, pos: int) -> tuple[Length, int]:
    first = _LENGTH_CHARS.get(text[pos]) if pos < len(text) else None
    if first is None:
        return Length.NONE, pos
    pos += 1
    second = _LENGTH_CHARS.get(text[pos]) if pos < len(text) else None
    if second in (0, 2):
        return Length(first + 1), pos + 1
    return Length(first), pos


def parse_spec(text: str, pos: int, args: Iterator[object]) -> tuple[FormatSpec, int]:
    """Parse the specification starting at ``pos``, just after a ``%``.

    ``*`` width and precision values are taken from the iterator ``args``.
    Returns the spec and the index after its conversion character. At the
    end of ``text`` the conversion is empty and the index is ``len(text)``.
    """
    flags, pos = _parse_flags(text, pos)
    width, pos, flags = _parse_width(text, pos, args, flags)
    precision, pos = _parse_precision(text, pos, args)
    length, pos = _parse_length(text, pos)
    conversion = text[pos] if pos < len(text) else ""
    spec = FormatSpec(
        flags=Flag(flags),
        width=width,
        precision=precision,
        length=length,
        conversion=conversion,
    )
    return spec, pos + 1 if conversion else pos