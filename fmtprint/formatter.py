"""The formatted-output entry points."""

from __future__ import annotations

import os
import sys
from collections.abc import Callable, Iterator

from .floats import format_float
from .integers import format_hex, format_pointer, format_signed, format_unsigned
from .spec import FormatSpec, parse_spec
from .strings import strlen
from .text import format_char, format_percent, format_string

_STDOUT_FILENO = 1

_CONVERSIONS: dict[str, Callable[[object, FormatSpec], str]] = {
    "d": format_signed,
    "i": format_signed,
    "o": lambda value, spec: format_unsigned(value, spec, 8),
    "u": lambda value, spec: format_unsigned(value, spec, 10),
    "x": format_hex,
    "X": lambda value, spec: format_hex(value, spec, True),
    "f": format_float,
    "c": format_char,
    "s": format_string,
    "p": format_pointer,
}


def _convert(spec: FormatSpec, args: Iterator[object]) -> str:
    if spec.conversion == "%":
        return format_percent(spec)
    if not spec.conversion:
        raise ValueError("incomplete conversion at the end of the format")
    handler = _CONVERSIONS.get(spec.conversion)
    if handler is None:
        raise ValueError(f"unknown conversion {spec.conversion!r}")
    try:
        value = next(args)
    except StopIteration:
        raise ValueError(f"missing argument for %{spec.conversion}") from None
    return handler(value, spec)


def _pieces(fmt: str, args: Iterator[object]) -> Iterator[str]:
    text = fmt[:strlen(fmt)]
    pos = 0
    while pos < len(text):
        start = text.find("%", pos)
        if start < 0:
            yield text[pos:]
            return
        yield text[pos:start]
        spec, pos = parse_spec(text, start + 1, args)
        yield _convert(spec, args)


def sprintf(fmt: str, *args: object) -> str:
    """Format ``args`` by the conversions in ``fmt`` and return the text.

    The format ends at its first NUL. Unknown or incomplete conversions and
    missing arguments raise ValueError; unused arguments are ignored.
    """
    return "".join(_pieces(fmt, iter(args)))


def printf(fmt: str, *args: object) -> int:
    """Write the formatted text to standard output; return its length."""
    text = sprintf(fmt, *args)
    sys.stdout.flush()
    view = memoryview(text.encode("utf-8"))
    while view:
        written = os.write(_STDOUT_FILENO, view)
        view = view[written:]
    return len(text)