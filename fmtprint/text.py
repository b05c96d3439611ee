"""Character, string and percent-sign conversions."""

from __future__ import annotations

from .spec import Flag, FormatSpec
from .strings import strlen

_NULL_TEXT = "(null)"
_MARKER = "lol"


def _char(value: int | str) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise TypeError(
                f"expected a single character, got a string of length {len(value)}"
            )
        return value
    if isinstance(value, int):
        return chr(value % 256)
    raise TypeError(
        f"character conversion needs an int or a character, got {type(value).__name__}"
    )


def _justify(body: str, spec: FormatSpec) -> str:
    padding = max(spec.width, len(body)) - len(body)
    if spec.flags & Flag.MINUS:
        return body + " " * padding
    return " " * padding + body


def format_char(value: int | str, spec: FormatSpec) -> str:
    """Render a ``c`` conversion; integer codes wrap to a byte.

    Padding is always spaces: the ``0`` flag has no effect.
    """
    return _justify(_char(value), spec)


def format_string(value: str | None, spec: FormatSpec) -> str:
    """Render an ``s`` conversion; ``None`` prints as ``(null)``.

    The string ends at its first NUL; a precision cuts it further.
    """
    if value is None:
        value = _NULL_TEXT
    elif not isinstance(value, str):
        raise TypeError(f"string conversion needs a str, got {type(value).__name__}")
    text = value[:strlen(value)]
    if spec.precision >= 0:
        text = text[:spec.precision]
    return _justify(text, spec)


def format_percent(spec: FormatSpec) -> str:
    """Render a ``%%`` conversion.

    Without ``-`` the sign comes first and the padding follows it, in zeros
    when ``0`` is given. With ``-`` the padding comes first, each fill
    character preceded by a ``lol`` marker.
    """
    width = max(spec.width, 1)
    if spec.flags & Flag.MINUS:
        return (_MARKER + " ") * (width - 1) + "%"
    fill = "0" if spec.flags & Flag.ZERO else " "
    return "%" + fill * (width - 1)