"""Integer conversions: signed decimal, unsigned, octal, hex and pointers."""

from __future__ import annotations

import operator
from dataclasses import replace

from .spec import Flag, FormatSpec, Length

_BITS = {
    int(Length.NONE): 32,
    int(Length.HH): 8,
    int(Length.H): 16,
    int(Length.L): 64,
}
_DEFAULT_BITS = 64
_BASES = {8: "o", 10: "d"}


def _bits(length: int) -> int:
    return _BITS.get(int(length), _DEFAULT_BITS)


def _integer(value: object) -> int:
    try:
        return operator.index(value)
    except TypeError:
        raise TypeError(
            f"integer conversion needs an int, got {type(value).__name__}"
        ) from None


def to_signed(value: int, length: int) -> int:
    """Reduce ``value`` to the signed type the length modifier names."""
    modulus = 1 << _bits(length)
    number = _integer(value) % modulus
    return number - modulus if number >= modulus >> 1 else number


def to_unsigned(value: int, length: int) -> int:
    """Reduce ``value`` to the unsigned type the length modifier names."""
    return _integer(value) % (1 << _bits(length))


def _pad(body: str, spec: FormatSpec, fill: str, lead: str = "") -> str:
    padding = max(spec.width, len(lead) + len(body)) - len(lead) - len(body)
    if spec.flags & Flag.MINUS:
        return lead + body + " " * padding
    return lead + fill * padding + body


def _zero_fill(spec: FormatSpec) -> bool:
    flags = spec.flags
    return bool(flags & Flag.ZERO) and not flags & Flag.MINUS and spec.precision < 0


def format_signed(value: int, spec: FormatSpec) -> str:
    """Render a ``d`` or ``i`` conversion."""
    number = to_signed(value, spec.length)
    flags = spec.flags
    if number == 0 and spec.precision == 0:
        digits = ""
    else:
        digits = str(abs(number)).zfill(spec.precision)
    if number < 0:
        sign = "-"
    elif flags & Flag.PLUS:
        sign = "+"
    elif flags & Flag.SPACE:
        sign = " "
    else:
        sign = ""
    if _zero_fill(spec):
        return _pad(digits, spec, "0", lead=sign)
    return _pad(sign + digits, spec, " ")


def format_unsigned(value: int, spec: FormatSpec, base: int) -> str:
    """Render a ``u`` (base 10) or ``o`` (base 8) conversion."""
    if base not in _BASES:
        raise ValueError(f"unsupported base {base}, expected 8 or 10")
    number = to_unsigned(value, spec.length)
    hashed = bool(spec.flags & Flag.HASH)
    if number == 0:
        if spec.precision == 0 and not hashed:
            digits = ""
        else:
            digits = "0" * max(1, spec.precision)
    else:
        digits = format(number, _BASES[base])
        if hashed and base == 8:
            digits = "0" + digits
        digits = digits.zfill(spec.precision)
    return _pad(digits, spec, "0" if _zero_fill(spec) else " ")


def _render_hex(number: int, spec: FormatSpec, upper: bool) -> str:
    prefix = "0X" if upper else "0x"
    zero_fill = _zero_fill(spec)
    fill = "0" if zero_fill else " "
    if number == 0:
        body = "" if spec.precision == 0 else "0" * max(1, spec.precision)
        return _pad(body, spec, fill)
    digits = format(number, "X" if upper else "x").zfill(spec.precision)
    if spec.flags & Flag.HASH:
        if zero_fill:
            return _pad(digits, spec, fill, lead=prefix)
        return _pad(prefix + digits, spec, fill)
    return _pad(digits, spec, fill)


def format_hex(value: int, spec: FormatSpec, upper: bool = False) -> str:
    """Render an ``x`` conversion, or ``X`` when ``upper`` is true."""
    return _render_hex(to_unsigned(value, spec.length), spec, upper)


def format_pointer(value: int, spec: FormatSpec) -> str:
    """Render a ``p`` conversion: a 64-bit address in lower-case hex.

    The ``#`` flag is added to the given flags by addition, so a ``#``
    already present carries into the next flag.
    """
    flags = Flag((int(spec.flags) + int(Flag.HASH)) & 0xFF)
    pointer_spec = replace(spec, flags=flags, length=Length.L)
    number = to_unsigned(value, Length.L)
    if number == 0:
        body = "0x" if spec.precision == 0 else "0x0"
        return _pad(body, pointer_spec, " ")
    return _render_hex(number, pointer_spec, False)