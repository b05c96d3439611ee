"""Floating-point conversions: exact decimal expansion, rounding and padding."""

from __future__ import annotations

import math
import struct

from .digits import (
    fraction_digits,
    integer_digits,
    propagate_carry,
    round_to_precision,
    rounding_digit,
)
from .spec import Flag, FormatSpec, Length

_MASK64 = (1 << 64) - 1
_DEFAULT_PRECISION = 6
_INT_LIMIT = 1 << 31
_DOUBLE_SPECIAL = 0x7FF
_EXTENDED_SPECIAL = 0x7FFF
_QUIET_BIT = 1 << 62


def _real(value: object) -> float:
    if not isinstance(value, (int, float)):
        raise TypeError(f"float conversion needs a number, got {type(value).__name__}")
    return float(value)


def _double_fields(x: float) -> tuple[int, int, int]:
    """Sign bit, 11-bit biased exponent and 52-bit fraction of a double."""
    bits = struct.unpack(">Q", struct.pack(">d", x))[0]
    return bits >> 63, (bits >> 52) & 0x7FF, bits & ((1 << 52) - 1)


def _extended_fields(x: float) -> tuple[int, int, int]:
    """Sign bit, 15-bit biased exponent and 64-bit mantissa of ``x`` as an
    80-bit extended value, whose mantissa holds the integer bit explicitly."""
    sign = 1 if math.copysign(1.0, x) < 0 else 0
    if math.isnan(x):
        return sign, _EXTENDED_SPECIAL, (1 << 63) | _QUIET_BIT
    if math.isinf(x):
        return sign, _EXTENDED_SPECIAL, 1 << 63
    if x == 0:
        return sign, 0, 0
    fraction, exponent = math.frexp(abs(x))
    return sign, exponent - 1 + 16383, int(fraction * 2.0**64)


def _double_mantissas(exponent: int, fraction: int) -> tuple[int, int, int, int]:
    """Integer bits and exponent, fraction bits and exponent of a double."""
    implicit = 1
    if exponent == 0:
        exponent = 1
        implicit = 0
    shift = min(max(-1, exponent - 1023), 52)
    if shift < 0:
        frac = ((fraction << 11) + (implicit << 63)) & _MASK64
    else:
        frac = 0 if 12 + shift >= 64 else (fraction << (12 + shift)) & _MASK64
    whole = fraction >> (52 - max(shift, 0))
    if shift >= 0:
        whole += implicit << shift
    return whole, exponent - 1023 - shift, frac, min(exponent - 1023, -1)


def _extended_mantissas(exponent: int, mantissa: int) -> tuple[int, int, int, int]:
    """Integer bits and exponent, fraction bits and exponent of an extended value."""
    unbiased = exponent - 16382 - min(1, exponent)
    shift = min(max(unbiased, -1), 63)
    if shift >= 0:
        frac = (mantissa << (shift + 1)) & _MASK64
        whole = mantissa >> (63 - shift)
    else:
        frac = mantissa
        whole = 0
    return whole, unbiased - shift, frac, min(unbiased, -1)


def _resolve(spec: FormatSpec) -> tuple[int, int]:
    precision = spec.precision
    if precision == -1 or precision >= _INT_LIMIT:
        precision = _DEFAULT_PRECISION
    elif precision < 0:
        raise ValueError(f"negative precision {precision} for a float conversion")
    width = -1 if spec.width >= _INT_LIMIT else spec.width
    return precision, width


def _expand(parts: tuple[int, int, int, int], precision: int) -> tuple[list[int], list[int]]:
    whole, int_exp, frac, frac_exp = parts
    fraction = fraction_digits(frac, frac_exp)
    if precision == 0:
        integer, carry = propagate_carry(
            integer_digits(whole, int_exp, 0), rounding_digit(fraction)
        )
        if carry:
            integer = [carry, *integer]
        return integer, []
    fraction, carry = round_to_precision(fraction, precision)
    return integer_digits(whole, int_exp, carry), fraction


def _render(
    integer: list[int], fraction: list[int], spec: FormatSpec,
    precision: int, width: int, negative: bool,
) -> str:
    flags = spec.flags
    plus = bool(flags & Flag.PLUS)
    sign = "-" if negative else "+" if plus else ""
    blank = " " if not negative and not plus and flags & Flag.SPACE else ""
    body = "".join(map(str, integer))
    if precision != 0:
        body += "." + "".join(map(str, fraction))
    elif flags & Flag.HASH:
        body += "."
    padding = max(width - len(blank) - len(sign) - len(body), 0)
    if flags & Flag.MINUS:
        return blank + sign + body + " " * padding
    if flags & Flag.ZERO:
        return blank + sign + "0" * padding + body
    return blank + " " * padding + sign + body


def _finite(parts: tuple[int, int, int, int], spec: FormatSpec, negative: bool) -> str:
    precision, width = _resolve(spec)
    integer, fraction = _expand(parts, precision)
    return _render(integer, fraction, spec, precision, width, negative)


def pad_special(text: str, spec: FormatSpec, sign: int | None) -> str:
    """Pad an infinity or NaN to the width with spaces.

    ``sign`` is the value's sign bit; when it is 0 the ``+`` or space flag
    adds a prefix. ``None`` means the text takes no prefix at all.
    """
    prefix = ""
    if sign is not None and not sign:
        if spec.flags & Flag.PLUS:
            prefix = "+"
        elif spec.flags & Flag.SPACE:
            prefix = " "
    body = prefix + text
    padding = max(spec.width, len(body)) - len(body)
    if spec.flags & Flag.MINUS:
        return body + " " * padding
    return " " * padding + body


def format_double(value: float, spec: FormatSpec) -> str:
    """Render an ``f`` conversion of a double, with exact decimal digits."""
    sign, exponent, fraction = _double_fields(_real(value))
    if exponent == _DOUBLE_SPECIAL:
        if fraction:
            return pad_special("nan", spec, None)
        return pad_special("-inf" if sign else "inf", spec, sign)
    return _finite(_double_mantissas(exponent, fraction), spec, bool(sign))


def format_long_double(value: float, spec: FormatSpec) -> str:
    """Render an ``Lf`` conversion of an extended-precision value.

    Infinities and NaN are written bare, without padding or sign flags.
    """
    sign, exponent, mantissa = _extended_fields(_real(value))
    if exponent == _EXTENDED_SPECIAL:
        if mantissa & _QUIET_BIT or mantissa & (_QUIET_BIT - 1):
            return "nan"
        return "-inf" if sign else "inf"
    return _finite(_extended_mantissas(exponent, mantissa), spec, bool(sign))


def format_float(value: float, spec: FormatSpec) -> str:
    """Render an ``f`` conversion, as extended precision under ``L``."""
    if spec.length == Length.BIG_L:
        return format_long_double(value, spec)
    return format_double(value, spec)