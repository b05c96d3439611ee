"""Exact decimal digits of binary numbers, and rounding of digit sequences.

Digit sequences are lists of ints from 0 to 9, most significant first.
"""

from __future__ import annotations

from collections.abc import Sequence

_MASK64 = (1 << 64) - 1


def _to_digits(text: str) -> list[int]:
    return [int(ch) for ch in text]


def _require_digits(digits: Sequence[int]) -> None:
    if not digits:
        raise ValueError("digit sequence must not be empty")


def fraction_digits(mantissa: int, exponent: int) -> list[int]:
    """Exact decimal digits after the point of a 64-bit binary fraction.

    Bit 63 of ``mantissa`` is worth ``2**exponent``, bit 62 half that, and so
    on. The result holds exactly as many digits as the value needs; a zero
    mantissa gives ``[0]``. ``exponent`` must be -1 or less.
    """
    if exponent > -1:
        raise ValueError(f"fraction exponent must be negative, got {exponent}")
    bits = mantissa & _MASK64
    if bits == 0:
        return [0]
    trailing = (bits & -bits).bit_length() - 1
    places = 63 - trailing - exponent
    scaled = (bits >> trailing) * 5**places
    return _to_digits(str(scaled).zfill(places))


def integer_digits(mantissa: int, exponent: int, carry: int) -> list[int]:
    """Decimal digits of ``carry + mantissa * 2**max(exponent, 0)``.

    ``mantissa`` is taken as a 64-bit unsigned value.
    """
    if carry < 0:
        raise ValueError(f"carry must not be negative, got {carry}")
    bits = mantissa & _MASK64
    return _to_digits(str(carry + (bits << max(exponent, 0))))


def round_half_even(digit: int, next_digit: int) -> int:
    """Round ``digit`` by the digit that follows it.

    Below 5 keeps the digit, above 5 adds one, and exactly 5 rounds to even,
    except that a 9 stays 9. The result may be 10.
    """
    if next_digit < 5:
        return digit
    if next_digit > 5:
        return digit + 1
    if digit % 2 == 0 or digit == 9:
        return digit
    return digit + 1


def rounding_digit(digits: Sequence[int]) -> int:
    """The digit that decides rounding for a dropped tail of digits.

    It is the tail's first digit, except that a 5 with more digits after it
    counts as 6.
    """
    _require_digits(digits)
    first = digits[0]
    if first == 5 and len(digits) > 1:
        return 6
    return first


def propagate_carry(digits: Sequence[int], next_digit: int) -> tuple[list[int], int]:
    """Round the last of ``digits`` by ``next_digit`` and carry leftwards.

    Returns the new digits, of the same length, and the carry out of the
    first digit.
    """
    _require_digits(digits)
    size = len(digits)
    number = int("".join(map(str, digits))) - digits[-1]
    number += round_half_even(digits[-1], next_digit)
    carry, rest = divmod(number, 10**size)
    return _to_digits(str(rest).zfill(size)), carry


def round_to_precision(digits: Sequence[int], precision: int) -> tuple[list[int], int]:
    """Cut or pad fraction digits to ``precision`` places, rounding the cut.

    Returns the new digits and the carry into the integer part.
    """
    if precision < 1:
        raise ValueError(f"precision must be at least 1, got {precision}")
    if len(digits) <= precision:
        return list(digits) + [0] * (precision - len(digits)), 0
    return propagate_carry(digits[:precision], rounding_digit(digits[precision:]))