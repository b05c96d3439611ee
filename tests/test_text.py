import pytest

from fmtprint.spec import Flag, FormatSpec
from fmtprint.text import format_char, format_percent, format_string


@pytest.mark.parametrize(
    "spec, pyfmt",
    [
        (FormatSpec(), "%c"),
        (FormatSpec(width=4), "%4c"),
        (FormatSpec(flags=Flag.MINUS, width=4), "%-4c"),
        (FormatSpec(width=1), "%1c"),
    ],
)
def test_char_matches_standard_padding(spec, pyfmt):
    assert format_char("a", spec) == pyfmt % "a"


def test_char_from_integer_code():
    assert format_char(ord("A"), FormatSpec()) == "A"


def test_char_code_wraps_to_byte():
    assert format_char(256 + ord("A"), FormatSpec()) == format_char("A", FormatSpec())


def test_char_ignores_zero_flag():
    out = format_char("a", FormatSpec(flags=Flag.ZERO, width=3))
    assert len(out) == 3
    assert out.endswith("a")
    assert set(out[:-1]) == {" "}


def test_char_rejects_long_string():
    with pytest.raises(TypeError):
        format_char("ab", FormatSpec())


@pytest.mark.parametrize(
    "spec, pyfmt",
    [
        (FormatSpec(), "%s"),
        (FormatSpec(width=8), "%8s"),
        (FormatSpec(flags=Flag.MINUS, width=8), "%-8s"),
        (FormatSpec(precision=2), "%.2s"),
        (FormatSpec(width=8, precision=3), "%8.3s"),
        (FormatSpec(flags=Flag.MINUS, width=8, precision=3), "%-8.3s"),
        (FormatSpec(precision=0), "%.0s"),
        (FormatSpec(width=2), "%2s"),
    ],
)
def test_string_matches_standard_padding(spec, pyfmt):
    assert format_string("hello", spec) == pyfmt % "hello"


def test_string_none_prints_null():
    assert format_string(None, FormatSpec()) == "(null)"


def test_string_none_with_precision_is_cut():
    assert format_string(None, FormatSpec(precision=3)) == "%.3s" % "(null)"


def test_string_stops_at_nul():
    assert format_string("ab\0cd", FormatSpec()) == format_string("ab", FormatSpec())


def test_string_rejects_non_string():
    with pytest.raises(TypeError):
        format_string(5, FormatSpec())


def test_percent_plain():
    assert format_percent(FormatSpec()) == "%"


def test_percent_width_pads_after_sign():
    out = format_percent(FormatSpec(width=5))
    assert len(out) == 5
    assert out[0] == "%"
    assert set(out[1:]) == {" "}


def test_percent_zero_flag_pads_with_zeros():
    out = format_percent(FormatSpec(flags=Flag.ZERO, width=4))
    assert out[0] == "%"
    assert set(out[1:]) == {"0"}
    assert len(out) == 4


def test_percent_left_justified_carries_marker():
    out = format_percent(FormatSpec(flags=Flag.MINUS, width=3))
    assert out.endswith("%")
    assert out.count("lol") == 2