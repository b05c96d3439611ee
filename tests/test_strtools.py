import pytest

from fmtprint.strtools import (
    striter,
    striteri,
    strjoin,
    strmap,
    strmapi,
    strsplit,
    strsub,
    strtrim,
)


def test_striter_visits_every_character_in_order():
    seen = []
    striter("abc", seen.append)
    assert seen == ["a", "b", "c"]


def test_striter_stops_at_nul():
    seen = []
    striter("ab\0cd", seen.append)
    assert seen == ["a", "b"]


def test_striter_with_missing_arguments_does_nothing():
    seen = []
    striter(None, seen.append)
    striter("abc", None)
    assert seen == []


def test_striteri_passes_indices():
    seen = []
    striteri("xyz", lambda i, c: seen.append((i, c)))
    assert seen == [(0, "x"), (1, "y"), (2, "z")]


def test_strmap_applies_function():
    assert strmap("hello", str.upper) == "HELLO"


def test_strmap_preserves_length():
    text = "some text here"
    assert len(strmap(text, lambda c: "*")) == len(text)


def test_strmap_none_inputs():
    assert strmap(None, str.upper) is None
    assert strmap("abc", None) is None


def test_strmapi_uses_index():
    result = strmapi("aaaa", lambda i, c: c if i % 2 else c.upper())
    assert result == "AaAa"


def test_strmapi_none_inputs():
    assert strmapi(None, lambda i, c: c) is None


def test_strsub_extracts_range():
    assert strsub("hello world", 6, 5) == "world"


def test_strsub_empty_length():
    assert strsub("hello", 2, 0) == ""


def test_strsub_joins_back_to_whole():
    text = "abcdefgh"
    assert strsub(text, 0, 3) + strsub(text, 3, 5) == text


@pytest.mark.parametrize("start,length", [(-1, 2), (3, 5), (0, -1)])
def test_strsub_out_of_range(start, length):
    with pytest.raises(IndexError):
        strsub("hello", start, length)


def test_strsub_none():
    assert strsub(None, 0, 1) is None


def test_strjoin_concatenates():
    assert strjoin("foo", "bar") == "foobar"


def test_strjoin_missing_side():
    assert strjoin(None, "bar") is None
    assert strjoin("foo", None) is None


def test_strtrim_removes_spaces_tabs_newlines():
    assert strtrim(" \t\n hello world \n\t ") == "hello world"


def test_strtrim_keeps_other_whitespace():
    assert strtrim("\vword\r") == "\vword\r"


def test_strtrim_blank_gives_empty():
    assert strtrim(" \n\t ") == ""


def test_strtrim_is_idempotent():
    once = strtrim("  padded  ")
    assert strtrim(once) == once


def test_strsplit_drops_empty_runs():
    assert strsplit("**hello*world***", "*") == ["hello", "world"]


def test_strsplit_accepts_integer_delimiter():
    assert strsplit("a,b,,c", ord(",")) == ["a", "b", "c"]


def test_strsplit_only_delimiters():
    assert strsplit("****", "*") == []


def test_strsplit_rejoin_round_trip():
    words = ["one", "two", "three"]
    assert strsplit(" ".join(words), " ") == words


def test_strsplit_none():
    assert strsplit(None, " ") is None


def test_strsplit_bad_delimiter():
    with pytest.raises(TypeError):
        strsplit("a b", "ab")