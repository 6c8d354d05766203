"""
Tests for literal-substring split/join/trim.
"""

from py_frame.text import join, split, trim_whitespace


def test_split_basic():
    assert split("a,b,c", ",") == ["a", "b", "c"]


def test_split_empty_text_gives_no_pieces():
    assert split("", ",") == []


def test_split_empty_separator_returns_text_unchanged():
    assert split(" a,b ", "") == [" a,b "]


def test_split_keeps_empty_pieces():
    assert split("a,,b,", ",") == ["a", "", "b", ""]


def test_split_multichar_separator_is_literal():
    assert split("a::b.*c", "::") == ["a", "b.*c"]
    assert split("a.*b", ".*") == ["a", "b"]


def test_split_non_overlapping():
    assert split("aaa", "aa") == ["", "a"]


def test_split_trim():
    assert split(" a , \t ,b \r", ",", trim=True) == ["a", "", "b"]


def test_split_without_trim_keeps_whitespace():
    assert split(" a , b", ",") == [" a ", " b"]


def test_trim_whitespace_ascii_only():
    assert trim_whitespace("\v\f x \n") == "x"
    assert trim_whitespace(" \t ") == ""
    assert trim_whitespace(" x ") == " x"


def test_join():
    assert join(["a", "b", "c"], "; ") == "a; b; c"
    assert join([], ",") == ""
    assert join(["only"], ",") == "only"


def test_join_inverts_split():
    text = "x|y||z"
    assert join(split(text, "|"), "|") == text
