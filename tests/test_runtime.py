# tests/test_runtime.py
import pytest

from wildgram import (
    Wildcard, compile_pattern, fnmatch, filter_subjects, parse, Incomplete,
)


def test_wildcard_parse_matches_and_str():
    w = Wildcard.parse("*.JP?")
    assert w.matches("photo.JPG")
    assert not w.matches("photo.jpg")
    assert str(w) == "*.JP?"


def test_wildcard_filter_keeps_order():
    w = Wildcard.parse("[!.]*")
    assert w.filter(["b", ".hidden", "a", ""]) == ["b", "a"]


def test_wildcard_parse_error_propagates():
    with pytest.raises(Incomplete):
        Wildcard.parse("[ab")


def test_compile_pattern_is_cached():
    assert compile_pattern("x?y") is compile_pattern("x?y")
    assert compile_pattern("x?y") == parse("x?y")


def test_fnmatch_with_text_and_pattern():
    assert fnmatch("main.rs", "*.rs")
    assert not fnmatch("main.rs", "*.py")
    assert fnmatch("main.rs", parse("m*"))


def test_filter_subjects():
    names = ["a.py", "b.txt", "c.py", "py"]
    assert filter_subjects(names, "*.py") == ["a.py", "c.py"]
    assert filter_subjects(iter(names), parse("?.*")) == ["a.py", "b.txt", "c.py"]
