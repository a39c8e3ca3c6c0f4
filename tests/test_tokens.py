"""Tests for docgen token helpers."""

from docgen.core import tokens


def test_starts_and_ends_with():
    """Test prefix and suffix checks."""
    assert tokens.starts_with("@param {int}", "@param")
    assert not tokens.starts_with(" @param", "@param")
    assert tokens.ends_with("{int}", "}")
    assert not tokens.ends_with("{int} ", "}")


def test_split_on_whitespace():
    """Test default split drops empty words."""
    assert tokens.split("  {int}\t[n]  desc ") == ["{int}", "[n]", "desc"]


def test_split_on_separator():
    """Test explicit separator keeps empty words."""
    assert tokens.split("a  b", " ") == ["a", "", "b"]


def test_trim_remove_replace():
    """Test trimming and substring removal."""
    assert tokens.trim("  x \n") == "x"
    assert tokens.remove("a{b}a{b}", "{b}") == "aa"
    assert tokens.replace_all("x.y.z", ".", "/") == "x/y/z"


def test_remove_prefix_only_once():
    """Test prefix removal touches only the start."""
    assert tokens.remove_prefix("@param @param x", "@param") == " @param x"
    assert tokens.remove_prefix("x @param", "@param") == "x @param"


def test_wrapped_words():
    """Test delimiter detection and unwrapping."""
    assert tokens.is_wrapped("{string}", "{", "}")
    assert tokens.is_wrapped("{}", "{", "}")
    assert not tokens.is_wrapped("{", "{", "}")
    assert not tokens.is_wrapped("{string", "{", "}")
    assert tokens.unwrap("[name]", "[", "]") == "name"
