"""Tests for docgen tag extraction."""

import pytest

from docgen.core.document import Field
from docgen.core.patterns import Grammar
from docgen.core.tags import extract_name, extract_type, parse_field


class TestExtractType:
    """Test {type} extraction."""

    def test_basic(self):
        type_name, rest = extract_type("{string} [name] The name")
        assert type_name == "string"
        assert rest == " [name] The name"

    def test_slice_type(self):
        type_name, rest = extract_type("{[]byte} [bytes] The bytes")
        assert type_name == "[]byte"
        assert "[bytes]" in rest

    def test_missing_type_is_permissive(self):
        """No braced word leaves the line untouched."""
        type_name, rest = extract_type("[name] no type here")
        assert type_name == ""
        assert rest == "[name] no type here"

    def test_last_match_wins(self):
        """With two braced words the second one is the type."""
        type_name, rest = extract_type("{string} [name] becomes {int} later")
        assert type_name == "int"
        assert "{int}" not in rest
        assert "{string}" in rest

    def test_every_occurrence_removed(self):
        type_name, rest = extract_type("{int} and {int}")
        assert type_name == "int"
        assert rest == " and "


class TestExtractName:
    """Test [name] extraction."""

    def test_basic(self):
        name, rest = extract_name(" [name] The name")
        assert name == "name"
        assert rest == "  The name"

    def test_qualified_name(self):
        name, _ = extract_name("[options.timeout] How long to wait")
        assert name == "options.timeout"

    def test_non_letter_brackets_ignored(self):
        """Bracketed words with digits or symbols are not names."""
        name, rest = extract_name("[]byte [x1] text")
        assert name == ""
        assert rest == "[]byte [x1] text"

    def test_last_match_wins(self):
        name, rest = extract_name("[first] text [second]")
        assert name == "second"
        assert "[first]" in rest


class TestParseField:
    """Test full annotation line parsing."""

    @pytest.mark.parametrize(
        "line, tag, expected",
        [
            (
                "@param {string} [name] The name to return",
                "@param",
                Field(name="name", type="string", description="The name to return"),
            ),
            (
                "@property {int} [money] The money of the structure",
                "@property",
                Field(name="money", type="int", description="The money of the structure"),
            ),
            (
                "@returns {[]byte}",
                "@returns",
                Field(type="[]byte"),
            ),
            (
                "@returns {string} The greeting",
                "@returns",
                Field(type="string", description="The greeting"),
            ),
        ],
    )
    def test_well_formed_lines(self, line, tag, expected):
        assert parse_field(line, tag) == expected

    def test_surrounding_whitespace_trimmed(self):
        field = parse_field("   @param   {T}   [n]   desc   ", "@param")
        assert field == Field(name="n", type="T", description="desc")

    def test_tab_separated_words(self):
        field = parse_field("@param\t{int}\t[count]\tHow many", "@param")
        assert field == Field(name="count", type="int", description="How many")

    def test_returns_skips_name(self):
        """A bracketed word in a return description stays in the description."""
        field = parse_field("@returns {bool} [ok] when found", "@returns")
        assert field.name == ""
        assert field.description == "[ok] when found"

    def test_missing_tokens(self):
        """Malformed tags do not raise."""
        field = parse_field("@param just words", "@param")
        assert field == Field(description="just words")

    def test_custom_grammar_returns_tag(self):
        grammar = Grammar.build("fn", "struct")
        field = parse_field("@returns {u8} [x] value", "@returns", grammar)
        assert field.name == ""
