"""
Tag extraction for docgen

Parses a single annotation line such as

    @param {string} [name] The name to return
    @property {int} [money] The money of the structure
    @returns {[]byte} The bytes

into a Field. Parsing is permissive: a missing {type} or [name] token
leaves that part empty rather than raising. When several candidate tokens
are present the last one wins.
"""

from typing import Tuple

from docgen.core import tokens
from docgen.core.document import Field
from docgen.core.patterns import DEFAULT_GRAMMAR, Grammar


def extract_type(line: str) -> Tuple[str, str]:
    """
    Get the type from an annotation line.

    Args:
        line: Annotation line, tag keyword optional

    Returns:
        (type, remainder) where remainder has every "{type}" token removed.
        type is "" and line is unchanged if no braced word exists.
    """
    type_name = ""
    found = False
    for word in tokens.split(line):
        if tokens.is_wrapped(word, "{", "}"):
            type_name = tokens.unwrap(word, "{", "}")
            found = True

    if not found:
        return "", line
    return type_name, tokens.remove(line, "{" + type_name + "}")


def extract_name(line: str, grammar: Grammar = DEFAULT_GRAMMAR) -> Tuple[str, str]:
    """
    Get the name from an annotation line.

    Only bracketed words made of letters and '.' count as names, so
    "[]byte" style text in a description is left alone.

    Returns:
        (name, remainder), or ("", line) when no name token exists
    """
    name = ""
    for word in tokens.split(line):
        if tokens.is_wrapped(word, "[", "]"):
            inner = tokens.unwrap(word, "[", "]")
            if grammar.is_name(inner):
                name = inner

    if not name:
        return "", line
    return name, tokens.remove(line, "[" + name + "]")


def parse_field(line: str, tag: str, grammar: Grammar = DEFAULT_GRAMMAR) -> Field:
    """
    Parse one @param, @property or @returns line into a Field.

    @returns lines carry no name, so name extraction is skipped for them.
    """
    data = tokens.remove_prefix(tokens.trim(line), tag)
    type_name, data = extract_type(data)
    name = ""
    if tag != grammar.returns_tag:
        name, data = extract_name(data, grammar)
    return Field(name=name, type=type_name, description=tokens.trim(data))
