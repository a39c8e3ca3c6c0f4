"""
Comment-tag grammar for docgen.

A Grammar bundles the compiled block pattern with the keywords and tag names
the extractor, classifier and parser look for. It is built once per run and
handed to each component explicitly.
"""

import re
from dataclasses import dataclass, field
from typing import Pattern

# A block comment followed, after line breaks only, by one declaration line.
BLOCK_PATTERN = r"/\*[\s\S]*?\*/[\r\n]+([^\r\n]+)"

# Name tokens: letters plus '.' for qualified names.
NAME_PATTERN = r"[a-zA-Z.]+"

# Opening or closing code fence of an @example section.
FENCE_PATTERN = r"`{3,}"

INFO_TAG = "@info"
PARAM_TAG = "@param"
PROPERTY_TAG = "@property"
RETURNS_TAG = "@returns"
EXAMPLE_TAG = "@example"


@dataclass(frozen=True)
class Grammar:
    """
    Immutable comment-tag grammar.

    Usage:
        grammar = Grammar.build(function_keyword="func", type_keyword="type")
        for match in grammar.block.finditer(content):
            ...
    """

    function_keyword: str = "func"
    type_keyword: str = "type"
    block: Pattern = field(default_factory=lambda: re.compile(BLOCK_PATTERN))
    name: Pattern = field(default_factory=lambda: re.compile(NAME_PATTERN))
    fence: Pattern = field(default_factory=lambda: re.compile(FENCE_PATTERN))
    info_tag: str = INFO_TAG
    param_tag: str = PARAM_TAG
    property_tag: str = PROPERTY_TAG
    returns_tag: str = RETURNS_TAG
    example_tag: str = EXAMPLE_TAG

    @classmethod
    def build(cls, function_keyword: str = "func", type_keyword: str = "type") -> "Grammar":
        """Compile a grammar for the given declaration keywords."""
        if not function_keyword or not type_keyword:
            raise ValueError("Declaration keywords must be non-empty")
        return cls(function_keyword=function_keyword, type_keyword=type_keyword)

    def is_name(self, text: str) -> bool:
        """Check if text is a valid bracketed-name body."""
        return self.name.fullmatch(text) is not None

    def fence_length(self, line: str) -> int:
        """Return the length of a leading code fence, or 0 if there is none."""
        match = self.fence.match(line)
        return len(match.group(0)) if match else 0

    def declares(self, line: str, keyword: str) -> bool:
        """
        Check if a line starts with keyword as a whole word.

        'func Foo(' and 'func(' declare, 'function foo' does not.
        """
        if not line.startswith(keyword):
            return False
        rest = line[len(keyword):]
        return rest == "" or rest[0].isspace() or rest[0] == "("

    def declares_function(self, line: str) -> bool:
        return self.declares(line, self.function_keyword)

    def declares_structure(self, line: str) -> bool:
        return self.declares(line, self.type_keyword)


DEFAULT_GRAMMAR = Grammar()
