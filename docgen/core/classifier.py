"""
Block classification for docgen

Decides what a comment block documents by looking only at the trailing
declaration line that follows it:

    func Example(name string) string {      -> FUNCTION  Example
    func (e *Example) Greet() string {      -> METHOD    Greet (owner Example)
    type ExampleStructure struct {          -> STRUCTURE ExampleStructure

No type checking is done; this is text matching on a single line.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from docgen.core import tokens
from docgen.core.patterns import DEFAULT_GRAMMAR, Grammar
from docgen.errors import BlockParseError

logger = logging.getLogger(__name__)


class BlockKind(Enum):
    FUNCTION = "function"
    METHOD = "method"
    STRUCTURE = "structure"
    UNDOCUMENTABLE = "undocumentable"


@dataclass(frozen=True)
class Classification:
    """Result of classifying a declaration line."""

    kind: BlockKind
    name: str = ""
    owner: Optional[str] = None

    @property
    def is_function(self) -> bool:
        return self.kind in (BlockKind.FUNCTION, BlockKind.METHOD)


UNDOCUMENTABLE = Classification(kind=BlockKind.UNDOCUMENTABLE)


def _truncate_at_paren(word: str) -> str:
    index = word.find("(")
    return word if index < 0 else word[:index]


def _is_identifier_start(name: str) -> bool:
    return bool(name) and (name[0].isalpha() or name[0] == "_")


def _receiver_type(clause: str) -> str:
    """
    Owning structure name from the inside of a receiver clause.

    "e *Example" -> "Example", "m *Map[K, V]" -> "Map", "Example" -> "Example"
    """
    bracket = clause.find("[")
    if bracket >= 0:
        clause = clause[:bracket]
    words = tokens.split(clause)
    if not words:
        return ""
    return tokens.remove(words[-1], "*")


class BlockClassifier:
    """
    Classify declaration lines as functions, methods or structures.

    Usage:
        classifier = BlockClassifier(grammar)
        result = classifier.classify("func (e *Example) Greet() string {")
        result.kind   # BlockKind.METHOD
        result.owner  # "Example"
    """

    def __init__(self, grammar: Grammar = DEFAULT_GRAMMAR):
        self.grammar = grammar

    def classify(self, line: str) -> Classification:
        """
        Classify a trailing declaration line.

        Raises:
            BlockParseError: if the line starts with a declaration keyword
                but no name can be read from it
        """
        line = tokens.trim(line)

        if self.grammar.declares_function(line):
            return self._classify_function(line)

        if self.grammar.declares_structure(line):
            return self._classify_structure(line)

        logger.debug(f"Not a declaration: {line!r}")
        return UNDOCUMENTABLE

    def _classify_function(self, line: str) -> Classification:
        rest = tokens.trim(tokens.remove_prefix(line, self.grammar.function_keyword))

        if tokens.starts_with(rest, "("):
            close = rest.find(")")
            if close < 0:
                raise BlockParseError(line, "Unterminated receiver clause")

            owner = _receiver_type(rest[1:close])
            words = tokens.split(rest[close + 1:])
            name = _truncate_at_paren(words[0]) if words else ""
            if not owner:
                raise BlockParseError(line, "Receiver clause names no type")
            if not _is_identifier_start(name):
                raise BlockParseError(line, "Method declaration has no name")
            return Classification(kind=BlockKind.METHOD, name=name, owner=owner)

        name = ""
        for word in tokens.split(rest):
            if tokens.starts_with(word, "("):
                continue
            name = _truncate_at_paren(word)
            break

        if not _is_identifier_start(name):
            raise BlockParseError(line, "Function declaration has no name")
        return Classification(kind=BlockKind.FUNCTION, name=name)

    def _classify_structure(self, line: str) -> Classification:
        keyword = self.grammar.type_keyword
        for word in tokens.split(tokens.remove_prefix(line, keyword)):
            # Grouped "type (" declarations carry no single name
            if word == keyword or tokens.starts_with(word, "("):
                continue
            return Classification(kind=BlockKind.STRUCTURE, name=word)
        raise BlockParseError(line, "Type declaration has no name")
