"""
Block parser for docgen

Finds documentation blocks in source text and folds each one into a
FunctionRecord or StructureRecord:

    /**
        @info The example function
        @param {string} [name] The name to return
        @returns {string}
    */
    func Example(name string) string {

A block is a /* ... */ comment followed, after line breaks only, by one
declaration line. The declaration line decides what the block documents;
the comment lines supply description, fields and example.
"""

import logging
from dataclasses import dataclass
from typing import Iterator, List, Optional, Union

from docgen.core import tokens
from docgen.core.classifier import BlockClassifier, BlockKind
from docgen.core.document import FunctionRecord, StructureRecord
from docgen.core.patterns import DEFAULT_GRAMMAR, Grammar
from docgen.core.tags import parse_field

logger = logging.getLogger(__name__)

Record = Union[FunctionRecord, StructureRecord]


@dataclass
class Block:
    """A documentation comment plus its trailing declaration line."""

    text: str  # Full match, comment and declaration
    comment: str  # Comment part up to the line break before the declaration
    declaration: str
    line_number: int = 0  # 1-based line of the opening /*

    def comment_lines(self) -> List[str]:
        return self.comment.split("\n")


def clean_line(line: str) -> str:
    """
    Strip comment decoration from a block line.

    "/**", "*/" and a leading "*" (JSDoc style) are removed along with
    surrounding whitespace.
    """
    line = tokens.trim(line)
    line = tokens.remove_prefix(line, "/*")
    if tokens.ends_with(line, "*/"):
        line = line[:-2]
    line = tokens.trim(line)
    return tokens.trim(line.lstrip("*"))


def signature_of(line: str) -> str:
    """Declaration line with its trailing '{' removed."""
    line = tokens.trim(line)
    if tokens.ends_with(line, "{"):
        line = line[:-1]
    return tokens.trim(line)


class BlockParser:
    """
    Parse documentation blocks out of source text.

    Usage:
        parser = BlockParser(grammar)
        for block in parser.find_blocks(content):
            record = parser.parse(block)
    """

    def __init__(self, grammar: Grammar = DEFAULT_GRAMMAR, classifier: Optional[BlockClassifier] = None):
        self.grammar = grammar
        self.classifier = classifier or BlockClassifier(grammar)

    def find_blocks(self, content: str) -> Iterator[Block]:
        """Yield every block in content, in textual order."""
        for match in self.grammar.block.finditer(content):
            text = match.group(0)
            comment = text[:match.start(1) - match.start(0)].rstrip("\r\n")
            yield Block(
                text=text,
                comment=comment,
                declaration=match.group(1).rstrip("\r"),
                line_number=content.count("\n", 0, match.start()) + 1,
            )

    def parse(self, block: Block) -> Optional[Record]:
        """
        Classify a block and fold its lines into a record.

        Returns:
            FunctionRecord (with owner set for methods), StructureRecord,
            or None when the declaration line is not a function or type

        Raises:
            BlockParseError: if the declaration line cannot be classified
        """
        classification = self.classifier.classify(block.declaration)

        if classification.kind == BlockKind.UNDOCUMENTABLE:
            return None

        if classification.is_function:
            record: Record = FunctionRecord(name=classification.name, owner=classification.owner)
            keyword = self.grammar.function_keyword
        else:
            record = StructureRecord(name=classification.name)
            keyword = self.grammar.type_keyword

        self._fold(block.comment_lines(), record, keyword)

        # The declaration line always comes last, so it sets the final signature
        self._fold_line(tokens.trim(block.declaration), record, keyword)

        logger.debug(f"Parsed {classification.kind.value} {record.name} at line {block.line_number}")
        return record

    def _fold(self, lines: List[str], record: Record, keyword: str):
        fence = 0
        awaiting_fence = False
        example: List[str] = []

        for raw in lines:
            raw = raw.rstrip("\r")
            line = clean_line(raw)

            if fence:
                length = self.grammar.fence_length(line)
                if length >= fence and not tokens.trim(line[length:]):
                    self._set_example(record, "\n".join(example))
                    fence = 0
                else:
                    example.append(raw)
                continue

            if awaiting_fence:
                length = self.grammar.fence_length(line)
                if length:
                    fence, awaiting_fence, example = length, False, []
                    continue

            if tokens.starts_with(line, self.grammar.example_tag):
                rest = tokens.trim(tokens.remove_prefix(line, self.grammar.example_tag))
                length = self.grammar.fence_length(rest)
                if length:
                    fence, example = length, []
                else:
                    awaiting_fence = True
                continue

            if self._fold_line(line, record, keyword):
                awaiting_fence = False

        if fence:
            logger.debug(f"Unclosed @example fence in {record.name}, example ignored")

    def _fold_line(self, line: str, record: Record, keyword: str) -> bool:
        """Apply one cleaned line to record. Returns True if the line was recognized."""
        grammar = self.grammar

        if grammar.declares(line, keyword):
            record.signature_line = signature_of(line)
        elif tokens.starts_with(line, grammar.info_tag):
            record.description = tokens.trim(tokens.remove_prefix(line, grammar.info_tag))
        elif tokens.starts_with(line, grammar.param_tag):
            if isinstance(record, FunctionRecord):
                record.parameters.append(parse_field(line, grammar.param_tag, grammar))
        elif tokens.starts_with(line, grammar.property_tag):
            if isinstance(record, StructureRecord):
                record.properties.append(parse_field(line, grammar.property_tag, grammar))
        elif tokens.starts_with(line, grammar.returns_tag):
            if isinstance(record, FunctionRecord):
                returns = parse_field(line, grammar.returns_tag, grammar)
                # A bare @returns line clears the return value
                record.returns = None if returns.is_empty() else returns
        else:
            return False
        return True

    def _set_example(self, record: Record, text: str):
        if isinstance(record, FunctionRecord):
            record.example = text or None


# CLI for testing
if __name__ == "__main__":
    import sys
    import json
    from pathlib import Path

    logging.basicConfig(level=logging.INFO)

    if len(sys.argv) < 2:
        print("Usage: python parser.py <source_file>")
        sys.exit(1)

    parser = BlockParser()
    content = Path(sys.argv[1]).read_text(encoding="utf-8", errors="replace")

    for block in parser.find_blocks(content):
        record = parser.parse(block)
        if record is None:
            print(f"line {block.line_number}: skipped {block.declaration!r}")
            continue
        print(f"line {block.line_number}: {type(record).__name__}")
        print(json.dumps(record.to_dict(), indent=2))
