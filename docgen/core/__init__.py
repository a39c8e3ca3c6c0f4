"""
docgen Core - Grammar, extraction, classification and document model
"""

from docgen.core.patterns import Grammar
from docgen.core.tags import extract_name, extract_type, parse_field
from docgen.core.classifier import BlockClassifier, BlockKind, Classification
from docgen.core.parser import Block, BlockParser
from docgen.core.document import Document, Field, FunctionRecord, StructureRecord, Meta
from docgen.core.scanner import SourceScanner, ScanResult, SourceFile

__all__ = [
    "Grammar",
    "extract_name",
    "extract_type",
    "parse_field",
    "BlockClassifier",
    "BlockKind",
    "Classification",
    "Block",
    "BlockParser",
    "Document",
    "Field",
    "FunctionRecord",
    "StructureRecord",
    "Meta",
    "SourceScanner",
    "ScanResult",
    "SourceFile",
]
