"""
docgen - Documentation extraction from tagged block comments

Scans source files for block comments tagged with @info, @param,
@property, @returns and @example, and writes the documented functions and
structures to a single JSON document.

Usage:
    docgen ~/my_go_project docs.json
    docgen --format yaml -e .go . docs.yaml

Features:
    - Recursive source scanning by file extension
    - Function, method and structure classification from the declaration line
    - Methods attached to their owning structure
    - JSON or YAML output, rewritten after every processed file
"""

__version__ = "1.0.0"

from docgen.core.document import Document, Field, FunctionRecord, StructureRecord, Meta
from docgen.core.parser import BlockParser
from docgen.generator import DocGenerator

__all__ = [
    "__version__",
    "Document",
    "Field",
    "FunctionRecord",
    "StructureRecord",
    "Meta",
    "BlockParser",
    "DocGenerator",
]
