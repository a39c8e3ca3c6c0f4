"""
docgen JSON Exporter - Write the extracted Document as JSON.

The output keeps the original tool's shape:

    {
      "Meta": {"Generator": ..., "Format": ..., "Date": ...},
      "Functions": [...],
      "Structures": [...]
    }

The file is rewritten from scratch on every export, so the last write
always holds the complete accumulated document.
"""

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional

from docgen.core.document import Document, Meta

logger = logging.getLogger(__name__)


@dataclass
class ExportResult:
    """Result of an export operation."""
    success: bool
    output_path: Optional[Path] = None
    error: Optional[str] = None
    stats: Dict[str, Any] = field(default_factory=dict)


class JSONExporter:
    """
    Export a docgen Document to JSON format.

    Usage:
        exporter = JSONExporter()
        exporter.set_metadata(generator="docgen", format="1")
        exporter.set_document(document)
        result = exporter.export(Path("output.json"))
    """

    format_name = "JSON"

    def __init__(self, indent: int = 2):
        self.indent = indent
        self.metadata: Optional[Meta] = None
        self.document: Optional[Document] = None

    def set_metadata(self, generator: str, format: str):
        """Set generator metadata, stamped with the current time."""
        self.metadata = Meta.now(generator=generator, format=format)

    def set_document(self, document: Document):
        """Set the document to export."""
        self.document = document

    def build(self) -> Dict[str, Any]:
        """
        Build the complete output tree.

        Returns:
            Dictionary ready for serialization
        """
        document = self.document if self.document is not None else Document()
        if self.metadata:
            return document.finalize(self.metadata)
        return document.to_dict()

    def serialize(self, data: Dict[str, Any]) -> str:
        return json.dumps(data, indent=self.indent, ensure_ascii=False)

    def export(self, output_path: Path) -> ExportResult:
        """
        Export to a file, replacing any previous content.

        Args:
            output_path: Path to output file

        Returns:
            ExportResult with success status
        """
        output_path = Path(output_path)
        try:
            text = self.serialize(self.build())

            # Ensure parent directory exists
            output_path.parent.mkdir(parents=True, exist_ok=True)

            with open(output_path, "w", encoding="utf-8") as f:
                f.write(text)
                f.write("\n")

            stats = {
                "file_size": output_path.stat().st_size,
            }
            if self.document is not None:
                stats.update(self.document.summary())

            logger.info(f"Exported {self.format_name} to {output_path} ({stats['file_size']} bytes)")

            return ExportResult(
                success=True,
                output_path=output_path,
                stats=stats,
            )

        except (OSError, TypeError, ValueError) as e:
            logger.error(f"Failed to export {self.format_name}: {e}")
            return ExportResult(
                success=False,
                output_path=output_path,
                error=str(e),
            )

    def export_string(self) -> str:
        """Export to a string."""
        return self.serialize(self.build())


def export_document_json(
    output_path: Path,
    document: Document,
    generator: str = "docgen",
    format: str = "1",
    indent: int = 2,
) -> ExportResult:
    """
    Convenience function to export a document to JSON.

    Args:
        output_path: Path to output file
        document: Accumulated Document
        generator: Meta.Generator value
        format: Meta.Format value
        indent: JSON indentation level

    Returns:
        ExportResult
    """
    exporter = JSONExporter(indent=indent)
    exporter.set_metadata(generator=generator, format=format)
    exporter.set_document(document)
    return exporter.export(output_path)


def load_document_json(path: Path) -> Document:
    """Read a JSON file written by JSONExporter back into a Document."""
    with open(path, "r", encoding="utf-8") as f:
        return Document.from_dict(json.load(f))
