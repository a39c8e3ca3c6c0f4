"""
docgen YAML Exporter - Write the extracted Document as YAML.

Same tree as the JSON exporter, dumped block-style with key order kept.
"""

import logging
from pathlib import Path
from typing import Any, Dict

import yaml

from docgen.core.document import Document
from docgen.exporters.json_exporter import JSONExporter

logger = logging.getLogger(__name__)


class YAMLExporter(JSONExporter):
    """
    Export a docgen Document to YAML format.

    Usage:
        exporter = YAMLExporter()
        exporter.set_metadata(generator="docgen", format="1")
        exporter.set_document(document)
        result = exporter.export(Path("output.yaml"))
    """

    format_name = "YAML"

    def serialize(self, data: Dict[str, Any]) -> str:
        return yaml.dump(
            data,
            default_flow_style=False,
            sort_keys=False,
            allow_unicode=True,
            indent=min(max(self.indent, 2), 9),
        ).rstrip("\n")


def load_document_yaml(path: Path) -> Document:
    """Read a YAML file written by YAMLExporter back into a Document."""
    with open(path, "r", encoding="utf-8") as f:
        return Document.from_dict(yaml.safe_load(f) or {})
