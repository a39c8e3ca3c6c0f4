"""
docgen Exporters - Output generation modules

Available exporters:
- json_exporter.py - Write the document as JSON (default)
- yaml_exporter.py - Write the document as YAML
"""

from docgen.exporters.json_exporter import (
    JSONExporter,
    ExportResult,
    export_document_json,
    load_document_json,
)
from docgen.exporters.yaml_exporter import (
    YAMLExporter,
    load_document_yaml,
)

__all__ = [
    # JSON
    "JSONExporter",
    "ExportResult",
    "export_document_json",
    "load_document_json",
    # YAML
    "YAMLExporter",
    "load_document_yaml",
]
