"""
docgen Generator - the per-file extraction loop.

For every scanned file, in order:
    read -> find blocks -> classify + parse -> add to Document -> export

The whole Document is written after each file, so an interrupted run still
leaves the results of every file processed before the failure.
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, List, Optional

from docgen.config import DocgenConfig
from docgen.core.document import Document, FunctionRecord
from docgen.core.parser import BlockParser
from docgen.core.scanner import SourceFile, SourceScanner
from docgen.errors import BlockParseError, ExportError, SourceReadError
from docgen.exporters.json_exporter import JSONExporter
from docgen.exporters.yaml_exporter import YAMLExporter

logger = logging.getLogger(__name__)


@dataclass
class FileStats:
    """What was extracted from one file."""

    path: Path
    blocks: int = 0
    functions: int = 0  # Top-level only
    methods: int = 0  # Attached to a structure
    structures: int = 0
    skipped_blocks: int = 0
    malformed_blocks: int = 0


@dataclass
class GenerationResult:
    """Outcome of a complete run."""

    document: Document
    output_path: Path
    files: List[FileStats] = field(default_factory=list)

    @property
    def malformed_blocks(self) -> int:
        return sum(f.malformed_blocks for f in self.files)

    @property
    def skipped_blocks(self) -> int:
        return sum(f.skipped_blocks for f in self.files)

    def summary(self) -> dict:
        """Generate summary statistics."""
        summary = {
            "files": len(self.files),
            "blocks": sum(f.blocks for f in self.files),
            "skipped_blocks": self.skipped_blocks,
            "malformed_blocks": self.malformed_blocks,
            "output": str(self.output_path),
        }
        summary.update(self.document.summary())
        return summary


def make_exporter(config: DocgenConfig) -> JSONExporter:
    """Exporter for the configured output format."""
    exporter_class = YAMLExporter if config.output_format == "yaml" else JSONExporter
    exporter = exporter_class(indent=config.indent)
    exporter.set_metadata(generator=config.generator, format=config.format)
    return exporter


def read_source(path: Path) -> str:
    """
    Read a source file.

    Raises:
        SourceReadError: if the file cannot be opened or read
    """
    try:
        with open(path, "r", encoding="utf-8", errors="replace") as f:
            return f.read()
    except OSError as e:
        raise SourceReadError(path, e.strerror or str(e)) from e


class DocGenerator:
    """
    Extract documentation from every matching file under a root directory.

    Usage:
        generator = DocGenerator(config)
        result = generator.run(Path("."), Path("output.json"))
        print(result.summary())
    """

    def __init__(self, config: Optional[DocgenConfig] = None):
        self.config = config or DocgenConfig()
        self.config.validate()
        self.grammar = self.config.grammar()
        self.parser = BlockParser(self.grammar)
        self.document = Document()

    def process_content(self, content: str, stats: FileStats) -> FileStats:
        """
        Parse every block in content into the document.

        Raises:
            BlockParseError: in strict mode, for the first malformed block
        """
        for block in self.parser.find_blocks(content):
            stats.blocks += 1
            try:
                record = self.parser.parse(block)
            except BlockParseError as e:
                error = e.with_path(stats.path)
                if self.config.strict:
                    raise error from e
                stats.malformed_blocks += 1
                logger.warning(f"Skipping malformed block at line {block.line_number}: {error}")
                continue

            if record is None:
                stats.skipped_blocks += 1
                continue

            if isinstance(record, FunctionRecord):
                if self.document.add_function(record):
                    if record.is_method:
                        stats.methods += 1
                    else:
                        stats.functions += 1
            else:
                self.document.add_structure(record)
                stats.structures += 1

        return stats

    def process_file(self, source: SourceFile) -> FileStats:
        """Read one file and add its blocks to the document."""
        logger.info(f"Processing {source.relative_path}")
        content = read_source(source.path)
        return self.process_content(content, FileStats(path=source.relative_path))

    def write(self, exporter: JSONExporter, output_path: Path):
        """
        Write the accumulated document.

        Raises:
            ExportError: if the output cannot be written
        """
        exporter.set_document(self.document)
        result = exporter.export(output_path)
        if not result.success:
            raise ExportError(f"Failed to write {output_path}: {result.error}")

    def run(
        self,
        root_path: Path,
        output_path: Optional[Path] = None,
        on_file: Optional[Callable[[FileStats], None]] = None,
    ) -> GenerationResult:
        """
        Scan root_path and process every matching file in order.

        Args:
            root_path: Directory to scan
            output_path: Output file, defaults to the configured output
            on_file: Called with each file's stats after it is written

        Returns:
            GenerationResult for the run

        Raises:
            DocgenError: on the first scan, read, parse (strict) or write failure
        """
        output_path = Path(output_path or self.config.output)
        scanner = SourceScanner(
            root_path,
            extensions=self.config.extensions,
            exclude_dirs=set(self.config.exclude_dirs),
        )
        scan = scanner.scan()

        if not scan.files:
            logger.warning(f"No {', '.join(self.config.extensions)} files found under {scan.root_path}")

        exporter = make_exporter(self.config)
        result = GenerationResult(document=self.document, output_path=output_path)

        for source in scan.files:
            stats = self.process_file(source)
            self.write(exporter, output_path)
            result.files.append(stats)
            if on_file:
                on_file(stats)

        if self.document.dropped_methods:
            logger.warning(
                f"{self.document.dropped_methods} method(s) dropped: owning structure not documented before them"
            )

        logger.info(f"Generation complete: {result.summary()}")
        return result
