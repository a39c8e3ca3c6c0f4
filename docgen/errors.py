"""
docgen errors

Every defined failure of a run derives from DocgenError so the CLI can
report it and exit non-zero.
"""

from pathlib import Path
from typing import Optional


class DocgenError(Exception):
    """Base class for all docgen failures."""


class ConfigError(DocgenError):
    """Configuration file could not be read or holds invalid values."""


class ScanError(DocgenError):
    """Root path is missing, not a directory, or could not be walked."""


class SourceReadError(DocgenError):
    """A matched source file could not be opened or read."""

    def __init__(self, path: Path, reason: str):
        self.path = path
        super().__init__(f"Failed to read {path}: {reason}")


class BlockParseError(DocgenError):
    """A declaration line matched a keyword but could not be parsed."""

    def __init__(self, line: str, reason: str, path: Optional[Path] = None):
        self.line = line
        self.reason = reason
        self.path = path
        super().__init__(self._format())

    def _format(self) -> str:
        location = f"{self.path}: " if self.path else ""
        return f"{location}{self.reason}: {self.line!r}"

    def with_path(self, path: Path) -> "BlockParseError":
        """Return a copy of this error that names the file it came from."""
        return BlockParseError(self.line, self.reason, path)


class ExportError(DocgenError):
    """The output document could not be written."""
