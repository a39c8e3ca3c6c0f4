"""
Source Scanner for docgen

Walks a root directory and collects the source files whose names end with
one of the configured extensions. Files come back sorted by relative path
so that blocks are always processed in the same order.
"""

import os
import logging
from pathlib import Path
from typing import Iterable, List, Optional, Set
from dataclasses import dataclass, field

from docgen.errors import ScanError

logger = logging.getLogger(__name__)


@dataclass
class SourceFile:
    """A single source file to extract documentation from."""

    path: Path
    relative_path: Path
    size_bytes: int = 0


@dataclass
class ScanResult:
    """Results from scanning a root directory."""

    root_path: Path
    files: List[SourceFile] = field(default_factory=list)
    skipped_dirs: int = 0

    @property
    def total_files(self) -> int:
        return len(self.files)

    def summary(self) -> dict:
        """Generate summary statistics."""
        return {
            "root": str(self.root_path),
            "files": self.total_files,
            "skipped_dirs": self.skipped_dirs,
            "total_bytes": sum(f.size_bytes for f in self.files),
        }


class SourceScanner:
    """
    Scan a directory tree for source files with matching extensions.

    Usage:
        scanner = SourceScanner('/path/to/project', extensions=[".go"])
        result = scanner.scan()
        for source in result.files:
            print(source.relative_path)
    """

    # Directories to always ignore
    IGNORE_DIRS = {
        ".git",
        ".hg",
        ".svn",
        "vendor",
        "node_modules",
        "__pycache__",
        ".idea",
        ".vscode",
    }

    def __init__(
        self,
        root_path: Path,
        extensions: Iterable[str] = (".go",),
        exclude_dirs: Optional[Set[str]] = None,
    ):
        """
        Initialize source scanner.

        Args:
            root_path: Root directory to scan
            extensions: File name suffixes to collect
            exclude_dirs: Additional directory names to skip
        """
        self.root_path = Path(root_path).resolve()

        if not self.root_path.exists():
            raise ScanError(f"Path does not exist: {root_path}")

        if not self.root_path.is_dir():
            raise ScanError(f"Path is not a directory: {root_path}")

        self.extensions = tuple(extensions)
        if not self.extensions:
            raise ScanError("No file extensions to scan for")

        self.exclude_dirs = self.IGNORE_DIRS.copy()
        if exclude_dirs:
            self.exclude_dirs.update(exclude_dirs)

        logger.info(f"SourceScanner initialized for: {self.root_path} ({', '.join(self.extensions)})")

    def should_ignore_dir(self, dir_name: str) -> bool:
        """Check if a directory should be ignored."""
        return dir_name in self.exclude_dirs or dir_name.startswith(".")

    def matches_extension(self, file_name: str) -> bool:
        return file_name.endswith(self.extensions)

    def _walk_error(self, error: OSError):
        raise ScanError(f"Failed to walk {error.filename}: {error.strerror or error}") from error

    def scan(self) -> ScanResult:
        """
        Walk the root directory.

        Returns:
            ScanResult with matching files sorted by relative path

        Raises:
            ScanError: if any directory cannot be listed
        """
        logger.info(f"Scanning {self.root_path}")

        result = ScanResult(root_path=self.root_path)

        for root, dirs, files in os.walk(self.root_path, onerror=self._walk_error):
            root_path = Path(root)

            kept = [d for d in dirs if not self.should_ignore_dir(d)]
            result.skipped_dirs += len(dirs) - len(kept)
            dirs[:] = sorted(kept)

            for file_name in files:
                if not self.matches_extension(file_name):
                    continue

                file_path = root_path / file_name
                try:
                    size_bytes = file_path.stat().st_size
                except OSError as e:
                    raise ScanError(f"Failed to stat {file_path}: {e}") from e

                result.files.append(
                    SourceFile(
                        path=file_path,
                        relative_path=file_path.relative_to(self.root_path),
                        size_bytes=size_bytes,
                    )
                )

        result.files.sort(key=lambda f: f.relative_path)

        logger.info(f"Scan complete: {result.summary()}")

        return result
