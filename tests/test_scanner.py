"""Tests for docgen Source Scanner."""

import pytest
from pathlib import Path

from docgen.core.scanner import SourceScanner, ScanResult, SourceFile
from docgen.errors import ScanError


@pytest.fixture
def temp_project(tmp_path):
    """Create a temporary Go project structure for testing."""
    (tmp_path / "main.go").write_text("package main\n")
    (tmp_path / "README.md").write_text("# readme\n")

    pkg = tmp_path / "pkg"
    pkg.mkdir()
    (pkg / "b.go").write_text("package pkg\n")
    (pkg / "a.go").write_text("package pkg\n")
    (pkg / "notes.txt").write_text("notes\n")

    # Stuff to ignore
    vendor = tmp_path / "vendor" / "lib"
    vendor.mkdir(parents=True)
    (vendor / "lib.go").write_text("package lib\n")

    git = tmp_path / ".git"
    git.mkdir()
    (git / "hook.go").write_text("package hook\n")

    return tmp_path


def test_scanner_init(tmp_path):
    """Test scanner initialization."""
    scanner = SourceScanner(tmp_path)
    assert scanner.root_path.exists()
    assert scanner.extensions == (".go",)


def test_scanner_nonexistent_path():
    """Test scanner with non-existent path."""
    with pytest.raises(ScanError):
        SourceScanner("/nonexistent/path/that/does/not/exist")


def test_scanner_file_path(tmp_path):
    """Test scanner rejects a file as root."""
    file_path = tmp_path / "x.go"
    file_path.write_text("package x\n")
    with pytest.raises(ScanError):
        SourceScanner(file_path)


def test_scanner_requires_extensions(tmp_path):
    with pytest.raises(ScanError):
        SourceScanner(tmp_path, extensions=[])


def test_scan_go_files(temp_project):
    """Test only matching extensions are collected."""
    result = SourceScanner(temp_project).scan()

    assert isinstance(result, ScanResult)
    assert result.total_files == 3
    assert all(isinstance(f, SourceFile) for f in result.files)


def test_scan_sorted_order(temp_project):
    """Test files come back in lexical path order."""
    result = SourceScanner(temp_project).scan()

    assert [str(f.relative_path) for f in result.files] == [
        "main.go",
        str(Path("pkg") / "a.go"),
        str(Path("pkg") / "b.go"),
    ]


def test_ignore_vendor_and_hidden(temp_project):
    """Test vendor and hidden directories are skipped."""
    result = SourceScanner(temp_project).scan()

    for source in result.files:
        assert "vendor" not in source.path.parts
        assert ".git" not in source.path.parts
    assert result.skipped_dirs == 2


def test_exclude_dirs(temp_project):
    """Test additional excluded directories."""
    result = SourceScanner(temp_project, exclude_dirs={"pkg"}).scan()
    assert [str(f.relative_path) for f in result.files] == ["main.go"]


def test_custom_extensions(temp_project):
    """Test scanning for other extensions."""
    result = SourceScanner(temp_project, extensions=[".txt", ".md"]).scan()
    names = sorted(f.path.name for f in result.files)
    assert names == ["README.md", "notes.txt"]


def test_summary(temp_project):
    """Test summary generation."""
    result = SourceScanner(temp_project).scan()
    summary = result.summary()

    assert summary["files"] == 3
    assert summary["total_bytes"] > 0
    assert "root" in summary
