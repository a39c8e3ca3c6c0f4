"""Tests for the docgen command line."""

import json
import shutil

import pytest
import yaml
from pathlib import Path
from click.testing import CliRunner

from docgen import __version__
from docgen.cli import main


FIXTURES = Path(__file__).parent / "fixtures" / "go"


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def project(tmp_path):
    root = tmp_path / "project"
    root.mkdir()
    shutil.copy(FIXTURES / "sample.go", root / "sample.go")
    shutil.copy(FIXTURES / "methods.go", root / "methods.go")
    return root


def test_positional_arguments(runner, project, tmp_path):
    output_path = tmp_path / "docs.json"
    result = runner.invoke(main, [str(project), str(output_path)])

    assert result.exit_code == 0, result.output
    data = json.loads(output_path.read_text())
    assert len(data["Functions"]) == 5
    assert [s["Name"] for s in data["Structures"]] == ["Greeter", "ExampleStructure"]
    assert "Extraction Results" in result.output


def test_default_root_and_output(runner, project):
    """With no arguments the current directory is scanned into output.json."""
    with runner.isolated_filesystem():
        shutil.copy(project / "sample.go", "sample.go")
        result = runner.invoke(main, [])

        assert result.exit_code == 0, result.output
        data = json.loads(Path("output.json").read_text())
        assert len(data["Functions"]) == 4


def test_dropped_methods_reported(runner, project, tmp_path):
    result = runner.invoke(main, [str(project), str(tmp_path / "out.json")])
    assert "dropped" in result.output


def test_verbose_reports_methods_per_file(runner, project, tmp_path):
    result = runner.invoke(main, [str(project), str(tmp_path / "out.json"), "-v"])

    assert result.exit_code == 0, result.output
    assert "methods.go: 1 functions, 2 methods, 1 structures" in result.output


def test_yaml_format(runner, project, tmp_path):
    output_path = tmp_path / "docs.yaml"
    result = runner.invoke(main, [str(project), str(output_path), "--format", "yaml", "-q"])

    assert result.exit_code == 0, result.output
    assert "Extraction Results" not in result.output
    assert yaml.safe_load(output_path.read_text())["Meta"]["Generator"] == "docgen"


def test_extension_option(runner, tmp_path):
    root = tmp_path / "project"
    root.mkdir()
    (root / "lib.c").write_text("/*\n@info Add\n*/\nfunc Add() {\n}\n")
    output_path = tmp_path / "out.json"

    result = runner.invoke(main, [str(root), str(output_path), "-e", "c"])

    assert result.exit_code == 0, result.output
    assert json.loads(output_path.read_text())["Functions"][0]["Name"] == "Add"


def test_config_file(runner, project, tmp_path):
    config_path = tmp_path / "docgen.yaml"
    output_path = tmp_path / "from_config.json"
    config_path.write_text(f"output: {output_path}\ngenerator: mydocs\n")

    result = runner.invoke(main, [str(project), "--config", str(config_path)])

    assert result.exit_code == 0, result.output
    assert json.loads(output_path.read_text())["Meta"]["Generator"] == "mydocs"


def test_missing_root_fails(runner, tmp_path):
    result = runner.invoke(main, [str(tmp_path / "missing"), str(tmp_path / "out.json")])

    assert result.exit_code == 1
    assert "Error" in result.output


def test_malformed_block_fails(runner, tmp_path):
    root = tmp_path / "project"
    root.mkdir()
    (root / "bad.go").write_text("/*\n@info Bad\n*/\nfunc (b *B\n")

    result = runner.invoke(main, [str(root), str(tmp_path / "out.json")])
    assert result.exit_code == 1

    result = runner.invoke(main, [str(root), str(tmp_path / "out.json"), "--lenient"])
    assert result.exit_code == 0, result.output
    assert "Malformed Blocks" in result.output


def test_version(runner):
    result = runner.invoke(main, ["--version"])
    assert result.exit_code == 0
    assert __version__ in result.output
