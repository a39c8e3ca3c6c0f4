"""
docgen CLI - Command Line Interface

Usage:
    docgen                          # Scan . and write output.json
    docgen <root_path>              # Scan root_path
    docgen <root_path> <output>     # Scan root_path and write output
"""

import click
import logging
import sys
from pathlib import Path
from typing import Optional

from rich.console import Console
from rich.table import Table

from docgen import __version__
from docgen.errors import DocgenError

console = Console()


def _setup_logging(verbose: bool):
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


@click.command()
@click.version_option(version=__version__, prog_name="docgen")
@click.argument("root_path", required=False, default=".", type=click.Path())
@click.argument("output_path", required=False, type=click.Path())
@click.option("--config", "-c", "config_path", type=click.Path(exists=True, dir_okay=False),
              help="YAML config file (default: docgen.yaml in ROOT_PATH if present)")
@click.option("--ext", "-e", "extensions", multiple=True,
              help="File extension to scan (can specify multiple, default .go)")
@click.option("--format", "-f", "output_format", type=click.Choice(["json", "yaml"]),
              help="Output format")
@click.option("--lenient", is_flag=True, help="Skip malformed blocks instead of aborting")
@click.option("--quiet", "-q", is_flag=True, help="Do not print the summary table")
@click.option("--verbose", "-v", is_flag=True, help="Verbose output")
def main(root_path: str, output_path: Optional[str], config_path: Optional[str],
         extensions: tuple, output_format: Optional[str], lenient: bool,
         quiet: bool, verbose: bool):
    """docgen - Extract tagged block comments into a JSON document.

    Scans ROOT_PATH (default: current directory) recursively for source files
    and writes the documented functions and structures to OUTPUT_PATH
    (default: output.json). The output is rewritten after every file.
    """
    from docgen.config import resolve_config
    from docgen.generator import DocGenerator

    _setup_logging(verbose)

    root = Path(root_path)

    try:
        config = resolve_config(root, Path(config_path) if config_path else None)

        # Command line wins over the config file
        if extensions:
            config.extensions = [e if e.startswith(".") else f".{e}" for e in extensions]
        if output_format:
            config.output_format = output_format
        if output_path:
            config.output = output_path
        if lenient:
            config.strict = False

        if not quiet:
            console.print(f"\n[bold blue]docgen[/bold blue] v{__version__}")
            console.print(f"Scanning: [cyan]{root.resolve()}[/cyan]")
            console.print(f"Output:   [cyan]{config.output}[/cyan]\n")

        generator = DocGenerator(config)

        def report(stats):
            if verbose and not quiet:
                console.print(
                    f"  {stats.path}: {stats.functions} functions, {stats.methods} methods, "
                    f"{stats.structures} structures"
                )

        result = generator.run(root, Path(config.output), on_file=report)

    except DocgenError as e:
        console.print(f"[bold red]Error:[/bold red] {e}")
        sys.exit(1)

    if quiet:
        return

    summary = result.summary()

    table = Table(title="Extraction Results")
    table.add_column("Metric", style="cyan")
    table.add_column("Value", style="green")

    table.add_row("Files", str(summary["files"]))
    table.add_row("Blocks", str(summary["blocks"]))
    table.add_row("Functions", str(summary["functions"]))
    table.add_row("Structures", str(summary["structures"]))
    table.add_row("Methods", str(summary["methods"]))
    table.add_row("Dropped Methods", str(summary["dropped_methods"]))
    table.add_row("Skipped Blocks", str(summary["skipped_blocks"]))
    if summary["malformed_blocks"]:
        table.add_row("Malformed Blocks", str(summary["malformed_blocks"]))

    console.print(table)

    if summary["dropped_methods"]:
        console.print(
            f"\n[yellow]{summary['dropped_methods']} method(s) were dropped because their "
            f"structure was not documented before them[/yellow]"
        )

    if summary["files"]:
        console.print(f"\n[green]Output saved to: {result.output_path}[/green]")
    else:
        console.print(f"\n[yellow]No matching files found, nothing written[/yellow]")


if __name__ == "__main__":
    main()
