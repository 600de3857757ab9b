
from __future__ import annotations

from pathlib import Path

import typer
from rich.console import Console
from rich.table import Table

from gedcom_codec.cli.utils import load_gedcom
from gedcom_codec.importer import MemoryRecordStore, import_records

console = Console()


def stats_command(
    gedcom: Path = typer.Argument(..., exists=True, readable=True),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="List every warning and error",
    ),
):
    """
    Show summary statistics and a dry-run import for a GEDCOM file.
    """
    result = load_gedcom(gedcom, verbose=verbose)
    summary = import_records(result, MemoryRecordStore())

    table = Table(title="GEDCOM Statistics")
    table.add_column("Item", style="bold")
    table.add_column("Count", justify="right")

    table.add_row("People", str(len(result.people)))
    table.add_row("Families", str(len(result.families)))
    table.add_row("People importable", str(summary.people_imported))
    table.add_row("Families importable", str(summary.families_imported))
    table.add_row("Warnings", str(len(summary.warnings)))
    table.add_row("Errors", str(len(summary.errors)))

    console.print(table)

    if verbose:
        for message in summary.warnings:
            console.print(f"[yellow]warning[/yellow] {message}")
        for message in summary.errors:
            console.print(f"[red]error[/red] {message}")
