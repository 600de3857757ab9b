from __future__ import annotations

import sys
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from gedcom_codec.cli.utils import load_export_input
from gedcom_codec.core.exceptions import CodecError
from gedcom_codec.exporter import export_gedcom, write_gedcom_file
from gedcom_codec.models import ExportOptions

console = Console(stderr=True)


def export_command(
    records: Path = typer.Argument(
        ..., exists=True, readable=True, help="JSON file with 'people' and 'families'"
    ),
    out: Optional[Path] = typer.Option(
        None,
        "--out",
        "-o",
        help="Write GEDCOM to file instead of stdout",
    ),
    include_living: Optional[bool] = typer.Option(
        None,
        "--include-living/--exclude-living",
        help="Include living people (default from config)",
    ),
    include_sources: Optional[bool] = typer.Option(
        None,
        "--sources/--no-sources",
        help="Emit source citations (default from config)",
    ),
    submitter: Optional[str] = typer.Option(
        None,
        "--submitter",
        help="Submitter name for the header",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable rich logging",
    ),
):
    """
    Export person/family JSON records to GEDCOM 5.5.1.
    """
    options = ExportOptions.from_config()
    if include_living is not None:
        options.include_living = include_living
    if include_sources is not None:
        options.include_sources = include_sources
    if submitter:
        options.submitter_name = submitter

    try:
        people, families = load_export_input(records)
    except CodecError as exc:
        console.print(f"[red]Error:[/red] {exc}")
        raise typer.Exit(code=1)

    if verbose:
        console.log(f"Exporting {len(people)} people, {len(families)} families")

    document = export_gedcom(people, families, options)

    if out:
        write_gedcom_file(document, out)
    else:
        sys.stdout.write(document)
        sys.stdout.write("\r\n")

    if verbose:
        console.log("Export complete")
