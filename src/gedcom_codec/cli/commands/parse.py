from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from gedcom_codec.cli.utils import load_gedcom, to_json_compatible, write_json

console = Console(stderr=True)


def parse_command(
    gedcom: Path = typer.Argument(..., exists=True, readable=True),
    out: Optional[Path] = typer.Option(
        None,
        "--out",
        "-o",
        help="Write output to file instead of stdout",
    ),
    pretty: bool = typer.Option(
        False,
        "--pretty",
        help="Pretty-print JSON",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable rich logging",
    ),
):
    """
    Parse a GEDCOM file and dump people, families and diagnostics as JSON.
    """
    result = load_gedcom(gedcom, verbose=verbose)

    data = {
        "counts": {
            "people": len(result.people),
            "families": len(result.families),
            "errors": len(result.errors),
            "warnings": len(result.warnings),
        },
        **to_json_compatible(result),
    }

    write_json(data, out=out, pretty=pretty)

    if verbose:
        for warning in result.warnings:
            console.log(f"[yellow]{warning}[/yellow]")
