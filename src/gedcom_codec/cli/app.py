
from __future__ import annotations

import typer

from gedcom_codec.cli.commands.export import export_command
from gedcom_codec.cli.commands.parse import parse_command
from gedcom_codec.cli.commands.stats import stats_command

app = typer.Typer(
    name="gedcom",
    help="GEDCOM 5.5.1 exporter, parser and import checker",
    add_completion=False,
)

app.command("export")(export_command)
app.command("parse")(parse_command)
app.command("stats")(stats_command)


def main():
    app()


if __name__ == "__main__":
    main()
