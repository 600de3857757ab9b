
"""
CLI command modules for gedcom_codec.

Each command module defines a single Typer-compatible command function.
"""

from gedcom_codec.cli.commands.export import export_command
from gedcom_codec.cli.commands.parse import parse_command
from gedcom_codec.cli.commands.stats import stats_command

__all__ = [
    "export_command",
    "parse_command",
    "stats_command",
]
