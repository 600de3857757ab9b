"""
Exporter package.

Re-exports the GEDCOM export entry points.
"""

from __future__ import annotations

from .gedcom_exporter import export_gedcom, write_gedcom_file

__all__ = ["export_gedcom", "write_gedcom_file"]
