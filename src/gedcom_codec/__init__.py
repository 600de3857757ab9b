"""
gedcom_codec: GEDCOM 5.5.1 exporter and parser for in-memory genealogy records.

    from gedcom_codec import export_gedcom, parse_gedcom

    text = export_gedcom(people, families, ExportOptions(include_living=True))
    result = parse_gedcom(text)
"""

from gedcom_codec.core.exceptions import CodecError, ExportInputError, GedcomSyntaxError
from gedcom_codec.dates import format_gedcom_date, parse_gedcom_date
from gedcom_codec.exporter import export_gedcom, write_gedcom_file
from gedcom_codec.identity import generate_xref, is_xref
from gedcom_codec.importer import ImportSummary, MemoryRecordStore, RecordStore, import_records
from gedcom_codec.models import (
    ExportOptions,
    GedcomFamily,
    GedcomPerson,
    GedcomSource,
    ParsedFamily,
    ParsedPerson,
    ParseResult,
)
from gedcom_codec.normalization import escape_gedcom, unescape_gedcom
from gedcom_codec.parser_core import parse_gedcom

__version__ = "0.1.0"

__all__ = [
    "CodecError",
    "ExportInputError",
    "ExportOptions",
    "GedcomFamily",
    "GedcomPerson",
    "GedcomSource",
    "GedcomSyntaxError",
    "ImportSummary",
    "MemoryRecordStore",
    "ParseResult",
    "ParsedFamily",
    "ParsedPerson",
    "RecordStore",
    "escape_gedcom",
    "export_gedcom",
    "format_gedcom_date",
    "generate_xref",
    "import_records",
    "is_xref",
    "parse_gedcom",
    "parse_gedcom_date",
    "unescape_gedcom",
    "write_gedcom_file",
]
