from gedcom_codec.dates.formatter import (
    MONTH_ABBREVIATIONS,
    format_gedcom_date,
    gedcom_date_to_iso,
    parse_gedcom_date,
)

__all__ = [
    "MONTH_ABBREVIATIONS",
    "format_gedcom_date",
    "gedcom_date_to_iso",
    "parse_gedcom_date",
]
