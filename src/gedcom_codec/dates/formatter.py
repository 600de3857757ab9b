# src/gedcom_codec/dates/formatter.py

from __future__ import annotations

from datetime import date, datetime
from typing import Optional, Union

from gedcom_codec.normalization.escaping import escape_gedcom


# ---------------------------------------------------------------------------
# Month helpers
# ---------------------------------------------------------------------------

MONTH_ABBREVIATIONS = (
    "JAN",
    "FEB",
    "MAR",
    "APR",
    "MAY",
    "JUN",
    "JUL",
    "AUG",
    "SEP",
    "OCT",
    "NOV",
    "DEC",
)

MONTHS = {abbr: index for index, abbr in enumerate(MONTH_ABBREVIATIONS, start=1)}
MONTHS["SEPT"] = 9


# ---------------------------------------------------------------------------
# Export direction: ISO -> GEDCOM
# ---------------------------------------------------------------------------

def _coerce_calendar_date(value: Union[str, date]) -> Optional[date]:
    """
    Read a calendar date from a ``date``/``datetime`` or an ISO-8601 string.

    Accepted strings:
        - '1984-03-07'
        - '1984-03-07T10:15:00'
        - '1984-03-07T10:15:00Z' / '...+02:00'
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value

    s = str(value).strip()
    if not s:
        return None

    try:
        return date.fromisoformat(s)
    except ValueError:
        pass

    if s.endswith(("Z", "z")):
        s = s[:-1] + "+00:00"
    try:
        return datetime.fromisoformat(s).date()
    except ValueError:
        return None


def format_gedcom_date(value: Union[str, date, None]) -> str:
    """
    Render a date as GEDCOM ``D MON YYYY``.

    Unreadable input is passed through escaped; partial dates such as
    '1984-03' or 'ABT 1900' are not interpreted and come out verbatim.
    """
    if value is None or value == "":
        return ""

    parsed = _coerce_calendar_date(value)
    if parsed is None:
        return escape_gedcom(str(value))

    return f"{parsed.day} {MONTH_ABBREVIATIONS[parsed.month - 1]} {parsed.year}"


# ---------------------------------------------------------------------------
# Import direction: GEDCOM -> ISO
# ---------------------------------------------------------------------------

def parse_gedcom_date(value: Optional[str]) -> Optional[date]:
    """
    Read an exact ``D MON YYYY`` GEDCOM date. Qualified, ranged or partial
    dates return None.
    """
    if not value:
        return None

    tokens = value.split()
    if len(tokens) != 3:
        return None

    day_token, mon_token, year_token = tokens
    month = MONTHS.get(mon_token.upper())
    if month is None or not day_token.isdigit() or not year_token.isdigit():
        return None

    try:
        return date(int(year_token), month, int(day_token))
    except ValueError:
        return None


def gedcom_date_to_iso(value: Optional[str]) -> Optional[str]:
    """ISO form of an exact GEDCOM date, or the original value unchanged."""
    parsed = parse_gedcom_date(value)
    return parsed.isoformat() if parsed is not None else value
