# tests/test_dates.py

from __future__ import annotations

from datetime import date, datetime

from gedcom_codec.dates import format_gedcom_date, gedcom_date_to_iso, parse_gedcom_date


def test_format_iso_date():
    assert format_gedcom_date("1984-03-07") == "7 MAR 1984"


def test_format_day_is_not_zero_padded():
    assert format_gedcom_date("2001-12-01") == "1 DEC 2001"


def test_format_iso_datetime_with_zulu():
    assert format_gedcom_date("1999-09-30T23:15:00Z") == "30 SEP 1999"


def test_format_date_objects():
    assert format_gedcom_date(date(1900, 1, 2)) == "2 JAN 1900"
    assert format_gedcom_date(datetime(1776, 7, 4, 12, 0)) == "4 JUL 1776"


def test_format_unparseable_passes_through():
    assert format_gedcom_date("not-a-date") == "not-a-date"


def test_format_unparseable_is_escaped():
    assert format_gedcom_date("ABT 1900 @home") == "ABT 1900 @@home"


def test_format_partial_date_is_verbatim():
    assert format_gedcom_date("1984-03") == "1984-03"


def test_format_empty():
    assert format_gedcom_date(None) == ""
    assert format_gedcom_date("") == ""


def test_parse_exact_date():
    assert parse_gedcom_date("7 MAR 1984") == date(1984, 3, 7)
    assert parse_gedcom_date("12 sept 1850") == date(1850, 9, 12)


def test_parse_rejects_qualified_or_partial():
    assert parse_gedcom_date("ABT 1878") is None
    assert parse_gedcom_date("MAR 1984") is None
    assert parse_gedcom_date("31 FEB 1900") is None
    assert parse_gedcom_date(None) is None


def test_gedcom_date_to_iso():
    assert gedcom_date_to_iso("14 JUN 1876") == "1876-06-14"
    assert gedcom_date_to_iso("BET 1800 AND 1810") == "BET 1800 AND 1810"
    assert gedcom_date_to_iso(None) is None
