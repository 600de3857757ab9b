"""
gedcom_exporter.py
GEDCOM 5.5.1 writer for person, family and source records.

The exporter is a pure function of its input apart from the header DATE line:

    export_gedcom(people, families, options) -> str

Records are written HEAD, SUBM, INDI..., FAM..., SOUR..., TRLR and joined
with CRLF.
"""

from __future__ import annotations

from datetime import date
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Sequence, Set

from gedcom_codec.dates.formatter import format_gedcom_date
from gedcom_codec.identity.xref import (
    XREF_FAMILY,
    XREF_INDIVIDUAL,
    XREF_SOURCE,
    find_xref_collisions,
    generate_xref,
)
from gedcom_codec.logging import get_logger
from gedcom_codec.models import ExportOptions, GedcomFamily, GedcomPerson, GedcomSource
from gedcom_codec.normalization.escaping import escape_gedcom

log = get_logger(__name__)

LINE_SEPARATOR = "\r\n"
SUBMITTER_XREF = "@SUBM@"

HEADER_SOURCE = "Kindred"
HEADER_SOURCE_VERSION = "1.0"
HEADER_PRODUCT_NAME = "Kindred Family Tree"
GEDCOM_VERSION = "5.5.1"
GEDCOM_FORM = "LINEAGE-LINKED"
CHARACTER_SET = "UTF-8"

# (tag, attribute prefix) in emission order
PERSON_EVENTS = (
    ("BIRT", "birth"),
    ("CHR", "christening"),
    ("DEAT", "death"),
    ("BURI", "burial"),
)


# ---------------------------------------------------------------------------
# Line builders
# ---------------------------------------------------------------------------

def _header_lines(submitter_name: str, today: date) -> List[str]:
    return [
        "0 HEAD",
        f"1 SOUR {HEADER_SOURCE}",
        f"2 VERS {HEADER_SOURCE_VERSION}",
        f"2 NAME {HEADER_PRODUCT_NAME}",
        "1 DEST ANY",
        f"1 DATE {format_gedcom_date(today)}",
        "1 GEDC",
        f"2 VERS {GEDCOM_VERSION}",
        f"2 FORM {GEDCOM_FORM}",
        f"1 CHAR {CHARACTER_SET}",
        f"1 SUBM {SUBMITTER_XREF}",
        f"0 {SUBMITTER_XREF} SUBM",
        f"1 NAME {escape_gedcom(submitter_name)}",
    ]


def _event_lines(tag: str, event_date, event_place: Optional[str]) -> List[str]:
    """An event block, or nothing when both date and place are absent."""
    if not event_date and not event_place:
        return []

    lines = [f"1 {tag}"]
    if event_date:
        lines.append(f"2 DATE {format_gedcom_date(event_date)}")
    if event_place:
        lines.append(f"2 PLAC {escape_gedcom(event_place)}")
    return lines


def _sex_code(sex: Optional[str]) -> Optional[str]:
    if not sex:
        return None
    code = sex.strip().upper()[:1]
    return code if code in ("M", "F") else None


def split_name(person: GedcomPerson) -> tuple[str, str]:
    """
    Return ``(given, surname)`` for the NAME line.

    Without ``name_given`` the given part is the full name with the first
    occurrence of the surname removed.
    """
    surname = person.name_surname or ""
    given = person.name_given or (person.name_full or "").replace(surname, "", 1).strip()
    return given, surname


def _individual_lines(person: GedcomPerson, include_sources: bool) -> List[str]:
    lines = [f"0 {generate_xref(XREF_INDIVIDUAL, person.id)} INDI"]

    given, surname = split_name(person)
    lines.append(f"1 NAME {escape_gedcom(given)} /{escape_gedcom(surname)}/")
    if given:
        lines.append(f"2 GIVN {escape_gedcom(given)}")
    if surname:
        lines.append(f"2 SURN {escape_gedcom(surname)}")

    sex = _sex_code(person.sex)
    if sex:
        lines.append(f"1 SEX {sex}")

    for tag, prefix in PERSON_EVENTS:
        lines.extend(
            _event_lines(
                tag,
                getattr(person, f"{prefix}_date"),
                getattr(person, f"{prefix}_place"),
            )
        )

    if include_sources:
        for source in person.sources or []:
            lines.append(f"1 SOUR {generate_xref(XREF_SOURCE, source.id)}")

    return lines


def _family_lines(family: GedcomFamily, eligible_ids: Set[str]) -> List[str]:
    """FAM record restricted to eligible members; empty when none remain."""
    has_husband = bool(family.husband_id) and family.husband_id in eligible_ids
    has_wife = bool(family.wife_id) and family.wife_id in eligible_ids
    children = [c for c in family.children_ids if c in eligible_ids]

    if not has_husband and not has_wife and not children:
        return []

    lines = [f"0 {generate_xref(XREF_FAMILY, family.id)} FAM"]
    if has_husband:
        lines.append(f"1 HUSB {generate_xref(XREF_INDIVIDUAL, family.husband_id)}")
    if has_wife:
        lines.append(f"1 WIFE {generate_xref(XREF_INDIVIDUAL, family.wife_id)}")
    for child_id in children:
        lines.append(f"1 CHIL {generate_xref(XREF_INDIVIDUAL, child_id)}")

    lines.extend(_event_lines("MARR", family.marriage_date, family.marriage_place))
    return lines


def _source_lines(source: GedcomSource) -> List[str]:
    lines = [f"0 {generate_xref(XREF_SOURCE, source.id)} SOUR"]
    if source.source_name:
        lines.append(f"1 TITL {escape_gedcom(source.source_name)}")
    if source.source_url:
        lines.append(f"1 NOTE URL: {escape_gedcom(source.source_url)}")
    if source.content:
        lines.append(f"1 TEXT {escape_gedcom(source.content)}")
    return lines


# ---------------------------------------------------------------------------
# Selection helpers
# ---------------------------------------------------------------------------

def eligible_people(people: Iterable[GedcomPerson], include_living: bool) -> List[GedcomPerson]:
    """People that survive the living filter, in input order."""
    if include_living:
        return list(people)
    return [p for p in people if not p.living]


def collect_sources(people: Iterable[GedcomPerson]) -> List[GedcomSource]:
    """
    Union of citations attached to ``people``, deduplicated by id.

    Order is first appearance; a repeated id keeps its slot but takes the
    data of its last occurrence.
    """
    by_id: Dict[str, GedcomSource] = {}
    for person in people:
        for source in person.sources or []:
            by_id[source.id] = source
    return list(by_id.values())


def _log_collisions(kind: str, native_ids: Iterable[str]) -> None:
    for xref, ids in find_xref_collisions(kind, native_ids).items():
        log.warning("Cross-reference %s is shared by ids %s", xref, ", ".join(ids))


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def export_gedcom(
    people: Sequence[GedcomPerson],
    families: Sequence[GedcomFamily],
    options: Optional[ExportOptions] = None,
    *,
    today: Optional[date] = None,
) -> str:
    """
    Serialize people and families to a GEDCOM 5.5.1 document.

    Living people are left out entirely unless ``options.include_living``.
    A family is written only if at least one of its members is eligible, and
    only eligible members are linked from it.

    Args:
        people: Person records in output order.
        families: Family records in output order.
        options: Export options; defaults to ``ExportOptions()``.
        today: Header DATE value; defaults to ``date.today()``.

    Returns:
        The document as a single CRLF-joined string with no trailing newline.
    """
    options = options or ExportOptions()
    today = today or date.today()

    selected = eligible_people(people, options.include_living)
    eligible_ids = {p.id for p in selected}

    lines = _header_lines(options.submitter_name, today)

    for person in selected:
        lines.extend(_individual_lines(person, options.include_sources))

    family_count = 0
    for family in families:
        family_block = _family_lines(family, eligible_ids)
        if not family_block:
            log.debug("Dropping family %s: no eligible members", family.id)
            continue
        lines.extend(family_block)
        family_count += 1

    sources: List[GedcomSource] = []
    if options.include_sources:
        sources = collect_sources(selected)
        for source in sources:
            lines.extend(_source_lines(source))

    lines.append("0 TRLR")

    _log_collisions(XREF_INDIVIDUAL, [p.id for p in selected])
    _log_collisions(XREF_FAMILY, [f.id for f in families])
    _log_collisions(XREF_SOURCE, [s.id for s in sources])

    log.info(
        "Exported GEDCOM (INDI=%d, FAM=%d, SOUR=%d, skipped_people=%d)",
        len(selected),
        family_count,
        len(sources),
        len(people) - len(selected),
    )

    return LINE_SEPARATOR.join(lines)


def write_gedcom_file(document: str, output_path: str | Path) -> Path:
    """Write an exported document to disk as UTF-8 without newline translation."""
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    with output_path.open("w", encoding="utf-8", newline="") as f:
        f.write(document)

    log.info("GEDCOM written to %s (size=%d bytes)", output_path, output_path.stat().st_size)
    return output_path
