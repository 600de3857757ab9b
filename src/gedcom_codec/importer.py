"""
importer.py
Persist a ParseResult through a caller-supplied record store.

The parser keeps file-local xrefs; this module assigns persistent ids,
builds the ``xref -> id`` map while people are inserted, and resolves family
links through it. Store failures are recorded per record and never abort
the import.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any, Callable, Dict, List, Optional, Protocol, Tuple

from gedcom_codec.dates.formatter import gedcom_date_to_iso
from gedcom_codec.identity.record_ids import generate_record_id
from gedcom_codec.identity.xref import is_xref
from gedcom_codec.logging import get_logger
from gedcom_codec.models import ParsedFamily, ParsedPerson, ParseResult

log = get_logger(__name__)

_PERSON_DATE_FIELDS = ("birth_date", "death_date", "burial_date", "christening_date")


class RecordStore(Protocol):
    """Storage operations the importer needs. Any exception marks the record as failed."""

    def insert_person(self, person_id: str, person: ParsedPerson) -> None: ...

    def insert_family(
        self,
        family_id: str,
        husband_id: Optional[str],
        wife_id: Optional[str],
        family: ParsedFamily,
    ) -> None: ...

    def add_child(self, family_id: str, person_id: str) -> None: ...


@dataclass
class MemoryRecordStore:
    """Dict-backed RecordStore for dry runs and tests."""

    people: Dict[str, ParsedPerson] = field(default_factory=dict)
    families: Dict[str, Dict[str, Any]] = field(default_factory=dict)
    children: List[Tuple[str, str]] = field(default_factory=list)

    def insert_person(self, person_id: str, person: ParsedPerson) -> None:
        if person_id in self.people:
            raise ValueError(f"duplicate person id {person_id}")
        self.people[person_id] = person

    def insert_family(self, family_id, husband_id, wife_id, family) -> None:
        if family_id in self.families:
            raise ValueError(f"duplicate family id {family_id}")
        self.families[family_id] = {
            "husband_id": husband_id,
            "wife_id": wife_id,
            "marriage_date": family.marriage_date,
            "marriage_place": family.marriage_place,
        }

    def add_child(self, family_id: str, person_id: str) -> None:
        if family_id not in self.families:
            raise KeyError(f"unknown family id {family_id}")
        self.children.append((family_id, person_id))


@dataclass
class ImportSummary:
    people_imported: int = 0
    families_imported: int = 0
    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)
    xref_map: Dict[str, str] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        """Operator-facing payload."""
        return {
            "peopleImported": self.people_imported,
            "familiesImported": self.families_imported,
            "errors": list(self.errors),
            "warnings": list(self.warnings),
        }


def _normalized_person(person: ParsedPerson) -> ParsedPerson:
    return replace(
        person,
        **{name: gedcom_date_to_iso(getattr(person, name)) for name in _PERSON_DATE_FIELDS},
    )


def _resolve_member(
    xref: Optional[str], role: str, family: ParsedFamily, summary: ImportSummary
) -> Optional[str]:
    if not xref:
        return None
    if not is_xref(xref):
        summary.warnings.append(
            f"{role} value {xref!r} in family {family.xref} is not a cross-reference"
        )
        return None
    person_id = summary.xref_map.get(xref.strip())
    if person_id is None:
        summary.warnings.append(f"{role} {xref} not found for family {family.xref}")
    return person_id


def import_records(
    result: ParseResult,
    store: RecordStore,
    *,
    id_factory: Callable[[], str] = generate_record_id,
    normalize_dates: bool = False,
) -> ImportSummary:
    """
    Insert parsed people, then families, through ``store``.

    Args:
        result: Output of ``parse_gedcom``; its errors/warnings are carried over.
        store: Persistence backend.
        id_factory: Produces a new persistent id per record.
        normalize_dates: Rewrite exact ``D MON YYYY`` dates as ISO before insert.

    Returns:
        ImportSummary with counts, diagnostics and the ``xref -> id`` map.
    """
    summary = ImportSummary(errors=list(result.errors), warnings=list(result.warnings))

    for person in result.people:
        person_id = id_factory()
        record = _normalized_person(person) if normalize_dates else person
        try:
            store.insert_person(person_id, record)
        except Exception as exc:
            log.warning("Person %s failed to import: %s", person.xref, exc)
            summary.errors.append(f"Failed to import person {person.name_full}: {exc}")
            continue

        if person.xref in summary.xref_map:
            summary.warnings.append(f"Duplicate cross-reference {person.xref}; later record wins")
        summary.xref_map[person.xref] = person_id
        summary.people_imported += 1

    for family in result.families:
        family_id = id_factory()
        husband_id = _resolve_member(family.husband_xref, "Husband", family, summary)
        wife_id = _resolve_member(family.wife_xref, "Wife", family, summary)
        record = (
            replace(family, marriage_date=gedcom_date_to_iso(family.marriage_date))
            if normalize_dates
            else family
        )

        try:
            store.insert_family(family_id, husband_id, wife_id, record)
        except Exception as exc:
            log.warning("Family %s failed to import: %s", family.xref, exc)
            summary.errors.append(f"Failed to import family {family.xref}: {exc}")
            continue

        for child_xref in family.children_xrefs:
            child_id = _resolve_member(child_xref, "Child", family, summary)
            if child_id is None:
                continue
            try:
                store.add_child(family_id, child_id)
            except Exception as exc:
                summary.errors.append(
                    f"Failed to link child {child_xref} to family {family.xref}: {exc}"
                )

        summary.families_imported += 1

    log.info(
        "Import finished: people=%d/%d families=%d/%d errors=%d warnings=%d",
        summary.people_imported,
        len(result.people),
        summary.families_imported,
        len(result.families),
        len(summary.errors),
        len(summary.warnings),
    )
    return summary
