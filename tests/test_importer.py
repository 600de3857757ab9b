# tests/test_importer.py

from __future__ import annotations

import itertools

from gedcom_codec.importer import ImportSummary, MemoryRecordStore, import_records
from gedcom_codec.models import ParsedFamily, ParsedPerson, ParseResult
from gedcom_codec.parser_core import parse_gedcom
from gedcom_codec.utils import mock_file_path


def _sequential_ids(prefix="id"):
    counter = itertools.count(1)
    return lambda: f"{prefix}{next(counter)}"


class FlakyStore(MemoryRecordStore):
    """Fails for configured xrefs."""

    def __init__(self, bad_people=(), bad_families=(), bad_children=()):
        super().__init__()
        self.bad_people = set(bad_people)
        self.bad_families = set(bad_families)
        self.bad_children = set(bad_children)

    def insert_person(self, person_id, person):
        if person.xref in self.bad_people:
            raise RuntimeError("constraint violation")
        super().insert_person(person_id, person)

    def insert_family(self, family_id, husband_id, wife_id, family):
        if family.xref in self.bad_families:
            raise RuntimeError("disk full")
        super().insert_family(family_id, husband_id, wife_id, family)

    def add_child(self, family_id, person_id):
        if person_id in self.bad_children:
            raise RuntimeError("fk violation")
        super().add_child(family_id, person_id)


def test_import_mock_file():
    result = parse_gedcom(mock_file_path("family_small.ged").read_text(encoding="utf-8"))
    store = MemoryRecordStore()

    summary = import_records(result, store, id_factory=_sequential_ids())

    assert summary.people_imported == 4
    assert summary.families_imported == 1
    assert summary.errors == []
    assert summary.warnings == [
        "Line 35: skipped unparseable line: 'this line is not gedcom'",
        "Child @I9@ not found for family @F1@",
    ]
    assert summary.xref_map == {"@I1@": "id1", "@I2@": "id2", "@I3@": "id3", "@I4@": "id4"}
    assert store.families["id5"]["husband_id"] == "id1"
    assert store.families["id5"]["wife_id"] == "id2"
    assert store.children == [("id5", "id3"), ("id5", "id4")]


def test_failed_person_is_reported_and_left_unmapped():
    result = ParseResult(
        people=[ParsedPerson(xref="@I1@", name_full="Ok Person"),
                ParsedPerson(xref="@I2@", name_full="Bad Person")],
        families=[ParsedFamily(xref="@F1@", husband_xref="@I1@", wife_xref="@I2@",
                               children_xrefs=["@I2@"])],
    )
    store = FlakyStore(bad_people={"@I2@"})

    summary = import_records(result, store, id_factory=_sequential_ids())

    assert summary.people_imported == 1
    assert summary.families_imported == 1
    assert summary.errors == ["Failed to import person Bad Person: constraint violation"]
    assert "Wife @I2@ not found for family @F1@" in summary.warnings
    assert "Child @I2@ not found for family @F1@" in summary.warnings
    assert store.families["id3"]["wife_id"] is None
    assert store.children == []


def test_failed_family_does_not_stop_import():
    result = ParseResult(
        people=[ParsedPerson(xref="@I1@")],
        families=[ParsedFamily(xref="@F1@", husband_xref="@I1@"),
                  ParsedFamily(xref="@F2@", husband_xref="@I1@")],
    )
    store = FlakyStore(bad_families={"@F1@"})

    summary = import_records(result, store, id_factory=_sequential_ids())

    assert summary.families_imported == 1
    assert summary.errors == ["Failed to import family @F1@: disk full"]
    assert list(store.families) == ["id3"]


def test_failed_child_link_is_an_error():
    result = ParseResult(
        people=[ParsedPerson(xref="@I1@"), ParsedPerson(xref="@I2@")],
        families=[ParsedFamily(xref="@F1@", children_xrefs=["@I1@", "@I2@"])],
    )
    store = FlakyStore(bad_children={"id1"})

    summary = import_records(result, store, id_factory=_sequential_ids())

    assert summary.families_imported == 1
    assert summary.errors == ["Failed to link child @I1@ to family @F1@: fk violation"]
    assert store.children == [("id3", "id2")]


def test_duplicate_xref_warns_and_later_wins():
    result = ParseResult(people=[ParsedPerson(xref="@I1@"), ParsedPerson(xref="@I1@")])

    summary = import_records(result, MemoryRecordStore(), id_factory=_sequential_ids())

    assert summary.people_imported == 2
    assert summary.xref_map == {"@I1@": "id2"}
    assert summary.warnings == ["Duplicate cross-reference @I1@; later record wins"]


def test_member_values_that_are_not_pointers_are_warned():
    text = "\r\n".join([
        "0 @I1@ INDI",
        "1 NAME Karl /Berg/",
        "0 @F1@ FAM",
        "1 HUSB Karl Berg",
        "1 WIFE @I1@",
        "1 CHIL I1",
        "0 TRLR",
    ])
    store = MemoryRecordStore()

    summary = import_records(parse_gedcom(text), store, id_factory=_sequential_ids())

    assert summary.warnings == [
        "Husband value 'Karl Berg' in family @F1@ is not a cross-reference",
        "Child value 'I1' in family @F1@ is not a cross-reference",
    ]
    assert store.families["id2"]["husband_id"] is None
    assert store.families["id2"]["wife_id"] == "id1"
    assert store.children == []


def test_parse_diagnostics_are_carried_over():
    result = ParseResult(errors=["earlier error"], warnings=["earlier warning"])
    summary = import_records(result, MemoryRecordStore())
    assert summary.errors == ["earlier error"]
    assert summary.warnings == ["earlier warning"]
    # the parse result itself is untouched
    assert result.errors == ["earlier error"]


def test_normalize_dates():
    result = ParseResult(
        people=[ParsedPerson(xref="@I1@", birth_date="7 MAR 1984", death_date="ABT 2050")],
        families=[ParsedFamily(xref="@F1@", husband_xref="@I1@", marriage_date="14 JUN 1876")],
    )
    store = MemoryRecordStore()

    import_records(result, store, id_factory=_sequential_ids(), normalize_dates=True)

    person = store.people["id1"]
    assert person.birth_date == "1984-03-07"
    assert person.death_date == "ABT 2050"
    assert store.families["id2"]["marriage_date"] == "1876-06-14"
    # parsed records are not modified in place
    assert result.people[0].birth_date == "7 MAR 1984"


def test_default_id_factory_generates_ids():
    result = ParseResult(people=[ParsedPerson(xref="@I1@"), ParsedPerson(xref="@I2@")])
    summary = import_records(result, MemoryRecordStore())
    ids = list(summary.xref_map.values())
    assert len(set(ids)) == 2


def test_summary_payload():
    summary = ImportSummary(people_imported=3, families_imported=1, errors=["e"], warnings=["w"])
    assert summary.to_dict() == {
        "peopleImported": 3,
        "familiesImported": 1,
        "errors": ["e"],
        "warnings": ["w"],
    }
