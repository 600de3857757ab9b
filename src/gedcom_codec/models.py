from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Any, List, Mapping, Optional, Union

from gedcom_codec.core.exceptions import ExportInputError

SEX_MALE = "male"
SEX_FEMALE = "female"

DateValue = Union[str, date, None]


def _require(data: Mapping[str, Any], key: str, kind: str) -> Any:
    if not isinstance(data, Mapping):
        raise ExportInputError(f"{kind} record must be a mapping, got {type(data).__name__}")
    value = data.get(key)
    if value is None or value == "":
        raise ExportInputError(f"{kind} record is missing required field {key!r}")
    return value


def _optional_id(value: Any) -> Optional[str]:
    # Ids are compared as strings; JSON input may carry them as numbers.
    if value is None or value == "":
        return None
    return str(value)


# -----------------------------
# Export input
# -----------------------------

@dataclass(slots=True)
class GedcomSource:
    """A source citation attached to a person."""
    id: str
    source_name: Optional[str] = None
    source_url: Optional[str] = None
    content: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "GedcomSource":
        return cls(
            id=str(_require(data, "id", "Source")),
            source_name=data.get("source_name"),
            source_url=data.get("source_url"),
            content=data.get("content"),
        )


@dataclass(slots=True)
class GedcomPerson:
    """
    A person as supplied by the storage layer for export.

    Dates may be ISO strings or ``date``/``datetime`` values; anything the
    exporter cannot read as a calendar date is written verbatim.
    """
    id: str
    name_full: str = ""
    name_given: Optional[str] = None
    name_surname: Optional[str] = None
    sex: Optional[str] = None
    birth_date: DateValue = None
    birth_place: Optional[str] = None
    death_date: DateValue = None
    death_place: Optional[str] = None
    burial_date: DateValue = None
    burial_place: Optional[str] = None
    christening_date: DateValue = None
    christening_place: Optional[str] = None
    living: bool = False
    sources: List[GedcomSource] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "GedcomPerson":
        person_id = _require(data, "id", "Person")
        return cls(
            id=str(person_id),
            name_full=data.get("name_full") or "",
            name_given=data.get("name_given"),
            name_surname=data.get("name_surname"),
            sex=data.get("sex"),
            birth_date=data.get("birth_date"),
            birth_place=data.get("birth_place"),
            death_date=data.get("death_date"),
            death_place=data.get("death_place"),
            burial_date=data.get("burial_date"),
            burial_place=data.get("burial_place"),
            christening_date=data.get("christening_date"),
            christening_place=data.get("christening_place"),
            living=bool(data.get("living", False)),
            sources=[GedcomSource.from_dict(s) for s in data.get("sources") or []],
        )


@dataclass(slots=True)
class GedcomFamily:
    """A family as supplied by the storage layer; members are referenced by id."""
    id: str
    husband_id: Optional[str] = None
    wife_id: Optional[str] = None
    marriage_date: DateValue = None
    marriage_place: Optional[str] = None
    children_ids: List[str] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "GedcomFamily":
        family_id = _require(data, "id", "Family")
        return cls(
            id=str(family_id),
            husband_id=_optional_id(data.get("husband_id")),
            wife_id=_optional_id(data.get("wife_id")),
            marriage_date=data.get("marriage_date"),
            marriage_place=data.get("marriage_place"),
            children_ids=[str(c) for c in data.get("children_ids") or []],
        )


@dataclass(slots=True)
class ExportOptions:
    include_living: bool = False
    include_sources: bool = True
    submitter_name: str = "Kindred Family Tree"

    @classmethod
    def from_config(cls, cfg=None) -> "ExportOptions":
        """Build options from the ``export:`` section of the configuration."""
        if cfg is None:
            from gedcom_codec.config import get_config

            cfg = get_config()

        section = cfg.export
        defaults = cls()
        return cls(
            include_living=bool(section.get("include_living", defaults.include_living)),
            include_sources=bool(section.get("include_sources", defaults.include_sources)),
            submitter_name=section.get("submitter_name") or defaults.submitter_name,
        )


# -----------------------------
# Parser output
# -----------------------------

@dataclass(slots=True)
class ParsedPerson:
    """
    An INDI record read from a GEDCOM document.

    ``xref`` is the file-local token (e.g. ``@I1@``); resolving it to a
    persistent identifier is the importer's job.
    """
    xref: str
    name_full: str = ""
    name_given: Optional[str] = None
    name_surname: Optional[str] = None
    sex: Optional[str] = None
    birth_date: Optional[str] = None
    birth_place: Optional[str] = None
    death_date: Optional[str] = None
    death_place: Optional[str] = None
    burial_date: Optional[str] = None
    burial_place: Optional[str] = None
    christening_date: Optional[str] = None
    christening_place: Optional[str] = None


@dataclass(slots=True)
class ParsedFamily:
    xref: str
    husband_xref: Optional[str] = None
    wife_xref: Optional[str] = None
    children_xrefs: List[str] = field(default_factory=list)
    marriage_date: Optional[str] = None
    marriage_place: Optional[str] = None


@dataclass(slots=True)
class ParseResult:
    people: List[ParsedPerson] = field(default_factory=list)
    families: List[ParsedFamily] = field(default_factory=list)
    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)
