"""
parser_core.py
Single-pass GEDCOM reader: text -> ParsedPerson / ParsedFamily records.

The reader is a small state machine. ``state`` is one of ``Idle``,
``ParsingPerson`` or ``ParsingFamily``; ``event`` is the level-1 event whose
level-2 ``DATE``/``PLAC`` lines are currently being collected.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union

from gedcom_codec.core.exceptions import GedcomSyntaxError
from gedcom_codec.loader.tokenizer import Token, iter_tokens
from gedcom_codec.logging import get_logger
from gedcom_codec.models import (
    SEX_FEMALE,
    SEX_MALE,
    ParsedFamily,
    ParsedPerson,
    ParseResult,
)
from gedcom_codec.normalization.escaping import unescape_gedcom

log = get_logger(__name__)

_NAME_PATTERN = re.compile(r"^([^/]*)\s*/([^/]*)/")


class EventKind(Enum):
    BIRTH = "birth"
    DEATH = "death"
    BURIAL = "burial"
    CHRISTENING = "christening"
    MARRIAGE = "marriage"


PERSON_EVENT_TAGS = {
    "BIRT": EventKind.BIRTH,
    "DEAT": EventKind.DEATH,
    "BURI": EventKind.BURIAL,
    "CHR": EventKind.CHRISTENING,
}

FAMILY_EVENT_TAGS = {
    "MARR": EventKind.MARRIAGE,
}

_SEX_CODES = {"M": SEX_MALE, "F": SEX_FEMALE}


# ---------------------------------------------------------
# Parser states
# ---------------------------------------------------------
@dataclass(frozen=True)
class Idle:
    """Outside any INDI/FAM record (HEAD, SUBM, SOUR, TRLR, ...)."""


@dataclass(frozen=True)
class ParsingPerson:
    person: ParsedPerson


@dataclass(frozen=True)
class ParsingFamily:
    family: ParsedFamily


ParserState = Union[Idle, ParsingPerson, ParsingFamily]


# ---------------------------------------------------------
# Field helpers
# ---------------------------------------------------------
def apply_name(person: ParsedPerson, value: str) -> None:
    """
    Parse a ``Given /Surname/`` NAME value onto ``person``.

    Values without a slash-delimited surname only set ``name_full``; the
    given/surname fields keep whatever an earlier NAME line gave them.
    """
    match = _NAME_PATTERN.match(value)
    if match:
        given = match.group(1).strip()
        surname = match.group(2).strip()
        person.name_given = given or None
        person.name_surname = surname or None
        person.name_full = f"{given} {surname}".strip()
    else:
        person.name_full = value.replace("/", "").strip()


def _set_event_field(record: Union[ParsedPerson, ParsedFamily], kind: EventKind,
                     field_name: str, value: str) -> None:
    # An empty DATE/PLAC line never clears a value already read.
    if not value:
        return
    setattr(record, f"{kind.value}_{field_name}", value)


class GEDCOMParser:
    """
    Reads a whole GEDCOM document and collects INDI and FAM records.

    One instance parses one document; use ``parse_gedcom`` for the common case.
    """

    def __init__(self) -> None:
        self.result = ParseResult()
        self.state: ParserState = Idle()
        self.event: Optional[EventKind] = None

    # ---------------------------------------------------------
    # Entry point
    # ---------------------------------------------------------
    def parse(self, text: str) -> ParseResult:
        for lineno, item in iter_tokens(text):
            if isinstance(item, GedcomSyntaxError):
                self._skip_line(lineno, item)
                continue
            self.feed(item)

        self._finalize()

        log.info(
            "Parsed GEDCOM: people=%d families=%d warnings=%d",
            len(self.result.people),
            len(self.result.families),
            len(self.result.warnings),
        )
        return self.result

    def feed(self, token: Token) -> None:
        if token.level == 0:
            self._start_record(token)
        elif isinstance(self.state, ParsingPerson):
            self._person_line(self.state.person, token)
        elif isinstance(self.state, ParsingFamily):
            self._family_line(self.state.family, token)

    # ---------------------------------------------------------
    # Level 0
    # ---------------------------------------------------------
    def _start_record(self, token: Token) -> None:
        self._finalize()

        if token.tag == "INDI" and token.pointer:
            self.state = ParsingPerson(ParsedPerson(xref=token.pointer))
        elif token.tag == "FAM" and token.pointer:
            self.state = ParsingFamily(ParsedFamily(xref=token.pointer))
        else:
            if token.tag in ("INDI", "FAM"):
                self.result.warnings.append(
                    f"Line {token.lineno}: {token.tag} record without cross-reference ignored"
                )
            self.state = Idle()

    def _finalize(self) -> None:
        state = self.state
        if isinstance(state, ParsingPerson):
            self.result.people.append(state.person)
        elif isinstance(state, ParsingFamily):
            self.result.families.append(state.family)

        self.state = Idle()
        self.event = None

    # ---------------------------------------------------------
    # INDI substructures
    # ---------------------------------------------------------
    def _person_line(self, person: ParsedPerson, token: Token) -> None:
        if token.level == 1:
            self.event = PERSON_EVENT_TAGS.get(token.tag)
            if token.tag == "NAME":
                apply_name(person, unescape_gedcom(token.value))
            elif token.tag == "SEX":
                person.sex = _SEX_CODES.get(token.value)
        elif token.level == 2 and self.event is not None:
            self._event_detail(person, token)

    # ---------------------------------------------------------
    # FAM substructures
    # ---------------------------------------------------------
    def _family_line(self, family: ParsedFamily, token: Token) -> None:
        if token.level == 1:
            self.event = FAMILY_EVENT_TAGS.get(token.tag)
            if token.tag == "HUSB":
                family.husband_xref = token.value
            elif token.tag == "WIFE":
                family.wife_xref = token.value
            elif token.tag == "CHIL":
                family.children_xrefs.append(token.value)
        elif token.level == 2 and self.event is not None:
            self._event_detail(family, token)

    def _event_detail(self, record: Union[ParsedPerson, ParsedFamily], token: Token) -> None:
        if token.tag == "DATE":
            _set_event_field(record, self.event, "date", unescape_gedcom(token.value))
        elif token.tag == "PLAC":
            _set_event_field(record, self.event, "place", unescape_gedcom(token.value))

    # ---------------------------------------------------------
    # Diagnostics
    # ---------------------------------------------------------
    def _skip_line(self, lineno: int, error: GedcomSyntaxError) -> None:
        log.debug("Skipping line %d: %s", lineno, error)
        self.result.warnings.append(f"Line {lineno}: skipped unparseable line: {error.line!r}")


def parse_gedcom(text: str) -> ParseResult:
    """
    Parse GEDCOM text into people, families and diagnostics.

    Malformed lines become warnings; this function does not raise for
    string input.
    """
    return GEDCOMParser().parse(text)
