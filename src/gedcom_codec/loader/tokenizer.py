# src/gedcom_codec/loader/tokenizer.py

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Iterator, Optional, Tuple, Union

from gedcom_codec.core.exceptions import GedcomSyntaxError

# LEVEL [XREF] TAG [VALUE]
_LINE_PATTERN = re.compile(r"^(\d+)\s+(@[^@]+@)?\s*(\S+)\s*(.*)$")
_LINE_SPLIT = re.compile(r"\r?\n")

# GEDCOM levels are at most two digits; anything this long is garbage.
MAX_LEVEL_DIGITS = 9


@dataclass(frozen=True)
class Token:
    """
    A single GEDCOM line token.

    Attributes:
        lineno: 1-based line number in the original text.
        level: Parsed GEDCOM level (0, 1, 2, ...).
        pointer: Optional cross-reference identifier, e.g. "@I1@" or None.
        tag: Upper-cased GEDCOM tag, e.g. "INDI", "FAM", "BIRT", "DATE".
        value: The line value with surrounding whitespace removed (may be empty).
        raw: The original line content without line terminators.
    """
    lineno: int
    level: int
    pointer: Optional[str]
    tag: str
    value: str
    raw: str


def _strip_eol(line: str) -> str:
    """Strip trailing CR/LF characters but preserve all other whitespace."""
    return line.rstrip("\r\n")


def tokenize_line(line: str, lineno: int = 0) -> Token:
    """
    Parse a single GEDCOM line into a Token.

    Required order:
        <level> [<pointer>] <tag> [<value>]

    Examples:
        "0 HEAD"
        "0 @I1@ INDI"
        "1 NAME John /Doe/"
        "2 DATE 7 MAR 1984"
    """
    raw = _strip_eol(line)

    # A UTF-8 BOM is noise wherever it shows up, not only on line 1.
    if "\ufeff" in raw:
        raw = raw.replace("\ufeff", "")

    stripped = raw.strip()
    if not stripped:
        raise GedcomSyntaxError(
            f"Empty or whitespace-only line at {lineno}", lineno=lineno, line=raw
        )

    match = _LINE_PATTERN.match(stripped)
    if match is None:
        raise GedcomSyntaxError(
            f"Line {lineno}: expected LEVEL [XREF] TAG [VALUE] -> {raw!r}",
            lineno=lineno,
            line=raw,
        )

    level_str, pointer, tag, value = match.groups()
    if len(level_str) > MAX_LEVEL_DIGITS:
        raise GedcomSyntaxError(
            f"Line {lineno}: level number too long -> {raw[:40]!r}...",
            lineno=lineno,
            line=raw,
        )

    return Token(
        lineno=lineno,
        level=int(level_str),
        pointer=pointer or None,
        tag=tag.upper(),
        value=(value or "").strip(),
        raw=raw,
    )


def iter_lines(text: str) -> Iterator[Tuple[int, str]]:
    """Yield ``(lineno, line)`` for every non-blank line of ``text``."""
    for lineno, line in enumerate(_LINE_SPLIT.split(text), start=1):
        if not line.replace("\ufeff", "").strip():
            continue
        yield lineno, line


def iter_tokens(text: str) -> Iterator[Tuple[int, Union[Token, GedcomSyntaxError]]]:
    """
    Tolerant variant of ``tokenize_text``: yields ``(lineno, token)`` or
    ``(lineno, error)`` so callers can report bad lines and keep going.
    """
    for lineno, line in iter_lines(text):
        try:
            yield lineno, tokenize_line(line, lineno=lineno)
        except GedcomSyntaxError as exc:
            yield lineno, exc


def tokenize_text(text: str) -> Iterator[Token]:
    """
    Yield Token objects for every non-blank line of a GEDCOM document.

    Raises:
        GedcomSyntaxError: if a line is syntactically invalid.
    """
    for lineno, line in iter_lines(text):
        yield tokenize_line(line, lineno=lineno)
