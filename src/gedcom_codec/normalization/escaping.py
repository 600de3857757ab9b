# src/gedcom_codec/normalization/escaping.py

from __future__ import annotations

import re
from typing import Optional

# CRLF, lone CR and lone LF each fold to one space.
_LINE_BREAK = re.compile(r"\r\n|[\r\n]")


def escape_gedcom(text: Optional[str]) -> str:
    """
    Make free text safe for a single GEDCOM line value.

    Line breaks become a single space and every ``@`` is doubled, since a bare
    ``@`` opens a cross-reference token.

    Examples:
        escape_gedcom("O'Brien@Home")  -> "O'Brien@@Home"
        escape_gedcom("line 1\\r\\nline 2") -> "line 1 line 2"
    """
    if not text:
        return ""
    return _LINE_BREAK.sub(" ", str(text)).replace("@", "@@")


def unescape_gedcom(text: Optional[str]) -> Optional[str]:
    """Collapse doubled ``@@`` back to ``@``. Line break folding is not reversible."""
    if text is None:
        return None
    return text.replace("@@", "@")
