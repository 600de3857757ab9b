# src/gedcom_codec/identity/xref.py
from __future__ import annotations

import re
from typing import Dict, Iterable, List, Optional

XREF_INDIVIDUAL = "I"
XREF_FAMILY = "F"
XREF_SOURCE = "S"

XREF_KINDS = (XREF_INDIVIDUAL, XREF_FAMILY, XREF_SOURCE)
MAX_XREF_ID_LENGTH = 20

_NON_ALNUM = re.compile(r"[^a-zA-Z0-9]")
_XREF_TOKEN = re.compile(r"^@[^@]+@$")


# -----------------------------
# Generation
# -----------------------------

def generate_xref(kind: str, native_id: object) -> str:
    """
    Map a native record id to a GEDCOM cross-reference token.

    Non-alphanumerics are stripped and the rest truncated to 20 characters,
    so distinct ids can collide (``"a-1"`` and ``"a1"`` both give ``@Ia1@``).
    """
    if kind not in XREF_KINDS:
        raise ValueError(f"Unknown xref kind: {kind!r}")

    clean_id = _NON_ALNUM.sub("", str(native_id))[:MAX_XREF_ID_LENGTH]
    return f"@{kind}{clean_id}@"


def find_xref_collisions(kind: str, native_ids: Iterable[object]) -> Dict[str, List[str]]:
    """
    Return ``{xref: [native ids...]}`` for every xref shared by two or more
    distinct native ids, ids listed in first-seen order.
    """
    seen: Dict[str, List[str]] = {}
    for native_id in native_ids:
        key = str(native_id)
        bucket = seen.setdefault(generate_xref(kind, key), [])
        if key not in bucket:
            bucket.append(key)

    return {xref: ids for xref, ids in seen.items() if len(ids) > 1}


# -----------------------------
# Recognition
# -----------------------------

def is_xref(token: Optional[str]) -> bool:
    """True for an ``@...@`` token such as ``@I1@``."""
    if not token:
        return False
    return bool(_XREF_TOKEN.match(token.strip()))
