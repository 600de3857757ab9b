# src/gedcom_codec/identity/record_ids.py
from __future__ import annotations

import base64
import secrets

RECORD_ID_LENGTH = 12


def generate_record_id() -> str:
    """
    New persistent identifier for an imported record: 9 random bytes,
    base64-encoded with ``+``, ``/`` and ``=`` removed, cut to 12 characters.
    """
    encoded = base64.b64encode(secrets.token_bytes(9)).decode("ascii")
    for ch in "+/=":
        encoded = encoded.replace(ch, "")
    return encoded[:RECORD_ID_LENGTH]
