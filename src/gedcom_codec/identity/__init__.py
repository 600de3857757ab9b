from gedcom_codec.identity.record_ids import generate_record_id
from gedcom_codec.identity.xref import (
    XREF_FAMILY,
    XREF_INDIVIDUAL,
    XREF_SOURCE,
    find_xref_collisions,
    generate_xref,
    is_xref,
)

__all__ = [
    "XREF_FAMILY",
    "XREF_INDIVIDUAL",
    "XREF_SOURCE",
    "find_xref_collisions",
    "generate_record_id",
    "generate_xref",
    "is_xref",
]
