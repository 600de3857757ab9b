"""
Text normalization helpers shared by the exporter and the parser.
"""

from gedcom_codec.normalization.escaping import escape_gedcom, unescape_gedcom

__all__ = [
    "escape_gedcom",
    "unescape_gedcom",
]
