from gedcom_codec.core.exceptions import CodecError, ExportInputError, GedcomSyntaxError

__all__ = [
    "CodecError",
    "ExportInputError",
    "GedcomSyntaxError",
]
