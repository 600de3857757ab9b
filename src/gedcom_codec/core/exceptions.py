from typing import Optional


class CodecError(Exception):
    """Base exception for GEDCOM codec failures."""


class GedcomSyntaxError(CodecError, ValueError):
    """Raised when a GEDCOM line does not match ``LEVEL [XREF] TAG [VALUE]``."""

    def __init__(self, message: str, *, lineno: int = 0, line: Optional[str] = None):
        super().__init__(message)
        self.lineno = lineno
        self.line = line


class ExportInputError(CodecError, ValueError):
    """Raised when export input records are malformed."""
