# src/gedcom_codec/loader/__init__.py

"""
Public interface for the GEDCOM line loader.

    from gedcom_codec.loader import (
        Token,
        GedcomSyntaxError,
        tokenize_line,
        tokenize_text,
        iter_tokens,
    )
"""

from __future__ import annotations

from gedcom_codec.core.exceptions import GedcomSyntaxError

from .tokenizer import Token, iter_lines, iter_tokens, tokenize_line, tokenize_text

__all__ = [
    "Token",
    "GedcomSyntaxError",
    "iter_lines",
    "iter_tokens",
    "tokenize_line",
    "tokenize_text",
]
