#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Quotation Mark Errors

Three classes of failure:
- ConfigError: the document or an override entry is misconfigured.
  Recoverable at document scope (no substitution for that scope).
- ResolutionMiss: a well-formed language has no quotation marks.
  Recoverable at the scope that asked.
- StructuralError: the input violates the node or glyph contract.
  Fatal for the affected node.
"""

from typing import Optional


class QuoteMarksError(Exception):
    """Base error for quotation mark processing"""
    pass


class ConfigError(QuoteMarksError):
    """Raised for malformed configuration values"""

    def __init__(self, message: str, field: Optional[str] = None):
        self.field = field
        if field:
            message = f'{field}: {message}'
        super().__init__(message)


class MalformedTagError(ConfigError):
    """Raised when a language tag does not match the tag grammar"""

    def __init__(self, tag: str, field: Optional[str] = None):
        self.tag = tag
        super().__init__(f'{tag!r}: not an RFC 5646-like language code', field)


class GlyphCountError(ConfigError):
    """Raised when a glyph list does not hold exactly four non-empty glyphs"""

    def __init__(self, count: int, field: Optional[str] = None, reason: str = 'wrong count'):
        self.count = count
        super().__init__(f'{reason}: expected 4 quotation marks, got {count}', field)


class ResolutionMiss(QuoteMarksError):
    """Raised when no quotation marks are defined for a language"""

    def __init__(self, tag: str):
        self.tag = tag
        super().__init__(f'no quotation marks defined for {tag}')


class StructuralError(QuoteMarksError):
    """Raised when the input violates the node or glyph contract"""
    pass


class IncompleteGlyphSetError(StructuralError):
    """Raised when a glyph set is built with a missing or empty glyph"""
    pass


class UnknownQuoteKindError(StructuralError):
    """Raised for a quotation node whose kind is neither primary nor secondary"""

    def __init__(self, kind):
        self.kind = kind
        super().__init__(f'{kind}: unknown quote type')
