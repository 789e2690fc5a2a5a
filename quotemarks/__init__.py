"""
Quotation Marks Module

Replaces abstract quotation nodes in a document tree with the quotation
marks of the document's (or a sub-tree's) language.
"""

from .configuration import (
    DocumentConfig,
    ExplicitGlyphs,
    ExplicitLanguage,
    GenericLanguage,
    Unset,
    resolve_document_marks,
    select_config,
)
from .diagnostics import Diagnostic, DiagnosticCode, Diagnostics
from .document_ast import Element, Node, QuoteKind, Quoted, Text
from .errors import (
    ConfigError,
    GlyphCountError,
    IncompleteGlyphSetError,
    MalformedTagError,
    QuoteMarksError,
    ResolutionMiss,
    StructuralError,
    UnknownQuoteKindError,
)
from .glyphs import BUILTIN_MARKS, GlyphSet, GlyphTable, build_glyph_table
from .language import LanguageContextStack, normalize_tag, resolve_tag
from .quote_filter import FilterResult, QuoteFilter
from .rewriter import QuoteRewriter, rewrite_quotes

__all__ = [
    # Glyphs
    'BUILTIN_MARKS',
    'GlyphSet',
    'GlyphTable',
    'build_glyph_table',
    # Languages
    'LanguageContextStack',
    'normalize_tag',
    'resolve_tag',
    # Configuration
    'DocumentConfig',
    'ExplicitGlyphs',
    'ExplicitLanguage',
    'GenericLanguage',
    'Unset',
    'resolve_document_marks',
    'select_config',
    # Tree
    'Element',
    'Node',
    'QuoteKind',
    'Quoted',
    'Text',
    # Rewriting
    'QuoteRewriter',
    'rewrite_quotes',
    'QuoteFilter',
    'FilterResult',
    # Diagnostics & errors
    'Diagnostic',
    'DiagnosticCode',
    'Diagnostics',
    'QuoteMarksError',
    'ConfigError',
    'MalformedTagError',
    'GlyphCountError',
    'ResolutionMiss',
    'StructuralError',
    'IncompleteGlyphSetError',
    'UnknownQuoteKindError',
]
