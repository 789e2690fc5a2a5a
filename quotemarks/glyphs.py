#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Glyph Table - Quotation marks by language

Maps normalized language tags to the four quotation marks a language uses:
primary left/right and secondary (nested) left/right.

Built-in entries follow CLDR delimiter data. Callers extend or replace them
with override entries (usually read from quot-marks.yaml files); the
built-in table itself is never modified.
"""

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Dict, Iterator, Optional, Sequence, Tuple, Union
import logging

from config.constants import GLYPH_COUNT
from .diagnostics import DiagnosticCode, Diagnostics
from .errors import ConfigError, GlyphCountError, IncompleteGlyphSetError
from .language import normalize_tag

logger = logging.getLogger(__name__)


# ============================================================================
# Glyph Set
# ============================================================================

@dataclass(frozen=True)
class GlyphSet:
    """Primary and secondary quotation marks of one language."""
    primary_left: str
    primary_right: str
    secondary_left: str
    secondary_right: str

    def __post_init__(self):
        for name in ('primary_left', 'primary_right', 'secondary_left', 'secondary_right'):
            value = getattr(self, name)
            if not isinstance(value, str) or not value:
                raise IncompleteGlyphSetError(f'{name}: quotation mark missing or empty')

    @classmethod
    def from_value(cls, value: Union['GlyphSet', str, Sequence[str]],
                   field: Optional[str] = None) -> 'GlyphSet':
        """
        Build a glyph set from user input.

        Args:
            value: A GlyphSet, a string of exactly four characters,
                or a sequence of exactly four non-empty strings.
            field: Name used in error messages.

        Raises:
            GlyphCountError: Wrong number of glyphs or an empty glyph.
            ConfigError: Value of an unsupported type.
        """
        if isinstance(value, GlyphSet):
            return value
        if isinstance(value, str):
            value = list(value)
        elif not isinstance(value, (list, tuple)):
            raise ConfigError('neither a string nor a list', field)

        if len(value) != GLYPH_COUNT:
            raise GlyphCountError(len(value), field)
        glyphs = []
        for item in value:
            if not isinstance(item, str):
                raise ConfigError(f'{item!r}: quotation mark is not a string', field)
            if not item:
                raise GlyphCountError(len(value), field, reason='empty quotation mark')
            glyphs.append(item)
        return cls(*glyphs)

    def as_tuple(self) -> Tuple[str, str, str, str]:
        return (self.primary_left, self.primary_right,
                self.secondary_left, self.secondary_right)

    @property
    def primary(self) -> Tuple[str, str]:
        return self.primary_left, self.primary_right

    @property
    def secondary(self) -> Tuple[str, str]:
        return self.secondary_left, self.secondary_right


# ============================================================================
# Built-in Marks
# ============================================================================

# tag: (primary left, primary right, secondary left, secondary right)
BUILTIN_MARKS: Dict[str, Tuple[str, str, str, str]] = {
    'af': ('“', '”', '‘', '’'),
    'ar': ('”', '“', '’', '‘'),
    'be': ('«', '»', '„', '“'),
    'bg': ('„', '“', '„', '“'),
    'bs': ('„', '“', '‘', '’'),
    'ca': ('«', '»', '“', '”'),
    'cs': ('„', '“', '‚', '‘'),
    'cy': ('‘', '’', '“', '”'),
    'da': ('“', '”', '‘', '’'),
    'de': ('„', '“', '‚', '‘'),
    'de-CH': ('«', '»', '‹', '›'),
    'el': ('«', '»', '“', '”'),
    'en': ('“', '”', '‘', '’'),
    'en-GB': ('‘', '’', '“', '”'),
    'en-US': ('“', '”', '‘', '’'),
    'eo': ('“', '”', '‘', '’'),
    'es': ('«', '»', '“', '”'),
    'es-MX': ('“', '”', '‘', '’'),
    'et': ('„', '“', '‚', '‘'),
    'eu': ('«', '»', '‹', '›'),
    'fa': ('«', '»', '‹', '›'),
    'fi': ('”', '”', '’', '’'),
    'fil': ('“', '”', '‘', '’'),
    'fo': ('”', '”', '’', '’'),
    'fr': ('«', '»', '‹', '›'),
    'fr-CH': ('«', '»', '‹', '›'),
    'ga': ('“', '”', '‘', '’'),
    'gl': ('“', '”', '‘', '’'),
    'he': ('”', '”', '’', '’'),
    'hr': ('„', '“', '‚', '‘'),
    'hu': ('„', '”', '»', '«'),
    'hy': ('«', '»', '«', '»'),
    'id': ('“', '”', '‘', '’'),
    'is': ('„', '“', '‚', '‘'),
    'it': ('«', '»', '“', '”'),
    'it-CH': ('«', '»', '‹', '›'),
    'ja': ('「', '」', '『', '』'),
    'jbo': ('lu', "li'u", "lo'u", "le'u"),
    'ka': ('„', '“', '«', '»'),
    'kk': ('«', '»', '“', '”'),
    'km': ('«', '»', '“', '”'),
    'ko': ('“', '”', '‘', '’'),
    'lt': ('„', '“', '„', '“'),
    'lv': ('“', '”', '„', '“'),
    'mk': ('„', '“', '‚', '‘'),
    'mn': ('“', '”', '‘', '’'),
    'ms': ('“', '”', '‘', '’'),
    'mt': ('“', '”', '‘', '’'),
    'nb': ('«', '»', '‘', '’'),
    'nl': ('“', '”', '‘', '’'),
    'nn': ('«', '»', '‘', '’'),
    'no': ('«', '»', '‘', '’'),
    'pl': ('„', '”', '«', '»'),
    'pt': ('“', '”', '‘', '’'),
    'pt-PT': ('«', '»', '“', '”'),
    'rm': ('«', '»', '‹', '›'),
    'ro': ('„', '”', '«', '»'),
    'ru': ('«', '»', '„', '“'),
    'sk': ('„', '“', '‚', '‘'),
    'sl': ('„', '“', '‚', '‘'),
    'sq': ('«', '»', '“', '”'),
    'sr': ('„', '“', '‘', '’'),
    'sv': ('”', '”', '’', '’'),
    'th': ('“', '”', '‘', '’'),
    'tr': ('“', '”', '‘', '’'),
    'uk': ('«', '»', '„', '“'),
    'vi': ('“', '”', '‘', '’'),
    'zh': ('“', '”', '‘', '’'),
    'zh-Hant': ('「', '」', '『', '』'),
    'zh-TW': ('「', '」', '『', '』'),
}


# ============================================================================
# Glyph Table
# ============================================================================

class GlyphTable(Mapping):
    """
    Read-only mapping of language tags to glyph sets.

    Keys are stored normalized (lower case), so lookups with any
    capitalization succeed. Tables are never modified after construction
    and may be shared between concurrent rewrites.

    Usage:
        table = GlyphTable.builtin()
        table['EN-gb'].primary  # ('‘', '’')
        merged = table.merged({'xx-YY': ('<', '>', '(', ')')})
    """

    def __init__(self, entries: Optional[Mapping] = None):
        self._entries: Dict[str, GlyphSet] = {}
        for tag, glyphs in (entries or {}).items():
            self._entries[normalize_tag(tag)] = GlyphSet.from_value(glyphs, tag)

    @classmethod
    def builtin(cls) -> 'GlyphTable':
        return cls(BUILTIN_MARKS)

    def merged(self, overrides: Mapping,
               diagnostics: Optional[Diagnostics] = None) -> 'GlyphTable':
        """
        Return a new table with `overrides` applied on top of this one.

        Each override must supply all four glyphs. A failing entry is
        reported and skipped; the other entries are still applied.
        """
        table = GlyphTable()
        table._entries = dict(self._entries)
        for tag, glyphs in overrides.items():
            try:
                key = normalize_tag(tag)
                table._entries[key] = GlyphSet.from_value(glyphs, field=str(tag))
            except (ConfigError, IncompleteGlyphSetError) as e:
                message = f'override for {tag!r} ignored: {e}'
                if diagnostics is not None:
                    diagnostics.warn(DiagnosticCode.OVERRIDE_MERGE, message, context=str(tag))
                else:
                    logger.warning(message)
        return table

    def __getitem__(self, tag: str) -> GlyphSet:
        return self._entries[tag.lower()]

    def __contains__(self, tag) -> bool:
        return isinstance(tag, str) and tag.lower() in self._entries

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f'GlyphTable({len(self._entries)} languages)'


def build_glyph_table(overrides: Optional[Mapping] = None,
                      diagnostics: Optional[Diagnostics] = None) -> GlyphTable:
    """
    Build the glyph table for one run: built-ins plus `overrides`.

    Args:
        overrides: Mapping of language tag to glyphs (GlyphSet, four
            character string or four item list). Later keys win.
        diagnostics: Collector for rejected entries.

    Returns:
        A new GlyphTable.
    """
    table = GlyphTable.builtin()
    if overrides:
        table = table.merged(overrides, diagnostics)
    logger.debug(f"Glyph table built with {len(table)} languages")
    return table
