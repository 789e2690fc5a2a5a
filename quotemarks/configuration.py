#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Document Configuration - Which quotation marks a document uses

A document picks its default marks with exactly one of, by priority:
    1. quot-marks: four explicit glyphs
    2. quot-lang:  a language used only for quotation marks
    3. lang:       the document language
Lower-priority fields are ignored once a higher one is set. A document
with none of them is left untouched.
"""

from dataclasses import dataclass
from typing import Optional, Sequence
import logging

from config.constants import META_LANG, META_QUOT_LANG, META_QUOT_MARKS
from .errors import ResolutionMiss
from .glyphs import GlyphSet, GlyphTable
from .language import normalize_tag, resolve_tag

logger = logging.getLogger(__name__)


# ============================================================================
# Configuration Shapes
# ============================================================================

class DocumentConfig:
    """Base class of the four configuration shapes."""
    source: Optional[str] = None

    @property
    def base_language(self) -> Optional[str]:
        """Language that seeds the traversal's context stack, if any."""
        return None


@dataclass(frozen=True)
class ExplicitGlyphs(DocumentConfig):
    """Four glyphs given directly (already split if given as one string)."""
    glyphs: Sequence[str]
    source = META_QUOT_MARKS


@dataclass(frozen=True)
class ExplicitLanguage(DocumentConfig):
    """Language chosen for quotation marks only."""
    tag: str
    source = META_QUOT_LANG

    @property
    def base_language(self) -> Optional[str]:
        return self.tag


@dataclass(frozen=True)
class GenericLanguage(DocumentConfig):
    """The document's general language."""
    tag: str
    source = META_LANG

    @property
    def base_language(self) -> Optional[str]:
        return self.tag


@dataclass(frozen=True)
class Unset(DocumentConfig):
    """No quotation mark configuration."""


def select_config(quot_marks: Optional[Sequence[str]] = None,
                  quot_lang: Optional[str] = None,
                  lang: Optional[str] = None) -> DocumentConfig:
    """Pick the highest-priority populated field."""
    if quot_marks is not None:
        return ExplicitGlyphs(tuple(quot_marks))
    if quot_lang is not None:
        return ExplicitLanguage(quot_lang)
    if lang is not None:
        return GenericLanguage(lang)
    return Unset()


# ============================================================================
# Resolution
# ============================================================================

def resolve_document_marks(config: DocumentConfig, table: GlyphTable) -> Optional[GlyphSet]:
    """
    Resolve the document's default quotation marks.

    Args:
        config: The document's configuration.
        table: Glyph table for language lookups.

    Returns:
        The default GlyphSet, or None when the document is unconfigured.

    Raises:
        GlyphCountError: Explicit glyphs are not exactly four non-empty strings.
        MalformedTagError: The configured language is not a valid tag.
        ConfigError: Explicit glyphs of an unsupported type.
        ResolutionMiss: The configured language has no quotation marks.
    """
    if isinstance(config, ExplicitGlyphs):
        return GlyphSet.from_value(list(config.glyphs), field=config.source)

    if isinstance(config, (ExplicitLanguage, GenericLanguage)):
        normalize_tag(config.tag, field=config.source)
        marks = resolve_tag(table, config.tag)
        if marks is None:
            raise ResolutionMiss(config.tag)
        logger.debug(f"Document marks from {config.source}={config.tag}: {marks.as_tuple()}")
        return marks

    return None
