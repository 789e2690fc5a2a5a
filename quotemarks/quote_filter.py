#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Quote Filter - Pandoc JSON filter orchestration

Per run:
    1. Read override files and build the glyph table (once per filter)

Per document:
    2. Decode quot-marks / quot-lang / lang from the metadata
    3. Resolve the document's default quotation marks
    4. Rewrite every Quoted element
    5. Serialize back to pandoc JSON

Configuration problems are reported once per document and leave the
document's quotation marks as they were; only an unknown quote type
aborts (unless skip_invalid is set).
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional
import logging

from config.settings import Settings
from .configuration import DocumentConfig, Unset, resolve_document_marks
from .diagnostics import DiagnosticCode, Diagnostics
from .errors import ConfigError, ResolutionMiss
from .glyphs import GlyphSet, GlyphTable, build_glyph_table
from .overrides import find_override_files, load_overrides
from .pandoc_adapter import from_pandoc_json, read_document_config, to_pandoc_json
from .rewriter import QuoteRewriter

logger = logging.getLogger(__name__)


@dataclass
class FilterResult:
    """Outcome of filtering one document."""
    document: Dict[str, Any]
    diagnostics: Diagnostics
    config: DocumentConfig
    default_marks: Optional[GlyphSet] = None
    rewritten: int = 0
    untouched: int = 0

    @property
    def warnings(self) -> List[str]:
        return [d.message for d in self.diagnostics.warnings]


@dataclass
class DocumentSetup:
    """Configuration decoded and resolved for one document."""
    config: DocumentConfig = field(default_factory=Unset)
    default_marks: Optional[GlyphSet] = None

    @property
    def base_language(self) -> Optional[str]:
        return self.config.base_language if self.default_marks is not None else None


class QuoteFilter:
    """
    Replaces pandoc Quoted elements with language-appropriate marks.

    Usage:
        quote_filter = QuoteFilter(settings)
        result = quote_filter.apply(json.load(sys.stdin))
        json.dump(result.document, sys.stdout)

    The glyph table is built on first use and reused for later documents;
    each document gets its own rewriter.
    """

    def __init__(self, settings: Optional[Settings] = None,
                 override_files: Optional[List[Path]] = None,
                 table: Optional[GlyphTable] = None,
                 data_dir: Optional[Path] = None):
        """
        Args:
            settings: Filter settings (defaults read from the environment).
            override_files: quot-marks.yaml files read after the configured ones.
            table: Prebuilt glyph table; skips reading override files.
            data_dir: Directory searched instead of pandoc's user data dir.
        """
        self.settings = settings if settings is not None else Settings()
        self.override_files = list(override_files or [])
        self.data_dir = data_dir
        self._table = table
        self._table_diagnostics = Diagnostics()

    @property
    def table(self) -> GlyphTable:
        if self._table is None:
            self._table = self._build_table()
        return self._table

    def _build_table(self) -> GlyphTable:
        paths = find_override_files(
            search_data_dir=self.settings.search_data_dir,
            extra_files=self.settings.override_files(self.override_files),
            data_dir=self.data_dir,
        )
        overrides = load_overrides(paths, self._table_diagnostics)
        return build_glyph_table(overrides, self._table_diagnostics)

    @property
    def table_diagnostics(self) -> Diagnostics:
        """Problems met while reading override files."""
        if self._table is None:
            self._table = self._build_table()
        return self._table_diagnostics

    def setup_document(self, meta: Dict[str, Any], diagnostics: Diagnostics) -> DocumentSetup:
        """Decode and resolve the document's configuration, reporting problems once."""
        setup = DocumentSetup()
        try:
            setup.config = read_document_config(meta, self.settings.default_lang)
            setup.default_marks = resolve_document_marks(setup.config, self.table)
        except ConfigError as e:
            diagnostics.warn(DiagnosticCode.CONFIG, f'metadata field {e}', context=e.field)
        except ResolutionMiss as e:
            diagnostics.warn(DiagnosticCode.CONFIG, str(e), context=e.tag)
        return setup

    def apply(self, document: Dict[str, Any]) -> FilterResult:
        """
        Filter one pandoc JSON document.

        Args:
            document: Decoded pandoc JSON (pandoc-api-version, meta, blocks).

        Returns:
            FilterResult with the rewritten document and its diagnostics.

        Raises:
            ValueError: `document` is not a pandoc JSON document.
            StructuralError: A Quoted element has an unknown quote type
                (unless settings.skip_invalid).
        """
        diagnostics = Diagnostics()
        root = from_pandoc_json(document)
        setup = self.setup_document(document.get('meta', {}), diagnostics)

        rewriter = QuoteRewriter(
            self.table,
            setup.default_marks,
            base_language=setup.base_language,
            diagnostics=diagnostics,
            skip_invalid=self.settings.skip_invalid,
        )
        rewriter.rewrite(root)

        return FilterResult(
            document=to_pandoc_json(root, document),
            diagnostics=diagnostics,
            config=setup.config,
            default_marks=setup.default_marks,
            rewritten=rewriter.rewritten,
            untouched=rewriter.untouched,
        )
