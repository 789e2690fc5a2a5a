#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Quote Rewriter - Replaces Quoted nodes with language-appropriate marks

Walks the tree once, depth-first and left to right. Nodes carrying a
`language` open a language scope for their subtree; each Quoted node is
replaced by [Text(open), *children, Text(close)] using the marks of the
innermost scope, or the document default when the scope has none.

Flow:
    document default + glyph table
         ↓
    QuoteRewriter.rewrite(root)
         ↓
    tree without Quoted nodes (where marks were available)
"""

from typing import Dict, List, Optional, Set, Tuple
import logging

from .diagnostics import DiagnosticCode, Diagnostics
from .document_ast import Node, QuoteKind, Quoted, Text
from .errors import MalformedTagError, StructuralError, UnknownQuoteKindError
from .glyphs import GlyphSet, GlyphTable
from .language import LanguageContextStack, resolve_tag

logger = logging.getLogger(__name__)


class QuoteRewriter:
    """
    Rewrites quotation nodes in one document.

    Usage:
        rewriter = QuoteRewriter(table, default_marks, base_language='de')
        rewriter.rewrite(root)

    The glyph table may be shared; a rewriter (and its language stack)
    belongs to a single traversal.
    """

    def __init__(self, table: GlyphTable, default_marks: Optional[GlyphSet] = None,
                 base_language: Optional[str] = None,
                 diagnostics: Optional[Diagnostics] = None,
                 skip_invalid: bool = False):
        """
        Args:
            table: Glyph table used for node languages.
            default_marks: Document default, None for no substitution.
            base_language: Document language, bottom of the language stack.
            diagnostics: Collector for non-fatal conditions.
            skip_invalid: Leave Quoted nodes with an unknown kind untouched
                instead of raising StructuralError.
        """
        self.table = table
        self.default_marks = default_marks
        self.diagnostics = diagnostics if diagnostics is not None else Diagnostics()
        self.skip_invalid = skip_invalid
        self.stack = LanguageContextStack(base_language)
        self.rewritten = 0
        self.untouched = 0
        self._resolved: Dict[str, Optional[GlyphSet]] = {}
        self._reported: Set[Tuple[DiagnosticCode, Optional[str]]] = set()

    def rewrite(self, root: Node) -> Node:
        """
        Rewrite every Quoted node under `root`, in place.

        Returns:
            `root`, for chaining.

        Raises:
            StructuralError: `root` is itself a Quoted node, or a Quoted
                node has an unknown kind (unless skip_invalid).
        """
        if isinstance(root, Quoted):
            raise StructuralError('the document root cannot be a quotation')
        self._visit(root)
        logger.debug(f"Rewrote {self.rewritten} quotation(s), left {self.untouched} untouched")
        return root

    # ------------------------------------------------------------------
    # Traversal
    # ------------------------------------------------------------------

    def _visit(self, node: Node):
        pushed = node.language is not None
        if pushed:
            self.stack.push(node.language)
        try:
            for seq in node.child_sequences():
                self._rewrite_sequence(seq)
            for child in node.embedded_nodes():
                self._visit(child)
        finally:
            if pushed:
                self.stack.pop()

    def _rewrite_sequence(self, seq: List[Node]):
        i = 0
        while i < len(seq):
            child = seq[i]
            if not isinstance(child, Node):
                i += 1
                continue
            if not isinstance(child, Quoted):
                self._visit(child)
                i += 1
                continue

            if not self._check_kind(child):
                self._visit(child)
                i += 1
                continue

            marks = self._current_marks()
            if marks is None:
                self.untouched += 1
                self._visit(child)
                i += 1
                continue

            left, right = marks.primary if child.kind is QuoteKind.PRIMARY else marks.secondary
            seq[i:i + 1] = [Text(left), *child.children, Text(right)]
            self.rewritten += 1
            # Continue with the spliced content; nested quotes are handled in turn
            i += 1

    def _check_kind(self, quoted: Quoted) -> bool:
        if isinstance(quoted.kind, QuoteKind):
            return True
        error = UnknownQuoteKindError(quoted.kind)
        if not self.skip_invalid:
            raise error
        self.diagnostics.warn(DiagnosticCode.STRUCTURAL, str(error), context=str(quoted.kind))
        return False

    # ------------------------------------------------------------------
    # Mark selection
    # ------------------------------------------------------------------

    def _current_marks(self) -> Optional[GlyphSet]:
        tag = self.stack.top
        if tag is not None:
            marks = self._resolve(tag)
            if marks is not None:
                return marks

        if self.default_marks is not None:
            if tag is not None:
                self._report_once(
                    DiagnosticCode.LANGUAGE_FALLBACK, tag, logging.DEBUG,
                    f'{tag}: using the document default quotation marks',
                )
            return self.default_marks

        if tag is None:
            # Unconfigured document: nothing to substitute, nothing to warn about
            self._report_once(
                DiagnosticCode.NO_MARKS, None, logging.DEBUG,
                'no quotation marks defined for the document',
            )
        else:
            self._report_once(
                DiagnosticCode.NO_MARKS, tag, logging.WARNING,
                f'no quotation marks defined for {tag}',
            )
        return None

    def _report_once(self, code: DiagnosticCode, context: Optional[str], level: int, message: str):
        if (code, context) in self._reported:
            return
        self._reported.add((code, context))
        self.diagnostics.report(code, message, level, context)

    def _resolve(self, tag: str) -> Optional[GlyphSet]:
        if tag in self._resolved:
            return self._resolved[tag]
        try:
            marks = resolve_tag(self.table, tag)
        except MalformedTagError as e:
            self.diagnostics.warn(DiagnosticCode.MALFORMED_TAG, str(e), context=tag)
            marks = None
        self._resolved[tag] = marks
        return marks


def rewrite_quotes(root: Node, table: GlyphTable, default_marks: Optional[GlyphSet] = None,
                   base_language: Optional[str] = None,
                   diagnostics: Optional[Diagnostics] = None) -> Tuple[Node, Diagnostics]:
    """Convenience wrapper: rewrite `root` and return it with its diagnostics."""
    rewriter = QuoteRewriter(table, default_marks, base_language, diagnostics)
    return rewriter.rewrite(root), rewriter.diagnostics
