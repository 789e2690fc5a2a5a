"""
Unit Tests for Language Tags

Tests tag validation, the lookup fallback chain and the language stack.
"""

import pytest
from quotemarks.errors import MalformedTagError
from quotemarks.glyphs import GlyphSet, GlyphTable, build_glyph_table
from quotemarks.language import (
    LanguageContextStack,
    is_valid_tag,
    normalize_tag,
    primary_subtag,
    resolve_tag,
)


# ============================================================================
# Tag grammar
# ============================================================================

class TestTagGrammar:
    """Test the simplified RFC 5646 grammar."""

    @pytest.mark.parametrize('tag', ['en', 'de-CH', 'zh-Hant', 'jbo', 'EN-us', 'sr-Latn'])
    def test_valid_tags(self, tag):
        assert is_valid_tag(tag)
        assert normalize_tag(tag) == tag.lower()

    @pytest.mark.parametrize('tag', ['', 'e', 'engl', 'en-', 'en_US', 'en-US-x', 'de-1996', ' en', None])
    def test_malformed_tags_rejected(self, tag):
        assert not is_valid_tag(tag)
        with pytest.raises(MalformedTagError):
            normalize_tag(tag)

    def test_error_names_field(self):
        with pytest.raises(MalformedTagError) as exc_info:
            normalize_tag('en_US', field='lang')
        assert exc_info.value.field == 'lang'
        assert 'en_US' in str(exc_info.value)

    def test_primary_subtag(self):
        assert primary_subtag('en-CA') == 'en'
        assert primary_subtag('jbo') == 'jbo'


# ============================================================================
# Lookup
# ============================================================================

class TestResolveTag:
    """Test the lookup fallback chain."""

    def test_exact_match(self, table):
        assert resolve_tag(table, 'en-GB') == table['en-gb']

    def test_exact_match_ignores_case(self, table):
        assert resolve_tag(table, 'EN-gb') == table['en-gb']

    def test_regional_tag_falls_back_to_primary(self, table):
        assert 'en-ca' not in table
        assert resolve_tag(table, 'en-CA') == table['en']

    def test_explicit_regional_entry_wins(self):
        table = build_glyph_table({'en-CA': '«»‹›'})
        assert resolve_tag(table, 'en-CA').as_tuple() == ('«', '»', '‹', '›')
        assert resolve_tag(table, 'en').as_tuple() == ('“', '”', '‘', '’')

    def test_primary_tag_prefers_base_entry(self, table):
        assert resolve_tag(table, 'de') == table['de']

    def test_falls_through_to_a_regional_variant(self):
        table = GlyphTable({'pt-BR': '“”‘’'})
        assert resolve_tag(table, 'pt') == GlyphSet('“', '”', '‘', '’')
        assert resolve_tag(table, 'pt-AO') == GlyphSet('“', '”', '‘', '’')

    def test_any_variant_may_win(self):
        table = GlyphTable({'xx-AA': '<>()', 'xx-BB': '[]{}'})
        assert resolve_tag(table, 'xx-CC') in (table['xx-aa'], table['xx-bb'])

    def test_prefix_scan_needs_hyphen(self):
        table = GlyphTable({'enx': '<>()'})
        assert resolve_tag(table, 'en') is None

    def test_override_beats_prefix_fallback(self):
        table = build_glyph_table({'xx-YY': ('a', 'b', 'c', 'd'), 'xx-ZZ': ('e', 'f', 'g', 'h')})
        assert resolve_tag(table, 'xx-YY').as_tuple() == ('a', 'b', 'c', 'd')

    def test_unknown_language(self, table):
        assert resolve_tag(table, 'zz') is None
        assert resolve_tag(table, 'zz-ZZ') is None

    def test_malformed_tag_raises(self, table):
        with pytest.raises(MalformedTagError):
            resolve_tag(table, 'en_US')


# ============================================================================
# Language stack
# ============================================================================

class TestLanguageContextStack:
    """Test the traversal's language stack."""

    def test_empty_stack(self):
        stack = LanguageContextStack()
        assert stack.top is None
        assert stack.base is None
        assert not stack

    def test_push_and_pop(self):
        stack = LanguageContextStack()
        stack.push('de')
        stack.push('fr')
        assert stack.top == 'fr'
        assert stack.pop() == 'fr'
        assert stack.top == 'de'

    def test_base_is_never_popped(self):
        stack = LanguageContextStack('en')
        stack.push('de')
        stack.pop()
        assert stack.top == 'en'
        assert stack.base == 'en'
        with pytest.raises(IndexError):
            stack.pop()
        assert len(stack) == 1
