"""
Pytest configuration and shared fixtures for pandoc-quotes tests.
"""
import sys
import pytest
import tempfile
import shutil
from pathlib import Path
from types import SimpleNamespace
from typing import Generator

# Add project root to path
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from config.settings import Settings
from quotemarks.diagnostics import Diagnostics
from quotemarks.glyphs import GlyphTable, build_glyph_table


PANDOC_API_VERSION = [1, 23, 1]


# ============================================================================
# Fixtures: Configuration & Settings
# ============================================================================

@pytest.fixture
def test_settings() -> Settings:
    """Settings that ignore the environment's data directory."""
    return Settings(
        default_lang=None,
        quot_marks_files=[],
        search_data_dir=False,
        skip_invalid=False,
    )


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for test files."""
    temp_path = Path(tempfile.mkdtemp())
    yield temp_path
    shutil.rmtree(temp_path, ignore_errors=True)


@pytest.fixture
def table() -> GlyphTable:
    """Built-in glyph table without overrides."""
    return build_glyph_table()


@pytest.fixture
def diagnostics() -> Diagnostics:
    return Diagnostics()


# ============================================================================
# Fixtures: Pandoc JSON builders
# ============================================================================

def pandoc_str(text):
    return {'t': 'Str', 'c': text}


def pandoc_space():
    return {'t': 'Space'}


def pandoc_quoted(inlines, kind='DoubleQuote'):
    return {'t': 'Quoted', 'c': [{'t': kind}, inlines]}


def pandoc_span(inlines, lang=None):
    attrs = [['lang', lang]] if lang else []
    return {'t': 'Span', 'c': [['', [], attrs], inlines]}


def pandoc_div(blocks, lang=None):
    attrs = [['lang', lang]] if lang else []
    return {'t': 'Div', 'c': [['', [], attrs], blocks]}


def pandoc_para(inlines):
    return {'t': 'Para', 'c': inlines}


def meta_inlines(text):
    return {'t': 'MetaInlines', 'c': [pandoc_str(text)]}


def meta_list(items):
    return {'t': 'MetaList', 'c': [meta_inlines(item) for item in items]}


def pandoc_document(blocks, meta=None):
    return {
        'pandoc-api-version': PANDOC_API_VERSION,
        'meta': meta or {},
        'blocks': blocks,
    }


@pytest.fixture
def simple_document():
    """One paragraph: He said "Hello" and 'bye'."""
    return pandoc_document([
        pandoc_para([
            pandoc_str('He'), pandoc_space(), pandoc_str('said'), pandoc_space(),
            pandoc_quoted([pandoc_str('Hello')]),
            pandoc_space(), pandoc_str('and'), pandoc_space(),
            pandoc_quoted([pandoc_str('bye')], kind='SingleQuote'),
        ])
    ])


@pytest.fixture
def pandoc():
    """Builders for pandoc JSON elements."""
    return SimpleNamespace(
        str=pandoc_str,
        space=pandoc_space,
        quoted=pandoc_quoted,
        span=pandoc_span,
        div=pandoc_div,
        para=pandoc_para,
        meta_inlines=meta_inlines,
        meta_list=meta_list,
        document=pandoc_document,
    )
