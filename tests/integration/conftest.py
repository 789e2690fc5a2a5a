#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Pytest fixtures for integration tests.

Provides:
- data_dir: Temporary pandoc data directory
- write_quot_marks: Writes a quot-marks.yaml file
- quote_filter: QuoteFilter that only reads data_dir
"""

import pytest
from pathlib import Path
import sys

# Add project root to path
PROJECT_ROOT = Path(__file__).parent.parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from config.settings import Settings
from quotemarks.quote_filter import QuoteFilter


@pytest.fixture
def data_dir(temp_dir):
    """Temporary directory standing in for pandoc's user data directory."""
    path = temp_dir / "pandoc"
    path.mkdir()
    return path


@pytest.fixture
def write_quot_marks():
    """Write `text` to <directory>/quot-marks.yaml and return its path."""
    def write(directory: Path, text: str) -> Path:
        path = directory / "quot-marks.yaml"
        path.write_text(text, encoding="utf-8")
        return path
    return write


@pytest.fixture
def quote_filter(data_dir):
    settings = Settings(default_lang=None, quot_marks_files=[], search_data_dir=True, skip_invalid=False)
    return QuoteFilter(settings, data_dir=data_dir)
