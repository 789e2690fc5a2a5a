"""
Unit Tests for Override Files

Tests reading quot-marks.yaml files and the search path.
"""

from pathlib import Path

import pytest
from quotemarks.diagnostics import DiagnosticCode, Diagnostics
from quotemarks.glyphs import build_glyph_table
from quotemarks.language import resolve_tag
from quotemarks.overrides import (
    decode_marks,
    find_override_files,
    load_overrides,
    pandoc_data_dir,
    read_override_file,
)


def write_yaml(path: Path, text: str) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding='utf-8')
    return path


class TestDecodeMarks:
    """Test decoding of single values."""

    def test_string_is_split_into_characters(self):
        assert decode_marks('“”‘’') == ['“', '”', '‘', '’']

    def test_list_items_become_strings(self):
        assert decode_marks(['lu', "li'u", 1, None]) == ['lu', "li'u", '1', '']

    def test_other_values_rejected(self):
        assert decode_marks({'a': 'b'}) is None
        assert decode_marks(42) is None


class TestReadOverrideFile:
    """Test reading one file."""

    def test_reads_strings_and_lists(self, temp_dir):
        path = write_yaml(temp_dir / 'quot-marks.yaml', (
            "en-CA: “”‘’\n"
            "jbo: [lu, \"li'u\", \"lo'u\", \"le'u\"]\n"
        ))
        entries = read_override_file(path)
        assert entries['en-CA'] == ['“', '”', '‘', '’']
        assert entries['jbo'] == ['lu', "li'u", "lo'u", "le'u"]

    def test_norwegian_key_survives_yaml(self, temp_dir):
        path = write_yaml(temp_dir / 'quot-marks.yaml', 'no: «»‘’\n')
        assert read_override_file(path) == {'no': ['«', '»', '‘', '’']}

    def test_missing_file_reads_as_empty(self, temp_dir):
        diagnostics = Diagnostics()
        assert read_override_file(temp_dir / 'nope.yaml', diagnostics) == {}
        assert len(diagnostics) == 0

    def test_malformed_yaml_reported(self, temp_dir):
        diagnostics = Diagnostics()
        path = write_yaml(temp_dir / 'quot-marks.yaml', 'en: [“, ”\n')
        assert read_override_file(path, diagnostics) == {}
        assert len(diagnostics.by_code(DiagnosticCode.OVERRIDE_FILE)) == 1

    def test_non_mapping_reported(self, temp_dir):
        diagnostics = Diagnostics()
        path = write_yaml(temp_dir / 'quot-marks.yaml', '- “”‘’\n')
        assert read_override_file(path, diagnostics) == {}
        assert len(diagnostics.by_code(DiagnosticCode.OVERRIDE_FILE)) == 1

    def test_bad_entry_skipped_others_kept(self, temp_dir):
        diagnostics = Diagnostics()
        path = write_yaml(temp_dir / 'quot-marks.yaml', (
            "de: {left: x}\n"
            "fr: «»‹›\n"
        ))
        entries = read_override_file(path, diagnostics)
        assert list(entries) == ['fr']
        failures = diagnostics.by_code(DiagnosticCode.OVERRIDE_MERGE)
        assert len(failures) == 1
        assert failures[0].context == 'de'

    def test_empty_file(self, temp_dir):
        path = write_yaml(temp_dir / 'quot-marks.yaml', '')
        assert read_override_file(path) == {}


class TestLoadOverrides:
    """Test reading several files in order."""

    def test_later_files_win(self, temp_dir):
        first = write_yaml(temp_dir / 'a' / 'quot-marks.yaml', 'de: «»‹›\nfr: <>()\n')
        second = write_yaml(temp_dir / 'b' / 'quot-marks.yaml', 'de: »«›‹\n')

        overrides = load_overrides([first, second])

        assert overrides['de'] == ['»', '«', '›', '‹']
        assert overrides['fr'] == ['<', '>', '(', ')']

    def test_loaded_overrides_reach_lookup(self, temp_dir):
        path = write_yaml(temp_dir / 'quot-marks.yaml', 'en-CA: «»‹›\n')
        table = build_glyph_table(load_overrides([path]))
        assert resolve_tag(table, 'en-ca').primary == ('«', '»')
        assert resolve_tag(table, 'en-US').primary == ('“', '”')

    def test_wrong_count_rejected_at_merge(self, temp_dir):
        diagnostics = Diagnostics()
        path = write_yaml(temp_dir / 'quot-marks.yaml', 'de: «»\n')
        table = build_glyph_table(load_overrides([path], diagnostics), diagnostics)
        assert table['de'].primary == ('„', '“')
        assert len(diagnostics.by_code(DiagnosticCode.OVERRIDE_MERGE)) == 1


class TestSearchPath:
    """Test locating pandoc's data directory and override files."""

    def test_legacy_directory_wins(self, temp_dir):
        (temp_dir / '.pandoc').mkdir()
        assert pandoc_data_dir({}, temp_dir) == temp_dir / '.pandoc'

    def test_xdg_data_home(self, temp_dir):
        environ = {'XDG_DATA_HOME': str(temp_dir / 'xdg')}
        assert pandoc_data_dir(environ, temp_dir) == temp_dir / 'xdg' / 'pandoc'

    def test_default_xdg_location(self, temp_dir):
        assert pandoc_data_dir({}, temp_dir) == temp_dir / '.local' / 'share' / 'pandoc'

    def test_data_dir_first_then_extra_files(self, temp_dir):
        files = find_override_files(True, [Path('one.yaml'), 'two.yaml'], data_dir=temp_dir)
        assert files == [temp_dir / 'quot-marks.yaml', Path('one.yaml'), Path('two.yaml')]

    def test_data_dir_search_disabled(self, temp_dir):
        assert find_override_files(False, [Path('one.yaml')], data_dir=temp_dir) == [Path('one.yaml')]
