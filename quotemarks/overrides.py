#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Override Files - User quotation marks from quot-marks.yaml

A quot-marks.yaml file maps RFC 5646-like language codes to quotation
marks, either as a string of four characters or as a list of four strings:

    en-CA: “”‘’
    jbo: [lu, li'u, lo'u, le'u]

Files are read in search order and entries from later files replace
those from earlier ones.

Search order:
1. The pandoc user data directory (if enabled)
2. Files listed in the settings
3. Files given on the command line
"""

import os
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional
import logging

import yaml

from config.constants import (
    QUOT_MARKS_FILENAME, PANDOC_DATA_DIR_NAME, PANDOC_LEGACY_DATA_DIR
)
from .diagnostics import DiagnosticCode, Diagnostics

logger = logging.getLogger(__name__)


def pandoc_data_dir(environ: Optional[Dict[str, str]] = None, home: Optional[Path] = None) -> Path:
    """
    Locate pandoc's user data directory the way pandoc does.

    ~/.pandoc wins if it exists; otherwise $XDG_DATA_HOME/pandoc,
    with XDG_DATA_HOME defaulting to ~/.local/share.
    """
    environ = os.environ if environ is None else environ
    home = Path.home() if home is None else home

    legacy = home / PANDOC_LEGACY_DATA_DIR
    if legacy.is_dir():
        return legacy

    xdg = environ.get('XDG_DATA_HOME') or str(home / '.local' / 'share')
    return Path(xdg) / PANDOC_DATA_DIR_NAME


def find_override_files(search_data_dir: bool = True,
                        extra_files: Iterable[Path] = (),
                        data_dir: Optional[Path] = None) -> List[Path]:
    """
    List override files in reading order.

    Args:
        search_data_dir: Include quot-marks.yaml from pandoc's data directory.
        extra_files: Further files, read last.
        data_dir: Data directory to use instead of pandoc's.

    Returns:
        Paths to read; files that don't exist are read as empty.
    """
    files = []
    if search_data_dir:
        files.append((data_dir or pandoc_data_dir()) / QUOT_MARKS_FILENAME)
    files.extend(Path(f) for f in extra_files)
    return files


def _language_key(key: Any) -> str:
    # YAML 1.1 reads the Norwegian code `no` as false
    if key is False:
        return 'no'
    return str(key)


def decode_marks(value: Any) -> Optional[List[str]]:
    """
    Decode one quot-marks.yaml value into a list of glyphs.

    A string is split into its characters; list items are converted to
    strings. Count is checked when the entry is merged into the table.

    Returns:
        The glyphs, or None if `value` is neither a string nor a list.
    """
    if isinstance(value, str):
        return list(value)
    if isinstance(value, list):
        return ['' if item is None else str(item) for item in value]
    return None


def read_override_file(path: Path, diagnostics: Optional[Diagnostics] = None) -> Dict[str, List[str]]:
    """
    Read one quot-marks.yaml file.

    A missing file reads as empty. An unreadable or malformed file, and
    any entry that is neither a string nor a list, is reported and skipped.
    """
    diagnostics = diagnostics if diagnostics is not None else Diagnostics()
    path = Path(path)

    if not path.exists():
        logger.debug(f"No override file at {path}")
        return {}

    try:
        with open(path, 'r', encoding='utf-8') as f:
            data = yaml.safe_load(f) or {}
    except (OSError, UnicodeDecodeError, yaml.YAMLError) as e:
        diagnostics.warn(DiagnosticCode.OVERRIDE_FILE, f'{path}: {e}', context=str(path))
        return {}

    if not isinstance(data, dict):
        diagnostics.warn(
            DiagnosticCode.OVERRIDE_FILE,
            f'{path}: expected a mapping of languages to quotation marks',
            context=str(path),
        )
        return {}

    entries = {}
    for key, value in data.items():
        lang = _language_key(key)
        marks = decode_marks(value)
        if marks is None:
            diagnostics.warn(
                DiagnosticCode.OVERRIDE_MERGE,
                f'{path}: {lang}: neither a string nor a list',
                context=lang,
            )
            continue
        entries[lang] = marks

    logger.info(f"Read {len(entries)} override(s) from {path}")
    return entries


def load_overrides(paths: Iterable[Path], diagnostics: Optional[Diagnostics] = None) -> Dict[str, List[str]]:
    """Read `paths` in order; later definitions replace earlier ones."""
    overrides: Dict[str, List[str]] = {}
    for path in paths:
        overrides.update(read_override_file(path, diagnostics))
    return overrides
