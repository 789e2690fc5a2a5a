#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Settings - Centralized configuration management
"""

import sys
from pathlib import Path
from typing import List, Optional
from pydantic_settings import BaseSettings

from .constants import LOG_LEVEL


# Base directory
BASE_DIR = Path(__file__).resolve().parent.parent


class Settings(BaseSettings):
    """Filter settings, read from PANDOC_QUOTES_* environment variables"""

    # ========== Languages ==========
    # Used when a document sets none of quot-marks, quot-lang or lang.
    # None keeps such documents untouched.
    default_lang: Optional[str] = None

    # ========== Override Files ==========
    quot_marks_files: List[Path] = []  # Read after the pandoc data directory
    search_data_dir: bool = True  # Look for quot-marks.yaml in pandoc's data dir

    # ========== Error Handling ==========
    # Leave quotation nodes with an unknown quote type in place
    # instead of aborting the document
    skip_invalid: bool = False

    # ========== Logging ==========
    log_level: str = LOG_LEVEL
    log_file: Optional[str] = None

    class Config:
        env_prefix = "PANDOC_QUOTES_"
        env_file = str(BASE_DIR / ".env")
        env_file_encoding = "utf-8"
        case_sensitive = False
        extra = "ignore"  # Allow extra fields from .env that aren't defined in model

    def override_files(self, extra: Optional[List[Path]] = None) -> List[Path]:
        """Configured override files followed by `extra`, in reading order"""
        return list(self.quot_marks_files) + list(extra or [])

    def print_config(self):
        """Print configuration summary to stderr"""
        out = sys.stderr
        print("=" * 50, file=out)
        print(f"Default language: {self.default_lang or '(none)'}", file=out)
        print(f"Data dir search:  {self.search_data_dir}", file=out)
        print(f"Override files:   {', '.join(map(str, self.quot_marks_files)) or '(none)'}", file=out)
        print(f"Skip invalid:     {self.skip_invalid}", file=out)
        print(f"Log level:        {self.log_level}", file=out)
        print("=" * 50, file=out)


def get_settings(**overrides) -> Settings:
    """Build a fresh Settings instance (environment first, then `overrides`)"""
    return Settings(**overrides)
