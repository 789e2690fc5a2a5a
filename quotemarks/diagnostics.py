#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Diagnostics Collector

Non-fatal conditions met while resolving and rewriting are both logged
and recorded, so hosts can surface them and tests can count them.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Iterator, List, Optional

logger = logging.getLogger(__name__)


class DiagnosticCode(str, Enum):
    """Kinds of reported conditions"""
    CONFIG = "config"                         # bad quot-marks / quot-lang / lang
    OVERRIDE_MERGE = "override-merge"         # override entry rejected
    OVERRIDE_FILE = "override-file"           # override file unreadable
    NO_MARKS = "no-marks"                     # quotation node left untouched
    MALFORMED_TAG = "malformed-tag"           # node language attribute invalid
    LANGUAGE_FALLBACK = "language-fallback"   # node language fell back to default
    STRUCTURAL = "structural"                 # invalid node skipped


@dataclass(frozen=True)
class Diagnostic:
    """A single reported condition."""
    code: DiagnosticCode
    message: str
    level: int = logging.WARNING
    context: Optional[str] = None  # language tag or scope name

    def __str__(self) -> str:
        return self.message


class Diagnostics:
    """
    Ordered collection of diagnostics.

    Usage:
        diagnostics = Diagnostics()
        diagnostics.warn(DiagnosticCode.NO_MARKS, "no quotation marks defined for zz", context="zz")
        for d in diagnostics: ...
    """

    def __init__(self, log: Optional[logging.Logger] = None):
        self._records: List[Diagnostic] = []
        self._logger = log or logger

    def report(self, code: DiagnosticCode, message: str,
               level: int = logging.WARNING, context: Optional[str] = None) -> Diagnostic:
        diagnostic = Diagnostic(code=code, message=message, level=level, context=context)
        self._records.append(diagnostic)
        self._logger.log(level, message)
        return diagnostic

    def warn(self, code: DiagnosticCode, message: str, context: Optional[str] = None) -> Diagnostic:
        return self.report(code, message, logging.WARNING, context)

    def debug(self, code: DiagnosticCode, message: str, context: Optional[str] = None) -> Diagnostic:
        return self.report(code, message, logging.DEBUG, context)

    def by_code(self, code: DiagnosticCode) -> List[Diagnostic]:
        return [d for d in self._records if d.code == code]

    @property
    def warnings(self) -> List[Diagnostic]:
        return [d for d in self._records if d.level >= logging.WARNING]

    def __iter__(self) -> Iterator[Diagnostic]:
        return iter(self._records)

    def __len__(self) -> int:
        return len(self._records)
