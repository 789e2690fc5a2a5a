#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Pandoc Runner - Reads and writes documents through the pandoc executable

Used by the command line's standalone mode:
    input file → pandoc -t json → QuoteFilter → pandoc -f json → output file
"""

import json
import shutil
import subprocess
from pathlib import Path
from typing import Any, Dict, List, Optional
import logging

from config.constants import PANDOC_DEFAULT_FROM, PANDOC_EXECUTABLE, PANDOC_TIMEOUT_SECONDS

logger = logging.getLogger(__name__)


class PandocError(RuntimeError):
    """Raised when pandoc is missing or exits with an error"""
    pass


class PandocRunner:
    """
    Thin wrapper around the pandoc command line.

    Usage:
        runner = PandocRunner()
        document = runner.read(Path("in.md"))
        runner.write(document, Path("out.html"))
    """

    def __init__(self, executable: str = PANDOC_EXECUTABLE,
                 timeout: int = PANDOC_TIMEOUT_SECONDS):
        self.executable = executable
        self.timeout = timeout

    @property
    def available(self) -> bool:
        return shutil.which(self.executable) is not None

    def _run(self, args: List[str], stdin: Optional[str] = None) -> str:
        if not self.available:
            raise PandocError(f"{self.executable} not found")

        command = [self.executable, *args]
        logger.debug(f"Running: {' '.join(command)}")
        try:
            result = subprocess.run(
                command,
                input=stdin,
                capture_output=True,
                text=True,
                encoding='utf-8',
                timeout=self.timeout,
            )
        except subprocess.TimeoutExpired as e:
            raise PandocError(f"pandoc timed out after {self.timeout}s") from e

        if result.returncode != 0:
            raise PandocError(f"pandoc failed ({result.returncode}): {result.stderr.strip()}")
        return result.stdout

    def read(self, path: Path, from_format: Optional[str] = None) -> Dict[str, Any]:
        """Parse `path` into pandoc's JSON AST."""
        output = self._run([
            str(path),
            '-f', from_format or PANDOC_DEFAULT_FROM,
            '-t', 'json',
        ])
        return json.loads(output)

    def write(self, document: Dict[str, Any], path: Path,
              to_format: Optional[str] = None, standalone: bool = False):
        """Render a JSON AST to `path`; pandoc guesses the format from the extension."""
        args = ['-f', 'json', '-o', str(path)]
        if to_format:
            args += ['-t', to_format]
        if standalone:
            args.append('-s')
        self._run(args, stdin=json.dumps(document, ensure_ascii=False))
