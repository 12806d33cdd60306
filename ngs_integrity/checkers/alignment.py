"""
Shared header handling for the SAM-family checkers (BAM, CRAM).

The header is extracted with `samtools view -H`, which reads only the
header block and not the alignment records.
"""

import re
from dataclasses import dataclass
from pathlib import Path
from typing import List

from ngs_integrity.checkers.base import BaseChecker
from ngs_integrity.exceptions import FileFormatError, ToolFailedError
from ngs_integrity.utils.tools import format_stderr, run_tool

# @HD or @SQ at line start, case-sensitive
REQUIRED_HEADER_TAG = re.compile(r'^@(HD|SQ)')


class AlignmentChecker(BaseChecker):
    """Base for checkers that need the textual SAM header."""

    format_error = FileFormatError

    @dataclass
    class Settings(BaseChecker.Settings):
        """
        Attributes:
            samtools: samtools executable name
            header_lines: Leading header lines searched for @HD/@SQ
        """
        samtools: str = "samtools"
        header_lines: int = 500

    def _read_header(self, path: Path) -> List[str]:
        """
        Return the full header as a list of lines.

        Raises:
            ToolUnavailableError: If samtools is not on PATH
            ToolFailedError: If samtools cannot read the header
        """
        samtools = self.settings.samtools
        completed = run_tool(samtools, ["view", "-H", path], capture_stdout=True)

        if completed.returncode != 0:
            detail = format_stderr(completed.stderr)
            raise ToolFailedError(
                samtools,
                f"{samtools} could not read header (exit {completed.returncode})"
                + (f": {detail}" if detail else ""),
                returncode=completed.returncode,
                stderr=completed.stderr,
            )

        header = completed.stdout.splitlines()
        self.logger.debug(f"Read {len(header)} header lines from {path}")
        return header

    def _require_header_tags(self, header: List[str]) -> None:
        """
        Require @HD or @SQ within the first `header_lines` lines.

        Raises:
            FileFormatError: (subclass per format) if neither tag is present
        """
        window = header[:self.settings.header_lines]
        if not any(REQUIRED_HEADER_TAG.match(line) for line in window):
            raise self.format_error("header missing required tags (@HD/@SQ)")
