"""
CRAM checker.

Same header rule as BAM. Instead of an EOF check, the full header is
searched for reference MD5 tags (M5:); their absence is only a warning.
"""

from dataclasses import dataclass
from pathlib import Path

from ngs_integrity.checkers.alignment import AlignmentChecker
from ngs_integrity.exceptions import CramFormatError
from ngs_integrity.report import CheckResult
from ngs_integrity.utils.formats import FileType

MD5_TAG = "M5:"


class CramChecker(AlignmentChecker):
    """Checks CRAM header tags and reference checksum tags."""

    file_type = FileType.CRAM
    format_error = CramFormatError

    @dataclass
    class Settings(AlignmentChecker.Settings):
        pass

    def _check(self, path: Path) -> CheckResult:
        header = self._read_header(path)
        self._require_header_tags(header)

        if not any(MD5_TAG in line for line in header):
            return self.warning(path, "missing M5 reference checksum tags")

        return self.ok(path, "header verified")
