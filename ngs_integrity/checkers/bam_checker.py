"""
BAM checker.

1. Header: @HD or @SQ within the first 500 header lines.
2. Truncation: the hex dump of the last 32 KiB must contain the BGZF EOF
   signature 42430200.
"""

from dataclasses import dataclass
from pathlib import Path

from ngs_integrity.checkers.alignment import AlignmentChecker
from ngs_integrity.exceptions import BamFormatError
from ngs_integrity.report import CheckResult
from ngs_integrity.utils.formats import FileType
from ngs_integrity.utils.sampling import sample_tail_bytes, scratch_file

BAM_EOF_MAGIC = "42430200"


def contains_hex_signature(data: bytes, signature: str) -> bool:
    """
    Search the hex representation of data for a hex signature.

    Case-insensitive on the signature side. The match is on the hex text,
    so it is not restricted to byte alignment.

    Example:
        >>> contains_hex_signature(b"\\x1fBC\\x02\\x00\\x1b", "42430200")
        True
    """
    return signature.lower() in data.hex()


class BamChecker(AlignmentChecker):
    """Checks BAM header tags and the EOF marker in the tail window."""

    file_type = FileType.BAM
    format_error = BamFormatError

    @dataclass
    class Settings(AlignmentChecker.Settings):
        """
        Attributes:
            tail_bytes: Size of the tail window searched for the EOF marker
            eof_magic: Hex signature of the EOF marker
        """
        tail_bytes: int = 32768
        eof_magic: str = BAM_EOF_MAGIC

    def _check(self, path: Path) -> CheckResult:
        header = self._read_header(path)
        self._require_header_tags(header)

        with scratch_file(suffix=".bam.tail", directory=self.settings.scratch_dir) as tail:
            size = sample_tail_bytes(path, tail, self.settings.tail_bytes)
            self.logger.debug(f"Sampled last {size} bytes of {path}")
            found = contains_hex_signature(tail.read_bytes(), self.settings.eof_magic)

        if not found:
            raise BamFormatError(f"EOF magic not found ({self.settings.eof_magic})")

        return self.ok(path, "header and EOF marker verified")
