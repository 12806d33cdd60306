"""
Tests for the severity mapping in BaseChecker.check().
"""

from dataclasses import dataclass

import pytest

from ngs_integrity.checkers import BaseChecker
from ngs_integrity.exceptions import (
    BamFormatError,
    CompressionError,
    ToolFailedError,
    ToolUnavailableError,
)
from ngs_integrity.utils.formats import FileType, Severity


class RaisingChecker(BaseChecker):
    """Checker whose _check raises a preset exception."""

    file_type = FileType.BAM

    @dataclass
    class Settings(BaseChecker.Settings):
        pass

    def __init__(self, exc=None):
        super().__init__()
        self.exc = exc

    def _check(self, path):
        if self.exc is not None:
            raise self.exc
        return self.ok(path, "fine")


class TestSeverityMapping:

    def test_ok(self, tmp_path):
        result = RaisingChecker().check(tmp_path / "a.bam")

        assert result.severity == Severity.OK
        assert result.path == str(tmp_path / "a.bam")
        assert result.elapsed >= 0

    def test_tool_unavailable_is_warning(self):
        result = RaisingChecker(ToolUnavailableError("samtools")).check("a.bam")

        assert result.severity == Severity.WARNING
        assert result.message == "samtools not found; check skipped"

    @pytest.mark.parametrize("exc", [
        ToolFailedError("samtools", "samtools failed", returncode=1),
        BamFormatError("EOF magic not found (42430200)"),
        CompressionError("decompression failed"),
    ])
    def test_failures_are_errors(self, exc):
        result = RaisingChecker(exc).check("a.bam")

        assert result.severity == Severity.ERROR
        assert result.message == str(exc)
        assert result.file_type == FileType.BAM

    def test_os_error_is_error(self):
        exc = PermissionError(13, "Permission denied")

        result = RaisingChecker(exc).check("a.bam")

        assert result.severity == Severity.ERROR
        assert result.message == "could not read file: Permission denied"

    def test_unexpected_exceptions_propagate(self):
        with pytest.raises(RuntimeError):
            RaisingChecker(RuntimeError("bug")).check("a.bam")
