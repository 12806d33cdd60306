"""
Check results and status reporting.

Every checked path yields exactly one CheckResult. The StatusReporter turns
each result into one status line:

    [SEVERITY] TYPE PATH - message

and aborts the batch on ERROR by raising IntegrityCheckFailed after the
line has been printed.
"""

import sys
from dataclasses import dataclass
from typing import List, Optional, TextIO

from ngs_integrity.exceptions import IntegrityCheckFailed
from ngs_integrity.logger import get_logger
from ngs_integrity.utils.formats import FileType, Severity

COMPLETION_MESSAGE = "Files validation completed."


@dataclass(frozen=True)
class CheckResult:
    """Outcome of checking one file."""
    file_type: FileType
    path: str
    severity: Severity
    message: str
    elapsed: float = 0.0

    @classmethod
    def ok(cls, file_type: FileType, path, message: str) -> "CheckResult":
        return cls(file_type, str(path), Severity.OK, message)

    @classmethod
    def warning(cls, file_type: FileType, path, message: str) -> "CheckResult":
        return cls(file_type, str(path), Severity.WARNING, message)

    @classmethod
    def error(cls, file_type: FileType, path, message: str) -> "CheckResult":
        return cls(file_type, str(path), Severity.ERROR, message)

    def format_line(self) -> str:
        return f"[{self.severity.name}] {self.file_type.label} {self.path} - {self.message}"


class StatusReporter:
    """
    Prints status lines and enforces fail-fast behaviour.

    Attributes:
        stream: Output stream for status lines (default: sys.stdout)
        results: Results reported so far, in order
    """

    def __init__(self, stream: Optional[TextIO] = None):
        self.stream = stream
        self.results: List[CheckResult] = []
        self.logger = get_logger()

    def _write(self, line: str):
        stream = self.stream if self.stream is not None else sys.stdout
        print(line, file=stream, flush=True)

    def report(self, result: CheckResult) -> None:
        """
        Print one result.

        Raises:
            IntegrityCheckFailed: After printing, if the result is ERROR
        """
        self.results.append(result)
        self._write(result.format_line())
        self.logger.add_check_result(result)

        if result.severity.is_fatal:
            raise IntegrityCheckFailed(result)

    def complete(self) -> None:
        """Print the completion line; only called when no ERROR occurred."""
        self._write(COMPLETION_MESSAGE)
        self.logger.display_file_timings_summary()

    @property
    def warnings(self) -> List[CheckResult]:
        return [r for r in self.results if r.severity is Severity.WARNING]

    @property
    def worst_severity(self) -> Severity:
        return max((r.severity for r in self.results), default=Severity.OK)
