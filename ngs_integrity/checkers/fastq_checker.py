"""
FASTQ checker.

Samples the first `line_budget` lines (decompressing .gz/.bz2 through the
external decompressor) into one scratch file and runs fastQValidator on it:

    fastQValidator --file <sample> --maxErrors 1 --disableSeqIDCheck
"""

from dataclasses import dataclass
from pathlib import Path

from ngs_integrity.checkers.base import BaseChecker
from ngs_integrity.exceptions import ToolFailedError, ToolUnavailableError
from ngs_integrity.report import CheckResult
from ngs_integrity.utils.formats import FileType
from ngs_integrity.utils.sampling import sample_head_lines, scratch_file
from ngs_integrity.utils.tools import check_tool_available, run_tool


class FastqChecker(BaseChecker):
    """
    Validates a bounded FASTQ prefix with fastQValidator.

    Example:
        >>> checker = FastqChecker(FastqChecker.Settings(line_budget=4000))
        >>> checker.check("sample_R1.fastq.gz").severity
        <Severity.OK: 0>
    """

    file_type = FileType.FASTQ

    @dataclass
    class Settings(BaseChecker.Settings):
        """
        Attributes:
            line_budget: Number of leading lines sampled (4 lines per read)
            validator: fastQValidator executable name
            max_errors: Errors tolerated by the validator
            disable_seq_id_check: Skip the validator's sequence identifier checks
        """
        line_budget: int = 40000
        validator: str = "fastQValidator"
        max_errors: int = 1
        disable_seq_id_check: bool = True

    def _check(self, path: Path) -> CheckResult:
        validator = self.settings.validator

        with scratch_file(suffix=".fastq", directory=self.settings.scratch_dir) as sample:
            lines = sample_head_lines(path, sample, self.settings.line_budget)
            self.logger.debug(f"Sampled {lines} lines from {path}")

            if not check_tool_available(validator):
                raise ToolUnavailableError(validator)

            args = ["--file", sample, "--maxErrors", str(self.settings.max_errors)]
            if self.settings.disable_seq_id_check:
                args.append("--disableSeqIDCheck")

            completed = run_tool(validator, args)

        if completed.returncode != 0:
            raise ToolFailedError(
                validator,
                f"{validator} reported format problems",
                returncode=completed.returncode,
                stderr=completed.stderr,
            )

        return self.ok(path, f"{validator} completed without critical errors")
