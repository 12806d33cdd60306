"""
VCF/BCF checker.

Runs `bcftools head -n <record_budget>` and discards the output: a zero exit
means the header and up to `record_budget` records parsed. Files with fewer
records are fine.
"""

from dataclasses import dataclass
from pathlib import Path

from ngs_integrity.checkers.base import BaseChecker
from ngs_integrity.exceptions import VcfFormatError
from ngs_integrity.report import CheckResult
from ngs_integrity.utils.formats import FileType
from ngs_integrity.utils.tools import run_tool


class VcfChecker(BaseChecker):
    """Parses a bounded VCF/BCF prefix with bcftools."""

    file_type = FileType.VCF_BCF

    @dataclass
    class Settings(BaseChecker.Settings):
        """
        Attributes:
            bcftools: bcftools executable name
            record_budget: Variant records parsed after the header
        """
        bcftools: str = "bcftools"
        record_budget: int = 10000

    def _check(self, path: Path) -> CheckResult:
        budget = self.settings.record_budget
        completed = run_tool(self.settings.bcftools, ["head", "-n", str(budget), path])

        if completed.returncode != 0:
            self.logger.debug(f"bcftools stderr: {completed.stderr.strip()}")
            raise VcfFormatError(f"parse failure within first {budget} records")

        return self.ok(path, f"parsed header + first {budget} records")
