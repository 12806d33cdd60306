"""
Dispatcher - routes each input path to its checker.

Paths are processed strictly in order, one at a time. The batch stops at
the first ERROR: the reporter raises IntegrityCheckFailed and no later path
is touched.
"""

import os
from pathlib import Path
from typing import Dict, Iterable, List, Optional, TextIO, Union

from ngs_integrity.checkers import BamChecker, BaseChecker, CramChecker, FastqChecker, VcfChecker
from ngs_integrity.config_manager import Config
from ngs_integrity.logger import get_logger
from ngs_integrity.report import CheckResult, StatusReporter
from ngs_integrity.utils.formats import FileType

NOT_FOUND_MESSAGE = "not found; skipping"
UNSUPPORTED_MESSAGE = "unsupported extension; skipping"


class Dispatcher:
    """
    Classifies paths and runs the matching checker.

    Example:
        >>> dispatcher = Dispatcher()
        >>> dispatcher.run(["a.fastq.gz", "b.bam"])
        [CheckResult(...), CheckResult(...)]
    """

    def __init__(self, config: Optional[Config] = None, reporter: Optional[StatusReporter] = None):
        self.logger = get_logger()
        self.config = config if config is not None else Config()
        self.reporter = reporter if reporter is not None else StatusReporter()

        # One checker per type, reused for every file of that type
        self.checkers: Dict[FileType, BaseChecker] = {
            FileType.FASTQ: FastqChecker(self.config.fastq),
            FileType.BAM: BamChecker(self.config.bam),
            FileType.CRAM: CramChecker(self.config.cram),
            FileType.VCF_BCF: VcfChecker(self.config.vcf),
        }

    @property
    def results(self) -> List[CheckResult]:
        return self.reporter.results

    def check_path(self, path: Union[str, Path]) -> CheckResult:
        """Produce the result for one path without reporting it."""
        file_type = FileType.detect(path)

        if not os.path.isfile(path):
            return CheckResult.warning(file_type, path, NOT_FOUND_MESSAGE)

        checker = self.checkers.get(file_type)
        if checker is None:
            return CheckResult.warning(FileType.UNSUPPORTED, path, UNSUPPORTED_MESSAGE)

        return checker.check(path)

    def run(self, paths: Iterable[Union[str, Path]]) -> List[CheckResult]:
        """
        Check every path in order and report each result.

        Returns:
            All results, when no ERROR occurred

        Raises:
            IntegrityCheckFailed: At the first ERROR, after its line was printed
        """
        paths = list(paths)
        self.logger.info(f"Checking {len(paths)} file(s)")

        for path in paths:
            self.reporter.report(self.check_path(path))

        self.reporter.complete()
        return self.results


def check_files(
    paths: Iterable[Union[str, Path]],
    config: Optional[Config] = None,
    stream: Optional[TextIO] = None,
) -> List[CheckResult]:
    """
    Check files and print one status line per file.

    This is a simplified wrapper around Dispatcher for easier usage.

    Args:
        paths: Input file paths
        config: Optional Config (uses defaults if None)
        stream: Output stream for status lines (default: stdout)

    Returns:
        List[CheckResult]: One result per path

    Raises:
        IntegrityCheckFailed: At the first ERROR
    """
    dispatcher = Dispatcher(config, StatusReporter(stream))
    return dispatcher.run(paths)
