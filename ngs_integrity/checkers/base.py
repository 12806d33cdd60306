"""
Common shape of the per-format checkers.

A checker samples a bounded window of one file, hands it to an external
tool and returns exactly one CheckResult. Failures inside a checker are
raised as package exceptions and mapped to a severity here:

    ToolUnavailableError                           -> WARNING (check skipped)
    ToolFailedError, FileFormatError,
    CompressionError, OSError                      -> ERROR
"""

import time
from abc import ABC, abstractmethod
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Optional, Union

from ngs_integrity.exceptions import (
    CompressionError,
    FileFormatError,
    ToolFailedError,
    ToolUnavailableError,
)
from ngs_integrity.logger import get_logger
from ngs_integrity.report import CheckResult
from ngs_integrity.utils.formats import FileType
from ngs_integrity.utils.settings import BaseSettings


class BaseChecker(ABC):
    """
    Base class for FastqChecker, BamChecker, CramChecker and VcfChecker.

    Subclasses set `file_type`, define a nested Settings dataclass derived
    from BaseChecker.Settings, and implement `_check()`.
    """

    file_type: FileType = FileType.UNSUPPORTED

    @dataclass
    class Settings(BaseSettings):
        """
        Attributes:
            scratch_dir: Directory for scratch files (None = system temp dir)
        """
        scratch_dir: Optional[str] = None

    def __init__(self, settings: Optional[Settings] = None) -> None:
        self.logger = get_logger()
        self.settings = settings if settings is not None else self.Settings()

    def check(self, path: Union[str, Path]) -> CheckResult:
        """
        Check one existing file and return its result.

        Never raises for tool or content problems; those become WARNING or
        ERROR results.
        """
        start = time.time()
        self.logger.debug(f"Checking {path}", file_context=str(path), file_type=self.file_type.label)

        try:
            result = self._check(Path(path))
        except ToolUnavailableError as e:
            result = self.warning(path, str(e))
        except (ToolFailedError, FileFormatError, CompressionError) as e:
            result = self.error(path, str(e))
        except OSError as e:
            result = self.error(path, f"could not read file: {e.strerror or e}")

        return replace(result, path=str(path), elapsed=time.time() - start)

    @abstractmethod
    def _check(self, path: Path) -> CheckResult:
        """Run the format-specific checks."""

    def ok(self, path, message: str) -> CheckResult:
        return CheckResult.ok(self.file_type, path, message)

    def warning(self, path, message: str) -> CheckResult:
        return CheckResult.warning(self.file_type, path, message)

    def error(self, path, message: str) -> CheckResult:
        return CheckResult.error(self.file_type, path, message)
