"""
Custom exceptions for the NGS integrity checker.

Provides a hierarchical exception system that keeps the two kinds of
external-tool outcome apart:

Exception hierarchy:
    IntegrityError (base)
    ├── ConfigurationError (config file issues)
    ├── ToolUnavailableError (external binary not on PATH)
    ├── ToolFailedError (external tool ran and reported failure)
    ├── FileFormatError (sampled content is invalid)
    │   ├── FastqFormatError
    │   ├── BamFormatError
    │   ├── CramFormatError
    │   └── VcfFormatError
    ├── CompressionError (decompressor failures)
    └── IntegrityCheckFailed (a check produced ERROR; aborts the batch)

Usage:
    Catch IntegrityError to handle all package-specific errors:

    try:
        check_files(paths)
    except IntegrityCheckFailed as e:
        print(f"Aborted at {e.result.path}")
"""


class IntegrityError(Exception):
    """
    Base exception for all integrity checker errors.

    All custom exceptions in this package inherit from this.
    """
    pass


class ConfigurationError(IntegrityError):
    """
    Raised when there are errors in the configuration file.

    Examples:
    - Malformed JSON
    - Unknown sections or settings
    - Non-positive sample sizes
    """
    pass


class ToolUnavailableError(IntegrityError):
    """
    Raised when a required external tool cannot be resolved on PATH.

    Checkers report this as WARNING: the check is skipped, not failed.
    """

    def __init__(self, tool: str, message: str = None):
        self.tool = tool
        super().__init__(message or f"{tool} not found; check skipped")


class ToolFailedError(IntegrityError):
    """
    Raised when an external tool ran and reported failure (non-zero exit).

    Checkers report this as ERROR.
    """

    def __init__(self, tool: str, message: str, returncode: int = None, stderr: str = ""):
        self.tool = tool
        self.returncode = returncode
        self.stderr = stderr
        super().__init__(message)


class FileFormatError(IntegrityError):
    """
    Base exception for file format errors.

    Raised when the sampled window of an existing file is invalid.
    """
    pass


class FastqFormatError(FileFormatError):
    """Raised when the FASTQ sample is rejected."""
    pass


class BamFormatError(FileFormatError):
    """
    Raised when a BAM file has invalid structure.

    Examples:
    - Header without @HD or @SQ lines
    - BGZF EOF marker missing from the tail window (truncated file)
    """
    pass


class CramFormatError(FileFormatError):
    """Raised when a CRAM header lacks @HD or @SQ lines."""
    pass


class VcfFormatError(FileFormatError):
    """Raised when the VCF/BCF prefix cannot be parsed."""
    pass


class CompressionError(IntegrityError):
    """
    Raised when there are errors decompressing files.

    Examples:
    - Corrupted gzip file
    - Decompressor exited non-zero before the sample was complete
    """
    pass


class IntegrityCheckFailed(IntegrityError):
    """
    Raised by the status reporter after printing an ERROR result.

    Carries the failing CheckResult. Remaining files of the batch are not
    checked.
    """

    def __init__(self, result):
        self.result = result
        super().__init__(f"{result.file_type.label} {result.path}: {result.message}")
