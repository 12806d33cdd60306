"""
File type, compression and severity enumerations.

Provides enums for:
    - CodingType: Compression formats (GZIP, BZIP2, NONE)
    - FileType: Checked file types (FASTQ, BAM, CRAM, VCF_BCF, UNSUPPORTED)
    - Severity: Ordered check outcome (OK < WARNING < ERROR)

FileType classification is case-sensitive and walks an ordered suffix table,
unlike CodingType which accepts extensions and filenames loosely.
"""

from enum import Enum, IntEnum
from pathlib import Path
from typing import Union


class CodingType(Enum):
    """
    Supported compression types for genomic data files.

    Supported formats:
    - GZIP: .gz files (gzip compression)
    - BZIP2: .bz2 files (bzip2 compression)
    - NONE: Uncompressed files
    """
    GZIP = "gzip"
    BZIP2 = "bzip2"
    NONE = "none"

    @classmethod
    def _missing_(cls, value):
        """
        Called when enum lookup fails. Allows flexible input formats.

        Supports:
        - CodingType('gz') or CodingType('.gz') → GZIP
        - CodingType('bz2') or CodingType('.bz2') → BZIP2
        - CodingType('reads.fastq.gz') → GZIP (extracts from filename)
        - CodingType('') or invalid → NONE
        """
        value_lower = str(value).lower().strip()

        if value_lower.startswith('.'):
            value_lower = value_lower[1:]

        extension_map = {
            'gz': cls.GZIP,
            'gzip': cls.GZIP,
            'bz2': cls.BZIP2,
            'bzip2': cls.BZIP2,
        }

        if value_lower in extension_map:
            return extension_map[value_lower]

        # Filename with extension
        if '.' in value_lower:
            ext = Path(value_lower).suffix
            if ext:
                return cls._missing_(ext)

        return cls.NONE

    @property
    def is_compressed(self) -> bool:
        return self is not CodingType.NONE


class FileType(Enum):
    """
    File types routed to a checker.

    The value is the label printed in status lines.
    """
    FASTQ = "FASTQ"
    BAM = "BAM"
    CRAM = "CRAM"
    VCF_BCF = "VCF/BCF"
    UNSUPPORTED = "UNSUPPORTED"

    @property
    def label(self) -> str:
        return self.value

    @classmethod
    def detect(cls, path: Union[str, Path]) -> "FileType":
        """
        Classify a path by its suffix.

        Suffixes are matched case-sensitively, in table order. Anything not
        listed is UNSUPPORTED.

        Examples:
            >>> FileType.detect("sample.R1.fq.gz")
            <FileType.FASTQ: 'FASTQ'>
            >>> FileType.detect("calls.bcf.bz2")
            <FileType.VCF_BCF: 'VCF/BCF'>
            >>> FileType.detect("sample.BAM")
            <FileType.UNSUPPORTED: 'UNSUPPORTED'>
        """
        name = str(path)
        for suffix, file_type in SUFFIX_TABLE:
            if name.endswith(suffix):
                return file_type
        return cls.UNSUPPORTED


class Severity(IntEnum):
    """Check outcome, ordered OK < WARNING < ERROR."""
    OK = 0
    WARNING = 1
    ERROR = 2

    @property
    def is_fatal(self) -> bool:
        return self is Severity.ERROR


# Ordered suffix table used by FileType.detect()
SUFFIX_TABLE = (
    ('.fastq', FileType.FASTQ),
    ('.fastq.gz', FileType.FASTQ),
    ('.fq', FileType.FASTQ),
    ('.fq.gz', FileType.FASTQ),
    ('.bam', FileType.BAM),
    ('.bam.gz', FileType.BAM),
    ('.cram', FileType.CRAM),
    ('.cram.gz', FileType.CRAM),
    ('.vcf', FileType.VCF_BCF),
    ('.vcf.gz', FileType.VCF_BCF),
    ('.bcf', FileType.VCF_BCF),
    ('.bcf.gz', FileType.VCF_BCF),
    ('.vcf.bz2', FileType.VCF_BCF),
    ('.bcf.bz2', FileType.VCF_BCF),
)


def detect_compression_type(filepath: Union[str, Path]) -> CodingType:
    """
    Detect compression type from the last extension of a path.

    Examples:
        >>> detect_compression_type(Path('reads.fastq'))
        CodingType.NONE
        >>> detect_compression_type(Path('reads.fastq.gz'))
        CodingType.GZIP
        >>> detect_compression_type(Path('calls.vcf.bz2'))
        CodingType.BZIP2
    """
    suffixes = Path(filepath).suffixes
    if not suffixes:
        return CodingType.NONE

    last_ext = suffixes[-1].lower()
    if last_ext in ('.gz', '.gzip'):
        return CodingType.GZIP
    elif last_ext in ('.bz2', '.bzip2'):
        return CodingType.BZIP2
    return CodingType.NONE
