"""
NGS Integrity Checker
=====================

Lightweight, sampled integrity checks for genomic data files before they
enter analysis pipelines. Each file is sampled (a bounded prefix or tail),
the sample is handed to a specialised external tool, and the outcome is
normalised into one status line.

Supported File Types
-------------------
- **FASTQ** (.fastq, .fq, optionally .gz): first 40 000 lines → fastQValidator
- **BAM** (.bam, .bam.gz): @HD/@SQ in first 500 header lines (samtools) and
  BGZF EOF marker in the last 32 KiB
- **CRAM** (.cram, .cram.gz): @HD/@SQ in first 500 header lines and M5 reference
  checksum tags (warning only)
- **VCF/BCF** (.vcf, .bcf, optionally .gz/.bz2): header + first 10 000 records
  parsed by bcftools

Quick Start
-----------

>>> from ngs_integrity import check_files
>>> results = check_files(["sample.fastq.gz", "sample.bam"])
[OK] FASTQ sample.fastq.gz - fastQValidator completed without critical errors
[OK] BAM sample.bam - header and EOF marker verified
Files validation completed.

Severities
----------
- OK: sampled check passed
- WARNING: tool missing (check skipped), unsupported/missing file, or a soft
  issue such as missing CRAM M5 tags; the batch continues
- ERROR: sampled content is invalid; the batch stops (IntegrityCheckFailed)

Package Structure
----------------
- ngs_integrity.dispatcher: classification and the fail-fast batch loop
- ngs_integrity.checkers: per-format checkers
- ngs_integrity.report: CheckResult and StatusReporter
- ngs_integrity.config_manager: optional JSON configuration
- ngs_integrity.utils: formats, external tools, sampling, settings
- ngs_integrity.logger: structured logging
"""

__version__ = "0.1.0"
__license__ = "EUPL-1.2 license"

# Public API exports
from ngs_integrity.config_manager import ConfigManager, Config
from ngs_integrity.checkers import BamChecker, CramChecker, FastqChecker, VcfChecker
from ngs_integrity.dispatcher import Dispatcher, check_files
from ngs_integrity.report import CheckResult, StatusReporter
from ngs_integrity.utils.formats import FileType, Severity
from ngs_integrity.exceptions import IntegrityError, IntegrityCheckFailed
from ngs_integrity.logger import setup_logging, get_logger

__all__ = [
    # Configuration
    'ConfigManager',
    'Config',

    # Checkers
    'FastqChecker',
    'BamChecker',
    'CramChecker',
    'VcfChecker',

    # Dispatch and reporting
    'Dispatcher',
    'check_files',
    'CheckResult',
    'StatusReporter',
    'FileType',
    'Severity',

    # Errors
    'IntegrityError',
    'IntegrityCheckFailed',

    # Logging
    'setup_logging',
    'get_logger',

    # Version info
    '__version__',
    '__license__',
]
