"""
Per-format checkers.

Each checker samples a bounded window of one file, delegates validation to
an external tool and returns a single CheckResult.
"""

from ngs_integrity.checkers.base import BaseChecker
from ngs_integrity.checkers.fastq_checker import FastqChecker
from ngs_integrity.checkers.bam_checker import BamChecker
from ngs_integrity.checkers.cram_checker import CramChecker
from ngs_integrity.checkers.vcf_checker import VcfChecker

__all__ = [
    'BaseChecker',
    'FastqChecker',
    'BamChecker',
    'CramChecker',
    'VcfChecker',
]
