#!/usr/bin/env python3
"""
Example 1: Checking Files Using the Functional API

This example demonstrates the simplest way to use the package:
- Pass a list of files to check_files()
- Read one status line per file on stdout
- Catch IntegrityCheckFailed when a file fails its check

Usage:
    python examples/01_check_files.py sample_R1.fastq.gz sample.bam calls.vcf.gz
"""

import sys
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from ngs_integrity import Severity, check_files, setup_logging
from ngs_integrity.exceptions import IntegrityCheckFailed


def main():
    paths = sys.argv[1:]
    if not paths:
        print(__doc__)
        return 2

    setup_logging(console_level="WARNING")

    print("=" * 70)
    print("Integrity Check Example")
    print("=" * 70)

    try:
        results = check_files(paths)
    except IntegrityCheckFailed as e:
        print("=" * 70)
        print(f"Stopped at {e.result.path}: {e.result.message}")
        print("Files after this one were not checked.")
        return 1

    skipped = [r for r in results if r.severity is Severity.WARNING]

    print("=" * 70)
    print(f"Checked: {len(results)} file(s)")
    print(f"Warnings: {len(skipped)}")
    for result in skipped:
        print(f"  - {result.path}: {result.message}")
    print("=" * 70)
    return 0


if __name__ == "__main__":
    sys.exit(main())
