#!/usr/bin/env python3
"""
Example 2: Custom Settings

This example demonstrates how to change sample sizes and tool names:
- Build a Config from a dictionary (same layout as the JSON --config file)
- Derive settings with the immutable update() pattern
- Run a single checker directly on one file

Usage:
    python examples/02_custom_settings.py sample.bam
"""

import sys
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from ngs_integrity import BamChecker, ConfigManager, Dispatcher
from ngs_integrity.exceptions import ConfigurationError, IntegrityCheckFailed


def main():
    if len(sys.argv) != 2:
        print(__doc__)
        return 2
    bam_path = sys.argv[1]

    print("=" * 70)
    print("Custom Settings Example")
    print("=" * 70)

    # 1. Configuration from a dictionary
    print("1. Smaller samples for a quick pre-flight check")
    print("-" * 70)
    try:
        config = ConfigManager.from_dict({
            'fastq': {'line_budget': 4000},
            'bam': {'header_lines': 100, 'tail_bytes': 4096},
            'vcf': {'record_budget': 1000},
        })
    except ConfigurationError as e:
        print(f"Invalid configuration: {e}")
        return 1
    print(config.bam)
    print()

    try:
        Dispatcher(config).run([bam_path])
    except IntegrityCheckFailed:
        return 1
    print()

    # 2. Direct checker use with derived settings
    print("2. BamChecker with a wider tail window")
    print("-" * 70)
    settings = BamChecker.Settings().update(tail_bytes=65536)
    print(settings)
    result = BamChecker(settings).check(bam_path)
    print(result.format_line())
    print("=" * 70)
    return 0


if __name__ == "__main__":
    sys.exit(main())
