"""
Command-line interface for the integrity checker.

Usage:
    python -m ngs_integrity sample.fastq.gz sample.bam calls.vcf.gz
    python -m ngs_integrity --config integrity.json *.cram
    ngs-integrity-check --verbose --log-file check.log sample.bam

Exit status:
    0  all files processed without ERROR
    1  aborted at the first ERROR (or bad configuration)
"""

import sys
import argparse
from pathlib import Path

from ngs_integrity import __version__
from ngs_integrity.config_manager import Config, ConfigManager
from ngs_integrity.dispatcher import Dispatcher
from ngs_integrity.exceptions import ConfigurationError, IntegrityCheckFailed
from ngs_integrity.logger import setup_logging, get_logger


def parse_arguments(argv=None):
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog='ngs-integrity-check',
        description='Sampled integrity checks for FASTQ, BAM, CRAM and VCF/BCF files',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  ngs-integrity-check sample_R1.fastq.gz sample_R2.fastq.gz
  ngs-integrity-check sample.bam sample.cram calls.vcf.gz
  ngs-integrity-check --config integrity.json --verbose *.bam
        """
    )

    parser.add_argument(
        'paths',
        nargs='+',
        help='Files to check'
    )

    parser.add_argument(
        '--config',
        type=str,
        help='JSON file overriding sample sizes and tool names'
    )

    parser.add_argument(
        '--verbose', '-v',
        action='store_true',
        help='Enable verbose output (DEBUG level)'
    )

    parser.add_argument(
        '--log-file',
        type=str,
        help='Write a detailed JSON log to this file'
    )

    parser.add_argument(
        '--version',
        action='version',
        version=f'%(prog)s {__version__}'
    )

    return parser.parse_args(argv)


def main(argv=None):
    """Main CLI entry point."""
    args = parse_arguments(argv)

    console_level = 'DEBUG' if args.verbose else 'INFO'
    log_file = Path(args.log_file) if args.log_file else None
    setup_logging(console_level=console_level, log_file=log_file)
    logger = get_logger()

    try:
        config = ConfigManager.load(args.config) if args.config else Config()
        Dispatcher(config).run(args.paths)
        return 0

    except IntegrityCheckFailed as e:
        logger.debug(f"Aborted: {e}")
        return 1

    except ConfigurationError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    except Exception as e:
        print(f"Error: {type(e).__name__}: {e}", file=sys.stderr)
        if args.verbose:
            import traceback
            traceback.print_exc()
        return 1


if __name__ == '__main__':
    sys.exit(main())
