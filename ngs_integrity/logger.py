"""
Logging configuration for the NGS integrity checker.

Provides structured logging with multiple outputs:
- Console output on stderr (colored, user-friendly)
- File output (JSON lines, for debugging)

Status lines are not log records; they are written to stdout by the
StatusReporter so they stay machine-greppable regardless of log level.
"""

import sys
import logging
from pathlib import Path
from datetime import datetime
from typing import Optional, List
from threading import Lock
from dataclasses import dataclass
from functools import partial
import structlog

LOGGER_NAME = "ngs_integrity"


@dataclass
class FileTimingSummary:
    """Simple timing summary for a single file."""
    input_file: str
    file_type: str  # "FASTQ", "BAM", ...
    elapsed_time: float


# ANSI color codes for console output
class Colors:
    """ANSI color codes for terminal output."""
    RESET = '\033[0m'
    BOLD = '\033[1m'
    RED = '\033[91m'
    GREEN = '\033[92m'
    YELLOW = '\033[93m'
    BLUE = '\033[94m'
    MAGENTA = '\033[95m'
    CYAN = '\033[96m'
    GRAY = '\033[90m'


def _paint(text: str, color: str, colors: bool = True) -> str:
    return f"{color}{text}{Colors.RESET}" if colors else text


def add_log_level_colors(_, level: str, event_dict: dict, colors: bool = True) -> dict:
    """Add colors to log level in console output."""
    if not colors:
        event_dict["level"] = level.upper()
        return event_dict

    level_colors = {
        "debug": Colors.GRAY,
        "info": Colors.BLUE,
        "warning": Colors.YELLOW,
        "error": Colors.RED,
        "critical": Colors.RED + Colors.BOLD,
    }

    color = level_colors.get(level.lower(), "")
    if color:
        event_dict["level"] = f"{color}{level.upper()}{Colors.RESET}"
    else:
        event_dict["level"] = level.upper()

    return event_dict


def format_file_context(logger, method_name, event_dict: dict, colors: bool = True) -> dict:
    """
    Format file information for display in console logs.

    Creates a prefix like: [sample.bam BAM]
    """
    file_context = event_dict.get("file_context")
    file_type = event_dict.get("file_type")

    context_parts = []

    if file_context:
        # Shorten long file paths
        if len(file_context) > 40:
            file_context = "..." + file_context[-37:]
        context_parts.append(_paint(file_context, Colors.MAGENTA, colors))

    if file_type:
        type_color = {
            'FASTQ': Colors.GREEN,
            'BAM': Colors.BLUE,
            'CRAM': Colors.CYAN,
            'VCF/BCF': Colors.YELLOW,
        }.get(file_type, Colors.GRAY)
        context_parts.append(_paint(file_type, type_color, colors))

    if context_parts:
        event_dict["context"] = f"[{' '.join(context_parts)}]"

    return event_dict


def _stderr_logger_factory(*args):
    # Resolve sys.stderr per logger so redirected streams are honoured
    return structlog.PrintLogger(file=sys.stderr)


def _base_processors() -> list:
    return [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]


class IntegrityLogger:
    """
    Logger for the integrity checker.

    Features:
    - Console output (colored, stderr)
    - Optional JSON log file
    - Collected check issues (WARNING/ERROR results) and per-file timings
    """

    _instance = None
    _initialized = False

    def __new__(cls):
        """Singleton pattern - only one logger instance."""
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self):
        """Initialize logger (only once)."""
        if self._initialized:
            return

        # Storage for non-OK check results
        self.check_issues = []
        self._issues_lock = Lock()

        # Will hold the structlog logger instance
        self.logger = None

        # Storage for per-file timing information
        self.file_timings: List[FileTimingSummary] = []
        self._timings_lock = Lock()

        self._initialized = True

    def setup(
        self,
        console_level: str = "INFO",
        log_file: Optional[Path] = None,
        clear_previous_issues: bool = True
    ):
        """
        Set up logging handlers.

        Args:
            console_level: Level for console output (DEBUG, INFO, WARNING, ERROR)
            log_file: Path to detailed JSON log file (optional)
            clear_previous_issues: Clear issues and timings from previous runs
        """
        if clear_previous_issues:
            self.clear_issues()
            self.clear_file_timings()

        level = getattr(logging, console_level.upper(), logging.INFO)

        if log_file:
            log_file = Path(log_file)
            log_file.parent.mkdir(parents=True, exist_ok=True)

            processors = [
                structlog.contextvars.merge_contextvars,
                structlog.stdlib.add_log_level,
                structlog.stdlib.add_logger_name,
                structlog.processors.TimeStamper(fmt="iso"),
                structlog.processors.StackInfoRenderer(),
                structlog.processors.format_exc_info,
                structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
            ]

            structlog.configure(
                processors=processors,
                wrapper_class=structlog.stdlib.BoundLogger,
                context_class=dict,
                logger_factory=structlog.stdlib.LoggerFactory(),
                cache_logger_on_first_use=False,
            )

            stdlib_logger = logging.getLogger(LOGGER_NAME)
            for handler in list(stdlib_logger.handlers):
                handler.close()
            stdlib_logger.handlers.clear()
            stdlib_logger.setLevel(logging.DEBUG)
            stdlib_logger.propagate = False

            file_handler = logging.FileHandler(log_file, mode='w', encoding='utf-8')
            file_handler.setLevel(logging.DEBUG)
            file_handler.setFormatter(
                structlog.stdlib.ProcessorFormatter(
                    processor=structlog.processors.JSONRenderer(),
                    foreign_pre_chain=processors[:-1],
                )
            )
            stdlib_logger.addHandler(file_handler)

            console_handler = logging.StreamHandler(sys.stderr)
            console_handler.setLevel(level)
            console_handler.setFormatter(
                structlog.stdlib.ProcessorFormatter(
                    processor=structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty()),
                    foreign_pre_chain=processors[:-1],
                )
            )
            stdlib_logger.addHandler(console_handler)

        else:
            # No file logging - PrintLogger on stderr
            logging.getLogger(LOGGER_NAME).handlers.clear()

            colors = sys.stderr.isatty()
            console_processors = _base_processors() + [
                partial(format_file_context, colors=colors),
                partial(add_log_level_colors, colors=colors),
                structlog.dev.ConsoleRenderer(colors=colors),
            ]

            structlog.configure(
                processors=console_processors,
                wrapper_class=structlog.make_filtering_bound_logger(level),
                context_class=dict,
                logger_factory=_stderr_logger_factory,
                cache_logger_on_first_use=False,
            )

        self.logger = structlog.get_logger(LOGGER_NAME)

        if log_file:
            self.info(f"Detailed log file: {log_file}")

    def debug(self, message: str, **kwargs):
        """Log debug message with optional structured context."""
        if self.logger:
            self.logger.debug(message, **kwargs)

    def info(self, message: str, **kwargs):
        """Log info message with optional structured context."""
        if self.logger:
            self.logger.info(message, **kwargs)

    def warning(self, message: str, **kwargs):
        """Log warning message with optional structured context."""
        if self.logger:
            self.logger.warning(message, **kwargs)

    def error(self, message: str, **kwargs):
        """Log error message with optional structured context."""
        if self.logger:
            self.logger.error(message, **kwargs)

    def critical(self, message: str, **kwargs):
        """Log critical message with optional structured context."""
        if self.logger:
            self.logger.critical(message, **kwargs)

    def add_check_result(self, result):
        """
        Record a CheckResult (thread-safe) and log it with file context.

        Results are logged at DEBUG only; the status line on stdout is the
        user-facing record. OK results are not stored as issues.
        """
        log_kwargs = {
            'file_context': result.path,
            'file_type': result.file_type.label,
            'severity': result.severity.name,
        }

        if result.severity.name != 'OK':
            issue = {
                'timestamp': datetime.now().isoformat(),
                'level': result.severity.name,
                'file_type': result.file_type.label,
                'path': result.path,
                'message': result.message,
            }
            with self._issues_lock:
                self.check_issues.append(issue)

        if self.logger:
            self.logger.debug(result.message, **log_kwargs)

        self.add_file_timing(result.path, result.file_type.label, result.elapsed)

    def add_file_timing(self, input_file: str, file_type: str, elapsed_time: float):
        """Add file timing information (thread-safe)."""
        timing = FileTimingSummary(
            input_file=input_file,
            file_type=file_type,
            elapsed_time=elapsed_time
        )
        with self._timings_lock:
            self.file_timings.append(timing)

    def clear_file_timings(self):
        """Clear all file timing information (thread-safe)."""
        with self._timings_lock:
            self.file_timings.clear()

    def display_file_timings_summary(self):
        """
        Log a summary table of per-file check times at DEBUG level.
        """
        with self._timings_lock:
            timings_copy = self.file_timings.copy()

        if not timings_copy:
            return

        total_time = sum(t.elapsed_time for t in timings_copy)

        max_filename_len = max(len(t.input_file) for t in timings_copy)
        max_filename_len = min(max_filename_len, 50)

        self.debug("=" * 80)
        self.debug("FILE CHECK SUMMARY")
        self.debug("=" * 80)

        for timing in timings_copy:
            filename = timing.input_file
            if len(filename) > max_filename_len:
                filename = "..." + filename[-(max_filename_len - 3):]

            self.debug(
                f"  {filename:<{max_filename_len}}  [{timing.file_type:>11}]  {timing.elapsed_time:>7.2f}s"
            )

        self.debug("-" * 80)
        self.debug(f"  {'TOTAL':<{max_filename_len}}                 {total_time:>7.2f}s")
        self.debug("=" * 80)

    def clear_issues(self):
        """Clear all recorded check issues (thread-safe)."""
        with self._issues_lock:
            self.check_issues.clear()


# Convenience functions for easy import
def get_logger() -> IntegrityLogger:
    """Get the singleton logger instance."""
    return IntegrityLogger()


def setup_logging(
    console_level: str = "INFO",
    log_file: Optional[Path] = None,
):
    """
    Set up logging for the package.

    Args:
        console_level: Console output level (DEBUG, INFO, WARNING, ERROR)
        log_file: Path to detailed JSON log file
    """
    logger = get_logger()
    logger.setup(console_level, log_file)
    return logger


__all__ = ['IntegrityLogger', 'get_logger', 'setup_logging']
