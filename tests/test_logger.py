"""
Tests for the structured logger.
"""

import json

from ngs_integrity.__main__ import main
from ngs_integrity.logger import (
    Colors,
    IntegrityLogger,
    add_log_level_colors,
    format_file_context,
    get_logger,
    setup_logging,
)
from ngs_integrity.report import CheckResult
from ngs_integrity.utils.formats import FileType


class TestSingleton:

    def test_same_instance(self):
        assert get_logger() is get_logger()
        assert IntegrityLogger() is get_logger()

    def test_silent_before_setup(self, capsys):
        logger = get_logger()
        logger.logger = None

        logger.info("not shown")

        captured = capsys.readouterr()
        assert captured.out == ""
        assert captured.err == ""


class TestConsoleLogging:

    def test_logs_go_to_stderr(self, capsys):
        setup_logging("INFO")

        get_logger().info("checking files")

        captured = capsys.readouterr()
        assert "checking files" in captured.err
        assert captured.out == ""

    def test_level_filtering(self, capsys):
        setup_logging("WARNING")

        get_logger().info("hidden message")
        get_logger().warning("visible message")

        err = capsys.readouterr().err
        assert "hidden message" not in err
        assert "visible message" in err

    def test_debug_level(self, capsys):
        setup_logging("DEBUG")
        get_logger().debug("debug detail")
        assert "debug detail" in capsys.readouterr().err

    def test_no_ansi_codes_without_tty(self, capsys):
        setup_logging("INFO")

        get_logger().warning("slow file", file_context="s.bam", file_type="BAM")

        err = capsys.readouterr().err
        assert "slow file" in err
        assert "[s.bam BAM]" in err
        assert "\x1b[" not in err

    def test_color_processors_plain(self):
        event = format_file_context(None, "info", {'file_context': "s.bam", 'file_type': "BAM"}, colors=False)
        assert event['context'] == "[s.bam BAM]"

        event = add_log_level_colors(None, "warning", {}, colors=False)
        assert event['level'] == "WARNING"

    def test_color_processors_colored(self):
        event = add_log_level_colors(None, "warning", {})
        assert event['level'] == f"{Colors.YELLOW}WARNING{Colors.RESET}"


class TestCheckResultsOnConsole:
    """Results are already printed as status lines; the console log stays quiet."""

    def test_warning_and_error_results_not_repeated(self, capsys):
        setup_logging("INFO")
        logger = get_logger()

        logger.add_check_result(CheckResult.warning(FileType.CRAM, "s.cram", "missing M5 reference checksum tags"))
        logger.add_check_result(CheckResult.error(FileType.BAM, "t.bam", "EOF magic not found (42430200)"))

        captured = capsys.readouterr()
        assert "missing M5 reference checksum tags" not in captured.err
        assert "EOF magic not found" not in captured.err
        assert len(logger.check_issues) == 2

    def test_results_visible_in_verbose_mode(self, capsys):
        setup_logging("DEBUG")

        get_logger().add_check_result(CheckResult.warning(FileType.CRAM, "s.cram", "missing M5 reference checksum tags"))

        assert "missing M5 reference checksum tags" in capsys.readouterr().err

    def test_one_line_per_file_in_cli(self, tmp_path, capsys):
        missing = tmp_path / "gone.bam"

        assert main([str(missing)]) == 0

        captured = capsys.readouterr()
        assert f"[WARNING] BAM {missing} - not found; skipping" in captured.out
        assert "not found; skipping" not in captured.err


class TestFileLogging:

    def test_json_log_file(self, tmp_path):
        log_file = tmp_path / "logs" / "check.log"
        setup_logging("ERROR", log_file)

        get_logger().debug("sampled lines", lines=40000)

        records = [json.loads(line) for line in log_file.read_text().splitlines()]
        events = [r['event'] for r in records]
        assert "sampled lines" in events
        sampled = next(r for r in records if r['event'] == "sampled lines")
        assert sampled['lines'] == 40000
        assert sampled['level'] == 'debug'

    def test_check_result_context_in_file(self, tmp_path):
        log_file = tmp_path / "check.log"
        setup_logging("ERROR", log_file)

        get_logger().add_check_result(
            CheckResult.warning(FileType.CRAM, "s.cram", "missing M5 reference checksum tags")
        )

        records = [json.loads(line) for line in log_file.read_text().splitlines()]
        record = next(r for r in records if r['event'] == "missing M5 reference checksum tags")
        assert record['file_context'] == "s.cram"
        assert record['file_type'] == "CRAM"
        assert record['severity'] == "WARNING"


class TestIssuesAndTimings:

    def test_only_non_ok_results_are_issues(self):
        logger = get_logger()

        logger.add_check_result(CheckResult.ok(FileType.FASTQ, "a.fq", "fine"))
        logger.add_check_result(CheckResult.error(FileType.BAM, "b.bam", "EOF magic not found (42430200)"))

        assert len(logger.check_issues) == 1
        issue = logger.check_issues[0]
        assert issue['level'] == 'ERROR'
        assert issue['file_type'] == 'BAM'
        assert issue['message'] == "EOF magic not found (42430200)"

    def test_timings_recorded_for_every_result(self):
        logger = get_logger()

        logger.add_check_result(CheckResult.ok(FileType.FASTQ, "a.fq", "fine"))
        logger.add_check_result(CheckResult.warning(FileType.UNSUPPORTED, "b.txt", "unsupported extension; skipping"))

        assert [t.input_file for t in logger.file_timings] == ["a.fq", "b.txt"]

    def test_setup_clears_previous_run(self):
        logger = get_logger()
        logger.add_check_result(CheckResult.warning(FileType.BAM, "x.bam", "not found; skipping"))

        setup_logging("ERROR")

        assert logger.check_issues == []
        assert logger.file_timings == []

    def test_timing_summary_at_debug(self, capsys):
        setup_logging("DEBUG")
        logger = get_logger()
        logger.add_file_timing("sample.bam", "BAM", 1.5)

        logger.display_file_timings_summary()

        err = capsys.readouterr().err
        assert "FILE CHECK SUMMARY" in err
        assert "sample.bam" in err
