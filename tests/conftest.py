"""
Shared fixtures.

External tools (fastQValidator, samtools, bcftools) are simulated by small
/bin/sh scripts written into a temporary bin/ directory that is put on PATH.
The scripts only use shell builtins so they also work with a PATH that
contains nothing else.
"""

import logging
import os
import stat
from pathlib import Path

import pytest

from ngs_integrity.logger import LOGGER_NAME, get_logger
from ngs_integrity.utils.tools import clear_tool_cache


# Complete BGZF EOF block as written by samtools/htslib
BGZF_EOF = bytes.fromhex("1f8b08040000000000ff0600424302001b0003000000000000000000")

SAM_HEADER = "@HD\tVN:1.6\tSO:coordinate\n@SQ\tSN:chr1\tLN:248956422\tM5:6aef897c3d6ff0c78aff06ac189178dd\n"


class FakeTools:
    """Writes executable shell scripts into a bin directory."""

    def __init__(self, bin_dir: Path):
        self.bin_dir = bin_dir

    def add(self, name: str, body: str) -> Path:
        script = self.bin_dir / name
        script.write_text("#!/bin/sh\n" + body + "\n")
        script.chmod(script.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
        clear_tool_cache()
        return script

    def exit_with(self, name: str, code: int) -> Path:
        return self.add(name, f"exit {code}")

    def recording(self, name: str, code: int = 0) -> Path:
        """Tool that writes its arguments, one per line, to <bin>/<name>.args."""
        log = self.bin_dir / f"{name}.args"
        return self.add(name, f"printf '%s\\n' \"$@\" > '{log}'\nexit {code}")

    def args_of(self, name: str):
        log = self.bin_dir / f"{name}.args"
        return log.read_text().splitlines() if log.exists() else None

    def samtools_header(self, header: str, code: int = 0) -> Path:
        """samtools that prints `header` for `view -H`."""
        escaped = header.replace("\\", "\\\\").replace("'", "'\\''").replace("\t", "\\t").replace("\n", "\\n")
        return self.add("samtools", f"printf '{escaped}'\nexit {code}")


@pytest.fixture(autouse=True)
def reset_state():
    """Reset logger issues and tool lookups around each test."""
    logger = get_logger()
    logger.clear_issues()
    logger.clear_file_timings()
    clear_tool_cache()
    yield
    logger.clear_issues()
    logger.clear_file_timings()
    clear_tool_cache()
    # Detach handlers bound to per-test streams and files
    logger.logger = None
    stdlib_logger = logging.getLogger(LOGGER_NAME)
    for handler in list(stdlib_logger.handlers):
        handler.close()
    stdlib_logger.handlers.clear()


@pytest.fixture
def fake_tools(tmp_path, monkeypatch):
    """Fake tools on a bin dir prepended to PATH (system tools stay visible)."""
    bin_dir = tmp_path / "bin"
    bin_dir.mkdir()
    monkeypatch.setenv("PATH", f"{bin_dir}{os.pathsep}{os.environ.get('PATH', '')}")
    return FakeTools(bin_dir)


@pytest.fixture
def isolated_tools(tmp_path, monkeypatch):
    """Fake tools on a bin dir that is the only PATH entry."""
    bin_dir = tmp_path / "isolated_bin"
    bin_dir.mkdir()
    monkeypatch.setenv("PATH", str(bin_dir))
    return FakeTools(bin_dir)


@pytest.fixture
def scratch_dir(tmp_path):
    """Directory receiving the checkers' scratch files."""
    path = tmp_path / "scratch"
    path.mkdir()
    return path


def write_fastq(path: Path, reads: int) -> Path:
    with open(path, "w") as f:
        for i in range(reads):
            f.write(f"@read_{i}\nACGTACGT\n+\nIIIIIIII\n")
    return path


def write_bam(path: Path, with_eof: bool = True, payload_size: int = 1024) -> Path:
    """Fake BAM: arbitrary payload, optionally ending with the BGZF EOF block."""
    payload = bytes(range(256)) * (payload_size // 256)
    # Keep the payload free of the EOF signature
    payload = payload.replace(b"BC\x02\x00", b"BC\x03\x00")
    path.write_bytes(payload + (BGZF_EOF if with_eof else b""))
    return path


@pytest.fixture
def fastq_writer():
    return write_fastq


@pytest.fixture
def bam_writer():
    return write_bam


@pytest.fixture
def sam_header():
    return SAM_HEADER


@pytest.fixture
def bgzf_eof():
    return BGZF_EOF
