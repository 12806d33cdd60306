"""
Bounded sampling of input files into scratch storage.

Provides:
- scratch_file(): context manager owning one temporary file, removed on every exit path
- sample_head_lines(): first N lines, through the external decompressor when compressed
- sample_tail_bytes(): last N bytes of the raw file
"""

import os
import subprocess
import tempfile
from contextlib import contextmanager
from itertools import islice
from pathlib import Path
from typing import Iterator, Optional, Union

from ngs_integrity.exceptions import CompressionError
from ngs_integrity.logger import get_logger
from ngs_integrity.utils.formats import CodingType, detect_compression_type
from ngs_integrity.utils.tools import format_stderr, get_decompression_command, require_tool

SCRATCH_PREFIX = "ngs_integrity_"


@contextmanager
def scratch_file(suffix: str = "", directory: Optional[Union[str, Path]] = None) -> Iterator[Path]:
    """
    Create one scratch file and delete it when the block exits.

    Deletion happens on normal exit, early return and exceptions alike.

    Args:
        suffix: Filename suffix (e.g. '.fastq')
        directory: Directory for the file (None = system temp dir)

    Example:
        >>> with scratch_file('.fastq') as tmp:
        ...     tmp.write_text("@r1\\nACGT\\n+\\nIIII\\n")
        >>> tmp.exists()
        False
    """
    fd, name = tempfile.mkstemp(prefix=SCRATCH_PREFIX, suffix=suffix, dir=directory)
    os.close(fd)
    path = Path(name)
    get_logger().debug(f"Created scratch file {path}")
    try:
        yield path
    finally:
        path.unlink(missing_ok=True)
        get_logger().debug(f"Removed scratch file {path}")


def sample_head_lines(
    source: Union[str, Path],
    destination: Path,
    max_lines: int,
    coding_type: Optional[CodingType] = None,
) -> int:
    """
    Copy the first max_lines lines of source into destination.

    Compressed sources are streamed through the external decompressor
    (gzip -dc / bzip2 -dc). Once the budget is reached the decompressor is
    stopped; its exit status is then ignored. A decompressor that fails
    before the budget is reached means the archive is unreadable.

    Args:
        source: Input file
        destination: Scratch file to write (overwritten)
        max_lines: Line budget
        coding_type: Compression of source (None = detect from suffix)

    Returns:
        Number of lines written

    Raises:
        ToolUnavailableError: If the decompressor is not on PATH
        CompressionError: If the decompressor exits non-zero early
    """
    if coding_type is None:
        coding_type = detect_compression_type(source)

    if not coding_type.is_compressed:
        with open(source, 'rb') as src, open(destination, 'wb') as dst:
            written = _copy_lines(src, dst, max_lines)
        return written

    tool_name, args = get_decompression_command(coding_type)
    executable = require_tool(tool_name)

    with subprocess.Popen(
        [executable] + args + [str(source)],
        stdout=subprocess.PIPE,
        stderr=subprocess.PIPE,
    ) as proc, open(destination, 'wb') as dst:
        written = _copy_lines(proc.stdout, dst, max_lines)

        if written >= max_lines:
            # Budget reached; remaining stream is not needed
            proc.stdout.close()
            proc.terminate()
            proc.wait()
            return written

        stderr = proc.stderr.read().decode('utf-8', errors='replace')
        returncode = proc.wait()

    if returncode != 0:
        raise CompressionError(
            f"decompression failed ({tool_name} exit {returncode})"
            + (f": {format_stderr(stderr)}" if stderr.strip() else "")
        )

    return written


def _copy_lines(src, dst, max_lines: int) -> int:
    written = 0
    for line in islice(src, max_lines):
        dst.write(line)
        written += 1
    return written


def sample_tail_bytes(source: Union[str, Path], destination: Path, window: int) -> int:
    """
    Copy the last window bytes of source into destination.

    Files shorter than the window are copied whole.

    Returns:
        Number of bytes written
    """
    size = os.path.getsize(source)
    with open(source, 'rb') as src:
        src.seek(max(0, size - window))
        data = src.read(window)
    destination.write_bytes(data)
    return len(data)
