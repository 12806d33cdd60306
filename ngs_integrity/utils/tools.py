"""
External tool resolution and execution.

Every collaborator (fastQValidator, samtools, bcftools, gzip, bzip2) is run
as a subprocess with list arguments, never through a shell. Resolution and
execution keep the two failure modes apart:

- tool cannot be resolved on PATH  -> ToolUnavailableError
- tool ran and exited non-zero      -> reported through the return code,
  callers decide whether that is a ToolFailedError
"""

import os
import shutil
import subprocess
from pathlib import Path
from typing import Dict, List, Optional, Sequence, Tuple, Union

from ngs_integrity.exceptions import ToolUnavailableError
from ngs_integrity.utils.formats import CodingType


# Cache for tool lookups, keyed by (tool, PATH) so a changed PATH is re-resolved
_TOOL_CACHE: Dict[Tuple[str, str], Optional[str]] = {}

# Decompressor per coding type: (tool_name, args)
_DECOMPRESS_COMMANDS = {
    CodingType.GZIP: ('gzip', ['-dc']),
    CodingType.BZIP2: ('bzip2', ['-dc']),
}


def resolve_tool(tool_name: str) -> Optional[str]:
    """
    Resolve a tool on the system PATH.

    Results are cached per PATH value to avoid repeated lookups.

    Returns:
        Absolute path to the executable, or None when not found

    Example:
        >>> if resolve_tool('samtools'):
        ...     print("samtools is available")
    """
    key = (tool_name, os.environ.get('PATH', ''))
    if key not in _TOOL_CACHE:
        _TOOL_CACHE[key] = shutil.which(tool_name)
    return _TOOL_CACHE[key]


def check_tool_available(tool_name: str) -> bool:
    """Check if a tool is available on the system PATH."""
    return resolve_tool(tool_name) is not None


def require_tool(tool_name: str) -> str:
    """
    Resolve a tool or raise.

    Raises:
        ToolUnavailableError: If the tool is not on PATH
    """
    executable = resolve_tool(tool_name)
    if executable is None:
        raise ToolUnavailableError(tool_name)
    return executable


def clear_tool_cache():
    """Forget all cached tool lookups."""
    _TOOL_CACHE.clear()


def run_tool(
    tool_name: str,
    args: Sequence[Union[str, Path]],
    capture_stdout: bool = False,
) -> subprocess.CompletedProcess:
    """
    Run an external tool and wait for it to exit.

    The tool is resolved first, so a missing binary surfaces as
    ToolUnavailableError rather than a bare OSError. No timeout is applied.

    Args:
        tool_name: Executable name (resolved on PATH)
        args: Arguments passed after the executable
        capture_stdout: Capture stdout as text; otherwise it is discarded

    Returns:
        CompletedProcess with returncode, stdout (or None) and stderr text

    Security:
        Uses subprocess with list arguments (no shell=True) to prevent
        command injection attacks through malicious filenames.
    """
    executable = require_tool(tool_name)
    command = [executable] + [str(a) for a in args]

    try:
        return subprocess.run(
            command,
            stdout=subprocess.PIPE if capture_stdout else subprocess.DEVNULL,
            stderr=subprocess.PIPE,
            text=True,
            errors='replace',
        )
    except FileNotFoundError as e:
        # Removed between lookup and exec
        raise ToolUnavailableError(tool_name) from e


def get_decompression_command(coding_type: CodingType) -> Tuple[str, List[str]]:
    """
    Get the decompressor command for a coding type.

    Returns:
        Tuple of (command_name, [args]) that writes the decompressed stream
        to stdout when given a file path

    Raises:
        ValueError: If coding_type is NONE

    Example:
        >>> get_decompression_command(CodingType.GZIP)
        ('gzip', ['-dc'])
    """
    try:
        tool_name, args = _DECOMPRESS_COMMANDS[coding_type]
    except KeyError:
        raise ValueError(f"No decompressor for coding type {coding_type.value}")
    return tool_name, list(args)


def format_stderr(stderr: Optional[str], limit: int = 200) -> str:
    """Collapse tool stderr to a single short line for messages."""
    if not stderr:
        return ""
    text = ' '.join(stderr.split())
    if len(text) > limit:
        text = text[:limit - 3] + "..."
    return text
