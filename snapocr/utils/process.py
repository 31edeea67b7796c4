"""
External command execution.
"""
import os
import shlex
import subprocess
from typing import Optional, Sequence
import logging

from ..core.errors import CommandFailedError, ToolMissingError

logger = logging.getLogger('SnapOCR.Process')


def run_command(args: Sequence[str], input_bytes: Optional[bytes] = None,
                capture_stdout: bool = False,
                capture_stderr: bool = True) -> subprocess.CompletedProcess:
    """
    Run an external command and block until it finishes.

    Args:
        args: Command line, program first
        input_bytes: Data written to the command's stdin
        capture_stdout: Whether to capture stdout instead of discarding it
        capture_stderr: Whether to capture stderr. Tools that fork a
            background selection owner (xclip, wl-copy) keep a captured
            pipe open, so those inherit it instead.

    Returns:
        The completed process (stdout is bytes when captured)

    Raises:
        ToolMissingError: If the executable disappeared since discovery
        CommandFailedError: If the command exits with a non-zero status
    """
    args = [str(a) for a in args]
    logger.debug(f"Running: {shlex.join(args)}")

    try:
        result = subprocess.run(
            args,
            input=input_bytes,
            stdout=subprocess.PIPE if capture_stdout else subprocess.DEVNULL,
            stderr=subprocess.PIPE if capture_stderr else None,
        )
    except FileNotFoundError as e:
        raise ToolMissingError(os.path.basename(args[0])) from e

    stderr = result.stderr.decode('utf-8', errors='replace') if result.stderr else ""
    if result.returncode != 0:
        logger.debug(f"{args[0]} failed with status {result.returncode}: {stderr.strip()}")
        raise CommandFailedError(args, result.returncode, stderr)

    if stderr.strip():
        logger.debug(f"{args[0]} stderr: {stderr.strip()}")
    return result
