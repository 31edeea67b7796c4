"""
Clipboard write through the resolved clipboard tool.
"""
from pathlib import Path
from typing import List
import logging

from ..models.tools import ResolvedTool
from ..utils.process import run_command

logger = logging.getLogger('SnapOCR.Clipboard')


def build_clipboard_command(tool: ResolvedTool) -> List[str]:
    """
    Build the command that reads stdin into the clipboard.

    Raises:
        ValueError: If the tool is not a known clipboard tool
    """
    if tool.name == "xclip":
        return [tool.path, "-selection", "clipboard", "-in"]
    if tool.name == "xsel":
        return [tool.path, "--clipboard", "--input"]
    if tool.name == "wl-copy":
        return [tool.path]
    if tool.name == "pbcopy":
        return [tool.path]

    raise ValueError(f"Unsupported clipboard tool: {tool.name}")


def copy_file(tool: ResolvedTool, text_path: Path) -> int:
    """
    Pipe a text file into the clipboard unchanged.

    Args:
        tool: Resolved clipboard tool
        text_path: File whose contents go to the clipboard

    Returns:
        Number of bytes copied

    Raises:
        CommandFailedError: If the clipboard tool fails
    """
    data = Path(text_path).read_bytes()
    run_command(build_clipboard_command(tool), input_bytes=data, capture_stderr=False)
    logger.info(f"Copied {len(data)} bytes to clipboard with {tool.name}")
    return len(data)
