"""
Text helpers for reporting OCR results.
"""
import re

from ..config.constants import NOTIFY_PREVIEW_LENGTH

_whitespace_pattern = re.compile(r'\s+')


def has_text(text: str) -> bool:
    """Whether OCR produced anything besides whitespace and form feeds."""
    return bool(text and text.strip())


def make_preview(text: str, limit: int = NOTIFY_PREVIEW_LENGTH) -> str:
    """
    Collapse text to a single line short enough for a notification.

    Args:
        text: Recognized text
        limit: Maximum preview length in characters

    Returns:
        Single-line preview, ellipsized when truncated
    """
    line = _whitespace_pattern.sub(' ', text or '').strip()
    if len(line) <= limit:
        return line
    return line[:max(limit - 1, 0)].rstrip() + '…'
