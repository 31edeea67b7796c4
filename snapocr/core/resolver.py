"""
Discovery of the external tools the pipeline shells out to.
"""
import shutil
from typing import Iterable, Optional
import logging

from .errors import ToolMissingError
from ..config.constants import (
    CATEGORY_OCR, CATEGORY_SCREENSHOT, CATEGORY_CLIPBOARD,
    CATEGORY_ENHANCE, CATEGORY_NOTIFY
)
from ..models.tools import ToolCandidate, ResolvedTool, Toolset

logger = logging.getLogger('SnapOCR.Resolver')


def find_tool(candidates: Iterable) -> Optional[ResolvedTool]:
    """
    Find the first candidate available on PATH.

    A candidate only counts when all of its companions are found too.

    Args:
        candidates: Candidates in priority order

    Returns:
        The resolved tool, or None if no candidate is installed
    """
    for spec in candidates:
        candidate = ToolCandidate.parse(spec)
        path = shutil.which(candidate.name)
        if not path:
            continue

        companions = {}
        for companion in candidate.requires:
            companion_path = shutil.which(companion)
            if not companion_path:
                logger.debug(f"Skipping {candidate.name}: companion {companion} not found")
                break
            companions[companion] = companion_path
        else:
            return ResolvedTool(candidate.name, path, companions)

    return None


def resolve_tool(category: str, candidates: Iterable) -> ResolvedTool:
    """
    Resolve a required tool.

    Raises:
        ToolMissingError: If none of the candidates is installed
    """
    candidates = [ToolCandidate.parse(spec) for spec in candidates]
    tool = find_tool(candidates)
    if tool is None:
        raise ToolMissingError(category, candidates)
    logger.info(f"Using {category} tool: {tool.path}")
    return tool


def resolve_optional(category: str, candidates: Iterable) -> Optional[ResolvedTool]:
    """Resolve a tool the pipeline can run without."""
    tool = find_tool(candidates)
    if tool is None:
        logger.info(f"No {category} tool found, step will be skipped")
    else:
        logger.info(f"Using {category} tool: {tool.path}")
    return tool


def resolve_toolset(settings, notifier_tool: Optional[ResolvedTool] = None) -> Toolset:
    """
    Resolve every tool category from the configured candidate lists.

    Args:
        settings: Settings instance providing candidate lists
        notifier_tool: Already resolved notifier, if any

    Returns:
        The complete toolset

    Raises:
        ToolMissingError: If a required category has no installed tool
    """
    ocr = resolve_tool(CATEGORY_OCR, settings.get_candidates(CATEGORY_OCR))
    screenshot = resolve_tool(CATEGORY_SCREENSHOT, settings.get_candidates(CATEGORY_SCREENSHOT))
    clipboard = resolve_tool(CATEGORY_CLIPBOARD, settings.get_candidates(CATEGORY_CLIPBOARD))

    enhance = None
    if settings.enhance_enabled:
        enhance = resolve_optional(CATEGORY_ENHANCE, settings.get_candidates(CATEGORY_ENHANCE))
    else:
        logger.info("Image enhancement disabled in settings")

    if notifier_tool is None:
        notifier_tool = find_tool(settings.get_candidates(CATEGORY_NOTIFY))

    return Toolset(
        ocr=ocr,
        screenshot=screenshot,
        clipboard=clipboard,
        enhance=enhance,
        notify=notifier_tool,
    )
