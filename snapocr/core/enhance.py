"""
Optional image enhancement before OCR, done by ImageMagick.
"""
from pathlib import Path
from typing import List, Optional
import logging

from ..config.constants import DEFAULT_ENHANCE_SCALE_PERCENT
from ..models.tools import ResolvedTool
from ..utils.process import run_command

logger = logging.getLogger('SnapOCR.Enhance')


def build_enhance_command(tool: ResolvedTool, image_path: Path,
                          scale_percent: int = DEFAULT_ENHANCE_SCALE_PERCENT) -> List[str]:
    """
    Build the command that desaturates and upscales the image in place.

    Both ``magick`` (IM7) and ``convert`` (IM6) take the same arguments.
    """
    path = str(image_path)
    return [tool.path, path, "-modulate", "100,0", "-resize", f"{scale_percent}%", path]


def enhance_image(tool: Optional[ResolvedTool], image_path: Path,
                  scale_percent: int = DEFAULT_ENHANCE_SCALE_PERCENT) -> bool:
    """
    Enhance the captured image if an image processing tool is installed.

    Args:
        tool: Resolved enhancer, or None when not installed
        image_path: Image to rewrite in place
        scale_percent: Upscale factor in percent

    Returns:
        True if the image was enhanced, False if the step was skipped

    Raises:
        CommandFailedError: If the tool was invoked and failed
    """
    if tool is None:
        logger.info("Skipping image enhancement")
        return False

    run_command(build_enhance_command(tool, image_path, scale_percent))
    logger.info(f"Enhanced image with {tool.name} (grayscale, {scale_percent}%)")
    return True
