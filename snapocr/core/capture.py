"""
Screen region capture through the resolved screenshot tool.
"""
from pathlib import Path
from typing import List, Tuple
import logging

from PIL import Image

from .errors import CaptureCancelledError, CommandFailedError
from ..models.tools import ResolvedTool
from ..utils.process import run_command

logger = logging.getLogger('SnapOCR.Capture')


def build_capture_command(tool: ResolvedTool, image_path: Path, geometry: str = "") -> List[str]:
    """
    Build the region-selection command line for a screenshot tool.

    Args:
        tool: Resolved screenshot tool
        image_path: Where the PNG must be written
        geometry: Region from slurp, only used by grim

    Returns:
        Command line arguments

    Raises:
        ValueError: If the tool is not a known screenshot tool
    """
    path = str(image_path)
    name = tool.name

    if name == "maim":
        # -u hides the cursor, -m 1 is the lowest PNG compression
        return [tool.path, "-s", "-u", "-f", "png", "-m", "1", path]
    if name == "scrot":
        return [tool.path, "-s", "-o", "-q", "100", path]
    if name == "grim":
        if not geometry:
            raise ValueError("grim needs a region geometry")
        return [tool.path, "-g", geometry, "-t", "png", path]
    if name == "gnome-screenshot":
        return [tool.path, "-a", "-f", path]
    if name == "spectacle":
        return [tool.path, "-b", "-n", "-r", "-o", path]
    if name == "flameshot":
        return [tool.path, "gui", "-p", path]
    if name == "screencapture":
        return [tool.path, "-i", "-x", "-t", "png", path]

    raise ValueError(f"Unsupported screenshot tool: {name}")


def select_region(tool: ResolvedTool) -> str:
    """
    Ask slurp for a region, in the geometry format grim accepts.

    Raises:
        CaptureCancelledError: If the selection was aborted
    """
    args = [tool.companion("slurp")]
    try:
        result = run_command(args, capture_stdout=True)
    except CommandFailedError as e:
        raise CaptureCancelledError(args, e.returncode, e.stderr,
                                    message="Region selection cancelled") from e

    geometry = result.stdout.decode('utf-8', errors='replace').strip()
    if not geometry:
        raise CaptureCancelledError(args, 0, message="Region selection cancelled")
    return geometry


def capture_region(tool: ResolvedTool, image_path: Path) -> Path:
    """
    Let the user select a screen region and save it as a PNG.

    Args:
        tool: Resolved screenshot tool
        image_path: Output path for the image

    Returns:
        Path to the captured image

    Raises:
        CommandFailedError: If the tool fails or writes an unreadable image
        CaptureCancelledError: If no image was produced
    """
    image_path = Path(image_path)
    geometry = select_region(tool) if tool.name == "grim" else ""
    args = build_capture_command(tool, image_path, geometry)

    logger.info(f"Waiting for region selection ({tool.name})")
    run_command(args)

    if not image_path.exists() or image_path.stat().st_size == 0:
        raise CaptureCancelledError(args, 0, message="No screenshot was taken")

    width, height = _verify_image(image_path, args)
    logger.info(f"Captured {width}x{height} region to {image_path.name}")
    return image_path


def _verify_image(image_path: Path, args: List[str]) -> Tuple[int, int]:
    """Check the capture is a readable image and return its size."""
    try:
        with Image.open(image_path) as img:
            img.verify()
            return img.size
    except (OSError, SyntaxError) as e:
        raise CommandFailedError(
            args, 0, message=f"Screenshot is not a readable image: {e}"
        ) from e
