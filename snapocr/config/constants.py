"""
Application constants and configuration values.
"""
import os
from pathlib import Path

from .app_info import app_info

# Application Info
APP_NAME = app_info.app_name
APP_VERSION = app_info.version

# Tool categories
CATEGORY_OCR = "ocr"
CATEGORY_SCREENSHOT = "screenshot"
CATEGORY_CLIPBOARD = "clipboard"
CATEGORY_ENHANCE = "enhance"
CATEGORY_NOTIFY = "notify"

# Candidate executables per category, in priority order.
# Entries are either a plain name or (name, companions).
DEFAULT_CANDIDATES = {
    CATEGORY_OCR: ["tesseract"],
    CATEGORY_SCREENSHOT: [
        "maim",
        "scrot",
        ("grim", ("slurp",)),
        "gnome-screenshot",
        "spectacle",
        "flameshot",
        "screencapture",
    ],
    CATEGORY_CLIPBOARD: ["xclip", "xsel", "wl-copy", "pbcopy"],
    CATEGORY_ENHANCE: ["magick", "convert"],
    CATEGORY_NOTIFY: ["notify-send", "osascript"],
}

# Names the command builders know how to drive
SUPPORTED_TOOLS = {
    CATEGORY_OCR: ("tesseract",),
    CATEGORY_SCREENSHOT: (
        "maim", "scrot", "grim", "gnome-screenshot", "spectacle", "flameshot", "screencapture",
    ),
    CATEGORY_CLIPBOARD: ("xclip", "xsel", "wl-copy", "pbcopy"),
    CATEGORY_ENHANCE: ("magick", "convert"),
    CATEGORY_NOTIFY: ("notify-send", "osascript"),
}
REQUIRED_COMPANIONS = {"grim": ("slurp",)}

# OCR Configuration
DEFAULT_OCR_LANGUAGES = ["eng", "ita", "fra", "spa", "deu", "por"]
FALLBACK_OCR_LANGUAGE = "eng"
OCR_CONFIG_GENERAL = "--psm 3 --oem 1"  # Automatic page segmentation, LSTM engine

# Enhancement Configuration
DEFAULT_ENHANCE_SCALE_PERCENT = 400
MIN_ENHANCE_SCALE_PERCENT = 100
MAX_ENHANCE_SCALE_PERCENT = 800

# Notification Configuration
NOTIFY_TIMEOUT_MS = 5000
NOTIFY_PREVIEW_LENGTH = 80
URGENCY_NORMAL = "normal"
URGENCY_CRITICAL = "critical"

# File Naming Patterns
SCRATCH_DIR_PREFIX = "snapocr_"
CAPTURE_FILE_PREFIX = "capture_"
IMAGE_EXTENSION = ".png"
TEXT_EXTENSION = ".txt"
TIMESTAMP_FORMAT = "%Y-%m-%d-%H-%M-%S"


def _xdg_dir(env_var: str, fallback: str) -> Path:
    """Resolve an XDG base directory, falling back to the XDG default."""
    value = os.environ.get(env_var)
    if value and os.path.isabs(value):
        return Path(value)
    return Path.home() / fallback


# Directory Structure
CONFIG_DIR = _xdg_dir("XDG_CONFIG_HOME", ".config") / "snapocr"
STATE_DIR = _xdg_dir("XDG_STATE_HOME", ".local/state") / "snapocr"
LOGS_DIR = STATE_DIR / "logs"
PREFERENCES_FILE = "preferences.json"

# Logging Configuration
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
LOG_FILE_PREFIX = "snapocr_"
LOGS_TO_KEEP = 20

# Exit codes
EXIT_SUCCESS = 0
EXIT_FAILURE = 1
