"""
Capture, recognize, copy: the whole run from tool discovery to notification.
"""
from typing import Optional
import logging

from .capture import capture_region
from .clipboard import copy_file
from .enhance import enhance_image
from .errors import SnapOCRError
from .notifier import Notifier
from .ocr import OCRProcessor
from .resolver import find_tool, resolve_toolset
from .text_processor import has_text, make_preview
from ..config.constants import (
    CATEGORY_NOTIFY, EXIT_SUCCESS, EXIT_FAILURE, URGENCY_CRITICAL
)
from ..config.settings import Settings
from ..models.tools import Toolset
from ..utils.scratch import scratch_space


class CapturePipeline:
    """Run one capture from tool discovery to notification."""

    def __init__(self, settings: Settings, notifier: Optional[Notifier] = None):
        """
        Initialize the pipeline.

        Args:
            settings: Loaded settings
            notifier: Notifier to report through; resolved from settings if omitted
        """
        self.settings = settings
        self.logger = logging.getLogger('SnapOCR.Pipeline')
        if notifier is None:
            notifier = Notifier(
                find_tool(settings.get_candidates(CATEGORY_NOTIFY)),
                timeout_ms=settings.notification_timeout_ms,
            )
        self.notifier = notifier
        self.last_text: Optional[str] = None

    def run(self) -> int:
        """
        Execute the pipeline.

        Fatal errors are reported through the notifier. Interrupts and
        unexpected exceptions propagate after the scratch space is removed.

        Returns:
            EXIT_SUCCESS or EXIT_FAILURE
        """
        try:
            toolset = resolve_toolset(self.settings, self.notifier.tool)
            self.logger.info(f"Tools: {toolset.describe()}")
            text = self._capture_and_copy(toolset)
        except SnapOCRError as e:
            self.logger.error(f"{e.title}: {e}")
            self.notifier.notify(e.title, str(e), URGENCY_CRITICAL)
            return EXIT_FAILURE

        self.last_text = text
        if has_text(text):
            self.notifier.notify("Text copied", make_preview(text))
        else:
            self.logger.warning("OCR produced no text")
            self.notifier.notify("No text recognized", "The clipboard now holds an empty result")
        return EXIT_SUCCESS

    def _capture_and_copy(self, toolset: Toolset) -> str:
        with scratch_space() as space:
            capture_region(toolset.screenshot, space.image_path)

            if self.settings.enhance_enabled:
                enhance_image(toolset.enhance, space.image_path,
                              self.settings.enhance_scale_percent)

            processor = OCRProcessor(
                toolset.ocr,
                self.settings.languages,
                self.settings.tesseract_config,
            )
            text_path = processor.recognize(space.image_path, space.text_base)
            text = processor.read_text(text_path)
            self.logger.info(f"Recognized {len(text.strip())} characters")

            copy_file(toolset.clipboard, text_path)
            return text


def run(settings: Settings, notifier: Optional[Notifier] = None) -> int:
    """Run a single capture with the given settings."""
    return CapturePipeline(settings, notifier).run()
