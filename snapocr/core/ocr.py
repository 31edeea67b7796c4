"""
OCR processing module using Tesseract.
"""
from pathlib import Path
from typing import List, Optional, Sequence
import logging

import pytesseract
from pytesseract import TesseractError, TesseractNotFoundError

from .errors import CommandFailedError, ToolMissingError
from ..config.constants import (
    CATEGORY_OCR, DEFAULT_OCR_LANGUAGES, FALLBACK_OCR_LANGUAGE,
    OCR_CONFIG_GENERAL, TEXT_EXTENSION
)
from ..models.tools import ResolvedTool


class OCRProcessor:
    """Handle OCR operations using Tesseract."""

    def __init__(self, tool: ResolvedTool, languages: Optional[Sequence[str]] = None,
                 config: str = OCR_CONFIG_GENERAL):
        """
        Initialize OCR processor.

        Args:
            tool: Resolved tesseract executable
            languages: Language codes to recognize
            config: Extra Tesseract command line options
        """
        self.logger = logging.getLogger('SnapOCR.OCRProcessor')
        self.tool = tool
        self.languages = list(languages or DEFAULT_OCR_LANGUAGES)
        self.config = config

        # Point pytesseract at the executable found on PATH
        pytesseract.pytesseract.tesseract_cmd = tool.path

    def available_languages(self) -> Optional[List[str]]:
        """
        Get the languages installed for Tesseract.

        Returns:
            Language codes, or None if they could not be listed
        """
        try:
            return list(pytesseract.get_languages(config=''))
        except TesseractNotFoundError as e:
            raise ToolMissingError(CATEGORY_OCR, [self.tool.name]) from e
        except (TesseractError, OSError) as e:
            self.logger.warning(f"Could not list Tesseract languages: {e}")
            return None

    def effective_languages(self) -> List[str]:
        """
        Filter the configured languages down to the installed ones.

        Returns:
            Languages to pass to Tesseract, never empty
        """
        installed = self.available_languages()
        if not installed:
            return list(self.languages)

        selected = [lang for lang in self.languages if lang in installed]
        missing = [lang for lang in self.languages if lang not in installed]
        if missing:
            self.logger.warning(f"Languages not installed, skipping: {', '.join(missing)}")

        if not selected:
            self.logger.warning(f"No configured language available, using {FALLBACK_OCR_LANGUAGE}")
            selected = [FALLBACK_OCR_LANGUAGE]
        return selected

    def recognize(self, image_path: Path, text_base: Path) -> Path:
        """
        Run OCR on an image file and write the text next to it.

        Args:
            image_path: Image to recognize
            text_base: Output path without the .txt suffix

        Returns:
            Path to the written text file

        Raises:
            ToolMissingError: If tesseract cannot be executed
            CommandFailedError: If tesseract exits with an error
        """
        lang = "+".join(self.effective_languages())
        self.logger.info(f"Running OCR with languages: {lang}")
        self.logger.debug(f"Using OCR config: '{self.config}'")

        try:
            pytesseract.pytesseract.run_tesseract(
                str(image_path),
                str(text_base),
                extension='txt',
                lang=lang,
                config=self.config,
            )
        except TesseractNotFoundError as e:
            raise ToolMissingError(CATEGORY_OCR, [self.tool.name]) from e
        except TesseractError as e:
            raise CommandFailedError(
                [self.tool.path, str(image_path), str(text_base)],
                e.status, str(e.message)
            ) from e

        text_path = Path(f"{text_base}{TEXT_EXTENSION}")
        if not text_path.exists():
            raise CommandFailedError(
                [self.tool.path], 0, message=f"Tesseract wrote no output to {text_path.name}"
            )
        return text_path

    @staticmethod
    def read_text(text_path: Path) -> str:
        """Read recognized text from disk."""
        return Path(text_path).read_text(encoding='utf-8', errors='replace')
