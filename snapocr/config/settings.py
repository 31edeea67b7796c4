"""
Application settings and preferences management.
"""
import json
from pathlib import Path
from typing import Dict, Any, List, Optional
import logging

from ..config.constants import (
    CONFIG_DIR, PREFERENCES_FILE, DEFAULT_CANDIDATES, DEFAULT_OCR_LANGUAGES,
    OCR_CONFIG_GENERAL, DEFAULT_ENHANCE_SCALE_PERCENT,
    MIN_ENHANCE_SCALE_PERCENT, MAX_ENHANCE_SCALE_PERCENT, NOTIFY_TIMEOUT_MS,
    SUPPORTED_TOOLS, REQUIRED_COMPANIONS
)
from ..models.tools import ToolCandidate


class Settings:
    """Manage application settings and preferences."""

    def __init__(self, config_dir: Optional[Path] = None):
        """
        Initialize settings with built-in defaults.

        Args:
            config_dir: Directory holding preferences.json (defaults to CONFIG_DIR)
        """
        self.logger = logging.getLogger('SnapOCR.Settings')
        self.config_dir = Path(config_dir) if config_dir else CONFIG_DIR

        # Default settings
        self.languages: List[str] = list(DEFAULT_OCR_LANGUAGES)
        self.tesseract_config = OCR_CONFIG_GENERAL
        self.enhance_enabled = True
        self.enhance_scale_percent = DEFAULT_ENHANCE_SCALE_PERCENT
        self.debug_enabled = False
        self.notification_timeout_ms = NOTIFY_TIMEOUT_MS

        self.candidates: Dict[str, List[ToolCandidate]] = {
            category: [ToolCandidate.parse(spec) for spec in specs]
            for category, specs in DEFAULT_CANDIDATES.items()
        }

    @property
    def preferences_path(self) -> Path:
        """Path to the preferences file."""
        return self.config_dir / PREFERENCES_FILE

    def get_candidates(self, category: str) -> List[ToolCandidate]:
        """
        Get the candidate list for a tool category.

        Args:
            category: Tool category name

        Returns:
            Candidates in priority order
        """
        return list(self.candidates.get(category, []))

    def load(self) -> bool:
        """
        Load preferences from disk if the file exists.

        Returns:
            True if a preferences file was applied, False otherwise
        """
        path = self.preferences_path
        if not path.exists():
            self.logger.debug(f"No preferences file at {path}, using defaults")
            return False

        try:
            with open(path, 'r', encoding='utf-8') as f:
                settings_dict = json.load(f)
        except (OSError, ValueError) as e:
            self.logger.warning(f"Could not read preferences {path}: {e}")
            return False

        if not isinstance(settings_dict, dict):
            self.logger.warning(f"Ignoring preferences {path}: top level is not an object")
            return False

        self.from_dict(settings_dict)
        self.logger.info(f"Settings loaded from: {path}")
        return True

    def from_dict(self, settings_dict: Dict[str, Any]) -> None:
        """
        Load settings from dictionary. Invalid values keep the current value.

        Args:
            settings_dict: Dictionary with settings values
        """
        languages = settings_dict.get('languages')
        if languages is not None:
            if (isinstance(languages, list) and languages
                    and all(isinstance(l, str) and l.isidentifier() for l in languages)):
                self.languages = list(languages)
            else:
                self._reject('languages', languages)

        tesseract_config = settings_dict.get('tesseract_config')
        if tesseract_config is not None:
            if isinstance(tesseract_config, str):
                self.tesseract_config = tesseract_config
            else:
                self._reject('tesseract_config', tesseract_config)

        for key in ('enhance_enabled', 'debug_enabled'):
            value = settings_dict.get(key)
            if value is None:
                continue
            if isinstance(value, bool):
                setattr(self, key, value)
            else:
                self._reject(key, value)

        scale = settings_dict.get('enhance_scale_percent')
        if scale is not None:
            if (isinstance(scale, int) and not isinstance(scale, bool)
                    and MIN_ENHANCE_SCALE_PERCENT <= scale <= MAX_ENHANCE_SCALE_PERCENT):
                self.enhance_scale_percent = scale
            else:
                self._reject('enhance_scale_percent', scale)

        timeout = settings_dict.get('notification_timeout_ms')
        if timeout is not None:
            if isinstance(timeout, int) and not isinstance(timeout, bool) and timeout >= 0:
                self.notification_timeout_ms = timeout
            else:
                self._reject('notification_timeout_ms', timeout)

        for category in DEFAULT_CANDIDATES:
            key = f'{category}_candidates'
            specs = settings_dict.get(key)
            if specs is None:
                continue
            try:
                if not isinstance(specs, list) or not specs:
                    raise ValueError("expected a non-empty list")
                parsed = [ToolCandidate.parse(spec) for spec in specs]
            except ValueError:
                self._reject(key, specs)
                continue

            candidates = []
            for candidate in parsed:
                try:
                    self._check_supported(category, candidate)
                except ValueError as e:
                    self.logger.warning(f"Skipping {key} entry: {e}")
                    continue
                candidates.append(candidate)

            if candidates:
                self.candidates[category] = candidates
            else:
                self._reject(key, specs)

    def _reject(self, key: str, value: Any) -> None:
        self.logger.warning(f"Ignoring invalid value for '{key}': {value!r}")

    @staticmethod
    def _check_supported(category: str, candidate: ToolCandidate) -> None:
        """
        Make sure the dispatchers know how to drive a candidate.

        Raises:
            ValueError: If the tool is unsupported or lacks a required companion
        """
        if candidate.name not in SUPPORTED_TOOLS[category]:
            raise ValueError(f"Unsupported {category} tool: {candidate.name}")
        missing = set(REQUIRED_COMPANIONS.get(candidate.name, ())) - set(candidate.requires)
        if missing:
            raise ValueError(f"{candidate.name} needs {', '.join(sorted(missing))}")
