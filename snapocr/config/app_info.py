"""
Centralized application information loader.
App metadata comes from the installed distribution when available.
"""
from importlib import metadata
from typing import Dict, Any

DISTRIBUTION_NAME = "snapocr"


class AppInfo:
    """Singleton class to manage application information."""

    _instance = None
    _info: Dict[str, Any] = {}

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._load_info()
        return cls._instance

    def _load_info(self):
        """Load application info from the package metadata."""
        try:
            dist = metadata.metadata(DISTRIBUTION_NAME)
        except metadata.PackageNotFoundError:
            self._set_defaults()
            return

        self._info = {
            'version': dist.get('Version', 'unknown'),
            'app_name': 'SnapOCR',
        }

    def _set_defaults(self):
        """Set default values when running from a source checkout."""
        self._info = {
            'version': '0.0.0',
            'app_name': 'SnapOCR',
        }

    @property
    def version(self) -> str:
        return self._info.get('version', 'unknown')

    @property
    def app_name(self) -> str:
        return self._info.get('app_name', 'SnapOCR')


# Global instance
app_info = AppInfo()
