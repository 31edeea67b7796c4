"""
SnapOCR - Screen region to clipboard text
"""
from .config.app_info import app_info

__version__ = app_info.version

# Module exports
from .core.pipeline import CapturePipeline, run
from .config.settings import Settings

__all__ = ['CapturePipeline', 'run', 'Settings']
