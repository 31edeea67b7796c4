"""
Scratch directory lifecycle.

The scratch directory holds the captured image and the OCR text. It must
never survive the process, whatever way the process ends.
"""
import atexit
import shutil
import signal
import tempfile
from contextlib import contextmanager
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import Iterator, Optional
import logging

from ..config.constants import (
    SCRATCH_DIR_PREFIX, CAPTURE_FILE_PREFIX, IMAGE_EXTENSION,
    TEXT_EXTENSION, TIMESTAMP_FORMAT, EXIT_FAILURE
)

logger = logging.getLogger('SnapOCR.Scratch')


@dataclass
class ScratchSpace:
    """A scratch directory holding one image and one text file."""

    directory: Path
    timestamp: str

    @classmethod
    def create(cls, timestamp: Optional[str] = None,
               parent: Optional[Path] = None) -> 'ScratchSpace':
        """
        Create a fresh scratch directory.

        Args:
            timestamp: Name stamp for the files (defaults to now)
            parent: Where to create it (defaults to the system temp dir)

        Returns:
            The new scratch space
        """
        timestamp = timestamp or datetime.now().strftime(TIMESTAMP_FORMAT)
        directory = tempfile.mkdtemp(
            prefix=f"{SCRATCH_DIR_PREFIX}{timestamp}_",
            dir=str(parent) if parent else None,
        )
        logger.debug(f"Created scratch directory: {directory}")
        return cls(Path(directory), timestamp)

    @property
    def base_name(self) -> str:
        return f"{CAPTURE_FILE_PREFIX}{self.timestamp}"

    @property
    def image_path(self) -> Path:
        return self.directory / f"{self.base_name}{IMAGE_EXTENSION}"

    @property
    def text_base(self) -> Path:
        """Text output path without suffix, as Tesseract takes it."""
        return self.directory / self.base_name

    @property
    def text_path(self) -> Path:
        return self.directory / f"{self.base_name}{TEXT_EXTENSION}"

    def cleanup(self) -> None:
        """Remove the directory and everything in it. Safe to call twice."""
        if self.directory.exists():
            shutil.rmtree(self.directory, ignore_errors=True)
            logger.debug(f"Removed scratch directory: {self.directory}")


@contextmanager
def scratch_space(timestamp: Optional[str] = None,
                  parent: Optional[Path] = None) -> Iterator[ScratchSpace]:
    """
    Provide a scratch space that is removed when the block exits.

    Cleanup also runs from atexit, covering a ``sys.exit`` that unwinds
    through code which does not reach the ``finally`` below.
    """
    space = ScratchSpace.create(timestamp, parent)
    atexit.register(space.cleanup)
    try:
        yield space
    finally:
        space.cleanup()
        atexit.unregister(space.cleanup)


def _handle_termination(signum, frame):
    logger.info(f"Received {signal.Signals(signum).name}, shutting down")
    # SystemExit unwinds the stack so pending finally blocks run
    raise SystemExit(EXIT_FAILURE)


def install_signal_handlers() -> None:
    """Turn SIGTERM and SIGHUP into SystemExit. SIGINT already raises KeyboardInterrupt."""
    for name in ("SIGTERM", "SIGHUP"):
        signum = getattr(signal, name, None)
        if signum is not None:
            signal.signal(signum, _handle_termination)
