"""
Fatal error types. Every one of them ends the run with exit code 1.
"""
from typing import Iterable, Optional, Sequence


class SnapOCRError(RuntimeError):
    """Base class for fatal pipeline errors."""

    title = "SnapOCR failed"


class ToolMissingError(SnapOCRError):
    """No usable executable was found for a required tool category."""

    title = "Required tool missing"

    def __init__(self, category: str, candidates: Iterable = ()):
        self.category = category
        self.candidates = [str(c) for c in candidates]
        if self.candidates:
            message = f"No {category} tool found (tried: {', '.join(self.candidates)})"
        else:
            message = f"No {category} tool found"
        super().__init__(message)


class CommandFailedError(SnapOCRError):
    """An external command exited with a non-zero status."""

    title = "Command failed"

    def __init__(self, args: Sequence[str], returncode: Optional[int] = None,
                 stderr: str = "", message: Optional[str] = None):
        self.args_list = list(args)
        self.returncode = returncode
        self.stderr = (stderr or "").strip()
        if message is None:
            program = self.args_list[0] if self.args_list else "command"
            message = f"{program} exited with status {returncode}"
            if self.stderr:
                # Last line is usually the meaningful one
                message += f": {self.stderr.splitlines()[-1]}"
        super().__init__(message)


class CaptureCancelledError(CommandFailedError):
    """The screenshot tool exited cleanly without producing an image."""

    title = "Capture cancelled"
