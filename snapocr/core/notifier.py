"""
Best-effort desktop notifications.
"""
import subprocess
from typing import List, Optional
import logging

from ..config.constants import APP_NAME, NOTIFY_TIMEOUT_MS, URGENCY_NORMAL
from ..models.tools import ResolvedTool


def _applescript_string(value: str) -> str:
    """Quote a value for use inside an AppleScript string literal."""
    return '"' + value.replace('\\', '\\\\').replace('"', '\\"') + '"'


class Notifier:
    """Send desktop notifications; never raises."""

    def __init__(self, tool: Optional[ResolvedTool], app_name: str = APP_NAME,
                 timeout_ms: int = NOTIFY_TIMEOUT_MS):
        """
        Initialize notifier.

        Args:
            tool: Resolved notification tool, or None when not installed
            app_name: Application name shown by the notification daemon
            timeout_ms: Expiry time for notify-send
        """
        self.logger = logging.getLogger('SnapOCR.Notifier')
        self.tool = tool
        self.app_name = app_name
        self.timeout_ms = timeout_ms

    def build_command(self, summary: str, body: str = "",
                      urgency: str = URGENCY_NORMAL) -> List[str]:
        """
        Build the notification command line.

        Raises:
            ValueError: If there is no tool or it is not a known notifier
        """
        if self.tool is None:
            raise ValueError("No notification tool available")

        if self.tool.name == "notify-send":
            return [
                self.tool.path,
                "-a", self.app_name,
                "-u", urgency,
                "-t", str(self.timeout_ms),
                summary,
                body,
            ]
        if self.tool.name == "osascript":
            script = (
                f"display notification {_applescript_string(body)} "
                f"with title {_applescript_string(self.app_name)} "
                f"subtitle {_applescript_string(summary)}"
            )
            return [self.tool.path, "-e", script]

        raise ValueError(f"Unsupported notification tool: {self.tool.name}")

    def notify(self, summary: str, body: str = "", urgency: str = URGENCY_NORMAL) -> bool:
        """
        Show a notification.

        Args:
            summary: Notification title
            body: Notification text
            urgency: "low", "normal" or "critical" (notify-send only)

        Returns:
            True if the notification command succeeded
        """
        if self.tool is None:
            self.logger.debug(f"No notification tool, dropping: {summary}")
            return False

        try:
            args = self.build_command(summary, body, urgency)
            result = subprocess.run(
                args,
                stdout=subprocess.DEVNULL,
                stderr=subprocess.PIPE,
            )
        except (OSError, ValueError) as e:
            self.logger.warning(f"Notification failed: {e}")
            return False

        if result.returncode != 0:
            self.logger.warning(
                f"{self.tool.name} exited with status {result.returncode}: "
                f"{result.stderr.decode('utf-8', errors='replace').strip()}"
            )
            return False
        return True
