"""
File and directory management utilities.
"""
from pathlib import Path
from typing import List, Optional
import logging

from ..config.constants import LOGS_DIR, LOG_FILE_PREFIX, LOGS_TO_KEEP


class FileManager:
    """Manage application files and directories."""

    @staticmethod
    def get_log_files(logs_dir: Optional[Path] = None) -> List[Path]:
        """
        Get the application's log files, newest first.

        Args:
            logs_dir: Directory to look in (defaults to LOGS_DIR)

        Returns:
            List of log file paths
        """
        logs_dir = Path(logs_dir) if logs_dir else LOGS_DIR
        if not logs_dir.exists():
            return []

        return sorted(
            logs_dir.glob(f"{LOG_FILE_PREFIX}*.log"),
            key=lambda p: p.stat().st_mtime,
            reverse=True
        )

    @staticmethod
    def clean_old_logs(keep_recent: int = LOGS_TO_KEEP,
                       logs_dir: Optional[Path] = None) -> int:
        """
        Clean old log files, keeping only the most recent ones.

        Args:
            keep_recent: Number of recent logs to keep
            logs_dir: Directory to clean (defaults to LOGS_DIR)

        Returns:
            Number of files deleted
        """
        logger = logging.getLogger('SnapOCR.FileManager')
        deleted = 0

        for log_file in FileManager.get_log_files(logs_dir)[keep_recent:]:
            try:
                log_file.unlink()
                deleted += 1
                logger.debug(f"Deleted old log file: {log_file.name}")
            except OSError as e:
                logger.warning(f"Failed to delete log file {log_file}: {e}")

        return deleted
