"""
Main entry point for SnapOCR.
"""
import sys
from typing import List, Optional

from snapocr.config.constants import (
    APP_NAME, APP_VERSION, CATEGORY_NOTIFY, EXIT_FAILURE, URGENCY_CRITICAL
)
from snapocr.config.settings import Settings
from snapocr.core.notifier import Notifier
from snapocr.core.pipeline import CapturePipeline
from snapocr.core.resolver import find_tool
from snapocr.utils.file_manager import FileManager
from snapocr.utils.logger import LoggerSetup, get_logger, log_exception
from snapocr.utils.scratch import install_signal_handlers


def main(argv: Optional[List[str]] = None) -> int:
    """
    Capture a region, OCR it and copy the text to the clipboard.

    Takes no arguments. Returns 0 on success and 1 on any failure.
    """
    argv = sys.argv[1:] if argv is None else argv

    LoggerSetup()
    logger = get_logger('SnapOCR.Main')

    settings = Settings()
    notifier = Notifier(find_tool(settings.get_candidates(CATEGORY_NOTIFY)))

    try:
        settings.load()
        LoggerSetup.setup_debug_logging(settings.debug_enabled)
        logger.info(f"Starting {APP_NAME} v{APP_VERSION}")

        if argv:
            logger.warning(f"Ignoring unexpected arguments: {' '.join(argv)}")

        # Preferences may reorder notifiers or change the timeout
        notifier = Notifier(
            find_tool(settings.get_candidates(CATEGORY_NOTIFY)),
            timeout_ms=settings.notification_timeout_ms,
        )

        FileManager.clean_old_logs()
        install_signal_handlers()

        exit_code = CapturePipeline(settings, notifier).run()
    except KeyboardInterrupt:
        logger.warning("Interrupted")
        notifier.notify("Capture interrupted", "", URGENCY_CRITICAL)
        return EXIT_FAILURE
    except Exception as e:
        log_exception(logger, e, "Unexpected error")
        notifier.notify(f"{APP_NAME} failed", str(e), URGENCY_CRITICAL)
        return EXIT_FAILURE

    logger.info(f"{APP_NAME} finished with exit code {exit_code}")
    return exit_code


if __name__ == "__main__":
    sys.exit(main())
