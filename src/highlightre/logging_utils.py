"""Custom logging utilities for the HighlightRe application."""
# src/highlightre/logging_utils.py

import logging
import sys
import time
from logging import FileHandler
from pathlib import Path

from . import paths


class _UTCMicrosecondFormatter(logging.Formatter):
    """Formats record times in UTC with 6-digit microseconds and a 'Z' suffix."""

    def __init__(self, fmt: str) -> None:
        super().__init__(fmt=fmt, datefmt="%Y-%m-%dT%H:%M:%S")
        self.converter = time.gmtime

    def formatTime(self, record: logging.LogRecord, datefmt: str | None = None) -> str:  # noqa: N802
        """Format the time with 6-digit microseconds and a 'Z' for UTC."""
        ct = self.converter(record.created)
        s = time.strftime(datefmt, ct) if datefmt else time.strftime(self.default_time_format, ct)
        microseconds = int((record.created - int(record.created)) * 1_000_000)
        return f"{s}.{microseconds:06d}Z"


# Console Log Formatter
class ConsoleFormatter(_UTCMicrosecondFormatter):
    """A formatter for console output: the case report and user-facing messages."""

    def __init__(self, version: str) -> None:
        """
        Initialize the formatter with the application version.

        Args:
            version: The HighlightRe application version.

        """
        super().__init__(f"%(asctime)s | HighlightRe - {version} | %(message)s")


# File Log Formatter
class FileFormatter(_UTCMicrosecondFormatter):
    """A detailed formatter for debug log files."""

    def __init__(self) -> None:
        """Initialize the detailed file formatter."""
        super().__init__("%(asctime)s | %(name)-20s | %(funcName)-20s:%(lineno)-4d | %(levelname)-8s | %(message)s")


def setup_logging(version: str, *, debug: bool = False, log_dir: Path | None = None) -> None:
    """
    Configure the root logger for the HighlightRe application.

    1.  Console: the case report. Level is INFO by default, DEBUG if debug=True.
    2.  File (DEBUG): detailed logs written to '<log_dir>/debug.log' when debug=True
        and a log directory is given.

    Args:
        version: The application version, included in console logs.
        debug: If True, sets the console level to DEBUG and enables file logging.
        log_dir: Where the debug log file is written.

    """
    root_logger = logging.getLogger()
    if root_logger.hasHandlers():
        root_logger.handlers.clear()

    level = logging.DEBUG if debug else logging.INFO
    root_logger.setLevel(level)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(ConsoleFormatter(version))
    root_logger.addHandler(console_handler)

    if debug and log_dir is not None:
        try:
            paths.ensure_dir_exists(log_dir)
            log_file_path = log_dir / "debug.log"

            file_handler = FileHandler(log_file_path, mode="w", encoding="utf-8")
            file_handler.setLevel(logging.DEBUG)
            file_handler.setFormatter(FileFormatter())
            root_logger.addHandler(file_handler)

            logging.getLogger().info(
                "Debug mode enabled. Console level set to DEBUG. Detailed logs will be written to %s",
                log_file_path,
            )
        except OSError:
            # Console logging still works without the file.
            logging.getLogger().exception("Failed to create debug log file. Continuing with console logging only.")
