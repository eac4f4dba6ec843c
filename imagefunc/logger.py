"""
Logger - package logging setup for imagefunc

Usage:
    from imagefunc.logger import configure_logging, LogLevel

    configure_logging(LogLevel.DEBUG)
    configure_logging(LogLevel.INFO, log_file="render.log")

Modules log through logging.getLogger(__name__), which all hang off the
"imagefunc" logger configured here. Library code never installs handlers;
the CLI calls configure_logging() once at startup.
"""

import logging
import sys
from enum import IntEnum
from typing import Optional

PACKAGE_LOGGER = "imagefunc"

CONSOLE_FORMAT = "%(asctime)s [%(levelname)s] %(message)s"
CONSOLE_DATEFMT = "%H:%M:%S"


class LogLevel(IntEnum):
    """Log levels matching Python logging."""
    DEBUG = logging.DEBUG      # 10
    INFO = logging.INFO        # 20
    WARNING = logging.WARNING  # 30
    ERROR = logging.ERROR      # 40


class PackageLogging:
    """
    Handler management for the "imagefunc" logger.

    - Console (stdout) output, level adjustable
    - Optional file output, always DEBUG
    """

    def __init__(self, name: str = PACKAGE_LOGGER):
        self._logger = logging.getLogger(name)
        self._console_handler: Optional[logging.StreamHandler] = None
        self._file_handler: Optional[logging.FileHandler] = None

    @property
    def logger(self) -> logging.Logger:
        return self._logger

    def enable_console(self, level: LogLevel = LogLevel.INFO):
        """Install (or re-level) the stdout handler."""
        self._logger.setLevel(logging.DEBUG)  # Capture all, filter on handlers
        self._logger.propagate = False

        if self._console_handler is None:
            self._console_handler = logging.StreamHandler(sys.stdout)
            self._console_handler.setFormatter(logging.Formatter(
                CONSOLE_FORMAT,
                datefmt=CONSOLE_DATEFMT,
            ))
            self._logger.addHandler(self._console_handler)
        self._console_handler.setLevel(level)

    def enable_file_logging(self, filepath: str):
        """Enable logging to file."""
        if self._file_handler:
            self._logger.removeHandler(self._file_handler)
            self._file_handler.close()

        self._logger.setLevel(logging.DEBUG)
        self._file_handler = logging.FileHandler(filepath)
        self._file_handler.setLevel(logging.DEBUG)
        self._file_handler.setFormatter(logging.Formatter(CONSOLE_FORMAT))
        self._logger.addHandler(self._file_handler)

    def disable_file_logging(self):
        """Disable file logging."""
        if self._file_handler:
            self._logger.removeHandler(self._file_handler)
            self._file_handler.close()
            self._file_handler = None

    def reset(self):
        """Remove every handler installed here."""
        self.disable_file_logging()
        if self._console_handler:
            self._logger.removeHandler(self._console_handler)
            self._console_handler = None
        self._logger.propagate = True


# Global instance
package_logging = PackageLogging()


def configure_logging(level: LogLevel = LogLevel.INFO, log_file: Optional[str] = None):
    """Console logging at `level`, plus a DEBUG file log when `log_file` is set."""
    package_logging.enable_console(level)
    if log_file:
        package_logging.enable_file_logging(log_file)
