"""Engine logging built on the standard logging module."""

from __future__ import annotations

import enum
import logging
import sys


class LogLevel(enum.Enum):
    """Severity of an engine log message."""

    DEBUG = logging.DEBUG
    INFO = logging.INFO
    WARN = logging.WARNING
    ERROR = logging.ERROR
    FATAL = logging.CRITICAL


_LEVEL_NAMES = {
    logging.DEBUG: "debug",
    logging.INFO: "info",
    logging.WARNING: "warning",
    logging.ERROR: "error",
    logging.CRITICAL: "critical",
}


class _ConsoleFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        name = _LEVEL_NAMES.get(record.levelno, record.levelname.lower())
        return f"[{name}] {record.getMessage()}"


class Logger:
    """Named engine logger that writes to the console once initialized."""

    def __init__(self, name: str = "muggle_logger") -> None:
        self.name = name
        self._logger = logging.getLogger(name)
        self._handler: logging.Handler | None = None

    def initialize(self) -> None:
        """Attach the console sink and start tracing all levels."""
        if self._handler is None:
            handler = logging.StreamHandler(sys.stdout)
            handler.setLevel(logging.DEBUG)
            handler.setFormatter(_ConsoleFormatter())
            self._logger.addHandler(handler)
            self._handler = handler
        self._logger.setLevel(logging.DEBUG)
        self.log(LogLevel.INFO, "[initialize]Now tracing logs...")

    def disposal(self) -> None:
        """Flush and detach the console sink."""
        self.log(LogLevel.INFO, "[disposal]Stop logging and saving...")
        if self._handler is not None:
            self._handler.flush()
            self._logger.removeHandler(self._handler)
            self._handler.close()
            self._handler = None

    def log(self, level: LogLevel, message: str) -> None:
        """Log a message; a fatal message also raises RuntimeError."""
        level = LogLevel(level)
        self._logger.log(level.value, message)
        if level is LogLevel.FATAL:
            raise RuntimeError(message)


_engine_logger = Logger()


def info(message: str) -> None:
    """Log an informational message through the engine logger."""
    _engine_logger.log(LogLevel.INFO, f"[info]{message}")


def debug(message: str) -> None:
    """Log a debug message through the engine logger."""
    _engine_logger.log(LogLevel.DEBUG, f"[debug]{message}")


def warn(message: str) -> None:
    """Log a warning through the engine logger."""
    _engine_logger.log(LogLevel.WARN, f"[warn]{message}")


def err(message: str) -> None:
    """Log an error through the engine logger."""
    _engine_logger.log(LogLevel.ERROR, f"[err]{message}")


def fatal(message: str) -> None:
    """Log a fatal message through the engine logger and raise RuntimeError."""
    _engine_logger.log(LogLevel.FATAL, f"[fatal]{message}")