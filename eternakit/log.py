"""Log levels, the console log format and logging set-up."""

from __future__ import annotations

import enum
import logging
import sys
import time

LOGGER_NAME = "eternakit"
VERBOSE = 5

logging.addLevelName(VERBOSE, "VERBOSE")


class LogLevel(enum.IntEnum):
    """Severity levels, most severe first."""

    FATAL = 1
    ERROR = 2
    WARN = 3
    INFO = 4
    DEBUG = 5
    VERBOSE = 6

    @property
    def logging_level(self) -> int:
        """The matching level of the standard ``logging`` module."""
        return _LOGGING_LEVELS[self]


_LOGGING_LEVELS = {
    LogLevel.FATAL: logging.CRITICAL,
    LogLevel.ERROR: logging.ERROR,
    LogLevel.WARN: logging.WARNING,
    LogLevel.INFO: logging.INFO,
    LogLevel.DEBUG: logging.DEBUG,
    LogLevel.VERBOSE: VERBOSE,
}


def _severity_name(levelno: int) -> str:
    if levelno >= logging.CRITICAL:
        return "FATAL"
    if levelno >= logging.ERROR:
        return "ERROR"
    if levelno >= logging.WARNING:
        return "WARN"
    if levelno >= logging.INFO:
        return "INFO"
    if levelno >= logging.DEBUG:
        return "DEBUG"
    return "VERB"


class CustomFormatter(logging.Formatter):
    """Formats records as ``HH:MM:SS LEVEL [function@line] message``."""

    def format(self, record: logging.LogRecord) -> str:
        t = time.localtime(record.created)
        text = (
            f"{t.tm_hour:02d}:{t.tm_min:02d}:{t.tm_sec:02d} "
            f"{_severity_name(record.levelno):<5} "
            f"[{record.funcName}@{record.lineno}] {record.getMessage()}"
        )
        if record.exc_info:
            text += "\n" + self.formatException(record.exc_info)
        return text


def log_level_from_str(s: str) -> LogLevel:
    """Parse a level name such as ``"info"`` or ``"WARN"``, ignoring case."""
    try:
        return LogLevel[s.lower().upper()]
    except KeyError:
        raise ValueError(f"{s.lower()} is not a recognized log level") from None


def init_logging(log_level: LogLevel = LogLevel.INFO) -> logging.Logger:
    """Set up the package logger to print to standard output at ``log_level``.

    Calling it again only changes the level.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(log_level.logging_level)
    if not any(isinstance(h.formatter, CustomFormatter) for h in logger.handlers):
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(CustomFormatter())
        logger.addHandler(handler)
        logger.propagate = False
    return logger