"""Logging setup with compact, optionally coloured formatting."""

import logging
import sys
from datetime import datetime
from typing import Optional, TextIO


class CheckEngineLogFormatter(logging.Formatter):
    """Formatter producing `HH:MM:SS LEVEL [check-engine] message` lines."""

    LEVEL_COLORS = {
        "DEBUG": "\033[36m",      # Cyan
        "INFO": "\033[32m",       # Green
        "WARNING": "\033[33m",    # Yellow
        "ERROR": "\033[31m",      # Red
        "CRITICAL": "\033[35m",   # Magenta
    }

    def __init__(self, name: str = "check-engine", use_colors: bool = True):
        super().__init__()
        self.name = name
        self.use_colors = use_colors

    def format(self, record: logging.LogRecord) -> str:
        timestamp = datetime.fromtimestamp(record.created).strftime("%H:%M:%S")

        if self.use_colors:
            level_color = self.LEVEL_COLORS.get(record.levelname, "")
            reset = "\033[0m"
        else:
            level_color = ""
            reset = ""

        message = (
            f"{timestamp} {level_color}{record.levelname:8s}{reset} "
            f"[{self.name}] {record.getMessage()}"
        )
        if record.exc_info:
            message += "\n" + self.formatException(record.exc_info)
        return message


def setup_logging(
    log_level: str = "INFO",
    stream: Optional[TextIO] = None,
) -> logging.Logger:
    """
    Configure the `check_engine` logger.

    Logs go to stderr by default so stdout stays free for the alert banner.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR)
        stream: Output stream (defaults to sys.stderr)

    Returns:
        The configured package logger
    """
    stream = stream or sys.stderr
    logger = logging.getLogger("check_engine")
    logger.setLevel(getattr(logging, log_level.upper()))

    # Close existing handlers before clearing (prevents file descriptor leak)
    for handler in logger.handlers[:]:
        handler.close()
        logger.removeHandler(handler)

    use_colors = stream.isatty() if hasattr(stream, "isatty") else False

    handler = logging.StreamHandler(stream)
    handler.setFormatter(CheckEngineLogFormatter(use_colors=use_colors))
    logger.addHandler(handler)

    return logger
