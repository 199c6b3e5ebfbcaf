"""Alert reporting."""

from .reporter import (
    AlertReport,
    AlertReporter,
    StatusWriteError,
    is_interactive,
    NO_CHECKS_MESSAGE,
)

__all__ = [
    "AlertReport",
    "AlertReporter",
    "StatusWriteError",
    "is_interactive",
    "NO_CHECKS_MESSAGE",
]
