"""Shared utility functions for check-engine."""

from .atomic_io import atomic_write_text
from .rich_logging import CheckEngineLogFormatter, setup_logging
from .subprocess_utils import CommandTimeoutError, run_command

__all__ = [
    "atomic_write_text",
    "CheckEngineLogFormatter",
    "setup_logging",
    "CommandTimeoutError",
    "run_command",
]
