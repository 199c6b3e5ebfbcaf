"""Probe execution results."""

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Optional


class ProbeStatus(Enum):
    """Outcome of running one probe."""
    SUCCESS = "success"
    EXECUTION_FAILURE = "execution_failure"
    NON_ZERO_EXIT = "non_zero_exit"
    TIMED_OUT = "timed_out"


@dataclass
class ExecutionResult:
    """Result of running one probe.

    `exit_code` is None when the process was killed by a signal (then
    `signal` holds the signal number) or never started.
    """
    path: Path
    status: ProbeStatus
    exit_code: Optional[int] = None
    signal: Optional[int] = None
    stdout: str = ""
    stderr: str = ""
    error: Optional[str] = None
    duration: float = 0.0
    timeout: Optional[float] = None

    @property
    def ok(self) -> bool:
        return self.status == ProbeStatus.SUCCESS

    def describe(self) -> str:
        """Human-readable report block for this result."""
        if self.status == ProbeStatus.EXECUTION_FAILURE:
            return f"Check {self.path} failed to execute: {self.error}\n"
        if self.status == ProbeStatus.TIMED_OUT:
            return (
                f"Check {self.path} timed out after {self.timeout:g}s:\n"
                f"{self.stdout}\n{self.stderr}\n"
            )
        if self.exit_code is None:
            return (
                f"Check {self.path} was terminated by signal {self.signal}:\n"
                f"{self.stdout}\n{self.stderr}\n"
            )
        return (
            f"Check {self.path} failed with exit code {self.exit_code}:\n"
            f"{self.stdout}\n{self.stderr}\n"
        )
