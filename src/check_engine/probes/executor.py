"""Probe execution and result classification."""

import logging
import time
from pathlib import Path
from typing import Optional

from ..core.results import ExecutionResult, ProbeStatus
from ..utils.subprocess_utils import CommandTimeoutError, run_command

logger = logging.getLogger(__name__)


class ProbeExecutor:
    """Run a single probe and turn whatever happens into an ExecutionResult.

    Nothing a probe does escapes as an exception: spawn errors, non-zero
    exits, signals and timeouts all become failure results.
    """

    def __init__(self, timeout: Optional[float] = None):
        self.timeout = timeout

    def execute(self, path: Path) -> ExecutionResult:
        """
        Execute one probe with no arguments and wait for it to finish.

        Args:
            path: Probe executable

        Returns:
            ExecutionResult classifying the outcome
        """
        path = Path(path)
        logger.debug(f"Running probe {path}")
        started = time.monotonic()

        try:
            # A bare relative name like "a" would otherwise be looked up on PATH
            completed = run_command([str(path.absolute())], timeout=self.timeout)
        except CommandTimeoutError as e:
            duration = time.monotonic() - started
            logger.warning(f"Probe {path} timed out after {self.timeout}s")
            return ExecutionResult(
                path=path,
                status=ProbeStatus.TIMED_OUT,
                stdout=e.stdout,
                stderr=e.stderr,
                duration=duration,
                timeout=self.timeout,
            )
        except OSError as e:
            logger.warning(f"Probe {path} failed to execute: {e}")
            return ExecutionResult(
                path=path,
                status=ProbeStatus.EXECUTION_FAILURE,
                error=str(e),
                duration=time.monotonic() - started,
            )

        duration = time.monotonic() - started
        returncode = completed.returncode

        if returncode == 0:
            logger.info(f"Probe {path} passed ({duration:.2f}s)")
            return ExecutionResult(
                path=path,
                status=ProbeStatus.SUCCESS,
                exit_code=0,
                duration=duration,
            )

        if returncode < 0:
            logger.warning(f"Probe {path} terminated by signal {-returncode}")
            return ExecutionResult(
                path=path,
                status=ProbeStatus.NON_ZERO_EXIT,
                signal=-returncode,
                stdout=completed.stdout,
                stderr=completed.stderr,
                duration=duration,
            )

        logger.warning(f"Probe {path} failed with exit code {returncode} ({duration:.2f}s)")
        return ExecutionResult(
            path=path,
            status=ProbeStatus.NON_ZERO_EXIT,
            exit_code=returncode,
            stdout=completed.stdout,
            stderr=completed.stderr,
            duration=duration,
        )
