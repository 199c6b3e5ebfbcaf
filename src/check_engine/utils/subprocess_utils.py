"""Subprocess execution for probes."""

import logging
import os
import signal
import subprocess
from typing import List, Optional

logger = logging.getLogger(__name__)


class CommandTimeoutError(Exception):
    """Raised when a command outlives its timeout; carries its partial output."""

    def __init__(self, cmd: str, timeout: float, stdout: str = "", stderr: str = ""):
        self.cmd = cmd
        self.timeout = timeout
        self.stdout = stdout
        self.stderr = stderr
        super().__init__(f"Command timed out after {timeout:g}s: {cmd}")


def run_command(
    cmd: List[str],
    *,
    timeout: Optional[float] = None,
) -> subprocess.CompletedProcess:
    """
    Run a command to completion and capture its output.

    The child gets its own session with stdin on /dev/null and inherits the
    environment. Output is captured in full and decoded as UTF-8, replacing
    undecodable bytes. A non-zero exit is returned, not raised.

    Args:
        cmd: argv list
        timeout: Timeout in seconds, None waits forever

    Returns:
        CompletedProcess with stdout, stderr, returncode

    Raises:
        CommandTimeoutError: If the timeout expired; the whole process group is killed
        OSError: If the process cannot be spawned
    """
    proc = subprocess.Popen(
        cmd,
        stdin=subprocess.DEVNULL,
        stdout=subprocess.PIPE,
        stderr=subprocess.PIPE,
        text=True,
        encoding="utf-8",
        errors="replace",
        start_new_session=True,
    )

    try:
        stdout, stderr = proc.communicate(timeout=timeout)
    except subprocess.TimeoutExpired:
        logger.error(f"Command timed out after {timeout}s: {' '.join(cmd)}")
        # start_new_session made the child a group leader; children it forked
        # share the group and may hold the pipes open
        try:
            os.killpg(proc.pid, signal.SIGKILL)
        except ProcessLookupError:
            pass
        stdout, stderr = proc.communicate()
        raise CommandTimeoutError(" ".join(cmd), timeout, stdout or "", stderr or "")

    return subprocess.CompletedProcess(proc.args, proc.returncode, stdout, stderr)
