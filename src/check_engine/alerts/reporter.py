"""Alert reporting: build the check-engine report and raise it."""

import logging
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Sequence

from rich.console import Console

from ..core.results import ExecutionResult
from ..utils.atomic_io import atomic_write_text

logger = logging.getLogger(__name__)

NO_CHECKS_MESSAGE = "No checks found"
BANNER_TEXT = " Check Engine! "
BANNER_STYLE = "bold blink red on bright_white"


class StatusWriteError(Exception):
    """Raised when the status file cannot be written."""

    def __init__(self, status_file: Path, error: OSError):
        self.status_file = status_file
        self.error = error
        super().__init__(f"Failed to write status file {status_file}: {error}")


def is_interactive() -> bool:
    """Whether stdout is attached to a terminal."""
    return hasattr(sys.stdout, "isatty") and sys.stdout.isatty()


@dataclass
class AlertReport:
    """Failures from one pass, or the empty-probe-set condition."""
    failures: List[ExecutionResult] = field(default_factory=list)
    no_checks: bool = False

    @property
    def text(self) -> str:
        if self.no_checks:
            return NO_CHECKS_MESSAGE
        return "".join(result.describe() for result in self.failures)


class AlertReporter:
    """Decide whether a pass needs an alert and raise it.

    The status file always receives the report. The banner and inline echo
    only appear when `interactive` is true.
    """

    def __init__(
        self,
        status_file: Path,
        interactive: bool = False,
        console: Optional[Console] = None,
    ):
        self.status_file = Path(status_file)
        self.interactive = interactive
        self.console = console or Console()

    def build_report(
        self,
        failures: Sequence[ExecutionResult],
        probes_found: bool = True,
    ) -> Optional[AlertReport]:
        """Return the report for a pass, or None when nothing needs attention."""
        if not probes_found:
            return AlertReport(no_checks=True)
        failing = [result for result in failures if not result.ok]
        if not failing:
            return None
        return AlertReport(failures=failing)

    def report(
        self,
        failures: Sequence[ExecutionResult],
        probes_found: bool = True,
    ) -> Optional[AlertReport]:
        """
        Raise an alert for a pass if needed.

        Args:
            failures: Non-success results of the pass, in probe order
            probes_found: False when discovery found no probes

        Returns:
            The AlertReport that was raised, or None for a clean pass

        Raises:
            StatusWriteError: If the status file could not be written
        """
        report = self.build_report(failures, probes_found)
        if report is None:
            return None

        if report.no_checks:
            logger.warning("Check engine: no checks found")
        else:
            logger.warning(f"Check engine: {len(report.failures)} probe(s) failing")

        text = report.text
        if self.interactive:
            self._echo(text)

        try:
            self._write_status(text)
        except OSError as e:
            logger.error(f"Failed to write status file {self.status_file}: {e}")
            raise StatusWriteError(self.status_file, e) from e

        return report

    def _echo(self, text: str) -> None:
        self.console.print(BANNER_TEXT, style=BANNER_STYLE, markup=False, highlight=False)
        self.console.out(text, highlight=False, end="")

    def _write_status(self, text: str) -> None:
        self.status_file.parent.mkdir(parents=True, exist_ok=True)
        atomic_write_text(self.status_file, text)
        logger.debug(f"Wrote status file {self.status_file}")
