"""Scheduler loop: run passes once or forever."""

import logging
import threading
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

from ..alerts.reporter import AlertReport, AlertReporter, StatusWriteError
from ..core.results import ExecutionResult
from ..probes.discovery import discover_probes
from ..probes.executor import ProbeExecutor

logger = logging.getLogger(__name__)


@dataclass
class PassOutcome:
    """Everything that happened during one pass."""
    probes: List[Path] = field(default_factory=list)
    results: List[ExecutionResult] = field(default_factory=list)
    report: Optional[AlertReport] = None
    interrupted: bool = False

    @property
    def failures(self) -> List[ExecutionResult]:
        return [result for result in self.results if not result.ok]

    @property
    def alerted(self) -> bool:
        return self.report is not None


class CheckScheduler:
    """
    Runs discovery, execution and reporting passes over a probe directory.

    Probes run strictly one after another. In loop mode the scheduler waits
    `startup_delay` before the first pass and `interval` between the end of
    one pass and the start of the next.
    """

    def __init__(
        self,
        probe_dir: Path,
        executor: ProbeExecutor,
        reporter: AlertReporter,
        interval: float = 5.0,
        startup_delay: float = 5.0,
    ):
        self.probe_dir = Path(probe_dir)
        self.executor = executor
        self.reporter = reporter
        self.interval = interval
        self.startup_delay = startup_delay
        self._stop_event = threading.Event()

    @property
    def stopping(self) -> bool:
        return self._stop_event.is_set()

    def stop(self) -> None:
        """Request shutdown. Safe to call from a signal handler."""
        self._stop_event.set()

    def _wait(self, delay: float) -> bool:
        """Sleep for delay seconds; True if a stop was requested meanwhile."""
        return self._stop_event.wait(delay)

    def run_pass(self) -> PassOutcome:
        """
        Run one discovery + execute + report cycle.

        A stop request between probes abandons the pass without reporting.

        Raises:
            StatusWriteError: If the alert could not be written
        """
        probes = discover_probes(self.probe_dir)
        outcome = PassOutcome(probes=probes)
        logger.debug(f"Starting pass over {len(probes)} probe(s) in {self.probe_dir}")

        for probe in probes:
            if self.stopping:
                logger.info("Stop requested, abandoning pass")
                outcome.interrupted = True
                return outcome
            outcome.results.append(self.executor.execute(probe))

        outcome.report = self.reporter.report(outcome.failures, probes_found=bool(probes))

        if outcome.alerted:
            logger.info(f"Pass complete: {len(outcome.failures)}/{len(probes)} probe(s) failing")
        else:
            logger.info(f"Pass complete: all {len(probes)} probe(s) passed")
        return outcome

    def run_forever(self) -> None:
        """Loop mode. Returns only after stop() is called."""
        logger.info(
            f"Check scheduler starting: probes in {self.probe_dir}, "
            f"first pass in {self.startup_delay:g}s, then every {self.interval:g}s"
        )
        if self._wait(self.startup_delay):
            logger.info("Check scheduler stopped")
            return

        while True:
            try:
                self.run_pass()
            except StatusWriteError:
                # Already logged by the reporter; keep checking
                pass

            if self._wait(self.interval):
                break

        logger.info("Check scheduler stopped")
