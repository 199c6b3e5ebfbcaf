"""End-to-end passes over real probe directories."""

import io

from rich.console import Console

from check_engine.alerts.reporter import AlertReporter
from check_engine.probes.executor import ProbeExecutor
from check_engine.scheduler.loop import CheckScheduler


def _scheduler(probe_dir, status_file, interactive=False, console=None):
    return CheckScheduler(
        probe_dir=probe_dir,
        executor=ProbeExecutor(),
        reporter=AlertReporter(status_file, interactive=interactive, console=console),
        interval=0,
        startup_delay=0,
    )


def test_mixed_probe_directory(make_probe, probe_dir, status_file):
    """a passes, b fails with stderr, c cannot be executed."""
    make_probe("a", "echo fine; exit 0")
    make_probe("b", "echo boom >&2; exit 1")
    make_probe("c", executable=False)

    outcome = _scheduler(probe_dir, status_file).run_pass()

    text = status_file.read_text()
    assert text == outcome.report.text
    assert f"Check {probe_dir / 'b'} failed with exit code 1:\n\nboom\n\n" in text
    assert f"Check {probe_dir / 'c'} failed to execute:" in text
    assert str(probe_dir / "a") not in text
    assert "fine" not in text
    # b before c, one block each
    assert text.index("/b ") < text.index("/c ")
    assert text.count("Check ") == 2


def test_interactive_run_echoes_banner(make_probe, probe_dir, status_file):
    make_probe("b", "echo boom >&2; exit 1")
    console = Console(file=io.StringIO(), force_terminal=True, width=200)

    _scheduler(probe_dir, status_file, interactive=True, console=console).run_pass()

    output = console.file.getvalue()
    assert "Check Engine!" in output
    assert "boom" in output


def test_overwrite_between_passes(make_probe, probe_dir, status_file):
    probe = make_probe("flappy", "echo R1 >&2; exit 1")
    scheduler = _scheduler(probe_dir, status_file)

    scheduler.run_pass()
    assert "R1" in status_file.read_text()

    probe.write_text("#!/bin/sh\necho R2 >&2\nexit 2\n")
    outcome = scheduler.run_pass()

    assert status_file.read_text() == outcome.report.text
    assert "R1" not in status_file.read_text()
    assert "exit code 2" in status_file.read_text()


def test_probe_removed_between_passes_reports_no_checks(make_probe, probe_dir, status_file):
    probe = make_probe("only", "exit 0")
    scheduler = _scheduler(probe_dir, status_file)

    assert not scheduler.run_pass().alerted
    probe.unlink()

    assert scheduler.run_pass().report.no_checks
    assert status_file.read_text() == "No checks found"
