"""Command-line entry point for check-engine."""

import logging
import os
import signal
from pathlib import Path

import click
import yaml
from pydantic import ValidationError
from rich.console import Console
from rich.table import Table

from ..alerts.reporter import AlertReporter, StatusWriteError, is_interactive
from ..core.config import DEFAULT_CONFIG_FILE, load_config
from ..probes.discovery import discover_probes
from ..probes.executor import ProbeExecutor
from ..scheduler.loop import CheckScheduler
from ..utils.rich_logging import setup_logging

logger = logging.getLogger(__name__)

console = Console()
err_console = Console(stderr=True)

EXIT_OK = 0
EXIT_ALERT = 1
EXIT_ERROR = 2


def _print_probe_table(probe_dir: Path) -> None:
    probes = discover_probes(probe_dir)
    if not probes:
        console.print(f"[yellow]No checks found in {probe_dir}[/]")
        return

    table = Table(title=f"Probes in {probe_dir}")
    table.add_column("Probe", overflow="fold")
    table.add_column("Executable")
    for probe in probes:
        executable = "[green]yes[/]" if os.access(probe, os.X_OK) else "[red]no[/]"
        table.add_row(str(probe.relative_to(probe_dir)), executable)
    console.print(table)


def _install_signal_handlers(scheduler: CheckScheduler) -> None:
    def _handle(signum, frame):
        logger.info(f"Received {signal.Signals(signum).name}, stopping")
        scheduler.stop()

    signal.signal(signal.SIGTERM, _handle)
    signal.signal(signal.SIGINT, _handle)


@click.command()
@click.option("--loop", "-l", "loop_mode", is_flag=True, help="Run passes forever, every --interval seconds")
@click.option(
    "--path", "-p", "probe_dir",
    type=click.Path(file_okay=False, path_type=Path),
    help="Directory holding probe executables",
)
@click.option(
    "--config", "-c", "config_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help=f"YAML config file (default: {DEFAULT_CONFIG_FILE} if present)",
)
@click.option(
    "--status-file",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Where to write the latest alert report",
)
@click.option("--interval", type=float, help="Seconds between passes in loop mode")
@click.option("--timeout", "probe_timeout", type=float, help="Per-probe timeout in seconds (default: none)")
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    help="Logging verbosity",
)
@click.option("--list", "list_only", is_flag=True, help="List discovered probes and exit")
@click.pass_context
def main(ctx, loop_mode, probe_dir, config_path, status_file, interval, probe_timeout, log_level, list_only):
    """Check Engine - run every probe under a directory and raise an alert on failure."""
    if config_path is None and DEFAULT_CONFIG_FILE.exists():
        config_path = DEFAULT_CONFIG_FILE

    try:
        config = load_config(
            config_path,
            probe_dir=probe_dir,
            status_file=status_file,
            interval=interval,
            probe_timeout=probe_timeout,
            log_level=log_level,
        )
    except (ValidationError, ValueError, yaml.YAMLError) as e:
        raise click.UsageError(f"Invalid configuration: {e}")

    if config.probe_dir is None:
        raise click.UsageError("Missing option '--path' / '-p'.")

    setup_logging(config.log_level)

    if list_only:
        _print_probe_table(config.probe_dir)
        ctx.exit(EXIT_OK)

    scheduler = CheckScheduler(
        probe_dir=config.probe_dir,
        executor=ProbeExecutor(timeout=config.probe_timeout),
        reporter=AlertReporter(config.status_file, interactive=is_interactive(), console=console),
        interval=config.interval,
        startup_delay=config.startup_delay,
    )

    if loop_mode:
        _install_signal_handlers(scheduler)
        scheduler.run_forever()
        ctx.exit(EXIT_OK)

    try:
        outcome = scheduler.run_pass()
    except StatusWriteError as e:
        err_console.print(f"[red]Error: {e}[/]")
        ctx.exit(EXIT_ERROR)

    ctx.exit(EXIT_ALERT if outcome.alerted else EXIT_OK)


if __name__ == "__main__":
    main()
