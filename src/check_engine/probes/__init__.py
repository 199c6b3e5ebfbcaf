"""Probe discovery and execution."""

from .discovery import discover_probes
from .executor import ProbeExecutor

__all__ = ["discover_probes", "ProbeExecutor"]
