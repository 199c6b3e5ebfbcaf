"""Check Engine - periodic health-check runner for a directory of probe executables."""

__version__ = "0.1.0"
