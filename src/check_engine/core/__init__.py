"""Core models and configuration."""

from .config import CheckEngineConfig, load_config
from .results import ExecutionResult, ProbeStatus

__all__ = ["CheckEngineConfig", "load_config", "ExecutionResult", "ProbeStatus"]
