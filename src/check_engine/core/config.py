"""Configuration loading and validation."""

import logging
import os
import re
from pathlib import Path
from typing import Any, Optional

import yaml
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)

DEFAULT_STATUS_FILE = Path("/tmp/check_engine")
DEFAULT_CONFIG_FILE = Path("check-engine.yaml")

_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
_ENV_VAR_PATTERN = re.compile(r"\$\{([^}]+)\}")


class CheckEngineConfig(BaseSettings):
    """Runner configuration.

    Values come from (highest first) explicit keyword arguments, the YAML
    file, CHECK_ENGINE_* environment variables, then the defaults below.
    """
    model_config = SettingsConfigDict(
        env_prefix="CHECK_ENGINE_",
        env_file=".env",
        extra="ignore",
    )

    probe_dir: Optional[Path] = None
    status_file: Path = Field(default=DEFAULT_STATUS_FILE)
    interval: float = 5.0
    startup_delay: float = 5.0
    probe_timeout: Optional[float] = None  # None = wait for probes forever
    log_level: str = "INFO"

    @field_validator("interval", "startup_delay")
    @classmethod
    def validate_delay(cls, v: float) -> float:
        if v < 0:
            raise ValueError(f"delay must be >= 0, got {v}")
        return v

    @field_validator("probe_timeout")
    @classmethod
    def validate_timeout(cls, v: Optional[float]) -> Optional[float]:
        if v is not None and v <= 0:
            raise ValueError(f"probe_timeout must be > 0, got {v}")
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = v.upper()
        if level not in _LOG_LEVELS:
            raise ValueError(
                f"log_level must be one of {', '.join(sorted(_LOG_LEVELS))}, got '{v}'"
            )
        return level


def _expand_env_vars(value: Any) -> Any:
    """Recursively replace ${VAR} references with environment values.

    Unset variables are left as-is.
    """
    if isinstance(value, dict):
        return {k: _expand_env_vars(v) for k, v in value.items()}
    if isinstance(value, list):
        return [_expand_env_vars(v) for v in value]
    if isinstance(value, str):
        return _ENV_VAR_PATTERN.sub(
            lambda m: os.environ.get(m.group(1), m.group(0)), value
        )
    return value


def load_config(
    config_path: Optional[Path] = DEFAULT_CONFIG_FILE,
    **overrides: Any,
) -> CheckEngineConfig:
    """Load runner configuration from a YAML file.

    A config_path of None skips the file. Keyword overrides whose value is
    None are ignored, so CLI options that were not given fall through to the
    file and environment.
    """
    data = {}
    if config_path is None:
        pass
    elif config_path.exists():
        with open(config_path) as f:
            data = yaml.safe_load(f) or {}
        if not isinstance(data, dict):
            raise ValueError(f"Config file {config_path} must contain a mapping")
        data = _expand_env_vars(data)
    else:
        logger.warning(
            f"Config file not found: {config_path}. Using default configuration."
        )

    data.update({k: v for k, v in overrides.items() if v is not None})
    return CheckEngineConfig(**data)
