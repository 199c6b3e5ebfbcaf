"""Shared fixtures: probe script factory and logger cleanup."""

import logging
from pathlib import Path

import pytest


@pytest.fixture
def probe_dir(tmp_path) -> Path:
    d = tmp_path / "probes"
    d.mkdir()
    return d


@pytest.fixture
def make_probe(probe_dir):
    """Write a /bin/sh probe script. Returns a factory(name, body, executable=True)."""

    def _make(name: str, body: str = "exit 0", executable: bool = True) -> Path:
        path = probe_dir / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(f"#!/bin/sh\n{body}\n")
        path.chmod(0o755 if executable else 0o644)
        return path

    return _make


@pytest.fixture
def status_file(tmp_path) -> Path:
    return tmp_path / "status" / "check_engine"


@pytest.fixture(autouse=True)
def _reset_package_logger():
    """Drop handlers that setup_logging() installs during CLI tests."""
    yield
    logger = logging.getLogger("check_engine")
    for handler in logger.handlers[:]:
        handler.close()
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)
