"""Shared pytest fixtures and configuration for the latest-change test suite.

Guidelines
----------
* git is mocked at the infra boundary, except in ``test_integration.py``
  which drives a throwaway repository and is skipped without git.
* Core tests must be pure — no side effects.
* Dependency files are written under ``tmp_path`` only.
"""

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from latest_change.utils import LOG_LEVEL_ENV_VAR


@pytest.fixture(autouse=True)
def _isolate_logging(monkeypatch: pytest.MonkeyPatch):
    """Ignore the caller's log-level env var and drop handlers after each test."""
    monkeypatch.delenv(LOG_LEVEL_ENV_VAR, raising=False)
    yield
    logger = logging.getLogger("latest_change")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)


@pytest.fixture
def write_deps(tmp_path: Path):
    """Write a dependency file into *tmp_path* and return its path."""

    def _write(content: str, name: str = ".deps.toml") -> Path:
        path = tmp_path / name
        path.write_text(content, encoding="utf-8")
        return path

    return _write
