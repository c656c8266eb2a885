"""
Repository-level pytest configuration.

Why this exists:
  - Configure Loguru once for the whole test run
  - Expose the repo root to tests
  - Keep behavior explicit and discoverable

Browser choice and headless mode come from the environment
(BROWSER, CI) or config/config.yaml; nothing here overrides them.
"""

from __future__ import annotations

from pathlib import Path
from typing import Generator

import pytest

from testsuites.ui_testing.framework.log_config import init_logger


@pytest.fixture(scope="session")
def project_root() -> Path:
    """Return repo root path."""
    return Path(__file__).parent


@pytest.fixture(scope="session", autouse=True)
def _configure_logging() -> Generator[None, None, None]:
    """Set up Loguru sinks before any test runs."""
    init_logger()
    yield
