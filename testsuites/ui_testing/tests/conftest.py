"""
================================================================================
UI Testing Pytest Configuration
================================================================================

Fixtures for browser management, page objects and failure capture.

Key Features:
- One browser session per test session (BrowserManager owns it)
- Local HTML fixtures of the movie site (no network needed)
- Short wait policy so negative checks finish quickly
- Screenshot capture on failure (attached to Allure)

UI tests are skipped when no browser can be started on this machine
(run `playwright install chromium` first).

================================================================================
"""

from pathlib import Path
from typing import Callable, Generator

import allure
import pytest
from loguru import logger
from playwright.sync_api import Error as PlaywrightError

from testsuites.ui_testing.framework.browser_manager import (
    BrowserManager,
    BrowserSession,
    BrowserStartupError,
)
from testsuites.ui_testing.framework.wait_policy import WaitPolicy
from testsuites.ui_testing.pages.movie_page import MoviePage


FIXTURES_DIR = Path(__file__).parent.parent / "fixtures"


# ================================================================================
# Browser Fixtures
# ================================================================================

@pytest.fixture(scope="session")
def browser_manager() -> Generator[BrowserManager, None, None]:
    """
    Session-scoped browser manager.

    Headless is forced so local runs behave like CI.
    """
    manager = BrowserManager(headless=True)
    yield manager
    manager.release()


@pytest.fixture
def session(browser_manager: BrowserManager) -> BrowserSession:
    """
    The manager's live session; skips UI tests when no browser is installed.

    Function-scoped so a test that released the session gets a fresh one.
    Only one Playwright driver runs at a time.
    """
    try:
        return browser_manager.acquire()
    except BrowserStartupError as e:
        pytest.skip(f"Browser unavailable: {e}")


@pytest.fixture
def fast_policy() -> WaitPolicy:
    """Wait policy with short timeouts for fixture pages."""
    return WaitPolicy(
        timeout_ms=1500,
        retry_delay_seconds=0.2,
        max_retries=3,
        page_settle_seconds=0.2,
    )


# ================================================================================
# Page Object Fixtures
# ================================================================================

@pytest.fixture
def fixture_url() -> Callable[[str], str]:
    """Build a file:// URL for a local HTML fixture."""
    def _url(name: str) -> str:
        return (FIXTURES_DIR / name).resolve().as_uri()
    return _url


@pytest.fixture
def movie_page(session: BrowserSession, fast_policy: WaitPolicy) -> MoviePage:
    """MoviePage bound to the shared session, base URL pointing at fixtures."""
    return MoviePage(
        session.page,
        base_url=FIXTURES_DIR.resolve().as_uri(),
        policy=fast_policy,
    )


# ================================================================================
# Test Lifecycle Hooks
# ================================================================================

@pytest.hookimpl(hookwrapper=True)
def pytest_runtest_makereport(item, call):
    """Attach a screenshot to the Allure report when a UI test fails."""
    outcome = yield
    report = outcome.get_result()

    if report.when == "call" and report.failed:
        session = getattr(item, "funcargs", {}).get("session")
        if session is not None and not session.closed:
            try:
                allure.attach(
                    session.page.screenshot(full_page=True),
                    name="failure_screenshot",
                    attachment_type=allure.attachment_type.PNG,
                )
            except PlaywrightError as e:
                logger.warning(f"Failed to capture screenshot on failure: {e}")
