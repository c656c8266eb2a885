"""
================================================================================
Browser Manager
================================================================================

Browser lifecycle management for UI automation.

Features:
    - Lazily created, memoized browser session (one per manager)
    - Browser selection: chrome, firefox, edge (config / BROWSER fallback)
    - Headless presets when running in CI (CI=true), maximized window otherwise
    - Explicit release; startup failures are fatal and never retried

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Tuple

from loguru import logger
from playwright.sync_api import (
    Browser,
    BrowserContext,
    Page,
    Playwright,
    sync_playwright,
)
from playwright.sync_api import Error as PlaywrightError

from .config_loader import ConfigLoader


SUPPORTED_BROWSERS = ("chrome", "firefox", "edge")
DEFAULT_BROWSER = "chrome"

HEADLESS_VIEWPORT: Dict[str, int] = {"width": 1920, "height": 1080}

# Chromium-family flags for containerized CI agents
CHROMIUM_HEADLESS_ARGS = [
    "--no-sandbox",
    "--disable-dev-shm-usage",
    "--disable-gpu",
    "--window-size=1920,1080",
]


class BrowserStartupError(RuntimeError):
    """Raised when the browser or its driver cannot be started."""
    pass


def is_ci_environment() -> bool:
    """True when the CI environment variable is 'true' (any case)."""
    return os.getenv("CI", "").strip().lower() == "true"


def resolve_browser_name(
    choice: Optional[str] = None,
    configured: Optional[str] = None,
) -> str:
    """
    Pick the browser to launch.

    Args:
        choice: Explicit browser name; None or empty falls back to `configured`
        configured: Configured browser name; None or empty falls back to chrome

    Returns:
        One of SUPPORTED_BROWSERS (unknown names resolve to chrome)
    """
    name = (choice or "").strip() or (configured or "").strip() or DEFAULT_BROWSER
    name = name.lower()
    if name not in SUPPORTED_BROWSERS:
        logger.warning(f"Unsupported browser '{name}', using {DEFAULT_BROWSER}")
        return DEFAULT_BROWSER
    return name


def build_launch_options(
    browser_name: str,
    headless: bool,
    chrome_channel: Optional[str] = None,
) -> Tuple[str, Dict[str, Any], Dict[str, Any]]:
    """
    Translate a browser name into Playwright launch and context options.

    Returns:
        (Playwright browser type attribute, launch kwargs, context kwargs)
    """
    if browser_name == "firefox":
        engine = "firefox"
        launch_options: Dict[str, Any] = {"headless": headless}
    else:
        engine = "chromium"
        launch_options = {"headless": headless}
        channel = "msedge" if browser_name == "edge" else chrome_channel
        if channel:
            launch_options["channel"] = channel
        launch_options["args"] = (
            list(CHROMIUM_HEADLESS_ARGS) if headless else ["--start-maximized"]
        )

    if headless:
        context_options: Dict[str, Any] = {"viewport": dict(HEADLESS_VIEWPORT)}
    else:
        # Let the maximized window decide the viewport size
        context_options = {"no_viewport": True}

    return engine, launch_options, context_options


@dataclass
class BrowserSession:
    """
    Handle to one running browser instance and its page.

    Owned by a BrowserManager; use `BrowserManager.release()` to dispose it.
    """

    browser_name: str
    headless: bool
    page: Page
    _playwright: Playwright = field(repr=False)
    _browser: Browser = field(repr=False)
    _context: BrowserContext = field(repr=False)
    closed: bool = False

    @property
    def browser(self) -> Browser:
        return self._browser

    def is_connected(self) -> bool:
        """True while the browser process is still reachable."""
        return not self.closed and self._browser.is_connected()

    def goto(self, url: str, wait_until: str = "load") -> None:
        """Navigate the session's page."""
        logger.debug(f"Navigating to: {url}")
        self.page.goto(url, wait_until=wait_until)

    def close(self) -> None:
        """
        Close context, browser and the Playwright driver.

        Every step runs even if an earlier one fails (e.g. after a browser
        crash); such failures are logged, not raised.
        """
        if self.closed:
            return
        try:
            for step, closer in (("context", self._context.close), ("browser", self._browser.close)):
                try:
                    closer()
                except PlaywrightError as e:
                    logger.warning(f"Failed to close {step} of {self.browser_name}: {e}")
        finally:
            self._playwright.stop()
            self.closed = True
        logger.debug(f"Browser closed: {self.browser_name}")


class BrowserManager:
    """
    Creates and owns a single browser session.

    `acquire()` launches the browser on first use and returns the same
    session until `release()` is called. This is memoization, not a pool.

    Usage:
        with BrowserManager() as manager:
            session = manager.acquire("firefox")
            session.goto("https://example.com")
    """

    def __init__(
        self,
        config: Optional[ConfigLoader] = None,
        headless: Optional[bool] = None,
    ):
        """
        Args:
            config: Configuration source (default: ConfigLoader singleton)
            headless: Force headless mode; None means detect CI
        """
        self.config = config or ConfigLoader()
        self._headless = headless
        self._session: Optional[BrowserSession] = None

    def __enter__(self) -> "BrowserManager":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.release()

    @property
    def headless(self) -> bool:
        return is_ci_environment() if self._headless is None else self._headless

    @property
    def session(self) -> Optional[BrowserSession]:
        return self._session

    def acquire(self, browser_choice: Optional[str] = None) -> BrowserSession:
        """
        Return the live session, starting a browser if there is none.

        Args:
            browser_choice: chrome, firefox or edge (case-insensitive);
                None/empty uses the configured `browser` value

        Raises:
            BrowserStartupError: If the browser cannot be started
        """
        if self._session is not None:
            return self._session

        browser_name = resolve_browser_name(browser_choice, self.config.get("browser"))
        headless = self.headless
        engine, launch_options, context_options = build_launch_options(
            browser_name,
            headless,
            chrome_channel=self.config.get("ui.chrome_channel"),
        )

        try:
            playwright = sync_playwright().start()
        except PlaywrightError as e:
            raise BrowserStartupError(f"Failed to start Playwright driver: {e}") from e

        try:
            browser = getattr(playwright, engine).launch(**launch_options)
            context = browser.new_context(**context_options)
            page = context.new_page()
        except PlaywrightError as e:
            playwright.stop()
            raise BrowserStartupError(
                f"Failed to start {browser_name} (headless={headless}): {e}"
            ) from e

        page.set_default_timeout(int(self.config.get("ui.default_timeout_ms", 10000)))

        self._session = BrowserSession(
            browser_name=browser_name,
            headless=headless,
            page=page,
            _playwright=playwright,
            _browser=browser,
            _context=context,
        )
        logger.info(f"Browser started: {browser_name} (headless={headless})")
        return self._session

    def release(self) -> None:
        """Terminate the active session; no-op if there is none."""
        if self._session is None:
            return
        session, self._session = self._session, None
        session.close()
        logger.info(f"Browser session released: {session.browser_name}")


__all__ = [
    "BrowserManager",
    "BrowserSession",
    "BrowserStartupError",
    "SUPPORTED_BROWSERS",
    "build_launch_options",
    "is_ci_environment",
    "resolve_browser_name",
]
