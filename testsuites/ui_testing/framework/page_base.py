"""
================================================================================
Base Page Object
================================================================================

Foundation class for Page Object Model implementation.

Provides:
    - Navigation relative to the configured base URL
    - Retry-wrapped element resolution and visibility checks
    - Ordered fallback locator chains with a pluggable diagnostic hook
    - Page-load confirmation by a quorum of independent indicators
    - Clicks that fail loudly with the offending locator

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

from itertools import combinations
from typing import Callable, Dict, Iterable, Optional, Sequence, Tuple

import allure
from loguru import logger
from playwright.sync_api import ElementHandle, Page
from playwright.sync_api import TimeoutError as PlaywrightTimeoutError

from .config_loader import ConfigLoader
from .diagnostics import DiagnosticHook, PageDiagnostics
from .locators import Locator, LocatorChain
from .smart_locator import SmartLocator
from .wait_policy import WaitPolicy


class NavigationError(RuntimeError):
    """Raised when a navigation step's target never becomes interactable."""

    def __init__(self, message: str, locator: Optional[Locator] = None):
        super().__init__(message)
        self.locator = locator


class BasePage:
    """
    Base class for all page objects.

    A page object holds the session's Playwright page, a WaitPolicy and a
    diagnostic hook. Only one page object should drive a page at a time.

    Usage:
        class MoviePage(BasePage):
            URL_PATH = "/explore/movies"

            def is_title_displayed(self) -> bool:
                return self.is_displayed(Locator.xpath("//h1"))
    """

    # Override in subclasses
    URL_PATH: str = "/"

    def __init__(
        self,
        page: Page,
        base_url: str = "",
        policy: Optional[WaitPolicy] = None,
        diagnostics: Optional[DiagnosticHook] = None,
    ):
        """
        Initialize page object.

        Args:
            page: Playwright Page object (usually `session.page`)
            base_url: Base URL for the application (default: ui.base_url)
            policy: Wait configuration (default: from ConfigLoader)
            diagnostics: Hook run when a fallback chain finds nothing
        """
        self.page = page
        if not base_url:
            base_url = ConfigLoader().get("ui.base_url", "https://in.bookmyshow.com")
        self.base_url = base_url.rstrip("/")
        self.policy = policy or WaitPolicy.from_config()
        self.diagnostics = diagnostics or PageDiagnostics()
        self.smart = SmartLocator(page, self.policy)

    @property
    def url(self) -> str:
        """Get full page URL."""
        return f"{self.base_url}{self.URL_PATH}"

    def navigate(self, wait_for: str = "load") -> None:
        """
        Navigate to this page.

        Args:
            wait_for: Wait condition - 'load', 'domcontentloaded', 'networkidle'
        """
        self.navigate_to_url(self.url, wait_for=wait_for)

    def navigate_to_url(self, url: str, wait_for: str = "load") -> None:
        """Navigate to an absolute URL (fixtures, deep links)."""
        with allure.step(f"Navigate to {url}"):
            self.page.goto(url, wait_until=wait_for)
            logger.debug(f"Navigated to: {url}")

    # =========================================================================
    # Element Resolution
    # =========================================================================

    def resolve_element(
        self,
        locator: Locator,
        max_retries: Optional[int] = None,
    ) -> Optional[ElementHandle]:
        """Find an element with retry; None when it never appears."""
        return self.smart.resolve_element(locator, max_retries)

    def is_displayed(self, locator: Locator) -> bool:
        """True if the element is present and visible within the wait timeout."""
        return self.smart.is_displayed(locator)

    def is_displayed_any_of(
        self,
        chain: LocatorChain,
        diagnostics: Optional[DiagnosticHook] = None,
    ) -> bool:
        """
        Try each fallback locator in order, stopping at the first visible one.

        When every locator fails the diagnostic hook is run and False returned.

        Args:
            chain: Ordered alternatives, most specific first
            diagnostics: Hook overriding the page's default for this chain
        """
        logger.info(f"Searching for '{chain.name}'...")
        result = self.smart.first_visible(chain)
        if result:
            return True

        hook = diagnostics or self.diagnostics
        hook(self.page, chain.name)
        return False

    def is_page_loaded_by_quorum(
        self,
        checks: Dict[str, Callable[[], bool]],
        pairs: Optional[Iterable[Tuple[str, str]]] = None,
    ) -> bool:
        """
        Confirm a page by independent indicators agreeing in pairs.

        Waits the policy's settle delay, evaluates every check, then returns
        True if both checks of any pair passed.

        Args:
            checks: Indicator name -> zero-argument check, in priority order
            pairs: Pairs of indicator names that confirm the page
                (default: every 2-combination of `checks`)

        Returns:
            False if no pair is satisfied or the settle wait was interrupted
        """
        if not self.policy.pause(self.policy.page_settle_seconds):
            return False

        results = {name: bool(check()) for name, check in checks.items()}

        logger.info(f"{self.__class__.__name__} page check:")
        for name, passed in results.items():
            logger.info(f"  Has {name}: {passed}")

        pairs = list(pairs) if pairs is not None else list(combinations(results, 2))
        return any(results[first] and results[second] for first, second in pairs)

    # =========================================================================
    # Actions
    # =========================================================================

    def click(self, locator: Locator, settle_seconds: float = 0) -> None:
        """
        Click once the element is visible and enabled.

        Args:
            locator: Element to click
            settle_seconds: Extra delay after the click for page transitions

        Raises:
            NavigationError: If the element does not become clickable in time
        """
        with allure.step(f"Click: {locator}"):
            try:
                self.page.click(locator.selector, timeout=self.policy.timeout_ms)
            except PlaywrightTimeoutError as e:
                logger.error(f"Element never became clickable: {locator}")
                self.diagnostics(self.page, locator.description or locator.value)
                raise NavigationError(f"Failed to click {locator}", locator) from e

            if settle_seconds:
                self.policy.pause(settle_seconds)

    def click_first(self, locator: Locator, settle_seconds: float = 0) -> None:
        """
        Click the first of possibly many matching elements.

        Raises:
            NavigationError: If no element matches or it is not clickable
        """
        with allure.step(f"Click first: {locator}"):
            try:
                self.page.wait_for_selector(
                    locator.selector,
                    state="attached",
                    timeout=self.policy.timeout_ms,
                )
            except PlaywrightTimeoutError as e:
                raise NavigationError(
                    f"Failed to find {locator} within timeout period", locator
                ) from e

            elements: Sequence[ElementHandle] = self.page.query_selector_all(locator.selector)
            if not elements:
                raise NavigationError(f"No elements found for {locator}", locator)

            logger.info(f"Clicking first of {len(elements)} elements: {locator}")
            try:
                elements[0].click(timeout=self.policy.timeout_ms)
            except PlaywrightTimeoutError as e:
                raise NavigationError(f"Failed to click {locator}", locator) from e

            if settle_seconds:
                self.policy.pause(settle_seconds)

    # =========================================================================
    # Debug Utilities
    # =========================================================================

    def get_locator_health_report(self) -> str:
        """Get smart locator health report."""
        return self.smart.get_health_report()


__all__ = [
    "BasePage",
    "NavigationError",
]
