"""
================================================================================
Smart Locator
================================================================================

Resilient element location:
    - Presence polling with bounded retry and fixed backoff
    - Single-attempt presence + visibility checks
    - Ordered fallback chains for pages with unstable (auto-generated) markup
    - Locator health analytics (which chains needed a fallback)

A failed lookup is a negative result, never an exception.

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Optional

from loguru import logger
from playwright.sync_api import ElementHandle, Page
from playwright.sync_api import TimeoutError as PlaywrightTimeoutError

from .locators import Locator, LocatorChain, LocateResult
from .wait_policy import WaitPolicy


@dataclass
class LocatorHealth:
    """
    Tracks locator health and usage statistics.

    Attributes:
        chain_name: Logical element name
        primary: The preferred locator
        used_fallback: Whether a fallback was used
        matched: The locator that finally matched
    """
    chain_name: str
    primary: Locator
    used_fallback: bool = False
    matched: Optional[Locator] = None


class SmartLocator:
    """
    Element locator with retry and fallback strategies.

    Usage:
        >>> smart = SmartLocator(page, WaitPolicy())
        >>> handle = smart.resolve_element(Locator.xpath("//h1"), max_retries=3)
        >>> smart.first_visible(about_chain).found
        True
    """

    def __init__(self, page: Page, policy: Optional[WaitPolicy] = None):
        self.page = page
        self.policy = policy or WaitPolicy()
        self._health_records: List[LocatorHealth] = []
        self._fallback_used: Dict[str, LocatorHealth] = {}

    def resolve_element(
        self,
        locator: Locator,
        max_retries: Optional[int] = None,
    ) -> Optional[ElementHandle]:
        """
        Poll for the element's presence, retrying with a fixed backoff.

        Args:
            locator: Element to find
            max_retries: Number of attempts (default: policy.max_retries)

        Returns:
            The first located element handle, or None after all attempts
            failed or the wait was cancelled
        """
        attempts = self.policy.max_retries if max_retries is None else max_retries
        last_error: Optional[Exception] = None
        made = 0

        for attempt in range(attempts):
            made = attempt + 1
            try:
                handle = self.page.wait_for_selector(
                    locator.selector,
                    state="attached",
                    timeout=self.policy.timeout_ms,
                )
                if handle is not None:
                    if attempt:
                        logger.debug(f"Found {locator} on attempt {attempt + 1}/{attempts}")
                    return handle
            except PlaywrightTimeoutError as e:
                last_error = e

            if attempt < attempts - 1:
                logger.debug(
                    f"Attempt {attempt + 1}/{attempts} failed for {locator}. "
                    f"Retrying in {self.policy.retry_delay_seconds}s..."
                )
                if not self.policy.pause(self.policy.retry_delay_seconds):
                    break

        if made < attempts:
            logger.warning(f"Lookup cancelled after {made}/{attempts} attempts: {locator}")
        else:
            logger.warning(f"Failed to find element after {made} attempts: {locator}")
        if last_error is not None:
            logger.debug(f"Last error for {locator}: {str(last_error)[:200]}")
        return None

    def is_displayed(self, locator: Locator) -> bool:
        """
        Single-attempt presence + visibility check within the wait timeout.

        Returns:
            True if the element is present and visible, False otherwise
        """
        try:
            handle = self.page.wait_for_selector(
                locator.selector,
                state="attached",
                timeout=self.policy.timeout_ms,
            )
        except PlaywrightTimeoutError:
            logger.info(f"Element not found or not displayed: {locator}")
            return False

        if handle is None or not handle.is_visible():
            logger.info(f"Element not found or not displayed: {locator}")
            return False
        return True

    def first_visible(self, chain: LocatorChain) -> LocateResult:
        """
        Try each locator of the chain in order, stopping at the first visible.

        Returns:
            LocateResult with the matching locator, or with locator=None when
            every alternative failed
        """
        attempted = []
        for locator in chain:
            attempted.append(locator)
            if self.is_displayed(locator):
                result = LocateResult(chain.name, locator, tuple(attempted))
                self._record(chain, result)
                logger.info(f"Found '{chain.name}' with locator: {locator}")
                return result
            logger.info(f"Locator failed: {locator}")

        logger.warning(
            f"All {len(chain)} locators failed for '{chain.name}':\n"
            + "\n".join(f"  - {locator}" for locator in attempted)
        )
        return LocateResult(chain.name, None, tuple(attempted))

    def _record(self, chain: LocatorChain, result: LocateResult) -> None:
        health = LocatorHealth(
            chain_name=chain.name,
            primary=chain.primary,
            used_fallback=result.used_fallback,
            matched=result.locator,
        )
        self._health_records.append(health)
        if health.used_fallback:
            logger.warning(f"Element '{chain.name}' used fallback: {result.locator}")
            self._fallback_used[chain.name] = health

    @property
    def health_records(self) -> List[LocatorHealth]:
        return list(self._health_records)

    def get_health_report(self) -> str:
        """
        Generate locator health report.

        Lists chains whose primary locator failed (maintenance candidates).
        """
        if not self._fallback_used:
            return "All elements used primary locators. No maintenance needed."

        report_lines = [
            "Locator Health Report - Fallbacks Used:",
            "",
            "The following elements used fallback locators.",
            "Consider updating the primary selectors:",
            "",
        ]

        for chain_name, health in self._fallback_used.items():
            report_lines.extend([
                f"  [{chain_name}]",
                f"    Failed primary: {health.primary}",
                f"    Used: {health.matched}",
                "",
            ])

        return "\n".join(report_lines)


__all__ = [
    "SmartLocator",
    "LocatorHealth",
]
