"""
================================================================================
Page Diagnostics
================================================================================

Failure diagnostics invoked when every locator of a chain has failed.

A PageDiagnostics instance is a callable hook: it logs the current URL and
title, samples candidate elements by tag and attaches the dump to the Allure
report. It never influences the outcome of a check.

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, List, Optional, Sequence, Tuple

import allure
from loguru import logger
from playwright.sync_api import Error as PlaywrightError
from playwright.sync_api import Page


# Signature of a diagnostic hook: (page, failed chain name) -> None
DiagnosticHook = Callable[[Page, str], None]


@dataclass(frozen=True)
class ElementSampler:
    """
    Describes a bounded sample of candidate elements.

    Attributes:
        tag: Tag name to query (e.g. "h4", "img", "a")
        attributes: Attributes to print; "text" means the element's inner text
        limit: Maximum number of elements to print
        keywords: When set, only elements whose text contains one of these
            (case-insensitive) are printed
    """

    tag: str
    attributes: Tuple[str, ...] = ("text", "class")
    limit: int = 5
    keywords: Tuple[str, ...] = ()

    def describe(self, index: int, element) -> str:
        parts = []
        for attribute in self.attributes:
            if attribute == "text":
                value = element.inner_text()
            else:
                value = element.get_attribute(attribute)
            parts.append(f"{attribute}: '{value}'")
        return f"{self.tag.upper()}[{index}] " + " | ".join(parts)

    def matches(self, element) -> bool:
        if not self.keywords:
            return True
        text = (element.inner_text() or "").lower()
        return any(keyword in text for keyword in self.keywords)

    def sample(self, page: Page) -> List[str]:
        elements = page.query_selector_all(self.tag)
        lines = [f"Available {self.tag} elements count: {len(elements)}"]
        shown = 0
        for index, element in enumerate(elements):
            if shown >= self.limit:
                break
            if not self.matches(element):
                continue
            lines.append(self.describe(index, element))
            shown += 1
        return lines


class PageDiagnostics:
    """
    Logs page state and sampled elements when a lookup strategy is exhausted.

    Usage:
        diagnostics = PageDiagnostics([ElementSampler("h4", limit=5)])
        diagnostics(page, "about_section")
    """

    def __init__(
        self,
        samplers: Optional[Sequence[ElementSampler]] = None,
        attach_to_allure: bool = True,
    ):
        self.samplers = list(samplers or [])
        self.attach_to_allure = attach_to_allure

    def collect(self, page: Page) -> List[str]:
        """Gather diagnostic lines; sampling errors become log lines."""
        lines = []
        try:
            lines.append(f"Current URL: {page.url}")
            lines.append(f"Page Title: {page.title()}")
            for sampler in self.samplers:
                lines.extend(sampler.sample(page))
        except PlaywrightError as e:
            lines.append(f"Error getting debug info: {e}")
        return lines

    def __call__(self, page: Page, chain_name: str) -> None:
        lines = self.collect(page)
        report = "\n".join(lines)
        logger.warning(f"Diagnostics for '{chain_name}':\n{report}")
        if self.attach_to_allure:
            allure.attach(
                report,
                name=f"diagnostics_{chain_name}",
                attachment_type=allure.attachment_type.TEXT,
            )


__all__ = [
    "DiagnosticHook",
    "ElementSampler",
    "PageDiagnostics",
]
