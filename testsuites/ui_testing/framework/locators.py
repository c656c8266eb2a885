"""
================================================================================
Locator Model
================================================================================

Immutable descriptions of how to find an element on a page.

    - Locator: one selector + strategy kind
    - LocatorChain: ordered fallback alternatives for one logical element
    - LocateResult: outcome of resolving a chain ("none matched" is a result,
      not an exception)

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterator, Optional, Tuple


class LocatorKind(str, Enum):
    """Selector engines understood by Playwright."""

    XPATH = "xpath"
    CSS = "css"
    TEXT = "text"


@dataclass(frozen=True)
class Locator:
    """
    A single way to find an element.

    Attributes:
        kind: Selector engine
        value: Raw selector expression
        description: Optional human-readable name used in logs
    """

    kind: LocatorKind
    value: str
    description: str = ""

    @classmethod
    def xpath(cls, value: str, description: str = "") -> "Locator":
        return cls(LocatorKind.XPATH, value, description)

    @classmethod
    def css(cls, value: str, description: str = "") -> "Locator":
        return cls(LocatorKind.CSS, value, description)

    @classmethod
    def text(cls, value: str, description: str = "") -> "Locator":
        return cls(LocatorKind.TEXT, value, description)

    @property
    def selector(self) -> str:
        """Playwright selector string, e.g. ``xpath=//h1``."""
        return f"{self.kind.value}={self.value}"

    def __str__(self) -> str:
        if self.description:
            return f"{self.description} ({self.kind.value}: {self.value})"
        return f"{self.kind.value}: {self.value}"


@dataclass(frozen=True)
class LocatorChain:
    """
    Ordered fallback locators for one logical element.

    The first locator is the most specific/reliable, the last the most
    permissive. Resolution stops at the first match.
    """

    name: str
    locators: Tuple[Locator, ...]

    def __post_init__(self) -> None:
        if not self.locators:
            raise ValueError(f"LocatorChain '{self.name}' needs at least one locator")

    @classmethod
    def of(cls, name: str, *locators: Locator) -> "LocatorChain":
        return cls(name, tuple(locators))

    @property
    def primary(self) -> Locator:
        return self.locators[0]

    def __iter__(self) -> Iterator[Locator]:
        return iter(self.locators)

    def __len__(self) -> int:
        return len(self.locators)


@dataclass(frozen=True)
class LocateResult:
    """
    Result of resolving a LocatorChain.

    Attributes:
        chain_name: Name of the resolved chain
        locator: The matching locator, or None when nothing matched
        attempted: Locators tried, in order
    """

    chain_name: str
    locator: Optional[Locator] = None
    attempted: Tuple[Locator, ...] = field(default_factory=tuple)

    @property
    def found(self) -> bool:
        return self.locator is not None

    @property
    def used_fallback(self) -> bool:
        return self.found and len(self.attempted) > 1

    def __bool__(self) -> bool:
        return self.found


__all__ = [
    "LocatorKind",
    "Locator",
    "LocatorChain",
    "LocateResult",
]
