"""
================================================================================
UI Testing Framework
================================================================================

Playwright-based (sync API) UI automation framework for the movie booking site.

Components:
    - browser_manager: Browser session lifecycle (chrome / firefox / edge)
    - smart_locator: Retry and fallback element location
    - page_base: Base page object (checks, clicks, page-load quorum)
    - diagnostics: Failure diagnostics hook
    - locators / wait_policy: Locator model and wait configuration
    - config_loader / log_config: Configuration and logging

Author: Automation Team
License: MIT
================================================================================
"""

from .browser_manager import BrowserManager, BrowserSession, BrowserStartupError
from .config_loader import ConfigLoader, ConfigurationError
from .diagnostics import ElementSampler, PageDiagnostics
from .locators import Locator, LocatorChain, LocatorKind, LocateResult
from .log_config import init_logger
from .page_base import BasePage, NavigationError
from .smart_locator import SmartLocator
from .wait_policy import WaitPolicy

__all__ = [
    "BasePage",
    "BrowserManager",
    "BrowserSession",
    "BrowserStartupError",
    "ConfigLoader",
    "ConfigurationError",
    "ElementSampler",
    "Locator",
    "LocatorChain",
    "LocatorKind",
    "LocateResult",
    "NavigationError",
    "PageDiagnostics",
    "SmartLocator",
    "WaitPolicy",
    "init_logger",
]
