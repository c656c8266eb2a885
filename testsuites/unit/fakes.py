"""
Fake Playwright objects for unit tests.

FakePage answers selector lookups from an in-memory table; a selector can be
made to appear only after N polls. FakePlaywright stands in for
`sync_playwright().start()` and records launch/context options.
"""

from typing import Dict, List, Optional

from playwright.sync_api import Error as PlaywrightError
from playwright.sync_api import TimeoutError as PlaywrightTimeoutError


class FakeElement:
    def __init__(self, text="", attributes=None, visible=True, enabled=True):
        self.text = text
        self.attributes = attributes or {}
        self.visible = visible
        self.enabled = enabled
        self.clicks = 0

    def is_visible(self):
        return self.visible

    def is_enabled(self):
        return self.enabled

    def inner_text(self):
        return self.text

    def get_attribute(self, name):
        return self.attributes.get(name)

    def click(self, timeout=None):
        if not (self.visible and self.enabled):
            raise PlaywrightTimeoutError(f"Timeout {timeout}ms exceeded waiting for element to be clickable")
        self.clicks += 1


class FakePage:
    def __init__(self, url="https://movies.example.test/explore/movies", title="Movies"):
        self.url = url
        self._title = title
        self.elements: Dict[str, List[FakeElement]] = {}
        self.appear_after: Dict[str, int] = {}
        self.polls: List[str] = []
        self.clicked: List[str] = []
        self.default_timeout: Optional[int] = None
        self.fail_title = False
        self.load_state_error: Optional[Exception] = None

    def add(self, selector, *elements, appear_after=0):
        """Register elements for a selector (Locator or raw string)."""
        key = getattr(selector, "selector", selector)
        self.elements.setdefault(key, []).extend(elements or [FakeElement()])
        self.appear_after[key] = appear_after
        return self

    def poll_count(self, selector) -> int:
        return self.polls.count(getattr(selector, "selector", selector))

    def wait_for_selector(self, selector, state="visible", timeout=None):
        self.polls.append(selector)
        found = self.elements.get(selector)
        if not found or self.polls.count(selector) <= self.appear_after.get(selector, 0):
            raise PlaywrightTimeoutError(f"Timeout {timeout}ms exceeded waiting for {selector}")
        return found[0]

    def query_selector_all(self, selector):
        return list(self.elements.get(selector, []))

    def click(self, selector, timeout=None):
        found = self.elements.get(selector)
        if not found or not (found[0].visible and found[0].enabled):
            raise PlaywrightTimeoutError(f"Timeout {timeout}ms exceeded waiting for {selector}")
        found[0].click(timeout=timeout)
        self.clicked.append(selector)

    def wait_for_load_state(self, state="load", timeout=None):
        if self.load_state_error is not None:
            raise self.load_state_error

    def goto(self, url, wait_until=None):
        self.url = url

    def title(self):
        if self.fail_title:
            raise PlaywrightError("Target page, context or browser has been closed")
        return self._title

    def set_default_timeout(self, timeout):
        self.default_timeout = timeout


class FakeContext:
    def __init__(self, options):
        self.options = options
        self.page = FakePage()
        self.closed = False

    def new_page(self):
        return self.page

    def close(self):
        self.closed = True


class FakeBrowser:
    def __init__(self):
        self.contexts: List[FakeContext] = []
        self.closed = False

    def new_context(self, **options):
        context = FakeContext(options)
        self.contexts.append(context)
        return context

    def close(self):
        self.closed = True

    def is_connected(self):
        return not self.closed


class FakeBrowserType:
    def __init__(self, name, error: Optional[Exception] = None):
        self.name = name
        self.error = error
        self.launches: List[dict] = []
        self.browsers: List[FakeBrowser] = []

    def launch(self, **options):
        self.launches.append(options)
        if self.error is not None:
            raise self.error
        browser = FakeBrowser()
        self.browsers.append(browser)
        return browser


class FakePlaywright:
    def __init__(self, launch_error: Optional[Exception] = None):
        self.chromium = FakeBrowserType("chromium", launch_error)
        self.firefox = FakeBrowserType("firefox", launch_error)
        self.stopped = False

    def stop(self):
        self.stopped = True


class FakePlaywrightFactory:
    """Replacement for `sync_playwright`: each call starts a new FakePlaywright."""

    def __init__(self, launch_error: Optional[Exception] = None):
        self.launch_error = launch_error
        self.started: List[FakePlaywright] = []

    def __call__(self):
        return self

    def start(self):
        playwright = FakePlaywright(self.launch_error)
        self.started.append(playwright)
        return playwright


class DummyConfig:
    def __init__(self, data=None):
        self.data = data or {}

    def get(self, key, default=None):
        return self.data.get(key, default)
