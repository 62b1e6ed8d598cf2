"""
Shared pytest fixtures
FakeDriver / FakeElement serve registered locators so page objects can be
exercised without a browser; the live driver fixture runs the real site.
"""
import logging

import pytest
from selenium.common.exceptions import NoSuchElementException, NoSuchWindowException

from insider_e2e.core.config import settings
from insider_e2e.core.driver import create_driver, quit_driver
from insider_e2e.services.page_utils import capture_screenshot
from insider_e2e.services.selector_config import to_locator

PNG_BYTES = b"\x89PNG\r\n\x1a\n"


class FakeElement:
    """Stand-in for a Selenium WebElement"""

    def __init__(self, text="", displayed=True, enabled=True, attributes=None, inner_html=None, on_click=None):
        self.text = text
        self.displayed = displayed
        self.enabled = enabled
        self.attributes = dict(attributes or {})
        self.inner_html = inner_html
        self.on_click = on_click
        self.children = {}
        self.clicks = 0
        self.typed = []

    def add(self, selector, *elements):
        self.children.setdefault(to_locator(selector), []).extend(elements)
        return elements[0] if elements else None

    def is_displayed(self):
        return self.displayed

    def is_enabled(self):
        return self.enabled

    def click(self):
        self.clicks += 1
        if self.on_click:
            self.on_click()

    def clear(self):
        self.typed = []

    def send_keys(self, *keys):
        self.typed.extend(keys)

    def get_attribute(self, name):
        if name == "innerHTML" and self.inner_html is not None:
            return self.inner_html
        return self.attributes.get(name)

    def find_element(self, by, value):
        found = self.children.get((by, value))
        if not found:
            raise NoSuchElementException(f"No child for {by}={value}")
        return found[0]

    def find_elements(self, by, value):
        return list(self.children.get((by, value), []))


class FakeSwitchTo:
    def __init__(self, driver):
        self._driver = driver

    def window(self, handle):
        if handle not in self._driver.window_handles:
            raise NoSuchWindowException(f"No window {handle}")
        self._driver.current_window_handle = handle
        self._driver.current_url = self._driver.window_urls.get(handle, self._driver.current_url)


class FakeDriver:
    """Stand-in for a Selenium WebDriver with a registry of locator -> elements"""

    def __init__(self, current_url="about:blank", title="", page_source="<html><body></body></html>"):
        self.current_url = current_url
        self.title = title
        self.page_source = page_source
        self.elements = {}
        self.visited = []
        self.scripts = []
        self.js_clicked = []
        self.routes = {}
        self.window_handles = ["main"]
        self.window_urls = {}
        self.current_window_handle = "main"
        self.closed_windows = []
        self.switch_to = FakeSwitchTo(self)
        self.refreshed = 0
        self.quit_called = False

    def add(self, selector, *elements):
        self.elements.setdefault(to_locator(selector), []).extend(elements)
        return elements[0] if elements else None

    def remove(self, selector):
        self.elements.pop(to_locator(selector), None)

    def route(self, url, title="", page_source=None, on_load=None):
        self.routes[url] = {"title": title, "page_source": page_source, "on_load": on_load}

    def find_element(self, by, value):
        found = self.elements.get((by, value))
        if not found:
            raise NoSuchElementException(f"No element for {by}={value}")
        return found[0]

    def find_elements(self, by, value):
        return list(self.elements.get((by, value), []))

    def get(self, url):
        self.visited.append(url)
        self.current_url = url
        route = self.routes.get(url)
        if route:
            self.title = route["title"]
            if route["page_source"] is not None:
                self.page_source = route["page_source"]
            if route["on_load"]:
                route["on_load"](self)

    def refresh(self):
        self.refreshed += 1

    def execute_script(self, script, *args):
        self.scripts.append(script)
        if "document.readyState" in script:
            return "complete"
        if "jQuery" in script:
            return False
        if "arguments[0].click()" in script and args:
            self.js_clicked.append(args[0])
        return None

    def open_window(self, handle, url):
        self.window_handles.append(handle)
        self.window_urls[handle] = url

    def close(self):
        handle = self.current_window_handle
        self.window_handles.remove(handle)
        self.closed_windows.append(handle)

    def save_screenshot(self, path):
        with open(path, "wb") as f:
            f.write(PNG_BYTES)
        return True

    def quit(self):
        self.quit_called = True


# Fast waits for page objects driven by FakeDriver
PAGE_TIMEOUTS = {"timeout": 0.05, "fallback_timeout": 0.02, "poll_frequency": 0.01}


@pytest.fixture
def fake_driver():
    return FakeDriver()


@pytest.fixture(autouse=True)
def offline_page_objects(request, monkeypatch):
    """Skip fixed sleeps and native mouse actions outside the live scenarios"""
    if request.node.get_closest_marker("live"):
        return

    from insider_e2e.pages import base_page, home_page, qa_jobs_page, lever_application_page

    for module in (base_page, home_page, qa_jobs_page, lever_application_page):
        monkeypatch.setattr(module, "smart_wait", lambda seconds: None)

    def record_hover(self, element):
        self.driver.scripts.append(("hover", element))

    monkeypatch.setattr(base_page.BasePage, "hover_over_element", record_hover)


# ----------------------------------------------------------------------
# Live scenarios
# ----------------------------------------------------------------------

def pytest_configure(config):
    logging.getLogger("insider_e2e").setLevel(settings.LOG_LEVEL.upper())


def pytest_addoption(parser):
    parser.addoption("--run-live", action="store_true", default=False,
                     help="Run the scenarios against the live website")


def pytest_collection_modifyitems(config, items):
    if config.getoption("--run-live") or settings.RUN_LIVE:
        return
    skip_live = pytest.mark.skip(reason="live website scenario, use --run-live or RUN_LIVE=true")
    for item in items:
        if "live" in item.keywords:
            item.add_marker(skip_live)


@pytest.hookimpl(hookwrapper=True)
def pytest_runtest_makereport(item, call):
    outcome = yield
    report = outcome.get_result()
    setattr(item, f"rep_{report.when}", report)


@pytest.fixture
def driver(request):
    """Real browser for one test; screenshot on failure, always quit"""
    browser = create_driver()
    yield browser

    report = getattr(request.node, "rep_call", None)
    if report is not None and report.failed:
        capture_screenshot(browser, request.node.name)
    quit_driver(browser)
