import pytest
from pydantic import ValidationError
from selenium.common.exceptions import WebDriverException

from insider_e2e.core.config import Settings
from insider_e2e.core.driver import _chrome_options, configure_driver, create_driver, quit_driver


class RecordingDriver:
    def __init__(self, fail_maximize=False):
        self.fail_maximize = fail_maximize
        self.calls = []

    def maximize_window(self):
        if self.fail_maximize:
            raise WebDriverException("window manager not available")
        self.calls.append(("maximize",))

    def implicitly_wait(self, seconds):
        self.calls.append(("implicitly_wait", seconds))

    def set_page_load_timeout(self, seconds):
        self.calls.append(("page_load_timeout", seconds))

    def set_script_timeout(self, seconds):
        self.calls.append(("script_timeout", seconds))

    def quit(self):
        raise WebDriverException("session already closed")


def test_defaults_point_at_insider():
    config = Settings()

    assert config.BASE_URL == "https://useinsider.com/"
    assert config.QA_CAREERS_URL.endswith("/careers/quality-assurance/")
    assert config.IMPLICIT_WAIT == 0


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("BROWSER", "firefox")
    monkeypatch.setenv("HEADLESS", "true")
    monkeypatch.setenv("FALLBACK_TIMEOUT", "1.5")

    config = Settings()

    assert config.BROWSER == "firefox"
    assert config.HEADLESS is True
    assert config.FALLBACK_TIMEOUT == 1.5


def test_settings_are_frozen():
    config = Settings()

    with pytest.raises(ValidationError):
        config.BROWSER = "safari"


def test_unsupported_browser():
    with pytest.raises(ValueError, match="Browser not supported: safari"):
        create_driver(Settings(BROWSER="safari"))


def test_configure_driver_applies_timeouts():
    driver = RecordingDriver()

    configure_driver(driver, Settings(HEADLESS=False, PAGE_LOAD_TIMEOUT=20, SCRIPT_TIMEOUT=5))

    assert driver.calls == [
        ("maximize",),
        ("implicitly_wait", 0),
        ("page_load_timeout", 20),
        ("script_timeout", 5),
    ]


def test_headless_driver_is_not_maximized():
    driver = RecordingDriver()

    configure_driver(driver, Settings(HEADLESS=True))

    assert ("maximize",) not in driver.calls


def test_maximize_failure_does_not_abort_setup():
    driver = RecordingDriver(fail_maximize=True)

    configure_driver(driver, Settings(HEADLESS=False))

    assert driver.calls[0] == ("implicitly_wait", 0)


def test_headless_chrome_options():
    options = _chrome_options(Settings(HEADLESS=True, WINDOW_SIZE="1280,800"))

    assert "--headless=new" in options.arguments
    assert "--window-size=1280,800" in options.arguments


def test_quit_driver_tolerates_dead_sessions():
    quit_driver(None)
    quit_driver(RecordingDriver())
