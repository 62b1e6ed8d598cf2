import os

from selenium.common.exceptions import WebDriverException

from insider_e2e.core.config import Settings
from insider_e2e.services import page_utils
from insider_e2e.services.page_utils import (
    capture_screenshot,
    clean_text,
    fold_text,
    get_element_text,
    get_page_text,
    html_to_lines,
    screenshot_filename,
    wait_for_js_to_load,
    wait_for_page_load,
)

from conftest import FakeDriver, FakeElement, PNG_BYTES


def test_clean_text():
    assert clean_text("  Quality \n  Assurance\t") == "Quality Assurance"
    assert clean_text(None) == ""


def test_html_to_lines_skips_scripts_and_blank_lines():
    html = "<div><h3>QA Engineer</h3>\n\n<span>Istanbul,   Turkiye</span><script>track()</script></div>"

    assert html_to_lines(html) == "QA Engineer\nIstanbul, Turkiye"
    assert html_to_lines("") == ""


def test_element_text_prefers_rendered_text():
    element = FakeElement("  QA Engineer ", inner_html="<p>Hidden</p>")

    assert get_element_text(element) == "QA Engineer"


def test_element_text_falls_back_to_inner_html():
    element = FakeElement("", inner_html="<p>QA Engineer</p><p>Quality Assurance</p>")

    assert get_element_text(element) == "QA Engineer\nQuality Assurance"


def test_element_text_on_stale_element():
    class StaleElement:
        @property
        def text(self):
            raise WebDriverException("stale element reference")

    assert get_element_text(StaleElement()) == ""


def test_page_text_from_source():
    driver = FakeDriver(page_source="<html><body><h1>Careers</h1><style>h1{}</style></body></html>")

    assert get_page_text(driver) == "Careers"


def test_page_load_waits():
    driver = FakeDriver()

    assert wait_for_page_load(driver, timeout=0.1) is True
    # FakeDriver has no jQuery
    assert wait_for_js_to_load(driver, timeout=0.01) is False


def test_screenshot_filename_is_filesystem_safe():
    name = screenshot_filename("test_qa[Istanbul, Turkey]")

    assert name.startswith("test_qa_Istanbul_Turkey_")
    assert name.endswith(".png")


def test_capture_screenshot_writes_png(tmp_path):
    directory = tmp_path / "shots"

    path = capture_screenshot(FakeDriver(), "test_home_page", str(directory))

    assert path is not None
    assert os.path.isabs(path)
    assert os.path.dirname(path) == str(directory)
    with open(path, "rb") as f:
        assert f.read() == PNG_BYTES


def test_capture_screenshot_disabled(monkeypatch, tmp_path):
    monkeypatch.setattr(page_utils, "settings", Settings(SCREENSHOT_ON_FAILURE=False))

    assert capture_screenshot(FakeDriver(), "test_home_page", str(tmp_path)) is None
    assert os.listdir(tmp_path) == []


def test_capture_screenshot_failure_is_logged_not_raised(tmp_path):
    class DeadDriver(FakeDriver):
        def save_screenshot(self, path):
            raise WebDriverException("invalid session id")

    assert capture_screenshot(DeadDriver(), "test_home_page", str(tmp_path)) is None


def test_fold_text_removes_case_and_accents():
    assert fold_text("İstanbul, Türkiye") == "istanbul, turkiye"
    assert fold_text("QUALITY Assurance") == "quality assurance"
    assert fold_text(None) == ""
