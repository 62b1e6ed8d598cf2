"""
Page utilities shared by the page objects
Handles page load waits, fixed waits, element text extraction and failure screenshots
"""
import os
import re
import time
import unicodedata
from datetime import datetime
from typing import Optional
from selenium.webdriver.support.ui import WebDriverWait
from selenium.common.exceptions import TimeoutException, WebDriverException
from bs4 import BeautifulSoup
import logging

from insider_e2e.core.config import settings

# Setup logging
logger = logging.getLogger(__name__)


def wait_for_page_load(driver, timeout: float = 30) -> bool:
    """
    Wait until document.readyState is complete

    Args:
        driver: Selenium WebDriver instance
        timeout: Maximum wait time in seconds

    Returns:
        True if the page finished loading, False if the wait timed out
    """
    logger.info("⏳ Waiting for page load...")
    try:
        WebDriverWait(driver, timeout, poll_frequency=settings.POLL_FREQUENCY).until(
            lambda d: d.execute_script("return document.readyState") == "complete"
        )
        logger.info("✓ Page load completed successfully")
        return True
    except (TimeoutException, WebDriverException) as e:
        logger.warning(f"⚠ Page load wait timeout, continuing... ({type(e).__name__})")
        return False


def wait_for_js_to_load(driver, timeout: float = 15) -> bool:
    """Wait for pending jQuery requests; pages without jQuery return False"""
    logger.info("⏳ Waiting for JavaScript to load...")
    try:
        WebDriverWait(driver, timeout, poll_frequency=settings.POLL_FREQUENCY).until(
            lambda d: d.execute_script(
                "return (typeof jQuery !== 'undefined') && jQuery.active == 0"
            ) is True
        )
        logger.info("✓ JavaScript loading completed")
        return True
    except (TimeoutException, WebDriverException):
        logger.info("jQuery not available or still busy")
        return False


def smart_wait(seconds: float) -> None:
    """Fixed sleep for animations and dynamic content that expose no wait condition"""
    logger.debug(f"Smart wait: {seconds}s")
    time.sleep(seconds)


def clean_text(text: Optional[str]) -> str:
    """Collapse whitespace inside a single line of text"""
    if not text:
        return ""
    return re.sub(r"\s+", " ", text).strip()


def fold_text(text: Optional[str]) -> str:
    """
    Lowercase text with accents removed, for keyword comparison

    "İstanbul, Türkiye" -> "istanbul, turkiye". Plain lower() would turn the
    Turkish dotted capital into "i" plus a combining dot.
    """
    if not text:
        return ""
    decomposed = unicodedata.normalize("NFKD", text)
    return "".join(char for char in decomposed if not unicodedata.combining(char)).lower()


def html_to_lines(html: str) -> str:
    """Visible text of an HTML fragment, one block per line"""
    if not html:
        return ""
    soup = BeautifulSoup(html, "html.parser")
    for tag in soup(["script", "style", "noscript"]):
        tag.decompose()
    lines = [clean_text(line) for line in soup.get_text("\n").splitlines()]
    return "\n".join(line for line in lines if line)


def get_element_text(element) -> str:
    """
    Text of a WebElement, including text hidden until hover

    Selenium only returns rendered text, so when .text is empty the
    element's innerHTML is parsed instead.

    Args:
        element: Selenium WebElement

    Returns:
        Text content with one line per block element, or empty string
    """
    try:
        text = element.text or ""
        if text.strip():
            return text.strip()
        return html_to_lines(element.get_attribute("innerHTML") or "")
    except WebDriverException as e:
        logger.warning(f"Could not read element text: {e}")
        return ""


def get_page_text(driver) -> str:
    """Visible text of the whole page parsed from the page source"""
    try:
        return html_to_lines(driver.page_source or "")
    except WebDriverException as e:
        logger.warning(f"Failed to get page source: {e}")
        return ""


def screenshot_filename(test_name: str) -> str:
    safe_name = re.sub(r"[^\w\-]+", "_", test_name).strip("_") or "test"
    timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    return f"{safe_name}_{timestamp}.png"


def capture_screenshot(driver, test_name: str, directory: Optional[str] = None) -> Optional[str]:
    """
    Take screenshot when a test fails

    Args:
        driver: Selenium WebDriver instance
        test_name: Test name used for the filename
        directory: Target directory, defaults to SCREENSHOT_PATH

    Returns:
        Absolute path of the PNG, or None when disabled or the capture failed
    """
    if not settings.SCREENSHOT_ON_FAILURE:
        logger.info("Screenshot capture disabled in configuration")
        return None

    try:
        logger.info(f"📸 Capturing screenshot for test: {test_name}")
        screenshot_dir = directory or settings.SCREENSHOT_PATH
        os.makedirs(screenshot_dir, exist_ok=True)

        path = os.path.abspath(os.path.join(screenshot_dir, screenshot_filename(test_name)))
        if not driver.save_screenshot(path):
            logger.error(f"✗ Driver could not write screenshot: {path}")
            return None

        logger.info(f"✓ Screenshot saved: {path}")
        return path

    except (OSError, WebDriverException) as e:
        logger.error(f"✗ Failed to capture screenshot: {e}")
        return None
