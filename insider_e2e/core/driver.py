import logging
from typing import Optional
from selenium import webdriver
from selenium.webdriver.chrome.service import Service as ChromeService
from selenium.webdriver.chrome.options import Options as ChromeOptions
from selenium.webdriver.firefox.service import Service as FirefoxService
from selenium.webdriver.firefox.options import Options as FirefoxOptions
from selenium.webdriver.edge.service import Service as EdgeService
from selenium.webdriver.edge.options import Options as EdgeOptions
from selenium.common.exceptions import WebDriverException
from webdriver_manager.chrome import ChromeDriverManager
from webdriver_manager.firefox import GeckoDriverManager
from webdriver_manager.microsoft import EdgeChromiumDriverManager

from insider_e2e.core.config import settings, Settings

logger = logging.getLogger(__name__)

SUPPORTED_BROWSERS = ("chrome", "firefox", "edge")


def _chrome_options(config: Settings) -> ChromeOptions:
    options = ChromeOptions()
    if config.HEADLESS:
        options.add_argument('--headless=new')
        options.add_argument(f'--window-size={config.WINDOW_SIZE}')
    options.add_argument('--disable-extensions')
    options.add_argument('--disable-gpu')
    options.add_argument('--no-sandbox')
    options.add_argument('--disable-dev-shm-usage')
    options.add_argument('--remote-allow-origins=*')
    options.add_argument('--disable-notifications')
    options.add_experimental_option('excludeSwitches', ['enable-logging', 'enable-automation'])
    return options


def _firefox_options(config: Settings) -> FirefoxOptions:
    options = FirefoxOptions()
    if config.HEADLESS:
        options.add_argument('-headless')
    return options


def _edge_options(config: Settings) -> EdgeOptions:
    options = EdgeOptions()
    if config.HEADLESS:
        options.add_argument('--headless=new')
        options.add_argument(f'--window-size={config.WINDOW_SIZE}')
    options.add_argument('--disable-extensions')
    return options


def create_driver(config: Optional[Settings] = None):
    """
    Initialize and return a WebDriver for the configured browser.

    Args:
        config: Settings to use, defaults to the process-wide settings
    """
    config = config or settings
    browser = config.BROWSER.lower().strip()
    logger.info(f"Initializing {browser} WebDriver (headless={config.HEADLESS})")

    if browser == "chrome":
        service = ChromeService(ChromeDriverManager().install())
        driver = webdriver.Chrome(service=service, options=_chrome_options(config))
    elif browser == "firefox":
        service = FirefoxService(GeckoDriverManager().install())
        driver = webdriver.Firefox(service=service, options=_firefox_options(config))
    elif browser == "edge":
        service = EdgeService(EdgeChromiumDriverManager().install())
        driver = webdriver.Edge(service=service, options=_edge_options(config))
    else:
        raise ValueError(f"Browser not supported: {config.BROWSER} (expected one of {', '.join(SUPPORTED_BROWSERS)})")

    configure_driver(driver, config)
    logger.info("✓ WebDriver initialized successfully")
    return driver


def configure_driver(driver, config: Optional[Settings] = None):
    """Apply window and timeout settings to a fresh driver"""
    config = config or settings

    if config.WINDOW_MAXIMIZE and not config.HEADLESS:
        try:
            driver.maximize_window()
        except WebDriverException as e:
            logger.warning(f"Could not maximize window: {e}")

    driver.implicitly_wait(config.IMPLICIT_WAIT)
    driver.set_page_load_timeout(config.PAGE_LOAD_TIMEOUT)
    driver.set_script_timeout(config.SCRIPT_TIMEOUT)
    return driver


def quit_driver(driver) -> None:
    """Quit the browser, logging instead of raising when the session is already gone"""
    if driver is None:
        return
    try:
        driver.quit()
        logger.info("✓ Browser closed")
    except WebDriverException as e:
        logger.warning(f"Error closing browser: {e}")
