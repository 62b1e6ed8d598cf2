"""
Base page object
Shared element lookup, waits, scrolling, window and alert helpers plus the
selector fallback resolution used by every page
"""
from typing import List, Optional, Union
from selenium.webdriver.common.action_chains import ActionChains
from selenium.webdriver.support.ui import WebDriverWait
from selenium.webdriver.support import expected_conditions as EC
from selenium.common.exceptions import (
    ElementClickInterceptedException,
    ElementNotInteractableException,
    TimeoutException,
    WebDriverException,
)
import logging

from insider_e2e.core.config import settings
from insider_e2e.core.errors import PageActionError
from insider_e2e.services.page_utils import smart_wait, wait_for_page_load
from insider_e2e.services.selector_config import COOKIE_ACCEPT, Locator, SelectorConfig, to_locator

logger = logging.getLogger(__name__)

Selector = Union[str, Locator]
SelectorChain = Union[SelectorConfig, List[Selector]]

CONDITIONS = {
    "present": EC.presence_of_element_located,
    "visible": EC.visibility_of_element_located,
    "clickable": EC.element_to_be_clickable,
}


class BasePage:
    """Helpers shared by all page objects"""

    def __init__(
        self,
        driver,
        timeout: Optional[float] = None,
        fallback_timeout: Optional[float] = None,
        poll_frequency: Optional[float] = None
    ):
        self.driver = driver
        self.timeout = settings.DEFAULT_TIMEOUT if timeout is None else timeout
        self.fallback_timeout = settings.FALLBACK_TIMEOUT if fallback_timeout is None else fallback_timeout
        self.poll_frequency = settings.POLL_FREQUENCY if poll_frequency is None else poll_frequency
        self.wait = self._wait()

    def _wait(self, timeout: Optional[float] = None) -> WebDriverWait:
        return WebDriverWait(
            self.driver,
            self.timeout if timeout is None else timeout,
            poll_frequency=self.poll_frequency,
        )

    # ------------------------------------------------------------------
    # Single locator helpers
    # ------------------------------------------------------------------

    def find_element(self, locator: Selector, timeout: Optional[float] = None):
        return self._wait(timeout).until(EC.presence_of_element_located(to_locator(locator)))

    def find_elements(self, locator: Selector) -> list:
        try:
            return self.driver.find_elements(*to_locator(locator))
        except WebDriverException as e:
            logger.debug(f"find_elements failed for {locator}: {e}")
            return []

    def find_clickable_element(self, locator: Selector, timeout: Optional[float] = None):
        return self._wait(timeout).until(EC.element_to_be_clickable(to_locator(locator)))

    def find_visible_element(self, locator: Selector, timeout: Optional[float] = None):
        return self._wait(timeout).until(EC.visibility_of_element_located(to_locator(locator)))

    def click_element(self, locator: Selector, timeout: Optional[float] = None) -> None:
        self._click(self.find_clickable_element(locator, timeout))

    def send_keys(self, locator: Selector, text: str) -> None:
        element = self.find_visible_element(locator)
        element.clear()
        element.send_keys(text)

    def get_text(self, locator: Selector, timeout: Optional[float] = None) -> str:
        return self.find_visible_element(locator, timeout).text

    def get_attribute(self, locator: Selector, attribute_name: str) -> Optional[str]:
        return self.find_element(locator).get_attribute(attribute_name)

    def is_element_displayed(self, locator: Selector, timeout: Optional[float] = None) -> bool:
        try:
            return self.find_element(locator, timeout).is_displayed()
        except WebDriverException:
            return False

    def is_element_clickable(self, locator: Selector, timeout: Optional[float] = None) -> bool:
        try:
            self.find_clickable_element(locator, timeout)
            return True
        except WebDriverException:
            return False

    def wait_for_element_to_be_visible(self, locator: Selector, timeout: Optional[float] = None):
        return self.find_visible_element(locator, timeout)

    def wait_for_element_to_be_clickable(self, locator: Selector, timeout: Optional[float] = None):
        return self.find_clickable_element(locator, timeout)

    def wait_for_text_to_be_present(self, locator: Selector, text: str, timeout: Optional[float] = None) -> bool:
        return self._wait(timeout).until(EC.text_to_be_present_in_element(to_locator(locator), text))

    def wait_for_element_to_disappear(self, locator: Selector, timeout: Optional[float] = None) -> bool:
        """True once the element is gone or hidden, False if it is still visible after the timeout"""
        try:
            self._wait(timeout).until(EC.invisibility_of_element_located(to_locator(locator)))
            return True
        except TimeoutException:
            return False

    # ------------------------------------------------------------------
    # Fallback chains
    # ------------------------------------------------------------------

    def find_first(
        self,
        selectors: SelectorChain,
        condition: str = "visible",
        timeout: Optional[float] = None,
        description: Optional[str] = None
    ):
        """
        Try each locator in order and return the first element meeting the condition

        Args:
            selectors: SelectorConfig or list of CSS/XPath selectors, in priority order
            condition: "present", "visible" or "clickable"
            timeout: Per-locator wait, defaults to the fallback timeout
            description: Name of the target for log lines

        Returns:
            The first matching WebElement, or None when no locator matched
        """
        if condition not in CONDITIONS:
            raise ValueError(f"Unknown condition '{condition}', expected one of {sorted(CONDITIONS)}")

        if description is None:
            description = str(selectors) if isinstance(selectors, SelectorConfig) else "element"
        all_selectors = selectors.all_selectors() if isinstance(selectors, SelectorConfig) else list(selectors)
        per_locator_timeout = self.fallback_timeout if timeout is None else timeout

        for selector in all_selectors:
            try:
                element = self._wait(per_locator_timeout).until(CONDITIONS[condition](to_locator(selector)))
                logger.info(f"✓ {description} found with selector: {selector}")
                return element
            except WebDriverException:
                continue

        logger.info(f"⚠ {description} not found with any selector")
        return None

    def is_any_displayed(self, selectors: SelectorChain, timeout: Optional[float] = None,
                         description: Optional[str] = None) -> bool:
        return self.find_first(selectors, "visible", timeout, description) is not None

    def is_any_clickable(self, selectors: SelectorChain, timeout: Optional[float] = None,
                         description: Optional[str] = None) -> bool:
        return self.find_first(selectors, "clickable", timeout, description) is not None

    def click_first(
        self,
        selectors: SelectorChain,
        description: Optional[str] = None,
        required: bool = False,
        timeout: Optional[float] = None
    ) -> bool:
        """
        Click the first clickable element of a fallback chain

        Returns:
            True if something was clicked, False otherwise

        Raises:
            PageActionError: when required and nothing in the chain could be clicked
        """
        if description is None:
            description = str(selectors) if isinstance(selectors, SelectorConfig) else "element"

        element = self.find_first(selectors, "clickable", timeout, description)
        if element is None:
            if required:
                raise PageActionError(f"{description} not found or not clickable")
            return False

        try:
            self._click(element)
        except WebDriverException as e:
            if required:
                raise PageActionError(f"Failed to click {description}: {e}") from e
            logger.warning(f"Could not click {description}: {e}")
            return False
        return True

    def _click(self, element) -> None:
        try:
            element.click()
        except (ElementClickInterceptedException, ElementNotInteractableException):
            # Overlays such as the cookie bar intercept native clicks
            logger.info("Native click intercepted, retrying with JavaScript click")
            self.driver.execute_script("arguments[0].click();", element)

    # ------------------------------------------------------------------
    # Scrolling and mouse
    # ------------------------------------------------------------------

    def scroll_to_element(self, locator: Selector) -> None:
        self.scroll_element_into_view(self.find_element(locator))

    def scroll_element_into_view(self, element) -> None:
        self.driver.execute_script("arguments[0].scrollIntoView({block: 'center'});", element)

    def scroll_to_top(self) -> None:
        self.driver.execute_script("window.scrollTo(0, 0);")

    def scroll_to_bottom(self) -> None:
        self.driver.execute_script("window.scrollTo(0, document.body.scrollHeight);")

    def hover_over_element(self, element) -> None:
        ActionChains(self.driver).move_to_element(element).perform()

    # ------------------------------------------------------------------
    # Page, window and alert state
    # ------------------------------------------------------------------

    def open(self, url: str) -> None:
        logger.info(f"Loading page: {url}")
        self.driver.get(url)
        wait_for_page_load(self.driver, settings.PAGE_LOAD_TIMEOUT)

    def refresh_page(self) -> None:
        self.driver.refresh()
        wait_for_page_load(self.driver, settings.PAGE_LOAD_TIMEOUT)

    def get_page_title(self) -> str:
        return self.driver.title

    def get_current_url(self) -> str:
        return self.driver.current_url

    def switch_to_window(self, window_handle: str) -> None:
        self.driver.switch_to.window(window_handle)

    def accept_alert(self) -> None:
        self.wait.until(EC.alert_is_present()).accept()

    def dismiss_alert(self) -> None:
        self.wait.until(EC.alert_is_present()).dismiss()

    def get_alert_text(self) -> str:
        return self.wait.until(EC.alert_is_present()).text

    def accept_cookies(self, selectors: SelectorChain = COOKIE_ACCEPT) -> bool:
        """Accept the cookie consent banner if one is shown"""
        logger.info("Checking for cookie consent banner...")
        if self.click_first(selectors, description="Cookie accept button"):
            smart_wait(1)
            logger.info("✓ Cookie consent accepted successfully")
            return True

        logger.info("No cookie consent banner found or already handled")
        return False
