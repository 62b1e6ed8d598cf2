"""
Insider homepage
"""
import logging
from selenium.common.exceptions import WebDriverException

from insider_e2e.core.config import settings
from insider_e2e.core.errors import PageActionError
from insider_e2e.pages.base_page import BasePage
from insider_e2e.services.page_utils import smart_wait, wait_for_page_load
from insider_e2e.services.selector_config import chain

logger = logging.getLogger(__name__)


class HomePage(BasePage):
    """Homepage checks and the navigation from the homepage to Careers"""

    INSIDER_LOGO = chain(
        "Insider logo",
        "a[href='/'] img",
        ".navbar-brand img",
        "[alt*='Insider'], [alt*='insider']",
        "//img[contains(@alt, 'Insider') or contains(@alt, 'insider')] | //a[@href='/']//img",
        "//*[contains(@class, 'logo')]//img",
    )
    NAVIGATION_MENU = chain("Navigation menu", ".navbar-nav", ".main-menu", "nav ul", "nav")
    PAGE_HEADER = chain("Page header", "h1", ".hero-title, .main-title, .page-title")
    PAGE_CONTENT = chain("Page content", "body", "main", ".container", "section", ".wrapper")

    COMPANY_MENU = chain(
        "Company menu",
        "//nav//a[normalize-space()='Company']",
        "//nav//a[contains(text(), 'Company')]",
        "//button[contains(text(), 'Company')]",
        "//a[contains(text(), 'Company')]",
    )
    CAREERS_IN_COMPANY_MENU = chain(
        "Careers link in Company menu",
        "//a[normalize-space()='Careers']",
        ".dropdown-menu a[href*='careers']",
        ".submenu a[href*='careers']",
        "//a[contains(@href, 'careers')]",
        "//a[contains(text(), 'Career')]",
    )
    CAREERS_MENU_LINK = chain(
        "Careers menu link",
        "nav a[href*='careers']",
        "a[href*='careers']",
        "//a[contains(text(), 'Careers') or contains(text(), 'Jobs')]",
        "//nav//a[contains(text(), 'Career')]",
    )

    def navigate_to_home_page(self) -> None:
        self.open(settings.BASE_URL)
        self.accept_cookies()

    def is_home_page_loaded(self) -> bool:
        """Logo plus either the navigation or the main content"""
        logo_displayed = self.is_insider_logo_displayed()
        navigation_displayed = self.is_navigation_menu_displayed()
        content_displayed = self.is_page_content_displayed()
        return logo_displayed and (navigation_displayed or content_displayed)

    def is_insider_logo_displayed(self) -> bool:
        return self.is_any_displayed(self.INSIDER_LOGO)

    def is_navigation_menu_displayed(self) -> bool:
        return self.is_any_displayed(self.NAVIGATION_MENU)

    def is_page_content_displayed(self) -> bool:
        return self.is_any_displayed(self.PAGE_CONTENT)

    def get_page_header_text(self) -> str:
        header = self.find_first(self.PAGE_HEADER, "visible")
        if header is None:
            return ""
        try:
            return header.text.strip()
        except WebDriverException as e:
            logger.warning(f"Could not get page header text: {e}")
            return ""

    def click_careers_menu_item(self) -> None:
        self.click_first(self.CAREERS_MENU_LINK, required=True)
        wait_for_page_load(self.driver, settings.PAGE_LOAD_TIMEOUT)

    def click_company_menu_item(self) -> None:
        self.click_first(self.COMPANY_MENU, required=True)
        smart_wait(1)

    def navigate_to_careers_through_company_menu(self) -> None:
        """
        Reach the Careers page, preferring the real menu path

        Strategy 1: Company menu, then Careers inside it
        Strategy 2: any direct Careers link on the page
        Strategy 3: the configured Careers URL

        Raises:
            PageActionError: when none of the strategies lands on a careers URL
        """
        logger.info("Navigating to Careers page...")
        try:
            logger.info("Strategy 1: Looking for Company menu...")
            if self.click_first(self.COMPANY_MENU):
                smart_wait(2)
                if self.click_first(self.CAREERS_IN_COMPANY_MENU):
                    wait_for_page_load(self.driver, settings.PAGE_LOAD_TIMEOUT)
                    if self._on_careers_page():
                        logger.info("✓ Navigated via Company menu")
                        return

            logger.info("Strategy 2: Looking for direct careers link...")
            if self.click_first(self.CAREERS_MENU_LINK):
                wait_for_page_load(self.driver, settings.PAGE_LOAD_TIMEOUT)
                if self._on_careers_page():
                    logger.info("✓ Navigated via direct careers link")
                    return

            logger.info("Strategy 3: Direct URL navigation...")
            self.open(settings.CAREERS_URL)
            if self._on_careers_page():
                logger.info("✓ Navigated via direct URL")
                return

        except WebDriverException as e:
            raise PageActionError(f"Failed to navigate to Careers page: {e}") from e

        raise PageActionError(f"Failed to navigate to Careers page, still on {self.get_current_url()}")

    def _on_careers_page(self) -> bool:
        return "career" in self.get_current_url().lower()

    def refresh_page(self) -> None:
        super().refresh_page()
        self.accept_cookies()
