"""
Lever job application page opened from an Insider "View Role" button
"""
import logging
from selenium.common.exceptions import WebDriverException

from insider_e2e.core.config import settings
from insider_e2e.pages.base_page import BasePage
from insider_e2e.services.page_utils import get_page_text, smart_wait, wait_for_page_load
from insider_e2e.services.selector_config import chain

logger = logging.getLogger(__name__)

LEVER_DOMAIN_PATTERNS = ["lever.co", "jobs.lever.co", "lever-client-logos", "lever"]

LEVER_HOST = "lever.co"

URL_JOB_KEYWORDS = ["job", "position", "application", "apply", "career"]

TITLE_KEYWORDS = [
    "job", "position", "career", "application", "apply",
    "quality assurance", "qa", "engineer", "insider",
]

CONTENT_KEYWORDS = ["apply", "application", "job", "position", "career", "resume", "lever"]


class LeverApplicationPage(BasePage):
    """URL, title and form checks for the Lever posting, plus tab bookkeeping"""

    JOB_TITLE = chain("Job title", ".posting-headline h2", "h2, h1", "[data-qa='job-title'], .job-title")
    COMPANY_NAME = chain("Company name", ".main-header-logo img[alt]", ".company, .company-name, [data-qa='company'], .posting-company")
    JOB_DESCRIPTION = chain("Job description", ".posting-page .section-wrapper", ".job-description, .posting-content, .description")

    APPLICATION_FORM = chain("Application form", "form", ".application-form, .lever-form, [data-qa='application-form']")
    NAME_FIELD = chain("Name field", "input[name='name']", "input[name*='name'], input[placeholder*='name'], #name")
    EMAIL_FIELD = chain("Email field", "input[type='email']", "input[name*='email'], #email")
    RESUME_UPLOAD = chain("Resume upload", "input[type='file']", ".file-upload, [data-qa='resume'], .resume-upload")
    APPLY_OR_SUBMIT_BUTTON = chain(
        "Apply/Submit button",
        ".postings-btn",
        ".apply-btn, .application-button, button[class*='apply'], a[class*='apply']",
        "input[type='submit'], button[type='submit'], .submit-btn, [data-qa='submit']",
    )

    def is_lever_application_page(self) -> bool:
        """Lever domain in the URL, or at least job application keywords"""
        current_url = self.get_current_url().lower()
        logger.info(f"Validating Lever application page URL: {current_url}")

        for pattern in LEVER_DOMAIN_PATTERNS:
            if pattern in current_url:
                logger.info(f"✓ Found Lever domain pattern: {pattern}")
                return True

        if any(keyword in current_url for keyword in URL_JOB_KEYWORDS):
            logger.info("✓ URL contains job application keywords")
            return True

        logger.info("⚠ URL does not match Lever application patterns")
        return False

    def is_redirected_to_lever(self) -> bool:
        """The active window is a Lever posting, not an Insider page that merely mentions jobs"""
        current_url = self.get_current_url().lower()
        on_lever = LEVER_HOST in current_url
        logger.info(f"{'✓' if on_lever else '✗'} Lever host in URL: {current_url}")
        return on_lever

    def is_redirect_successful(self) -> bool:
        logger.info("Verifying redirect success to Lever application...")
        wait_for_page_load(self.driver, settings.PAGE_LOAD_TIMEOUT)
        # External redirect can finish after readyState
        smart_wait(3)

        url_valid = self.is_redirected_to_lever()
        page_loaded = self.is_page_loaded()
        has_application_content = self.has_application_content()

        logger.info("Redirect validation results:")
        logger.info(f"  URL Valid: {url_valid}")
        logger.info(f"  Page Loaded: {page_loaded}")
        logger.info(f"  Application Content: {has_application_content}")

        return url_valid and page_loaded and has_application_content

    def is_page_title_valid(self) -> bool:
        page_title = (self.get_page_title() or "").lower()
        logger.info(f"Validating page title: '{page_title}'")
        title_valid = any(keyword in page_title for keyword in TITLE_KEYWORDS)
        logger.info(f"Page title validation: {'✓ Valid' if title_valid else '✗ Invalid'}")
        return title_valid

    def are_application_form_elements_present(self) -> bool:
        """
        Count the standard Lever form elements

        Lever layouts differ between postings, so one element found is
        enough to call it an application page.
        """
        logger.info("Checking for application form elements...")
        checks = [
            self.JOB_TITLE,
            self.APPLICATION_FORM,
            self.NAME_FIELD,
            self.EMAIL_FIELD,
            self.APPLY_OR_SUBMIT_BUTTON,
        ]

        elements_found = 0
        for check in checks:
            if self.is_any_displayed(check):
                elements_found += 1
                logger.info(f"✓ {check} found")
            else:
                logger.info(f"✗ {check} not found")

        success_rate = elements_found * 100.0 / len(checks)
        logger.info(f"Application form elements found: {elements_found}/{len(checks)} ({success_rate:.1f}%)")
        return elements_found >= 1

    def get_job_title(self) -> str:
        return self._first_text(self.JOB_TITLE)

    def get_company_name(self) -> str:
        element = self.find_first(self.COMPANY_NAME, "present")
        if element is None:
            return ""
        try:
            return (element.text or element.get_attribute("alt") or "").strip()
        except WebDriverException as e:
            logger.warning(f"Error getting company name: {e}")
            return ""

    def _first_text(self, selectors) -> str:
        element = self.find_first(selectors, "visible")
        if element is None:
            return ""
        try:
            text = element.text.strip()
            logger.info(f"{selectors} found: '{text}'")
            return text
        except WebDriverException as e:
            logger.warning(f"Error reading {selectors}: {e}")
            return ""

    def handle_new_tab(self, original_window: str) -> bool:
        """
        Switch to the tab opened by View Role

        Returns:
            True if a new tab was found and is now active
        """
        logger.info("Handling new tab scenario...")
        smart_wait(2)

        all_windows = self.driver.window_handles
        logger.info(f"Total windows/tabs: {len(all_windows)}")

        for window in all_windows:
            if window != original_window:
                logger.info("Switching to new tab...")
                self.switch_to_window(window)
                wait_for_page_load(self.driver, settings.PAGE_LOAD_TIMEOUT)
                logger.info(f"New tab URL: {self.get_current_url()}")
                return True

        logger.info("No new tab detected, continuing with same window")
        return False

    def close_additional_tabs_and_return_to_original(self, original_window: str) -> int:
        """Close every window except the original one; returns how many were closed"""
        closed = 0
        for window in list(self.driver.window_handles):
            if window == original_window:
                continue
            try:
                self.switch_to_window(window)
                self.driver.close()
                closed += 1
                logger.info("Closed additional tab")
            except WebDriverException as e:
                logger.warning(f"Error closing tab {window}: {e}")

        self.switch_to_window(original_window)
        logger.info("Returned to original window")
        return closed

    def is_page_loaded(self) -> bool:
        title = self.get_page_title()
        if not title or not title.strip():
            return False
        return self.is_element_displayed("body", self.fallback_timeout)

    def has_application_content(self) -> bool:
        page_text = get_page_text(self.driver).lower()
        has_content = any(keyword in page_text for keyword in CONTENT_KEYWORDS)
        logger.info(f"Application content detected: {has_content}")
        return has_content
