"""
Insider Quality Assurance careers page and the open positions listing
Handles the Select2 location/department filters, job card extraction and validation
"""
from typing import List, Optional
from selenium.common.exceptions import WebDriverException
import logging

from insider_e2e.core.config import settings
from insider_e2e.core.errors import PageActionError
from insider_e2e.models.job_model import JobDetails, ValidationResult, ValidationSummary
from insider_e2e.pages.base_page import BasePage
from insider_e2e.services.job_extraction import extract_job_details
from insider_e2e.services.job_validation import (
    LOCATION_ALIASES,
    department_keywords,
    department_word_keywords,
    location_keywords,
    matches_any_keyword,
    validate_job,
    validate_jobs,
)
from insider_e2e.services.page_utils import get_element_text, smart_wait, wait_for_page_load
from insider_e2e.services.selector_config import SelectorConfig, chain, to_locator, xpath_literal

logger = logging.getLogger(__name__)


class QAJobsPage(BasePage):
    """QA careers page, "See all QA jobs" and the filtered job list"""

    SEE_ALL_QA_JOBS = chain(
        "See all QA jobs button",
        "//a[normalize-space()='See all QA jobs']",
        "//a[contains(@href, 'jobs') and contains(text(), 'See all')]",
        "//button[contains(text(), 'See all QA jobs')]",
        "//a[contains(text(), 'View all jobs')]",
        "a[href*='open-positions']",
        "button[class*='jobs'], .jobs-cta",
    )

    JOB_LIST_CONTAINER = "//div[@id='jobs-list']"
    JOB_ITEMS = chain(
        "Job items",
        "//div[@id='jobs-list']//div[contains(@class, 'position-list-item')]",
        "//div[@id='jobs-list']/div[contains(@class, 'job') or contains(@class, 'position')]",
        ".position-list-item",
    )
    JOB_LIKE_CONTENT = "[class*='position-list'], [class*='job-item'], [class*='job-card']"
    JOB_TITLES = ".position-title, .job-title, #jobs-list h3, #jobs-list h4"

    LOCATION_FILTER_DROPDOWN = chain(
        "Location filter dropdown",
        "//span[@id='select2-filter-by-location-container']",
        "#filter-by-location + .select2 .select2-selection",
        "select#filter-by-location",
    )
    DEPARTMENT_FILTER_DROPDOWN = chain(
        "Department filter dropdown",
        "//span[@id='select2-filter-by-department-container']",
        "#filter-by-department + .select2 .select2-selection",
        "select#filter-by-department",
    )
    DROPDOWN_OPTIONS = "//li[contains(@class, 'select2-results__option')]"

    LOADING_SPINNER = ".loading, .spinner, .loader, [class*='loading']"
    APPLY_FILTERS_BUTTON = chain("Apply filters button", ".apply-filters", "[data-action='filter']", ".job-filters button[type='submit']")

    # Relative to one job card
    POSITION_FIELD = [".position-title", "[class*='title']", "h3", "h4"]
    DEPARTMENT_FIELD = [".position-department", "[class*='department']", "span.department"]
    LOCATION_FIELD = [".position-location", "[class*='location']", "div.location"]
    VIEW_ROLE_IN_CARD = [
        ".//a[contains(normalize-space(), 'View Role')]",
        "a.btn",
        "a[href*='lever.co']",
        "a[target='_blank']",
    ]
    VIEW_ROLE_ON_PAGE = chain(
        "View Role button",
        "//a[normalize-space()='View Role']",
        "//a[contains(text(), 'View Role')]",
        "//*[@id='jobs-list']//a[contains(@href, 'lever')]",
    )

    def navigate_to_qa_careers_page(self) -> None:
        logger.info("Navigating to QA Careers page...")
        self.open(settings.QA_CAREERS_URL)
        self.accept_cookies()
        smart_wait(2)
        logger.info(f"Successfully navigated to: {self.get_current_url()}")

    def is_qa_careers_page_loaded(self) -> bool:
        current_url = self.get_current_url().lower()
        url_correct = "quality-assurance" in current_url or "qa" in current_url
        body_loaded = self.is_element_displayed("body", self.fallback_timeout)

        logger.info("QA page load check:")
        logger.info(f"  URL correct: {url_correct} (URL: {current_url})")
        logger.info(f"  Body loaded: {body_loaded}")

        return url_correct and body_loaded

    def click_see_all_qa_jobs(self) -> None:
        """
        Open the QA job listing, falling back to the open positions URL

        Raises:
            PageActionError: when neither the button nor the direct URL works
        """
        logger.info("Looking for 'See all QA jobs' button...")
        try:
            if self.click_first(self.SEE_ALL_QA_JOBS):
                wait_for_page_load(self.driver, settings.PAGE_LOAD_TIMEOUT)
                self.wait_for_jobs_to_load()
                return

            logger.info("Direct button not found, trying direct navigation...")
            self.open(settings.OPEN_POSITIONS_URL)
            self.wait_for_jobs_to_load()

        except WebDriverException as e:
            raise PageActionError(f"Failed to navigate to QA jobs listing: {e}") from e

    def wait_for_jobs_to_load(self) -> None:
        logger.info("Waiting for jobs page to load...")
        self.wait_for_element_to_disappear(self.LOADING_SPINNER, 10)
        # Job cards render after the spinner with a fade-in
        smart_wait(3)
        logger.info("Jobs page loaded")

    # ------------------------------------------------------------------
    # Filters
    # ------------------------------------------------------------------

    @staticmethod
    def location_option_selectors(location: str) -> SelectorConfig:
        """
        Dropdown option chain for a location value

        "Istanbul, Turkey" tries the exact text, the Turkiye spelling,
        the bare city, then any option containing the city.
        """
        location = location.strip()
        candidates = [location]
        parts = [part.strip() for part in location.split(",") if part.strip()]
        if len(parts) > 1:
            city, country = parts[0], parts[-1]
            for alias in LOCATION_ALIASES.get(country.lower(), []):
                candidates.append(f"{city}, {alias.capitalize()}")
        else:
            city = location

        selectors = [f"//li[normalize-space(text())={xpath_literal(text)}]" for text in candidates]
        selectors.append(f"//li[normalize-space(text())={xpath_literal(city)}]")
        selectors.append(f"//li[contains(text(), {xpath_literal(city)})]")
        return chain(f"'{location}' location option", *selectors)

    @staticmethod
    def department_option_selectors(department: str) -> SelectorConfig:
        department = department.strip()
        return chain(
            f"'{department}' department option",
            f"//li[normalize-space(text())={xpath_literal(department)}]",
            f"//li[contains(text(), {xpath_literal(department)})]",
            "//li[contains(text(), 'QA') or contains(text(), 'Quality')]",
        )

    def apply_location_filter(self, location: str) -> bool:
        """Select a location in the Select2 dropdown; False when it could not be selected"""
        logger.info(f"Applying location filter: {location}")
        return self._select_dropdown_option(
            self.LOCATION_FILTER_DROPDOWN, self.location_option_selectors(location), open_wait=1.5
        )

    def apply_department_filter(self, department: str) -> bool:
        """Select a department in the Select2 dropdown; False when it could not be selected"""
        logger.info(f"Applying department filter: {department}")
        return self._select_dropdown_option(
            self.DEPARTMENT_FILTER_DROPDOWN, self.department_option_selectors(department), open_wait=1.0
        )

    def _select_dropdown_option(self, dropdown: SelectorConfig, options: SelectorConfig, open_wait: float) -> bool:
        try:
            if not self.click_first(dropdown):
                logger.warning(f"⚠ {dropdown} not found, filter not applied")
                return False

            # Select2 renders its options after the open animation
            smart_wait(open_wait)

            if self.click_first(options):
                logger.info(f"✓ Selected {options}")
                smart_wait(1)
                return True

            logger.warning(f"⚠ {options} not found, available: {self.get_dropdown_options()}")
            return False

        except WebDriverException as e:
            logger.warning(f"Could not apply filter with {dropdown}: {e}")
            return False

    def get_dropdown_options(self, limit: int = 10) -> List[str]:
        """Texts of the currently open Select2 options"""
        options = []
        for option in self.find_elements(self.DROPDOWN_OPTIONS):
            text = get_element_text(option)
            if text:
                options.append(text)

        for index, text in enumerate(options[:limit], 1):
            logger.debug(f"  Option {index}: '{text}'")
        logger.debug(f"Total options found: {len(options)}")
        return options

    def apply_filters(self) -> None:
        """Click a separate apply button when the page has one; Insider filters apply on select"""
        logger.info("Applying filters...")
        if self.click_first(self.APPLY_FILTERS_BUTTON, timeout=1):
            self.wait_for_jobs_to_load()
        smart_wait(2)

    # ------------------------------------------------------------------
    # Job list
    # ------------------------------------------------------------------

    def get_job_cards(self) -> list:
        """Job card elements from the first strategy that finds any"""
        for selector in self.JOB_ITEMS.all_selectors():
            cards = self.find_elements(selector)
            if cards:
                return cards
        return []

    def is_jobs_list_present(self) -> bool:
        container_exists = self.is_element_displayed(self.JOB_LIST_CONTAINER, self.fallback_timeout)
        job_items_exist = len(self.get_job_cards()) > 0
        has_job_content = len(self.find_elements(self.JOB_LIKE_CONTENT)) > 0

        logger.info("Job list presence check:")
        logger.info(f"  Container exists: {'✓' if container_exists else '✗'}")
        logger.info(f"  Job items exist: {'✓' if job_items_exist else '✗'}")
        logger.info(f"  Job-related content: {'✓' if has_job_content else '✗'}")

        return container_exists or job_items_exist or has_job_content

    def get_jobs_count(self) -> int:
        return len(self.get_job_cards())

    def is_jobs_list_not_empty(self) -> bool:
        count = self.get_jobs_count()
        logger.info(f"Job count: {count}")
        return count > 0

    def get_job_titles(self) -> List[str]:
        titles = [get_element_text(element) for element in self.find_elements(self.JOB_TITLES)]
        return [title for title in titles if title]

    def get_all_job_details(self) -> List[JobDetails]:
        """
        Extract position, department and location from every job card

        Each card is scrolled into view and hovered first, since the
        listing reveals some card content on hover. Field selectors are
        tried before falling back to parsing the card text.
        """
        cards = self.get_job_cards()
        logger.info(f"Extracting details from {len(cards)} job card(s)")

        jobs = []
        for index, card in enumerate(cards, 1):
            self._reveal_card(card)
            job = extract_job_details(
                get_element_text(card),
                position=self._card_field_text(card, self.POSITION_FIELD),
                department=self._card_field_text(card, self.DEPARTMENT_FIELD),
                location=self._card_field_text(card, self.LOCATION_FIELD),
                source_element=card,
            )
            logger.info(f"Job {index}: {job}")
            jobs.append(job)

        return jobs

    def _reveal_card(self, card) -> None:
        try:
            self.scroll_element_into_view(card)
            self.hover_over_element(card)
        except WebDriverException as e:
            logger.debug(f"Could not hover job card: {e}")

    @staticmethod
    def _card_field_text(card, selectors: List[str]) -> str:
        for selector in selectors:
            try:
                text = get_element_text(card.find_element(*to_locator(selector)))
            except WebDriverException:
                continue
            if text:
                return text
        return ""

    def validate_job_criteria(self, job: JobDetails, expected_location: str, expected_department: str) -> ValidationResult:
        return validate_job(job, expected_location, expected_department)

    def validate_all_jobs(self, jobs: List[JobDetails], expected_location: str, expected_department: str) -> ValidationSummary:
        return validate_jobs(jobs, expected_location, expected_department)

    def are_jobs_filtered_correctly(self, expected_location: str, expected_department: str) -> bool:
        """Every card's text names the expected location and department; an empty list fails"""
        cards = self.get_job_cards()
        logger.info(f"Found {len(cards)} job(s) after filtering")
        if not cards:
            return False

        loc_keywords = location_keywords(expected_location)
        dept_keywords = department_keywords(expected_department)
        dept_words = department_word_keywords(expected_department)

        all_match = True
        for index, card in enumerate(cards, 1):
            text = get_element_text(card)
            location_ok = matches_any_keyword(text, loc_keywords)
            department_ok = matches_any_keyword(text, dept_keywords, dept_words)
            if not (location_ok and department_ok):
                logger.warning(
                    f"✗ Job {index} does not match filters (location={location_ok}, department={department_ok}): "
                    f"{text[:80]!r}"
                )
                all_match = False
        return all_match

    def click_view_role(self, index: int = 0) -> str:
        """
        Hover a job card and click its View Role button

        Args:
            index: Zero-based job card index

        Returns:
            Handle of the window that was active before the click

        Raises:
            PageActionError: when the card or its button cannot be found
        """
        original_window = self.driver.current_window_handle
        cards = self.get_job_cards()
        if index >= len(cards):
            raise PageActionError(f"Job card {index + 1} not found, only {len(cards)} job(s) listed")

        card = cards[index]
        self._reveal_card(card)
        smart_wait(1)

        button = self._find_in_card(card, self.VIEW_ROLE_IN_CARD)
        if button is not None:
            logger.info(f"Clicking View Role on job {index + 1}...")
            try:
                self._click(button)
            except WebDriverException as e:
                raise PageActionError(f"Failed to click View Role button: {e}") from e
        else:
            self.click_first(self.VIEW_ROLE_ON_PAGE, required=True)

        return original_window

    @staticmethod
    def _find_in_card(card, selectors: List[str]) -> Optional[object]:
        for selector in selectors:
            try:
                return card.find_element(*to_locator(selector))
            except WebDriverException:
                continue
        return None
