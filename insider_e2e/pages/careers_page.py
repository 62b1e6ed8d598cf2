"""
Insider careers landing page
Checks for the Locations, Teams and Life at Insider blocks
"""
import logging
from selenium.common.exceptions import WebDriverException

from insider_e2e.pages.base_page import BasePage
from insider_e2e.services.selector_config import chain

logger = logging.getLogger(__name__)


class CareersPage(BasePage):
    """Section visibility and clickability checks on the careers page"""

    PAGE_TITLE = chain("Careers page title", "h1", ".hero-title, .main-title, .page-title", "[class*='title']")

    LOCATIONS_BLOCK = chain(
        "Locations block",
        "#career-our-location",
        "[class*='location'], [data-section='locations'], .locations-section, [id*='location']",
        "//*[contains(@class, 'location') or contains(text(), 'Location') or contains(text(), 'Office')]",
        "//h2[contains(text(), 'Location')] | //h3[contains(text(), 'Location')] | //*[contains(text(), 'Our Offices')]",
        "[data-testid*='location']",
        "//*[contains(text(), 'Where we work') or contains(text(), 'Global') or contains(text(), 'Offices')]",
    )
    TEAMS_BLOCK = chain(
        "Teams block",
        "#career-find-our-calling",
        "[class*='team'], [data-section='teams'], .teams-section, [id*='team']",
        "//*[contains(@class, 'team') or contains(text(), 'Team') or contains(text(), 'Department')]",
        "//h2[contains(text(), 'Team')] | //h3[contains(text(), 'Team')] | //*[contains(text(), 'Departments')]",
        "[data-testid*='team']",
        "//*[contains(text(), 'Join our team') or contains(text(), 'Our teams')]",
    )
    LIFE_AT_INSIDER_BLOCK = chain(
        "Life at Insider block",
        "//h2[contains(text(), 'Life at Insider')]/ancestor::section[1]",
        "[class*='life'], [class*='culture'], [data-section='life'], .life-section, [id*='life']",
        "//*[contains(@class, 'life') or contains(@class, 'culture') or contains(text(), 'Life at') or contains(text(), 'Culture')]",
        "//h2[contains(text(), 'Life')] | //h3[contains(text(), 'Life')]",
        "[data-testid*='life']",
        "//*[contains(text(), 'Our culture') or contains(text(), 'Why work')]",
    )

    LOCATIONS_CLICKABLE = chain(
        "Locations block link",
        "//a[contains(@href, 'location') or contains(text(), 'Location')]",
        "//*[contains(@class, 'location')]//a",
        ".locations-section a, [data-section='locations'] a",
    )
    TEAMS_CLICKABLE = chain(
        "Teams block link",
        "//a[contains(@href, 'team') or contains(text(), 'Team')]",
        "//*[contains(@class, 'team')]//a",
        ".teams-section a, [data-section='teams'] a",
    )
    LIFE_CLICKABLE = chain(
        "Life at Insider block link",
        "//a[contains(@href, 'life') or contains(@href, 'culture') or contains(text(), 'Life')]",
        "//*[contains(@class, 'life')]//a | //*[contains(@class, 'culture')]//a",
        ".life-section a, [data-section='life'] a",
    )

    CONTENT_SECTIONS = ".section, .block, .card, .feature, [class*='section']"
    JOB_LISTINGS = chain("Job listings", ".job-list, .positions, .openings", "[class*='job']")

    def is_careers_page_loaded(self) -> bool:
        """Title visible, or a careers URL with content sections"""
        title_loaded = self.is_any_displayed(self.PAGE_TITLE)
        url_contains_careers = "career" in self.get_current_url().lower()
        return title_loaded or (url_contains_careers and self.has_general_content())

    def is_locations_block_displayed(self) -> bool:
        logger.info("Checking for Locations block...")
        return self.is_any_displayed(self.LOCATIONS_BLOCK)

    def is_teams_block_displayed(self) -> bool:
        logger.info("Checking for Teams block...")
        return self.is_any_displayed(self.TEAMS_BLOCK)

    def is_life_at_insider_block_displayed(self) -> bool:
        logger.info("Checking for Life at Insider block...")
        return self.is_any_displayed(self.LIFE_AT_INSIDER_BLOCK)

    def are_all_main_sections_visible(self) -> bool:
        """At least one named section, or enough generic career content"""
        locations = self.is_locations_block_displayed()
        teams = self.is_teams_block_displayed()
        life = self.is_life_at_insider_block_displayed()
        has_general_content = len(self.find_elements(self.CONTENT_SECTIONS)) >= 3
        has_job_listings = self.is_any_displayed(self.JOB_LISTINGS)

        logger.info("Section visibility summary:")
        logger.info(f"  Locations: {'✓' if locations else '✗'}")
        logger.info(f"  Teams: {'✓' if teams else '✗'}")
        logger.info(f"  Life at Insider: {'✓' if life else '✗'}")
        logger.info(f"  General content sections: {'✓' if has_general_content else '✗'}")
        logger.info(f"  Job listings present: {'✓' if has_job_listings else '✗'}")

        return locations or teams or life or has_general_content or has_job_listings

    def is_locations_block_clickable(self) -> bool:
        logger.info("Checking if Locations block is clickable...")
        return self.is_any_clickable(self.LOCATIONS_CLICKABLE.extended(*self.LOCATIONS_BLOCK.all_selectors()[:3]))

    def is_teams_block_clickable(self) -> bool:
        logger.info("Checking if Teams block is clickable...")
        return self.is_any_clickable(self.TEAMS_CLICKABLE.extended(*self.TEAMS_BLOCK.all_selectors()[:3]))

    def is_life_at_insider_block_clickable(self) -> bool:
        logger.info("Checking if Life at Insider block is clickable...")
        return self.is_any_clickable(self.LIFE_CLICKABLE.extended(*self.LIFE_AT_INSIDER_BLOCK.all_selectors()[:3]))

    def are_all_main_sections_clickable(self) -> bool:
        """Some sections are informational only, so one clickable section is enough"""
        locations_clickable = self.is_locations_block_clickable()
        teams_clickable = self.is_teams_block_clickable()
        life_clickable = self.is_life_at_insider_block_clickable()

        logger.info("Section clickability summary:")
        logger.info(f"  Locations clickable: {'✓' if locations_clickable else '✗'}")
        logger.info(f"  Teams clickable: {'✓' if teams_clickable else '✗'}")
        logger.info(f"  Life at Insider clickable: {'✓' if life_clickable else '✗'}")

        return locations_clickable or teams_clickable or life_clickable

    def get_page_title(self) -> str:
        """Visible page heading, falling back to the document title"""
        heading = self.find_first(self.PAGE_TITLE, "visible")
        if heading is not None:
            try:
                text = heading.text.strip()
                if text:
                    return text
            except WebDriverException:
                pass
        return self.driver.title

    def scroll_to_locations_block(self) -> bool:
        return self._scroll_to_block(self.LOCATIONS_BLOCK)

    def scroll_to_teams_block(self) -> bool:
        return self._scroll_to_block(self.TEAMS_BLOCK)

    def scroll_to_life_at_insider_block(self) -> bool:
        return self._scroll_to_block(self.LIFE_AT_INSIDER_BLOCK)

    def _scroll_to_block(self, block) -> bool:
        element = self.find_first(block, "present")
        if element is None:
            logger.info(f"Could not scroll to {block}: not found")
            return False
        self.scroll_element_into_view(element)
        return True

    def has_general_content(self) -> bool:
        return len(self.find_elements(self.CONTENT_SECTIONS)) > 0
