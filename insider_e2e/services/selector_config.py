"""
Selector fallback chains for the page objects
Each logical target gets an ordered list of CSS selectors / XPath expressions
"""
from typing import List, Tuple
from dataclasses import dataclass, field
from selenium.webdriver.common.by import By

Locator = Tuple[str, str]

XPATH_PREFIXES = ("/", "(", "./")


def is_xpath(selector: str) -> bool:
    """XPath expressions start with a path or a grouping parenthesis"""
    return selector.strip().startswith(XPATH_PREFIXES)


def to_locator(selector) -> Locator:
    """
    Convert a selector string into a Selenium (By, value) locator

    Args:
        selector: CSS selector, XPath expression, or an existing (By, value) tuple

    Returns:
        Locator tuple usable with driver.find_element(*locator)
    """
    if isinstance(selector, tuple):
        return selector
    if is_xpath(selector):
        return (By.XPATH, selector)
    return (By.CSS_SELECTOR, selector)


def xpath_literal(text: str) -> str:
    """Quote a value for use inside an XPath expression"""
    if "'" not in text:
        return f"'{text}'"
    if '"' not in text:
        return f'"{text}"'
    parts = text.split("'")
    return "concat(" + ", \"'\", ".join(f"'{part}'" for part in parts) + ")"


@dataclass
class SelectorConfig:
    """Configuration for element selectors with fallbacks"""
    primary: str
    fallbacks: List[str] = field(default_factory=list)
    description: str = ""

    def all_selectors(self) -> List[str]:
        """Get all selectors in priority order"""
        return [self.primary] + self.fallbacks

    def locators(self) -> List[Locator]:
        return [to_locator(selector) for selector in self.all_selectors()]

    def extended(self, *extra: str) -> "SelectorConfig":
        """Copy of this chain with extra selectors appended"""
        return SelectorConfig(self.primary, self.fallbacks + list(extra), self.description)

    def __len__(self) -> int:
        return 1 + len(self.fallbacks)

    def __str__(self) -> str:
        return self.description or self.primary


def chain(description: str, *selectors: str) -> SelectorConfig:
    """Build a SelectorConfig from selectors listed in priority order"""
    if not selectors:
        raise ValueError("A selector chain needs at least one selector")
    return SelectorConfig(primary=selectors[0], fallbacks=list(selectors[1:]), description=description)


# Shared chains used by more than one page

COOKIE_ACCEPT = chain(
    "cookie accept button",
    "//a[@id='wt-cli-accept-all-btn']",
    "//button[contains(text(), 'Accept All')]",
    "//button[contains(text(), 'Accept')]",
    "button[class*='accept']",
    "[data-accept='all']",
    ".accept-all, [class*='accept'], [id*='accept']",
)

PAGE_BODY = chain("page body", "body")
