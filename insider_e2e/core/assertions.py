"""Page-state assertions that log the compared values before failing"""

import logging

logger = logging.getLogger(__name__)


def assert_url_contains(driver, expected_url_part: str, message: str) -> None:
    actual_url = driver.current_url
    logger.info(f"🔗 URL Assertion - Expected to contain: '{expected_url_part}', Actual: '{actual_url}'")
    if expected_url_part not in actual_url:
        raise AssertionError(f"{message} - Expected URL to contain: {expected_url_part}, but was: {actual_url}")


def assert_title_contains(driver, expected_title_part: str, message: str) -> None:
    actual_title = driver.title
    logger.info(f"📝 Title Assertion - Expected to contain: '{expected_title_part}', Actual: '{actual_title}'")
    if expected_title_part not in actual_title:
        raise AssertionError(f"{message} - Expected title to contain: {expected_title_part}, but was: {actual_title}")


def assert_element_displayed(is_displayed: bool, element_description: str) -> None:
    logger.info(f"👁️ Element Display Assertion: {element_description} - {'✓ Visible' if is_displayed else '✗ Not visible'}")
    if not is_displayed:
        raise AssertionError(f"{element_description} should be displayed")


def assert_element_not_displayed(is_displayed: bool, element_description: str) -> None:
    if is_displayed:
        raise AssertionError(f"{element_description} should not be displayed")


def assert_true(condition: bool, message: str) -> None:
    logger.info(f"✅ Boolean Assertion: {message} - {'✓ Passed' if condition else '✗ Failed'}")
    if not condition:
        raise AssertionError(message)


def assert_false(condition: bool, message: str) -> None:
    logger.info(f"❎ Boolean Assertion (expect False): {message} - {'✓ Passed' if not condition else '✗ Failed'}")
    if condition:
        raise AssertionError(message)


def assert_equals(actual, expected, message: str) -> None:
    logger.info(f"⚖️ Equality Assertion - Expected: '{expected}', Actual: '{actual}'")
    if actual != expected:
        raise AssertionError(f"{message} - Expected: {expected}, but was: {actual}")
