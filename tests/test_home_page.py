import pytest
from selenium.common.exceptions import WebDriverException

from insider_e2e.core.config import settings
from insider_e2e.core.errors import PageActionError
from insider_e2e.pages.home_page import HomePage

from conftest import FakeElement, PAGE_TIMEOUTS


@pytest.fixture
def home(fake_driver):
    return HomePage(fake_driver, **PAGE_TIMEOUTS)


def go_to(driver, url):
    def navigate():
        driver.current_url = url
    return navigate


def test_navigate_to_home_page_opens_base_url_and_accepts_cookies(home, fake_driver):
    cookie_button = fake_driver.add("//a[@id='wt-cli-accept-all-btn']", FakeElement("Accept All"))

    home.navigate_to_home_page()

    assert fake_driver.visited == [settings.BASE_URL]
    assert cookie_button.clicks == 1


def test_home_page_loaded_with_logo_and_content(home, fake_driver):
    fake_driver.add("a[href='/'] img", FakeElement())
    fake_driver.add("body", FakeElement("Insider"))

    assert home.is_insider_logo_displayed()
    assert not home.is_navigation_menu_displayed()
    assert home.is_home_page_loaded()


def test_home_page_not_loaded_without_logo(home, fake_driver):
    fake_driver.add("nav", FakeElement())
    fake_driver.add("body", FakeElement())

    assert not home.is_home_page_loaded()


def test_logo_found_through_fallback_selector(home, fake_driver):
    fake_driver.add("//*[contains(@class, 'logo')]//img", FakeElement())

    assert home.is_insider_logo_displayed()


def test_page_header_text(home, fake_driver):
    assert home.get_page_header_text() == ""

    fake_driver.add("h1", FakeElement("  #1 AI-native platform  "))
    assert home.get_page_header_text() == "#1 AI-native platform"


def test_careers_through_company_menu(home, fake_driver):
    company = fake_driver.add("//nav//a[normalize-space()='Company']", FakeElement("Company"))
    careers = fake_driver.add(
        "//a[normalize-space()='Careers']",
        FakeElement("Careers", on_click=go_to(fake_driver, settings.CAREERS_URL)),
    )

    home.navigate_to_careers_through_company_menu()

    assert company.clicks == 1
    assert careers.clicks == 1
    assert fake_driver.current_url == settings.CAREERS_URL
    assert fake_driver.visited == []


def test_careers_through_direct_link_when_menu_missing(home, fake_driver):
    link = fake_driver.add(
        "nav a[href*='careers']",
        FakeElement("Careers", on_click=go_to(fake_driver, settings.CAREERS_URL)),
    )

    home.navigate_to_careers_through_company_menu()

    assert link.clicks == 1
    assert fake_driver.visited == []


def test_careers_through_direct_url_as_last_resort(home, fake_driver):
    home.navigate_to_careers_through_company_menu()

    assert fake_driver.visited == [settings.CAREERS_URL]


def test_careers_navigation_fails_loudly(home, fake_driver):
    # Direct URL redirects somewhere else
    fake_driver.route(settings.CAREERS_URL, on_load=lambda d: setattr(d, "current_url", settings.BASE_URL))

    with pytest.raises(PageActionError, match="still on"):
        home.navigate_to_careers_through_company_menu()


def test_driver_errors_during_navigation_are_wrapped(home, fake_driver):
    def broken_get(url):
        raise WebDriverException("session deleted")

    fake_driver.get = broken_get

    with pytest.raises(PageActionError) as excinfo:
        home.navigate_to_careers_through_company_menu()

    assert isinstance(excinfo.value.__cause__, WebDriverException)


def test_required_menu_clicks_raise(home):
    with pytest.raises(PageActionError, match="Careers menu link"):
        home.click_careers_menu_item()
    with pytest.raises(PageActionError, match="Company menu"):
        home.click_company_menu_item()


def test_refresh_page_accepts_cookies_again(home, fake_driver):
    cookie_button = fake_driver.add("//a[@id='wt-cli-accept-all-btn']", FakeElement("Accept All"))

    home.refresh_page()

    assert fake_driver.refreshed == 1
    assert cookie_button.clicks == 1


def test_page_load_check_is_idempotent(home, fake_driver):
    fake_driver.current_url = settings.BASE_URL
    logo = fake_driver.add("a[href='/'] img", FakeElement())
    company = fake_driver.add("//nav//a[normalize-space()='Company']", FakeElement("Company"))
    cookie_button = fake_driver.add("//a[@id='wt-cli-accept-all-btn']", FakeElement("Accept All"))
    fake_driver.add("nav", FakeElement())

    first = home.is_home_page_loaded()
    second = home.is_home_page_loaded()

    assert first is second is True
    assert fake_driver.visited == []
    assert fake_driver.current_url == settings.BASE_URL
    assert fake_driver.window_handles == ["main"]
    assert logo.clicks == company.clicks == cookie_button.clicks == 0
