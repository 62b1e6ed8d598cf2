from pydantic_settings import BaseSettings

class Settings(BaseSettings):
    PROJECT_NAME: str = "Insider Careers E2E"
    VERSION: str = "1.0.0"
    LOG_LEVEL: str = "INFO"

    # Site under test
    BASE_URL: str = "https://useinsider.com/"
    CAREERS_URL: str = "https://useinsider.com/careers/"
    QA_CAREERS_URL: str = "https://useinsider.com/careers/quality-assurance/"
    OPEN_POSITIONS_URL: str = "https://useinsider.com/careers/open-positions/?department=qualityassurance"
    BRAND_NAME: str = "Insider"
    DOMAIN: str = "useinsider.com"

    # Browser settings
    BROWSER: str = "chrome"  # chrome, firefox or edge
    HEADLESS: bool = False
    WINDOW_MAXIMIZE: bool = True
    WINDOW_SIZE: str = "1920,1080"  # Used when headless, maximize has no effect there

    # Timeouts in seconds
    IMPLICIT_WAIT: int = 0  # Explicit waits only; an implicit wait slows every fallback miss
    PAGE_LOAD_TIMEOUT: int = 30
    SCRIPT_TIMEOUT: int = 15
    DEFAULT_TIMEOUT: float = 15.0  # Explicit wait for a single required element
    FALLBACK_TIMEOUT: float = 3.0  # Per-locator wait inside a fallback chain
    POLL_FREQUENCY: float = 0.5

    # Failure artifacts
    SCREENSHOT_ON_FAILURE: bool = True
    SCREENSHOT_PATH: str = "screenshots"

    # Live scenarios hit the real website, keep them opt-in
    RUN_LIVE: bool = False

    class Config:  # pylint: disable=R0903
        env_file = ".env"
        extra = "ignore"  # Ignore extra fields from .env file
        frozen = True


settings = Settings()
