"""
Settings - Pydantic models for type-safe configuration.

This module defines all configuration settings as Pydantic models,
providing validation, type hints, and automatic environment variable loading.

Example:
    >>> from label_locator.config import Settings, load_config
    >>> settings = load_config()  # Loads from env, yaml, and defaults
    >>> print(settings.browser.engine)
    'playwright'
"""

from typing import Literal, Optional
from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


PRACTICE_FORM_URL = "https://app.cloudqa.io/home/AutomationPracticeForm"


class BrowserSettings(BaseModel):
    """
    Browser session settings.

    Attributes:
        engine: Browser automation engine to use
        headless: Run browser in headless mode
        start_maximized: Start the browser window maximized (ignored when headless)
        browser_type: Browser family to launch
        navigation_timeout_ms: Timeout for loading the target URL
        base_url: Page opened by the practice-form scenarios
    """
    engine: Literal["playwright", "selenium"] = "playwright"
    headless: bool = True
    start_maximized: bool = True
    browser_type: Literal["chromium", "firefox", "webkit"] = "chromium"
    navigation_timeout_ms: int = Field(default=30000, ge=1000, le=300000)
    base_url: str = PRACTICE_FORM_URL

    # Playwright channel, e.g. "chrome" or "msedge"
    channel: Optional[str] = None


class ResolverSettings(BaseModel):
    """
    Label resolution settings.

    Attributes:
        verify_category: Reject association hits whose element does not
            match the requested control category
        page_ready_timeout_s: Wait for document.readyState == "complete"
        options_timeout_s: Wait for a select-like control to have options
        poll_interval_s: Polling interval of both waits
    """
    verify_category: bool = True
    page_ready_timeout_s: float = Field(default=10.0, gt=0, le=300)
    options_timeout_s: float = Field(default=5.0, gt=0, le=300)
    poll_interval_s: float = Field(default=0.25, gt=0, le=10)


class LoggingSettings(BaseModel):
    """
    Logging configuration.

    Attributes:
        level: Log level
        file: Log file path (None for console only)
    """
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    file: Optional[str] = None


class Settings(BaseSettings):
    """
    Root settings container - single source of truth for all configuration.

    Settings are loaded in this priority order (highest to lowest):
    1. Explicit values passed to constructor
    2. Environment variables (prefixed with LABEL_LOCATOR__)
    3. Config file (YAML)
    4. Default values

    Example:
        >>> settings = Settings()  # Load from env vars
        >>> settings = Settings(browser=BrowserSettings(headless=False))  # Override
    """

    model_config = SettingsConfigDict(
        env_prefix="LABEL_LOCATOR__",
        env_nested_delimiter="__",
        case_sensitive=False,
        extra="ignore",
    )

    browser: BrowserSettings = Field(default_factory=BrowserSettings)
    resolver: ResolverSettings = Field(default_factory=ResolverSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)

    debug: bool = False

    def merge_with(self, overrides: dict) -> "Settings":
        """
        Create a new Settings instance with overrides applied.

        Args:
            overrides: Dictionary of values to override

        Returns:
            New Settings instance with overrides applied
        """
        current = self.model_dump()

        def deep_merge(base: dict, updates: dict) -> dict:
            for key, value in updates.items():
                if key in base and isinstance(base[key], dict) and isinstance(value, dict):
                    deep_merge(base[key], value)
                else:
                    base[key] = value
            return base

        merged = deep_merge(current, overrides)
        return Settings(**merged)
