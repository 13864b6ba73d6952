"""
Configuration module - Centralized settings management.

Usage:
    from label_locator.config import get_settings, load_config

    # Get global settings (loaded once)
    settings = get_settings()

    # Or load fresh settings with overrides
    settings = load_config(browser={"headless": False})

Environment Variables:
    LABEL_LOCATOR__BROWSER__ENGINE=selenium
    LABEL_LOCATOR__BROWSER__HEADLESS=false
    LABEL_LOCATOR__RESOLVER__VERIFY_CATEGORY=false
"""

from label_locator.config.settings import (
    PRACTICE_FORM_URL,
    Settings,
    BrowserSettings,
    ResolverSettings,
    LoggingSettings,
)
from label_locator.config.loader import ConfigLoader, load_config

# Global settings singleton
_settings: Settings | None = None


def get_settings() -> Settings:
    """
    Get the global settings instance (singleton).

    Settings are loaded once from environment variables and config files.
    Call reset_settings() to reload.
    """
    global _settings
    if _settings is None:
        _settings = load_config()
    return _settings


def reset_settings() -> None:
    """Reset the global settings (forces reload on next get_settings())."""
    global _settings
    _settings = None


__all__ = [
    "PRACTICE_FORM_URL",
    "Settings",
    "BrowserSettings",
    "ResolverSettings",
    "LoggingSettings",
    "ConfigLoader",
    "load_config",
    "get_settings",
    "reset_settings",
]
