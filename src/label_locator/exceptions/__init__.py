"""
Exceptions module - Custom exception hierarchy.

This module defines all custom exceptions used throughout Label Locator,
providing clear error types for different failure scenarios.
"""

from label_locator.exceptions.base import (
    LabelLocatorError,
    ConfigurationError,
)
from label_locator.exceptions.browser import (
    BrowserError,
    BrowserLaunchError,
    NavigationError,
    ElementNotFoundError,
    OptionNotFoundError,
    WaitTimeoutError,
)

__all__ = [
    # Base exceptions
    "LabelLocatorError",
    "ConfigurationError",
    # Browser exceptions
    "BrowserError",
    "BrowserLaunchError",
    "NavigationError",
    "ElementNotFoundError",
    "OptionNotFoundError",
    "WaitTimeoutError",
]
