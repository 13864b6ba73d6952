"""
Browser and resolution exceptions.
"""

from typing import List, Optional

from label_locator.exceptions.base import LabelLocatorError


class BrowserError(LabelLocatorError):
    """Base exception for browser and document errors."""
    pass


class BrowserLaunchError(BrowserError):
    """
    Error launching the browser.

    Raised when the browser fails to start, which could be due to:
    - Missing browser binaries or drivers
    - Invalid browser options
    - The engine's Python package not being installed
    """
    pass


class NavigationError(BrowserError):
    """
    Error during page navigation.

    Raised when the session cannot load its target URL.
    """

    def __init__(self, message: str, url: str | None = None):
        super().__init__(message, {"url": url})
        self.url = url


class ElementNotFoundError(BrowserError):
    """
    No control could be resolved for a label.

    Raised only after every strategy of a resolution chain was tried.
    The message always embeds the requested label text verbatim.

    Attributes:
        kind: The requested control category
        label: The label text exactly as requested
    """

    def __init__(self, message: str, kind: Optional[str] = None, label: Optional[str] = None):
        super().__init__(message, {"kind": kind, "label": label})
        self.kind = kind
        self.label = label


class OptionNotFoundError(BrowserError):
    """
    A select-like control has no option with the requested visible text.
    """

    def __init__(self, message: str, option: str, available: Optional[List[str]] = None):
        super().__init__(message, {"option": option, "available": available or []})
        self.option = option
        self.available = available or []


class WaitTimeoutError(BrowserError):
    """
    A boundary wait did not see its condition within the timeout.

    Distinct from ElementNotFoundError: the resolver never catches it.
    """

    def __init__(self, message: str, timeout_s: float, operation: str | None = None):
        super().__init__(message, {"timeout_s": timeout_s, "operation": operation})
        self.timeout_s = timeout_s
        self.operation = operation
