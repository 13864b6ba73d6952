"""
Browsers module - Document backends and browser sessions.
"""

from typing import Callable, Dict, TYPE_CHECKING

from label_locator.browsers.html_document import HtmlDocument, HtmlElement
from label_locator.browsers.playwright_browser import (
    PlaywrightDocument,
    PlaywrightElement,
    PlaywrightSession,
)
from label_locator.exceptions import BrowserLaunchError, ConfigurationError

if TYPE_CHECKING:
    from label_locator.config import Settings
    from label_locator.interfaces.document import ISession

__all__ = [
    "HtmlDocument",
    "HtmlElement",
    "PlaywrightDocument",
    "PlaywrightElement",
    "PlaywrightSession",
    "open_session",
]


def _playwright_factory() -> type:
    return PlaywrightSession


def _selenium_factory() -> type:
    # Lazy - selenium is an optional extra
    try:
        from label_locator.browsers.selenium_browser import SeleniumSession
    except ImportError as e:
        raise BrowserLaunchError(
            "The selenium engine needs the selenium package: pip install 'label-locator[selenium]'",
            {"error": str(e)},
        )
    return SeleniumSession


SESSION_FACTORIES: Dict[str, Callable[[], type]] = {
    "playwright": _playwright_factory,
    "selenium": _selenium_factory,
}


def open_session(settings: "Settings") -> "ISession":
    """
    Create an (unstarted) browser session for the configured engine.

    Use it as a context manager to launch and dispose of the browser:

        with open_session(settings) as session:
            document = session.open(url)
    """
    engine = settings.browser.engine
    factory = SESSION_FACTORIES.get(engine)
    if factory is None:
        raise ConfigurationError(f"Unknown browser engine: {engine}", {"engine": engine})
    return factory()(settings)
