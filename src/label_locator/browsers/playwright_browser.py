"""
Playwright Browser - Implementation of IDocument and ISession using Playwright.

This module provides the default browser backend, built on Playwright's
synchronous API. Elements are Playwright locators, so every action
re-queries the live page.
"""

from typing import Any, List, Optional, TYPE_CHECKING
import logging

from playwright.sync_api import Error as PlaywrightError, sync_playwright

from label_locator.exceptions import (
    BrowserLaunchError,
    NavigationError,
    OptionNotFoundError,
)
from label_locator.interfaces.document import IDocument, IElement, ISession

if TYPE_CHECKING:
    from label_locator.config import Settings

logger = logging.getLogger(__name__)


class PlaywrightElement(IElement):
    """
    Playwright implementation of IElement.

    Wraps a Playwright Locator for interaction and inspection.
    """

    def __init__(self, locator: Any):
        """
        Initialize the element wrapper.

        Args:
            locator: Playwright Locator resolving to a single element
        """
        self._locator = locator

    @property
    def locator(self) -> Any:
        return self._locator

    @property
    def tag_name(self) -> str:
        return self._locator.evaluate("el => el.tagName.toLowerCase()")

    def find(self, xpath: str) -> Optional[IElement]:
        matches = self._locator.locator(f"xpath={xpath}")
        if matches.count() == 0:
            return None
        return PlaywrightElement(matches.first)

    def find_all(self, xpath: str) -> List[IElement]:
        return [PlaywrightElement(match) for match in self._locator.locator(f"xpath={xpath}").all()]

    def get_attribute(self, name: str) -> Optional[str]:
        return self._locator.get_attribute(name)

    def text(self) -> str:
        return self._locator.text_content() or ""

    def value(self) -> str:
        return self._locator.input_value()

    def click(self) -> None:
        self._locator.click()

    def fill(self, value: str) -> None:
        self._locator.fill(value)

    def clear(self) -> None:
        self._locator.clear()

    def is_selected(self) -> bool:
        return self._locator.evaluate(
            "el => Boolean(el.checked || el.selected || el.getAttribute('aria-selected') === 'true')"
        )

    def select_option_by_text(self, text: str) -> None:
        try:
            self._locator.select_option(label=text)
        except PlaywrightError as e:
            raise OptionNotFoundError(f"Could not select option '{text}': {e}", option=text)

    def scroll_into_view(self) -> None:
        self._locator.scroll_into_view_if_needed()

    def __repr__(self) -> str:
        return f"PlaywrightElement({self._locator})"


class PlaywrightDocument(IDocument):
    """
    Playwright implementation of IDocument.

    Wraps a Playwright Page.
    """

    def __init__(self, page: Any):
        """
        Initialize the document wrapper.

        Args:
            page: Playwright Page object
        """
        self._page = page

    @property
    def page(self) -> Any:
        return self._page

    @property
    def url(self) -> str:
        return self._page.url

    def find(self, xpath: str) -> Optional[IElement]:
        matches = self._page.locator(f"xpath={xpath}")
        if matches.count() == 0:
            return None
        return PlaywrightElement(matches.first)

    def find_all(self, xpath: str) -> List[IElement]:
        return [PlaywrightElement(match) for match in self._page.locator(f"xpath={xpath}").all()]

    def ready_state(self) -> str:
        return self._page.evaluate("document.readyState")

    def execute_script(self, script: str, *args: Any) -> Any:
        """
        Evaluate a JavaScript expression or function.

        Playwright passes a single argument, so several arguments arrive
        as one array.
        """
        if not args:
            return self._page.evaluate(script)
        if len(args) == 1:
            return self._page.evaluate(script, args[0])
        return self._page.evaluate(script, list(args))


class PlaywrightSession(ISession):
    """
    Browser session driven by Playwright.

    Example:
        >>> with PlaywrightSession(settings) as session:
        ...     document = session.open("https://example.com/form")
        ...     LabelResolver(document).resolve_input("First Name")
    """

    def __init__(self, settings: "Settings"):
        super().__init__(settings)
        self._playwright: Any = None
        self._browser: Any = None
        self._page: Any = None

    @property
    def is_connected(self) -> bool:
        """Check if browser is connected."""
        return self._browser is not None and self._browser.is_connected()

    def start(self) -> None:
        """Launch the browser and open a blank page."""
        browser_settings = self._settings.browser
        maximized = browser_settings.start_maximized and not browser_settings.headless

        launch_options: dict = {"headless": browser_settings.headless}
        if browser_settings.channel:
            launch_options["channel"] = browser_settings.channel
        if maximized and browser_settings.browser_type == "chromium":
            launch_options["args"] = ["--start-maximized"]

        try:
            self._playwright = sync_playwright().start()
            launcher = getattr(self._playwright, browser_settings.browser_type)
            self._browser = launcher.launch(**launch_options)
            # A maximized window only shows through when no fixed viewport is set
            context = self._browser.new_context(no_viewport=True) if maximized else self._browser.new_context()
            self._page = context.new_page()
            self._page.set_default_navigation_timeout(browser_settings.navigation_timeout_ms)
        except PlaywrightError as e:
            self.close()
            raise BrowserLaunchError(
                f"Failed to launch {browser_settings.browser_type}: {e}",
                {"browser_type": browser_settings.browser_type},
            )

        logger.info(f"Launched {browser_settings.browser_type} (headless={browser_settings.headless})")

    def navigate(self, url: str) -> IDocument:
        if self._page is None:
            self.start()
        try:
            self._page.goto(url)
        except PlaywrightError as e:
            raise NavigationError(f"Failed to navigate to {url}: {e}", url=url)
        return PlaywrightDocument(self._page)

    def close(self) -> None:
        """Close the browser and stop Playwright."""
        if self._browser is not None:
            try:
                self._browser.close()
            except PlaywrightError as e:
                logger.debug(f"Error closing browser: {e}")
            self._browser = None
        if self._playwright is not None:
            self._playwright.stop()
            self._playwright = None
        self._page = None
