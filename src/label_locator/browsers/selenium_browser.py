"""
Selenium Browser - Implementation of IDocument and ISession using Selenium WebDriver.

Selenium is an optional dependency (``pip install label-locator[selenium]``)
and is only imported when this backend is used.
"""

from typing import Any, List, Optional, TYPE_CHECKING
import logging

from selenium import webdriver
from selenium.common.exceptions import NoSuchElementException, WebDriverException
from selenium.webdriver.common.by import By
from selenium.webdriver.support.ui import Select

from label_locator.exceptions import (
    BrowserLaunchError,
    NavigationError,
    OptionNotFoundError,
)
from label_locator.interfaces.document import IDocument, IElement, ISession

if TYPE_CHECKING:
    from label_locator.config import Settings

logger = logging.getLogger(__name__)


class SeleniumElement(IElement):
    """
    Selenium implementation of IElement.

    Wraps a WebElement together with the driver that found it.
    """

    def __init__(self, element: Any, driver: Any):
        self._element = element
        self._driver = driver

    @property
    def web_element(self) -> Any:
        return self._element

    @property
    def tag_name(self) -> str:
        return self._element.tag_name.lower()

    def find(self, xpath: str) -> Optional[IElement]:
        matches = self._element.find_elements(By.XPATH, xpath)
        return SeleniumElement(matches[0], self._driver) if matches else None

    def find_all(self, xpath: str) -> List[IElement]:
        return [SeleniumElement(match, self._driver) for match in self._element.find_elements(By.XPATH, xpath)]

    def get_attribute(self, name: str) -> Optional[str]:
        return self._element.get_attribute(name)

    def text(self) -> str:
        # .text is empty for elements that are not rendered (closed dropdowns)
        return self._element.text or self._element.get_attribute("textContent") or ""

    def value(self) -> str:
        return self._element.get_attribute("value") or ""

    def click(self) -> None:
        self._element.click()

    def fill(self, value: str) -> None:
        self._element.clear()
        self._element.send_keys(value)

    def clear(self) -> None:
        self._element.clear()

    def is_selected(self) -> bool:
        if self._element.get_attribute("aria-selected") == "true":
            return True
        return self._element.is_selected()

    def select_option_by_text(self, text: str) -> None:
        select = Select(self._element)
        try:
            select.select_by_visible_text(text)
        except NoSuchElementException:
            raise OptionNotFoundError(
                f"No option with text '{text}' in {self.describe()}",
                option=text,
                available=[option.text for option in select.options],
            )

    def scroll_into_view(self) -> None:
        self._driver.execute_script("arguments[0].scrollIntoView(true);", self._element)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SeleniumElement):
            return NotImplemented
        return self._element == other._element

    def __hash__(self) -> int:
        return hash(self._element.id)


class SeleniumDocument(IDocument):
    """
    Selenium implementation of IDocument.

    Wraps a WebDriver.
    """

    def __init__(self, driver: Any):
        self._driver = driver

    @property
    def driver(self) -> Any:
        return self._driver

    def find(self, xpath: str) -> Optional[IElement]:
        matches = self._driver.find_elements(By.XPATH, xpath)
        return SeleniumElement(matches[0], self._driver) if matches else None

    def find_all(self, xpath: str) -> List[IElement]:
        return [SeleniumElement(match, self._driver) for match in self._driver.find_elements(By.XPATH, xpath)]

    def ready_state(self) -> str:
        return self._driver.execute_script("return document.readyState")

    def execute_script(self, script: str, *args: Any) -> Any:
        """Run a script body; arguments are available as ``arguments[i]``."""
        unwrapped = [arg.web_element if isinstance(arg, SeleniumElement) else arg for arg in args]
        return self._driver.execute_script(script, *unwrapped)


class SeleniumSession(ISession):
    """
    Browser session driven by Selenium WebDriver.

    Example:
        >>> with SeleniumSession(settings) as session:
        ...     document = session.open("https://example.com/form")
    """

    def __init__(self, settings: "Settings"):
        super().__init__(settings)
        self._driver: Any = None

    @property
    def is_connected(self) -> bool:
        """Check if browser is connected."""
        return self._driver is not None

    def start(self) -> None:
        """Launch the browser."""
        browser_settings = self._settings.browser

        if browser_settings.browser_type == "firefox":
            options = webdriver.FirefoxOptions()
            factory = webdriver.Firefox
        elif browser_settings.browser_type == "chromium":
            options = webdriver.ChromeOptions()
            factory = webdriver.Chrome
        else:
            raise BrowserLaunchError(
                f"Selenium cannot drive {browser_settings.browser_type}",
                {"browser_type": browser_settings.browser_type},
            )

        if browser_settings.headless:
            options.add_argument("--headless=new" if factory is webdriver.Chrome else "-headless")
        elif browser_settings.start_maximized and factory is webdriver.Chrome:
            options.add_argument("--start-maximized")

        try:
            self._driver = factory(options=options)
        except WebDriverException as e:
            raise BrowserLaunchError(
                f"Failed to launch {browser_settings.browser_type}: {e.msg}",
                {"browser_type": browser_settings.browser_type},
            )

        if browser_settings.start_maximized and not browser_settings.headless and factory is webdriver.Firefox:
            self._driver.maximize_window()
        self._driver.set_page_load_timeout(browser_settings.navigation_timeout_ms / 1000)
        logger.info(f"Launched {browser_settings.browser_type} via Selenium (headless={browser_settings.headless})")

    def navigate(self, url: str) -> IDocument:
        if self._driver is None:
            self.start()
        try:
            self._driver.get(url)
        except WebDriverException as e:
            raise NavigationError(f"Failed to navigate to {url}: {e.msg}", url=url)
        return SeleniumDocument(self._driver)

    def close(self) -> None:
        """Close the browser."""
        if self._driver:
            self._driver.quit()
            self._driver = None
