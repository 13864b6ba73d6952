"""
Document Interface - Abstract base classes for the documents labels are resolved in.

This module defines the contract that document backends (Playwright, Selenium,
the offline lxml document) must follow to be usable by the LabelResolver.
All queries are XPath 1.0 expressions; all operations are blocking.

Example:
    >>> from label_locator.browsers import HtmlDocument
    >>> document = HtmlDocument.from_string('<label for="fn">First Name</label><input id="fn">')
    >>> document.find("//label").text()
    'First Name'
"""

from abc import ABC, abstractmethod
from typing import Any, List, Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from label_locator.config import Settings


class IElement(ABC):
    """
    Abstract interface for a live element of a document.

    Element handles are short-lived: they are acquired per resolution
    call and never cached, since the document may change between steps.
    """

    @property
    @abstractmethod
    def tag_name(self) -> str:
        """Lower-case tag name (e.g. 'input', 'select', 'div')."""
        ...

    @abstractmethod
    def find(self, xpath: str) -> Optional["IElement"]:
        """
        Find the first element matching an XPath relative to this element.

        Args:
            xpath: XPath expression, usually starting with './'

        Returns:
            The first match in document order, or None
        """
        ...

    @abstractmethod
    def find_all(self, xpath: str) -> List["IElement"]:
        """Find all elements matching an XPath relative to this element."""
        ...

    @abstractmethod
    def get_attribute(self, name: str) -> Optional[str]:
        """
        Get an attribute value from this element.

        Returns:
            The attribute value, or None if not present
        """
        ...

    @abstractmethod
    def text(self) -> str:
        """Get the text content of this element."""
        ...

    @abstractmethod
    def value(self) -> str:
        """Get the current value of a form control."""
        ...

    @abstractmethod
    def click(self) -> None:
        """Click on this element."""
        ...

    @abstractmethod
    def fill(self, value: str) -> None:
        """Type text into this element (input/textarea)."""
        ...

    @abstractmethod
    def clear(self) -> None:
        """Clear the value of this element."""
        ...

    @abstractmethod
    def is_selected(self) -> bool:
        """Selection state of a radio, checkbox or option element."""
        ...

    @abstractmethod
    def select_option_by_text(self, text: str) -> None:
        """
        Select the option with this exact visible text in a native <select>.

        Raises:
            OptionNotFoundError: If no option has this text
        """
        ...

    @abstractmethod
    def scroll_into_view(self) -> None:
        """Scroll the element into view."""
        ...

    def describe(self) -> str:
        """Short human-readable description, e.g. '<input id="fn" name="first">'."""
        parts = [self.tag_name]
        for attr in ("id", "name", "type", "role"):
            value = self.get_attribute(attr)
            if value:
                parts.append(f'{attr}="{value}"')
        return "<" + " ".join(parts) + ">"


class IDocument(ABC):
    """
    Abstract interface for a document (a browser page or a parsed HTML file).
    """

    @abstractmethod
    def find(self, xpath: str) -> Optional[IElement]:
        """
        Find the first element matching an XPath over the whole document.

        Returns:
            The first match in document order, or None
        """
        ...

    @abstractmethod
    def find_all(self, xpath: str) -> List[IElement]:
        """Find all elements matching an XPath over the whole document."""
        ...

    def find_by_id(self, element_id: str) -> Optional[IElement]:
        """Find the element whose id attribute equals ``element_id``."""
        from label_locator.engine.queries import by_id
        return self.find(by_id(element_id))

    @abstractmethod
    def ready_state(self) -> str:
        """The document's readyState ('loading', 'interactive' or 'complete')."""
        ...

    @abstractmethod
    def execute_script(self, script: str, *args: Any) -> Any:
        """
        Execute JavaScript in the document.

        Args:
            script: Script body; backends differ in how arguments are exposed
            *args: Arguments passed to the script

        Returns:
            The script's return value
        """
        ...


class ISession(ABC):
    """
    Abstract browser session: owns a live browser and the page it shows.

    Sessions are context managers; the browser is launched on entry and
    disposed of on exit.

    Example:
        >>> with open_session(settings) as session:
        ...     document = session.open(settings.browser.base_url)
    """

    def __init__(self, settings: "Settings"):
        self._settings = settings

    @property
    def settings(self) -> "Settings":
        return self._settings

    @abstractmethod
    def start(self) -> None:
        """Launch the browser."""
        ...

    @abstractmethod
    def navigate(self, url: str) -> IDocument:
        """
        Load ``url`` and return the document for it.

        Raises:
            NavigationError: If the page cannot be loaded
        """
        ...

    @abstractmethod
    def close(self) -> None:
        """Dispose of the browser. Safe to call more than once."""
        ...

    def open(self, url: str) -> IDocument:
        """
        Navigate to ``url`` and wait until the document is ready.

        Raises:
            NavigationError: If the page cannot be loaded
            WaitTimeoutError: If readyState never becomes "complete"
        """
        from label_locator.utils.waits import wait_for_page_ready

        document = self.navigate(url)
        wait_for_page_ready(
            document,
            timeout_s=self._settings.resolver.page_ready_timeout_s,
            poll_interval_s=self._settings.resolver.poll_interval_s,
        )
        return document

    def __enter__(self) -> "ISession":
        self.start()
        return self

    def __exit__(self, exc_type: Any, exc: Any, tb: Any) -> None:
        self.close()
