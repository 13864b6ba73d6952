"""
Select Control - One interface over native <select> and ARIA composite widgets.

A label may caption either a native option list or a custom
combobox/listbox built from plain elements. Callers get a SelectControl
in both cases and never branch on the markup shape:

    select = resolver.resolve_select("State")
    wait_for_options(select)
    select.select_by_text("Canada")
    assert select.selected_option_text == "Canada"
"""

from abc import ABC, abstractmethod
from typing import List, Optional, TYPE_CHECKING
import logging

from label_locator.engine import queries
from label_locator.exceptions import OptionNotFoundError

if TYPE_CHECKING:
    from label_locator.interfaces.document import IElement

logger = logging.getLogger(__name__)


def _visible_text(element: "IElement") -> str:
    return " ".join((element.text() or "").split())


class SelectControl(ABC):
    """
    Select-like control handle.

    Attributes:
        element: The wrapped element (the <select> or the composite container)
    """

    kind: str = ""

    def __init__(self, element: "IElement"):
        self.element = element

    @abstractmethod
    def option_elements(self) -> List["IElement"]:
        """The elements acting as options, in document order."""
        ...

    @property
    def options(self) -> List[str]:
        """Visible text of every option, whitespace-normalized."""
        return [_visible_text(option) for option in self.option_elements()]

    @abstractmethod
    def select_by_text(self, text: str) -> None:
        """
        Select the option whose visible text equals ``text``.

        Raises:
            OptionNotFoundError: If no option has this text
        """
        ...

    @property
    @abstractmethod
    def selected_option_text(self) -> Optional[str]:
        """Visible text of the currently selected option, or None."""
        ...

    def _option_not_found(self, text: str) -> OptionNotFoundError:
        available = self.options
        return OptionNotFoundError(
            f"No option with text '{text}' in {self.element.describe()}",
            option=text,
            available=available,
        )

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.element.describe()})"


class NativeSelect(SelectControl):
    """A native <select> element."""

    kind = "native"

    def option_elements(self) -> List["IElement"]:
        return self.element.find_all(queries.NATIVE_OPTIONS)

    def select_by_text(self, text: str) -> None:
        if text not in self.options:
            raise self._option_not_found(text)
        self.element.select_option_by_text(text)

    @property
    def selected_option_text(self) -> Optional[str]:
        options = self.option_elements()
        for option in options:
            if option.is_selected():
                return _visible_text(option)
        # A single-choice select shows its first option when nothing is marked
        if options and self.element.get_attribute("multiple") is None:
            return _visible_text(options[0])
        return None


class CompositeSelect(SelectControl):
    """
    A role=combobox or role=listbox container without a nested <select>.

    Options are the descendants carrying role=option; when the widget
    marks none, its direct children are used instead. Selection clicks
    the container to open it, then clicks the matching option.
    """

    kind = "composite"

    def option_elements(self) -> List["IElement"]:
        options = self.element.find_all(queries.COMPOSITE_OPTIONS)
        if options:
            return options
        return self.element.find_all(queries.COMPOSITE_CHILDREN)

    def select_by_text(self, text: str) -> None:
        if self.element.get_attribute("role") == "combobox":
            self.element.click()

        for option in self.option_elements():
            if _visible_text(option) == text:
                option.scroll_into_view()
                option.click()
                logger.debug(f"Clicked composite option '{text}'")
                return
        raise self._option_not_found(text)

    @property
    def selected_option_text(self) -> Optional[str]:
        for option in self.option_elements():
            if option.get_attribute("aria-selected") == "true" or option.is_selected():
                return _visible_text(option)
        return None


def wrap_select(element: "IElement") -> Optional[SelectControl]:
    """
    Wrap a resolved element as a SelectControl.

    A <select> becomes a NativeSelect. A composite container yields the
    <select> nested inside it when there is one, otherwise the container
    itself as a CompositeSelect. Anything else is not select-like.
    """
    if element.tag_name == "select":
        return NativeSelect(element)
    if element.get_attribute("role") in ("combobox", "listbox"):
        nested = element.find(queries.DESCENDANT_SELECT)
        if nested is not None:
            return NativeSelect(nested)
        return CompositeSelect(element)
    return None
