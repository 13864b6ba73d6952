"""
HTML Document - Offline implementation of IDocument backed by lxml.

Parses an HTML string or file and answers the same XPath queries a
browser would. Interactions mutate the parsed tree the way a browser
updates form state: typing sets ``value``, clicking a radio checks it and
unchecks its group, choosing an option marks it ``selected``. Clicking a
``role=option`` element marks it ``aria-selected``, which is what most
composite widget scripts do.

No scripts run and there is no layout, so the document is always
"complete" and scrolling is a no-op.

Example:
    >>> document = HtmlDocument.from_string('<label for="fn">First Name</label><input id="fn">')
    >>> LabelResolver(document).resolve_input("First Name").get_attribute("id")
    'fn'
"""

from pathlib import Path
from typing import Any, List, Optional, Union
import logging

import lxml.html
from lxml import etree

from label_locator.exceptions import BrowserError, OptionNotFoundError
from label_locator.interfaces.document import IDocument, IElement

logger = logging.getLogger(__name__)


def _normalize(text: Optional[str]) -> str:
    return " ".join((text or "").split())


class HtmlElement(IElement):
    """
    lxml implementation of IElement.

    Two handles are equal when they point at the same node, so repeated
    lookups of the same control compare equal.
    """

    def __init__(self, node: Any):
        self._node = node

    @property
    def node(self) -> Any:
        """The wrapped lxml element."""
        return self._node

    @property
    def tag_name(self) -> str:
        return str(self._node.tag).lower()

    def find(self, xpath: str) -> Optional[IElement]:
        matches = self.find_all(xpath)
        return matches[0] if matches else None

    def find_all(self, xpath: str) -> List[IElement]:
        return [HtmlElement(node) for node in self._node.xpath(xpath) if etree.iselement(node)]

    def get_attribute(self, name: str) -> Optional[str]:
        return self._node.get(name)

    def text(self) -> str:
        return self._node.text_content()

    def value(self) -> str:
        if self.tag_name == "textarea":
            return self._node.get("value", self._node.text_content())
        if self.tag_name == "select":
            for option in self._node.xpath(".//option"):
                if option.get("selected") is not None:
                    return option.get("value", _normalize(option.text_content()))
            return ""
        return self._node.get("value", "")

    def click(self) -> None:
        if self._is_disabled():
            logger.debug(f"Ignoring click on disabled {self.describe()}")
            return

        input_type = (self._node.get("type") or "").lower()
        if self.tag_name == "input" and input_type == "radio":
            self._check_radio()
        elif self.tag_name == "input" and input_type == "checkbox":
            if self._node.get("checked") is None:
                self._node.set("checked", "checked")
            else:
                del self._node.attrib["checked"]
        elif self.tag_name == "option":
            select = self._ancestor("select")
            if select is not None:
                HtmlElement(select)._select_node(self._node)
        elif self._node.get("role") == "option":
            self._mark_aria_selected()

    def fill(self, value: str) -> None:
        self._require_editable()
        if self.tag_name == "textarea":
            self._node.text = value
        self._node.set("value", value)

    def clear(self) -> None:
        self.fill("")

    def is_selected(self) -> bool:
        if self.tag_name == "option":
            return self._node.get("selected") is not None
        if self.tag_name == "input":
            return self._node.get("checked") is not None
        return self._node.get("aria-selected") == "true"

    def select_option_by_text(self, text: str) -> None:
        if self.tag_name != "select":
            raise BrowserError(f"Cannot select an option in {self.describe()}")
        options = self._node.xpath(".//option")
        for option in options:
            if _normalize(option.text_content()) == text:
                self._select_node(option)
                return
        raise OptionNotFoundError(
            f"No option with text '{text}' in {self.describe()}",
            option=text,
            available=[_normalize(o.text_content()) for o in options],
        )

    def scroll_into_view(self) -> None:
        pass

    def _is_disabled(self) -> bool:
        return self._node.get("disabled") is not None

    def _require_editable(self) -> None:
        if self.tag_name not in ("input", "textarea"):
            raise BrowserError(f"Cannot type into {self.describe()}")
        if self._is_disabled() or self._node.get("readonly") is not None:
            raise BrowserError(f"{self.describe()} is not editable")

    def _ancestor(self, tag: str) -> Any:
        matches = self._node.xpath(f"ancestor::{tag}[1]")
        return matches[0] if matches else None

    def _check_radio(self) -> None:
        name = self._node.get("name")
        if name:
            scope = self._ancestor("form")
            if scope is None:
                scope = self._node.getroottree().getroot()
            for radio in scope.iter("input"):
                if (radio.get("type") or "").lower() == "radio" and radio.get("name") == name:
                    radio.attrib.pop("checked", None)
        self._node.set("checked", "checked")

    def _select_node(self, option: Any) -> None:
        if self._node.get("multiple") is None:
            for other in self._node.xpath(".//option"):
                other.attrib.pop("selected", None)
        option.set("selected", "selected")

    def _mark_aria_selected(self) -> None:
        container = self._node.xpath("ancestor::*[@role='listbox' or @role='combobox'][1]")
        scope = container[0] if container else self._node.getparent()
        if scope is not None:
            for other in scope.xpath(".//*[@role='option']"):
                other.set("aria-selected", "false")
        self._node.set("aria-selected", "true")

    def _path(self) -> str:
        return self._node.getroottree().getpath(self._node)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, HtmlElement):
            return NotImplemented
        return self._node is other._node or (
            self._node.getroottree().getroot() is other._node.getroottree().getroot()
            and self._path() == other._path()
        )

    def __hash__(self) -> int:
        return hash(self._path())

    def __repr__(self) -> str:
        return f"HtmlElement({self.describe()})"


class HtmlDocument(IDocument):
    """
    lxml implementation of IDocument.

    Example:
        >>> document = HtmlDocument.from_file("form.html")
        >>> document.find("//select").tag_name
        'select'
    """

    def __init__(self, root: Any):
        """
        Initialize the document.

        Args:
            root: Root lxml element of a parsed HTML document
        """
        self._root = root

    @classmethod
    def from_string(cls, html: str) -> "HtmlDocument":
        """Parse a document (or a fragment, which is wrapped in <html><body>)."""
        if not html.strip():
            raise BrowserError("Cannot parse an empty HTML document")
        return cls(lxml.html.document_fromstring(html))

    @classmethod
    def from_file(cls, path: Union[str, Path]) -> "HtmlDocument":
        """Parse a document from a file."""
        path = Path(path)
        try:
            html = path.read_text(encoding="utf-8")
        except OSError as e:
            raise BrowserError(f"Cannot read HTML file {path}: {e}", {"path": str(path)})
        return cls.from_string(html)

    def find(self, xpath: str) -> Optional[IElement]:
        matches = self.find_all(xpath)
        return matches[0] if matches else None

    def find_all(self, xpath: str) -> List[IElement]:
        return [HtmlElement(node) for node in self._root.xpath(xpath) if etree.iselement(node)]

    def ready_state(self) -> str:
        return "complete"

    def execute_script(self, script: str, *args: Any) -> Any:
        raise BrowserError("HtmlDocument does not run scripts", {"script": script[:100]})

    def to_html(self) -> str:
        """Serialize the current state of the document."""
        return lxml.html.tostring(self._root, encoding="unicode")
