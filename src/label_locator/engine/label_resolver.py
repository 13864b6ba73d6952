"""
Label Resolver - Find form controls by the text of their labels.

Each control category has its own ordered strategy chain. Every strategy
returns a control or None; the first control wins and later strategies
are not run. Label-relative strategies are skipped when no label
contains the requested text, which leaves only the document-wide
fallbacks at the end of each chain.

Input chain:
1. association         - label[for] -> element with that id
2. following_sibling   - first <input> after the label
3. descendant          - <input> inside the label
4. placeholder_or_name - input[placeholder=T] or input[name*=T]

Radio chain:
1. association         - label[for] -> element with that id
2. preceding_radio     - nearest radio before the label
3. following_radio     - nearest radio after the label
4. value               - input[type=radio][value=T]

Select chain:
1. association_native     - label[for] -> <select>
2. association_composite  - label[for] -> role=combobox|listbox
3. following_native       - first <select> after the label
4. following_composite    - first combobox/listbox after the label
5. descendant_native      - <select> inside the label
6. select_name            - select[name*=T]
7. composite_aria_or_name - combobox/listbox with aria-label*=T or name*=T

Steps 3 to 5 only run for labels without a for attribute.
Composite hits resolve to the <select> nested inside them when there is
one, otherwise to the container itself.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Callable, Dict, List, Optional, Tuple, Union
import logging

from label_locator.engine import queries
from label_locator.engine.select_control import (
    NativeSelect,
    SelectControl,
    wrap_select,
)
from label_locator.exceptions import ElementNotFoundError, WaitTimeoutError
from label_locator.interfaces.document import IDocument, IElement

logger = logging.getLogger(__name__)


class ControlKind(Enum):
    """Control categories the resolver can find."""
    INPUT = "input"
    RADIO = "radio"
    SELECT_OR_COMBOBOX = "select"


NOT_FOUND_MESSAGES = {
    ControlKind.INPUT: "Could not find input field with label: {label}",
    ControlKind.RADIO: "Could not find radio button with label: {label}",
    ControlKind.SELECT_OR_COMBOBOX: "Could not find select or combobox element with label: {label}",
}

# Input types that cannot hold typed text
NON_TEXT_INPUT_TYPES = {"radio", "checkbox", "hidden", "submit", "button", "reset", "image", "file"}

Control = Union[IElement, SelectControl]
Strategy = Callable[[str, Optional[IElement]], Optional[Control]]


@dataclass
class Resolution:
    """
    The outcome of a successful resolution.

    Attributes:
        control: The resolved element, or a SelectControl for selects
        kind: Requested control category
        label: Label text exactly as requested
        strategy: Name of the strategy that found the control
    """
    control: Control
    kind: ControlKind
    label: str
    strategy: str

    @property
    def element(self) -> IElement:
        """The underlying element, unwrapping select controls."""
        if isinstance(self.control, SelectControl):
            return self.control.element
        return self.control


class LabelResolver:
    """
    Resolve input, radio and select/combobox controls by label text.

    Label matching is case-sensitive substring containment against the
    label's own text nodes. Nothing is cached between calls.

    Usage:
        resolver = LabelResolver(document)
        first_name = resolver.resolve_input("First Name")
        first_name.fill("John")

    Args:
        document: Document to resolve in
        verify_category: When True, an element reached through a label's
            ``for`` attribute must match the requested category, otherwise
            the chain moves on. When False it is returned as-is.
    """

    def __init__(self, document: IDocument, verify_category: bool = True):
        self._document = document
        self._verify_category = verify_category

        self._chains: Dict[ControlKind, List[Tuple[str, Strategy]]] = {
            ControlKind.INPUT: [
                ("association", self._input_by_association),
                ("following_sibling", self._input_following_sibling),
                ("descendant", self._input_descendant),
                ("placeholder_or_name", self._input_by_placeholder_or_name),
            ],
            ControlKind.RADIO: [
                ("association", self._radio_by_association),
                ("preceding_radio", self._radio_preceding),
                ("following_radio", self._radio_following),
                ("value", self._radio_by_value),
            ],
            ControlKind.SELECT_OR_COMBOBOX: [
                ("association_native", self._select_association_native),
                ("association_composite", self._select_association_composite),
                ("following_native", self._select_following_native),
                ("following_composite", self._select_following_composite),
                ("descendant_native", self._select_descendant_native),
                ("select_name", self._select_by_name),
                ("composite_aria_or_name", self._composite_by_aria_or_name),
            ],
        }

    @property
    def document(self) -> IDocument:
        return self._document

    def strategy_names(self, kind: ControlKind) -> List[str]:
        """Strategy names of a chain, in the order they are tried."""
        return [name for name, _ in self._chains[kind]]

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def resolve_input(self, label: str) -> IElement:
        """Resolve the text input captioned by ``label``."""
        return self.resolve(label, ControlKind.INPUT).control

    def resolve_radio(self, label: str) -> IElement:
        """Resolve the radio button captioned by ``label``."""
        return self.resolve(label, ControlKind.RADIO).control

    def resolve_select(self, label: str) -> SelectControl:
        """Resolve the select or combobox captioned by ``label``."""
        return self.resolve(label, ControlKind.SELECT_OR_COMBOBOX).control

    def resolve(self, label: str, kind: Union[ControlKind, str]) -> Resolution:
        """
        Run the strategy chain of ``kind`` for ``label``.

        Args:
            label: Label text; matched by containment, never stripped
            kind: Control category (enum or its value, e.g. "radio")

        Returns:
            Resolution naming the control and the strategy that found it

        Raises:
            ElementNotFoundError: If every strategy of the chain came up empty
        """
        kind = ControlKind(kind)
        label_element = self._attempt("label", lambda text, _: self.find_label(text), label, None)
        if label_element is None:
            logger.debug(f"No label contains '{label}', using document-wide fallbacks")

        for name, strategy in self._chains[kind]:
            control = self._attempt(name, strategy, label, label_element)
            if control is not None:
                logger.info(f"Resolved {kind.value} '{label}' via {name}")
                return Resolution(control=control, kind=kind, label=label, strategy=name)

        raise ElementNotFoundError(
            NOT_FOUND_MESSAGES[kind].format(label=label),
            kind=kind.value,
            label=label,
        )

    def find_label(self, text: str) -> Optional[IElement]:
        """First <label> in document order whose text contains ``text``."""
        return self._document.find(queries.label_containing(text))

    # ------------------------------------------------------------------
    # Chain plumbing
    # ------------------------------------------------------------------

    def _attempt(
        self,
        name: str,
        strategy: Strategy,
        label: str,
        label_element: Optional[IElement],
    ) -> Optional[Control]:
        """Run one strategy; any backend fault means "not applicable"."""
        try:
            return strategy(label, label_element)
        except WaitTimeoutError:
            raise
        except Exception as e:
            logger.debug(f"Strategy {name} failed for '{label}': {e}")
            return None

    def _associated(self, label_element: Optional[IElement]) -> Optional[IElement]:
        """The element named by the label's for attribute."""
        if label_element is None:
            return None
        target_id = label_element.get_attribute("for")
        if not target_id:
            return None
        return self._document.find_by_id(target_id)

    @staticmethod
    def _relative(label_element: Optional[IElement], xpath: str) -> Optional[IElement]:
        if label_element is None:
            return None
        return label_element.find(xpath)

    @staticmethod
    def _has_association(label_element: Optional[IElement]) -> bool:
        return label_element is not None and bool(label_element.get_attribute("for"))

    def _select_relative(self, label_element: Optional[IElement], xpath: str) -> Optional[IElement]:
        # A label with a for attribute only names its control by id
        if self._has_association(label_element):
            return None
        return self._relative(label_element, xpath)

    @staticmethod
    def _is_text_input(element: IElement) -> bool:
        if element.tag_name == "textarea":
            return True
        if element.tag_name != "input":
            return False
        input_type = (element.get_attribute("type") or "text").lower()
        return input_type not in NON_TEXT_INPUT_TYPES

    @staticmethod
    def _is_radio(element: IElement) -> bool:
        return (
            element.tag_name == "input"
            and (element.get_attribute("type") or "").lower() == "radio"
        )

    # ------------------------------------------------------------------
    # Input strategies
    # ------------------------------------------------------------------

    def _input_by_association(self, label: str, label_element: Optional[IElement]) -> Optional[IElement]:
        element = self._associated(label_element)
        if element is None:
            return None
        if self._verify_category and not self._is_text_input(element):
            logger.debug(f"Label '{label}' points at {element.describe()}, not a text input")
            return None
        return element

    def _input_following_sibling(self, label: str, label_element: Optional[IElement]) -> Optional[IElement]:
        return self._relative(label_element, queries.FOLLOWING_INPUT)

    def _input_descendant(self, label: str, label_element: Optional[IElement]) -> Optional[IElement]:
        return self._relative(label_element, queries.DESCENDANT_INPUT)

    def _input_by_placeholder_or_name(self, label: str, label_element: Optional[IElement]) -> Optional[IElement]:
        return self._document.find(queries.input_by_placeholder_or_name(label))

    # ------------------------------------------------------------------
    # Radio strategies
    # ------------------------------------------------------------------

    def _radio_by_association(self, label: str, label_element: Optional[IElement]) -> Optional[IElement]:
        element = self._associated(label_element)
        if element is None:
            return None
        if self._verify_category and not self._is_radio(element):
            logger.debug(f"Label '{label}' points at {element.describe()}, not a radio button")
            return None
        return element

    def _radio_preceding(self, label: str, label_element: Optional[IElement]) -> Optional[IElement]:
        return self._relative(label_element, queries.PRECEDING_RADIO)

    def _radio_following(self, label: str, label_element: Optional[IElement]) -> Optional[IElement]:
        return self._relative(label_element, queries.FOLLOWING_RADIO)

    def _radio_by_value(self, label: str, label_element: Optional[IElement]) -> Optional[IElement]:
        return self._document.find(queries.radio_by_value(label))

    # ------------------------------------------------------------------
    # Select strategies
    # ------------------------------------------------------------------

    def _select_association_native(self, label: str, label_element: Optional[IElement]) -> Optional[SelectControl]:
        element = self._associated(label_element)
        if element is not None and element.tag_name == "select":
            return NativeSelect(element)
        return None

    def _select_association_composite(self, label: str, label_element: Optional[IElement]) -> Optional[SelectControl]:
        element = self._associated(label_element)
        if element is None or element.tag_name == "select":
            return None
        return wrap_select(element)

    def _select_following_native(self, label: str, label_element: Optional[IElement]) -> Optional[SelectControl]:
        element = self._select_relative(label_element, queries.FOLLOWING_SELECT)
        return NativeSelect(element) if element is not None else None

    def _select_following_composite(self, label: str, label_element: Optional[IElement]) -> Optional[SelectControl]:
        element = self._select_relative(label_element, queries.FOLLOWING_COMPOSITE)
        return wrap_select(element) if element is not None else None

    def _select_descendant_native(self, label: str, label_element: Optional[IElement]) -> Optional[SelectControl]:
        element = self._select_relative(label_element, queries.DESCENDANT_SELECT)
        return NativeSelect(element) if element is not None else None

    def _select_by_name(self, label: str, label_element: Optional[IElement]) -> Optional[SelectControl]:
        element = self._document.find(queries.select_by_name(label))
        return NativeSelect(element) if element is not None else None

    def _composite_by_aria_or_name(self, label: str, label_element: Optional[IElement]) -> Optional[SelectControl]:
        element = self._document.find(queries.composite_by_aria_label_or_name(label))
        return wrap_select(element) if element is not None else None
