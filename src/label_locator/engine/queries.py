"""
XPath builders for label resolution.

Label text is user-supplied, so it is always embedded through
``xpath_literal`` rather than interpolated between quotes.
"""

COMPOSITE_ROLE = "(@role='combobox' or @role='listbox')"


def xpath_literal(text: str) -> str:
    """
    Quote a string as an XPath 1.0 literal.

    XPath 1.0 has no escape sequences, so a string holding both quote
    kinds is assembled with concat().

    Example:
        First Name       ->  'First Name'
        Bob's            ->  "Bob's"
        Bob's "Diner"    ->  concat('Bob', "'", 's "Diner"')
    """
    if "'" not in text:
        return f"'{text}'"
    if '"' not in text:
        return f'"{text}"'
    parts = text.split("'")
    pieces = []
    for i, part in enumerate(parts):
        if part:
            pieces.append(f"'{part}'")
        if i < len(parts) - 1:
            pieces.append('"\'"')
    # concat() needs at least two arguments
    if len(pieces) == 1:
        return pieces[0]
    return "concat(" + ", ".join(pieces) + ")"


def label_containing(text: str) -> str:
    """First-class label lookup: a <label> with a text node containing ``text``."""
    return f"//label[text()[contains(., {xpath_literal(text)})]]"


def by_id(element_id: str) -> str:
    return f"//*[@id={xpath_literal(element_id)}]"


# Label-relative queries

FOLLOWING_INPUT = "./following-sibling::input[1]"
DESCENDANT_INPUT = ".//input"
PRECEDING_RADIO = "./preceding-sibling::input[@type='radio'][1]"
FOLLOWING_RADIO = "./following-sibling::input[@type='radio'][1]"
FOLLOWING_SELECT = "./following-sibling::select[1]"
FOLLOWING_COMPOSITE = f"./following-sibling::*[{COMPOSITE_ROLE}][1]"
DESCENDANT_SELECT = ".//select"

# Option discovery inside a composite container
COMPOSITE_OPTIONS = ".//*[@role='option']"
COMPOSITE_CHILDREN = "./*"
NATIVE_OPTIONS = ".//option"


# Document-wide fallbacks

def input_by_placeholder_or_name(text: str) -> str:
    literal = xpath_literal(text)
    return f"//input[@placeholder={literal} or contains(@name, {literal})]"


def radio_by_value(text: str) -> str:
    return f"//input[@type='radio' and @value={xpath_literal(text)}]"


def select_by_name(text: str) -> str:
    return f"//select[contains(@name, {xpath_literal(text)})]"


def composite_by_aria_label_or_name(text: str) -> str:
    literal = xpath_literal(text)
    return (
        f"//*[{COMPOSITE_ROLE} and "
        f"(contains(@aria-label, {literal}) or contains(@name, {literal}))]"
    )
