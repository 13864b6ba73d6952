"""
Label Locator - Find web form controls by the text of their labels.

Text inputs, radio buttons and select/combobox widgets are resolved
through an ordered chain of label-based strategies instead of ids,
classes or positional paths.

Example:
    >>> from label_locator import HtmlDocument, LabelResolver
    >>> document = HtmlDocument.from_file("form.html")
    >>> resolver = LabelResolver(document)
    >>> resolver.resolve_input("First Name").fill("John")
"""

__version__ = "0.1.0"

# Public API exports
from label_locator.browsers import HtmlDocument, open_session
from label_locator.config.settings import Settings
from label_locator.engine import ControlKind, LabelResolver, Resolution, SelectControl
from label_locator.exceptions import ElementNotFoundError, WaitTimeoutError

__all__ = [
    "HtmlDocument",
    "open_session",
    "Settings",
    "ControlKind",
    "LabelResolver",
    "Resolution",
    "SelectControl",
    "ElementNotFoundError",
    "WaitTimeoutError",
    "__version__",
]
