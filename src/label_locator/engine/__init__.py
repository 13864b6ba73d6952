"""
Engine module - Label-driven control resolution.

Components:
- LabelResolver: ordered strategy chains per control category
- SelectControl: native and composite select handles behind one interface
- queries: XPath builders with safe literal quoting
"""

from label_locator.engine.label_resolver import (
    ControlKind,
    LabelResolver,
    Resolution,
)
from label_locator.engine.select_control import (
    CompositeSelect,
    NativeSelect,
    SelectControl,
    wrap_select,
)

__all__ = [
    "ControlKind",
    "LabelResolver",
    "Resolution",
    "CompositeSelect",
    "NativeSelect",
    "SelectControl",
    "wrap_select",
]
