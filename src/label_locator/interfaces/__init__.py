"""
Interfaces module - Abstract contracts for document backends.
"""

from label_locator.interfaces.document import IDocument, IElement, ISession

__all__ = [
    "IDocument",
    "IElement",
    "ISession",
]
