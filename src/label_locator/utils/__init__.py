"""
Utilities module - Common utility functions.
"""

from label_locator.utils.logging import setup_logging
from label_locator.utils.waits import (
    WaitConfig,
    wait_until,
    wait_for_page_ready,
    wait_for_options,
)

__all__ = [
    "setup_logging",
    "WaitConfig",
    "wait_until",
    "wait_for_page_ready",
    "wait_for_options",
]
