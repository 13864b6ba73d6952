"""
Polling waits with a fixed timeout.

These are the boundary waits used around label resolution: page readiness
before anything is resolved, and option population before a select-like
control is used. They raise WaitTimeoutError, which the resolver never
catches.
"""

import time
from dataclasses import dataclass
from typing import Callable, Optional, TypeVar, TYPE_CHECKING
import logging

from label_locator.exceptions import WaitTimeoutError

if TYPE_CHECKING:
    from label_locator.interfaces.document import IDocument
    from label_locator.engine.select_control import SelectControl

logger = logging.getLogger(__name__)

T = TypeVar("T")

DEFAULT_POLL_INTERVAL_S = 0.25


@dataclass
class WaitConfig:
    """
    Configuration for a polling wait.

    Attributes:
        timeout_s: Give up after this many seconds
        poll_interval_s: Sleep between two checks
        ignored: Exception types treated as "condition not met yet"
    """
    timeout_s: float = 10.0
    poll_interval_s: float = DEFAULT_POLL_INTERVAL_S
    ignored: tuple = ()


def wait_until(
    condition: Callable[[], T],
    config: WaitConfig,
    description: str = "condition",
    clock: Callable[[], float] = time.monotonic,
    sleep: Callable[[float], None] = time.sleep,
) -> T:
    """
    Poll ``condition`` until it returns a truthy value.

    The condition is always evaluated at least once, even with a zero
    timeout.

    Args:
        condition: Zero-argument callable
        config: Timeout, interval and ignored exceptions
        description: Used in the timeout message
        clock: Monotonic clock (injectable for tests)
        sleep: Sleep function (injectable for tests)

    Returns:
        The first truthy value returned by ``condition``

    Raises:
        WaitTimeoutError: If the timeout elapses first
    """
    deadline = clock() + config.timeout_s
    last_error: Optional[Exception] = None

    while True:
        try:
            result = condition()
            if result:
                return result
        except config.ignored as e:
            last_error = e

        if clock() >= deadline:
            break
        sleep(config.poll_interval_s)

    message = f"Timed out after {config.timeout_s:g}s waiting for {description}"
    if last_error is not None:
        message += f" (last error: {last_error})"
    raise WaitTimeoutError(message, timeout_s=config.timeout_s, operation=description)


def wait_for_page_ready(
    document: "IDocument",
    timeout_s: float = 10.0,
    poll_interval_s: float = DEFAULT_POLL_INTERVAL_S,
) -> None:
    """Block until the document's ready state is "complete"."""
    wait_until(
        lambda: document.ready_state() == "complete",
        WaitConfig(timeout_s=timeout_s, poll_interval_s=poll_interval_s),
        description="document.readyState == 'complete'",
    )
    logger.debug("Document ready")


def wait_for_options(
    select: "SelectControl",
    timeout_s: float = 5.0,
    poll_interval_s: float = DEFAULT_POLL_INTERVAL_S,
) -> int:
    """
    Block until a select-like control exposes at least one option.

    Returns:
        The option count that satisfied the wait
    """
    count = wait_until(
        lambda: len(select.options),
        WaitConfig(timeout_s=timeout_s, poll_interval_s=poll_interval_s),
        description="select options to be populated",
    )
    logger.debug(f"Select has {count} options")
    return count
