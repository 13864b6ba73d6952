"""
Practice-form scenarios.

The three interactions the automation practice form is checked with:
type a first name, choose a gender, pick a state. Each resolves its
control by label text, interacts with it, and reports what it observed.
"""

from dataclasses import dataclass
from typing import Any, Callable, List, Optional
import logging

from label_locator.engine.label_resolver import LabelResolver
from label_locator.exceptions import LabelLocatorError
from label_locator.utils.waits import wait_for_options

logger = logging.getLogger(__name__)


@dataclass
class ScenarioResult:
    """
    Outcome of one scenario.

    Attributes:
        name: Scenario name
        label: Label text the control was resolved by
        expected: Expected observation
        actual: Observed value (None when the scenario errored)
        error: Error message when resolution or interaction failed
    """
    name: str
    label: str
    expected: Any
    actual: Any = None
    error: Optional[str] = None

    @property
    def passed(self) -> bool:
        return self.error is None and self.actual == self.expected


def fill_input_by_label(resolver: LabelResolver, label: str, value: str) -> ScenarioResult:
    """Clear the input captioned by ``label``, type ``value``, read it back."""
    field = resolver.resolve_input(label)
    field.clear()
    field.fill(value)
    return ScenarioResult(name="fill input", label=label, expected=value, actual=field.value())


def choose_radio_by_label(resolver: LabelResolver, label: str) -> ScenarioResult:
    """Select the radio captioned by ``label``; already selected radios are not clicked."""
    radio = resolver.resolve_radio(label)
    radio.scroll_into_view()
    if not radio.is_selected():
        radio.click()
    else:
        logger.debug(f"Radio '{label}' already selected")
    return ScenarioResult(name="choose radio", label=label, expected=True, actual=radio.is_selected())


def choose_option_by_label(
    resolver: LabelResolver,
    label: str,
    option: str,
    options_timeout_s: float = 5.0,
    poll_interval_s: float = 0.25,
) -> ScenarioResult:
    """Wait for the select captioned by ``label`` to have options, then pick ``option``."""
    select = resolver.resolve_select(label)
    wait_for_options(select, timeout_s=options_timeout_s, poll_interval_s=poll_interval_s)
    select.select_by_text(option)
    return ScenarioResult(
        name="choose option",
        label=label,
        expected=option,
        actual=select.selected_option_text,
    )


def run_practice_form(
    resolver: LabelResolver,
    options_timeout_s: float = 5.0,
    poll_interval_s: float = 0.25,
) -> List[ScenarioResult]:
    """
    Run the three practice-form scenarios.

    Each scenario runs independently; a failure is recorded in its result
    and does not stop the others.
    """
    steps: List[tuple] = [
        ("fill input", "First Name", "John", lambda: fill_input_by_label(resolver, "First Name", "John")),
        ("choose radio", "Male", True, lambda: choose_radio_by_label(resolver, "Male")),
        (
            "choose option",
            "State",
            "Canada",
            lambda: choose_option_by_label(resolver, "State", "Canada", options_timeout_s, poll_interval_s),
        ),
    ]

    results = []
    for name, label, expected, step in steps:
        results.append(_run_step(name, label, expected, step))
    return results


def _run_step(name: str, label: str, expected: Any, step: Callable[[], ScenarioResult]) -> ScenarioResult:
    try:
        result = step()
    except LabelLocatorError as e:
        logger.error(f"Scenario '{name}' failed: {e.message}")
        return ScenarioResult(name=name, label=label, expected=expected, error=e.message)

    if result.passed:
        logger.info(f"Scenario '{name}' passed")
    else:
        logger.warning(f"Scenario '{name}': expected {expected!r}, got {result.actual!r}")
    return result
