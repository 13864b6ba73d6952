"""
Tests for the practice-form scenarios, run against the offline copy of the form.
"""

import pytest
from unittest.mock import patch

from label_locator.browsers import HtmlElement
from label_locator.engine import LabelResolver
from label_locator.exceptions import (
    ElementNotFoundError,
    OptionNotFoundError,
    WaitTimeoutError,
)
from label_locator.scenarios import (
    ScenarioResult,
    choose_option_by_label,
    choose_radio_by_label,
    fill_input_by_label,
    run_practice_form,
)


@pytest.fixture
def resolver(practice_form):
    return LabelResolver(practice_form)


class TestFillInput:
    """Type into the First Name field."""

    def test_fills_first_name(self, resolver, practice_form):
        result = fill_input_by_label(resolver, "First Name", "John")

        assert result.passed
        assert practice_form.find_by_id("fname").value() == "John"

    def test_replaces_existing_value(self, resolver, practice_form):
        practice_form.find_by_id("fname").fill("Jane")

        result = fill_input_by_label(resolver, "First Name", "John")

        assert result.actual == "John"

    def test_unknown_label(self, resolver):
        with pytest.raises(ElementNotFoundError, match="Could not find input field with label: Middle Name"):
            fill_input_by_label(resolver, "Middle Name", "X")


class TestChooseRadio:
    """Choose the Male gender."""

    def test_selects_male(self, resolver, practice_form):
        result = choose_radio_by_label(resolver, "Male")

        assert result.passed
        assert practice_form.find_by_id("male").is_selected() is True
        assert practice_form.find_by_id("female").is_selected() is False

    def test_switches_selection(self, resolver, practice_form):
        practice_form.find_by_id("female").click()

        choose_radio_by_label(resolver, "Male")

        assert practice_form.find_by_id("female").is_selected() is False

    def test_already_selected_is_not_clicked(self, resolver, practice_form):
        practice_form.find_by_id("male").click()

        with patch.object(HtmlElement, "click", autospec=True) as click:
            result = choose_radio_by_label(resolver, "Male")

        click.assert_not_called()
        assert result.passed


class TestChooseOption:
    """Pick Canada as the state."""

    def test_selects_canada(self, resolver, practice_form):
        result = choose_option_by_label(resolver, "State", "Canada", options_timeout_s=0.1)

        assert result.passed
        assert practice_form.find_by_id("state").value() == "Canada"

    def test_unknown_option(self, resolver):
        with pytest.raises(OptionNotFoundError) as exc_info:
            choose_option_by_label(resolver, "State", "Mexico", options_timeout_s=0.1)

        assert "Canada" in exc_info.value.available

    def test_options_never_populated(self, make_resolver):
        resolver = make_resolver('<label for="s">State</label><select id="s"></select>')

        with pytest.raises(WaitTimeoutError):
            choose_option_by_label(resolver, "State", "Canada", options_timeout_s=0.02, poll_interval_s=0.005)


class TestRunPracticeForm:
    """Run all three scenarios."""

    def test_all_pass(self, resolver):
        results = run_practice_form(resolver, options_timeout_s=0.1, poll_interval_s=0.01)

        assert [r.name for r in results] == ["fill input", "choose radio", "choose option"]
        assert all(r.passed for r in results)

    def test_failure_does_not_stop_others(self, make_resolver):
        """A missing control is recorded and the remaining scenarios still run."""
        resolver = make_resolver(
            '<input type="radio" id="m" name="g"><label for="m">Male</label>'
            '<label for="s">State</label><select id="s"><option>Canada</option></select>'
        )

        results = run_practice_form(resolver, options_timeout_s=0.1, poll_interval_s=0.01)

        assert results[0].passed is False
        assert results[0].error == "Could not find input field with label: First Name"
        assert results[1].passed
        assert results[2].passed


class TestScenarioResult:
    """Test pass/fail evaluation."""

    def test_error_fails(self):
        result = ScenarioResult(name="x", label="y", expected=None, error="boom")

        assert result.passed is False

    def test_mismatch_fails(self):
        result = ScenarioResult(name="x", label="y", expected="a", actual="b")

        assert result.passed is False
