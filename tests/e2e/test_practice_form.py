"""
End-to-end run against the live automation practice form.

Needs network access and installed Playwright browsers
(``playwright install chromium``); enable with LABEL_LOCATOR_E2E=1.
"""

import os

import pytest

from label_locator.browsers import PlaywrightSession
from label_locator.config import PRACTICE_FORM_URL
from label_locator.engine import LabelResolver
from label_locator.scenarios import run_practice_form

pytestmark = [
    pytest.mark.e2e,
    pytest.mark.skipif(os.environ.get("LABEL_LOCATOR_E2E") != "1", reason="set LABEL_LOCATOR_E2E=1 to run"),
]


@pytest.fixture(scope="module")
def live_settings():
    from label_locator.config import Settings
    return Settings()


def test_practice_form_scenarios(live_settings):
    """First name, gender and state resolve and take input on the live form."""
    with PlaywrightSession(live_settings) as session:
        document = session.open(PRACTICE_FORM_URL)
        results = run_practice_form(LabelResolver(document))

    for result in results:
        assert result.passed, f"{result.name}: {result.error or result.actual!r}"


def test_unknown_label_on_live_form(live_settings):
    from label_locator.exceptions import ElementNotFoundError

    with PlaywrightSession(live_settings) as session:
        resolver = LabelResolver(session.open(PRACTICE_FORM_URL))
        with pytest.raises(ElementNotFoundError):
            resolver.resolve_input("Definitely Not A Label")
