"""
Pytest configuration and fixtures.
"""

from pathlib import Path

import pytest

FIXTURES_DIR = Path(__file__).parent / "fixtures"


@pytest.fixture
def settings():
    """Provide test settings."""
    from label_locator.config import Settings, BrowserSettings, ResolverSettings

    return Settings(
        browser=BrowserSettings(
            engine="playwright",
            headless=True,
        ),
        resolver=ResolverSettings(
            page_ready_timeout_s=2,
            options_timeout_s=1,
            poll_interval_s=0.01,
        ),
    )


@pytest.fixture
def make_document():
    """Build an HtmlDocument from markup."""
    from label_locator.browsers import HtmlDocument

    def _make(html: str):
        return HtmlDocument.from_string(html)

    return _make


@pytest.fixture
def make_resolver(make_document):
    """Build a LabelResolver over markup."""
    from label_locator.engine import LabelResolver

    def _make(html: str, verify_category: bool = True):
        return LabelResolver(make_document(html), verify_category=verify_category)

    return _make


@pytest.fixture
def practice_form_path():
    """Path of the offline copy of the practice form."""
    return FIXTURES_DIR / "practice_form.html"


@pytest.fixture
def practice_form(practice_form_path):
    """The practice form as an HtmlDocument."""
    from label_locator.browsers import HtmlDocument

    return HtmlDocument.from_file(practice_form_path)
