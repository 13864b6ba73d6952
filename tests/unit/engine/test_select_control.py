"""
Tests for SelectControl - native and composite select handles.
"""

import pytest
from unittest.mock import MagicMock

from label_locator.engine.select_control import (
    CompositeSelect,
    NativeSelect,
    wrap_select,
)
from label_locator.exceptions import OptionNotFoundError


def _element(make_document, html, xpath="//body/*[1]"):
    return make_document(html).find(xpath)


class TestNativeSelect:
    """Test NativeSelect over a parsed <select>."""

    HTML = (
        '<select id="state">'
        '<option value="">Select State</option>'
        '<option value="IN">  India </option>'
        '<option value="CA">Canada</option>'
        '</select>'
    )

    def test_options_are_whitespace_normalized(self, make_document):
        """Option texts are trimmed and collapsed."""
        select = NativeSelect(_element(make_document, self.HTML))

        assert select.options == ["Select State", "India", "Canada"]

    def test_default_selection_is_first_option(self, make_document):
        """A single-choice select shows its first option by default."""
        select = NativeSelect(_element(make_document, self.HTML))

        assert select.selected_option_text == "Select State"

    def test_select_by_text(self, make_document):
        """Selecting by visible text updates the selected option."""
        select = NativeSelect(_element(make_document, self.HTML))

        select.select_by_text("Canada")

        assert select.selected_option_text == "Canada"
        assert select.element.value() == "CA"

    def test_select_unknown_text(self, make_document):
        """Unknown option text raises with the available options."""
        select = NativeSelect(_element(make_document, self.HTML))

        with pytest.raises(OptionNotFoundError) as exc_info:
            select.select_by_text("Mexico")

        assert exc_info.value.option == "Mexico"
        assert "Canada" in exc_info.value.available

    def test_multiple_select_without_selection(self, make_document):
        """A multi-select with nothing chosen has no selected text."""
        select = NativeSelect(_element(
            make_document,
            '<select multiple><option>India</option><option>Canada</option></select>',
        ))

        assert select.selected_option_text is None

    def test_empty_select(self, make_document):
        """A select still waiting for its options is empty."""
        select = NativeSelect(_element(make_document, "<select></select>"))

        assert select.options == []
        assert select.selected_option_text is None


class TestCompositeSelect:
    """Test CompositeSelect over ARIA widgets."""

    def test_role_options_preferred_over_children(self, make_document):
        """Descendants with role=option are the options when present."""
        select = CompositeSelect(_element(
            make_document,
            '<div role="listbox"><p>Pick one</p>'
            '<ul><li role="option">India</li><li role="option">Canada</li></ul></div>',
        ))

        assert select.options == ["India", "Canada"]

    def test_children_used_without_role_options(self, make_document):
        """Direct children are the options when none carry role=option."""
        select = CompositeSelect(_element(
            make_document,
            '<div role="listbox"><span>India</span><span>Canada</span></div>',
        ))

        assert select.options == ["India", "Canada"]

    def test_select_and_read_back(self, make_document):
        """Clicking an option marks it aria-selected."""
        select = CompositeSelect(_element(
            make_document,
            '<div role="listbox">'
            '<div role="option" aria-selected="true">India</div>'
            '<div role="option">Canada</div>'
            '</div>',
        ))
        assert select.selected_option_text == "India"

        select.select_by_text("Canada")

        assert select.selected_option_text == "Canada"

    def test_select_unknown_text(self, make_document):
        """Unknown option text raises."""
        select = CompositeSelect(_element(
            make_document,
            '<div role="listbox"><div role="option">India</div></div>',
        ))

        with pytest.raises(OptionNotFoundError) as exc_info:
            select.select_by_text("Canada")

        assert exc_info.value.available == ["India"]

    def test_combobox_is_opened_before_choosing(self):
        """A combobox container is clicked before its option."""
        option = MagicMock()
        option.text.return_value = "Canada"
        container = MagicMock()
        container.get_attribute.side_effect = lambda name: "combobox" if name == "role" else None
        container.find_all.return_value = [option]

        CompositeSelect(container).select_by_text("Canada")

        container.click.assert_called_once()
        option.click.assert_called_once()

    def test_listbox_is_not_clicked(self):
        """A listbox is always open, so only the option is clicked."""
        option = MagicMock()
        option.text.return_value = "Canada"
        container = MagicMock()
        container.get_attribute.side_effect = lambda name: "listbox" if name == "role" else None
        container.find_all.return_value = [option]

        CompositeSelect(container).select_by_text("Canada")

        container.click.assert_not_called()
        option.click.assert_called_once()


class TestWrapSelect:
    """Test nested-versus-container resolution."""

    def test_native(self, make_document):
        assert isinstance(wrap_select(_element(make_document, "<select></select>")), NativeSelect)

    def test_composite_with_nested_select(self, make_document):
        """The nested <select> is preferred over its container."""
        wrapped = wrap_select(_element(
            make_document,
            '<div role="combobox"><select id="inner"></select></div>',
        ))

        assert isinstance(wrapped, NativeSelect)
        assert wrapped.element.get_attribute("id") == "inner"

    def test_composite_container(self, make_document):
        wrapped = wrap_select(_element(make_document, '<div role="listbox" id="lb"></div>'))

        assert isinstance(wrapped, CompositeSelect)
        assert wrapped.element.get_attribute("id") == "lb"

    def test_not_select_like(self, make_document):
        """Plain elements are not wrapped."""
        assert wrap_select(_element(make_document, '<div id="plain"></div>')) is None
