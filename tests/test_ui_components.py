"""
Tests for the Streamlit entry page components.

This module tests:
- Clearing the ingredient lookup resets both the result and the query box
- The lookup form wires its Clear button to that callback
- The page header layout
"""

from unittest.mock import MagicMock, patch

import pytest

from tracker.models import Entry
from tracker.sync import EntryListController, UIState
from ui.layout import page_header
from utils.ui_components import LOOKUP_QUERY_KEY, clear_ingredient_lookup, render_ingredient_lookup


@pytest.fixture
def controller():
    state = UIState(ingredient_query="egg", ingredient_matches=[Entry(id="1", dish="Omelette")])
    return EntryListController(state)


@pytest.fixture
def mock_st():
    with patch("utils.ui_components.st") as st:
        st.session_state = {LOOKUP_QUERY_KEY: "egg"}
        st.columns.return_value = [MagicMock(), MagicMock()]
        st.text_input.return_value = "egg"
        st.form_submit_button.return_value = False
        yield st


class TestIngredientLookup:
    """Test the ingredient lookup panel."""

    def test_clear_empties_query_box(self, controller, mock_st):
        """Test that clearing the lookup also empties the text input's session value."""
        clear_ingredient_lookup(controller)

        assert mock_st.session_state[LOOKUP_QUERY_KEY] == ""
        assert controller.state.ingredient_query == ""
        assert controller.state.ingredient_matches is None

    def test_clear_button_uses_callback(self, controller, mock_st):
        """Test that the Clear button runs the clear callback before the rerun."""
        render_ingredient_lookup(controller)

        clear_call = next(
            c for c in mock_st.form_submit_button.call_args_list if c.args and c.args[0] == "Clear"
        )
        assert clear_call.kwargs["on_click"] is clear_ingredient_lookup
        assert clear_call.kwargs["args"] == (controller,)

    def test_query_box_is_keyed_without_value(self, controller, mock_st):
        """Test that the query box is driven by its session key only."""
        render_ingredient_lookup(controller)

        _, kwargs = mock_st.text_input.call_args
        assert kwargs["key"] == LOOKUP_QUERY_KEY
        assert "value" not in kwargs

    def test_search_runs_lookup(self, controller, mock_st):
        """Test that pressing Search looks up the typed ingredient."""
        mock_st.form_submit_button.side_effect = lambda label, **kwargs: label == "Search"

        with patch.object(controller, "find_by_ingredient") as find:
            render_ingredient_lookup(controller)

        find.assert_called_once_with("egg")


class TestPageHeader:
    """Test the page header."""

    def test_title_and_subtitle(self):
        """Test that the header renders the title and its caption."""
        with patch("ui.layout.st") as st:
            page_header("Calorie Tracker", subtitle="Track what you eat today.")

        st.markdown.assert_called_once_with("# Calorie Tracker")
        st.caption.assert_called_once_with("Track what you eat today.")
        st.columns.assert_not_called()
