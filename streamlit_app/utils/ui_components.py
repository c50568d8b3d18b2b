"""
Reusable UI Components Module.

Rendering for the entries page: one row per entry, the three entry forms, the
KPI summary and the ingredient lookup panel. Components read from UIState and
forward user actions to the EntryListController; none of them talk to the
backend directly.
"""

import math
from typing import Any, List

import streamlit as st

from tracker.models import Entry
from tracker.summary import summarize_entries
from tracker.sync import EntryListController, EntryRow
from ui.layout import kpi_row, section


def format_value(value: Any) -> str:
    """
    Format an entry field for display.

    Returns:
        "—" for missing or NaN values, integers without a decimal part,
        everything else as text.
    """
    if value is None:
        return "—"
    if isinstance(value, float):
        if math.isnan(value):
            return "—"
        if value.is_integer():
            return str(int(value))
        return f"{value:g}"
    text = str(value).strip()
    return text or "—"


def render_entry_row(row: EntryRow) -> None:
    """
    Render one entry with its delete and edit actions.

    Each button forwards exactly one intent with the entry's id.
    """
    entry = row.entry
    with st.container(border=True):
        info_col, cal_col, fat_col, actions_col = st.columns([4, 1, 1, 3])
        with info_col:
            st.markdown(f"**Dish:** {format_value(entry.dish)}")
            st.caption(f"Ingredients: {format_value(entry.ingredients)}")
        with cal_col:
            st.metric("Calories", format_value(entry.calories))
        with fat_col:
            st.metric("Fat", format_value(entry.fat))
        with actions_col:
            st.button("Delete entry", key=f"delete_{row.entry_id}", on_click=row.delete, use_container_width=True)
            st.button(
                "Change ingredients",
                key=f"edit_ingredients_{row.entry_id}",
                on_click=row.edit_ingredients,
                use_container_width=True,
            )
            st.button("Change entry", key=f"edit_entry_{row.entry_id}", on_click=row.edit_entry, use_container_width=True)


def render_entry_rows(rows: List[EntryRow]) -> None:
    for row in rows:
        render_entry_row(row)


def render_entry_summary(entries: List[Entry]) -> None:
    """Render entry count and calorie/fat totals."""
    summary = summarize_entries(entries)
    kpi_row([
        {"label": "Entries", "value": summary.count, "icon": "🍽️"},
        {"label": "Calories", "value": format_value(summary.total_calories), "icon": "🔥"},
        {"label": "Fat", "value": format_value(summary.total_fat), "icon": "🧈"},
    ])


def render_create_form(controller: EntryListController) -> None:
    """Render the "Add Calorie Entry" form when the create flow is open."""
    state = controller.state
    if not state.create_modal_open:
        return

    draft = state.create_draft
    with st.container(border=True):
        section("Add Calorie Entry")
        with st.form("create_entry_form"):
            dish = st.text_input("dish", value=draft.dish, key="create_dish")
            ingredients = st.text_input("ingredients", value=draft.ingredients, key="create_ingredients")
            calories = st.text_input("calories", value=str(draft.calories), key="create_calories")
            fat = st.text_input("fat", value=str(draft.fat), key="create_fat")
            add_col, cancel_col = st.columns(2)
            with add_col:
                submitted = st.form_submit_button("Add", type="primary", use_container_width=True)
            with cancel_col:
                cancelled = st.form_submit_button("Cancel", use_container_width=True)

    if cancelled:
        controller.cancel_create()
        st.rerun()
    if submitted:
        draft.dish, draft.ingredients, draft.calories, draft.fat = dish, ingredients, calories, fat
        controller.submit_create()
        st.rerun()


def render_edit_entry_form(controller: EntryListController) -> None:
    """Render the "Change Entry" form for the current edit target."""
    state = controller.state
    target = state.edit_entry_target
    if not target.active:
        return

    draft = state.edit_draft
    with st.container(border=True):
        section("Change Entry")
        with st.form(f"edit_entry_form_{target.id}"):
            dish = st.text_input("dish", value=draft.dish, key=f"edit_dish_{target.id}")
            ingredients = st.text_input("ingredients", value=draft.ingredients, key=f"edit_ingredients_text_{target.id}")
            calories = st.text_input("calories", value=str(draft.calories), key=f"edit_calories_{target.id}")
            fat = st.text_input("fat", value=str(draft.fat), key=f"edit_fat_{target.id}")
            change_col, cancel_col = st.columns(2)
            with change_col:
                submitted = st.form_submit_button("Change", type="primary", use_container_width=True)
            with cancel_col:
                cancelled = st.form_submit_button("Cancel", use_container_width=True)

    if cancelled:
        controller.cancel_edit_entry()
        st.rerun()
    if submitted:
        draft.dish, draft.ingredients, draft.calories, draft.fat = dish, ingredients, calories, fat
        controller.submit_edit_entry()
        st.rerun()


def render_edit_ingredients_form(controller: EntryListController) -> None:
    """Render the "Change Ingredients" form for the current target."""
    state = controller.state
    target = state.edit_ingredients_target
    if not target.active:
        return

    with st.container(border=True):
        section("Change Ingredients")
        with st.form(f"edit_ingredients_form_{target.id}"):
            new_ingredients = st.text_input(
                "new ingredients",
                value=state.ingredients_text,
                key=f"new_ingredients_{target.id}",
            )
            change_col, cancel_col = st.columns(2)
            with change_col:
                submitted = st.form_submit_button("Change", type="primary", use_container_width=True)
            with cancel_col:
                cancelled = st.form_submit_button("Cancel", use_container_width=True)

    if cancelled:
        controller.cancel_edit_ingredients()
        st.rerun()
    if submitted:
        state.ingredients_text = new_ingredients
        controller.submit_edit_ingredients()
        st.rerun()


LOOKUP_QUERY_KEY = "ingredient_lookup_query"


def clear_ingredient_lookup(controller: EntryListController) -> None:
    """Forget the last lookup and empty the query box."""
    controller.clear_lookup()
    st.session_state[LOOKUP_QUERY_KEY] = ""


def render_ingredient_lookup(controller: EntryListController) -> None:
    """
    Sidebar panel for looking up entries by ingredient.

    Results are shown separately and never replace the main list.
    """
    state = controller.state
    st.markdown("#### Find by ingredient")
    with st.form("ingredient_lookup_form", clear_on_submit=False):
        query = st.text_input("Ingredient", key=LOOKUP_QUERY_KEY)
        search_col, clear_col = st.columns(2)
        with search_col:
            searched = st.form_submit_button("Search", use_container_width=True)
        with clear_col:
            st.form_submit_button(
                "Clear",
                on_click=clear_ingredient_lookup,
                args=(controller,),
                use_container_width=True,
            )

    if searched:
        controller.find_by_ingredient(query)

    matches = state.ingredient_matches
    if matches is None:
        return
    if not matches:
        st.caption(f"No entries with ingredients \"{state.ingredient_query}\".")
        return
    for entry in matches:
        st.markdown(
            f"- **{format_value(entry.dish)}** · {format_value(entry.calories)} kcal · {format_value(entry.fat)} g fat"
        )
