"""
Session State Module.

Binds the entry synchronization state to Streamlit's session_state so that it
survives reruns. UIState lives under a single key; the controller is rebuilt on
every run around that same object.

# NOTE: session_state is per browser session. Refreshing the page starts a new
    session, which triggers a fresh initial load.
"""

import streamlit as st

from tracker.sync import EntryListController, UIState

# Session state key for the UI state
UI_STATE_KEY = "entries_ui_state"


def get_ui_state() -> UIState:
    """
    Get the UIState for this session, creating it on first use.

    Returns:
        The session's UIState instance.
    """
    state = st.session_state.get(UI_STATE_KEY)
    if not isinstance(state, UIState):
        state = UIState()
        st.session_state[UI_STATE_KEY] = state
    return state


def get_controller() -> EntryListController:
    """Build a controller around this session's UIState."""
    return EntryListController(get_ui_state())
