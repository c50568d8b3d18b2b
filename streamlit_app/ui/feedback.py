"""
Standardized feedback utilities for consistent error, empty, and loading states.
"""

from contextlib import contextmanager
from typing import Callable, Optional
import streamlit as st


def show_error(message: str, hint: Optional[str] = None, on_dismiss: Optional[Callable[[], None]] = None) -> None:
    """
    Display a standardized error message with optional hint and dismiss button.

    Args:
        message: Main error message to display
        hint: Optional hint text to help users resolve the issue
        on_dismiss: Optional callback; when given, a "Dismiss" button is shown
    """
    st.error(f"⚠️ {message}")
    if hint:
        st.caption(f"💡 {hint}")
    if on_dismiss is not None:
        st.button("Dismiss", key="dismiss_error_btn", on_click=on_dismiss)


def show_empty_state(
    title: str,
    subtitle: Optional[str] = None,
    action_label: str = "Get started",
    on_action: Optional[Callable[[], None]] = None,
) -> None:
    """
    Display a standardized empty state with optional action button.

    Args:
        title: Main empty state title
        subtitle: Optional subtitle/description text
        action_label: Label for the action button
        on_action: Optional callback run when the button is clicked
    """
    st.info(f"📭 **{title}**")
    if subtitle:
        st.caption(subtitle)

    if on_action is not None:
        st.button(action_label, key="empty_state_action_btn", type="primary", on_click=on_action)


@contextmanager
def working_spinner(label: str = "Working…"):
    """
    Context manager wrapper for standardized loading spinners.

    Usage:
        with working_spinner("Loading entries…"):
            controller.mount()
    """
    with st.spinner(label):
        yield
