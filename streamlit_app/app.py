"""
Calorie Tracker - Streamlit Frontend Main Entry Point.

Single page listing today's calorie entries with forms to add, change and
delete them. Run with:

    streamlit run streamlit_app/app.py

Every interaction reruns this script. The order below matters: the controller
loads once per session (mount), then reloads if the previous interaction
marked the collection stale (sync), and only then renders.
"""

import sys
from pathlib import Path

# Ensure the streamlit_app directory is in the Python path
# This allows imports to work regardless of how the app is run
streamlit_app_dir = Path(__file__).parent
if str(streamlit_app_dir) not in sys.path:
    sys.path.insert(0, str(streamlit_app_dir))

# Add project root to path so we can import the tracker package
project_root = streamlit_app_dir.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

# Import config early to load .env file before any other code accesses environment variables
from tracker.config import BackendConfig, configure_logging

import streamlit as st

from utils.state import get_controller
from utils.ui_components import (
    render_create_form,
    render_edit_entry_form,
    render_edit_ingredients_form,
    render_entry_rows,
    render_entry_summary,
    render_ingredient_lookup,
)
from ui.feedback import show_empty_state, show_error, working_spinner
from ui.layout import page_header

configure_logging()

# Page configuration - must be called before any other Streamlit commands
st.set_page_config(
    page_title="Calorie Tracker",
    page_icon="🥗",
    layout="wide",
    initial_sidebar_state="expanded"
)

controller = get_controller()
state = controller.state

with working_spinner("Loading entries…"):
    controller.mount()
    controller.sync()

# Sidebar with lookup and backend info
with st.sidebar:
    st.markdown("### 🥗 **Calorie Tracker**")
    st.divider()
    render_ingredient_lookup(controller)
    st.divider()
    st.caption(f"Backend: {BackendConfig.get_backend_url()}")

page_header("Calorie Tracker", subtitle="Track what you eat today.")

if state.last_error:
    show_error(
        state.last_error,
        hint="Nothing was retried. Check that the backend is running and try again.",
        on_dismiss=controller.dismiss_error,
    )

st.button("Track today's calories", type="primary", on_click=controller.open_create)

render_create_form(controller)
render_edit_ingredients_form(controller)
render_edit_entry_form(controller)

st.divider()

rows = controller.row_views()
if not rows:
    show_empty_state(
        title="No entries yet",
        subtitle="Add what you ate to start tracking calories and fat.",
        action_label="Track today's calories",
        on_action=controller.open_create,
    )
else:
    render_entry_summary(state.entries)
    st.markdown("<br>", unsafe_allow_html=True)
    render_entry_rows(rows)
