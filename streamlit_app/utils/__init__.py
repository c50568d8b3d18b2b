"""
Utility modules for the Streamlit frontend.

This package contains:
- state: Session state binding for the entries controller
- ui_components: Entry rows, forms and summary widgets
"""
