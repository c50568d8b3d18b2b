"""
UI layout and feedback helpers for the Calorie Tracker Streamlit app.
"""
