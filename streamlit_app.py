"""
# DataFit Lab

Main entry point for the Streamlit application.

The landing page lives in app/main.py; this launcher keeps
`streamlit run streamlit_app.py` working from the repository root.
"""

import streamlit as st

# Redirect to the main application page.
# The page script is not in the root, so hand over to it explicitly.
st.switch_page("app/main.py")
