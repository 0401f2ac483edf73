"""Application settings and constants."""

import streamlit as st

# Visual Theme
BG = "#F3F6F1"       # Mist
POP = "#2E9E6B"      # Leaf green for highlights
MUTED = "#94A3B8"    # Slate for raw-material bars

STAGE_COLORS = {
    "Materials": "#2E9E6B",
    "Manufacturing": "#0EA5E9",
    "Transport": "#F59E0B",
    "Use": "#8B5CF6",
    "End Of Life": "#64748B",
}

def initialize_session_state():
    """Initialize session state defaults. Call after st.set_page_config()."""
    from ..utils.state import LCAState

    if "lang" not in st.session_state:
        st.session_state.lang = "en"

    # One caller-owned state object per browser session
    if "lca_state" not in st.session_state:
        st.session_state.lca_state = LCAState()

# Page configuration
PAGE_CONFIG = {
    "page_title": "EcoLCA | Product Impact Dashboard",
    "page_icon": "🌿",
    "layout": "wide",
    "initial_sidebar_state": "expanded",
}
