"""Global CSS for the dashboard."""

import streamlit as st

from ..config.settings import BG, POP

# Background per insight card kind
INSIGHT_BACKGROUNDS = {
    "success": "#ecfdf5",
    "info": "#eff6ff",
    "warning": "#fffbeb",
    "trend": "#f5f3ff",
}


class UIStyles:
    """Theme injected once per rerun."""

    @staticmethod
    def _insight_css() -> str:
        rules = [f".insight-{kind} {{ background: {colour}; }}" for kind, colour in INSIGHT_BACKGROUNDS.items()]
        return "\n".join(rules)

    @staticmethod
    def apply_theme():
        """Inject the leaf-green theme, KPI cards and insight cards."""
        css = f"""
        <style>
          .stApp {{ background: {BG}; color: #1f2937; }}
          h1, h2, h3, h4 {{ font-weight: 600 !important; }}
          .brand-title {{ font-size: 1.6rem; font-weight: 600; color: {POP}; text-align: center; }}

          .metric {{
            background: #ffffff;
            border-left: 4px solid {POP};
            border-radius: 8px;
            padding: 12px 16px;
          }}
          .metric h2 {{ margin: 2px 0; color: {POP}; }}
          .metric small {{ color: #6b7280; }}

          .insight {{ border-radius: 8px; padding: 10px 14px; margin-bottom: 8px; }}
          .insight h4 {{ margin: 0 0 4px 0; font-size: 0.95rem; }}
          .insight p {{ margin: 0; font-size: 0.9rem; color: #374151; }}
          {UIStyles._insight_css()}

          .stTabs [aria-selected="true"] {{ border-bottom: 2px solid {POP}; }}
        </style>
        """
        st.markdown(css, unsafe_allow_html=True)
