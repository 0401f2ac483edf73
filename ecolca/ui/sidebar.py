"""Sidebar component for navigation."""

import streamlit as st
from ..utils.i18n import Translator, LANGUAGES

class Sidebar:
    """Application sidebar for navigation and session controls."""

    def __init__(self):
        self.t = Translator.t

    def pages(self) -> list:
        """Navigation labels in display order."""
        return [
            self.t("nav.builder", "Product Builder"),
            self.t("nav.results", "Results"),
            self.t("nav.products", "Saved Products"),
            self.t("nav.user_guide", "User Guide"),
        ]

    def render(self) -> str:
        """Render the sidebar and return the selected page."""
        with st.sidebar:
            st.markdown("### 🌿 EcoLCA")
            page = st.radio("Navigation", self.pages(), label_visibility="collapsed")

            st.markdown("---")
            codes = list(LANGUAGES)
            lang = st.selectbox(
                self.t("sidebar.language", "Language"),
                options=codes,
                index=codes.index(Translator.get_language()),
                format_func=LANGUAGES.get,
            )
            if lang != Translator.get_language():
                Translator.set_language(lang)
                st.rerun()

            state = st.session_state.get("lca_state")
            if state is not None and state.last_calculated is not None:
                st.caption(f"Last calculated: {state.last_calculated:%H:%M:%S}")

            return page
