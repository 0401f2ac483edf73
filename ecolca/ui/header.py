"""Page header: logo, dashboard title and the product being edited."""

import streamlit as st

from ..config.paths import LOGO_CANDIDATES
from ..utils.file_utils import FileUtils


class Header:
    """Top banner shown above every page."""

    TITLE = "Product Life Cycle Impact Dashboard"

    def __init__(self):
        self.logo_tag = FileUtils.create_logo_tag(FileUtils.load_logo_bytes(LOGO_CANDIDATES), 64)

    def render(self):
        logo_col, title_col, product_col = st.columns([1, 4, 1])
        logo_col.markdown(self.logo_tag, unsafe_allow_html=True)
        title_col.markdown(f"<div class='brand-title'>{self.TITLE}</div>", unsafe_allow_html=True)

        state = st.session_state.get("lca_state")
        if state is not None and state.current_product is not None:
            product_col.caption(f"Editing: **{state.current_product.name}**")
