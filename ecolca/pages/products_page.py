"""Saved products page for managing stored product descriptions."""

import pandas as pd
import streamlit as st

from ..utils.product_store import ProductStore
from ..utils.state import NoProductSelectedError

class ProductsPage:
    """Save, load and delete product descriptions."""

    @staticmethod
    def _render_save_tab(state, store: ProductStore):
        """Render the save tab."""
        st.subheader("Save Current Product")

        product = state.current_product
        if product is None:
            st.warning("No product to save. Create one on the Product Builder page first.")
            return

        col1, col2, col3 = st.columns(3)
        col1.metric("Materials", len(product.materials))
        col2.metric("Processes", len(product.processes))
        col3.metric("Last Edited", f"{product.updated_at:%Y-%m-%d %H:%M}")

        if st.button("💾 Save Product", type="primary"):
            try:
                success, message = state.save_product(store)
            except NoProductSelectedError as e:
                st.error(str(e))
                return
            if success:
                st.success(message)
            else:
                st.error(message)

    @staticmethod
    def _render_load_tab(state):
        """Render the load tab."""
        st.subheader("📂 Load Saved Product")

        if not state.products:
            st.info("No products saved yet.")
            return

        rows = [
            {
                "Name": p.name,
                "Description": p.description[:50] + ("..." if len(p.description) > 50 else ""),
                "Updated": f"{p.updated_at:%Y-%m-%d %H:%M}",
                "Materials": len(p.materials),
                "Processes": len(p.processes),
            }
            for p in state.products
        ]
        df = pd.DataFrame(rows).sort_values("Updated", ascending=False)
        st.dataframe(df, use_container_width=True, hide_index=True)

        names = {p.id: f"{p.name} ({p.updated_at:%Y-%m-%d %H:%M})" for p in state.products}
        col1, col2 = st.columns([3, 1])
        with col1:
            selected = st.selectbox("Select Product To Load", options=list(names), format_func=names.get)
        with col2:
            st.markdown("<br>", unsafe_allow_html=True)
            load_button = st.button("📂 Load", type="primary")

        if load_button and selected:
            product = state.load_product(selected)
            if product is not None:
                st.success(f"Loaded '{product.name}'. Go to the Product Builder or run a calculation.")
            else:
                st.error("Product not found.")

    @staticmethod
    def _render_manage_tab(state, store: ProductStore):
        """Render the manage tab."""
        st.subheader("🗂️ Manage Products")

        stats = store.get_summary_stats()
        col1, col2, col3, col4 = st.columns(4)
        col1.metric("Saved Products", stats["total_products"])
        col2.metric("Latest", stats["latest_product"] or "None")
        col3.metric("Total Materials", stats["total_materials"])
        col4.metric("Total Processes", stats["total_processes"])

        if not state.products:
            return

        st.markdown("---")
        st.warning("⚠️ Deletion is permanent and cannot be undone!")
        names = {p.id: p.name for p in state.products}
        col1, col2 = st.columns([3, 1])
        with col1:
            to_delete = st.selectbox("Select Product To Delete", options=list(names), format_func=names.get)
        with col2:
            st.markdown("<br>", unsafe_allow_html=True)
            confirm = st.checkbox("Confirm")

        if st.button("🗑️ Delete", disabled=not confirm) and to_delete:
            success, message = state.delete_product(to_delete, store)
            if success:
                st.success(message)
                st.rerun()
            else:
                st.error(message)

    @staticmethod
    def render():
        """Render the complete saved products page."""
        st.header("📁 Saved Products")

        store = st.session_state.product_store
        state = st.session_state.lca_state

        tab1, tab2, tab3 = st.tabs(["💾 Save", "📂 Load", "🗂️ Manage"])
        with tab1:
            ProductsPage._render_save_tab(state, store)
        with tab2:
            ProductsPage._render_load_tab(state)
        with tab3:
            ProductsPage._render_manage_tab(state, store)
