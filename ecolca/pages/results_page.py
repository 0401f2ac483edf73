"""Results page for displaying LCA calculation results."""

import logging

import pandas as pd
import plotly.express as px
import streamlit as st

from ..config.settings import BG, MUTED, POP, STAGE_COLORS
from ..models.results import LCAResults
from ..reports import generate_docx_report, stage_breakdown_frame
from ..ui.insights import build_insights
from ..utils.factors import factor_comparison_rows
from ..utils.file_utils import FileUtils

logger = logging.getLogger(__name__)


def _style(fig):
    fig.update_layout(
        plot_bgcolor=BG, paper_bgcolor=BG,
        font=dict(color="#111", size=13),
        title_x=0.5, title_font_size=18,
    )
    return fig


class ResultsPage:
    """Results page for displaying LCA calculation results."""

    @staticmethod
    def _render_kpis(R: LCAResults):
        """Summary metric cards."""
        water = (f"{R.water_usage / 1000:.1f}", "k liters") if R.water_usage > 1000 else (f"{R.water_usage:.0f}", "liters")
        cards = [
            ("CO₂ Emissions", f"{R.total_carbon_footprint / 1000:.2f}", "tons CO₂e"),
            ("Energy Use", f"{R.energy_consumption:,.0f}", "kWh"),
            ("Water Usage", *water),
            ("Circularity Score", f"{R.recyclability_score:.0f}", "%"),
            ("Sustainability Index", f"{R.sustainability_score:.0f}", "/100"),
        ]
        for col, (title, value, unit) in zip(st.columns(len(cards)), cards):
            col.markdown(
                f"<div class='metric'><div>{title}</div><h2>{value}</h2><small>{unit}</small></div>",
                unsafe_allow_html=True,
            )

    @staticmethod
    def _render_breakdown(R: LCAResults):
        """Stage breakdown chart and table."""
        df = stage_breakdown_frame(R)
        a, b = st.columns([3, 2])
        with a:
            fig = px.bar(
                df, x="Stage", y="CO₂e (kg)", color="Stage",
                title="Carbon Footprint By Stage", color_discrete_map=STAGE_COLORS,
            )
            st.plotly_chart(_style(fig), use_container_width=True)
        with b:
            st.dataframe(df, use_container_width=True, hide_index=True)
            c1, c2 = st.columns(2)
            c1.metric("Waste", f"{R.waste_generation:,.2f} kg")
            c2.metric("Material Efficiency", f"{R.material_efficiency:.1f}")

    @staticmethod
    def _render_context_charts(state):
        """End-of-life mix and material factor comparison."""
        c, d = st.columns(2)
        with c:
            scenarios = state.current_product.end_of_life_scenarios if state.current_product else []
            if scenarios:
                eol = pd.DataFrame([{"Pathway": s.name, "Share": s.percentage} for s in scenarios])
                fig = px.pie(eol, names="Pathway", values="Share", title="End-Of-Life Distribution", hole=0.4)
                st.plotly_chart(_style(fig), use_container_width=True)
            else:
                st.info("No end-of-life scenarios defined.")
        with d:
            factors = pd.DataFrame(factor_comparison_rows())
            fig = px.bar(
                factors, x="Material", y=["Raw", "Recycled"], barmode="group",
                title="CO₂e Per Unit: Raw vs Recycled", color_discrete_sequence=[MUTED, POP],
            )
            st.plotly_chart(_style(fig), use_container_width=True)

    @staticmethod
    def _render_insights(R: LCAResults):
        """Recommendations and insight cards."""
        st.markdown("#### Insights & Recommendations")
        for card in build_insights(R):
            st.markdown(
                f"<div class='insight insight-{card['kind']}'><h4>{card['title']}</h4><p>{card['message']}</p></div>",
                unsafe_allow_html=True,
            )

    @staticmethod
    def _render_report_section(state, R: LCAResults):
        """DOCX report download."""
        product = state.current_product
        notes = st.text_area("Executive Notes")
        try:
            report = generate_docx_report(product, R, notes)
        except Exception as e:
            logger.exception("Report generation failed")
            st.error(f"Could not build the report: {e}")
            return
        st.download_button(
            "⬇️ Download Report (DOCX)",
            data=report,
            file_name=FileUtils.safe_filename(product.name, "docx"),
            mime="application/vnd.openxmlformats-officedocument.wordprocessingml.document",
        )

    @staticmethod
    def render():
        """Render the complete results page."""
        st.markdown("## Results & Analysis")
        state = st.session_state.lca_state
        R = state.calculations

        if R is None or state.current_product is None:
            st.info("Go to the Product Builder and run a calculation first.")
            ResultsPage._render_insights_placeholder()
            return

        st.caption(
            f"{state.current_product.name} · functional unit {state.current_product.functional_unit} · "
            f"lifespan {state.current_product.lifespan:g} years"
        )
        ResultsPage._render_kpis(R)

        t0, t1, t2 = st.tabs(["Breakdown", "Insights", "Report"])
        with t0:
            ResultsPage._render_breakdown(R)
            ResultsPage._render_context_charts(state)
        with t1:
            ResultsPage._render_insights(R)
        with t2:
            ResultsPage._render_report_section(state, R)

    @staticmethod
    def _render_insights_placeholder():
        for card in build_insights(None):
            st.markdown(
                f"<div class='insight insight-{card['kind']}'><h4>{card['title']}</h4><p>{card['message']}</p></div>",
                unsafe_allow_html=True,
            )
