"""Product builder page: describe materials, processes and end of life."""

import logging
import random
from typing import get_args

import pandas as pd
import streamlit as st
from pydantic import ValidationError

from ..models.product import (
    EndOfLifeScenario,
    EndOfLifeType,
    EnergyType,
    Material,
    MaterialType,
    MaterialUnit,
    ProcessStep,
    ProcessType,
    Product,
    TransportMode,
)
from ..utils.factors import ENERGY_FACTORS, material_factor
from ..utils.prediction import PARAMETERS, MODE_MULTIPLIERS, MissingDataPredictor
from ..utils.quick_entry import QuickEntryInputs, build_product, inventory_breakdown
from ..utils.state import LCAState, NoProductSelectedError

logger = logging.getLogger(__name__)

MATERIAL_TYPES = list(get_args(MaterialType))
UNITS = list(get_args(MaterialUnit))
PROCESS_TYPES = list(get_args(ProcessType))
ENERGY_TYPES = list(get_args(EnergyType))
TRANSPORT_MODES = list(get_args(TransportMode))
EOL_TYPES = list(get_args(EndOfLifeType))


def _label(value: str) -> str:
    return value.replace("_", " ").title()


class BuilderPage:
    """Form-driven editor for the current product."""

    @staticmethod
    def _state() -> LCAState:
        return st.session_state.lca_state

    @staticmethod
    def _render_product_details(state: LCAState):
        """Create a product or edit its headline fields."""
        st.subheader("Product.")
        product = state.current_product

        with st.form("product_form"):
            name = st.text_input("Name", value=product.name if product else "")
            description = st.text_area("Description", value=product.description if product else "", height=80)
            c1, c2 = st.columns(2)
            functional_unit = c1.text_input(
                "Functional Unit", value=product.functional_unit if product else "1 unit",
                help="Basis of comparison, e.g. '1 kg' or '1 unit'"
            )
            lifespan = c2.number_input(
                "Lifespan (Years)", min_value=0.1, value=float(product.lifespan if product else 10.0)
            )
            submitted = st.form_submit_button("Create Product" if product is None else "Update Product")

        if not submitted:
            return
        if not name.strip():
            st.error("Please enter a product name.")
            return

        try:
            if product is None:
                state.set_current_product(Product(
                    name=name.strip(), description=description,
                    functional_unit=functional_unit, lifespan=lifespan,
                ))
                st.success("Product created.")
            else:
                state.set_current_product(Product.model_validate({
                    **product.model_dump(),
                    "name": name.strip(), "description": description,
                    "functional_unit": functional_unit, "lifespan": lifespan,
                }))
                st.success("Product updated.")
            state.reset_calculation()
        except ValidationError as e:
            st.error(f"Invalid product: {e.errors()[0]['msg']}")

    @staticmethod
    def _render_materials(state: LCAState):
        """Material list with add/remove controls."""
        st.subheader("Materials.")
        product = state.current_product

        if product.materials:
            st.dataframe(pd.DataFrame([
                {
                    "Name": m.name,
                    "Type": _label(m.type),
                    "Quantity": f"{m.quantity:g} {m.unit}",
                    "Recycled": "Yes" if m.is_recycled else "No",
                    "Recyclability (%)": m.recyclability * 100,
                    "CO₂e / unit": m.carbon_intensity,
                }
                for m in product.materials
            ]), use_container_width=True, hide_index=True)

            c1, c2, c3 = st.columns([3, 1, 1])
            labels = {m.id: f"{m.name} ({_label(m.type)})" for m in product.materials}
            selected = c1.selectbox("Select Material", options=list(labels), format_func=labels.get, key="mat_select")
            if c2.button("Toggle Recycled", key="mat_toggle"):
                current = next(m for m in product.materials if m.id == selected)
                state.update_material(selected, {"is_recycled": not current.is_recycled})
                state.reset_calculation()
                st.rerun()
            if c3.button("Remove", key="mat_remove"):
                state.remove_material(selected)
                state.reset_calculation()
                st.rerun()
        else:
            st.info("No materials yet.")

        with st.expander("➕ Add Material"):
            with st.form("material_form", clear_on_submit=True):
                c1, c2, c3 = st.columns(3)
                name = c1.text_input("Material Name")
                material_type = c2.selectbox("Type", MATERIAL_TYPES, format_func=_label)
                unit = c3.selectbox("Unit", UNITS)
                c4, c5, c6 = st.columns(3)
                quantity = c4.number_input("Quantity", min_value=0.0, value=1.0)
                recyclability = c5.slider("Recyclability (%)", 0, 100, 80)
                is_recycled = c6.checkbox("Recycled Content")
                submitted = st.form_submit_button("Add Material")

            if submitted:
                factors = material_factor(material_type, is_recycled)
                try:
                    state.add_material(Material(
                        name=name.strip() or material_type,
                        quantity=quantity, unit=unit, type=material_type,
                        is_recycled=is_recycled, recyclability=recyclability / 100,
                    ))
                    state.reset_calculation()
                    st.success(f"Added {name or material_type} ({factors['carbon']} kg CO₂e per {unit}).")
                    st.rerun()
                except ValidationError as e:
                    st.error(f"Invalid material: {e.errors()[0]['msg']}")

    @staticmethod
    def _render_processes(state: LCAState):
        """Process list with add/remove controls."""
        st.subheader("Processes.")
        product = state.current_product

        if product.processes:
            st.dataframe(pd.DataFrame([
                {
                    "Name": p.name,
                    "Stage": _label(p.type),
                    "Energy (kWh)": p.energy_consumption,
                    "Energy Source": _label(p.energy_type),
                    "Direct CO₂e (kg)": p.emissions,
                    "Water (L)": p.water_usage,
                    "Waste (kg)": p.waste_generated,
                    "Transport": f"{p.distance:g} km by {p.transport_mode}" if p.transport_mode else "",
                }
                for p in product.processes
            ]), use_container_width=True, hide_index=True)

            c1, c2 = st.columns([4, 1])
            labels = {p.id: f"{p.name} ({_label(p.type)})" for p in product.processes}
            selected = c1.selectbox("Select Process", options=list(labels), format_func=labels.get, key="proc_select")
            if c2.button("Remove", key="proc_remove"):
                state.remove_process(selected)
                state.reset_calculation()
                st.rerun()
        else:
            st.info("No processes yet.")

        with st.expander("➕ Add Process"):
            with st.form("process_form", clear_on_submit=True):
                c1, c2, c3 = st.columns(3)
                name = c1.text_input("Process Name")
                process_type = c2.selectbox("Stage", PROCESS_TYPES, format_func=_label)
                energy_type = c3.selectbox("Energy Source", ENERGY_TYPES, format_func=_label)
                c4, c5, c6 = st.columns(3)
                energy = c4.number_input("Energy (kWh)", min_value=0.0, value=0.0)
                emissions = c5.number_input("Direct Emissions (kg CO₂e)", value=0.0)
                duration = c6.number_input("Duration", min_value=0.01, value=1.0)
                c7, c8 = st.columns(2)
                water = c7.number_input("Water (L)", min_value=0.0, value=0.0)
                waste = c8.number_input("Waste (kg)", min_value=0.0, value=0.0)
                st.caption("Transport stages only:")
                c9, c10 = st.columns(2)
                distance = c9.number_input("Distance (km)", min_value=0.0, value=0.0)
                mode = c10.selectbox("Transport Mode", TRANSPORT_MODES, format_func=_label)
                submitted = st.form_submit_button("Add Process")

            if submitted:
                is_transport = process_type == "transport"
                try:
                    state.add_process(ProcessStep(
                        name=name.strip() or _label(process_type),
                        type=process_type, energy_consumption=energy, energy_type=energy_type,
                        emissions=emissions, water_usage=water, waste_generated=waste,
                        duration=duration,
                        distance=distance if is_transport else None,
                        transport_mode=mode if is_transport else None,
                    ))
                    state.reset_calculation()
                    st.rerun()
                except ValidationError as e:
                    st.error(f"Invalid process: {e.errors()[0]['msg']}")

    @staticmethod
    def _render_end_of_life(state: LCAState):
        """Editable end-of-life mix."""
        st.subheader("End Of Life.")
        product = state.current_product

        df = pd.DataFrame([
            {"Name": s.name, "Type": s.type, "Percentage": s.percentage, "Emission Factor": s.emissions}
            for s in product.end_of_life_scenarios
        ], columns=["Name", "Type", "Percentage", "Emission Factor"])
        edited = st.data_editor(
            df,
            num_rows="dynamic",
            use_container_width=True,
            hide_index=True,
            column_config={
                "Type": st.column_config.SelectboxColumn("Type", options=EOL_TYPES, required=True),
                "Percentage": st.column_config.NumberColumn("Percentage", min_value=0, max_value=100),
            },
            key="eol_editor",
        )

        total = product.end_of_life_total()
        if abs(total - 100) > 0.01:
            st.warning(f"The applied end-of-life shares sum to {total:g}% rather than 100%. "
                       "End-of-life impact will be scaled accordingly.")

        if st.button("Apply End-Of-Life Mix"):
            try:
                scenarios = [
                    EndOfLifeScenario(
                        id=str(i + 1), name=row["Name"] or _label(row["Type"]), type=row["Type"],
                        percentage=float(row["Percentage"] or 0), emissions=float(row["Emission Factor"] or 0),
                    )
                    for i, row in enumerate(edited.dropna(subset=["Type"]).to_dict("records"))
                ]
            except ValidationError as e:
                st.error(f"Invalid scenario: {e.errors()[0]['msg']}")
                return
            state.set_current_product(product.model_copy(update={"end_of_life_scenarios": scenarios}))
            state.reset_calculation()
            st.success("End-of-life mix updated.")

    @staticmethod
    def _render_quick_entry(state: LCAState):
        """Build a single-material product from aggregate inputs."""
        st.subheader("Quick Entry.")
        st.caption("Enter plant-level totals to generate a one-material, one-process product.")

        inputs = st.session_state.setdefault("quick_inputs", QuickEntryInputs())
        material_type = st.selectbox("Material", MATERIAL_TYPES, format_func=_label, key="quick_material")

        values = {}
        groups = {"production": "Production Parameters", "chemical": "Chemical Inputs", "waste": "Waste & Transport"}
        cols = st.columns(3)
        for col, (category, title) in zip(cols, groups.items()):
            with col:
                st.markdown(f"**{title}**")
                for field, (label, cat, *_rest) in PARAMETERS.items():
                    if cat == category:
                        values[field] = st.number_input(
                            label, min_value=0.0, value=float(getattr(inputs, field)), key=f"quick_{field}"
                        )
        inputs = QuickEntryInputs(**values)
        st.session_state.quick_inputs = inputs

        predictor_cols = st.columns([2, 1])
        missing = MissingDataPredictor.missing_parameters(inputs)
        if missing:
            with predictor_cols[0]:
                chosen = st.multiselect(
                    "Predict Missing Parameters", options=missing,
                    format_func=lambda f: f"{PARAMETERS[f][0]} ({PARAMETERS[f][2]}% accuracy)",
                )
                mode = st.radio("Prediction Mode", list(MODE_MULTIPLIERS), horizontal=True, format_func=_label)
            with predictor_cols[1]:
                st.markdown("<br>", unsafe_allow_html=True)
                if st.button("✨ Predict", disabled=not chosen):
                    predictions = MissingDataPredictor(mode, random.Random()).predict(inputs, chosen)
                    logger.info("Predicted %d quick-entry values (%s)", len(predictions), mode)
                    st.session_state.quick_inputs = MissingDataPredictor.apply(inputs, predictions)
                    for field in predictions:
                        st.session_state.pop(f"quick_{field}", None)
                    st.rerun()

        rows = inventory_breakdown(material_type, inputs)
        if rows:
            st.dataframe(pd.DataFrame(rows), use_container_width=True, hide_index=True)
            if inputs.electricity > 0:
                st.caption(
                    f"The calculated result prices electricity at the grid factor of "
                    f"{ENERGY_FACTORS['grid']:g} kg CO₂e/kWh."
                )

        if inputs.raw_material == 0:
            st.info("Please enter raw material mass to begin calculation.")
        elif st.button("Calculate From Quick Entry", type="primary"):
            product = build_product(material_type, inputs)
            state.set_current_product(product)
            with st.spinner("Calculating..."):
                state.calculate(product)
            st.success("Calculated. Open the Results page to explore the impact.")

    @staticmethod
    def render():
        """Render the complete builder page."""
        st.markdown("## Product Builder")
        state = BuilderPage._state()

        tab_detail, tab_quick = st.tabs(["Detailed Inventory", "Quick Entry"])

        with tab_quick:
            BuilderPage._render_quick_entry(state)

        with tab_detail:
            BuilderPage._render_product_details(state)
            if state.current_product is None:
                st.info("Create a product to start adding materials and processes.")
                return

            BuilderPage._render_materials(state)
            BuilderPage._render_processes(state)
            BuilderPage._render_end_of_life(state)

            st.markdown("---")
            if st.button("Calculate LCA", type="primary"):
                try:
                    with st.spinner("Calculating..."):
                        results = state.calculate()
                    st.success(f"Total footprint: {results.total_carbon_footprint:,.2f} kg CO₂e. "
                               "See the Results page for details.")
                except NoProductSelectedError as e:
                    st.error(str(e))
