"""User Guide page component."""

import pandas as pd
import streamlit as st
from ..utils.factors import ENERGY_FACTORS, MATERIAL_FACTORS, TRANSPORT_FACTORS, as_dict
from ..utils.i18n import Translator

class UserGuidePage:
    """User Guide page for documentation and help."""

    @staticmethod
    def guidelines_content() -> dict:
        """Return the guidelines content sections."""
        sections = {
            "What it does": """
The dashboard gives a fast, indicative life-cycle estimate for a product: carbon footprint per
life-cycle stage, energy and water use, waste, and three 0–100 scores (recyclability, material
efficiency, sustainability). It is an early design aid, **not** an ISO 14040 LCA.
""",
            "How does it work": """
### 1) **Describe the product**
Name, functional unit (the basis of comparison, e.g. *1 kg*) and lifespan.

### 2) **Add materials**
Pick a material family, quantity and unit, whether it is recycled content and how recyclable it is.
Carbon, energy and water per unit come from the factor tables below.

### 3) **Add processes**
Manufacturing, transport, use and end-of-life steps. Energy is multiplied by the factor of its
source (grid, renewable, fossil); direct emissions are added as entered; transport steps add
distance × mode factor.

### 4) **Set the end-of-life mix**
Each pathway contributes its emission factor × its share. Shares are not forced to total 100%,
so check the warning on the builder page.

### 5) **Calculate and read the results**
Stage totals always add up to the overall footprint. Scores:
- **Recyclability**: recycled mass ÷ total mass.
- **Material efficiency**: mean of recyclability and average material recyclability.
- **Sustainability**: mean of a carbon score, an energy score (both per kg of material) and material efficiency.

Up to five recommendations follow from simple rules: non-recycled materials, fossil energy,
air freight, landfill above 20%, and low efficiency or recycled-content scores.
""",
            "Quick entry": """
No detailed inventory yet? Enter plant-level totals (raw material, electricity, gas, water,
chemicals, waste water, solid waste, transport distance). The tool builds a one-material,
one-process product with a default end-of-life split (65% recycling, 20% landfill,
15% incineration). Empty fields can be filled with suggested values in three modes:
conservative, average or optimized.
""",
        }
        return sections

    @staticmethod
    def factor_tables() -> dict:
        """Factor tables as DataFrames for display."""
        materials = pd.DataFrame([
            {
                "Material": name.capitalize(),
                "CO₂e raw": row["raw"]["carbon"], "CO₂e recycled": row["recycled"]["carbon"],
                "Energy raw": row["raw"]["energy"], "Energy recycled": row["recycled"]["energy"],
                "Water raw": row["raw"]["water"], "Water recycled": row["recycled"]["water"],
            }
            for name, row in as_dict(MATERIAL_FACTORS).items()
        ])
        energy = pd.DataFrame(list(as_dict(ENERGY_FACTORS).items()), columns=["Source", "kg CO₂e / kWh"])
        transport = pd.DataFrame(list(as_dict(TRANSPORT_FACTORS).items()), columns=["Mode", "kg CO₂e / km"])
        return {"Materials": materials, "Energy": energy, "Transport": transport}

    @staticmethod
    def render():
        """Render the User Guide page."""
        st.header(Translator.t("nav.user_guide", "User Guide"))
        content = UserGuidePage.guidelines_content()

        tab_names = list(content) + ["Factor tables"]
        tabs = st.tabs(tab_names)

        for tab, tab_name in zip(tabs, tab_names):
            with tab:
                st.subheader(tab_name)
                if tab_name == "Factor tables":
                    for title, df in UserGuidePage.factor_tables().items():
                        st.markdown(f"**{title}**")
                        st.dataframe(df, use_container_width=True, hide_index=True)
                else:
                    st.write(content[tab_name])
