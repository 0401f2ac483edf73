"""Report utilities and common functions."""

from typing import List

import pandas as pd

from ..models.product import Product
from ..models.results import LCAResults, STAGE_LABELS


def stage_breakdown_frame(results: LCAResults) -> pd.DataFrame:
    """Five-row table of stage footprints and their share of the total."""
    stages = results.carbon_footprint_by_stage.items()
    total = sum(stages.values())
    df = pd.DataFrame({
        "Stage": [STAGE_LABELS[s] for s in stages],
        "CO₂e (kg)": list(stages.values()),
    })
    df["Share (%)"] = (df["CO₂e (kg)"] / total * 100).round(1) if total else 0.0
    return df


def material_rows(product: Product) -> List[dict]:
    """Material rows for report tables."""
    return [
        {
            "MATERIAL": m.name,
            "TYPE": m.type.capitalize(),
            "QUANTITY": f"{m.quantity:.2f} {m.unit}",
            "RECYCLED": "Yes" if m.is_recycled else "No",
            "RECYCLABILITY": f"{m.recyclability * 100:.0f}%",
        }
        for m in product.materials
    ]


def build_report_context(product: Product, results: LCAResults, notes: str = "") -> dict:
    """Template mapping for the DOCX report."""
    stages = stage_breakdown_frame(results)
    return {
        "PROJECT": product.name,
        "DESCRIPTION": product.description,
        "FUNCTIONAL_UNIT": product.functional_unit,
        "LIFESPAN_YEARS": f"{product.lifespan:g}",
        "TOTAL_CO2": f"{results.total_carbon_footprint:.2f}",
        "ENERGY": f"{results.energy_consumption:.2f}",
        "WATER": f"{results.water_usage:.2f}",
        "WASTE": f"{results.waste_generation:.2f}",
        "RECYCLABILITY": f"{results.recyclability_score:.1f}",
        "SUSTAINABILITY": f"{results.sustainability_score:.1f}",
        "MATERIAL_EFFICIENCY": f"{results.material_efficiency:.1f}",
        "EXEC_NOTES": (notes or "").strip(),
        "materials": material_rows(product),
        "stages": [
            {"STAGE": row["Stage"], "CO2": f"{row['CO₂e (kg)']:.2f}", "SHARE": f"{row['Share (%)']:.1f}%"}
            for row in stages.to_dict("records")
        ],
        "recommendations": list(results.recommendations),
    }
