"""LCA calculation utilities."""

import logging
import math
from decimal import Decimal, ROUND_HALF_UP, localcontext
from typing import Dict, List

from ..models.product import Product
from ..models.results import LCAResults, StageBreakdown, STAGES
from .factors import ENERGY_FACTORS, TRANSPORT_FACTORS, material_factor

logger = logging.getLogger(__name__)

MAX_RECOMMENDATIONS = 5

# Process type → stage bucket
STAGE_FOR_PROCESS = {
    "manufacturing": "manufacturing",
    "transport": "transport",
    "use": "use",
    "end_of_life": "end_of_life",
}


def round2(value: float) -> float:
    """Round to 2 decimals, halves away from zero.

    Works for any finite float; infinities from overflowing sums pass through.
    """
    if not math.isfinite(value):
        return value
    # Largest float needs 309 integer digits plus 2 decimals
    with localcontext() as ctx:
        ctx.prec = 330
        return float(Decimal(repr(value)).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP))


def _ratio_score(total: float, weight: float, factor: float) -> float:
    """100 minus a per-unit-weight penalty, clamped to [0, 100]; 0 without weight."""
    if weight <= 0:
        return 0.0
    return min(100.0, max(0.0, 100.0 - factor * total / weight))


class LCACalculator:
    """Rule-based impact calculation engine."""

    @staticmethod
    def calculate(product: Product) -> LCAResults:
        """Compute the life-cycle impact summary for a product.

        Pure and deterministic: reads the product and the static factor
        tables, returns a fresh ``LCAResults``. Material intensities are
        always re-derived from the factor table by type and recycled flag;
        the intensity fields stored on each material are not read here.
        """
        by_stage: Dict[str, float] = dict.fromkeys(STAGES, 0.0)
        energy = 0.0
        water = 0.0
        waste = 0.0

        for material in product.materials:
            factor = material_factor(material.type, material.is_recycled)
            by_stage["materials"] += material.quantity * factor["carbon"]
            energy += material.quantity * factor["energy"]
            water += material.quantity * factor["water"]

        for step in product.processes:
            step_emissions = step.energy_consumption * ENERGY_FACTORS[step.energy_type] + step.emissions
            if step.type == "transport" and step.distance is not None and step.transport_mode is not None:
                step_emissions += step.distance * TRANSPORT_FACTORS[step.transport_mode]
            by_stage[STAGE_FOR_PROCESS[step.type]] += step_emissions

            energy += step.energy_consumption
            water += step.water_usage
            waste += step.waste_generated

        for scenario in product.end_of_life_scenarios:
            by_stage["end_of_life"] += scenario.emissions * (scenario.percentage / 100)

        total_carbon = sum(by_stage.values())

        # Scores
        total_weight = sum(m.quantity for m in product.materials)
        recycled_weight = sum(m.quantity for m in product.materials if m.is_recycled)
        recyclability_score = 100 * recycled_weight / total_weight if total_weight > 0 else 0.0

        if product.materials:
            avg_recyclability = sum(m.recyclability for m in product.materials) / len(product.materials) * 100
        else:
            avg_recyclability = 0.0

        material_efficiency = (recyclability_score + avg_recyclability) / 2
        carbon_score = _ratio_score(total_carbon, total_weight, 10)
        energy_score = _ratio_score(energy, total_weight, 0.1)
        sustainability_score = (carbon_score + energy_score + material_efficiency) / 3

        recommendations = generate_recommendations(
            product,
            material_efficiency=material_efficiency,
            recyclability_score=recyclability_score,
        )

        rounded_stages = {stage: round2(value) for stage, value in by_stage.items()}
        logger.debug(
            "Calculated %s: total=%.2f kg CO2e, stages=%s",
            product.id, total_carbon, rounded_stages,
        )

        return LCAResults(
            total_carbon_footprint=round2(total_carbon),
            carbon_footprint_by_stage=StageBreakdown(**rounded_stages),
            energy_consumption=round2(energy),
            water_usage=round2(water),
            waste_generation=round2(waste),
            recyclability_score=round2(recyclability_score),
            sustainability_score=round2(sustainability_score),
            material_efficiency=round2(material_efficiency),
            recommendations=tuple(recommendations),
        )


def generate_recommendations(product: Product, material_efficiency: float,
                             recyclability_score: float) -> List[str]:
    """Ordered, rule-based improvement suggestions (at most five).

    Each rule fires at most once; rules are checked in a fixed order and
    collection stops once the cap is reached.
    """
    rules = [
        lambda: _recycled_material_tip(product),
        lambda: ("Switch to renewable energy sources to reduce emissions by up to 90%"
                 if any(p.energy_type == "fossil" for p in product.processes) else None),
        lambda: ("Consider alternative transport modes (ship/train) to reduce transport emissions"
                 if any(p.transport_mode == "air" for p in product.processes) else None),
        lambda: ("Improve product design for better recyclability to reduce landfill waste"
                 if any(s.type == "landfill" and s.percentage > 20 for s in product.end_of_life_scenarios)
                 else None),
        lambda: ("Focus on design for disassembly and material selection for better recyclability"
                 if material_efficiency < 50 else None),
        lambda: ("Increase use of recycled materials in product composition"
                 if recyclability_score < 30 else None),
    ]

    recommendations = []
    for rule in rules:
        if len(recommendations) >= MAX_RECOMMENDATIONS:
            break
        tip = rule()
        if tip:
            recommendations.append(tip)
    return recommendations


def _recycled_material_tip(product: Product):
    for material in product.materials:
        if not material.is_recycled:
            return f"Consider using recycled {material.type} to reduce carbon footprint by up to 60%"
    return None
