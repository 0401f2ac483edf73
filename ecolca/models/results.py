"""Calculation result models."""

from typing import Dict, Tuple

from pydantic import ConfigDict

from .product import LCAModel

STAGES = ("materials", "manufacturing", "transport", "use", "end_of_life")

STAGE_LABELS = {
    "materials": "Materials",
    "manufacturing": "Manufacturing",
    "transport": "Transport",
    "use": "Use",
    "end_of_life": "End Of Life",
}


class StageBreakdown(LCAModel):
    """Carbon footprint per life-cycle stage (kg CO₂e)."""
    model_config = ConfigDict(frozen=True, allow_inf_nan=True)

    materials: float = 0.0
    manufacturing: float = 0.0
    transport: float = 0.0
    use: float = 0.0
    end_of_life: float = 0.0

    def items(self) -> Dict[str, float]:
        return {stage: getattr(self, stage) for stage in STAGES}

    def total(self) -> float:
        return sum(self.items().values())


class LCAResults(LCAModel):
    """Immutable output of one impact calculation."""
    model_config = ConfigDict(frozen=True, allow_inf_nan=True)

    total_carbon_footprint: float
    carbon_footprint_by_stage: StageBreakdown
    energy_consumption: float
    water_usage: float
    waste_generation: float
    recyclability_score: float
    sustainability_score: float
    material_efficiency: float
    recommendations: Tuple[str, ...] = ()
