"""Suggested values for quick-entry inputs the user left empty."""

import random
from typing import Dict, Iterable, List, Literal, Optional

from .quick_entry import QuickEntryInputs

PredictionMode = Literal["conservative", "average", "optimized"]

MODE_MULTIPLIERS = {
    "conservative": 0.7,   # lower-bound estimates
    "average": 1.0,        # industry average
    "optimized": 1.3,      # best-case estimates
}

# field → (label, category, accuracy %, min, max)
PARAMETERS = {
    "raw_material": ("Raw Material Mass", "production", 95, 50, 500),
    "electricity": ("Electricity Consumption", "production", 92, 100, 2000),
    "natural_gas": ("Natural Gas Usage", "production", 88, 50, 800),
    "water": ("Water Usage", "production", 90, 200, 1500),
    "sulfuric_acid": ("Sulfuric Acid", "chemical", 85, 5, 50),
    "caustic_soda": ("Caustic Soda", "chemical", 83, 3, 30),
    "lubricants": ("Lubricants", "chemical", 78, 2, 25),
    "waste_water": ("Waste Water", "waste", 87, 150, 1200),
    "solid_waste": ("Solid Waste", "waste", 82, 10, 100),
    "transport_distance": ("Transport Distance", "waste", 75, 50, 500),
}


class MissingDataPredictor:
    """Fills empty quick-entry fields with plausible values.

    Values are drawn uniformly from a per-field range, then scaled by the
    prediction mode and by the field's accuracy rating.
    """

    def __init__(self, mode: PredictionMode = "conservative", rng: Optional[random.Random] = None):
        if mode not in MODE_MULTIPLIERS:
            raise ValueError(f"Unknown prediction mode: {mode}")
        self.mode = mode
        self.rng = rng or random.Random()

    @staticmethod
    def missing_parameters(inputs: QuickEntryInputs) -> List[str]:
        """Fields still at zero, in display order."""
        return [name for name in PARAMETERS if getattr(inputs, name) == 0]

    def predict_value(self, parameter: str) -> float:
        _, _, accuracy, low, high = PARAMETERS[parameter]
        base = self.rng.uniform(low, high)
        value = base * MODE_MULTIPLIERS[self.mode] * (0.8 + accuracy / 100 * 0.4)
        return round(value, 2)

    def predict(self, inputs: QuickEntryInputs, parameters: Iterable[str]) -> Dict[str, float]:
        """Predictions for the requested fields that are actually missing."""
        missing = set(self.missing_parameters(inputs))
        return {name: self.predict_value(name) for name in parameters if name in missing}

    @staticmethod
    def apply(inputs: QuickEntryInputs, predictions: Dict[str, float]) -> QuickEntryInputs:
        """New inputs with predictions merged in."""
        return inputs.model_copy(update=predictions)
