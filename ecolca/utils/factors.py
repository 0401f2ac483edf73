"""Static emission-factor tables used by the impact calculation engine.

All tables are process-wide, read-only configuration loaded once at import
time. Material intensities are expressed per unit of material quantity;
energy factors in kg CO₂e per kWh; transport factors in kg CO₂e per km.
"""

from types import MappingProxyType
from typing import Dict, Mapping

def _freeze(table: dict) -> Mapping:
    """Wrap a nested dict in read-only mapping proxies."""
    return MappingProxyType({
        key: _freeze(value) if isinstance(value, dict) else value
        for key, value in table.items()
    })

# Material family → raw/recycled → intensity per unit quantity
MATERIAL_FACTORS = _freeze({
    "aluminum": {
        "raw": {"carbon": 8.2, "energy": 150, "water": 1500},
        "recycled": {"carbon": 2.1, "energy": 45, "water": 450},
    },
    "steel": {
        "raw": {"carbon": 6.5, "energy": 125, "water": 1200},
        "recycled": {"carbon": 1.8, "energy": 38, "water": 380},
    },
    "plastic": {
        "raw": {"carbon": 4.8, "energy": 85, "water": 850},
        "recycled": {"carbon": 2.9, "energy": 51, "water": 510},
    },
    "glass": {
        "raw": {"carbon": 3.2, "energy": 75, "water": 750},
        "recycled": {"carbon": 1.5, "energy": 35, "water": 350},
    },
    "paper": {
        "raw": {"carbon": 2.1, "energy": 45, "water": 450},
        "recycled": {"carbon": 0.8, "energy": 18, "water": 180},
    },
    "wood": {
        "raw": {"carbon": 0.5, "energy": 15, "water": 150},
        "recycled": {"carbon": 0.3, "energy": 10, "water": 100},
    },
    "concrete": {
        "raw": {"carbon": 5.5, "energy": 95, "water": 950},
        "recycled": {"carbon": 2.2, "energy": 38, "water": 380},
    },
    "other": {
        "raw": {"carbon": 3.0, "energy": 60, "water": 600},
        "recycled": {"carbon": 1.5, "energy": 30, "water": 300},
    },
})

ENERGY_FACTORS = _freeze({
    "grid": 0.5,        # average grid electricity
    "renewable": 0.05,
    "fossil": 0.8,
})

TRANSPORT_FACTORS = _freeze({
    "truck": 0.12,
    "ship": 0.015,
    "train": 0.045,
    "air": 0.67,
})

# Fixed conversion constants for the quick-entry inventory (kg CO₂e per unit)
QUICK_ENTRY_FACTORS = _freeze({
    "electricity": 0.3,      # per kWh, grid
    "natural_gas": 1.9,      # per m³
    "transport": 0.003,      # per km
    "sulfuric_acid": 0.15,   # per kg
    "caustic_soda": 0.12,    # per kg
    "lubricants": 0.08,      # per kg
    "waste_water": 0.17,     # per m³
})

# Litres of process water attributed to each m³ of waste water
WASTE_WATER_TO_WATER = 1.2


def material_factor(material_type: str, is_recycled: bool) -> Mapping[str, float]:
    """Return the carbon/energy/water row for a material family.

    Raises:
        KeyError: If the material family is not in the table.
    """
    row = MATERIAL_FACTORS[material_type]
    return row["recycled"] if is_recycled else row["raw"]


def factor_comparison_rows() -> list:
    """Raw vs recycled carbon intensity per material, for comparison charts."""
    rows = []
    for material_type, row in MATERIAL_FACTORS.items():
        rows.append({
            "Material": material_type.capitalize(),
            "Raw": row["raw"]["carbon"],
            "Recycled": row["recycled"]["carbon"],
        })
    return rows


def as_dict(table: Mapping) -> Dict:
    """Plain-dict copy of a frozen table (for display or serialisation)."""
    return {
        key: as_dict(value) if isinstance(value, Mapping) else value
        for key, value in table.items()
    }
