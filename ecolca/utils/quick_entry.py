"""Quick-entry path: build a product from a handful of aggregate inputs."""

import logging
from typing import List

from pydantic import BaseModel, ConfigDict, Field

from ..models.product import (
    DEFAULT_LIFESPAN_YEARS,
    Material,
    MaterialType,
    ProcessStep,
    Product,
    default_end_of_life_scenarios,
    new_id,
)
from .factors import QUICK_ENTRY_FACTORS, WASTE_WATER_TO_WATER, material_factor

logger = logging.getLogger(__name__)

QUICK_ENTRY_RECYCLABILITY = 0.8


class QuickEntryInputs(BaseModel):
    """Aggregate production, chemical and waste inputs."""
    model_config = ConfigDict(allow_inf_nan=False)

    # Production
    raw_material: float = Field(default=0.0, ge=0)   # kg
    electricity: float = Field(default=0.0, ge=0)    # kWh
    natural_gas: float = Field(default=0.0, ge=0)    # m³
    water: float = Field(default=0.0, ge=0)          # L
    # Chemicals
    sulfuric_acid: float = Field(default=0.0, ge=0)  # kg
    caustic_soda: float = Field(default=0.0, ge=0)   # kg
    lubricants: float = Field(default=0.0, ge=0)     # kg
    # Waste & transport
    waste_water: float = Field(default=0.0, ge=0)    # m³
    solid_waste: float = Field(default=0.0, ge=0)    # kg
    transport_distance: float = Field(default=0.0, ge=0)  # km


def _direct_emissions(inputs: QuickEntryInputs) -> float:
    """Inventory emissions not covered by the material or energy factors."""
    f = QUICK_ENTRY_FACTORS
    return (
        inputs.natural_gas * f["natural_gas"]
        + inputs.transport_distance * f["transport"]
        + inputs.sulfuric_acid * f["sulfuric_acid"]
        + inputs.caustic_soda * f["caustic_soda"]
        + inputs.lubricants * f["lubricants"]
        + inputs.waste_water * f["waste_water"]
    )


def inventory_breakdown(material_type: MaterialType, inputs: QuickEntryInputs) -> List[dict]:
    """Per-input CO₂e contributions for the detailed breakdown table.

    Rows with no impact are dropped; ``Share (%)`` is relative to the sum of
    the remaining rows. Electricity is priced at the plant-level quick-entry
    factor, which the row label names; the calculated result applies the
    engine's grid factor instead.
    """
    f = QUICK_ENTRY_FACTORS
    carbon = material_factor(material_type, False)["carbon"]
    rows = [
        (f"Electricity (plant factor {f['electricity']:g} kg/kWh)", inputs.electricity, "kWh",
         inputs.electricity * f["electricity"]),
        (f"Raw Material ({material_type.capitalize()})", inputs.raw_material, "kg", inputs.raw_material * carbon),
        ("Natural Gas", inputs.natural_gas, "m³", inputs.natural_gas * f["natural_gas"]),
        ("Transport", inputs.transport_distance, "km", inputs.transport_distance * f["transport"]),
        ("Sulfuric Acid", inputs.sulfuric_acid, "kg", inputs.sulfuric_acid * f["sulfuric_acid"]),
        ("Waste Water", inputs.waste_water, "m³", inputs.waste_water * f["waste_water"]),
        ("Caustic Soda", inputs.caustic_soda, "kg", inputs.caustic_soda * f["caustic_soda"]),
        ("Lubricants", inputs.lubricants, "kg", inputs.lubricants * f["lubricants"]),
    ]
    rows = [r for r in rows if r[3] > 0]
    total = sum(r[3] for r in rows)

    return [
        {
            "Input": name,
            "Amount": f"{amount:.2f} {unit}",
            "CO₂e (kg)": impact,
            "Share (%)": impact / total * 100 if total > 0 else 0.0,
        }
        for name, amount, unit, impact in rows
    ]


def build_product(material_type: MaterialType, inputs: QuickEntryInputs) -> Product:
    """Synthesize a single-material, single-process product.

    Electricity is carried as grid energy on the manufacturing step so the
    engine applies its own energy factor; the remaining inventory items
    become the step's direct emissions. Material impacts come from the
    material factor table in the engine.
    """
    label = material_type.capitalize()
    water = inputs.water + inputs.waste_water * WASTE_WATER_TO_WATER

    product = Product(
        id=new_id("product"),
        name=f"{label} Product",
        description=f"Product made from {material_type}",
        functional_unit=f"{inputs.raw_material:g} kg",
        lifespan=DEFAULT_LIFESPAN_YEARS,
        materials=[
            Material(
                name=material_type,
                quantity=inputs.raw_material,
                unit="kg",
                type=material_type,
                is_recycled=False,
                recyclability=QUICK_ENTRY_RECYCLABILITY,
            )
        ],
        processes=[
            ProcessStep(
                name="Manufacturing Process",
                type="manufacturing",
                energy_consumption=inputs.electricity,
                energy_type="grid",
                emissions=_direct_emissions(inputs),
                water_usage=water,
                waste_generated=inputs.solid_waste,
                duration=1,
            )
        ],
        end_of_life_scenarios=default_end_of_life_scenarios(),
    )
    logger.debug("Quick-entry product %s built for %.2f kg %s", product.id, inputs.raw_material, material_type)
    return product
