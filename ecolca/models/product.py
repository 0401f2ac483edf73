"""Product description data models using Pydantic."""

import uuid
from datetime import datetime
from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel

from ..utils.factors import material_factor

MaterialUnit = Literal["kg", "ton", "pieces", "liters", "m3"]
MaterialType = Literal["aluminum", "steel", "plastic", "glass", "paper", "wood", "concrete", "other"]
ProcessType = Literal["manufacturing", "transport", "use", "end_of_life"]
EnergyType = Literal["grid", "renewable", "fossil"]
TransportMode = Literal["truck", "ship", "train", "air"]
EndOfLifeType = Literal["recycle", "reuse", "energy_recovery", "landfill", "incineration"]

DEFAULT_LIFESPAN_YEARS = 10


def new_id(prefix: str) -> str:
    """Generate a unique identifier such as ``material_1f3a9c2e``."""
    return f"{prefix}_{uuid.uuid4().hex[:8]}"


class LCAModel(BaseModel):
    """Base model: camelCase aliases on the wire, snake_case in Python. Numbers must be finite."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, allow_inf_nan=False)


class Material(LCAModel):
    """One input substance consumed in producing the product.

    The intensity fields are informational; when omitted they are filled in
    from the material factor table for the given type and recycled flag.
    """
    id: str = Field(default_factory=lambda: new_id("material"))
    name: str
    quantity: float = Field(ge=0)
    unit: MaterialUnit = "kg"
    type: MaterialType
    is_recycled: bool = False
    recyclability: float = Field(default=0.0, ge=0, le=1)
    carbon_intensity: Optional[float] = None
    energy_intensity: Optional[float] = None
    water_intensity: Optional[float] = None

    @model_validator(mode="after")
    def _fill_intensities(self):
        factors = material_factor(self.type, self.is_recycled)
        if self.carbon_intensity is None:
            self.carbon_intensity = factors["carbon"]
        if self.energy_intensity is None:
            self.energy_intensity = factors["energy"]
        if self.water_intensity is None:
            self.water_intensity = factors["water"]
        return self


class ProcessStep(LCAModel):
    """One discrete activity in the product's life cycle."""
    id: str = Field(default_factory=lambda: new_id("process"))
    name: str
    type: ProcessType
    energy_consumption: float = Field(default=0.0, ge=0)
    energy_type: EnergyType = "grid"
    emissions: float = 0.0
    water_usage: float = Field(default=0.0, ge=0)
    waste_generated: float = Field(default=0.0, ge=0)
    duration: float = Field(default=1.0, gt=0)
    distance: Optional[float] = Field(default=None, ge=0)
    transport_mode: Optional[TransportMode] = None

    @model_validator(mode="after")
    def _check_transport_leg(self):
        if self.type == "transport" and (self.distance is None) != (self.transport_mode is None):
            raise ValueError("transport steps need both distance and transport_mode, or neither")
        return self


class EndOfLifeScenario(LCAModel):
    """One disposal pathway applied to a share of the product mass."""
    id: str = Field(default_factory=lambda: new_id("eol"))
    name: str
    percentage: float = Field(ge=0, le=100)
    type: EndOfLifeType
    emissions: float = 0.0
    energy_recovery: Optional[float] = None
    material_recovery: Optional[float] = None


def default_end_of_life_scenarios() -> List[EndOfLifeScenario]:
    """Default end-of-life split for a newly created product."""
    return [
        EndOfLifeScenario(id="1", name="Recycling", percentage=65, type="recycle", emissions=0.1),
        EndOfLifeScenario(id="2", name="Landfill", percentage=20, type="landfill", emissions=0.8),
        EndOfLifeScenario(id="3", name="Incineration", percentage=15, type="incineration", emissions=0.6),
    ]


class Product(LCAModel):
    """Aggregate root: the full description of a product's life cycle."""
    id: str = Field(default_factory=lambda: new_id("product"))
    name: str
    description: str = ""
    functional_unit: str = "1 unit"
    lifespan: float = Field(default=DEFAULT_LIFESPAN_YEARS, gt=0)
    materials: List[Material] = Field(default_factory=list)
    processes: List[ProcessStep] = Field(default_factory=list)
    end_of_life_scenarios: List[EndOfLifeScenario] = Field(default_factory=default_end_of_life_scenarios)
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)

    def end_of_life_total(self) -> float:
        """Sum of end-of-life percentages (not required to equal 100)."""
        return sum(s.percentage for s in self.end_of_life_scenarios)
