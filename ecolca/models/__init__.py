"""Data models."""

from .product import Material, ProcessStep, EndOfLifeScenario, Product, default_end_of_life_scenarios
from .results import LCAResults, StageBreakdown, STAGES, STAGE_LABELS
