"""Shared fixtures for the EcoLCA test suite."""

import pytest

from ecolca.models import EndOfLifeScenario
from tests.factories import make_material, make_process, make_product


@pytest.fixture
def empty_product():
    return make_product()


@pytest.fixture
def aluminum_product():
    """100 kg raw aluminum plus 500 kWh of grid-powered manufacturing."""
    return make_product(materials=[make_material(id="m1")], processes=[make_process(id="p1")])


@pytest.fixture
def landfill_scenario():
    return EndOfLifeScenario(name="Landfill", percentage=50, type="landfill", emissions=2.0)
