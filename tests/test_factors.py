"""Tests for the static emission-factor tables."""

import pytest

from ecolca.utils.factors import (
    ENERGY_FACTORS,
    MATERIAL_FACTORS,
    TRANSPORT_FACTORS,
    QUICK_ENTRY_FACTORS,
    as_dict,
    factor_comparison_rows,
    material_factor,
)


class TestMaterialFactors:
    """Material intensity table."""

    def test_all_material_families_present(self):
        assert set(MATERIAL_FACTORS) == {
            "aluminum", "steel", "plastic", "glass", "paper", "wood", "concrete", "other"
        }

    def test_recycled_never_exceeds_raw(self):
        """Recycled rows are at most as intensive as raw rows on every axis."""
        for name, row in MATERIAL_FACTORS.items():
            for axis in ("carbon", "energy", "water"):
                assert row["recycled"][axis] <= row["raw"][axis], (name, axis)

    def test_lookup_selects_row_by_recycled_flag(self):
        assert material_factor("aluminum", False)["carbon"] == 8.2
        assert material_factor("aluminum", True)["carbon"] == 2.1

    def test_unknown_material_raises(self):
        with pytest.raises(KeyError):
            material_factor("unobtainium", False)

    def test_tables_are_read_only(self):
        with pytest.raises(TypeError):
            MATERIAL_FACTORS["steel"] = {}
        with pytest.raises(TypeError):
            ENERGY_FACTORS["grid"] = 0.0


class TestEnergyAndTransportFactors:
    """Energy and transport tables."""

    def test_energy_factors(self):
        assert as_dict(ENERGY_FACTORS) == {"grid": 0.5, "renewable": 0.05, "fossil": 0.8}

    def test_transport_factors(self):
        assert TRANSPORT_FACTORS["air"] == 0.67
        assert TRANSPORT_FACTORS["ship"] == 0.015
        assert min(TRANSPORT_FACTORS, key=TRANSPORT_FACTORS.get) == "ship"

    def test_quick_entry_constants(self):
        assert QUICK_ENTRY_FACTORS["electricity"] == 0.3
        assert QUICK_ENTRY_FACTORS["natural_gas"] == 1.9
        assert QUICK_ENTRY_FACTORS["waste_water"] == 0.17


def test_factor_comparison_rows():
    rows = factor_comparison_rows()
    assert len(rows) == len(MATERIAL_FACTORS)
    assert rows[0] == {"Material": "Aluminum", "Raw": 8.2, "Recycled": 2.1}


def test_as_dict_returns_plain_nested_dicts():
    plain = as_dict(MATERIAL_FACTORS)
    assert type(plain) is dict
    assert type(plain["wood"]["raw"]) is dict
