"""Tests for missing-data prediction."""

import random

import pytest

from ecolca.utils.prediction import MODE_MULTIPLIERS, PARAMETERS, MissingDataPredictor
from ecolca.utils.quick_entry import QuickEntryInputs


def test_unknown_mode_rejected():
    with pytest.raises(ValueError):
        MissingDataPredictor(mode="wild")


def test_missing_parameters_in_display_order():
    inputs = QuickEntryInputs(raw_material=10, water=5, solid_waste=1)
    missing = MissingDataPredictor.missing_parameters(inputs)
    assert missing == [p for p in PARAMETERS if p not in ("raw_material", "water", "solid_waste")]


@pytest.mark.parametrize("mode", list(MODE_MULTIPLIERS))
def test_predicted_values_within_scaled_range(mode):
    predictor = MissingDataPredictor(mode=mode, rng=random.Random(7))
    for name, (_, _, accuracy, low, high) in PARAMETERS.items():
        scale = MODE_MULTIPLIERS[mode] * (0.8 + accuracy / 100 * 0.4)
        value = predictor.predict_value(name)
        assert low * scale - 0.01 <= value <= high * scale + 0.01
        assert round(value, 2) == value


def test_seeded_predictions_repeat():
    a = MissingDataPredictor(rng=random.Random(42)).predict(QuickEntryInputs(), PARAMETERS)
    b = MissingDataPredictor(rng=random.Random(42)).predict(QuickEntryInputs(), PARAMETERS)
    assert a == b
    assert set(a) == set(PARAMETERS)


def test_predict_skips_filled_and_unrequested_fields():
    inputs = QuickEntryInputs(electricity=500)
    predictions = MissingDataPredictor(rng=random.Random(1)).predict(
        inputs, ["electricity", "natural_gas", "lubricants"]
    )
    assert set(predictions) == {"natural_gas", "lubricants"}


def test_apply_returns_new_inputs():
    inputs = QuickEntryInputs(raw_material=100)
    applied = MissingDataPredictor.apply(inputs, {"natural_gas": 12.5})
    assert applied.natural_gas == 12.5
    assert applied.raw_material == 100
    assert inputs.natural_gas == 0
