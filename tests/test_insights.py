"""Tests for the insight cards."""

from ecolca.models.results import LCAResults, StageBreakdown
from ecolca.ui.insights import MAX_INSIGHTS, STATIC_INSIGHTS, build_insights


def _results(sustainability=50.0, recyclability=50.0, recommendations=()):
    return LCAResults(
        total_carbon_footprint=0,
        carbon_footprint_by_stage=StageBreakdown(),
        energy_consumption=0,
        water_usage=0,
        waste_generation=0,
        recyclability_score=recyclability,
        sustainability_score=sustainability,
        material_efficiency=0,
        recommendations=recommendations,
    )


def test_no_results_shows_static_cards():
    assert build_insights(None) == STATIC_INSIGHTS
    assert build_insights(None) is not STATIC_INSIGHTS


def test_high_scores_lead():
    cards = build_insights(_results(sustainability=85, recyclability=90, recommendations=("Tip A",)))
    assert [c["title"] for c in cards] == [
        "Excellent Sustainability Score",
        "High Recyclability",
        "Recommendation 1",
        "Best Practices",
    ]
    assert "85/100" in cards[0]["message"]


def test_recommendations_limited_to_three():
    cards = build_insights(_results(recommendations=("A", "B", "C", "D", "E")))
    assert [c["message"] for c in cards[:3]] == ["A", "B", "C"]
    assert [c["kind"] for c in cards[:3]] == ["info", "warning", "warning"]
    assert len(cards) == MAX_INSIGHTS


def test_padding_skips_onboarding_card():
    cards = build_insights(_results())
    assert cards == STATIC_INSIGHTS[1:]


def test_never_more_than_four():
    cards = build_insights(_results(95, 95, ("A", "B", "C")))
    assert len(cards) == MAX_INSIGHTS
