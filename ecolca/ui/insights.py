"""Insight cards shown next to the results.

The engine only returns data-driven recommendations; the static guidance
used to fill the panel lives here, in the presentation layer.
"""

from typing import List, Optional

from ..models.results import LCAResults

MAX_INSIGHTS = 4

STATIC_INSIGHTS = [
    {
        "kind": "info",
        "title": "Getting Started",
        "message": "Add materials and processes to your product to begin your LCA analysis and receive personalized insights.",
    },
    {
        "kind": "success",
        "title": "Best Practices",
        "message": "Use recycled materials when possible and consider renewable energy sources for manufacturing processes.",
    },
    {
        "kind": "warning",
        "title": "Common Impact Areas",
        "message": "Transportation and energy consumption are often the largest contributors to carbon footprint.",
    },
    {
        "kind": "trend",
        "title": "Market Advantage",
        "message": "Products with high sustainability scores are seeing increased market demand and consumer preference.",
    },
]


def build_insights(results: Optional[LCAResults]) -> List[dict]:
    """Up to four insight cards for the results panel."""
    if results is None:
        return list(STATIC_INSIGHTS)

    insights = []
    if results.sustainability_score > 70:
        insights.append({
            "kind": "success",
            "title": "Excellent Sustainability Score",
            "message": f"Your product achieved a sustainability score of {results.sustainability_score:.0f}/100. "
                       "This puts you in the top tier for environmental performance.",
        })
    if results.recyclability_score > 80:
        insights.append({
            "kind": "success",
            "title": "High Recyclability",
            "message": f"Your product has a {results.recyclability_score:.0f}% recyclability score, "
                       "supporting circular economy principles.",
        })

    for index, tip in enumerate(results.recommendations[:3]):
        insights.append({
            "kind": "info" if index == 0 else "warning",
            "title": f"Recommendation {index + 1}",
            "message": tip,
        })

    # Pad with general guidance, skipping the onboarding card
    for card in STATIC_INSIGHTS[1:]:
        if len(insights) >= MAX_INSIGHTS:
            break
        insights.append(card)

    return insights[:MAX_INSIGHTS]
