"""Result models — state, cost breakdown, formatted estimate, curves."""

from deck_estimator.models.results import (
    Estimate,
    EstimatorState,
    ItemizedCost,
    PriceCurve,
    RushCurve,
    SummaryLine,
)

__all__ = [
    "Estimate",
    "EstimatorState",
    "ItemizedCost",
    "PriceCurve",
    "RushCurve",
    "SummaryLine",
]
