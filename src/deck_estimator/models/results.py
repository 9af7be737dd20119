"""Result types — the contract between the engine, the session and the API.

``EstimatorState`` is the only mutable model; it belongs to the session
controller.  Everything else is produced fresh on every recompute pass.
"""

from __future__ import annotations

from pydantic import BaseModel


# ═══════════════════════════════════════════════════════════════════════════
# Session state
# ═══════════════════════════════════════════════════════════════════════════

class EstimatorState(BaseModel):
    """Current inputs of one estimating session."""

    project_type: str = "event"
    slides_count: int = 20
    slides_price: int = 2500
    renders_count: int = 0
    renders_price: int = 1500
    deadline_days: int = 14
    keyvisual: bool = False


# ═══════════════════════════════════════════════════════════════════════════
# Cost breakdown
# ═══════════════════════════════════════════════════════════════════════════

class ItemizedCost(BaseModel):
    """Output of one aggregation pass.  Amounts in rubles, 2-decimal rounded."""

    slides_cost: float
    renders_cost: float
    keyvisual_cost: float
    base_cost: float
    """slides + renders + keyvisual, before the rush surcharge."""

    rush_fraction: float
    """Surcharge as a fraction (0.15 = 15%)."""

    rush_addon: float
    total: float


class SummaryLine(BaseModel):
    """One display/export row of the summary."""

    key: str
    label: str
    amount: int
    """Whole rubles."""
    text: str
    """Formatted currency, e.g. '50 000 ₽'."""


class Estimate(BaseModel):
    """Everything a view needs after one interaction."""

    state: EstimatorState
    cost: ItemizedCost
    rush_percent_label: str
    lines: list[SummaryLine]
    total_label: str
    summary_text: str


# ═══════════════════════════════════════════════════════════════════════════
# Curves
# ═══════════════════════════════════════════════════════════════════════════

class PriceCurve(BaseModel):
    """Unit price for every integer count on a slider."""

    counts: list[int]
    prices: list[float]


class RushCurve(BaseModel):
    """Rush percent for every day on the deadline slider."""

    days: list[int]
    percents: list[float]
