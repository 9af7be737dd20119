"""Engine — pure pricing functions and the session controller."""

from deck_estimator.engine.rounding import round2, round_half_up, round_rubles
from deck_estimator.engine.normalize import clamp, coerce_flag, coerce_number, normalize
from deck_estimator.engine.converter import count_from_price, price_from_count
from deck_estimator.engine.rush_fee import (
    bucketed_rush_percent,
    quadratic_rush_fraction,
    rush_fraction,
    rush_percent,
)
from deck_estimator.engine.aggregate import aggregate
from deck_estimator.engine.formatting import (
    format_currency,
    format_number,
    format_percent,
    summary_lines,
    summary_text,
)
from deck_estimator.engine.curves import price_curve, rush_curve
from deck_estimator.engine.session import Estimator

__all__ = [
    "round2",
    "round_half_up",
    "round_rubles",
    "clamp",
    "coerce_number",
    "coerce_flag",
    "normalize",
    "price_from_count",
    "count_from_price",
    "quadratic_rush_fraction",
    "bucketed_rush_percent",
    "rush_fraction",
    "rush_percent",
    "aggregate",
    "format_number",
    "format_currency",
    "format_percent",
    "summary_lines",
    "summary_text",
    "price_curve",
    "rush_curve",
    "Estimator",
]
