"""Curve tabulation — price and rush read-outs across a whole slider.

Lets a client draw the discount ramp or label deadline ticks without one
request per slider position.
"""

from __future__ import annotations

import numpy as np

from deck_estimator.config.fields import FieldSpec
from deck_estimator.config.ranges import LinearRange
from deck_estimator.config.rush import RushPolicy
from deck_estimator.engine.rush_fee import rush_percent
from deck_estimator.models.results import PriceCurve, RushCurve


def _slider_grid(spec: FieldSpec) -> np.ndarray:
    return np.arange(spec.min, spec.max + 1, spec.step, dtype=np.int64)


def price_curve(rng: LinearRange, spec: FieldSpec) -> PriceCurve:
    """Unit price at every count position of ``spec``'s slider."""
    counts = _slider_grid(spec)
    ramp = rng.max_price - (counts - rng.threshold_min) * rng.price_drop / rng.span
    # np.clip pins the flat ceiling/floor outside the thresholds
    prices = np.clip(ramp, rng.min_price, rng.max_price)
    return PriceCurve(
        counts=counts.tolist(),
        prices=np.round(prices, 2).tolist(),
    )


def rush_curve(policy: RushPolicy, spec: FieldSpec) -> RushCurve:
    """Rush percent at every day position of the deadline slider."""
    days = _slider_grid(spec)
    percent_at = np.vectorize(lambda d: rush_percent(d, policy), otypes=[np.float64])
    percents = percent_at(days.astype(np.float64))
    return RushCurve(
        days=days.tolist(),
        percents=np.round(percents, 2).tolist(),
    )
