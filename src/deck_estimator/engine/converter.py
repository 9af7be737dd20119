"""Count ↔ unit-price conversion along a volume-discount ramp.

    count ≤ threshold_min          → max_price
    count ≥ threshold_max          → min_price
    in between                     → linear descent

``count_from_price`` solves the same line for count and clamps to the
thresholds at the two price bounds, so editing either field of a pair keeps
the other consistent.
"""

from __future__ import annotations

from deck_estimator.config.ranges import LinearRange


def price_from_count(count: float, rng: LinearRange) -> float:
    """Unit price for ``count`` units."""
    if count <= rng.threshold_min:
        return float(rng.max_price)
    if count >= rng.threshold_max:
        return float(rng.min_price)
    return rng.max_price - (count - rng.threshold_min) * rng.price_drop / rng.span


def count_from_price(price: float, rng: LinearRange) -> float:
    """Unit count that yields ``price`` on the ramp."""
    if price >= rng.max_price:
        return float(rng.threshold_min)
    if price <= rng.min_price:
        return float(rng.threshold_max)
    return rng.threshold_min + (rng.max_price - price) * rng.span / rng.price_drop
