"""Rush-fee calculator — deadline (days) → surcharge.

Both strategies are total: any float, including negatives, NaN and
infinities, maps to a defined surcharge.

Quadratic (used by both built-in variants)::

    days ≥ normal           → 0
    otherwise               → max_coef × ((normal − max(days, min)) / (normal − min))²

Bucketed::

    first row with days ≤ max_days wins; past the last row → 0%
"""

from __future__ import annotations

import math

from deck_estimator.config.rush import BucketedRush, QuadraticRush, RushPolicy


def _finite_or_zero(days: float) -> float:
    return 0.0 if math.isnan(days) else float(days)


def quadratic_rush_fraction(days: float, policy: QuadraticRush) -> float:
    """Surcharge fraction in ``[0, max_coefficient]``."""
    days = _finite_or_zero(days)
    if days >= policy.normal_deadline_days:
        return 0.0
    days = max(days, policy.min_deadline_days)
    ratio = (policy.normal_deadline_days - days) / (
        policy.normal_deadline_days - policy.min_deadline_days
    )
    return policy.max_coefficient * ratio * ratio


def bucketed_rush_percent(days: float, policy: BucketedRush) -> float:
    """Surcharge percent from the day table.  Negative deadlines count as 0."""
    days = max(_finite_or_zero(days), 0.0)
    for bucket in policy.buckets:
        if days <= bucket.max_days:
            return bucket.percent
    return 0.0


def rush_fraction(days: float, policy: RushPolicy) -> float:
    """Surcharge as a fraction of the rush base (0.15 = +15%)."""
    if isinstance(policy, BucketedRush):
        return bucketed_rush_percent(days, policy) / 100.0
    return quadratic_rush_fraction(days, policy)


def rush_percent(days: float, policy: RushPolicy) -> float:
    """Surcharge in percent, for display."""
    if isinstance(policy, BucketedRush):
        return bucketed_rush_percent(days, policy)
    return quadratic_rush_fraction(days, policy) * 100.0
