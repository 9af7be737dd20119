"""Cost aggregator — counts × unit prices + add-on + rush → itemized total."""

from __future__ import annotations

from deck_estimator.config.project import PricingConfig
from deck_estimator.engine.rounding import round2
from deck_estimator.engine.rush_fee import rush_fraction
from deck_estimator.models.results import EstimatorState, ItemizedCost


def aggregate(state: EstimatorState, config: PricingConfig) -> ItemizedCost:
    """Compute the itemized cost for ``state`` under ``config``.

    Pure: reads ``state``, never writes it.  Every intermediate is rounded
    to kopecks so float drift cannot accumulate across the sum.
    """
    slides_cost = round2(state.slides_count * state.slides_price)
    renders_cost = round2(state.renders_count * state.renders_price)
    keyvisual_cost = float(config.keyvisual_price) if state.keyvisual else 0.0
    base_cost = round2(slides_cost + renders_cost + keyvisual_cost)

    fraction = rush_fraction(state.deadline_days, config.rush)
    if config.rush_includes_keyvisual:
        rush_base = base_cost
    else:
        # key visual rides on top of the surcharge, untouched
        rush_base = round2(slides_cost + renders_cost)
    rush_addon = round2(rush_base * fraction)
    total = round2(base_cost + rush_addon)

    return ItemizedCost(
        slides_cost=slides_cost,
        renders_cost=renders_cost,
        keyvisual_cost=keyvisual_cost,
        base_cost=base_cost,
        rush_fraction=fraction,
        rush_addon=rush_addon,
        total=total,
    )
