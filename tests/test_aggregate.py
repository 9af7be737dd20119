"""Tests for engine/aggregate.py — itemized totals for both rush strategies."""

from __future__ import annotations

import pytest

from deck_estimator.engine.aggregate import aggregate
from deck_estimator.models.results import EstimatorState


def _state(**overrides) -> EstimatorState:
    base = dict(
        project_type="event", slides_count=20, slides_price=2500,
        renders_count=0, renders_price=1500, deadline_days=14, keyvisual=False,
    )
    base.update(overrides)
    return EstimatorState(**base)


class TestQuadraticVariant:

    def test_default_session(self, event):
        # 20 slides at the flat 2500 ceiling, normal deadline
        cost = aggregate(_state(), event)
        assert cost.slides_cost == 50_000
        assert cost.renders_cost == 0
        assert cost.keyvisual_cost == 0
        assert cost.rush_fraction == 0
        assert cost.rush_addon == 0
        assert cost.total == 50_000

    def test_tightest_deadline(self, event):
        cost = aggregate(_state(deadline_days=3), event)
        assert cost.rush_fraction == 0.15
        assert cost.rush_addon == 7_500
        assert cost.total == 57_500

    def test_renders_added(self, event):
        cost = aggregate(_state(renders_count=20, renders_price=1125), event)
        assert cost.renders_cost == 22_500
        assert cost.base_cost == 72_500

    def test_rush_rounded_to_kopecks(self, event):
        # fraction = 0.15 × (4/11)² = 0.0198347...; 50000 × that = 991.7355...
        cost = aggregate(_state(deadline_days=10), event)
        assert cost.rush_addon == pytest.approx(991.74)
        assert cost.total == pytest.approx(50_991.74)

    def test_keyvisual_compounds_with_rush(self, quest):
        state = _state(project_type="quest", slides_price=2000, deadline_days=3, keyvisual=True)
        cost = aggregate(state, quest)
        assert cost.slides_cost == 40_000
        assert cost.keyvisual_cost == 20_000
        assert cost.base_cost == 60_000
        # rush is taken on slides + key visual
        assert cost.rush_addon == 9_000
        assert cost.total == 69_000

    def test_does_not_mutate_state(self, event):
        state = _state(deadline_days=3, keyvisual=True)
        before = state.model_dump()
        aggregate(state, event)
        assert state.model_dump() == before


class TestBucketedVariant:

    def test_two_day_deadline(self, bucketed_event):
        cost = aggregate(_state(slides_count=1, slides_price=1000, deadline_days=2), bucketed_event)
        assert cost.slides_cost == 1_000
        assert cost.rush_fraction == 0.4
        assert cost.rush_addon == 400
        assert cost.total == 1_400

    def test_keyvisual_excluded_from_rush(self, bucketed_event):
        state = _state(slides_count=1, slides_price=1000, deadline_days=2, keyvisual=True)
        cost = aggregate(state, bucketed_event)
        assert cost.keyvisual_cost == 30_000
        assert cost.base_cost == 31_000
        assert cost.rush_addon == 400
        assert cost.total == 31_400

    def test_no_rush_beyond_a_week(self, bucketed_event):
        cost = aggregate(_state(deadline_days=8), bucketed_event)
        assert cost.rush_addon == 0
        assert cost.total == cost.base_cost


def test_total_is_base_plus_rush(event, quest, bucketed_event):
    for cfg in (event, quest, bucketed_event):
        for days in range(0, 20):
            cost = aggregate(_state(slides_count=37, slides_price=2459, renders_count=13,
                                    renders_price=1387, deadline_days=days, keyvisual=True), cfg)
            assert cost.total == pytest.approx(cost.base_cost + cost.rush_addon, abs=0.01)
            assert cost.rush_addon >= 0
