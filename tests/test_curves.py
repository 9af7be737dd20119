"""Tests for engine/curves.py."""

from __future__ import annotations

import pytest

from deck_estimator.config.fields import DEADLINE_DAYS, RENDERS_COUNT, SLIDES_COUNT
from deck_estimator.engine.converter import price_from_count
from deck_estimator.engine.curves import price_curve, rush_curve
from deck_estimator.engine.rush_fee import rush_percent


class TestPriceCurve:

    def test_covers_slider(self, event):
        curve = price_curve(event.slides, SLIDES_COUNT)
        assert curve.counts[0] == 0
        assert curve.counts[-1] == 200
        assert len(curve.prices) == 201

    def test_matches_scalar_converter(self, event, quest):
        for cfg in (event, quest):
            curve = price_curve(cfg.renders, RENDERS_COUNT)
            for count, price in zip(curve.counts, curve.prices):
                assert price == pytest.approx(price_from_count(count, cfg.renders), abs=0.01)

    def test_flat_ends(self, event):
        curve = price_curve(event.slides, SLIDES_COUNT)
        assert curve.prices[0] == 2500
        assert curve.prices[30] == 2500
        assert curve.prices[115] == 2000
        assert curve.prices[200] == 1500


class TestRushCurve:

    def test_quadratic(self, quadratic):
        curve = rush_curve(quadratic, DEADLINE_DAYS)
        assert curve.days == list(range(3, 31))
        assert curve.percents[0] == 15.0
        assert all(p == 0 for p in curve.percents[curve.days.index(14):])
        assert all(a >= b for a, b in zip(curve.percents, curve.percents[1:]))

    def test_bucketed(self, bucketed):
        curve = rush_curve(bucketed, DEADLINE_DAYS)
        assert curve.percents[:5] == [30.0, 20.0, 20.0, 10.0, 10.0]
        assert curve.percents[5] == 0.0

    def test_matches_scalar_rush(self, quadratic, bucketed):
        for policy in (quadratic, bucketed):
            curve = rush_curve(policy, DEADLINE_DAYS)
            for day, percent in zip(curve.days, curve.percents):
                assert percent == pytest.approx(rush_percent(day, policy), abs=0.01)
