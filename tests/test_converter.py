"""Tests for engine/converter.py."""

from __future__ import annotations

import pytest

from deck_estimator.config import EVENT, QUEST
from deck_estimator.engine.converter import count_from_price, price_from_count


class TestPriceFromCount:

    def test_flat_ceiling_below_threshold(self, event):
        # 20 slides ≤ 30 → full price
        assert price_from_count(20, event.slides) == 2500
        assert price_from_count(0, event.slides) == 2500

    def test_threshold_points_exact(self, event):
        assert price_from_count(event.slides.threshold_min, event.slides) == event.slides.max_price
        assert price_from_count(event.slides.threshold_max, event.slides) == event.slides.min_price

    def test_flat_floor_above_threshold(self, event):
        assert price_from_count(250, event.slides) == 1500

    def test_midpoint(self, event):
        # 2500 − (115 − 30) × 1000 / 170 = 2000
        assert price_from_count(115, event.slides) == pytest.approx(2000)

    def test_renders_ramp(self, event):
        # 1500 − (20 − 10) × 750 / 20 = 1125
        assert price_from_count(20, event.renders) == pytest.approx(1125)

    @pytest.mark.parametrize("rng", [EVENT.slides, EVENT.renders, QUEST.slides, QUEST.renders])
    def test_non_increasing(self, rng):
        prices = [price_from_count(c, rng) for c in range(0, rng.threshold_max + 20)]
        assert all(a >= b for a, b in zip(prices, prices[1:]))


class TestCountFromPrice:

    def test_clamps_at_price_bounds(self, event):
        assert count_from_price(3000, event.slides) == 30
        assert count_from_price(2500, event.slides) == 30
        assert count_from_price(1500, event.slides) == 200
        assert count_from_price(1000, event.slides) == 200

    def test_solves_line(self, event):
        assert count_from_price(2000, event.slides) == pytest.approx(115)
        # 30 + (2500 − 1800) × 170 / 1000 = 149
        assert count_from_price(1800, event.slides) == pytest.approx(149)

    @pytest.mark.parametrize("rng", [EVENT.slides, EVENT.renders, QUEST.slides, QUEST.renders])
    def test_round_trip_stable_on_ramp(self, rng):
        for count in range(rng.threshold_min, rng.threshold_max + 1):
            price = price_from_count(count, rng)
            again = price_from_count(count_from_price(price, rng), rng)
            assert again == pytest.approx(price)
