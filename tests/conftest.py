"""Shared test fixtures — built-in price lists plus a bucketed variant."""

from __future__ import annotations

import pytest

from deck_estimator.config import (
    EVENT,
    QUEST,
    BucketedRush,
    EstimatorSettings,
    PricingConfig,
    QuadraticRush,
)


@pytest.fixture
def event() -> PricingConfig:
    return EVENT


@pytest.fixture
def quest() -> PricingConfig:
    return QUEST


@pytest.fixture
def bucketed_event() -> PricingConfig:
    """Event prices with the day-table rush that leaves the key visual alone."""
    return EVENT.model_copy(update={
        "name": "event_bucketed",
        "rush": BucketedRush(),
        "rush_includes_keyvisual": False,
    })


@pytest.fixture
def quadratic() -> QuadraticRush:
    return QuadraticRush(normal_deadline_days=14, min_deadline_days=3, max_coefficient=0.15)


@pytest.fixture
def bucketed() -> BucketedRush:
    return BucketedRush()


@pytest.fixture
def settings() -> EstimatorSettings:
    return EstimatorSettings(
        default_project_type="event",
        default_slides_count=20,
        default_renders_count=0,
        default_deadline_days=14,
        log_level="INFO",
    )
