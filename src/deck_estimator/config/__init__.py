"""Configuration models — price lists, rush policies, field bounds, settings."""

from deck_estimator.config.ranges import LinearRange
from deck_estimator.config.rush import (
    DEFAULT_RUSH_BUCKETS,
    BucketedRush,
    QuadraticRush,
    RushBucket,
    RushPolicy,
)
from deck_estimator.config.project import (
    DEFAULT_PROJECT_TYPE,
    EVENT,
    PROJECT_TYPES,
    QUEST,
    PricingConfig,
)
from deck_estimator.config.fields import FieldSpec, field_specs
from deck_estimator.config.settings import EstimatorSettings, get_settings

__all__ = [
    "LinearRange",
    "QuadraticRush",
    "BucketedRush",
    "RushBucket",
    "RushPolicy",
    "DEFAULT_RUSH_BUCKETS",
    "PricingConfig",
    "PROJECT_TYPES",
    "DEFAULT_PROJECT_TYPE",
    "EVENT",
    "QUEST",
    "FieldSpec",
    "field_specs",
    "EstimatorSettings",
    "get_settings",
]
