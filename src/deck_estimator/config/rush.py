"""Rush-fee policies — deadline → surcharge strategies.

Two strategies are supported and selected per project variant:

  - ``QuadraticRush``: smooth curve, fee grows with the square of how far
    the deadline sits below the normal turnaround.
  - ``BucketedRush``: discrete day table, first bucket whose ``max_days``
    covers the deadline wins.
"""

from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, model_validator


class QuadraticRush(BaseModel):
    """Smooth surcharge curve between the minimum and normal deadline."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["quadratic"] = "quadratic"
    normal_deadline_days: int = Field(default=14, gt=0, description="No surcharge at or beyond this deadline")
    min_deadline_days: int = Field(default=3, ge=0, description="Tightest deadline; full coefficient applies")
    max_coefficient: float = Field(default=0.15, ge=0, le=1.0, description="Surcharge fraction at the tightest deadline")

    @model_validator(mode="after")
    def _check_deadlines(self) -> "QuadraticRush":
        if self.min_deadline_days >= self.normal_deadline_days:
            raise ValueError("min_deadline_days must be below normal_deadline_days")
        return self


class RushBucket(BaseModel):
    """One row of the discrete table: deadlines ≤ ``max_days`` pay ``percent``."""

    model_config = ConfigDict(frozen=True)

    max_days: int = Field(ge=0)
    percent: float = Field(ge=0, le=100)


DEFAULT_RUSH_BUCKETS: tuple[RushBucket, ...] = (
    RushBucket(max_days=0, percent=0),
    RushBucket(max_days=1, percent=50),
    RushBucket(max_days=2, percent=40),
    RushBucket(max_days=3, percent=30),
    RushBucket(max_days=5, percent=20),
    RushBucket(max_days=7, percent=10),
)


class BucketedRush(BaseModel):
    """Discrete day-bucket surcharge table, smallest threshold first."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["bucketed"] = "bucketed"
    buckets: tuple[RushBucket, ...] = Field(
        default=DEFAULT_RUSH_BUCKETS,
        description="Ordered (max_days → percent) rows; beyond the last row the fee is 0%",
    )

    @model_validator(mode="after")
    def _check_order(self) -> "BucketedRush":
        if not self.buckets:
            raise ValueError("buckets must not be empty")
        days = [b.max_days for b in self.buckets]
        if any(a >= b for a, b in zip(days, days[1:])):
            raise ValueError("bucket max_days must be strictly ascending")
        return self

    @property
    def max_percent(self) -> float:
        return max(b.percent for b in self.buckets)


RushPolicy = Annotated[Union[QuadraticRush, BucketedRush], Field(discriminator="kind")]
