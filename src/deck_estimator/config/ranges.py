"""Linear volume-discount range — count ↔ unit price interpolation."""

from pydantic import BaseModel, ConfigDict, Field, model_validator


class LinearRange(BaseModel):
    """Two-point line from order volume to unit price.

    Below ``threshold_min`` the unit price is flat at ``max_price``;
    above ``threshold_max`` it is flat at ``min_price``.
    """

    model_config = ConfigDict(frozen=True)

    min_price: int = Field(gt=0, description="Unit price at or above threshold_max (₽)")
    max_price: int = Field(gt=0, description="Unit price at or below threshold_min (₽)")
    threshold_min: int = Field(ge=0, description="Count where the discount ramp starts")
    threshold_max: int = Field(gt=0, description="Count where the discount ramp bottoms out")

    @model_validator(mode="after")
    def _check_ramp(self) -> "LinearRange":
        if self.threshold_min >= self.threshold_max:
            raise ValueError("threshold_min must be below threshold_max")
        if self.min_price >= self.max_price:
            raise ValueError("min_price must be below max_price")
        return self

    @property
    def span(self) -> int:
        return self.threshold_max - self.threshold_min

    @property
    def price_drop(self) -> int:
        return self.max_price - self.min_price
