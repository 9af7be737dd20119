"""Editable fields — bounds and rounding rule per input."""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from deck_estimator.config.project import PricingConfig


class FieldSpec(BaseModel):
    """Slider/number-box bounds for one editable quantity."""

    model_config = ConfigDict(frozen=True)

    min: int
    max: int
    step: int = Field(default=1, gt=0)
    kind: Literal["count", "money"] = Field(
        default="count",
        description="'count' rounds to whole units, 'money' to whole rubles",
    )


SLIDES_COUNT = FieldSpec(min=0, max=200)
RENDERS_COUNT = FieldSpec(min=0, max=50)
DEADLINE_DAYS = FieldSpec(min=3, max=30)


def field_specs(config: PricingConfig) -> dict[str, FieldSpec]:
    """Field bounds for a variant.  Price bounds follow the variant's ranges."""
    return {
        "slides_count": SLIDES_COUNT,
        "slides_price": FieldSpec(
            min=config.slides.min_price, max=config.slides.max_price, kind="money",
        ),
        "renders_count": RENDERS_COUNT,
        "renders_price": FieldSpec(
            min=config.renders.min_price, max=config.renders.max_price, kind="money",
        ),
        "deadline_days": DEADLINE_DAYS,
    }
