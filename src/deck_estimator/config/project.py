"""Project variants — the hard-coded price lists for each service type."""

from pydantic import BaseModel, ConfigDict, Field

from deck_estimator.config.ranges import LinearRange
from deck_estimator.config.rush import QuadraticRush, RushPolicy


class PricingConfig(BaseModel):
    """Complete price list for one project variant."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(description="Registry key, e.g. 'event'")
    label: str = Field(default="", description="Human label")
    slides: LinearRange = Field(description="Slide layout: count ↔ unit price")
    renders: LinearRange = Field(description="Illustrations: count ↔ unit price")
    keyvisual_price: int = Field(ge=0, description="Fixed key-visual add-on (₽)")
    rush: RushPolicy = Field(default_factory=QuadraticRush, description="Deadline surcharge strategy")
    rush_includes_keyvisual: bool = Field(
        default=True,
        description="True: the rush surcharge also applies to the key visual. "
                    "False: the key visual is added after the surcharge, untouched.",
    )


EVENT = PricingConfig(
    name="event",
    label="Мероприятие",
    slides=LinearRange(min_price=1500, max_price=2500, threshold_min=30, threshold_max=200),
    renders=LinearRange(min_price=750, max_price=1500, threshold_min=10, threshold_max=30),
    keyvisual_price=30_000,
)

QUEST = PricingConfig(
    name="quest",
    label="Квест",
    slides=LinearRange(min_price=1000, max_price=2000, threshold_min=30, threshold_max=200),
    renders=LinearRange(min_price=500, max_price=1000, threshold_min=10, threshold_max=30),
    keyvisual_price=20_000,
)

PROJECT_TYPES: dict[str, PricingConfig] = {cfg.name: cfg for cfg in (EVENT, QUEST)}

DEFAULT_PROJECT_TYPE = "event"
