"""Session controller — owns the mutable estimator state.

Every user action maps to exactly one update call here.  A paired update
(slide count ↔ slide price, render count ↔ render price) normalizes the
edited field, converts it once into the partner field and normalizes that
too.  Nothing listens for the partner change, so a count → price edit can
never bounce back into another price → count conversion.

The pricing functions stay pure; only this class writes ``EstimatorState``.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Mapping

from deck_estimator.config.fields import FieldSpec, field_specs
from deck_estimator.config.project import PROJECT_TYPES, PricingConfig
from deck_estimator.config.settings import EstimatorSettings, get_settings
from deck_estimator.engine.aggregate import aggregate
from deck_estimator.engine.converter import count_from_price, price_from_count
from deck_estimator.engine.formatting import (
    format_currency,
    format_percent,
    summary_lines,
    summary_text,
)
from deck_estimator.engine.normalize import coerce_flag, normalize
from deck_estimator.engine.rush_fee import rush_percent
from deck_estimator.models.results import Estimate, EstimatorState

logger = logging.getLogger(__name__)

ClipboardWriter = Callable[[str], Any]


class Estimator:
    """One estimating session.

    Usage::

        est = Estimator()
        est.set_project_type("quest")
        est.update_slides_from_count(45)
        est.set_keyvisual(True)
        print(est.estimate().total_label)

    Parameters
    ----------
    registry : dict[str, PricingConfig] | None
        Available project variants.  Defaults to the built-in price lists.
    settings : EstimatorSettings | None
        Session defaults.  Defaults to ``get_settings()``.
    """

    def __init__(
        self,
        registry: dict[str, PricingConfig] | None = None,
        settings: EstimatorSettings | None = None,
    ) -> None:
        self._registry = registry if registry is not None else PROJECT_TYPES
        if not self._registry:
            raise ValueError("registry must contain at least one project type")
        self._settings = settings if settings is not None else get_settings()
        self.state = EstimatorState(project_type=self._fallback_type())
        self._specs = field_specs(self.config)
        self.reset()

    @classmethod
    def from_state(
        cls,
        state: EstimatorState,
        registry: dict[str, PricingConfig] | None = None,
        settings: EstimatorSettings | None = None,
    ) -> "Estimator":
        """Resume a session from a saved state, re-clamping every field.

        Count/price pairs are taken as given; no conversion runs.
        """
        return cls.from_values(state.model_dump(), registry=registry, settings=settings)

    @classmethod
    def from_values(
        cls,
        values: Mapping[str, Any],
        registry: dict[str, PricingConfig] | None = None,
        settings: EstimatorSettings | None = None,
    ) -> "Estimator":
        """Resume a session from raw posted values.

        Every field goes through the same coercion as a live edit, so blanks
        become 0 and fractions round.  Missing fields keep their defaults,
        re-clamped to the chosen variant; unknown keys are ignored.
        """
        est = cls(registry=registry, settings=settings)
        if "project_type" in values:
            est._select_type(str(values["project_type"]))
        for name in est._specs:
            est._set_field(name, values.get(name, getattr(est.state, name)))
        if "keyvisual" in values:
            est.state.keyvisual = coerce_flag(values["keyvisual"])
        return est

    # ── Read-only views ────────────────────────────────────────────────

    @property
    def config(self) -> PricingConfig:
        return self._registry[self.state.project_type]

    def field_specs(self) -> dict[str, FieldSpec]:
        return dict(self._specs)

    # ── Updates ────────────────────────────────────────────────────────

    def set_project_type(self, name: str) -> None:
        """Switch variant; prices are re-derived from the current counts."""
        self._select_type(name)
        self.update_slides_from_count(self.state.slides_count)
        self.update_renders_from_count(self.state.renders_count)

    def update_slides_from_count(self, raw: Any) -> None:
        self._set_field("slides_count", raw)
        self._set_field("slides_price", price_from_count(self.state.slides_count, self.config.slides))

    def update_slides_from_price(self, raw: Any) -> None:
        self._set_field("slides_price", raw)
        self._set_field("slides_count", count_from_price(self.state.slides_price, self.config.slides))

    def update_renders_from_count(self, raw: Any) -> None:
        self._set_field("renders_count", raw)
        self._set_field("renders_price", price_from_count(self.state.renders_count, self.config.renders))

    def update_renders_from_price(self, raw: Any) -> None:
        self._set_field("renders_price", raw)
        self._set_field("renders_count", count_from_price(self.state.renders_price, self.config.renders))

    def set_deadline_days(self, raw: Any) -> None:
        self._set_field("deadline_days", raw)

    def set_keyvisual(self, enabled: Any) -> None:
        self.state.keyvisual = coerce_flag(enabled)

    def apply(self, field: str, raw: Any) -> None:
        """Dispatch a raw edit by field name.  Unknown names raise ``KeyError``."""
        handlers: dict[str, Callable[[Any], None]] = {
            "project_type": lambda v: self.set_project_type(str(v)),
            "slides_count": self.update_slides_from_count,
            "slides_price": self.update_slides_from_price,
            "renders_count": self.update_renders_from_count,
            "renders_price": self.update_renders_from_price,
            "deadline_days": self.set_deadline_days,
            "keyvisual": self.set_keyvisual,
        }
        if field not in handlers:
            raise KeyError(f"Unknown field: {field!r}")
        handlers[field](raw)

    def reset(self) -> None:
        """Back to the configured defaults.  The project type is kept."""
        s = self._settings
        self.update_slides_from_count(s.default_slides_count)
        self.update_renders_from_count(s.default_renders_count)
        self.set_deadline_days(s.default_deadline_days)
        self.state.keyvisual = False

    # ── Outputs ────────────────────────────────────────────────────────

    def estimate(self) -> Estimate:
        """Recompute the itemized cost and its display strings."""
        snapshot = self.state.model_copy()
        cost = aggregate(snapshot, self.config)
        return Estimate(
            state=snapshot,
            cost=cost,
            rush_percent_label=format_percent(rush_percent(snapshot.deadline_days, self.config.rush)),
            lines=summary_lines(cost),
            total_label=format_currency(cost.total),
            summary_text=summary_text(cost),
        )

    def summary_text(self) -> str:
        return summary_text(aggregate(self.state, self.config))

    def copy_summary(self, writer: ClipboardWriter) -> bool:
        """Hand the summary to an external clipboard writer.

        A failing writer is logged and reported as ``False``; the session
        state is never touched.
        """
        text = self.summary_text()
        try:
            writer(text)
        except Exception:
            logger.exception("Clipboard write failed")
            return False
        return True

    # ── Internals ──────────────────────────────────────────────────────

    def _fallback_type(self) -> str:
        preferred = self._settings.default_project_type
        return preferred if preferred in self._registry else next(iter(self._registry))

    def _select_type(self, name: str) -> None:
        if name not in self._registry:
            fallback = self._fallback_type()
            logger.warning("Unknown project type %r, using %r", name, fallback)
            name = fallback
        self.state.project_type = name
        self._specs = field_specs(self.config)

    def _set_field(self, name: str, raw: Any) -> None:
        setattr(self.state, name, normalize(self._specs[name], raw))
