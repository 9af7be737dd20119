"""Normalizer / clamper — raw input → value inside the field's bounds.

Input is never rejected: junk becomes 0, out-of-range values are pulled
to the nearest bound.
"""

from __future__ import annotations

import math
from typing import Any

from deck_estimator.config.fields import FieldSpec
from deck_estimator.engine.rounding import round_rubles


def clamp(value: float, lo: float, hi: float) -> float:
    return min(max(value, lo), hi)


def coerce_number(raw: Any) -> float:
    """Turn a raw form value into a float.  None, blanks, junk and NaN → 0."""
    if raw is None:
        return 0.0
    if isinstance(raw, str):
        raw = raw.strip()
        if not raw:
            return 0.0
    try:
        value = float(raw)
    except OverflowError:
        # integers past the float range still clamp to the nearest bound
        return math.inf if raw > 0 else -math.inf
    except (TypeError, ValueError):
        return 0.0
    if math.isnan(value):
        return 0.0
    return value


_FALSE_WORDS = frozenset({"", "0", "false", "off", "no"})


def coerce_flag(raw: Any) -> bool:
    """Turn a raw checkbox value into a bool.  Blank and falsy words → False."""
    if isinstance(raw, str):
        return raw.strip().lower() not in _FALSE_WORDS
    if raw is None or isinstance(raw, bool):
        return bool(raw)
    return coerce_number(raw) != 0


def normalize(spec: FieldSpec, raw: Any) -> int:
    """Round to a whole unit (count or ruble) and clamp to ``[min, max]``.

    Bounds are whole numbers, so clamping before rounding gives the same
    result as rounding first and keeps infinities out of the rounding step.
    Idempotent: ``normalize(spec, normalize(spec, x)) == normalize(spec, x)``.
    """
    value = clamp(coerce_number(raw), spec.min, spec.max)
    return round_rubles(value)
