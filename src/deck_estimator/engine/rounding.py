"""Half-up rounding for money amounts.

Built-in ``round`` uses banker's rounding and works on the binary value,
so ``round(2.675, 2)`` gives 2.67.  Prices are rounded the way a cashier
would: through the shortest decimal repr, halves away from zero.
"""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Context, Decimal

# wide enough for any finite float quantized to kopecks (1.8e308 → ~311 digits)
_CONTEXT = Context(prec=400)


def round_half_up(value: float, precision: int = 0) -> float:
    """Round ``value`` to ``precision`` decimals, halves away from zero."""
    quantum = Decimal(1).scaleb(-precision)
    exact = Decimal(repr(float(value)))
    return float(exact.quantize(quantum, rounding=ROUND_HALF_UP, context=_CONTEXT))


def round2(value: float) -> float:
    """Intermediate money rounding (kopecks)."""
    return round_half_up(value, 2)


def round_rubles(value: float) -> int:
    """Display rounding to whole rubles."""
    return int(round_half_up(value, 0))
