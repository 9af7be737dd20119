"""Display formatting — ru-RU currency/percent strings and the export summary.

Russian number formatting groups thousands with a no-break space, but only
from five digits up (``2500`` stays ``"2500"``, ``50000`` becomes
``"50 000"``), and uses a comma as the decimal separator.
"""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal

from deck_estimator.engine.rounding import round_rubles
from deck_estimator.models.results import ItemizedCost, SummaryLine

GROUP_SEPARATOR = "\u00a0"
CURRENCY_SIGN = "₽"

SUMMARY_LABELS: dict[str, str] = {
    "slides": "Вёрстка слайдов",
    "renders": "Отрисовка",
    "rush": "Надбавка за срочность",
    "keyvisual": "Кейвижуал",
}
TOTAL_LABEL = "Всего"


def format_number(value: float) -> str:
    """Whole-ruble amount with ru-RU thousands grouping."""
    amount = round_rubles(value)
    if abs(amount) < 10_000:
        return str(amount)
    return f"{amount:,}".replace(",", GROUP_SEPARATOR)


def format_currency(value: float) -> str:
    return f"{format_number(value)} {CURRENCY_SIGN}"


def format_percent(value: float) -> str:
    """``15`` → ``'+15,00 %'``."""
    quantized = Decimal(repr(float(value))).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)
    return f"+{str(quantized).replace('.', ',')} %"


def summary_lines(cost: ItemizedCost) -> list[SummaryLine]:
    """Rows for every component that rounds to a nonzero ruble amount."""
    amounts = {
        "slides": cost.slides_cost,
        "renders": cost.renders_cost,
        "rush": cost.rush_addon,
        "keyvisual": cost.keyvisual_cost,
    }
    lines: list[SummaryLine] = []
    for key, value in amounts.items():
        amount = round_rubles(value)
        if amount <= 0:
            continue
        lines.append(SummaryLine(
            key=key,
            label=SUMMARY_LABELS[key],
            amount=amount,
            text=format_currency(amount),
        ))
    return lines


def summary_text(cost: ItemizedCost) -> str:
    """Plain-text summary for the clipboard: one line per item plus the total."""
    rows = [f"{line.label}: {line.text}" for line in summary_lines(cost)]
    rows.append(f"{TOTAL_LABEL}: {format_currency(cost.total)}")
    return "\n".join(rows)
