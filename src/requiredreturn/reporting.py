"""Reporting helpers: display formatting, summaries and CSV export."""
from __future__ import annotations

import csv
import logging
import numbers
from dataclasses import dataclass
from typing import Iterable, List, Sequence

from .computation import Evaluation
from .finance import Model
from .validation import FIELD_ORDER, ReturnInputs, ValidationResult

logger = logging.getLogger(__name__)

MODEL_WARNING = "Growth rate must be less than required return"

CHART_NOTE = (
    "Gordon Growth Model: calculates the minimum return investors require"
    " given current price and expected dividend growth."
)

CASHFLOW_HEADER = ["Year", "Dividend Cash Flow", "Initial Investment", "Total", "Required Return (%)"]


def format_currency(value: float) -> str:
    """Two decimals with a dollar sign; negatives are parenthesized."""

    # Values that round to zero (including -0.0) print as $0.00.
    value = round(value, 2) + 0.0
    if value < 0:
        return f"(${abs(value):,.2f})"
    return f"${value:,.2f}"


def format_percent(value: float) -> str:
    return f"{value:.2f}%"


def error_lines(errors: ValidationResult) -> List[str]:
    if not errors:
        return []
    lines = ["Please correct the following:"]
    ordered = [k for k in FIELD_ORDER if k in errors] + [k for k in errors if k not in FIELD_ORDER]
    lines.extend(f"  • {errors[k]}" for k in ordered)
    return lines


def summary_lines(model: Model, inputs: ReturnInputs) -> List[str]:
    return [
        f"Required Return: {format_percent(model.required_return_percent)}",
        "  Formula: r = (D1 / P) + g",
        f"  Next dividend (D1): {format_currency(model.next_dividend)}",
        "",
        "Gordon Growth Model",
        f"  Dividend yield: {format_percent(model.dividend_yield_percent)}",
        f"  Growth rate: {format_percent(inputs.growth_rate_percent)}",
        f"  Required return: {format_percent(model.required_return_percent)}",
    ]


def chart_description(model: Model, inputs: ReturnInputs) -> str:
    """Plain-text description of the chart for screen readers and tooltips."""

    return (
        f"Bar chart showing initial stock purchase of ${inputs.market_price:.2f} and growing "
        f"dividend payments starting at ${inputs.dividend_amount:.2f} growing at "
        f"{inputs.growth_rate_percent:.2f}% annually, with calculated required return of "
        f"{model.required_return_percent:.2f}%"
    )


@dataclass(frozen=True)
class PanelState:
    """What the results panel shows for one evaluation."""

    message: str
    summary: List[str]
    chart_note: str
    show_chart: bool


def panel_state(evaluation: Evaluation) -> PanelState:
    """Results text, message and chart note for ``evaluation``.

    Only an ``ok`` evaluation gets a summary, a chart and its description; the
    other states fall back to the generic :data:`CHART_NOTE`.
    """

    if evaluation.errors:
        return PanelState("\n".join(error_lines(evaluation.errors)), [], CHART_NOTE, False)
    model = evaluation.model
    if evaluation.status != "ok":
        return PanelState(f"Warning: {MODEL_WARNING}.", [], CHART_NOTE, False)
    return PanelState(
        "",
        summary_lines(model, evaluation.inputs),
        chart_description(model, evaluation.inputs),
        True,
    )


def cashflow_rows(model: Model) -> List[list]:
    return [
        [cf.year, cf.dividend_flow, cf.investment_flow, cf.total_flow, cf.required_return_percent]
        for cf in model.cashflows
    ]


def cashflow_table_lines(model: Model) -> List[str]:
    header = ["Year", "Dividend", "Investment", "Total"]
    widths = [4, 12, 12, 12]
    lines = [" | ".join(h.rjust(w) for h, w in zip(header, widths))]
    for cf in model.cashflows:
        cells = [
            str(cf.year),
            format_currency(cf.dividend_flow),
            format_currency(cf.investment_flow),
            format_currency(cf.total_flow),
        ]
        lines.append(" | ".join(c.rjust(w) for c, w in zip(cells, widths)))
    return lines


def export_csv(path: str, header: Sequence[str], rows: Iterable[Sequence]):
    """Write header/row data to a CSV file."""

    def _format_cell(value: object) -> str:
        """Integers stay as-is, other real numbers get two decimal places."""

        if isinstance(value, numbers.Integral):
            return str(value)
        if isinstance(value, numbers.Real):
            return format(value, ".2f")
        return str(value)

    with open(path, "w", newline="") as f:
        writer = csv.writer(f)
        writer.writerow([_format_cell(h) for h in header])
        for row in rows:
            writer.writerow([_format_cell(cell) for cell in row])
    logger.info("Wrote cash flows to %s", path)


__all__ = [
    "CASHFLOW_HEADER",
    "CHART_NOTE",
    "MODEL_WARNING",
    "PanelState",
    "cashflow_rows",
    "cashflow_table_lines",
    "chart_description",
    "error_lines",
    "export_csv",
    "format_currency",
    "format_percent",
    "panel_state",
    "summary_lines",
]
