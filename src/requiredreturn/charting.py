"""Matplotlib rendering of the cash-flow projection."""
from __future__ import annotations

import math
from typing import List

from matplotlib.axes import Axes
from matplotlib.figure import Figure
from matplotlib.ticker import FuncFormatter

from .finance import Model
from .reporting import format_currency

COLORS = {
    "dividend": "#10b981",
    "investment": "#f87171",
    "required_return": "#4476ff",
    "text": "#06005a",
}


def _bar_labels(values) -> List[str]:
    return ["" if abs(v) < 0.01 else format_currency(v) for v in values]


def required_return_axis_limit(model: Model) -> float:
    """Upper limit of the required-return axis (20% headroom, rounded up)."""

    limit = math.ceil(model.required_return_percent * 1.2)
    return float(limit) if limit > 0 else 1.0


def plot_model(ax: Axes, model: Model) -> Axes:
    """Draw stacked dividend/investment bars and the required-return line.

    Returns the secondary axis holding the required-return line.
    """

    years = [cf.year for cf in model.cashflows]
    dividends = [cf.dividend_flow for cf in model.cashflows]
    investments = [cf.investment_flow for cf in model.cashflows]

    div_bars = ax.bar(years, dividends, color=COLORS["dividend"], label="Dividend Cash Flow")
    inv_bars = ax.bar(
        years,
        investments,
        bottom=dividends,
        color=COLORS["investment"],
        label="Initial Investment",
    )
    for bars, values in ((div_bars, dividends), (inv_bars, investments)):
        ax.bar_label(
            bars,
            labels=_bar_labels(values),
            fontsize=8,
            fontweight="bold",
            color=COLORS["text"],
        )

    ax.grid(True, linestyle="--", alpha=0.5)
    ax.set_xticks(years)
    ax.set_xlabel("Years")
    ax.set_ylabel("Cash Flows")
    ax.yaxis.set_major_formatter(FuncFormatter(lambda v, _pos: f"${v:g}"))

    ax_rr = ax.twinx()
    ax_rr.plot(
        years,
        [cf.required_return_percent for cf in model.cashflows],
        color=COLORS["required_return"],
        linewidth=3,
        label=f"Required Return: {model.required_return_percent:.2f}%",
    )
    ax_rr.set_ylim(0, required_return_axis_limit(model))
    ax_rr.set_ylabel("Required Return")
    ax_rr.yaxis.set_major_formatter(FuncFormatter(lambda v, _pos: f"{v:.1f}%"))

    handles, labels = ax.get_legend_handles_labels()
    rr_handles, rr_labels = ax_rr.get_legend_handles_labels()
    ax.legend(handles + rr_handles, labels + rr_labels, loc="upper left", fontsize=8)
    return ax_rr


def build_figure(model: Model, title: str = "Required Return Analysis") -> Figure:
    fig = Figure(figsize=(9.8, 5.6), dpi=100)
    ax = fig.add_subplot(111)
    ax.set_title(title)
    plot_model(ax, model)
    fig.tight_layout()
    return fig


__all__ = ["COLORS", "build_figure", "plot_model", "required_return_axis_limit"]
