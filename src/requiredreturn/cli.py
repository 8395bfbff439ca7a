"""Command-line interface for the required return calculator."""
from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional

import matplotlib.pyplot as plt

from .charting import build_figure, plot_model
from .computation import evaluate, resolve_use_numpy
from .parsing import parse_number
from .reporting import (
    CASHFLOW_HEADER,
    MODEL_WARNING,
    cashflow_rows,
    cashflow_table_lines,
    error_lines,
    export_csv,
    summary_lines,
)
from .validation import DEFAULT_INPUTS, ReturnInputs

logger = logging.getLogger(__name__)

EXIT_INVALID_INPUT = 1
EXIT_INVALID_MODEL = 2


def setup_logging(level: str = "WARNING") -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.WARNING),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


def _number_arg(text: str) -> Optional[float]:
    try:
        return parse_number(text)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(str(exc)) from None


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Required return on a dividend stock (Gordon Growth Model)"
    )
    mode = parser.add_mutually_exclusive_group()
    mode.add_argument("--cli", action="store_true", help="Run in CLI mode")
    mode.add_argument("--gui", action="store_true", help="Run GUI")
    parser.add_argument(
        "--price",
        type=_number_arg,
        default=DEFAULT_INPUTS.market_price,
        help="Current market price per share ($1-$500)",
    )
    parser.add_argument(
        "--dividend",
        type=_number_arg,
        default=DEFAULT_INPUTS.dividend_amount,
        help="Current annual dividend per share ($0-$50)",
    )
    parser.add_argument(
        "--growth",
        type=_number_arg,
        default=DEFAULT_INPUTS.growth_rate_percent,
        help="Expected annual dividend growth in %% (0-25)",
    )
    parser.add_argument(
        "--engine",
        choices=["auto", "numpy", "python"],
        default="auto",
        help="Projection engine: auto uses NumPy",
    )
    parser.add_argument("--export", default="", help="Write the cash-flow table to this CSV path")
    parser.add_argument("--chart", default="", help="Save the chart to this image path (e.g. out.png)")
    parser.add_argument("--show", action="store_true", help="Open an interactive chart window")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging verbosity",
    )
    return parser


def run_cli(args: argparse.Namespace) -> int:
    """Run one calculation and print the report; returns the exit status."""

    setup_logging(args.log_level)
    inputs = ReturnInputs(
        market_price=args.price,
        dividend_amount=args.dividend,
        growth_rate_percent=args.growth,
    )
    use_numpy = resolve_use_numpy(args.engine)
    logger.debug("Evaluating %s (numpy=%s)", inputs, use_numpy)
    evaluation = evaluate(inputs, use_numpy=use_numpy)

    if evaluation.errors:
        print("\n".join(error_lines(evaluation.errors)), file=sys.stderr)
        return EXIT_INVALID_INPUT

    model = evaluation.model
    if not model.is_valid:
        print(f"Warning: {MODEL_WARNING}.", file=sys.stderr)
        return EXIT_INVALID_MODEL

    print("\n".join(summary_lines(model, inputs)))
    print("\nPROJECTED CASH FLOWS")
    print("\n".join(cashflow_table_lines(model)))

    if args.export:
        export_csv(args.export, CASHFLOW_HEADER, cashflow_rows(model))
        print(f"\nCSV exported to {args.export}")

    if args.chart:
        build_figure(model).savefig(args.chart)
        logger.info("Saved chart to %s", args.chart)
        print(f"Chart saved to {args.chart}")

    if args.show:
        fig, ax = plt.subplots(figsize=(10, 6))
        ax.set_title("Required Return Analysis")
        plot_model(ax, model)
        fig.tight_layout()
        plt.show()
    return 0


__all__ = ["build_parser", "run_cli", "setup_logging"]
