"""Required return calculator package entry points."""
from __future__ import annotations

import sys

# Avoid leaving ``__pycache__`` folders behind when the calculator runs.
sys.dont_write_bytecode = True

from .cli import build_parser, run_cli
from .computation import Evaluation, evaluate
from .finance import CashflowEntry, Model, compute_model
from .validation import DEFAULT_INPUTS, ReturnInputs, ValidatedInputs, require_valid, validate

__all__ = [
    "CashflowEntry",
    "DEFAULT_INPUTS",
    "Evaluation",
    "Model",
    "ReturnInputs",
    "ValidatedInputs",
    "build_parser",
    "compute_model",
    "evaluate",
    "main",
    "main_cli",
    "require_valid",
    "run_cli",
    "run_gui",
    "validate",
]


def run_gui() -> None:
    # Tk is only imported when the window is actually requested.
    from .gui.app import run

    run()


def main(argv=None) -> None:
    """Console entry point supporting both CLI and GUI modes."""

    parser = build_parser()
    default_args = parser.parse_args([])
    args = parser.parse_args(argv)

    if args.gui:
        run_gui()
        return

    if args.cli:
        status = run_cli(args)
        if status:
            raise SystemExit(status)
        return

    cli_fields = [
        "price",
        "dividend",
        "growth",
        "engine",
        "export",
        "chart",
        "show",
        "log_level",
    ]
    if any(getattr(args, field) != getattr(default_args, field) for field in cli_fields):
        parser.error("CLI options require --cli; add --cli to run command-line mode.")

    run_gui()


def main_cli(argv=None) -> None:
    """Dedicated console entry point for CLI usage."""

    parser = build_parser()
    args = parser.parse_args(argv)
    if not args.cli:
        args.cli = True
    status = run_cli(args)
    if status:
        raise SystemExit(status)
