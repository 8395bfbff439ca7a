"""Computation helpers tying validation and the model engine together."""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Optional

from .finance import Model, compute_model
from .parsing import parse_number
from .validation import FIELD_ORDER, ReturnInputs, ValidationResult, require_valid, validate

logger = logging.getLogger(__name__)


def resolve_use_numpy(engine: str) -> bool:
    """Return True if the NumPy projection should be used."""

    normalized = engine.lower()
    if normalized not in {"auto", "numpy", "python"}:
        raise ValueError(f"Unknown engine '{engine}' (expected auto/numpy/python)")
    return normalized != "python"


@dataclass(frozen=True)
class Evaluation:
    """Outcome of one validate-then-compute cycle."""

    inputs: ReturnInputs
    errors: ValidationResult = field(default_factory=dict)
    model: Optional[Model] = None

    @property
    def status(self) -> str:
        if self.errors:
            return "invalid-input"
        if self.model is None or not self.model.is_valid:
            return "invalid-model"
        return "ok"


def evaluate(inputs: ReturnInputs, use_numpy: bool = True) -> Evaluation:
    """Validate ``inputs`` and run the model only when there are no errors."""

    errors = validate(inputs)
    if errors:
        logger.debug("Skipping model, invalid fields: %s", ", ".join(errors))
        return Evaluation(inputs=inputs, errors=errors)
    model = compute_model(require_valid(inputs), use_numpy=use_numpy)
    if not model.is_valid:
        logger.info(
            "Growth rate %.4f is not below required return %.4f",
            model.growth_rate_decimal,
            model.required_return_decimal,
        )
    return Evaluation(inputs=inputs, model=model)


FIELD_LABELS = {
    "market_price": "Market Price",
    "dividend_amount": "Current Dividend",
    "growth_rate_percent": "Growth Rate (%)",
}


def evaluate_text(
    price_text: str,
    dividend_text: str,
    growth_text: str,
    use_numpy: bool = True,
) -> Evaluation:
    """Parse the three form values and evaluate them.

    A field that does not parse is passed on as blank, and its parse message
    replaces whatever the validator reported for it. Any parse error leaves the
    evaluation without a model.
    """

    values = {}
    parse_errors: ValidationResult = {}
    for name, text in zip(FIELD_ORDER, (price_text, dividend_text, growth_text)):
        try:
            values[name] = parse_number(text)
        except ValueError as exc:
            values[name] = None
            parse_errors[name] = f"{FIELD_LABELS[name]}: {exc}"

    evaluation = evaluate(ReturnInputs(**values), use_numpy=use_numpy)
    if not parse_errors:
        return evaluation
    errors = dict(evaluation.errors)
    errors.update(parse_errors)
    return Evaluation(inputs=evaluation.inputs, errors=errors)


__all__ = ["Evaluation", "FIELD_LABELS", "evaluate", "evaluate_text", "resolve_use_numpy"]
