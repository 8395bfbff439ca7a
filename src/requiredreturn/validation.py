"""Input validation for the required return calculator."""
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Dict, Optional

MIN_MARKET_PRICE = 1.0
MAX_MARKET_PRICE = 500.0
MAX_DIVIDEND = 50.0
MAX_GROWTH_RATE_PERCENT = 25.0

FIELD_ORDER = ("market_price", "dividend_amount", "growth_rate_percent")

# Maps field name -> human readable message; empty means the inputs are valid.
ValidationResult = Dict[str, str]


@dataclass(frozen=True)
class ReturnInputs:
    """Immutable snapshot of the three user inputs.

    ``growth_rate_percent`` is expressed in percent (6.4 means 6.4%).
    Fields may be ``None`` when the form value is blank.
    """

    market_price: Optional[float]
    dividend_amount: Optional[float]
    growth_rate_percent: Optional[float]


@dataclass(frozen=True)
class ValidatedInputs(ReturnInputs):
    """Inputs that passed :func:`validate`; only built by :func:`require_valid`."""

    market_price: float
    dividend_amount: float
    growth_rate_percent: float


DEFAULT_INPUTS = ReturnInputs(market_price=54.56, dividend_amount=5.10, growth_rate_percent=6.40)


class InputValidationError(ValueError):
    """Raised by :func:`require_valid` when one or more fields are out of range."""

    def __init__(self, errors: ValidationResult) -> None:
        self.errors = dict(errors)
        super().__init__("; ".join(self.errors[k] for k in FIELD_ORDER if k in self.errors))


def _missing(value: Optional[float]) -> bool:
    return value is None or math.isnan(value)


def _check_market_price(price: Optional[float]) -> Optional[str]:
    # Lower bound first; blank, zero and negative prices all read as "too low".
    if _missing(price) or price < MIN_MARKET_PRICE:
        return "Market price must be at least $1"
    if price > MAX_MARKET_PRICE:
        return "Market price cannot exceed $500"
    return None


def _check_dividend(dividend: Optional[float]) -> Optional[str]:
    if _missing(dividend):
        return "Dividend is required"
    if dividend < 0:
        return "Dividend cannot be negative"
    if dividend > MAX_DIVIDEND:
        return "Dividend cannot exceed $50"
    return None


def _check_growth_rate(growth: Optional[float]) -> Optional[str]:
    if _missing(growth):
        return "Growth rate is required"
    if growth < 0:
        return "Growth rate cannot be negative"
    if growth > MAX_GROWTH_RATE_PERCENT:
        return "Growth rate cannot exceed 25%"
    return None


def validate(inputs: ReturnInputs) -> ValidationResult:
    """Return field -> message for every out-of-range input.

    Every field is checked independently; the function never raises.
    """

    errors: ValidationResult = {}
    checks = (
        ("market_price", _check_market_price, inputs.market_price),
        ("dividend_amount", _check_dividend, inputs.dividend_amount),
        ("growth_rate_percent", _check_growth_rate, inputs.growth_rate_percent),
    )
    for field, check, value in checks:
        message = check(value)
        if message is not None:
            errors[field] = message
    return errors


def require_valid(inputs: ReturnInputs) -> ValidatedInputs:
    """Return ``inputs`` as :class:`ValidatedInputs` or raise :class:`InputValidationError`."""

    errors = validate(inputs)
    if errors:
        raise InputValidationError(errors)
    return ValidatedInputs(
        market_price=float(inputs.market_price),
        dividend_amount=float(inputs.dividend_amount),
        growth_rate_percent=float(inputs.growth_rate_percent),
    )


__all__ = [
    "DEFAULT_INPUTS",
    "FIELD_ORDER",
    "InputValidationError",
    "MAX_DIVIDEND",
    "MAX_GROWTH_RATE_PERCENT",
    "MAX_MARKET_PRICE",
    "MIN_MARKET_PRICE",
    "ReturnInputs",
    "ValidatedInputs",
    "ValidationResult",
    "require_valid",
    "validate",
]
