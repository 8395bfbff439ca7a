"""Input parsing helpers for the required return calculator."""
from __future__ import annotations

from typing import Optional

from .validation import ReturnInputs


def parse_number(text: Optional[str]) -> Optional[float]:
    """Parse a form value such as "54.56", "$1,200" or "6.4%".

    Blank input returns None so the validator can report the field as missing.
    """

    if text is None:
        return None
    cleaned = text.strip().replace(",", "")
    if cleaned.startswith("$"):
        cleaned = cleaned[1:]
    elif cleaned.startswith("-$"):
        cleaned = "-" + cleaned[2:]
    if cleaned.endswith("%"):
        cleaned = cleaned[:-1]
    cleaned = cleaned.strip()
    if not cleaned:
        return None
    try:
        return float(cleaned)
    except ValueError:
        raise ValueError(f"'{text.strip()}' is not a number") from None


def parse_inputs(price_text: str, dividend_text: str, growth_text: str) -> ReturnInputs:
    """Build the input record from the three raw text fields."""

    return ReturnInputs(
        market_price=parse_number(price_text),
        dividend_amount=parse_number(dividend_text),
        growth_rate_percent=parse_number(growth_text),
    )


__all__ = ["parse_inputs", "parse_number"]
