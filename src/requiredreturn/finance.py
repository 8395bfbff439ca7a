"""Gordon Growth model engine for the required return calculator."""
from __future__ import annotations

from dataclasses import dataclass
from typing import List, Tuple

import numpy as np

from .validation import ValidatedInputs

# Projection covers years 0..HORIZON_YEARS inclusive.
HORIZON_YEARS = 10


@dataclass(frozen=True)
class CashflowEntry:
    year: int
    dividend_flow: float
    investment_flow: float
    required_return_percent: float

    @property
    def total_flow(self) -> float:
        return self.dividend_flow + self.investment_flow


@dataclass(frozen=True)
class Model:
    """Result of one model computation.

    Percent fields are already scaled by 100 (16.3 means 16.3%) and are
    returned at full precision; rounding is left to the presentation layer.
    """

    growth_rate_decimal: float
    next_dividend: float
    required_return_decimal: float
    required_return_percent: float
    dividend_yield_percent: float
    cashflows: Tuple[CashflowEntry, ...]
    is_valid: bool


def _ieee_divide(numerator: float, denominator: float) -> float:
    """Divide following IEEE 754 (x/0 -> +-inf, 0/0 -> nan) instead of raising."""

    with np.errstate(divide="ignore", invalid="ignore"):
        return float(np.float64(numerator) / np.float64(denominator))


def project_cashflows_py(
    dividend_amount: float,
    growth_rate_decimal: float,
    market_price: float,
    required_return_percent: float,
) -> List[CashflowEntry]:
    """Pure-Python projection: initial outlay at year 0, growing dividends after."""

    out = []
    for year in range(0, HORIZON_YEARS + 1):
        if year == 0:
            out.append(CashflowEntry(0, 0.0, -market_price, required_return_percent))
        else:
            dividend = dividend_amount * (1 + growth_rate_decimal) ** year
            out.append(CashflowEntry(year, dividend, 0.0, required_return_percent))
    return out


def project_cashflows_np(
    dividend_amount: float,
    growth_rate_decimal: float,
    market_price: float,
    required_return_percent: float,
) -> List[CashflowEntry]:
    """Vectorized projection with the same entries as :func:`project_cashflows_py`."""

    years = np.arange(HORIZON_YEARS + 1, dtype=np.float64)
    dividends = dividend_amount * (1 + growth_rate_decimal) ** years
    dividends[0] = 0.0
    investments = np.zeros(HORIZON_YEARS + 1, dtype=np.float64)
    investments[0] = -market_price
    return [
        CashflowEntry(year, float(dividends[year]), float(investments[year]), required_return_percent)
        for year in range(HORIZON_YEARS + 1)
    ]


def project_cashflows(
    dividend_amount,
    growth_rate_decimal,
    market_price,
    required_return_percent,
    use_numpy=True,
):
    if use_numpy:
        return project_cashflows_np(
            dividend_amount, growth_rate_decimal, market_price, required_return_percent
        )
    return project_cashflows_py(
        dividend_amount, growth_rate_decimal, market_price, required_return_percent
    )


def compute_model(inputs: ValidatedInputs, use_numpy: bool = True) -> Model:
    """Solve the Gordon Growth model for the required return.

    ``inputs`` must come from :func:`requiredreturn.validation.require_valid`
    (or otherwise have passed ``validate``). The inputs are not checked again:
    a zero price yields an infinite or NaN return instead of an exception.
    """

    price = inputs.market_price
    d0 = inputs.dividend_amount
    g = inputs.growth_rate_percent / 100

    d1 = d0 * (1 + g)
    dividend_yield = _ieee_divide(d1, price)
    required_return = dividend_yield + g
    required_return_pct = required_return * 100

    cashflows = project_cashflows(d0, g, price, required_return_pct, use_numpy)

    return Model(
        growth_rate_decimal=g,
        next_dividend=d1,
        required_return_decimal=required_return,
        required_return_percent=required_return_pct,
        dividend_yield_percent=dividend_yield * 100,
        cashflows=tuple(cashflows),
        is_valid=bool(g < required_return and required_return_pct > 0),
    )


__all__ = [
    "CashflowEntry",
    "HORIZON_YEARS",
    "Model",
    "compute_model",
    "project_cashflows",
    "project_cashflows_np",
    "project_cashflows_py",
]
