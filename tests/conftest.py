import matplotlib

matplotlib.use("Agg")

import pytest

from requiredreturn.validation import ReturnInputs


@pytest.fixture
def scenario_a():
    return ReturnInputs(market_price=54.56, dividend_amount=5.10, growth_rate_percent=6.40)
