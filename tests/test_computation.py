import pytest

from requiredreturn.computation import Evaluation, evaluate, evaluate_text, resolve_use_numpy
from requiredreturn.validation import ReturnInputs


class TestResolveUseNumpy:

    @pytest.mark.parametrize("engine, expected", [("auto", True), ("NumPy", True), ("python", False)])
    def test_known_engines(self, engine, expected):
        assert resolve_use_numpy(engine) is expected

    def test_unknown_engine(self):
        with pytest.raises(ValueError, match="Unknown engine"):
            resolve_use_numpy("fortran")


class TestEvaluate:

    def test_ok(self, scenario_a):
        result = evaluate(scenario_a)
        assert isinstance(result, Evaluation)
        assert result.errors == {}
        assert result.model is not None
        assert result.status == "ok"
        assert result.inputs is scenario_a

    def test_scenario_b_skips_model(self):
        result = evaluate(ReturnInputs(0.5, 5.10, 6.40))
        assert result.errors == {"market_price": "Market price must be at least $1"}
        assert result.model is None
        assert result.status == "invalid-input"

    def test_scenario_d_skips_model(self):
        result = evaluate(ReturnInputs(54.56, 60, 6.40))
        assert result.errors == {"dividend_amount": "Dividend cannot exceed $50"}
        assert result.model is None

    def test_model_invalid_is_separate_from_input_errors(self):
        result = evaluate(ReturnInputs(50, 0, 10))
        assert result.errors == {}
        assert result.model is not None
        assert not result.model.is_valid
        assert result.status == "invalid-model"

    def test_engines_give_same_model(self, scenario_a):
        a = evaluate(scenario_a, use_numpy=True).model
        b = evaluate(scenario_a, use_numpy=False).model
        assert a.required_return_percent == b.required_return_percent
        assert [cf.year for cf in a.cashflows] == [cf.year for cf in b.cashflows]
        for x, y in zip(a.cashflows, b.cashflows):
            assert x.dividend_flow == pytest.approx(y.dividend_flow, rel=1e-12)


class TestEvaluateText:

    def test_form_defaults(self):
        result = evaluate_text("54.56", "5.10", "6.40")
        assert result.status == "ok"
        assert result.model.required_return_percent == pytest.approx(16.3457, abs=1e-3)

    def test_symbols_accepted(self):
        result = evaluate_text("$54.56", "$5.10", "6.4%")
        assert result.status == "ok"

    def test_garbage_price_replaces_range_message(self):
        result = evaluate_text("abc", "5.10", "6.40")
        assert result.errors == {"market_price": "Market Price: 'abc' is not a number"}
        assert result.model is None
        assert result.status == "invalid-input"

    def test_garbage_with_range_errors_elsewhere(self):
        result = evaluate_text("12x", "60", "6.40")
        assert result.errors["market_price"] == "Market Price: '12x' is not a number"
        assert result.errors["dividend_amount"] == "Dividend cannot exceed $50"
        assert result.model is None

    def test_blank_dividend_is_required(self):
        result = evaluate_text("54.56", "  ", "6.40")
        assert result.errors == {"dividend_amount": "Dividend is required"}
        assert result.status == "invalid-input"

    def test_zero_dividend_is_model_invalid(self):
        result = evaluate_text("54.56", "0", "6.40")
        assert result.errors == {}
        assert result.model is not None
        assert result.status == "invalid-model"

    def test_each_call_reflects_latest_text(self):
        first = evaluate_text("54.56", "5.10", "6.40")
        second = evaluate_text("100", "5.10", "6.40")
        assert second.inputs.market_price == 100.0
        assert second.model.required_return_percent < first.model.required_return_percent

    def test_pure_python_engine(self):
        a = evaluate_text("54.56", "5.10", "6.40", use_numpy=False)
        b = evaluate_text("54.56", "5.10", "6.40", use_numpy=True)
        assert a.model.required_return_percent == b.model.required_return_percent
