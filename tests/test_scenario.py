"""Tests for pre-closure versus continue-and-invest comparison."""

from datetime import date

import pytest
from preclosure.loan import LoanParameters
from preclosure.scenario import (
    CalculationResult,
    Recommendation,
    calculate,
    calculate_preclosure,
    future_value_of_lump_sum,
    future_value_of_payment_stream,
    generate_strategy_growth_data,
    summarize_result,
)


def make_params(**overrides) -> LoanParameters:
    values = dict(
        principal=800000,
        annual_rate_percent=12,
        tenure_months=36,
        start_date=date(2024, 4, 1),
        evaluation_date=date(2025, 4, 1),
        preclosure_charge_percent=4,
        investment_return_percent=8,
    )
    values.update(overrides)
    return LoanParameters(**values)


class TestFutureValues:
    """Tests for future value helpers."""

    def test_lump_sum_one_year(self):
        """Test lump sum grows by the annual return over 12 months."""
        assert future_value_of_lump_sum(1000, 8, 12) == pytest.approx(1080.0)

    def test_lump_sum_no_months(self):
        """Test no months leaves the amount ungrown."""
        assert future_value_of_lump_sum(1000, 8, 0) == 1000
        assert future_value_of_lump_sum(1000, 8, -5) == 1000

    def test_stream_matches_explicit_sum(self):
        """Test stream value against a term-by-term sum."""
        expected = sum(500 * 1.08 ** ((24 - i - 1) / 12) for i in range(24))
        assert future_value_of_payment_stream(500, 8, 24) == pytest.approx(expected)

    def test_stream_last_payment_not_compounded(self):
        """Test a single payment is not grown."""
        assert future_value_of_payment_stream(500, 8, 1) == pytest.approx(500.0)

    def test_stream_zero_return(self):
        """Test zero return gives plain total."""
        assert future_value_of_payment_stream(1000, 0, 108) == 108000.0

    def test_stream_no_months(self):
        """Test negative or zero months short-circuit to zero."""
        assert future_value_of_payment_stream(500, 8, 0) == 0.0
        assert future_value_of_payment_stream(500, 8, -3) == 0.0


class TestCalculate:
    """Tests for the full calculation."""

    def test_reference_scenario(self):
        """Test 800,000 at 12% over 36 months, evaluated after a year."""
        params = make_params()
        result = calculate(params)

        factor = 1.01**36
        emi = 800000 * 0.01 * factor / (factor - 1)
        balance = 800000 * (factor - 1.01**12) / (factor - 1)

        assert result.monthly_rate == pytest.approx(0.01)
        assert result.emi == pytest.approx(emi)
        assert result.paid_count == 12
        assert result.remaining_count == 24
        assert len(result.schedule) == 36

        assert result.principal_paid == pytest.approx(800000 - balance)
        assert result.interest_paid == pytest.approx(emi * 12 - (800000 - balance))
        assert result.preclosure_amount == pytest.approx(balance * 1.04)
        assert result.total_cost_if_preclose == pytest.approx(emi * 12 + balance * 1.04)
        assert result.total_cost_if_continue == pytest.approx(emi * 36)

        fv_preclose = balance * 1.04 * 1.08 ** (24 / 12)
        fv_stream = sum(emi * 1.08 ** ((24 - i - 1) / 12) for i in range(24))
        assert result.future_value_of_preclosure_amount == pytest.approx(fv_preclose)
        assert result.future_value_of_emi_stream == pytest.approx(fv_stream)
        assert result.net_benefit_of_continuing == pytest.approx(fv_stream - fv_preclose)

        assert result.should_continue == (fv_stream - fv_preclose > 0)
        assert result.recommendation is Recommendation.CONTINUE

    def test_idempotent(self):
        """Test identical inputs give identical results."""
        params = make_params()
        assert calculate(params) == calculate(params)

    def test_evaluation_equals_start(self):
        """Test no payments made uses the full principal."""
        result = calculate(make_params(evaluation_date=date(2024, 4, 1)))

        assert result.paid_count == 0
        assert result.remaining_count == 36
        assert result.principal_paid == 0.0
        assert result.interest_paid == 0.0
        assert result.preclosure_amount == pytest.approx(800000 * 1.04)
        assert result.total_cost_if_preclose == pytest.approx(800000 * 1.04)

    def test_evaluation_before_start(self):
        """Test evaluation before start is treated as no payments."""
        result = calculate(make_params(evaluation_date=date(2023, 1, 1)))

        assert result.paid_count == 0
        assert result.remaining_count == 36

    def test_evaluation_past_tenure_end(self):
        """Test a fully amortized loan short-circuits projections."""
        result = calculate(make_params(evaluation_date=date(2030, 1, 1)))

        # 69 calendar months after the start, past the 36 month tenure
        assert result.paid_count == 69
        assert result.remaining_count == 0
        assert result.principal_paid == pytest.approx(800000, abs=1e-4)
        assert result.total_cost_if_preclose == pytest.approx(result.emi * 36)
        assert result.future_value_of_emi_stream == 0.0
        assert result.future_value_of_preclosure_amount == 0.0
        assert result.preclosure_amount == pytest.approx(0.0, abs=1e-6)
        assert result.recommendation is Recommendation.PRECLOSE

    def test_zero_rate(self):
        """Test zero interest loan."""
        result = calculate(make_params(
            principal=120000,
            annual_rate_percent=0,
            tenure_months=120,
            preclosure_charge_percent=0,
            investment_return_percent=0,
        ))

        assert result.emi == 1000.0
        assert all(e.interest_component == 0 for e in result.schedule)
        assert result.interest_paid == 0.0
        assert result.preclosure_amount == 108000.0
        # Equal values: no benefit, so pre-close
        assert result.net_benefit_of_continuing == 0.0
        assert result.recommendation is Recommendation.PRECLOSE

    def test_tiny_rate_is_not_degenerate(self):
        """Test a rate too small to register behaves like a zero rate."""
        result = calculate(make_params(
            principal=120000,
            annual_rate_percent=1e-15,
            tenure_months=120,
            preclosure_charge_percent=0,
            investment_return_percent=0,
        ))

        assert result.emi == pytest.approx(120000 / 120)
        assert result.paid_count == 12
        assert result.preclosure_amount == pytest.approx(108000)
        assert len(result.schedule) == 120

    def test_high_charge_favors_continuing(self):
        """Test a larger pre-closure charge raises the benefit of continuing."""
        low = calculate(make_params(preclosure_charge_percent=0))
        high = calculate(make_params(preclosure_charge_percent=10))

        assert high.net_benefit_of_continuing < low.net_benefit_of_continuing

    def test_high_return_favors_preclosing(self):
        """Test investing returns above the loan rate make pre-closure look better."""
        result = calculate(make_params(
            annual_rate_percent=6,
            preclosure_charge_percent=0,
            investment_return_percent=25,
        ))

        assert result.net_benefit_of_continuing < 0
        assert result.recommendation is Recommendation.PRECLOSE

    def test_interest_saved_by_preclosing(self):
        """Test both total cost comparisons are available."""
        result = calculate(make_params())

        assert result.interest_saved_by_preclosing == pytest.approx(
            result.total_cost_if_continue - result.total_cost_if_preclose
        )
        assert result.interest_saved_by_preclosing > 0


class TestDegenerateInputs:
    """Tests for inputs that produce the all-zero result."""

    @pytest.mark.parametrize("overrides", [
        {'tenure_months': 0},
        {'tenure_months': -12},
        {'principal': 0},
        {'principal': -1000},
    ])
    def test_non_positive_principal_or_tenure(self, overrides):
        """Test invalid principal or tenure returns the zero result."""
        result = calculate(make_params(**overrides))

        assert result == CalculationResult.zero()
        assert result.emi == 0.0
        assert result.schedule == ()
        assert result.recommendation is Recommendation.PRECLOSE

    def test_nan_principal(self):
        """Test non-finite arithmetic is replaced wholesale."""
        result = calculate(make_params(principal=float('nan')))

        assert result == CalculationResult.zero()

    def test_infinite_rate(self):
        """Test infinite rate is replaced wholesale."""
        result = calculate(make_params(annual_rate_percent=float('inf')))

        assert result == CalculationResult.zero()

    def test_missing_date(self):
        """Test a missing date returns the zero result."""
        result = calculate(make_params(evaluation_date=None))

        assert result == CalculationResult.zero()

    def test_zero_result_is_finite(self):
        """Test the zero result passes the finiteness check."""
        assert CalculationResult.zero().is_finite()


class TestCalculatePreclosure:
    """Tests for the seven-argument entry point."""

    def test_matches_calculate(self):
        """Test standalone function matches the parameter-object version."""
        standalone = calculate_preclosure(800000, 12, 36, "2024-04-01", "2025-04-01", 4, 8)

        assert standalone == calculate(make_params())

    def test_malformed_date(self):
        """Test malformed date returns the zero result."""
        result = calculate_preclosure(800000, 12, 36, "2024-04-01", "not-a-date", 4, 8)

        assert result == CalculationResult.zero()


class TestGenerateStrategyGrowthData:
    """Tests for strategy growth chart data."""

    def test_shape_and_final_row(self):
        """Test one row per remaining month ending at the future values."""
        params = make_params()
        result = calculate(params)

        data = generate_strategy_growth_data(params, result)

        assert len(data) == 24
        assert list(data.columns) == ['month', 'preclose_value', 'continue_value', 'benefit']
        last = data.iloc[-1]
        assert last['preclose_value'] == pytest.approx(result.future_value_of_preclosure_amount)
        assert last['continue_value'] == pytest.approx(result.future_value_of_emi_stream)
        assert last['benefit'] == pytest.approx(result.net_benefit_of_continuing)

    def test_values_grow(self):
        """Test both strategies grow month over month."""
        params = make_params()
        data = generate_strategy_growth_data(params, calculate(params))

        assert data['preclose_value'].is_monotonic_increasing
        assert data['continue_value'].is_monotonic_increasing

    def test_no_remaining_months(self):
        """Test fully amortized loan gives empty data."""
        params = make_params(evaluation_date=date(2030, 1, 1))
        data = generate_strategy_growth_data(params, calculate(params))

        assert len(data) == 0
        assert 'benefit' in data.columns


class TestSummarizeResult:
    """Tests for display summary."""

    def test_summary_values(self):
        """Test summary is rounded and carries the recommendation text."""
        params = make_params()
        result = calculate(params)

        summary = summarize_result(params, result)

        assert summary['emi'] == round(result.emi, 2)
        assert summary['paid_count'] == 12
        assert summary['remaining_count'] == 24
        assert summary['preclosure_charge_percent'] == 4
        assert summary['recommendation'] == "Continue paying EMI and invest the difference"
        assert summary['should_continue'] is True

    def test_flag_follows_unrounded_benefit(self):
        """Test a benefit that rounds to zero still reports continuing."""
        params = make_params()
        result = CalculationResult(
            emi=1000.0,
            future_value_of_emi_stream=500.004,
            future_value_of_preclosure_amount=500.0,
            net_benefit_of_continuing=0.004,
        )

        summary = summarize_result(params, result)

        assert summary['net_benefit_of_continuing'] == 0.0
        assert summary['should_continue'] is True
        assert summary['recommendation'] == Recommendation.CONTINUE.value
