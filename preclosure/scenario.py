"""Pre-closure versus continue-and-invest comparison."""

import logging
from dataclasses import dataclass, fields
from enum import Enum
from typing import Tuple

import numpy as np
import pandas as pd

from .dates import DateLike, months_elapsed, to_date
from .loan import (
    LoanParameters,
    ScheduleEntry,
    calculate_emi,
    generate_schedule,
    snapshot_at,
)

logger = logging.getLogger(__name__)


class Recommendation(Enum):
    CONTINUE = "Continue paying EMI and invest the difference"
    PRECLOSE = "Pre-close the loan"


@dataclass(frozen=True)
class CalculationResult:
    """Everything derived from one set of loan parameters.

    A result is always produced in full; callers replace the previous
    result rather than updating fields.
    """

    monthly_rate: float = 0.0
    emi: float = 0.0
    paid_count: int = 0
    remaining_count: int = 0
    interest_paid: float = 0.0
    principal_paid: float = 0.0
    preclosure_amount: float = 0.0
    total_cost_if_preclose: float = 0.0
    total_cost_if_continue: float = 0.0
    future_value_of_preclosure_amount: float = 0.0
    future_value_of_emi_stream: float = 0.0
    net_benefit_of_continuing: float = 0.0
    schedule: Tuple[ScheduleEntry, ...] = ()

    @classmethod
    def zero(cls) -> "CalculationResult":
        """The degenerate result: every derived field zero, no schedule."""
        return cls()

    @property
    def should_continue(self) -> bool:
        return self.net_benefit_of_continuing > 0

    @property
    def recommendation(self) -> Recommendation:
        if self.should_continue:
            return Recommendation.CONTINUE
        return Recommendation.PRECLOSE

    @property
    def interest_saved_by_preclosing(self) -> float:
        """Cash saved by pre-closing compared with running the loan to term."""
        return self.total_cost_if_continue - self.total_cost_if_preclose

    def is_finite(self) -> bool:
        values = [
            getattr(self, f.name) for f in fields(self) if f.name != 'schedule'
        ]
        return bool(np.all(np.isfinite(np.asarray(values, dtype=float))))


def future_value_of_lump_sum(
    amount: float,
    annual_return_percent: float,
    months: int,
) -> float:
    """Grow a lump sum at an annual compounding return for a number of months.

    FV = A * (1 + g)^(months / 12)

    Zero or negative months leave the amount ungrown.
    """
    if months <= 0:
        return amount
    return amount * (1 + annual_return_percent / 100) ** (months / 12)


def future_value_of_payment_stream(
    payment: float,
    annual_return_percent: float,
    months: int,
) -> float:
    """Value at the end of the period of investing one payment per month.

    The first payment compounds for (months - 1) / 12 years and the last
    one not at all.
    """
    if months <= 0:
        return 0.0

    growth = 1 + annual_return_percent / 100
    exponents = np.arange(months - 1, -1, -1) / 12
    return float(np.sum(payment * np.power(growth, exponents)))


def _calculate(params: LoanParameters) -> CalculationResult:
    principal = params.principal
    tenure = params.tenure_months

    if tenure <= 0 or principal <= 0:
        logger.debug("Principal %s or tenure %s not positive, returning zero result",
                     principal, tenure)
        return CalculationResult.zero()

    r = params.monthly_rate
    emi = calculate_emi(principal, r, tenure)
    schedule = generate_schedule(principal, r, tenure, emi)

    paid_count = max(0, months_elapsed(params.start_date, params.evaluation_date))
    # Past the tenure end the loan is fully amortized
    remaining_count = max(0, tenure - paid_count)

    snapshot = snapshot_at(schedule, paid_count, principal)

    preclosure_amount = snapshot.remaining_principal * (1 + params.preclosure_charge_percent / 100)
    principal_paid = principal - snapshot.remaining_principal

    if remaining_count > 0:
        fv_preclosure = future_value_of_lump_sum(
            preclosure_amount, params.investment_return_percent, remaining_count
        )
    else:
        fv_preclosure = 0.0
    fv_stream = future_value_of_payment_stream(
        emi, params.investment_return_percent, remaining_count
    )

    return CalculationResult(
        monthly_rate=r,
        emi=emi,
        paid_count=paid_count,
        remaining_count=remaining_count,
        interest_paid=snapshot.cumulative_paid - principal_paid,
        principal_paid=principal_paid,
        preclosure_amount=preclosure_amount,
        total_cost_if_preclose=snapshot.cumulative_paid + preclosure_amount,
        total_cost_if_continue=emi * tenure,
        future_value_of_preclosure_amount=fv_preclosure,
        future_value_of_emi_stream=fv_stream,
        net_benefit_of_continuing=fv_stream - fv_preclosure,
        schedule=schedule,
    )


def calculate(params: LoanParameters) -> CalculationResult:
    """Run the full pre-closure analysis for one set of parameters.

    Never raises for bad inputs: non-positive principal or tenure, malformed
    dates and non-finite arithmetic all yield CalculationResult.zero().
    """
    try:
        result = _calculate(params)
    except (TypeError, ValueError, OverflowError, ZeroDivisionError) as e:
        logger.warning("Calculation failed for %s: %s", params, e)
        return CalculationResult.zero()

    if not result.is_finite():
        logger.warning("Non-finite values computed for %s, returning zero result", params)
        return CalculationResult.zero()

    logger.debug(
        "EMI %.2f, %d paid, %d remaining, net benefit of continuing %.2f",
        result.emi, result.paid_count, result.remaining_count,
        result.net_benefit_of_continuing,
    )
    return result


def calculate_preclosure(
    principal: float,
    annual_rate_percent: float,
    tenure_months: int,
    start_date: DateLike,
    evaluation_date: DateLike,
    preclosure_charge_percent: float,
    investment_return_percent: float,
) -> CalculationResult:
    """Standalone function taking the seven loan inputs directly."""
    try:
        start = to_date(start_date)
        evaluation = to_date(evaluation_date)
    except (TypeError, ValueError) as e:
        logger.warning("Invalid date input: %s", e)
        return CalculationResult.zero()

    params = LoanParameters(
        principal=principal,
        annual_rate_percent=annual_rate_percent,
        tenure_months=tenure_months,
        start_date=start,
        evaluation_date=evaluation,
        preclosure_charge_percent=preclosure_charge_percent,
        investment_return_percent=investment_return_percent,
    )
    return calculate(params)


def generate_strategy_growth_data(
    params: LoanParameters,
    result: CalculationResult,
) -> pd.DataFrame:
    """Generate data for the strategy growth visualization.

    For each month after the evaluation date, shows what the invested
    pre-closure amount and the invested EMIs would be worth. The final row
    matches the result's future values.
    """
    data = []

    for month in range(1, result.remaining_count + 1):
        preclose_value = future_value_of_lump_sum(
            result.preclosure_amount, params.investment_return_percent, month
        )
        continue_value = future_value_of_payment_stream(
            result.emi, params.investment_return_percent, month
        )
        data.append({
            'month': month,
            'preclose_value': preclose_value,
            'continue_value': continue_value,
            'benefit': continue_value - preclose_value,
        })

    return pd.DataFrame(data, columns=['month', 'preclose_value', 'continue_value', 'benefit'])


def summarize_result(params: LoanParameters, result: CalculationResult) -> dict:
    """Rounded figures and recommendation text for display."""
    return {
        'emi': round(result.emi, 2),
        'paid_count': result.paid_count,
        'remaining_count': result.remaining_count,
        'interest_paid': round(result.interest_paid, 2),
        'principal_paid': round(result.principal_paid, 2),
        'preclosure_charge_percent': params.preclosure_charge_percent,
        'preclosure_amount': round(result.preclosure_amount, 2),
        'total_cost_if_preclose': round(result.total_cost_if_preclose, 2),
        'total_cost_if_continue': round(result.total_cost_if_continue, 2),
        'interest_saved_by_preclosing': round(result.interest_saved_by_preclosing, 2),
        'investment_return_percent': params.investment_return_percent,
        'future_value_of_preclosure_amount': round(result.future_value_of_preclosure_amount, 2),
        'future_value_of_emi_stream': round(result.future_value_of_emi_stream, 2),
        'net_benefit_of_continuing': round(result.net_benefit_of_continuing, 2),
        'recommendation': result.recommendation.value,
        'should_continue': result.should_continue,
    }
