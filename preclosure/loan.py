"""Core loan, EMI and amortization schedule calculations."""

import logging
from dataclasses import dataclass
from datetime import date
from typing import Sequence, Tuple

import numpy as np
import pandas as pd

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LoanParameters:
    """Inputs for a single pre-closure calculation."""

    principal: float
    annual_rate_percent: float  # as percent, e.g., 12.0 for 12%
    tenure_months: int
    start_date: date
    evaluation_date: date  # when pre-closure is being considered
    preclosure_charge_percent: float = 0.0
    investment_return_percent: float = 0.0

    @property
    def monthly_rate(self) -> float:
        """Convert annual percent rate to a monthly decimal rate."""
        return self.annual_rate_percent / 100 / 12


@dataclass(frozen=True)
class ScheduleEntry:
    """One month of the amortization schedule."""

    month: int
    payment: float
    principal_component: float
    interest_component: float
    remaining_principal: float
    cumulative_paid: float


def calculate_emi(principal: float, monthly_rate: float, tenure_months: int) -> float:
    """Calculate the equated monthly installment.

    EMI = P * [r(1+r)^n] / [(1+r)^n - 1]

    Falls back to P / n when the rate is zero or too small to change
    (1+r)^n in floating point. Returns 0.0 when the principal or tenure is
    not positive.
    """
    if tenure_months <= 0 or principal <= 0:
        return 0.0

    r = monthly_rate
    n = tenure_months
    p = principal

    factor = (1 + r)**n
    if r == 0 or factor == 1.0:
        return p / n

    return p * (r * factor) / (factor - 1)


def generate_schedule(
    principal: float,
    monthly_rate: float,
    tenure_months: int,
    emi: float,
) -> Tuple[ScheduleEntry, ...]:
    """Generate the full month-by-month amortization schedule.

    The remaining principal is floored at zero, so any payment smaller than
    the accruing interest is not carried as negative amortization.
    """
    schedule = []
    remaining = principal

    for month in range(1, tenure_months + 1):
        interest = remaining * monthly_rate
        principal_paid = emi - interest
        remaining = max(0.0, remaining - principal_paid)

        schedule.append(ScheduleEntry(
            month=month,
            payment=emi,
            principal_component=principal_paid,
            interest_component=interest,
            remaining_principal=remaining,
            cumulative_paid=emi * month,
        ))

    logger.debug("Generated %d schedule entries at EMI %.2f", len(schedule), emi)
    return tuple(schedule)


def snapshot_at(
    schedule: Sequence[ScheduleEntry],
    paid_count: int,
    principal: float,
) -> ScheduleEntry:
    """Return the schedule entry for the most recently completed month.

    With no payments made the snapshot is a synthetic month-zero entry
    holding the full principal. Counts past the end of the schedule clamp
    to the final entry.
    """
    if paid_count <= 0 or not schedule:
        return ScheduleEntry(
            month=0,
            payment=0.0,
            principal_component=0.0,
            interest_component=0.0,
            remaining_principal=principal,
            cumulative_paid=0.0,
        )

    return schedule[min(paid_count, len(schedule)) - 1]


def schedule_frame(schedule: Sequence[ScheduleEntry], paid_count: int = 0) -> pd.DataFrame:
    """Convert a schedule to a DataFrame for tables and charts.

    Returns DataFrame with columns:
    - month: payment number (1-indexed)
    - payment: monthly installment
    - principal: principal portion of payment
    - interest: interest portion of payment
    - balance: remaining principal after payment
    - total_paid: cumulative installments paid
    - cumulative_interest: total interest paid to date
    - cumulative_principal: total principal paid to date
    - status: "paid" up to paid_count, "remaining" after
    """
    columns = [
        'month', 'payment', 'principal', 'interest', 'balance',
        'total_paid', 'cumulative_interest', 'cumulative_principal', 'status',
    ]
    if not schedule:
        return pd.DataFrame(columns=columns)

    df = pd.DataFrame([{
        'month': entry.month,
        'payment': entry.payment,
        'principal': entry.principal_component,
        'interest': entry.interest_component,
        'balance': entry.remaining_principal,
        'total_paid': entry.cumulative_paid,
    } for entry in schedule])

    df['cumulative_interest'] = df['interest'].cumsum()
    df['cumulative_principal'] = df['principal'].cumsum()
    df['status'] = np.where(df['month'] <= paid_count, 'paid', 'remaining')
    return df[columns]
