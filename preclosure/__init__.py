"""Loan pre-closure versus continue-and-invest planner."""

from .controller import ScenarioController
from .loan import LoanParameters, ScheduleEntry, calculate_emi, generate_schedule, schedule_frame
from .scenario import (
    CalculationResult,
    Recommendation,
    calculate,
    calculate_preclosure,
    generate_strategy_growth_data,
    summarize_result,
)

__all__ = [
    "CalculationResult",
    "LoanParameters",
    "Recommendation",
    "ScenarioController",
    "ScheduleEntry",
    "calculate",
    "calculate_emi",
    "calculate_preclosure",
    "generate_schedule",
    "generate_strategy_growth_data",
    "schedule_frame",
    "summarize_result",
]
