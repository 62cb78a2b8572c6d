"""Calendar helpers for counting elapsed installments."""

from datetime import date, datetime
from typing import Union

DateLike = Union[date, datetime, str]


def to_date(value: DateLike) -> date:
    """Normalize a date, datetime or ISO string (YYYY-MM-DD) to a date.

    Raises ValueError for malformed strings and TypeError for other types.
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        return date.fromisoformat(value.strip())
    raise TypeError(f"Expected a date or ISO date string, got {type(value).__name__}")


def months_elapsed(start_date: DateLike, evaluation_date: DateLike) -> int:
    """Count whole calendar months from start to evaluation.

    Only year and month are compared; the day of month is ignored, so
    2024-04-30 to 2024-05-01 counts as one month. The result is negative
    when the evaluation date precedes the start date.
    """
    start = to_date(start_date)
    evaluation = to_date(evaluation_date)
    return (evaluation.year - start.year) * 12 + (evaluation.month - start.month)
