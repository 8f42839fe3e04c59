"""Monthly savings required to reach an inflation-adjusted goal."""

from __future__ import annotations

import math
from typing import List, Sequence

from inflation_planner.core.errors import InvalidParameterError

MONTHS_PER_YEAR = 12


def deflate_goal(goal: float, inflation_path: Sequence[float]) -> float:
    """
    Discount a nominal goal back to today's purchasing power.

    The path is walked latest year first: the goal is divided by
    (1 + rate) for the last year, then the one before, down to year 0.
    """
    value = float(goal)
    for rate in reversed(inflation_path):
        value /= 1.0 + rate
    return value


def monthly_rate(annual_return: float) -> float:
    """Compound-equivalent monthly rate of an annual return."""
    return (1.0 + annual_return) ** (1.0 / MONTHS_PER_YEAR) - 1.0


def _check_inputs(goal: float, years: int, inflation_path: Sequence[float], annual_return: float) -> None:
    errors: List[str] = []
    if not math.isfinite(goal) or goal <= 0:
        errors.append(f"goal must be a finite number > 0, got {goal}")
    if years < 1:
        errors.append(f"years must be >= 1, got {years}")
    if not math.isfinite(annual_return) or annual_return <= -1:
        errors.append(f"annual_return must be a finite number > -1, got {annual_return}")
    if len(inflation_path) != years:
        errors.append(
            f"inflation path has {len(inflation_path)} rates, expected {years}"
        )
    if not all(math.isfinite(rate) for rate in inflation_path):
        errors.append("inflation rates must be finite")
    elif any(rate < 0 for rate in inflation_path):
        errors.append("inflation rates must be >= 0")
    if errors:
        raise InvalidParameterError(errors)


def solve_monthly_savings(
    goal: float,
    years: int,
    inflation_path: Sequence[float],
    annual_return: float,
) -> float:
    """
    Level end-of-month contribution that grows to the deflated goal.

    Uses the ordinary annuity future-value formula with a monthly rate
    equivalent to ``annual_return``. A zero return falls back to equal
    installments of the deflated goal.
    """
    _check_inputs(goal, years, inflation_path, annual_return)

    present_value = deflate_goal(goal, inflation_path)
    months = years * MONTHS_PER_YEAR

    rate = monthly_rate(annual_return)
    # returns too small to register in float arithmetic collapse to zero as well
    if annual_return == 0 or rate == 0:
        return present_value / months

    try:
        growth = (1.0 + rate) ** months
    except OverflowError:
        raise InvalidParameterError(
            [f"annual_return {annual_return} over {years} years overflows the annuity factor"]
        ) from None

    return (present_value * rate) / (growth - 1.0)
