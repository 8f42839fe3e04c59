"""Mean-reverting inflation path simulation."""

from __future__ import annotations

import math
from typing import List, Optional, Protocol

import numpy as np

from inflation_planner.core.errors import InvalidParameterError


class ShockSource(Protocol):
    """Anything that draws normal samples like ``numpy.random.Generator.normal``."""

    def normal(self, loc: float, scale: float) -> float:
        ...


def simulate_inflation_path(
    years: int,
    start_rate: float,
    volatility: float,
    mean_reversion_speed: float,
    long_term_mean: float,
    rng: Optional[ShockSource] = None,
) -> List[float]:
    """
    Simulate one annual inflation trajectory of ``years`` values.

    Each year moves towards ``long_term_mean`` by ``mean_reversion_speed`` of the
    gap, plus a Normal(0, volatility) shock. Rates are floored at 0.

    When ``rng`` is omitted a fresh generator private to this call is used.
    """
    errors: List[str] = []
    if years < 0:
        errors.append(f"years must be >= 0, got {years}")
    if volatility < 0:
        errors.append(f"volatility must be >= 0, got {volatility}")
    process = (start_rate, volatility, mean_reversion_speed, long_term_mean)
    if not all(math.isfinite(value) for value in process):
        errors.append("rates, volatility and reversion speed must be finite")
    if errors:
        raise InvalidParameterError(errors)

    if years == 0:
        return []

    if rng is None:
        rng = np.random.default_rng()

    rates: List[float] = [max(0.0, float(start_rate))]
    for _ in range(1, years):
        prev = rates[-1]
        drift = mean_reversion_speed * (long_term_mean - prev)
        shock = float(rng.normal(0.0, volatility))
        rates.append(max(0.0, prev + drift + shock))

    return rates
