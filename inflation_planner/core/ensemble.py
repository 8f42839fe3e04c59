"""Ensemble of inflation paths reduced to mean and percentile bands."""

from __future__ import annotations

import logging
from typing import List, Optional, Tuple

import numpy as np
from pydantic import BaseModel

from inflation_planner.core.errors import InvalidParameterError
from inflation_planner.core.inflation import ShockSource, simulate_inflation_path

logger = logging.getLogger(__name__)


class SummaryBands(BaseModel):
    """
    Per-year reduction of an ensemble.

    lower/upper are picked by rank (``n // 10`` and ``n * 9 // 10`` in the sorted
    column), so with few simulations lower can exceed mean or upper can fall
    below it.
    """

    mean: List[float]
    lower: List[float]
    upper: List[float]

    @property
    def years(self) -> int:
        return len(self.mean)


def build_ensemble(
    num_simulations: int,
    years: int,
    start_rate: float,
    volatility: float,
    mean_reversion_speed: float,
    long_term_mean: float,
    rng: Optional[ShockSource] = None,
) -> np.ndarray:
    """Return a (num_simulations, years) array, one independent path per row."""
    if num_simulations < 1:
        raise InvalidParameterError([f"num_simulations must be >= 1, got {num_simulations}"])

    if rng is None:
        rng = np.random.default_rng()

    paths = [
        simulate_inflation_path(
            years,
            start_rate,
            volatility,
            mean_reversion_speed,
            long_term_mean,
            rng=rng,
        )
        for _ in range(num_simulations)
    ]
    return np.array(paths, dtype=float).reshape(num_simulations, years)


def percentile_ranks(num_simulations: int) -> Tuple[int, int]:
    """Indices of the ~10th and ~90th percentile in a sorted column."""
    return num_simulations // 10, num_simulations * 9 // 10


def aggregate_inflation_paths(
    num_simulations: int,
    years: int,
    start_rate: float,
    volatility: float,
    mean_reversion_speed: float,
    long_term_mean: float,
    rng: Optional[ShockSource] = None,
) -> SummaryBands:
    """Simulate ``num_simulations`` paths and summarise them year by year."""
    ensemble = build_ensemble(
        num_simulations,
        years,
        start_rate,
        volatility,
        mean_reversion_speed,
        long_term_mean,
        rng=rng,
    )
    logger.debug("aggregating ensemble of %d paths over %d years", num_simulations, years)
    return summarize_ensemble(ensemble)


def summarize_ensemble(ensemble: np.ndarray) -> SummaryBands:
    """Reduce an ensemble array to mean, lower and upper bands."""
    num_simulations = ensemble.shape[0]
    if num_simulations < 1:
        raise InvalidParameterError(["ensemble must contain at least one path"])

    low_idx, high_idx = percentile_ranks(num_simulations)

    # sort each year's column across simulations
    ordered = np.sort(ensemble, axis=0)

    return SummaryBands(
        mean=ordered.mean(axis=0).tolist(),
        lower=ordered[low_idx].tolist(),
        upper=ordered[high_idx].tolist(),
    )
