"""End-to-end savings plan: inflation bands in, three monthly contributions out."""

from __future__ import annotations

import logging
from typing import Dict, List, Optional, Sequence, Tuple

import numpy as np
from pydantic import BaseModel

from inflation_planner.core.ensemble import SummaryBands, aggregate_inflation_paths
from inflation_planner.core.inflation import ShockSource
from inflation_planner.core.savings import solve_monthly_savings
from inflation_planner.models import SavingsGoalRequest, SimulationParameters

logger = logging.getLogger(__name__)

BandSeries = List[Tuple[int, float]]


class SavingsEstimates(BaseModel):
    # monthly contribution needed under each inflation band
    mean: float
    lower: float
    upper: float


class SavingsReport(BaseModel):
    goal: float
    currentAge: int
    targetAge: int
    years: int
    parameters: SimulationParameters
    bands: SummaryBands
    savings: SavingsEstimates
    # mean estimate as a fraction of monthly salary
    salaryShare: float
    series: Dict[str, BandSeries]
    yearlyRates: BandSeries


def band_series(rates: Sequence[float]) -> BandSeries:
    """(year index, rate) pairs in chart order, starting at year 0."""
    return [(year, float(rate)) for year, rate in enumerate(rates)]


def series_for_bands(bands: SummaryBands) -> Dict[str, BandSeries]:
    return {
        "mean": band_series(bands.mean),
        "lower": band_series(bands.lower),
        "upper": band_series(bands.upper),
    }


def simulate_bands(params: SimulationParameters, rng: Optional[ShockSource] = None) -> SummaryBands:
    return aggregate_inflation_paths(
        params.numSimulations,
        params.years,
        params.startRate,
        params.volatility,
        params.meanReversionSpeed,
        params.longTermMean,
        rng=rng,
    )


def estimate_savings(goal: float, bands: SummaryBands, annual_return: float) -> SavingsEstimates:
    """Solve the monthly contribution once per band."""
    years = bands.years
    return SavingsEstimates(
        mean=solve_monthly_savings(goal, years, bands.mean, annual_return),
        lower=solve_monthly_savings(goal, years, bands.lower, annual_return),
        upper=solve_monthly_savings(goal, years, bands.upper, annual_return),
    )


def plan_savings(request: SavingsGoalRequest, rng: Optional[ShockSource] = None) -> SavingsReport:
    """
    Build the full savings report for a goal reached at ``targetAge``.

    Order of operations:
      1) horizon = targetAge - currentAge, parameters filled from defaults
      2) simulate the ensemble and reduce it to mean/lower/upper bands
      3) solve the monthly contribution for each band
      4) express the mean contribution as a share of monthly salary

    ``rng`` wins over ``request.seed`` when both are given.
    """
    params = request.simulation_parameters()
    if rng is None:
        rng = np.random.default_rng(request.seed)

    bands = simulate_bands(params, rng=rng)
    savings = estimate_savings(request.goal, bands, params.annualReturn)
    salary_share = savings.mean / request.monthlySalary

    logger.info(
        "planned %.2f over %d years: mean %.2f/month (%.1f%% of salary)",
        request.goal,
        params.years,
        savings.mean,
        salary_share * 100.0,
    )

    return SavingsReport(
        goal=request.goal,
        currentAge=request.currentAge,
        targetAge=request.targetAge,
        years=params.years,
        parameters=params,
        bands=bands,
        savings=savings,
        salaryShare=salary_share,
        series=series_for_bands(bands),
        yearlyRates=[(year + 1, rate) for year, rate in band_series(bands.mean)],
    )
