from __future__ import annotations

from math import isclose

import numpy as np
import pytest
from pydantic import ValidationError

from inflation_planner.core.planner import band_series, plan_savings
from inflation_planner.core.savings import solve_monthly_savings
from inflation_planner.models import SavingsGoalRequest, SimulationAssumptions
from inflation_planner.tests.helpers import goal_payload


def test_plan_uses_age_gap_as_horizon():
    request = SavingsGoalRequest.model_validate(goal_payload())
    report = plan_savings(request)

    assert report.years == 10
    assert report.parameters.years == 10
    assert len(report.bands.mean) == 10
    assert [year for year, _ in report.series["mean"]] == list(range(10))
    assert [year for year, _ in report.yearlyRates] == list(range(1, 11))


def test_plan_solves_each_band():
    request = SavingsGoalRequest.model_validate(goal_payload())
    report = plan_savings(request)

    for band in ("mean", "lower", "upper"):
        expected = solve_monthly_savings(
            request.goal, report.years, getattr(report.bands, band), report.parameters.annualReturn
        )
        assert isclose(getattr(report.savings, band), expected, rel_tol=1e-12)

    # more inflation shrinks the goal in today's money
    assert report.savings.upper <= report.savings.lower


def test_salary_share_is_mean_savings_over_salary():
    request = SavingsGoalRequest.model_validate(goal_payload())
    report = plan_savings(request)

    assert isclose(report.salaryShare, report.savings.mean / 3000, rel_tol=1e-12)


def test_seeded_requests_are_reproducible():
    request = SavingsGoalRequest.model_validate(goal_payload())
    assert plan_savings(request) == plan_savings(request)


def test_injected_rng_overrides_seed():
    request = SavingsGoalRequest.model_validate(goal_payload())

    first = plan_savings(request, rng=np.random.default_rng(1))
    second = plan_savings(request, rng=np.random.default_rng(1))

    assert first.bands == second.bands


def test_deterministic_assumptions_give_flat_bands():
    """
    Zero volatility and a start rate at the long-term mean keep every path at that rate.
    """
    payload = goal_payload()
    payload["assumptions"] = {
        "startRate": 0.02,
        "volatility": 0.0,
        "longTermMean": 0.02,
        "numSimulations": 5,
        "annualReturn": 0.0,
    }
    report = plan_savings(SavingsGoalRequest.model_validate(payload))

    assert report.bands.lower == report.bands.upper == [0.02] * 10
    expected = 100000 / (1.02 ** 10) / 120
    assert isclose(report.savings.mean, expected, rel_tol=1e-9)
    assert isclose(report.savings.lower, report.savings.upper, rel_tol=1e-12)


def test_band_series_pairs_index_with_rate():
    assert band_series([0.02, 0.025]) == [(0, 0.02), (1, 0.025)]


def test_defaults_match_documented_assumptions():
    defaults = SimulationAssumptions()
    assert defaults.startRate == 0.02
    assert defaults.volatility == 0.005
    assert defaults.meanReversionSpeed == 0.3
    assert defaults.longTermMean == 0.02
    assert defaults.numSimulations == 1000
    assert defaults.annualReturn == 0.05


def test_parameters_are_immutable():
    params = SimulationAssumptions().for_horizon(5)
    with pytest.raises(ValidationError):
        params.years = 6


def test_target_age_must_follow_current_age():
    payload = goal_payload()
    payload["targetAge"] = payload["currentAge"]
    with pytest.raises(ValidationError):
        SavingsGoalRequest.model_validate(payload)
