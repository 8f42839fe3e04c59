"""HTTP routes for the Flask API."""

from http import HTTPStatus
from typing import Any, Dict

import numpy as np
from flask import Blueprint, current_app, jsonify, request
from pydantic import ValidationError

from inflation_planner.core.ensemble import aggregate_inflation_paths
from inflation_planner.core.errors import InvalidParameterError
from inflation_planner.core.inflation import simulate_inflation_path
from inflation_planner.core.planner import plan_savings, series_for_bands
from inflation_planner.core.savings import deflate_goal, solve_monthly_savings
from inflation_planner.models import SavingsGoalRequest
from inflation_planner.schemas.health import HealthResponse
from inflation_planner.schemas.inflation import (
    BandsRequest,
    BandsResponse,
    PathRequest,
    PathResponse,
)
from inflation_planner.schemas.savings import SolveRequest, SolveResponse

api_bp = Blueprint("api", __name__)


@api_bp.errorhandler(ValidationError)
def _handle_validation_error(exc: ValidationError):
    """Convert Pydantic validation errors into JSON responses."""
    current_app.logger.warning("rejected payload on %s: %d error(s)", request.path, exc.error_count())
    errors = exc.errors(include_url=False, include_context=False)
    return jsonify({"detail": errors}), HTTPStatus.UNPROCESSABLE_ENTITY


@api_bp.errorhandler(InvalidParameterError)
def _handle_invalid_parameter(exc: InvalidParameterError):
    current_app.logger.warning("invalid parameters on %s: %s", request.path, exc)
    return jsonify({"error": exc.errors}), HTTPStatus.BAD_REQUEST


def _payload() -> Dict[str, Any]:
    return request.get_json(force=True, silent=False)


@api_bp.get("/health")
def health() -> Any:
    """Health-check endpoint."""
    return jsonify(HealthResponse(status="ok").model_dump())


@api_bp.post("/inflation/path")
def inflation_path() -> Any:
    """One simulated inflation trajectory."""
    payload = PathRequest.model_validate(_payload())
    rates = simulate_inflation_path(
        payload.years,
        payload.startRate,
        payload.volatility,
        payload.meanReversionSpeed,
        payload.longTermMean,
        rng=np.random.default_rng(payload.seed),
    )
    return jsonify(PathResponse(years=payload.years, rates=rates).model_dump())


@api_bp.post("/inflation/bands")
def inflation_bands() -> Any:
    """Mean and ~10th/~90th percentile bands over an ensemble of paths."""
    payload = BandsRequest.model_validate(_payload())
    bands = aggregate_inflation_paths(
        payload.numSimulations,
        payload.years,
        payload.startRate,
        payload.volatility,
        payload.meanReversionSpeed,
        payload.longTermMean,
        rng=np.random.default_rng(payload.seed),
    )
    response = BandsResponse(
        mean=bands.mean,
        lower=bands.lower,
        upper=bands.upper,
        series=series_for_bands(bands),
    )
    return jsonify(response.model_dump())


@api_bp.post("/savings/solve")
def savings_solve() -> Any:
    """Monthly contribution for a caller-supplied inflation path."""
    payload = SolveRequest.model_validate(_payload())
    monthly = solve_monthly_savings(
        payload.goal,
        payload.years,
        payload.inflationPath,
        payload.annualReturn,
    )
    response = SolveResponse(
        monthlySavings=monthly,
        presentValue=deflate_goal(payload.goal, payload.inflationPath),
    )
    return jsonify(response.model_dump())


@api_bp.post("/savings/plan")
def savings_plan() -> Any:
    """Full plan: bands, three monthly contributions and salary share."""
    payload = SavingsGoalRequest.model_validate(_payload())
    report = plan_savings(payload)
    return jsonify(report.model_dump())
