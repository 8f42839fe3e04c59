"""Data contracts for the savings endpoints."""

from typing import List

from pydantic import BaseModel, ConfigDict, Field

from inflation_planner.models import DEFAULT_ANNUAL_RETURN


class SolveRequest(BaseModel):
    """Goal, horizon and one inflation path to solve against."""

    model_config = ConfigDict(extra="forbid", allow_inf_nan=False)

    goal: float = Field(..., gt=0, description="Nominal amount wanted at the end of the horizon.")
    years: int = Field(..., ge=1)
    inflationPath: List[float] = Field(..., description="One rate per year, year 0 first.")
    annualReturn: float = Field(DEFAULT_ANNUAL_RETURN, gt=-1)


class SolveResponse(BaseModel):
    monthlySavings: float
    presentValue: float = Field(..., gt=0)
