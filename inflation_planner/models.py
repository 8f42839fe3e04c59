from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

# Default assumptions: euro-area style 2% inflation target, 5% nominal return.
DEFAULT_START_RATE = 0.02
DEFAULT_VOLATILITY = 0.005
DEFAULT_MEAN_REVERSION_SPEED = 0.3
DEFAULT_LONG_TERM_MEAN = 0.02
DEFAULT_NUM_SIMULATIONS = 1000
DEFAULT_ANNUAL_RETURN = 0.05

MAX_YEARS = 120
MAX_SIMULATIONS = 100_000


class SimulationAssumptions(BaseModel):
    """Inflation process and investment return, without the horizon."""

    model_config = ConfigDict(extra="forbid", frozen=True, allow_inf_nan=False)

    startRate: float = DEFAULT_START_RATE
    volatility: float = Field(default=DEFAULT_VOLATILITY, ge=0)
    meanReversionSpeed: float = DEFAULT_MEAN_REVERSION_SPEED
    longTermMean: float = DEFAULT_LONG_TERM_MEAN
    numSimulations: int = Field(default=DEFAULT_NUM_SIMULATIONS, ge=1, le=MAX_SIMULATIONS)
    annualReturn: float = Field(default=DEFAULT_ANNUAL_RETURN, gt=-1)

    def for_horizon(self, years: int) -> "SimulationParameters":
        return SimulationParameters(years=years, **self.model_dump())


class SimulationParameters(SimulationAssumptions):
    """Everything one planning run needs. Built once per request, never mutated."""

    years: int = Field(ge=0, le=MAX_YEARS)


class SavingsGoalRequest(BaseModel):
    model_config = ConfigDict(extra="forbid", allow_inf_nan=False)

    goal: float = Field(gt=0)
    currentAge: int = Field(ge=0, le=MAX_YEARS)
    targetAge: int = Field(ge=1, le=MAX_YEARS)
    monthlySalary: float = Field(gt=0)

    assumptions: SimulationAssumptions = Field(default_factory=SimulationAssumptions)
    seed: Optional[int] = Field(default=None, ge=0)

    @model_validator(mode="after")
    def ensure_validity(self) -> "SavingsGoalRequest":
        if self.targetAge <= self.currentAge:
            raise ValueError("targetAge must be greater than currentAge")
        return self

    @property
    def years(self) -> int:
        return self.targetAge - self.currentAge

    def simulation_parameters(self) -> SimulationParameters:
        return self.assumptions.for_horizon(self.years)
