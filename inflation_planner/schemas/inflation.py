"""Data contracts for inflation path and band endpoints."""

from typing import Dict, List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field

from inflation_planner.models import (
    DEFAULT_LONG_TERM_MEAN,
    DEFAULT_MEAN_REVERSION_SPEED,
    DEFAULT_NUM_SIMULATIONS,
    DEFAULT_START_RATE,
    DEFAULT_VOLATILITY,
    MAX_SIMULATIONS,
    MAX_YEARS,
)


class PathRequest(BaseModel):
    """Inputs for a single simulated inflation path."""

    model_config = ConfigDict(extra="forbid", allow_inf_nan=False)

    years: int = Field(..., ge=0, le=MAX_YEARS, description="Number of annual rates to produce.")
    startRate: float = Field(
        DEFAULT_START_RATE,
        description="Inflation rate in year 0 as a decimal (e.g. 0.02 for 2%).",
    )
    volatility: float = Field(DEFAULT_VOLATILITY, ge=0, description="Std-dev of the yearly shock.")
    meanReversionSpeed: float = Field(
        DEFAULT_MEAN_REVERSION_SPEED,
        description="Share of the gap to the long-term mean closed each year.",
    )
    longTermMean: float = Field(DEFAULT_LONG_TERM_MEAN)
    seed: Optional[int] = Field(None, ge=0, description="Seed for reproducible draws.")


class PathResponse(BaseModel):
    years: int = Field(..., ge=0)
    rates: List[float]


class BandsRequest(PathRequest):
    """Inputs for an ensemble summarised into mean and percentile bands."""

    numSimulations: int = Field(DEFAULT_NUM_SIMULATIONS, ge=1, le=MAX_SIMULATIONS)


class BandsResponse(BaseModel):
    mean: List[float]
    lower: List[float]
    upper: List[float]
    series: Dict[str, List[Tuple[int, float]]]
