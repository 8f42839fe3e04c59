from __future__ import annotations

from typing import Iterable, List


class FixedShocks:
    """Random source that replays a fixed sequence of shocks."""

    def __init__(self, shocks: Iterable[float]):
        self._shocks: List[float] = list(shocks)
        self.calls = 0

    def normal(self, loc: float, scale: float) -> float:
        value = self._shocks[self.calls % len(self._shocks)]
        self.calls += 1
        return loc + value


def goal_payload() -> dict:
    return {
        "goal": 100000,
        "currentAge": 30,
        "targetAge": 40,
        "monthlySalary": 3000,
        "assumptions": {"numSimulations": 200},
        "seed": 42,
    }
