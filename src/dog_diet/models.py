from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum


class ActivityLevel(str, Enum):
    LOW = "low"
    MODERATE = "moderate"
    HIGH = "high"


def _require_positive(name: str, value: float) -> None:
    if not math.isfinite(value) or value <= 0:
        raise ValueError(f"{name} must be greater than 0")


@dataclass(frozen=True)
class DietProfile:
    """Inputs for daily calorie and portion calculation."""

    current_weight_kg: float
    goal_weight_kg: float
    activity: ActivityLevel = ActivityLevel.MODERATE
    current_food_cups: float = 1.0

    def __post_init__(self) -> None:
        _require_positive("current_weight_kg", self.current_weight_kg)
        _require_positive("goal_weight_kg", self.goal_weight_kg)
        _require_positive("current_food_cups", self.current_food_cups)
        if not isinstance(self.activity, ActivityLevel):
            raise ValueError("activity must be one of: low, moderate, high")


@dataclass(frozen=True)
class TitrationWeek:
    week: int
    cups: float


@dataclass(frozen=True)
class TitrationPlan:
    weeks: tuple[TitrationWeek, ...]
    target_cups: float

    @property
    def amounts(self) -> list[float]:
        return [w.cups for w in self.weeks]
