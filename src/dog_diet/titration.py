from __future__ import annotations

import logging

from .energy import calculate_daily_food_amount
from .models import DietProfile, TitrationPlan, TitrationWeek

logger = logging.getLogger(__name__)

TITRATION_WEEKS = 4


def calculate_titration_plan(
    profile: DietProfile,
    calories_per_cup: float,
    *,
    weeks: int = TITRATION_WEEKS,
) -> TitrationPlan:
    """Spread the change from the current to the target amount evenly over `weeks`.

    Week ``w`` gets ``current + step * w`` cups. The last week is the target
    itself, so it never drifts from ``target_cups`` by a rounding error.
    """
    if weeks < 1:
        raise ValueError("weeks must be >= 1")

    target = calculate_daily_food_amount(profile, calories_per_cup)
    current = profile.current_food_cups
    step = (target - current) / weeks
    logger.debug("titration current=%.3f target=%.3f step=%.4f", current, target, step)

    entries = tuple(
        TitrationWeek(week=w, cups=target if w == weeks else current + step * w)
        for w in range(1, weeks + 1)
    )
    return TitrationPlan(weeks=entries, target_cups=target)
