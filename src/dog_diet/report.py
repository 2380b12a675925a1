from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from .energy import ACTIVITY_MULTIPLIERS, calculate_daily_calories, calculate_daily_food_amount
from .models import DietProfile, TitrationPlan
from .titration import calculate_titration_plan


@dataclass(frozen=True)
class DietResult:
    profile: DietProfile
    calories_per_cup: float
    daily_calories: float
    daily_food_cups: float
    plan: TitrationPlan


def build_result(profile: DietProfile, calories_per_cup: float) -> DietResult:
    return DietResult(
        profile=profile,
        calories_per_cup=calories_per_cup,
        daily_calories=calculate_daily_calories(profile),
        daily_food_cups=calculate_daily_food_amount(profile, calories_per_cup),
        plan=calculate_titration_plan(profile, calories_per_cup),
    )


def render_plan(plan: TitrationPlan, decimals: int = 2) -> str:
    lines = [f"{len(plan.weeks)}-Week Titration Plan:"]
    for entry in plan.weeks:
        lines.append(f"Week {entry.week}: {entry.cups:.{decimals}f} cups per day")
    lines.append(f"Final target: {plan.target_cups:.{decimals}f} cups per day")
    return "\n".join(lines)


def render_text(result: DietResult, decimals: int = 2) -> str:
    return "\n".join(
        [
            "Results:",
            f"Daily calories: {result.daily_calories:.{decimals}f}",
            f"Target food amount per day: {result.daily_food_cups:.{decimals}f} cups",
            "",
            "Titration Plan:",
            render_plan(result.plan, decimals),
        ]
    )


def to_dict(result: DietResult, decimals: int = 2) -> dict[str, Any]:
    profile = result.profile
    return {
        "current_weight_kg": round(profile.current_weight_kg, decimals),
        "goal_weight_kg": round(profile.goal_weight_kg, decimals),
        "activity": profile.activity.value,
        "activity_multiplier": ACTIVITY_MULTIPLIERS[profile.activity],
        "current_food_cups": round(profile.current_food_cups, decimals),
        "calories_per_cup": result.calories_per_cup,
        "daily_calories": round(result.daily_calories, decimals),
        "daily_food_cups": round(result.daily_food_cups, decimals),
        "titration_plan": [
            {"week": entry.week, "cups": round(entry.cups, decimals)} for entry in result.plan.weeks
        ],
        "final_target_cups": round(result.plan.target_cups, decimals),
    }
