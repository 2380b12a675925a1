import logging
import math

from .models import ActivityLevel, DietProfile

logger = logging.getLogger(__name__)

# Multipliers on baseline calories by activity level.
# - low: mostly indoors, short walks
# - moderate: typical household activity
# - high: long daily exercise / working dog
ACTIVITY_MULTIPLIERS: dict[ActivityLevel, float] = {
    ActivityLevel.LOW: 0.8,
    ActivityLevel.MODERATE: 1.0,
    ActivityLevel.HIGH: 1.2,
}


def calculate_base_calories(average_weight_kg: float) -> float:
    """Baseline daily calories for a weight, before activity adjustment."""
    return 30 * average_weight_kg + 70


def calculate_daily_calories(profile: DietProfile) -> float:
    """Recommended daily calories, using the mean of current and goal weight."""
    average_weight = (profile.current_weight_kg + profile.goal_weight_kg) / 2
    calories = calculate_base_calories(average_weight) * ACTIVITY_MULTIPLIERS[profile.activity]
    logger.debug("average_weight_kg=%.3f activity=%s calories=%.3f", average_weight, profile.activity.value, calories)
    return calories


def calculate_daily_food_amount(profile: DietProfile, calories_per_cup: float) -> float:
    """Recommended daily food amount in cups."""
    if not math.isfinite(calories_per_cup) or calories_per_cup <= 0:
        raise ValueError("calories_per_cup must be a finite number greater than 0")
    return calculate_daily_calories(profile) / calories_per_cup
