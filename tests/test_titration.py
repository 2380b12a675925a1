import pytest

from dog_diet.energy import calculate_daily_food_amount
from dog_diet.models import ActivityLevel, DietProfile
from dog_diet.titration import TITRATION_WEEKS, calculate_titration_plan


def test_example_plan() -> None:
    profile = DietProfile(
        current_weight_kg=30.0,
        goal_weight_kg=25.0,
        activity=ActivityLevel.MODERATE,
        current_food_cups=3.0,
    )
    plan = calculate_titration_plan(profile, 350.0)

    target = 895.0 / 350.0
    step = (target - 3.0) / 4
    assert [w.week for w in plan.weeks] == [1, 2, 3, 4]
    assert plan.amounts == pytest.approx([3.0 + step * w for w in range(1, 5)])
    assert [round(a, 2) for a in plan.amounts] == [2.89, 2.78, 2.67, 2.56]
    assert plan.target_cups == pytest.approx(target)
    assert round(plan.target_cups, 2) == 2.56


@pytest.mark.parametrize(
    ("current_cups", "calories_per_cup"),
    [(3.0, 350.0), (0.5, 280.0), (7.3, 401.0), (1.0, 33.3)],
)
def test_last_week_equals_target(current_cups: float, calories_per_cup: float) -> None:
    profile = DietProfile(
        current_weight_kg=18.4,
        goal_weight_kg=16.0,
        activity=ActivityLevel.LOW,
        current_food_cups=current_cups,
    )
    plan = calculate_titration_plan(profile, calories_per_cup)
    assert len(plan.weeks) == TITRATION_WEEKS
    assert plan.weeks[-1].cups == plan.target_cups
    assert plan.target_cups == calculate_daily_food_amount(profile, calories_per_cup)


def test_plan_increases_when_target_above_current() -> None:
    profile = DietProfile(20.0, 24.0, ActivityLevel.HIGH, current_food_cups=1.0)
    amounts = calculate_titration_plan(profile, 300.0).amounts
    assert all(a < b for a, b in zip(amounts, amounts[1:]))
    assert amounts[0] > 1.0


def test_plan_decreases_when_target_below_current() -> None:
    profile = DietProfile(30.0, 25.0, ActivityLevel.LOW, current_food_cups=5.0)
    amounts = calculate_titration_plan(profile, 350.0).amounts
    assert all(a > b for a, b in zip(amounts, amounts[1:]))


def test_plan_is_flat_when_already_at_target() -> None:
    # 10 kg moderate -> 370 kcal; 370 kcal/cup -> 1 cup
    profile = DietProfile(10.0, 10.0, ActivityLevel.MODERATE, current_food_cups=1.0)
    plan = calculate_titration_plan(profile, 370.0)
    assert plan.amounts == pytest.approx([1.0, 1.0, 1.0, 1.0])


def test_plan_is_deterministic() -> None:
    profile = DietProfile(12.0, 11.0, ActivityLevel.MODERATE, current_food_cups=2.0)
    assert calculate_titration_plan(profile, 320.0) == calculate_titration_plan(profile, 320.0)


def test_custom_week_count() -> None:
    profile = DietProfile(12.0, 11.0, ActivityLevel.MODERATE, current_food_cups=2.0)
    plan = calculate_titration_plan(profile, 320.0, weeks=2)
    assert [w.week for w in plan.weeks] == [1, 2]
    with pytest.raises(ValueError):
        calculate_titration_plan(profile, 320.0, weeks=0)
