import streamlit as st

from dog_diet.config import Settings
from dog_diet.energy import ACTIVITY_MULTIPLIERS
from dog_diet.models import ActivityLevel, DietProfile
from dog_diet.report import build_result
from dog_diet.units import MassUnit, to_kg

settings = Settings.from_env()
decimals = settings.decimals

st.set_page_config(page_title="Dog Diet Planner", page_icon="🐶", layout="centered")
st.title("🐶 Dog Diet Planner")

units = [u.value for u in MassUnit]
unit = MassUnit(st.selectbox("Weight unit", units, index=units.index(settings.default_unit.value)))

c1, c2 = st.columns(2)
current_weight = c1.number_input(f"Current weight ({unit.value})", min_value=0.1, value=30.0, step=0.1)
goal_weight = c2.number_input(f"Goal weight ({unit.value})", min_value=0.1, value=25.0, step=0.1)
if unit is MassUnit.LBS:
    st.caption(
        f"Converted: {to_kg(current_weight, unit):.{decimals}f} kg → {to_kg(goal_weight, unit):.{decimals}f} kg"
    )

activity = ActivityLevel(
    st.selectbox(
        "Activity level",
        [a.value for a in ActivityLevel],
        index=1,
        format_func=lambda v: f"{v} (x{ACTIVITY_MULTIPLIERS[ActivityLevel(v)]})",
    )
)

c3, c4 = st.columns(2)
food_cups = c3.number_input("Current food per day (cups)", min_value=0.01, value=3.0, step=0.05)
calories_per_cup = c4.number_input(
    "Caloric density (kcal per cup)",
    min_value=1.0,
    value=350.0,
    step=1.0,
    help="Printed on the back of the food bag",
)

profile = DietProfile(
    current_weight_kg=to_kg(float(current_weight), unit),
    goal_weight_kg=to_kg(float(goal_weight), unit),
    activity=activity,
    current_food_cups=float(food_cups),
)
result = build_result(profile, float(calories_per_cup))

m1, m2 = st.columns(2)
m1.metric("Daily calories", f"{result.daily_calories:.{decimals}f} kcal")
m2.metric("Target food per day", f"{result.daily_food_cups:.{decimals}f} cups")

st.subheader(f"{len(result.plan.weeks)}-Week Titration Plan")
table = [{"week": entry.week, "cups_per_day": round(entry.cups, decimals)} for entry in result.plan.weeks]
st.dataframe(table, use_container_width=True)
st.caption(f"Final target: {result.plan.target_cups:.{decimals}f} cups per day")
