import json
import logging
import math
from typing import Optional

import typer

from .config import Settings
from .models import ActivityLevel, DietProfile
from .prompts import ask_activity, ask_caloric_density, ask_food_amount, ask_weight
from .report import build_result, render_text, to_dict
from .units import MassUnit, to_kg

app = typer.Typer(help="Dog diet planning utilities", no_args_is_help=True)


@app.callback()
def main(
    ctx: typer.Context,
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    try:
        settings = Settings.from_env()
    except ValueError as exc:
        typer.echo(f"Invalid configuration: {exc}", err=True)
        raise typer.Exit(code=2) from exc
    level = logging.DEBUG if verbose else settings.log_level
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")
    # basicConfig is a no-op once the root logger has handlers
    logging.getLogger("dog_diet").setLevel(level)
    ctx.obj = settings


@app.command()
def plan(
    ctx: typer.Context,
    current_weight: float = typer.Option(..., min=0.0001, help="Current weight"),
    goal_weight: float = typer.Option(..., min=0.0001, help="Goal weight"),
    unit: Optional[MassUnit] = typer.Option(None, help="Weight unit: kg, lbs", case_sensitive=False),
    activity: ActivityLevel = typer.Option(
        ActivityLevel.MODERATE,
        help="Activity level: low, moderate, high",
        case_sensitive=False,
    ),
    food_cups: float = typer.Option(..., min=0.0001, help="Current daily food amount in cups"),
    calories_per_cup: float = typer.Option(..., min=0.0001, help="Caloric density of the food (kcal per cup)"),
    as_json: bool = typer.Option(False, "--json", help="Print JSON instead of text"),
) -> None:
    """Compute daily calories, daily food amount and a 4-week titration plan."""
    settings: Settings = ctx.obj
    weight_unit = unit or settings.default_unit
    try:
        profile = DietProfile(
            current_weight_kg=to_kg(current_weight, weight_unit),
            goal_weight_kg=to_kg(goal_weight, weight_unit),
            activity=activity,
            current_food_cups=food_cups,
        )
        result = build_result(profile, calories_per_cup)
    except ValueError as exc:
        raise typer.BadParameter(str(exc)) from exc

    if as_json:
        typer.echo(json.dumps(to_dict(result, settings.decimals), ensure_ascii=False))
    else:
        typer.echo(render_text(result, settings.decimals))


@app.command()
def interactive(ctx: typer.Context) -> None:
    """Guided session that asks for each value in turn."""
    settings: Settings = ctx.obj
    typer.echo("Let's create a diet plan for your dog.\n")

    profile = DietProfile(
        current_weight_kg=ask_weight("current"),
        goal_weight_kg=ask_weight("goal"),
        activity=ask_activity(),
        current_food_cups=ask_food_amount(),
    )
    calories_per_cup = ask_caloric_density()

    typer.echo("")
    typer.echo(render_text(build_result(profile, calories_per_cup), settings.decimals))


@app.command()
def convert(
    ctx: typer.Context,
    value: float = typer.Argument(..., min=0.0001, help="Weight to convert"),
    unit: MassUnit = typer.Option(MassUnit.LBS, help="Unit of VALUE: kg, lbs", case_sensitive=False),
) -> None:
    """Convert a weight to kilograms."""
    settings: Settings = ctx.obj
    if not math.isfinite(value):
        raise typer.BadParameter("value must be a finite number")
    typer.echo(f"{to_kg(value, unit):.{settings.decimals}f} kg")


if __name__ == "__main__":
    app()
