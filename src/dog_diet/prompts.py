"""Interactive input collection.

Each question re-prompts until its parser accepts the answer, so callers only
ever receive validated values.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TypeVar

import typer

from .models import ActivityLevel
from .validation import InputError, parse_activity_choice, parse_positive_amount, parse_weight

T = TypeVar("T")


def ask(prompt: str, parser: Callable[[str], T]) -> T:
    while True:
        raw = typer.prompt(prompt, prompt_suffix=" ")
        try:
            return parser(raw)
        except InputError as exc:
            typer.echo(str(exc))


def ask_weight(kind: str) -> float:
    def _parse(text: str) -> float:
        weight_kg = parse_weight(text)
        if text.strip().lower().endswith("lbs"):
            typer.echo(f"Weight converted to kg: {weight_kg:.2f} kg")
        return weight_kg

    return ask(
        f"Enter your dog's {kind} weight followed by a space and then 'kg' or 'lbs' (e.g., '30 kg' or '66 lbs'):",
        _parse,
    )


def ask_activity() -> ActivityLevel:
    typer.echo("Select your dog's activity level:")
    typer.echo("1. Low")
    typer.echo("2. Moderate")
    typer.echo("3. High")
    return ask("Enter the number (1-3):", parse_activity_choice)


def ask_food_amount() -> float:
    return ask(
        "Enter the current amount of food you're feeding your dog per day (in cups):",
        lambda text: parse_positive_amount(text, "Amount"),
    )


def ask_caloric_density() -> float:
    return ask(
        "Enter the caloric density of the dog food (calories per cup), found on the back of the food bag:",
        lambda text: parse_positive_amount(text, "Caloric density"),
    )
