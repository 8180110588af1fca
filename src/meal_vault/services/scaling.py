"""Quantity scaling for label nutrition, batch recipes and servings.

All functions here are pure. Raw user input is accepted as text or numbers and
normalized with :func:`parse_number`, so invalid or empty values count as 0.
Divisors (label weight, serving counts) that are missing, non-numeric or not
positive fall back to 1 instead of raising.

Rounding is half away from zero applied to the shortest decimal representation
of the float, so ``0.05`` rounds to ``0.1`` and ``2.25`` to ``2.3`` regardless
of how those values are stored in binary.
"""

import math
from collections.abc import Iterable
from decimal import ROUND_HALF_UP, Decimal
from typing import Protocol

from meal_vault.domain.nutrition import MacroProfile

_ONE_PLACE = Decimal("0.1")
_NO_PLACES = Decimal("1")


class HasMacros(Protocol):
    calories: float
    protein_g: float
    fat_g: float
    carbs_g: float


def parse_number(value: object, default: float = 0.0) -> float:
    """Parse user input into a finite float, returning ``default`` when invalid."""
    if isinstance(value, bool):
        return default
    if isinstance(value, int | float):
        number = float(value)
    elif isinstance(value, str):
        try:
            number = float(value.strip())
        except ValueError:
            return default
    else:
        return default
    if not math.isfinite(number):
        return default
    return number


def round0(value: float) -> int:
    return int(Decimal(repr(float(value))).quantize(_NO_PLACES, rounding=ROUND_HALF_UP))


def round1(value: float) -> float:
    exact = Decimal(repr(float(value)))
    return float(exact.quantize(_ONE_PLACE, rounding=ROUND_HALF_UP))


def _divisor(value: object) -> float:
    number = parse_number(value)
    return number if number > 0 else 1.0


def scale_ingredient(  # noqa: PLR0913
    label_calories: object,
    label_protein: object,
    label_carbs: object,
    label_fat: object,
    label_weight_g: object,
    amount_used_g: object,
) -> MacroProfile:
    """Scale label nutrition stated for ``label_weight_g`` to the amount used."""
    weight = _divisor(label_weight_g)
    amount = parse_number(amount_used_g)
    return MacroProfile(
        calories=round0(parse_number(label_calories) / weight * amount),
        protein_g=round1(parse_number(label_protein) / weight * amount),
        fat_g=round1(parse_number(label_fat) / weight * amount),
        carbs_g=round1(parse_number(label_carbs) / weight * amount),
    )


def sum_ingredients(ingredients: Iterable[HasMacros]) -> MacroProfile:
    """Sum calories and macros across ingredients; empty input sums to zero."""
    total = MacroProfile(0.0, 0.0, 0.0, 0.0)
    for item in ingredients:
        total = MacroProfile(
            calories=total.calories + item.calories,
            protein_g=total.protein_g + item.protein_g,
            fat_g=total.fat_g + item.fat_g,
            carbs_g=total.carbs_g + item.carbs_g,
        )
    return total


def per_serving(batch: HasMacros, serving_count: object) -> MacroProfile:
    """Divide batch totals into servings. Calories keep one decimal here."""
    servings = _divisor(serving_count)
    return MacroProfile(
        calories=round1(batch.calories / servings),
        protein_g=round1(batch.protein_g / servings),
        fat_g=round1(batch.fat_g / servings),
        carbs_g=round1(batch.carbs_g / servings),
    )


def logged_amount(serving: HasMacros, servings_to_log: object) -> MacroProfile:
    """Multiply per-serving nutrition by the number of servings eaten."""
    servings = _divisor(servings_to_log)
    return MacroProfile(
        calories=round1(serving.calories * servings),
        protein_g=round1(serving.protein_g * servings),
        fat_g=round1(serving.fat_g * servings),
        carbs_g=round1(serving.carbs_g * servings),
    )


def scale_per_100g(per_100g: HasMacros, amount_g: object) -> MacroProfile:
    """Scale food database nutrition (per 100 g) to a gram amount."""
    multiplier = parse_number(amount_g) / 100
    return MacroProfile(
        calories=round0(per_100g.calories * multiplier),
        protein_g=round1(per_100g.protein_g * multiplier),
        fat_g=round1(per_100g.fat_g * multiplier),
        carbs_g=round1(per_100g.carbs_g * multiplier),
    )
