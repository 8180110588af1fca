"""Builders that turn scaled nutrition into meals, ingredients and recipes."""

from collections.abc import Sequence
from uuid import uuid4

from meal_vault.domain.meals import Ingredient, Meal, MealType
from meal_vault.domain.nutrition import FoodItem, MacroProfile
from meal_vault.domain.recipes import SavedRecipe
from meal_vault.services.clock import Clock
from meal_vault.services.scaling import (
    logged_amount,
    parse_number,
    round0,
    round1,
    scale_ingredient,
    scale_per_100g,
    sum_ingredients,
)


def new_id() -> str:
    return uuid4().hex


def build_custom_meal(name: str, nutrition: MacroProfile, clock: Clock) -> Meal:
    """Build a single-serving meal from already realized nutrition."""
    return Meal(
        id=new_id(),
        name=name,
        calories=round0(nutrition.calories),
        protein_g=round1(nutrition.protein_g),
        carbs_g=round1(nutrition.carbs_g),
        fat_g=round1(nutrition.fat_g),
        servings=1,
        timestamp=clock.now_ms(),
        type=MealType.CUSTOM,
    )


def build_quick_add_meal(food: FoodItem, amount_g: object, clock: Clock) -> Meal:
    """Build a meal for a gram amount of a food database entry."""
    amount = parse_number(amount_g)
    nutrition = scale_per_100g(food.macros, amount)
    return build_custom_meal(f"{food.name} ({amount:g}g)", nutrition, clock)


def build_prepped_meal(
    name: str, per_serving_totals: MacroProfile, servings_to_log: object, clock: Clock
) -> Meal:
    """Build a meal for some servings of a batch recipe."""
    servings = parse_number(servings_to_log)
    if servings <= 0:
        servings = 1.0
    logged = logged_amount(per_serving_totals, servings)
    plural = "" if servings == 1 else "s"
    return Meal(
        id=new_id(),
        name=f"{name} ({servings:g} serving{plural})",
        calories=round0(logged.calories),
        protein_g=logged.protein_g,
        carbs_g=logged.carbs_g,
        fat_g=logged.fat_g,
        servings=servings,
        timestamp=clock.now_ms(),
        type=MealType.PREPPED,
    )


def build_ingredient(  # noqa: PLR0913
    name: str,
    label_calories: object,
    label_protein: object,
    label_carbs: object,
    label_fat: object,
    label_weight_g: object,
    amount_used_g: object,
    unit: str = "g",
) -> Ingredient:
    """Scale raw label values to the amount used and wrap them as an ingredient."""
    scaled = scale_ingredient(
        label_calories,
        label_protein,
        label_carbs,
        label_fat,
        label_weight_g,
        amount_used_g,
    )
    return Ingredient(
        id=new_id(),
        name=name,
        amount=parse_number(amount_used_g),
        unit=unit,
        calories=scaled.calories,
        protein_g=scaled.protein_g,
        carbs_g=scaled.carbs_g,
        fat_g=scaled.fat_g,
    )


def build_recipe(
    name: str, ingredients: Sequence[Ingredient], clock: Clock
) -> SavedRecipe:
    """Build a batch recipe whose totals are the sum of its ingredients."""
    totals = sum_ingredients(ingredients)
    return SavedRecipe(
        id=new_id(),
        name=name,
        calories=round0(totals.calories),
        protein_g=round1(totals.protein_g),
        carbs_g=round1(totals.carbs_g),
        fat_g=round1(totals.fat_g),
        created_at=clock.now_ms(),
        ingredients=tuple(ingredients),
    )
