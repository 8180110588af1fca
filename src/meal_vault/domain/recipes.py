"""Domain models for saved batch recipes."""

from dataclasses import dataclass

from meal_vault.domain.meals import (
    Ingredient,
    ingredient_from_record,
    ingredient_to_record,
    number_field,
)


@dataclass(frozen=True)
class SavedRecipe:
    """A reusable batch; nutrition covers the whole batch, not one serving."""

    id: str
    name: str
    calories: float
    protein_g: float
    carbs_g: float
    fat_g: float
    created_at: int
    ingredients: tuple[Ingredient, ...] | None = None


def recipe_to_record(recipe: SavedRecipe) -> dict[str, object]:
    record: dict[str, object] = {
        "id": recipe.id,
        "name": recipe.name,
        "calories": recipe.calories,
        "protein": recipe.protein_g,
        "carbs": recipe.carbs_g,
        "fat": recipe.fat_g,
        "createdAt": recipe.created_at,
    }
    if recipe.ingredients is not None:
        record["ingredients"] = [
            ingredient_to_record(ingredient) for ingredient in recipe.ingredients
        ]
    return record


def recipe_from_record(row: dict[str, object]) -> SavedRecipe:
    ingredients = row.get("ingredients")
    return SavedRecipe(
        id=str(row["id"]),
        name=str(row.get("name", "")),
        calories=number_field(row, "calories"),
        protein_g=number_field(row, "protein"),
        carbs_g=number_field(row, "carbs"),
        fat_g=number_field(row, "fat"),
        created_at=int(number_field(row, "createdAt")),
        ingredients=(
            tuple(ingredient_from_record(item) for item in ingredients)
            if isinstance(ingredients, list)
            else None
        ),
    )
