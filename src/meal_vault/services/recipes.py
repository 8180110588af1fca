"""Saved batch recipes."""

import asyncio
import logging
from dataclasses import dataclass, field

from meal_vault.domain.recipes import (
    SavedRecipe,
    recipe_from_record,
    recipe_to_record,
)
from meal_vault.services.storage import (
    SAVED_RECIPES_KEY,
    JsonRecordStore,
    ReadResult,
    parse_record_list,
    writable_value,
)

_logger = logging.getLogger(__name__)


@dataclass
class RecipeService:
    """Persists recipes in insertion order; identity is the recipe id."""

    records: JsonRecordStore
    _lock: asyncio.Lock = field(default_factory=asyncio.Lock, init=False, repr=False)

    async def save_recipe(self, recipe: SavedRecipe) -> None:
        """Append a recipe. Names are not required to be unique."""
        async with self._lock:
            recipes = writable_value(await self.read_recipes())
            recipes.append(recipe)
            await self._write(recipes)
        _logger.info("Recipe saved: id=%s total=%s", recipe.id, len(recipes))

    async def read_recipes(self) -> ReadResult[list[SavedRecipe]]:
        """Return stored recipes along with any read error."""
        return await self.records.read(
            SAVED_RECIPES_KEY,
            parse=lambda payload: parse_record_list(payload, recipe_from_record),
            default=list,
        )

    async def get_recipes(self) -> list[SavedRecipe]:
        """Return all recipes, or an empty list when unreadable."""
        return (await self.read_recipes()).value

    async def search_recipes(self, query: str | None) -> list[SavedRecipe]:
        """Filter recipes by a case-insensitive name substring."""
        recipes = await self.get_recipes()
        if not query:
            return recipes
        needle = query.lower()
        return [recipe for recipe in recipes if needle in recipe.name.lower()]

    async def delete_recipe(self, recipe_id: str) -> None:
        """Delete a recipe by id; unknown ids are ignored."""
        async with self._lock:
            recipes = writable_value(await self.read_recipes())
            remaining = [recipe for recipe in recipes if recipe.id != recipe_id]
            if len(remaining) == len(recipes):
                return
            await self._write(remaining)
        _logger.info("Recipe deleted: id=%s", recipe_id)

    async def _write(self, recipes: list[SavedRecipe]) -> None:
        await self.records.write(
            SAVED_RECIPES_KEY, [recipe_to_record(recipe) for recipe in recipes]
        )
