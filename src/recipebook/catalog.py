"""In-memory recipe catalog kept in name order."""

from operator import attrgetter
from typing import Iterator

from .logger import get_logger
from .models import Recipe

logger = get_logger("catalog")


class RecipeIndexError(IndexError):
    """A 1-based recipe position outside the catalog."""

    def __init__(self, position: int, count: int):
        self.position = position
        self.count = count
        super().__init__(f"Recipe number {position} is out of range (1-{count})")


class RecipeCatalog:
    """Hold every recipe of the session, sorted by name."""

    def __init__(self):
        self._recipes: list[Recipe] = []

    def add(self, recipe: Recipe) -> None:
        """Add a recipe and re-sort the whole catalog by name.

        The sort is stable, so recipes sharing a name stay in insertion order.
        """
        self._recipes.append(recipe)
        self._recipes.sort(key=attrgetter("name"))
        logger.info(f"Added recipe: {recipe.name} ({len(self._recipes)} total)")

    def list_recipes(self) -> Iterator[tuple[int, str]]:
        """Yield (1-based position, name) pairs in current order."""
        for position, recipe in enumerate(self._recipes, 1):
            yield position, recipe.name

    def get(self, position: int) -> Recipe:
        """Get a recipe by its 1-based position in the listing."""
        if position < 1 or position > len(self._recipes):
            raise RecipeIndexError(position, len(self._recipes))
        return self._recipes[position - 1]

    def __len__(self) -> int:
        return len(self._recipes)

    def __iter__(self) -> Iterator[Recipe]:
        return iter(list(self._recipes))
