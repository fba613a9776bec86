"""Recipebook - record, scale and display recipes with calorie totals."""

__version__ = "0.1.0"

from .catalog import RecipeCatalog, RecipeIndexError
from .models import (
    CALORIE_THRESHOLD,
    CaloriesExceeded,
    Ingredient,
    Recipe,
    RecipeStep,
)
from .runtime import (
    RuntimeContext,
    bootstrap_runtime_context,
    get_runtime_context,
    set_runtime_context,
)

__all__ = [
    # Domain
    "Ingredient",
    "RecipeStep",
    "Recipe",
    "CaloriesExceeded",
    "CALORIE_THRESHOLD",

    # Catalog
    "RecipeCatalog",
    "RecipeIndexError",

    # Runtime context
    "RuntimeContext",
    "bootstrap_runtime_context",
    "get_runtime_context",
    "set_runtime_context",
]
