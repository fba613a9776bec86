"""Pydantic models for recipes, their ingredients and steps."""

from typing import Callable, Optional

from pydantic import BaseModel, Field, computed_field

from .logger import get_logger

logger = get_logger("models")

CALORIE_THRESHOLD = 300.0


def format_number(value: float) -> str:
    """Render a number without a trailing '.0' for integral values.

    Magnitudes from 1e16 up use the shortest repr (`1e+16`), like other floats.
    """
    value = float(value)
    if value.is_integer() and abs(value) < 1e16:
        return str(int(value))
    return repr(value)


class Ingredient(BaseModel):
    """A named quantity of a food item."""

    name: str = Field(..., description="Ingredient name")
    quantity: float = Field(..., description="Amount in `unit`")
    unit: str = Field("", description="Unit of measurement")
    calories: float = Field(..., description="Calories per unit")
    food_group: str = Field("", description="Food group tag")

    @property
    def total_calories(self) -> float:
        return self.quantity * self.calories

    def describe(self) -> str:
        return (
            f"{format_number(self.quantity)} {self.unit} {self.name} "
            f"({format_number(self.calories)} calories per unit, {self.food_group})"
        )


class RecipeStep(BaseModel):
    """One ordered instruction of a recipe."""

    description: str = Field("", description="What to do in this step")


class CaloriesExceeded(BaseModel):
    """Raised by `Recipe.check_threshold` when a recipe is over the limit."""

    recipe_name: str
    total_calories: float
    threshold: float = CALORIE_THRESHOLD


CaloriesExceededHandler = Callable[[CaloriesExceeded], None]


class Recipe(BaseModel):
    """A named recipe with ordered ingredients and steps.

    Total calories are derived from the ingredient list on every read, so
    they always reflect scaling and clearing.
    """

    name: str = Field(..., description="Recipe name, used for catalog ordering")
    ingredients: list[Ingredient] = Field(default_factory=list)
    steps: list[RecipeStep] = Field(default_factory=list)

    @computed_field
    @property
    def total_calories(self) -> float:
        return sum((ingredient.total_calories for ingredient in self.ingredients), 0.0)

    def add_ingredient(
        self,
        name: str,
        quantity: float,
        unit: str,
        calories: float,
        food_group: str,
    ) -> Ingredient:
        """Append an ingredient. Inputs are trusted; the caller validates numbers."""
        ingredient = Ingredient(
            name=name,
            quantity=quantity,
            unit=unit,
            calories=calories,
            food_group=food_group,
        )
        self.ingredients.append(ingredient)
        return ingredient

    def add_step(self, description: str) -> RecipeStep:
        """Append a step. Any text is accepted, including an empty string."""
        step = RecipeStep(description=description)
        self.steps.append(step)
        return step

    def check_threshold(
        self,
        *handlers: CaloriesExceededHandler,
        threshold: float = CALORIE_THRESHOLD,
    ) -> Optional[CaloriesExceeded]:
        """Notify handlers if the recipe is over `threshold` calories.

        Handlers are called synchronously, in the order given, each with the
        same event. The event is returned as well, so calling without
        handlers is valid. Returns None when the total does not exceed the
        threshold.
        """
        total = self.total_calories
        if total <= threshold:
            return None

        event = CaloriesExceeded(recipe_name=self.name, total_calories=total, threshold=threshold)
        logger.warning(f"Recipe '{self.name}' exceeds {format_number(threshold)} calories: {format_number(total)}")
        for handler in handlers:
            handler(event)
        return event

    def render(self) -> str:
        """Render the recipe as plain text: ingredients, numbered steps, total."""
        lines = [f"Recipe: {self.name}", "Ingredients:"]
        lines.extend(ingredient.describe() for ingredient in self.ingredients)

        lines.extend(["", "Steps:"])
        lines.extend(f"{i}. {step.description}" for i, step in enumerate(self.steps, 1))

        lines.extend(["", f"Total Calories: {format_number(self.total_calories)}"])
        return "\n".join(lines)

    def scale(self, factor: float) -> None:
        """Multiply every ingredient quantity by `factor` in place.

        Zero and negative factors are accepted as-is. The calorie threshold
        is not re-checked.
        """
        for ingredient in self.ingredients:
            ingredient.quantity *= factor
        logger.debug(f"Scaled recipe '{self.name}' by {factor}")

    def clear(self) -> None:
        """Remove all ingredients and steps, keeping the name."""
        self.ingredients.clear()
        self.steps.clear()
        logger.debug(f"Cleared recipe '{self.name}'")
