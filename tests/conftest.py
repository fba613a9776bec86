import io
import os

# Keep test runs from writing log files under the user's home directory.
os.environ["RECIPEBOOK_LOG_TO_FILE"] = "0"

import pytest
from rich.console import Console

from recipebook.catalog import RecipeCatalog
from recipebook.console import RecipeConsole
from recipebook.models import Recipe
from recipebook.runtime import set_runtime_context


@pytest.fixture(autouse=True)
def fresh_runtime_context():
    set_runtime_context(None)
    yield
    set_runtime_context(None)


@pytest.fixture
def catalog() -> RecipeCatalog:
    return RecipeCatalog()


@pytest.fixture
def make_recipe():
    def _make(name: str, *ingredients: tuple[float, float], steps: tuple[str, ...] = ()) -> Recipe:
        recipe = Recipe(name=name)
        for i, (quantity, calories) in enumerate(ingredients, 1):
            recipe.add_ingredient(f"item {i}", quantity, "g", calories, "misc")
        for step in steps:
            recipe.add_step(step)
        return recipe

    return _make


@pytest.fixture
def scripted_console(catalog: RecipeCatalog):
    """Build a console that reads the given lines and records its output."""

    def _make(*lines: str) -> tuple[RecipeConsole, io.StringIO]:
        output = io.StringIO()
        console = Console(file=output, width=120, color_system=None, force_terminal=False)
        stream = io.StringIO("".join(f"{line}\n" for line in lines))
        return RecipeConsole(catalog=catalog, console=console, stream=stream), output

    return _make
