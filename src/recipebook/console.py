"""Interactive console for managing recipes in a terminal session."""

from typing import Callable, Optional, TextIO

from rich.console import Console
from rich.markup import escape
from rich.prompt import FloatPrompt, IntPrompt

from .catalog import RecipeCatalog, RecipeIndexError
from .logger import get_logger
from .models import CaloriesExceeded, Recipe, format_number

logger = get_logger("console")


class _StreamPromptMixin:
    """Treat an exhausted input stream like Ctrl-D on a terminal."""

    @classmethod
    def get_input(cls, console: Console, prompt, password: bool, stream: Optional[TextIO] = None) -> str:
        value = super().get_input(console, prompt, password, stream=stream)
        if stream is not None and value == "":
            raise EOFError
        return value


class WholeNumberPrompt(_StreamPromptMixin, IntPrompt):
    pass


class NumberPrompt(_StreamPromptMixin, FloatPrompt):
    pass


class RecipeConsole:
    """Menu-driven console over a recipe catalog."""

    MENU = (
        (1, "Add a new recipe"),
        (2, "Display a recipe"),
        (3, "List all recipes"),
        (4, "Exit"),
    )
    EXIT_OPTION = 4

    def __init__(
        self,
        catalog: Optional[RecipeCatalog] = None,
        console: Optional[Console] = None,
        stream: Optional[TextIO] = None,
    ):
        """Initialize the console.

        Args:
            catalog: The catalog to operate on. A new, empty one if omitted.
            console: Rich console used for all output.
            stream: Read answers from this file instead of stdin.
        """
        self.catalog = catalog if catalog is not None else RecipeCatalog()
        self.console = console or Console()
        self.stream = stream
        self._actions: dict[int, Callable[[], None]] = {
            1: self.add_recipe,
            2: self.display_recipe,
            3: self.list_recipes,
        }

    def _ask_text(self, label: str) -> str:
        # Free text is kept as typed; only the line ending is dropped.
        value = self.console.input(f"{label}: ", stream=self.stream)
        if self.stream is not None and value == "":
            raise EOFError
        return value.rstrip("\r\n")

    def _ask_int(self, label: str, invalid_message: str) -> int:
        prompt = WholeNumberPrompt(label, console=self.console)
        prompt.validate_error_message = f"[prompt.invalid]{invalid_message}"
        return prompt(stream=self.stream)

    def _ask_float(self, label: str) -> float:
        prompt = NumberPrompt(label, console=self.console)
        prompt.validate_error_message = f"[prompt.invalid]Invalid input. Please enter a valid number for {label}"
        return prompt(stream=self.stream)

    def show_menu(self):
        """Print the main menu."""
        self.console.print("\n[bold cyan]Recipe Management System[/bold cyan]")
        for number, label in self.MENU:
            self.console.print(f"{number}. {label}")

    def add_recipe(self):
        """Collect a new recipe from the user and add it to the catalog."""
        name = self._ask_text("Enter the name of the recipe")
        recipe = Recipe(name=name)

        self.enter_recipe_details(recipe, self._warn_calories_exceeded)
        self.catalog.add(recipe)
        self.console.print(f"[green]✓[/green] Added recipe: {escape(recipe.name)}")

    def enter_recipe_details(self, recipe: Recipe, *handlers: Callable[[CaloriesExceeded], None]):
        """Prompt for ingredients and steps, then check the calorie threshold once."""
        self.console.print(f"Entering details for recipe: {escape(recipe.name)}")

        ingredient_count = self._ask_int(
            "Enter the number of ingredients",
            "Invalid input. Please enter a valid number of ingredients",
        )
        for i in range(1, ingredient_count + 1):
            self.console.print(f"Enter details for ingredient #{i}:")
            name = self._ask_text("Name")
            quantity = self._ask_float("Quantity")
            unit = self._ask_text("Unit of measurement")
            calories = self._ask_float("Calories per unit")
            food_group = self._ask_text("Food group")
            recipe.add_ingredient(name, quantity, unit, calories, food_group)

        step_count = self._ask_int(
            "Enter the number of steps",
            "Invalid input. Please enter a valid number of steps",
        )
        for i in range(1, step_count + 1):
            self.console.print(f"Enter description for step #{i}:")
            recipe.add_step(self._ask_text(f"Step {i}"))

        return recipe.check_threshold(*handlers)

    def _warn_calories_exceeded(self, event: CaloriesExceeded):
        self.console.print(
            f"[bold yellow]Warning:[/bold yellow] Total calories "
            f"({format_number(event.total_calories)}) exceed {format_number(event.threshold)}!"
        )

    def list_recipes(self):
        """Print every recipe name with its number."""
        if not self.catalog:
            self.console.print("[yellow]No recipes available.[/yellow]")
            return

        self.console.print("[bold]Recipes:[/bold]")
        for position, name in self.catalog.list_recipes():
            self.console.print(f"{position}. {escape(name)}")

    def display_recipe(self):
        """Let the user pick a recipe by number and print it."""
        self.list_recipes()

        if not self.catalog:
            self.console.print("[yellow]No recipes available to display.[/yellow]")
            return

        while True:
            position = self._ask_int(
                "Enter the recipe number to display",
                "Invalid input. Please enter a valid recipe number",
            )
            try:
                recipe = self.catalog.get(position)
                break
            except RecipeIndexError as e:
                logger.debug(f"Rejected selection: {e}")
                self.console.print("[prompt.invalid]Invalid input. Please enter a valid recipe number")

        self.console.print()
        self.console.print(recipe.render(), markup=False, highlight=False)

    def run(self) -> int:
        """Main console loop. Returns the process exit code."""
        logger.info("Recipe console started")

        while True:
            try:
                self.show_menu()
                choice = self._ask_int(
                    "Choose an option",
                    "Invalid input. Please enter a valid option number",
                )

                if choice == self.EXIT_OPTION:
                    break

                action = self._actions.get(choice)
                if action is None:
                    self.console.print("[red]Invalid option. Please try again.[/red]")
                    continue

                action()

            except (KeyboardInterrupt, EOFError):
                self.console.print("\n[yellow]Interrupted[/yellow]")
                break
            except Exception as e:
                self.console.print(f"[red]Error: {escape(str(e))}[/red]")
                logger.exception(f"Console error: {e}")

        self.console.print("\n[dim]Session ended[/dim]")
        if self.catalog:
            self.console.print(f"[dim]Recipes this session: {len(self.catalog)}[/dim]")
        logger.info("Recipe console stopped")
        return 0
