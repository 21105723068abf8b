# -----------------------------------------------------------------------------
# RECIPES - SCRIPTS ON THE OPERATION CONTRACTS
# -----------------------------------------------------------------------------
# A recipe is business logic written only against SandwichTechnology.
# It runs unchanged on any interpreter.
#
# The RecipeBook keeps recipes in registration order; selection without a
# name picks the first one.
# -----------------------------------------------------------------------------

from collections.abc import Callable

from rich.console import Console

from sandwich.core.technology import SandwichTechnology
from sandwich.domain.models import Bread, Component, SandwichReady
from sandwich.domain.result import Result

console = Console()

Recipe = Callable[[SandwichTechnology], Result[SandwichReady]]


class RecipeNotFoundError(LookupError):
    """Raised when a recipe cannot be selected from the book."""

    def __init__(self, message: str, name: str | None = None) -> None:
        super().__init__(message)
        self.name = name


def my_recipe(tech: SandwichTechnology) -> Result[SandwichReady]:
    """
    Toast and tomato as the base, add cheese, add salt, no top bread.
    """
    return (
        tech.start_new_sandwich(Bread.TOAST, Component.TOMATO)
        .next(lambda it: tech.add_component(it, Component.CHEESE))
        .next(lambda it: tech.add_component(it, Component.SALT))
        .finish(lambda it: tech.finish_sandwich(it, None))
    )


def club_recipe(tech: SandwichTechnology) -> Result[SandwichReady]:
    """Baguette and cheese, add tomato, closed with a second baguette."""
    return (
        tech.start_new_sandwich(Bread.BAGUETTE, Component.CHEESE)
        .next(lambda it: tech.add_component(it, Component.TOMATO))
        .finish(lambda it: tech.finish_sandwich(it, Bread.BAGUETTE))
    )


class RecipeBook:
    """Registry of recipes by name, kept in registration order."""

    def __init__(self) -> None:
        self._recipes: dict[str, Recipe] = {}

    def register(self, name: str, recipe: Recipe) -> None:
        """Register a recipe."""
        self._recipes[name] = recipe
        console.print(f"[green][RECIPES] Registered: {name}[/green]")

    def get(self, name: str) -> Recipe | None:
        """Get a recipe by name."""
        return self._recipes.get(name)

    def list_recipes(self) -> list[str]:
        """List all registered recipe names."""
        return list(self._recipes.keys())

    def first(self) -> Recipe | None:
        return next(iter(self._recipes.values()), None)

    def __len__(self) -> int:
        return len(self._recipes)


def default_book() -> RecipeBook:
    book = RecipeBook()
    book.register("my_recipe", my_recipe)
    book.register("club_recipe", club_recipe)
    return book


def select_recipe(book: RecipeBook, name: str | None = None) -> Recipe:
    """
    Pick a recipe from the book.

    Args:
        book: Where to look.
        name: Recipe name; None picks the first registered recipe.

    Raises:
        RecipeNotFoundError: Book is empty or has no recipe by that name.
    """
    recipe = book.first() if name is None else book.get(name)
    if recipe is None:
        console.print(f"[red][RECIPES] No recipe to select: {name or '<first>'}[/red]")
        raise RecipeNotFoundError(
            f"Recipe not found: {name}" if name else "Recipe book is empty", name=name
        )
    return recipe
