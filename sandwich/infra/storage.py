# -----------------------------------------------------------------------------
# INGREDIENTS STORAGE
# -----------------------------------------------------------------------------
# Responsibility: Answers "is this ingredient available?" for technologies
# that check stock before cooking. The core only sees the protocol; the
# pantry below is the in-memory implementation wired in from config.
# -----------------------------------------------------------------------------

from collections.abc import Iterable
from typing import Protocol

from rich.console import Console

from sandwich.domain.models import Ingredient, not_found
from sandwich.domain.result import Result

console = Console()


class IngredientsStorage(Protocol):
    """Protocol for ingredient lookups. Unavailable items come back as a Failure."""

    def get(self, ingredient: Ingredient) -> Result[Ingredient]:
        ...


class PantryStorage:
    """
    Fixed in-memory stock.

    Lookups never raise: a missing ingredient is a
    Failure(IngredientNotFoundError) carrying the requested ingredient.
    """

    def __init__(self, stock: Iterable[Ingredient] = ()) -> None:
        self._stock: frozenset[Ingredient] = frozenset(stock)

    def get(self, ingredient: Ingredient) -> Result[Ingredient]:
        if ingredient not in self._stock:
            console.print(f"[yellow][PANTRY] Out of stock: {ingredient.name}[/yellow]")
            return Result.failure(not_found(ingredient))
        return Result.success(ingredient)

    def __getitem__(self, ingredient: Ingredient) -> Result[Ingredient]:
        return self.get(ingredient)

    def __contains__(self, ingredient: object) -> bool:
        return ingredient in self._stock

    def __len__(self) -> int:
        return len(self._stock)
