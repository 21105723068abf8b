# -----------------------------------------------------------------------------
# THE KITCHEN - SELECTION & EXECUTION
# -----------------------------------------------------------------------------
# Responsibility: Loads the kitchen configuration, assembles the chosen
# technology, picks a recipe from the book and runs it. The outcome is a
# single Result[SandwichReady] for the caller to inspect.
# -----------------------------------------------------------------------------

import os
from collections.abc import Callable
from pathlib import Path

import yaml
from pydantic import BaseModel
from rich.console import Console

from sandwich.core.interpreters import (
    crazy_interpreter,
    faulty_interpreter,
    real_interpreter,
    stocked_interpreter,
)
from sandwich.core.recipes import Recipe, RecipeBook, default_book, select_recipe
from sandwich.core.technology import Op, SandwichTechnology
from sandwich.domain.models import Bread, Component, Ingredient, SandwichReady
from sandwich.domain.result import Result
from sandwich.infra.storage import PantryStorage

console = Console()

# Config file location
CONFIG_PATH = Path(__file__).parent.parent.parent / "kitchen.yaml"


class KitchenConfig(BaseModel):
    """
    Pydantic model for the kitchen configuration.

    Loaded from kitchen.yaml at startup.
    """

    interpreter: str = "real"
    recipe: str | None = None
    pantry: list[Ingredient] = [*Bread, *Component]
    fail_at: Op = Op.ADD_COMPONENT


class KitchenConfigError(ValueError):
    """Raised when the configuration names something the kitchen cannot build."""

    def __init__(self, message: str, key: str) -> None:
        super().__init__(message)
        self.key = key


INTERPRETERS: dict[str, Callable[[KitchenConfig], SandwichTechnology]] = {
    "real": lambda config: real_interpreter(),
    "crazy": lambda config: crazy_interpreter(),
    "stocked": lambda config: stocked_interpreter(PantryStorage(config.pantry)),
    "faulty": lambda config: faulty_interpreter(config.fail_at),
}


def load_config(path: Path | None = None) -> KitchenConfig:
    """
    Load the kitchen configuration.

    Path resolution: explicit argument, then SANDWICH_CONFIG, then
    kitchen.yaml at the project root. SANDWICH_INTERPRETER and
    SANDWICH_RECIPE override the file.
    """
    if path is None:
        env_path = os.getenv("SANDWICH_CONFIG")
        path = Path(env_path) if env_path else CONFIG_PATH

    if path.exists():
        with open(path) as f:
            data = yaml.safe_load(f) or {}
    else:
        console.print("[yellow][KITCHEN] Config file not found, using defaults[/yellow]")
        data = {}

    if os.getenv("SANDWICH_INTERPRETER"):
        data["interpreter"] = os.getenv("SANDWICH_INTERPRETER")
    if os.getenv("SANDWICH_RECIPE"):
        data["recipe"] = os.getenv("SANDWICH_RECIPE")

    return KitchenConfig(**data)


def build_technology(config: KitchenConfig) -> SandwichTechnology:
    """
    Raises:
        KitchenConfigError: If the interpreter name is unknown.
    """
    factory = INTERPRETERS.get(config.interpreter)
    if factory is None:
        console.print(f"[red][KITCHEN] Unknown interpreter: {config.interpreter}[/red]")
        raise KitchenConfigError(
            f"Unknown interpreter '{config.interpreter}'. Known: {sorted(INTERPRETERS)}",
            key="interpreter",
        )
    return factory(config)


def cook(recipe: Recipe, technology: SandwichTechnology) -> Result[SandwichReady]:
    """Run one recipe on one technology."""
    return recipe(technology)


class Kitchen:
    """Holds a recipe book and the technology to cook with."""

    def __init__(self, book: RecipeBook | None = None, technology: SandwichTechnology | None = None) -> None:
        self._book = default_book() if book is None else book
        self._technology = real_interpreter() if technology is None else technology

    @classmethod
    def from_config(cls, config: KitchenConfig, book: RecipeBook | None = None) -> "Kitchen":
        return cls(book=book, technology=build_technology(config))

    def cook(self, name: str | None = None) -> Result[SandwichReady]:
        """
        Select a recipe (first one when `name` is None) and run it.

        Raises:
            RecipeNotFoundError: If nothing can be selected.
        """
        recipe = select_recipe(self._book, name)
        console.print(f"[cyan][KITCHEN] Cooking: {name or self._book.list_recipes()[0]}[/cyan]")
        result = cook(recipe, self._technology)

        if result.is_success:
            console.print("[green][KITCHEN] Sandwich ready[/green]")
        else:
            console.print(f"[red][KITCHEN] Sandwich failed: {result.exception_or_none()}[/red]")
        return result
