# -----------------------------------------------------------------------------
# CORE LAYER
# -----------------------------------------------------------------------------
# The business logic of the sandwich kitchen:
# - SandwichTechnology: The three operation contracts, bound
# - Interpreters: Real, crazy, stocked and faulty technologies
# - RecipeBook: Scripts written against the contracts only
# - Kitchen: Config, selection and execution
# -----------------------------------------------------------------------------

from .technology import Op, SandwichTechnology, SandwichTechnologyBuilder, sandwich_technology
from .interpreters import crazy_interpreter, faulty_interpreter, real_interpreter, stocked_interpreter
from .recipes import Recipe, RecipeBook, RecipeNotFoundError, club_recipe, my_recipe, select_recipe
from .kitchen import Kitchen, KitchenConfig, KitchenConfigError, build_technology, cook, load_config

__all__ = [
    "Op", "SandwichTechnology", "SandwichTechnologyBuilder", "sandwich_technology",
    "real_interpreter", "crazy_interpreter", "stocked_interpreter", "faulty_interpreter",
    "Recipe", "RecipeBook", "RecipeNotFoundError", "my_recipe", "club_recipe", "select_recipe",
    "Kitchen", "KitchenConfig", "KitchenConfigError", "build_technology", "cook", "load_config",
]
