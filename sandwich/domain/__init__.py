# -----------------------------------------------------------------------------
# DOMAIN LAYER
# -----------------------------------------------------------------------------
# Contains the sandwich value objects (Pydantic models) and the Result type
# every operation speaks. Nothing here knows which technology cooks it.
# -----------------------------------------------------------------------------

from .models import (
    Bread,
    Component,
    ConstructionError,
    Ingredient,
    IngredientNotFoundError,
    IngredientsStorageError,
    SandwichBody,
    SandwichBodyBuilder,
    SandwichReady,
    SandwichReadyBuilder,
    not_found,
    sandwich_body,
    sandwich_ready,
)
from .result import Failure, Result, Success

__all__ = [
    "Bread", "Component", "Ingredient",
    "ConstructionError", "IngredientsStorageError", "IngredientNotFoundError", "not_found",
    "SandwichBody", "SandwichBodyBuilder", "sandwich_body",
    "SandwichReady", "SandwichReadyBuilder", "sandwich_ready",
    "Result", "Success", "Failure",
]
