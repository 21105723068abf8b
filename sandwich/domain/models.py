# Copyright 2026 Pramod Kumar Voola
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

# -----------------------------------------------------------------------------
# DOMAIN MODELS - SANDWICH VALUE OBJECTS
# -----------------------------------------------------------------------------
# Ingredients, the in-progress Body and the finished Ready sandwich.
#
# Every model is frozen. The builders are the only sanctioned way in:
# build() checks the invariants and raises ConstructionError, so a live
# SandwichBody or SandwichReady is always valid.
# -----------------------------------------------------------------------------

from dataclasses import dataclass, field
from enum import Enum

from pydantic import BaseModel, Field

from sandwich.domain.result import Result


class Bread(str, Enum):
    """Breads a sandwich can start or finish with."""

    BAGUETTE = "baguette"
    TOAST = "toast"


class Component(str, Enum):
    """Everything that goes between the breads."""

    SALT = "salt"
    TOMATO = "tomato"
    CHEESE = "cheese"


# Closed union: an ingredient is either a bread or a component.
Ingredient = Bread | Component


class ConstructionError(ValueError):
    """
    Raised when a builder is asked to build an invalid value object.

    Carries the name of the field that was missing or violated.
    """

    def __init__(self, message: str, field: str) -> None:
        super().__init__(message)
        self.field = field


class IngredientsStorageError(Exception):
    """Base for ingredient storage failures. Travels inside a Failure."""

    def __init__(self, ingredient: Ingredient, message: str) -> None:
        super().__init__(message)
        self.ingredient = ingredient


class IngredientNotFoundError(IngredientsStorageError):
    """The requested ingredient is not available."""

    def __init__(self, ingredient: Ingredient) -> None:
        super().__init__(ingredient, f"Ingredient {ingredient.name} not found!")


def not_found(ingredient: Ingredient) -> IngredientNotFoundError:
    return IngredientNotFoundError(ingredient)


class SandwichBody(BaseModel):
    """
    A sandwich under construction.

    Fields:
    - bottom: The bread everything sits on
    - components: Fillings in the order they were added (never empty)

    Adding a component returns a new body; the original stays untouched.
    """

    bottom: Bread = Field(..., description="Bottom bread")
    components: tuple[Component, ...] = Field(
        ..., min_length=1, description="Fillings in insertion order"
    )

    class Config:
        """Pydantic configuration for immutable values."""

        frozen = True

    def __add__(self, component: Component) -> "SandwichBody":
        return self.to_builder().add_component(component).build()

    def to_builder(self) -> "SandwichBodyBuilder":
        """Builder pre-filled with this body's fields."""
        return SandwichBodyBuilder(bottom=self.bottom, components=list(self.components))

    def __str__(self) -> str:
        names = ", ".join(c.name for c in self.components)
        return f"SandwichBody(bottom={self.bottom.name}, components=[{names}])"


class SandwichReady(BaseModel):
    """
    A finished sandwich. Terminal: nothing can be done to it any more.

    Holds the body by composition and forwards its accessors, so
    `ready.bottom` and `ready.components` read through to `ready.body`.
    """

    body: SandwichBody = Field(..., description="The completed body")
    top: Bread | None = Field(None, description="Optional top bread")

    class Config:
        """Pydantic configuration for immutable values."""

        frozen = True

    @property
    def bottom(self) -> Bread:
        return self.body.bottom

    @property
    def components(self) -> tuple[Component, ...]:
        return self.body.components

    def __str__(self) -> str:
        top = self.top.name if self.top is not None else None
        return f"SandwichReady(body={self.body}, top={top})"


@dataclass
class SandwichBodyBuilder:
    """Mutable staging area for a SandwichBody."""

    bottom: Bread | None = None
    components: list[Component] = field(default_factory=list)

    def with_bottom(self, bottom: Bread) -> "SandwichBodyBuilder":
        self.bottom = bottom
        return self

    def add_component(self, component: Component) -> "SandwichBodyBuilder":
        self.components.append(component)
        return self

    def build(self) -> SandwichBody:
        """
        Validate and freeze the staged fields.

        Raises:
            ConstructionError: If `bottom` is unset or `components` is empty.
        """
        if self.bottom is None:
            raise ConstructionError("`bottom` must be initialized!", field="bottom")
        if not self.components:
            raise ConstructionError("`components` must not be empty!", field="components")

        return SandwichBody(bottom=self.bottom, components=tuple(self.components))


@dataclass
class SandwichReadyBuilder:
    """Mutable staging area for a SandwichReady."""

    body: SandwichBody | None = None
    top: Bread | None = None

    def with_body(self, body: SandwichBody) -> "SandwichReadyBuilder":
        self.body = body
        return self

    def with_top(self, top: Bread | None) -> "SandwichReadyBuilder":
        self.top = top
        return self

    def build(self) -> SandwichReady:
        """
        Raises:
            ConstructionError: If `body` is unset.
        """
        if self.body is None:
            raise ConstructionError("`body` must be initialized!", field="body")

        return SandwichReady(body=self.body, top=self.top)


def sandwich_body(
    bottom: Bread | None = None, components: list[Component] | tuple[Component, ...] = ()
) -> Result[SandwichBody]:
    """Build a body and wrap it in a Success. Invalid input raises at once."""
    builder = SandwichBodyBuilder(bottom=bottom, components=list(components))
    return Result.success(builder.build())


def sandwich_ready(body: SandwichBody | None = None, top: Bread | None = None) -> SandwichReady:
    return SandwichReadyBuilder(body=body, top=top).build()
