# -----------------------------------------------------------------------------
# SANDWICH TECHNOLOGY - OPERATION CONTRACTS
# -----------------------------------------------------------------------------
# Responsibility: Names the only three legal transitions between sandwich
# states and bundles one implementation of each into a SandwichTechnology.
#
# Recipes are written against these contracts only. Which closures sit
# behind them (logging, silent, fault-injecting, pantry-checked) is decided
# by the interpreter that assembled the technology.
# -----------------------------------------------------------------------------

from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum

from pydantic import BaseModel, Field

from sandwich.domain.models import (
    Bread,
    Component,
    ConstructionError,
    SandwichBody,
    SandwichReady,
)
from sandwich.domain.result import Result


class Op(str, Enum):
    """The closed set of technological operations."""

    START_NEW_SANDWICH = "start_new_sandwich"
    ADD_COMPONENT = "add_component"
    FINISH_SANDWICH = "finish_sandwich"

    @property
    def label(self) -> str:
        """Log label, e.g. 'Op.AddComponent'."""
        return "Op." + "".join(part.capitalize() for part in self.value.split("_"))


# (bottom, first component) -> initial body
StartNewSandwich = Callable[[Bread, Component], Result[SandwichBody]]

# (current body, component) -> extended body; passes a failure through
AddComponent = Callable[[Result[SandwichBody], Component], Result[SandwichBody]]

# (current body, optional top) -> ready sandwich; passes a failure through
FinishSandwich = Callable[[Result[SandwichBody], Bread | None], Result[SandwichReady]]


class SandwichTechnology(BaseModel):
    """
    A bound interpreter: one implementation per operation contract.

    Immutable once built; swap technologies by passing a different instance.
    """

    start_new_sandwich: StartNewSandwich = Field(..., description="Op.StartNewSandwich")
    add_component: AddComponent = Field(..., description="Op.AddComponent")
    finish_sandwich: FinishSandwich = Field(..., description="Op.FinishSandwich")

    class Config:
        """Pydantic configuration for immutable values."""

        frozen = True


@dataclass
class SandwichTechnologyBuilder:
    """Staging area for a SandwichTechnology; build() needs all three bindings."""

    start_new_sandwich: StartNewSandwich | None = None
    add_component: AddComponent | None = None
    finish_sandwich: FinishSandwich | None = None

    def build(self) -> SandwichTechnology:
        """
        Raises:
            ConstructionError: Naming the first operation left unbound.
        """
        for op in Op:
            if getattr(self, op.value) is None:
                raise ConstructionError(f"`{op.value}` must be initialized!", field=op.value)

        return SandwichTechnology(
            start_new_sandwich=self.start_new_sandwich,
            add_component=self.add_component,
            finish_sandwich=self.finish_sandwich,
        )


def sandwich_technology(
    start_new_sandwich: StartNewSandwich | None = None,
    add_component: AddComponent | None = None,
    finish_sandwich: FinishSandwich | None = None,
) -> SandwichTechnology:
    """Validating constructor for a technology."""
    return SandwichTechnologyBuilder(
        start_new_sandwich=start_new_sandwich,
        add_component=add_component,
        finish_sandwich=finish_sandwich,
    ).build()
