# -----------------------------------------------------------------------------
# INTERPRETERS - CONCRETE TECHNOLOGIES
# -----------------------------------------------------------------------------
# Responsibility: Binds the three operation contracts to executable logic.
#
# - real_interpreter:    cooks and logs every processed step
# - crazy_interpreter:   cooks the same sandwich without side effects
# - stocked_interpreter: checks an IngredientsStorage before using anything
# - faulty_interpreter:  injects a NotFound failure at a chosen step
#
# A recipe gives structurally equal sandwiches under real and crazy.
# -----------------------------------------------------------------------------

from rich.console import Console

from sandwich.core.technology import Op, SandwichTechnology, sandwich_technology
from sandwich.domain.models import (
    Bread,
    Component,
    SandwichBody,
    SandwichReady,
    not_found,
    sandwich_body,
    sandwich_ready,
)
from sandwich.domain.result import Result
from sandwich.infra.storage import IngredientsStorage

console = Console()


def _start(bread: Bread, component: Component) -> Result[SandwichBody]:
    return sandwich_body(bottom=bread, components=[component])


def _add(body: Result[SandwichBody], component: Component) -> Result[SandwichBody]:
    return body + component


def _finish(body: Result[SandwichBody], top: Bread | None) -> Result[SandwichReady]:
    return body.map_catching(lambda b: sandwich_ready(body=b, top=top))


def real_interpreter() -> SandwichTechnology:
    """The normal interpretation: cook and report each step."""

    def start(bread: Bread, component: Component) -> Result[SandwichBody]:
        result = _start(bread, component)
        console.print(f"[green][KITCHEN] {Op.START_NEW_SANDWICH.label} processed.[/green]")
        return result

    def add(body: Result[SandwichBody], component: Component) -> Result[SandwichBody]:
        result = _add(body, component)
        console.print(f"[green][KITCHEN] {Op.ADD_COMPONENT.label} processed.[/green]")
        return result

    def finish(body: Result[SandwichBody], top: Bread | None) -> Result[SandwichReady]:
        result = _finish(body, top)
        if result.is_failure:
            console.print(
                f"[red][KITCHEN] {Op.FINISH_SANDWICH.label} passed failure through.[/red]"
            )
        else:
            console.print(f"[green][KITCHEN] {Op.FINISH_SANDWICH.label} processed.[/green]")
        return result

    return sandwich_technology(start_new_sandwich=start, add_component=add, finish_sandwich=finish)


def crazy_interpreter() -> SandwichTechnology:
    """Same sandwich, no output."""
    return sandwich_technology(
        start_new_sandwich=_start,
        add_component=_add,
        finish_sandwich=_finish,
    )


def stocked_interpreter(storage: IngredientsStorage) -> SandwichTechnology:
    """
    Check every ingredient against storage before it goes on the sandwich.

    Args:
        storage: Injected lookup; a missing ingredient ends the recipe with
            Failure(IngredientNotFoundError).
    """

    def start(bread: Bread, component: Component) -> Result[SandwichBody]:
        for ingredient in (bread, component):
            found = storage.get(ingredient)
            if found.is_failure:
                return found
        return _start(bread, component)

    def add(body: Result[SandwichBody], component: Component) -> Result[SandwichBody]:
        if body.is_failure:
            return body
        found = storage.get(component)
        if found.is_failure:
            return found
        return _add(body, component)

    def finish(body: Result[SandwichBody], top: Bread | None) -> Result[SandwichReady]:
        if body.is_success and top is not None:
            found = storage.get(top)
            if found.is_failure:
                return found
        return _finish(body, top)

    return sandwich_technology(start_new_sandwich=start, add_component=add, finish_sandwich=finish)


def faulty_interpreter(fail_at: Op = Op.ADD_COMPONENT) -> SandwichTechnology:
    """
    Cook normally except at `fail_at`, which reports a missing ingredient.

    The reported ingredient is the one the step handles: the bottom bread,
    the component, or the top bread (TOAST when there is no top).
    """

    def fail(op: Op, ingredient: Bread | Component) -> Result:
        console.print(f"[red][KITCHEN] {op.label} processed with error.[/red]")
        return Result.failure(not_found(ingredient))

    def start(bread: Bread, component: Component) -> Result[SandwichBody]:
        if fail_at is Op.START_NEW_SANDWICH:
            return fail(fail_at, bread)
        return _start(bread, component)

    def add(body: Result[SandwichBody], component: Component) -> Result[SandwichBody]:
        if body.is_failure:
            return body
        if fail_at is Op.ADD_COMPONENT:
            return fail(fail_at, component)
        return _add(body, component)

    def finish(body: Result[SandwichBody], top: Bread | None) -> Result[SandwichReady]:
        if body.is_success and fail_at is Op.FINISH_SANDWICH:
            return fail(fail_at, top if top is not None else Bread.TOAST)
        return _finish(body, top)

    return sandwich_technology(start_new_sandwich=start, add_component=add, finish_sandwich=finish)
