# -----------------------------------------------------------------------------
# RESULT - TWO-VARIANT OUTCOME
# -----------------------------------------------------------------------------
# Success carries a value, Failure carries an error. Domain failures travel
# through the recipe as values and are never raised by the pipeline itself.
#
# Chaining:
# - next:   skips the operation once a step has failed
# - finish: always calls the terminal operation so it can re-type the
#           failure as Result[SandwichReady]
# -----------------------------------------------------------------------------

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

T = TypeVar("T")
R = TypeVar("R")


class Result(Generic[T]):
    """Base of Success and Failure. Use the factories, not the class itself."""

    @staticmethod
    def success(value: T) -> "Result[T]":
        return Success(value)

    @staticmethod
    def failure(error: Exception) -> "Result[Any]":
        return Failure(error)

    @property
    def is_success(self) -> bool:
        return isinstance(self, Success)

    @property
    def is_failure(self) -> bool:
        return isinstance(self, Failure)

    def get_or_none(self) -> T | None:
        raise NotImplementedError

    def get_or_raise(self) -> T:
        raise NotImplementedError

    def exception_or_none(self) -> Exception | None:
        raise NotImplementedError

    def map_catching(self, transform: Callable[[T], R]) -> "Result[R]":
        """Apply transform to the value; a ValueError it raises becomes a Failure."""
        raise NotImplementedError

    def fold(self, on_success: Callable[[T], R], on_failure: Callable[[Exception], R]) -> R:
        raise NotImplementedError

    def next(self, op: Callable[["Result[T]"], "Result[T]"]) -> "Result[T]":
        """
        Chain an intermediate step.

        A failure is returned unchanged and `op` is never called.
        """
        if self.is_failure:
            return self
        return op(self)

    def finish(self, op: Callable[["Result[T]"], "Result[R]"]) -> "Result[R]":
        """
        Chain the terminal step.

        Always calls `op`, even after a failure: the terminal operation is
        responsible for passing the failure through as its own result type.
        """
        return op(self)

    def __add__(self, component: Any) -> "Result[T]":
        return self.map_catching(lambda body: body + component)


@dataclass(frozen=True)
class Success(Result[T]):
    value: T

    def get_or_none(self) -> T | None:
        return self.value

    def get_or_raise(self) -> T:
        return self.value

    def exception_or_none(self) -> Exception | None:
        return None

    def map_catching(self, transform: Callable[[T], R]) -> Result[R]:
        try:
            return Success(transform(self.value))
        except ValueError as e:
            return Failure(e)

    def fold(self, on_success: Callable[[T], R], on_failure: Callable[[Exception], R]) -> R:
        return on_success(self.value)

    def __str__(self) -> str:
        return f"Success({self.value})"


@dataclass(frozen=True)
class Failure(Result[Any]):
    error: Exception

    def get_or_none(self) -> None:
        return None

    def get_or_raise(self) -> Any:
        raise self.error

    def exception_or_none(self) -> Exception | None:
        return self.error

    def map_catching(self, transform: Callable[[Any], R]) -> Result[R]:
        # Same object: the first failure is what the caller sees.
        return self

    def fold(self, on_success: Callable[[Any], R], on_failure: Callable[[Exception], R]) -> R:
        return on_failure(self.error)

    def __str__(self) -> str:
        return f"Failure({type(self.error).__name__}: {self.error})"
