"""
Result type for explicit error handling.

Every operation that can fail on the host or on the accelerator returns a
``Result[T, E]`` instead of raising, so callers driving a collection of
reactions decide for themselves whether a failure halts the run.

Usage:
    >>> match reaction.react(queue, buffer):
    ...     case Success(transformed):
    ...         print(transformed)
    ...     case Failure(error):
    ...         print(f"{error.kind}: {error}")
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Generic, NoReturn, TypeVar


T = TypeVar("T")
E = TypeVar("E")
U = TypeVar("U")
F = TypeVar("F")


@dataclass(frozen=True)
class Success(Generic[T]):
    """Represents a successful result containing a value of type T."""

    value: T

    def is_success(self) -> bool:
        return True

    def is_failure(self) -> bool:
        return False

    def unwrap(self) -> T:
        """Unwrap the success value. Safe to call on Success."""
        return self.value

    def map(self, f: Callable[[T], U]) -> Result[U, E]:
        """Map the success value through function f."""
        return Success(f(self.value))

    def map_error(self, f: Callable[[E], F]) -> Result[T, F]:
        """No-op on Success."""
        result: Result[T, F] = Success(self.value)
        return result

    def and_then(self, f: Callable[[T], Result[U, E]]) -> Result[U, E]:
        """Monadic bind: chain operations that return Result."""
        return f(self.value)


@dataclass(frozen=True)
class Failure(Generic[E]):
    """Represents a failed result containing an error of type E."""

    error: E

    def is_success(self) -> bool:
        return False

    def is_failure(self) -> bool:
        return True

    def unwrap(self) -> NoReturn:
        """
        Unwrap the success value.

        Raises:
            RuntimeError: Always, since Failure has no value.
        """
        raise RuntimeError(f"Called unwrap() on Failure: {self.error}")

    def map(self, f: Callable[[T], U]) -> Result[U, E]:
        """No-op on Failure."""
        result: Result[U, E] = Failure(self.error)
        return result

    def map_error(self, f: Callable[[E], F]) -> Result[T, F]:
        """Map the error value through function f."""
        return Failure(f(self.error))

    def and_then(self, f: Callable[[T], Result[U, E]]) -> Result[U, E]:
        """No-op on Failure."""
        result: Result[U, E] = Failure(self.error)
        return result


Result = Success[T] | Failure[E]


def fold_results(
    items: list[T],
    f: Callable[[U, T], Result[U, E]],
    initial: U,
) -> Result[U, E]:
    """
    Fold ``items`` through ``f``, stopping at the first Failure.

    Example:
        >>> def add_if_positive(acc: int, x: int) -> Result[int, str]:
        ...     return Success(acc + x) if x > 0 else Failure("negative")
        >>> fold_results([1, 2, 3], add_if_positive, 0)
        Success(value=6)
        >>> fold_results([1, -2, 3], add_if_positive, 0)
        Failure(error='negative')
    """
    current: Result[U, E] = Success(initial)
    for item in items:
        match current:
            case Failure():
                return current
            case Success(value):
                current = f(value, item)
    return current
