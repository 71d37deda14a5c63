"""Result primitives for value-based error propagation.

Store and service boundaries return ``Success`` or ``Failure`` instead of
raising, so callers branch explicitly on the outcome.  Composition is
short-circuiting: ``and_then`` on a ``Failure`` returns it unchanged.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Generic, TypeVar, Union

T = TypeVar("T")
E = TypeVar("E")
U = TypeVar("U")


class UnwrapFailedError(Exception):
    """``unwrap()`` was called on a ``Failure``."""

    def __init__(self, failure: Failure[Any]) -> None:
        super().__init__(f"Called unwrap() on {failure!r}")
        self.failure = failure


@dataclass(frozen=True)
class Success(Generic[T]):
    """Successful outcome, optionally carrying a value."""

    value: T = None  # type: ignore[assignment]

    @property
    def is_success(self) -> bool:
        return True

    @property
    def is_failure(self) -> bool:
        return False

    def unwrap(self) -> T:
        return self.value

    def and_then(self, fn: Callable[[T], Result[U, E]]) -> Result[U, E]:
        return fn(self.value)


@dataclass(frozen=True)
class Failure(Generic[E]):
    """Failed outcome carrying the error payload."""

    error: E

    @property
    def is_success(self) -> bool:
        return False

    @property
    def is_failure(self) -> bool:
        return True

    def unwrap(self) -> Any:
        raise UnwrapFailedError(self)

    def and_then(self, fn: Callable[[Any], Any]) -> Failure[E]:
        return self


Result = Union[Success[T], Failure[E]]
