"""Two-variant result types.

``Ok``/``Err`` carry the outcome of a service operation. ``Valid``/``Invalid``
carry the outcome of running a validation rule chain over one book.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Generic, TypeVar, Union

from src.bookstore.core.models.failures import BookFailure
from src.bookstore.entities.service.book.entity import Book

T = TypeVar("T")
E = TypeVar("E")
R = TypeVar("R")


@dataclass(frozen=True)
class Ok(Generic[T]):
    """Successful outcome holding a value."""

    value: T

    def is_ok(self) -> bool:
        return True

    def is_err(self) -> bool:
        return False

    def fold(self, on_err: Callable[[E], R], on_ok: Callable[[T], R]) -> R:
        return on_ok(self.value)


@dataclass(frozen=True)
class Err(Generic[E]):
    """Failed outcome holding the failure."""

    error: E

    def is_ok(self) -> bool:
        return False

    def is_err(self) -> bool:
        return True

    def fold(self, on_err: Callable[[E], R], on_ok: Callable[[T], R]) -> R:
        return on_err(self.error)


Result = Union[Ok[T], Err[E]]


@dataclass(frozen=True)
class Valid:
    """A book that passed every rule of a chain."""

    book: Book | None

    @property
    def is_valid(self) -> bool:
        return True

    @property
    def reason(self) -> BookFailure | None:
        return None


@dataclass(frozen=True)
class Invalid:
    """A book rejected by a rule, with the first rule's failure."""

    book: Book | None
    reason: BookFailure

    @property
    def is_valid(self) -> bool:
        return False


ValidationOutcome = Union[Valid, Invalid]
