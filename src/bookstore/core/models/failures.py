"""Typed failures returned by the book service.

Failures are values, not exceptions: the service returns them inside an
``Err`` and only the HTTP layer turns them into error responses.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class BookFailure:
    """Generic book failure, also used for unexpected branches."""

    message: str = "Unknown book exception!"

    @property
    def kind(self) -> str:
        return type(self).__name__


@dataclass(frozen=True)
class BookNullFailure(BookFailure):
    """The book reference itself is missing."""

    message: str = "Book is null"


@dataclass(frozen=True)
class BookIdEmptyOrNullFailure(BookFailure):
    """The id is missing or only whitespace."""

    message: str = "Book id is empty or null"


@dataclass(frozen=True)
class BookNameEmptyOrNullFailure(BookFailure):
    """The name is missing or only whitespace."""

    message: str = "Book name is empty or null"


@dataclass(frozen=True)
class BookAlreadyExistFailure(BookFailure):
    """A save was attempted with an id that is already stored."""

    message: str = "Book already exist!"


@dataclass(frozen=True)
class BookNotFoundFailure(BookFailure):
    """The referenced id is not stored."""

    message: str = "Book not found!"
