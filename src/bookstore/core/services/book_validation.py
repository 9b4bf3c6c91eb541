"""Rule chains used to validate books before they reach the repository.

A chain is an ordered list of ``BookRule``. Rules are evaluated in order
and the first violated rule decides the failure, so the order of the
list is part of the contract:

    null -> id blank -> name blank -> existence
"""

from __future__ import annotations

import unicodedata
from collections.abc import Callable, Iterable
from dataclasses import dataclass

from src.bookstore.core.models import (
    BookFailure,
    BookIdEmptyOrNullFailure,
    BookNameEmptyOrNullFailure,
    BookNullFailure,
    Invalid,
    Valid,
    ValidationOutcome,
)
from src.bookstore.entities.service.book.entity import Book


@dataclass(frozen=True)
class BookRule:
    """A predicate that flags a violation and the failure it reports."""

    violated: Callable[[Book], bool]
    failure: Callable[[], BookFailure]


_CONTROL_WHITESPACE = frozenset("\t\n\x0b\x0c\r\x1c\x1d\x1e\x1f")
_NON_BREAKING_SPACES = frozenset("\u00a0\u2007\u202f")


def _is_whitespace(char: str) -> bool:
    if char in _CONTROL_WHITESPACE:
        return True
    if char in _NON_BREAKING_SPACES:
        return False
    return unicodedata.category(char) in ("Zs", "Zl", "Zp")


def is_blank(value: str | None) -> bool:
    """True for None, empty or whitespace-only strings.

    Non-breaking spaces (U+00A0, U+2007, U+202F) count as content.
    """
    return value is None or all(_is_whitespace(char) for char in value)


def base_rules() -> list[BookRule]:
    """Rules shared by every chain, in evaluation order."""
    return [
        BookRule(lambda book: book is None, BookNullFailure),
        BookRule(lambda book: is_blank(book.id), BookIdEmptyOrNullFailure),
        BookRule(lambda book: is_blank(book.name), BookNameEmptyOrNullFailure),
    ]


def run_rules(book: Book | None, rules: Iterable[BookRule]) -> ValidationOutcome:
    """Evaluate ``rules`` in order and stop at the first violation.

    Args:
        book: Book to validate, possibly None
        rules: Ordered rule chain

    Returns:
        ``Invalid`` with the first violated rule's failure, or ``Valid``.
    """
    for rule in rules:
        if rule.violated(book):
            return Invalid(book=book, reason=rule.failure())
    return Valid(book=book)
