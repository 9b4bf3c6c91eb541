"""Batch save records."""

from __future__ import annotations

from dataclasses import dataclass, field

from src.bookstore.core.models.failures import BookFailure
from src.bookstore.entities.service.book.entity import Book


@dataclass(frozen=True)
class UnsavedBook:
    """A book left out of a batch save, with the reason it was rejected."""

    book: Book | None
    reason: BookFailure


@dataclass(frozen=True)
class BooksRecord:
    """Outcome of a batch save: what went in and what was rejected."""

    saved_books: list[Book] = field(default_factory=list)
    unsaved_books: list[UnsavedBook] = field(default_factory=list)
