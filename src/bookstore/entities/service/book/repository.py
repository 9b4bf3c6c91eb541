"""Book repository interface and in-memory implementation."""

from __future__ import annotations

import threading
from abc import ABC, abstractmethod
from collections.abc import Iterable

from src.bookstore.entities.service.book.entity import Book


class BookRepository(ABC):
    """Abstract interface for book storage backends.

    Implementations do not enforce id uniqueness; that rule belongs to
    the service layer that sits in front of the repository.
    """

    @abstractmethod
    def save_one(self, book: Book) -> Book:
        """Append a book and return it unchanged."""

    @abstractmethod
    def save_all(self, books: Iterable[Book]) -> list[Book]:
        """Append every book and return them unchanged."""

    @abstractmethod
    def find_one_by_id(self, book_id: str | None) -> Book | None:
        """Return the first book with the given id, or None."""

    @abstractmethod
    def find_all(self) -> list[Book]:
        """Return the stored books in insertion order."""

    @abstractmethod
    def update_one(self, book: Book) -> Book | None:
        """Replace every book sharing ``book.id`` with ``book``.

        Returns:
            The new book when a previous one existed, otherwise None
            (and nothing is inserted).
        """

    @abstractmethod
    def delete_one_by_id(self, book_id: str | None) -> Book | None:
        """Remove every book with the given id.

        Returns:
            The first removed book, or None when the id is not stored.
        """

    @abstractmethod
    def delete_all(self) -> None:
        """Remove every book."""

    @abstractmethod
    def is_exist(self, book_id: str | None) -> bool:
        """Check whether a book with the given id is stored."""

    @abstractmethod
    def count(self) -> int:
        """Number of stored books."""


class InMemoryBookRepository(BookRepository):
    """List-backed repository.

    Every operation holds one re-entrant lock so that the thread pool
    FastAPI runs sync endpoints on cannot interleave mutations.
    """

    def __init__(self, books: Iterable[Book] | None = None) -> None:
        self._books: list[Book] = list(books or [])
        self._lock = threading.RLock()

    def save_one(self, book: Book) -> Book:
        with self._lock:
            self._books.append(book)
        return book

    def save_all(self, books: Iterable[Book]) -> list[Book]:
        books = list(books)
        with self._lock:
            self._books.extend(books)
        return books

    def find_one_by_id(self, book_id: str | None) -> Book | None:
        with self._lock:
            return next((b for b in self._books if b.id == book_id), None)

    def find_all(self) -> list[Book]:
        with self._lock:
            return self._books

    def update_one(self, book: Book) -> Book | None:
        with self._lock:
            previous = self.delete_one_by_id(book.id)
            if previous is None:
                return None
            self._books.append(book)
            return book

    def delete_one_by_id(self, book_id: str | None) -> Book | None:
        with self._lock:
            found = self.find_one_by_id(book_id)
            if found is not None:
                self._books[:] = [b for b in self._books if b.id != book_id]
            return found

    def delete_all(self) -> None:
        with self._lock:
            self._books.clear()

    def is_exist(self, book_id: str | None) -> bool:
        with self._lock:
            return any(b.id == book_id for b in self._books)

    def count(self) -> int:
        with self._lock:
            return len(self._books)
