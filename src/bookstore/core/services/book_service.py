"""Book service: validation and orchestration in front of the repository.

Every operation returns a value. Domain failures come back as ``Err``
holding a ``BookFailure`` subclass and are never raised, which keeps the
HTTP layer the only place that decides how a failure is reported.
"""

from __future__ import annotations

from collections.abc import Iterable

from loguru import logger

from src.bookstore.core.models import (
    BookAlreadyExistFailure,
    BookFailure,
    BookIdEmptyOrNullFailure,
    BookNameEmptyOrNullFailure,
    BookNotFoundFailure,
    BookNullFailure,
    BooksRecord,
    Err,
    Ok,
    Result,
    UnsavedBook,
    ValidationOutcome,
)
from src.bookstore.core.services.book_validation import (
    BookRule,
    base_rules,
    is_blank,
    run_rules,
)
from src.bookstore.entities.service.book.entity import Book
from src.bookstore.entities.service.book.repository import BookRepository


class BookService:
    def __init__(self, book_repository: BookRepository) -> None:
        self._book_repository = book_repository
        self._save_rules: list[BookRule] = [
            *base_rules(),
            BookRule(lambda book: self.is_exist(book.id), BookAlreadyExistFailure),
        ]
        self._update_rules: list[BookRule] = [
            *base_rules(),
            BookRule(lambda book: not self.is_exist(book.id), BookNotFoundFailure),
        ]

    # --- single checks ---

    def is_book_null(self, book: Book | None) -> BookNullFailure | None:
        return BookNullFailure() if book is None else None

    def is_book_id_valid(self, book_id: str | None) -> BookIdEmptyOrNullFailure | None:
        return BookIdEmptyOrNullFailure() if is_blank(book_id) else None

    def is_book_name_valid(self, name: str | None) -> BookNameEmptyOrNullFailure | None:
        return BookNameEmptyOrNullFailure() if is_blank(name) else None

    # --- rule chains ---

    def is_valid_book_for_save(self, book: Book | None) -> ValidationOutcome:
        """Null, id, name, then the id must not be stored yet."""
        return run_rules(book, self._save_rules)

    def is_valid_book_for_update(self, book: Book | None) -> ValidationOutcome:
        """Null, id, name, then the id must already be stored."""
        return run_rules(book, self._update_rules)

    # --- operations ---

    def save_one(self, book: Book | None) -> Result[Book, BookFailure]:
        outcome = self.is_valid_book_for_save(book)
        if not outcome.is_valid:
            self._log_rejected("save_one", book, outcome.reason)
            return Err(outcome.reason)

        saved = self._book_repository.save_one(book)
        logger.info("Book saved", book_id=saved.id)
        return Ok(saved)

    def save_all(self, books: Iterable[Book | None]) -> BooksRecord:
        """Save every valid book of a batch in one repository call.

        All books are validated first, against the store as it was before
        the batch, and only then is the valid subset inserted. Two books
        of the same batch sharing a new id are therefore both saved.
        """
        outcomes = [self.is_valid_book_for_save(book) for book in books]

        valid_books = [o.book for o in outcomes if o.is_valid]
        unsaved_books = [
            UnsavedBook(book=o.book, reason=o.reason)
            for o in outcomes
            if not o.is_valid
        ]

        saved_books = self._book_repository.save_all(valid_books)
        logger.info(
            "Books batch saved: {} saved, {} rejected",
            len(saved_books),
            len(unsaved_books),
        )
        return BooksRecord(saved_books=saved_books, unsaved_books=unsaved_books)

    def find_one_by_id(self, book_id: str | None) -> Result[Book, BookFailure]:
        invalid_id = self.is_book_id_valid(book_id)
        if invalid_id is not None:
            return Err(invalid_id)

        book = self._book_repository.find_one_by_id(book_id)
        if book is None:
            return Err(BookNotFoundFailure())
        return Ok(book)

    def find_all(self) -> list[Book]:
        return self._book_repository.find_all()

    def update_one(self, book: Book | None) -> Result[Book, BookFailure]:
        outcome = self.is_valid_book_for_update(book)
        if not outcome.is_valid:
            self._log_rejected("update_one", book, outcome.reason)
            return Err(outcome.reason)

        updated = self._book_repository.update_one(book)
        if updated is None:
            # Existence was checked above; the store changed in between.
            logger.warning("Book vanished before update", book_id=book.id)
            return Err(BookFailure())

        logger.info("Book updated", book_id=updated.id)
        return Ok(updated)

    def delete_one_by_id(self, book_id: str | None) -> Result[Book, BookFailure]:
        """Remove a book by id.

        An invalid id and an unknown id both leave the store untouched;
        only a valid, stored id removes the book.
        """
        invalid_id = self.is_book_id_valid(book_id)
        if invalid_id is not None:
            self._log_rejected("delete_one_by_id", None, invalid_id)
            return Err(invalid_id)

        deleted = self._book_repository.delete_one_by_id(book_id)
        if deleted is None:
            failure = BookNotFoundFailure()
            logger.bind(book_id=book_id, failure=failure.kind).info(
                "Rejected delete_one_by_id"
            )
            return Err(failure)

        logger.info("Book deleted", book_id=deleted.id)
        return Ok(deleted)

    def delete_all(self) -> None:
        self._book_repository.delete_all()
        logger.info("All books deleted")

    def is_exist(self, book_id: str | None) -> bool:
        return self._book_repository.is_exist(book_id)

    def _log_rejected(
        self, operation: str, book: Book | None, failure: BookFailure | None
    ) -> None:
        logger.bind(
            book_id=book.id if book is not None else None,
            failure=failure.kind if failure is not None else None,
        ).info("Rejected {}", operation)
