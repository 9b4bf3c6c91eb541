"""Wire schemas that only exist at the HTTP boundary."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from src.bookstore.core.models import BooksRecord
from src.bookstore.entities.service.book.entity import Book


class UnsavedBookView(BaseModel):
    """A rejected book with its failure flattened to the message."""

    book: Book | None
    reason: str


class BooksRecordView(BaseModel):
    """Body of ``POST /books/savebooks``."""

    model_config = ConfigDict(populate_by_name=True)

    saved_books: list[Book] = Field(default_factory=list, alias="savedBooks")
    unsaved_books: list[UnsavedBookView] = Field(
        default_factory=list, alias="unsavedBooks"
    )

    @classmethod
    def from_record(cls, record: BooksRecord) -> BooksRecordView:
        return cls(
            saved_books=list(record.saved_books),
            unsaved_books=[
                UnsavedBookView(book=unsaved.book, reason=unsaved.reason.message)
                for unsaved in record.unsaved_books
            ],
        )
