"""Book API router with CRUD operations."""

from fastapi import APIRouter, Body, Depends
from starlette.responses import Response

from src.bookstore.api.http.deps import get_book_service, get_books_config
from src.bookstore.api.http.responses import ok_response, result_to_response
from src.bookstore.api.http.schemas import BooksRecordView
from src.bookstore.core.services import BookService
from src.bookstore.entities.service.book import Book
from src.bookstore.runtime.config.config_data import BooksConfig

router = APIRouter()


@router.get("/{book_id}", response_model=Book)
def get_book(
    book_id: str,
    book_service: BookService = Depends(get_book_service),
    books_config: BooksConfig = Depends(get_books_config),
) -> Response:
    """Get a book by ID."""
    return result_to_response(book_service.find_one_by_id(book_id), books_config)


@router.get("", response_model=list[Book])
def list_books(
    book_service: BookService = Depends(get_book_service),
) -> list[Book]:
    """List all books in insertion order."""
    return list(book_service.find_all())


@router.post("/save", response_model=Book)
def save_book(
    book: Book | None = Body(default=None),
    book_service: BookService = Depends(get_book_service),
    books_config: BooksConfig = Depends(get_books_config),
) -> Response:
    """Save one book."""
    return result_to_response(book_service.save_one(book), books_config)


@router.post("/savebooks", response_model=BooksRecordView)
def save_books(
    books: list[Book | None] = Body(...),
    book_service: BookService = Depends(get_book_service),
) -> BooksRecordView:
    """Save a batch; invalid books are reported back instead of failing the call."""
    return BooksRecordView.from_record(book_service.save_all(books))


@router.post("/update", response_model=Book)
def update_book(
    book: Book | None = Body(default=None),
    book_service: BookService = Depends(get_book_service),
    books_config: BooksConfig = Depends(get_books_config),
) -> Response:
    """Replace the book sharing the given ID."""
    return result_to_response(book_service.update_one(book), books_config)


@router.delete("/delete/{book_id}", response_model=Book)
def delete_book(
    book_id: str,
    book_service: BookService = Depends(get_book_service),
    books_config: BooksConfig = Depends(get_books_config),
) -> Response:
    """Delete a book and return it."""
    return result_to_response(book_service.delete_one_by_id(book_id), books_config)


@router.delete("/delete", response_model=str)
def delete_books(
    book_service: BookService = Depends(get_book_service),
    books_config: BooksConfig = Depends(get_books_config),
) -> Response:
    """Delete every book."""
    book_service.delete_all()
    return ok_response(books_config.delete_all_message)
