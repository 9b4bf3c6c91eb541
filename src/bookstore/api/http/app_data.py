from dataclasses import dataclass

from src.bookstore.core.services import BookService
from src.bookstore.entities.service.book import BookRepository, InMemoryBookRepository


@dataclass
class ApplicationDependencies:
    book_repository: BookRepository
    book_service: BookService

    @classmethod
    def in_memory(cls) -> "ApplicationDependencies":
        """Wire a fresh, empty in-memory repository behind a service."""
        repository = InMemoryBookRepository()
        return cls(book_repository=repository, book_service=BookService(repository))
