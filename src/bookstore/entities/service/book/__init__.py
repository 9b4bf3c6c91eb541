"""Entity package: Book."""

from .entity import Book
from .repository import BookRepository, InMemoryBookRepository

__all__ = ["Book", "BookRepository", "InMemoryBookRepository"]
