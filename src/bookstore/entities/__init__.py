"""Entities module with entity-centric structure.

Each entity has its own package containing:
- entity.py: Domain model
- repository.py: Data access layer

Import what you need from the entity package:

    from src.bookstore.entities import Book, InMemoryBookRepository
"""

from .service.book import Book, BookRepository, InMemoryBookRepository

__all__ = [
    "Book",
    "BookRepository",
    "InMemoryBookRepository",
]
