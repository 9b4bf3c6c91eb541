from __future__ import annotations

from collections.abc import Generator

import pytest
from fastapi.testclient import TestClient

from src.bookstore.api.http.app import app
from src.bookstore.api.http.app_data import ApplicationDependencies
from src.bookstore.core.services import BookService
from src.bookstore.entities.service.book import Book, InMemoryBookRepository
from tests.utils import make_books

__all__ = [
    "app_dependencies",
    "book_repository",
    "book_service",
    "client",
    "sample_books",
]


@pytest.fixture
def book_repository() -> InMemoryBookRepository:
    return InMemoryBookRepository()


@pytest.fixture
def book_service(book_repository: InMemoryBookRepository) -> BookService:
    return BookService(book_repository)


@pytest.fixture
def sample_books() -> list[Book]:
    return make_books(
        ("123", "Quarkus cookbook"),
        ("234", "Java cookbook"),
        ("345", "Angular cookbook"),
    )


@pytest.fixture
def client() -> Generator[TestClient, None, None]:
    """Yield a TestClient; entering it runs the lifespan so the store starts empty."""
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def app_dependencies(client: TestClient) -> ApplicationDependencies:
    return client.app.state.app_dependencies
