"""FastAPI dependency implementations."""

from __future__ import annotations

from fastapi import Request

from src.bookstore.api.http.app_data import ApplicationDependencies
from src.bookstore.core.services import BookService
from src.bookstore.runtime.config.config_data import BooksConfig
from src.bookstore.runtime.context import get_config


def get_app_dependencies(request: Request) -> ApplicationDependencies:
    """Get the dependencies created for this application's lifespan."""
    return request.app.state.app_dependencies


def get_book_service(request: Request) -> BookService:
    """Get the Book service instance."""
    app_deps: ApplicationDependencies = request.app.state.app_dependencies
    return app_deps.book_service


def get_books_config() -> BooksConfig:
    """Get the book endpoints configuration."""
    return get_config().books
