"""Health check endpoints router for monitoring service availability."""

from fastapi import APIRouter, Depends

from src.bookstore.api.http.app_data import ApplicationDependencies
from src.bookstore.api.http.deps import get_app_dependencies

router = APIRouter(prefix="/health", tags=["health"])


@router.get("")
def health(
    app_deps: ApplicationDependencies = Depends(get_app_dependencies),
) -> dict[str, str | int]:
    """Liveness probe: 200 as long as the process serves requests."""
    return {
        "status": "healthy",
        "service": "api",
        "books": app_deps.book_repository.count(),
    }
