"""Core services exports."""

from .book_service import BookService
from .book_validation import BookRule, base_rules, is_blank, run_rules

__all__ = [
    "BookRule",
    "BookService",
    "base_rules",
    "is_blank",
    "run_rules",
]
