"""Core result and failure models."""

from .failures import (
    BookAlreadyExistFailure,
    BookFailure,
    BookIdEmptyOrNullFailure,
    BookNameEmptyOrNullFailure,
    BookNotFoundFailure,
    BookNullFailure,
)
from .records import BooksRecord, UnsavedBook
from .result import Err, Invalid, Ok, Result, Valid, ValidationOutcome

__all__ = [
    "BookAlreadyExistFailure",
    "BookFailure",
    "BookIdEmptyOrNullFailure",
    "BookNameEmptyOrNullFailure",
    "BookNotFoundFailure",
    "BookNullFailure",
    "BooksRecord",
    "Err",
    "Invalid",
    "Ok",
    "Result",
    "UnsavedBook",
    "Valid",
    "ValidationOutcome",
]
