"""Map service results onto HTTP responses.

Success becomes ``200`` with the value as JSON. Failure becomes ``400``
with an empty body and the failure message in the error header.
"""

from __future__ import annotations

from typing import Any

from fastapi import status
from fastapi.encoders import jsonable_encoder
from starlette.responses import JSONResponse, Response

from src.bookstore.core.models import BookFailure, Result
from src.bookstore.runtime.config.config_data import BooksConfig


def ok_response(value: Any) -> JSONResponse:
    return JSONResponse(status_code=status.HTTP_200_OK, content=jsonable_encoder(value))


def failure_response(failure: BookFailure, books_config: BooksConfig) -> Response:
    return Response(
        status_code=status.HTTP_400_BAD_REQUEST,
        headers={books_config.error_header: failure.message},
    )


def result_to_response(result: Result[Any, BookFailure], books_config: BooksConfig) -> Response:
    return result.fold(
        lambda failure: failure_response(failure, books_config),
        ok_response,
    )
