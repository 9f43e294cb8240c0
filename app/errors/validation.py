"""Validation errors and request validation handling for FastAPI."""

from logging import getLogger
from typing import Any, cast

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import ORJSONResponse
from pydantic import ValidationError as PydanticValidationError
from starlette.status import HTTP_400_BAD_REQUEST

from app.configs import file_logger
from app.errors.base import BaseAppError, create_exception_handler
from app.utils.helpers import host

logger = file_logger(getLogger(__name__))


class ValidationError(BaseAppError):
    """Raised for missing required fields, malformed payloads and malformed ids."""

    def __init__(
        self,
        detail: str = "Validation Error",
        errors: list[dict[str, Any]] | None = None,
    ) -> None:
        super().__init__(detail=detail, status_code=HTTP_400_BAD_REQUEST)
        self.errors = errors or []


def format_errors(errors: list[Any], *, skip_location: int = 0) -> list[dict[str, Any]]:
    """
    Flatten pydantic error dicts into a client friendly list.

    Args:
        errors: Error dicts as returned by ``.errors()``.
        skip_location: Number of leading ``loc`` parts to drop (``body`` for requests).

    Returns:
        list[dict[str, Any]]: One ``{field, message, type}`` entry per error.
    """
    formatted_errors = []
    for error in errors:
        formatted_errors.append(
            {
                "field": ".".join(str(loc) for loc in error.get("loc", [])[skip_location:]),
                "message": error.get("msg", "Invalid value"),
                "type": error.get("type", "validation_error"),
            },
        )
    return formatted_errors


def from_pydantic(exc: PydanticValidationError) -> ValidationError:
    """Convert a pydantic validation failure into the application error."""
    errors = format_errors(cast(list[Any], exc.errors(include_url=False, include_input=False)))
    fields = ", ".join(error["field"] for error in errors if error["field"])
    detail = f"Validation failed: {fields}" if fields else "Validation failed"
    return ValidationError(detail=detail, errors=errors)


async def request_validation_exception_handler(
    request: Request,
    exc: Exception,
) -> ORJSONResponse:
    """
    Handle FastAPI request validation errors with the application error shape.

    Args:
        request: The incoming request.
        exc: The RequestValidationError exception.

    Returns:
        ORJSONResponse with formatted validation errors.
    """
    exec_error = cast(RequestValidationError, exc)
    formatted_errors = format_errors(list(exec_error.errors()), skip_location=1)

    logger.warning(
        f"Validation error for ip: {host(request)} at endpoint {request.url.path}: {formatted_errors}",
    )

    return ORJSONResponse(
        status_code=HTTP_400_BAD_REQUEST,
        content={
            "error": "Validation failed",
            "errors": formatted_errors,
        },
    )


validation_exception_handler = create_exception_handler(logger)
