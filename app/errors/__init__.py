from app.errors.auth import (
    AuthenticationError,
    AuthorizationError,
    InvalidCredentialsError,
    auth_exception_handler,
)
from app.errors.base import BaseAppError, create_exception_handler
from app.errors.database import (
    DatabaseConnectionError,
    DatabaseError,
    DuplicateEntryError,
    NotFoundError,
    database_exception_handler,
)
from app.errors.validation import (
    ValidationError,
    request_validation_exception_handler,
    validation_exception_handler,
)

__all__ = [
    "AuthenticationError",
    "AuthorizationError",
    "BaseAppError",
    "DatabaseConnectionError",
    "DatabaseError",
    "DuplicateEntryError",
    "InvalidCredentialsError",
    "NotFoundError",
    "ValidationError",
    "auth_exception_handler",
    "create_exception_handler",
    "database_exception_handler",
    "request_validation_exception_handler",
    "validation_exception_handler",
]
