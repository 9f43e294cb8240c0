"""Authentication and authorization errors."""

from logging import getLogger

from starlette.status import HTTP_401_UNAUTHORIZED, HTTP_403_FORBIDDEN

from app.configs import TOKEN_MISSING_OR_INVALID, file_logger
from app.errors.base import BaseAppError, create_exception_handler

logger = file_logger(getLogger(__name__))


class AuthenticationError(BaseAppError):
    """Raised when a credential is missing, malformed, expired or tampered."""

    def __init__(
        self,
        detail: str = TOKEN_MISSING_OR_INVALID,
        status_code: int = HTTP_401_UNAUTHORIZED,
    ) -> None:
        super().__init__(detail, status_code)


class InvalidCredentialsError(AuthenticationError):
    """Raised when a username/password pair does not match."""

    def __init__(self) -> None:
        super().__init__("invalid username or password", HTTP_401_UNAUTHORIZED)


class AuthorizationError(BaseAppError):
    """Raised when a valid identity lacks the rights for a mutation."""

    def __init__(self, detail: str = "forbidden") -> None:
        super().__init__(detail, HTTP_403_FORBIDDEN)


auth_exception_handler = create_exception_handler(logger)
