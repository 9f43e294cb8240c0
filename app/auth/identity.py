"""
Identity verification for bearer credentials.

The verifier turns the raw ``Authorization`` header into an ``Identity``.
It never touches the store: resolving the identity to a full user record is
left to the caller.
"""

from logging import getLogger
from typing import Annotated

from fastapi import Depends
from fastapi.security import APIKeyHeader

from app.configs import file_logger
from app.errors.auth import AuthenticationError
from app.managers.token_manager import decode_access_token
from app.schemas.auth import Identity

logger = file_logger(getLogger(__name__))

BEARER_SCHEME = "bearer"

authorization_header = APIKeyHeader(
    name="Authorization",
    auto_error=False,
    description="Bearer token: `Bearer <token>`",
)


def extract_bearer_token(authorization: str | None) -> str | None:
    """
    Extract the token from an ``Authorization: bearer <token>`` header.

    The scheme is matched case-insensitively.

    Args:
        authorization: Raw header value, if any

    Returns:
        str | None: The token, or None when the header is missing or malformed
    """
    if not authorization:
        return None

    scheme, _, token = authorization.strip().partition(" ")
    token = token.strip()
    if scheme.lower() != BEARER_SCHEME or not token or " " in token:
        return None
    return token


def resolve_identity(authorization: str | None) -> Identity | None:
    """
    Resolve an identity from a raw header without raising.

    Args:
        authorization: Raw header value, if any

    Returns:
        Identity | None: The caller identity, or None when verification fails
    """
    token = extract_bearer_token(authorization)
    if token is None:
        return None

    token_data = decode_access_token(token)
    if token_data is None:
        return None

    return Identity(username=token_data.username, user_id=token_data.user_id)


def verify_identity(authorization: str | None) -> Identity:
    """
    Verify a raw header and return the caller identity.

    Args:
        authorization: Raw header value, if any

    Returns:
        Identity: The authenticated caller

    Raises:
        AuthenticationError: If the header is missing or malformed, or the token
            is invalid, expired, tampered or lacks its subject claims
    """
    identity = resolve_identity(authorization)
    if identity is None:
        raise AuthenticationError
    return identity


async def get_identity(
    authorization: Annotated[str | None, Depends(authorization_header)],
) -> Identity | None:
    """
    Dependency yielding the caller identity, or None for anonymous callers.

    Whether an absent identity is acceptable is decided by the service.
    """
    if not authorization:
        return None
    try:
        return verify_identity(authorization)
    except AuthenticationError:
        logger.info("Bearer credential rejected")
        return None


IdentityDep = Annotated[Identity | None, Depends(get_identity)]
