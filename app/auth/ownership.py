"""Ownership guard deciding who may mutate a blog entry."""

from enum import StrEnum
from uuid import UUID

from app.configs import ONLY_CREATOR_MAY_DELETE
from app.errors.auth import AuthorizationError
from app.schemas.auth import Identity


class Decision(StrEnum):
    """Outcome of an ownership check."""

    PERMIT = "permit"
    DENY = "deny"


def check_ownership(identity: Identity | None, owner_id: UUID | None) -> Decision:
    """
    Decide whether an identity owns an entry.

    Args:
        identity: Authenticated caller, or None for anonymous callers
        owner_id: Owner recorded on the entry, if any

    Returns:
        Decision: PERMIT only when the caller's id equals the recorded owner
    """
    if identity is None or owner_id is None:
        return Decision.DENY
    return Decision.PERMIT if identity.user_id == owner_id else Decision.DENY


def ensure_owner(
    identity: Identity | None,
    owner_id: UUID | None,
    detail: str = ONLY_CREATOR_MAY_DELETE,
) -> None:
    """
    Raise unless the identity owns the entry.

    Args:
        identity: Authenticated caller, or None for anonymous callers
        owner_id: Owner recorded on the entry, if any
        detail: Message carried by the error

    Raises:
        AuthorizationError: If the check denies
    """
    if check_ownership(identity, owner_id) is Decision.DENY:
        raise AuthorizationError(detail)
