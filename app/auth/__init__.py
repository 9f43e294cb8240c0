"""Authentication and authorization module."""

from app.auth.identity import (
    IdentityDep,
    extract_bearer_token,
    get_identity,
    resolve_identity,
    verify_identity,
)
from app.auth.ownership import Decision, check_ownership, ensure_owner

__all__ = [
    "Decision",
    "IdentityDep",
    "check_ownership",
    "ensure_owner",
    "extract_bearer_token",
    "get_identity",
    "resolve_identity",
    "verify_identity",
]
