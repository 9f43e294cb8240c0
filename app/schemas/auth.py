from uuid import UUID

from pydantic import BaseModel, ConfigDict, SecretStr


class LoginRequest(BaseModel):
    """Credentials posted to the login endpoint."""

    username: str
    password: SecretStr


class Token(BaseModel):
    """Login response carrying the bearer token."""

    token: str
    username: str
    name: str


class TokenData(BaseModel):
    """Token data schema for extracted token payload."""

    username: str
    user_id: UUID
    jti: str
    token_type: str


class Identity(BaseModel):
    """Authenticated caller, rebuilt per request from a verified token."""

    model_config = ConfigDict(frozen=True)

    username: str
    user_id: UUID
