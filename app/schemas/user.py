"""
User schemas for registration and listing.

Passwords are accepted as ``SecretStr`` so they never end up in logs or
``repr`` output.
"""

from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, SecretStr

from app.configs.settings import MAX_USERNAME_LENGTH, MIN_PASSWORD_LENGTH, MIN_USERNAME_LENGTH
from app.schemas.blog import BlogSummary


class UserCreate(BaseModel):
    """User creation model (for request body - excludes auto-generated fields)."""

    model_config = ConfigDict(str_strip_whitespace=True, frozen=True)

    username: str = Field(
        ...,
        min_length=MIN_USERNAME_LENGTH,
        max_length=MAX_USERNAME_LENGTH,
        description="Username (unique)",
        examples=["mluukkai"],
    )
    name: str = Field(
        ...,
        min_length=1,
        max_length=200,
        description="Display name",
        examples=["Matti Luukkainen"],
    )
    password: SecretStr = Field(
        ...,
        min_length=MIN_PASSWORD_LENGTH,
        description="Password",
        examples=["salainen"],
    )


class UserResponse(BaseModel):
    """User response model (safe for API responses, without password hash)."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    username: str
    name: str
    blogs: list[BlogSummary] = Field(default_factory=list)
