"""
Blog schemas for the Bloglist application.

This module defines the request and response models for blog entries.
Input models carry the validation rules for the service boundary: ``title``
and ``url`` are mandatory, every other field is optional and ``likes``
defaults to 0.
"""

from typing import Any
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_validator

from app.configs.settings import MAX_TITLE_LENGTH, MAX_URL_LENGTH


def _likes_or_zero(value: Any) -> Any:
    return 0 if value is None else value


class BlogCreate(BaseModel):
    """Blog creation model (request body, excludes store-assigned fields)."""

    model_config = ConfigDict(str_strip_whitespace=True)

    title: str = Field(
        ...,
        min_length=1,
        max_length=MAX_TITLE_LENGTH,
        description="Blog title",
        examples=["React patterns"],
    )
    author: str | None = Field(
        default=None,
        max_length=MAX_TITLE_LENGTH,
        description="Blog author (optional)",
        examples=["Michael Chan"],
    )
    url: str = Field(
        ...,
        min_length=1,
        max_length=MAX_URL_LENGTH,
        description="Blog URL",
        examples=["https://reactpatterns.com/"],
    )
    likes: int = Field(
        default=0,
        ge=0,
        description="Like count (defaults to 0)",
        examples=[7],
    )

    @field_validator("likes", mode="before")
    @classmethod
    def default_likes(cls, v: Any) -> Any:
        """Treat an explicit null like an omitted field."""
        return _likes_or_zero(v)


class BlogUpdate(BaseModel):
    """Blog update model (all fields optional, only provided ones are applied)."""

    model_config = ConfigDict(
        str_strip_whitespace=True,
        json_schema_extra={
            "example": {
                "title": "React patterns, revisited",
                "likes": 8,
            },
        },
    )

    title: str | None = Field(default=None, min_length=1, max_length=MAX_TITLE_LENGTH)
    author: str | None = Field(default=None, max_length=MAX_TITLE_LENGTH)
    url: str | None = Field(default=None, min_length=1, max_length=MAX_URL_LENGTH)
    likes: int | None = Field(default=None, ge=0)

    @field_validator("title", "url")
    @classmethod
    def reject_null(cls, v: str | None) -> str | None:
        """Required fields may be replaced but never cleared."""
        if v is None:
            mssg = "Field may not be null"
            raise ValueError(mssg)
        return v

    @field_validator("likes", mode="before")
    @classmethod
    def default_likes(cls, v: Any) -> Any:
        """Treat an explicit null like a reset to zero."""
        return _likes_or_zero(v)

    def changes(self) -> dict[str, Any]:
        """Return only the fields that were present in the payload."""
        return self.model_dump(exclude_unset=True)


class BlogOwner(BaseModel):
    """Owner information attached to blog responses."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    name: str


class BlogResponse(BaseModel):
    """Blog response model, enriched with the owner's display name."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    title: str
    author: str | None = None
    url: str
    likes: int
    user: BlogOwner | None = None


class BlogSummary(BaseModel):
    """Blog item embedded in user listings (no owner reference)."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    title: str
    author: str | None = None
    url: str
    likes: int
