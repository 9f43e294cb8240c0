"""Protocol definitions for the stores the services depend on."""

from collections.abc import Iterable
from typing import Any, Protocol, runtime_checkable
from uuid import UUID

from app.models import BlogDB, UserDB
from app.schemas.blog import BlogCreate
from app.schemas.user import UserCreate


@runtime_checkable
class BlogStore(Protocol):
    """
    Store capability for blog entries.

    ``BlogRepository`` implements it on top of an async session; tests can
    pass any in-memory object with the same methods.
    """

    async def create(self, blog: BlogCreate, user_id: UUID) -> BlogDB:
        """Insert a new entry owned by ``user_id``."""
        ...

    async def get_by_id(self, blog_id: UUID) -> BlogDB | None:
        """Get an entry by its ID."""
        ...

    async def get_by_ids(self, blog_ids: Iterable[UUID]) -> dict[UUID, BlogDB]:
        """Get the entries matching the IDs, keyed by ID."""
        ...

    async def get_all(self) -> list[BlogDB]:
        """Get every entry (full scan)."""
        ...

    async def update(self, blog_id: UUID, changes: dict[str, Any]) -> BlogDB | None:
        """Apply field changes to an entry."""
        ...

    async def delete(self, blog_id: UUID) -> bool:
        """Delete an entry."""
        ...


@runtime_checkable
class UserStore(Protocol):
    """Store capability for users."""

    async def create(self, user: UserCreate, password_hash: str) -> UserDB:
        """Insert a new user."""
        ...

    async def get_by_id(self, user_id: UUID) -> UserDB | None:
        """Get a user by ID."""
        ...

    async def get_by_username(self, username: str) -> UserDB | None:
        """Get a user by username."""
        ...

    async def get_by_ids(self, user_ids: Iterable[UUID]) -> dict[UUID, UserDB]:
        """Get the users matching the IDs, keyed by ID."""
        ...

    async def get_all(self) -> list[UserDB]:
        """Get every user."""
        ...

    async def append_blog(self, user_id: UUID, blog_id: UUID) -> None:
        """Append a blog ID to the user's authored list."""
        ...
