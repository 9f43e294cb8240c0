"""Blog repository for database operations."""

from logging import getLogger
from typing import Any
from uuid import UUID

from app.configs import file_logger
from app.models.blog import BlogDB
from app.repositories.base import BaseRepository
from app.schemas.blog import BlogCreate

logger = file_logger(getLogger(__name__))

MUTABLE_FIELDS = frozenset({"title", "author", "url", "likes"})


class BlogRepository(BaseRepository[BlogDB]):
    """
    Repository for Blog database operations.

    Implements the ``BlogStore`` protocol on top of an async session.
    """

    model = BlogDB

    async def create(self, blog: BlogCreate, user_id: UUID) -> BlogDB:
        """
        Create a new blog entry in the database.

        Args:
            blog: Validated blog input
            user_id: UUID of the owning user

        Returns:
            BlogDB: Created blog database model
        """
        db_blog = BlogDB(
            user_id=user_id,
            title=blog.title,
            author=blog.author,
            url=blog.url,
            likes=blog.likes,
        )
        return await self._add_and_refresh(db_blog)

    async def update(self, blog_id: UUID, changes: dict[str, Any]) -> BlogDB | None:
        """
        Update the mutable fields of a blog entry.

        Keys outside title, author, url and likes are ignored, so neither the
        ID nor the owner can be rewritten through this path.

        Args:
            blog_id: Blog UUID
            changes: Field values to apply

        Returns:
            BlogDB | None: Updated blog if found, None otherwise
        """
        db_blog = await self.get_by_id(blog_id)
        if not db_blog:
            return None

        for key, value in changes.items():
            if key in MUTABLE_FIELDS:
                setattr(db_blog, key, value)

        logger.debug(f"Updating blog {blog_id} fields {sorted(changes)}")
        return await self._add_and_refresh(db_blog)
