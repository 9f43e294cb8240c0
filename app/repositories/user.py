"""User repository for database operations."""

from uuid import UUID

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError

from app.errors.database import DatabaseError, DuplicateEntryError, NotFoundError
from app.models.user import UserDB
from app.repositories.base import BaseRepository
from app.schemas.user import UserCreate


class UserRepository(BaseRepository[UserDB]):
    """
    Repository for User database operations.

    Implements the ``UserStore`` protocol on top of an async session.
    """

    model = UserDB
    id_field = "uuid"

    async def create(self, user: UserCreate, password_hash: str) -> UserDB:
        """
        Create a new user in the database.

        Args:
            user: User schema with user data
            password_hash: Hash of the user's password

        Returns:
            UserDB: Created user database model

        Raises:
            DuplicateEntryError: If username already exists
            DatabaseError: For other database errors
        """
        db_user = UserDB(
            username=user.username,
            name=user.name,
            password_hash=password_hash,
            blogs=[],
        )
        try:
            return await self._add_and_refresh(db_user)
        except DuplicateEntryError as e:
            raise DuplicateEntryError(detail="username must be unique") from e

    async def get_by_username(self, username: str) -> UserDB | None:
        """
        Get user by username.

        Args:
            username: Username to search for

        Returns:
            UserDB | None: User if found, None otherwise
        """
        result = await self.session.execute(
            # pyrefly: ignore [bad-argument-type]
            select(UserDB).where(UserDB.username == username),
        )
        return result.scalar_one_or_none()

    async def append_blog(self, user_id: UUID, blog_id: UUID) -> None:
        """
        Append a blog ID to the user's authored list.

        Runs in a SAVEPOINT so a failure here rolls back only the append and
        leaves the already flushed blog entry in place.

        Args:
            user_id: Owning user UUID
            blog_id: Newly created blog UUID

        Raises:
            NotFoundError: If the user no longer exists
            DatabaseError: If the write fails
        """
        try:
            async with self.session.begin_nested():
                db_user = await self.get_by_id(user_id)
                if not db_user:
                    raise NotFoundError(detail=f"User with ID {user_id} not found")
                db_user.blogs = [*db_user.blogs, str(blog_id)]
                self.session.add(db_user)
        except SQLAlchemyError as e:
            raise DatabaseError(detail=f"Failed to link blog to user: {e}") from e
