"""User service handling registration and listings."""

from logging import getLogger
from uuid import UUID

from app.configs import file_logger
from app.managers.password_manager import hash_password
from app.models import BlogDB, UserDB
from app.repositories.protocols import BlogStore, UserStore
from app.schemas.blog import BlogSummary
from app.schemas.user import UserCreate, UserResponse

logger = file_logger(getLogger(__name__))


def _blog_ids(user: UserDB) -> list[UUID]:
    ids = []
    for raw in user.blogs:
        try:
            ids.append(UUID(raw))
        except ValueError:
            logger.warning(f"Skipping malformed blog reference {raw!r} on user {user.uuid}")
    return ids


def to_user_response(user: UserDB, blogs: dict[UUID, BlogDB]) -> UserResponse:
    """
    Build the external user shape with the blogs the user has authored.

    References to blogs that no longer exist are skipped.
    """
    return UserResponse(
        id=user.uuid,
        username=user.username,
        name=user.name,
        blogs=[
            BlogSummary.model_validate(blogs[blog_id])
            for blog_id in _blog_ids(user)
            if blog_id in blogs
        ],
    )


class UserService:
    """Service for user registration and listing."""

    def __init__(self, user_repo: UserStore, blog_repo: BlogStore) -> None:
        self.user_repo = user_repo
        self.blog_repo = blog_repo

    async def register(self, user: UserCreate) -> UserResponse:
        """
        Register a new user.

        Raises:
            DuplicateEntryError: If the username is taken
        """
        password_hash = await hash_password(user.password.get_secret_value())
        db_user = await self.user_repo.create(user, password_hash)
        logger.info(f"User {db_user.username} registered")
        return to_user_response(db_user, {})

    async def list_users(self) -> list[UserResponse]:
        """Get every user with their authored blogs."""
        users = await self.user_repo.get_all()
        blogs = await self.blog_repo.get_by_ids(
            blog_id for user in users for blog_id in _blog_ids(user)
        )
        return [to_user_response(user, blogs) for user in users]
