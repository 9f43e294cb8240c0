"""Authentication service handling password login."""

from datetime import timedelta
from logging import getLogger

from app.configs import file_logger, settings
from app.errors.auth import InvalidCredentialsError
from app.managers.password_manager import verify_password
from app.managers.token_manager import create_access_token
from app.models import UserDB
from app.repositories.protocols import UserStore
from app.schemas.auth import LoginRequest, Token

logger = file_logger(getLogger(__name__))


class AuthService:
    """Service for handling user authentication."""

    def __init__(self, user_repo: UserStore) -> None:
        """
        Initialize the auth service.

        Args:
            user_repo: User store
        """
        self.user_repo = user_repo

    async def authenticate_user(self, username: str, password: str) -> UserDB:
        """
        Authenticate a user by username and password.

        Args:
            username: User username
            password: User password

        Returns:
            UserDB: Authenticated user

        Raises:
            InvalidCredentialsError: If authentication fails
        """
        user = await self.user_repo.get_by_username(username)
        if not user or not await verify_password(password, user.password_hash):
            logger.info(f"Failed login attempt for {username}")
            raise InvalidCredentialsError
        return user

    def create_token_for_user(self, user: UserDB) -> Token:
        """
        Create an access token for a user.

        Args:
            user: User entity

        Returns:
            Token: Token together with the user's public fields
        """
        access_token = create_access_token(
            user_id=user.uuid,
            username=user.username,
            expires_delta=timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES),
        )
        return Token(token=access_token, username=user.username, name=user.name)

    async def login(self, credentials: LoginRequest) -> Token:
        """Authenticate and issue a token in one step."""
        user = await self.authenticate_user(
            credentials.username,
            credentials.password.get_secret_value(),
        )
        return self.create_token_for_user(user)
