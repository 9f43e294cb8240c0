"""
Password hashing module using Argon2 with passlib's CryptContext.

Hashing and verification are CPU bound, so the module-level coroutines run
them in a small thread pool to keep the event loop responsive.
"""

from asyncio import get_running_loop
from concurrent.futures import ThreadPoolExecutor
from logging import getLogger

from passlib.context import CryptContext

from app.configs import file_logger

executor = ThreadPoolExecutor(max_workers=4)
logger = file_logger(getLogger(__name__))


class PasswordHasher:
    """
    A password hashing and verification manager using the Argon2id algorithm.

    This class wraps passlib's CryptContext with argon2 as the primary scheme
    and pbkdf2_sha256 kept as a deprecated fallback for older hashes.
    """

    def __init__(self) -> None:
        self.pwd_context = CryptContext(
            schemes=["argon2", "pbkdf2_sha256"],
            deprecated="pbkdf2_sha256",
        )
        logger.info("PasswordHasher initialized with Argon2id")

    def hash(self, password: str) -> str:
        """
        Hash a plaintext password.

        Args:
            password: The plaintext password to hash

        Returns:
            str: The hashed password in Argon2id format

        Raises:
            ValueError: If password is empty
        """
        if not password:
            mssg = "Password cannot be empty"
            raise ValueError(mssg)
        return self.pwd_context.hash(password)

    def verify(self, password: str, hashed_password: str) -> bool:
        """
        Verify a plaintext password against a stored hash.

        Args:
            password: The plaintext password to verify
            hashed_password: The stored hash

        Returns:
            bool: True if password matches, False otherwise
        """
        if not password or not hashed_password:
            return False
        try:
            return self.pwd_context.verify(password, hashed_password)
        except ValueError:
            # Unrecognized or corrupted hash
            logger.warning("Password verification failed on malformed hash")
            return False


_default_hasher = PasswordHasher()


def get_password_hasher() -> PasswordHasher:
    """Return the default password hasher instance."""
    return _default_hasher


async def hash_password(password: str) -> str:
    """
    Hash a password using the default hasher.

    Args:
        password: The plaintext password to hash

    Returns:
        str: The hashed password
    """
    return await get_running_loop().run_in_executor(
        executor,
        get_password_hasher().hash,
        password,
    )


async def verify_password(password: str, hashed_password: str) -> bool:
    """
    Verify a password using the default hasher.

    Args:
        password: The plaintext password to verify
        hashed_password: The hashed password to verify against

    Returns:
        bool: True if password matches, False otherwise
    """
    return await get_running_loop().run_in_executor(
        executor,
        get_password_hasher().verify,
        password,
        hashed_password,
    )
