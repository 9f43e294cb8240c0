"""Repository layer for database operations."""

from app.repositories.blog import BlogRepository
from app.repositories.protocols import BlogStore, UserStore
from app.repositories.user import UserRepository

__all__ = ["BlogRepository", "BlogStore", "UserRepository", "UserStore"]
