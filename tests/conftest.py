# tests/conftest.py
"""Root pytest configuration and shared fixtures."""

import os

# Must happen before app is imported anywhere
os.environ["LOG_TO_FILE"] = "false"
os.environ["SECRET_KEY"] = "test-secret-key-for-bloglist"
os.environ["ENFORCE_OWNERSHIP_ON_UPDATE"] = "false"

from collections.abc import AsyncGenerator, Callable, Generator, Iterable
from datetime import timedelta
from functools import partial
from typing import Any
from uuid import UUID, uuid4

from httpx import ASGITransport, AsyncClient
from pytest import fixture

from app.dependencies import get_blog_repository, get_user_repository
from app.errors import DuplicateEntryError, NotFoundError
from app.main import app
from app.managers.token_manager import create_access_token
from app.models import BlogDB, UserDB
from app.repositories.blog import MUTABLE_FIELDS
from app.schemas import BlogCreate, Identity, UserCreate
from app.services import BlogService, UserService


class InMemoryBlogStore:
    """Dict backed stand-in for ``BlogRepository``."""

    def __init__(self) -> None:
        self.blogs: dict[UUID, BlogDB] = {}

    async def create(self, blog: BlogCreate, user_id: UUID) -> BlogDB:
        db_blog = BlogDB(
            id=uuid4(),
            user_id=user_id,
            title=blog.title,
            author=blog.author,
            url=blog.url,
            likes=blog.likes,
        )
        self.blogs[db_blog.id] = db_blog
        return db_blog

    async def get_by_id(self, blog_id: UUID) -> BlogDB | None:
        return self.blogs.get(blog_id)

    async def get_by_ids(self, blog_ids: Iterable[UUID]) -> dict[UUID, BlogDB]:
        return {blog_id: self.blogs[blog_id] for blog_id in blog_ids if blog_id in self.blogs}

    async def get_all(self) -> list[BlogDB]:
        return list(self.blogs.values())

    async def update(self, blog_id: UUID, changes: dict[str, Any]) -> BlogDB | None:
        db_blog = self.blogs.get(blog_id)
        if db_blog is None:
            return None
        for key, value in changes.items():
            if key in MUTABLE_FIELDS:
                setattr(db_blog, key, value)
        return db_blog

    async def delete(self, blog_id: UUID) -> bool:
        return self.blogs.pop(blog_id, None) is not None


class InMemoryUserStore:
    """Dict backed stand-in for ``UserRepository``."""

    def __init__(self) -> None:
        self.users: dict[UUID, UserDB] = {}

    async def create(self, user: UserCreate, password_hash: str) -> UserDB:
        if await self.get_by_username(user.username):
            raise DuplicateEntryError("username must be unique")
        db_user = UserDB(
            uuid=uuid4(),
            username=user.username,
            name=user.name,
            password_hash=password_hash,
            blogs=[],
        )
        self.users[db_user.uuid] = db_user
        return db_user

    async def get_by_id(self, user_id: UUID) -> UserDB | None:
        return self.users.get(user_id)

    async def get_by_username(self, username: str) -> UserDB | None:
        return next((u for u in self.users.values() if u.username == username), None)

    async def get_by_ids(self, user_ids: Iterable[UUID]) -> dict[UUID, UserDB]:
        return {user_id: self.users[user_id] for user_id in user_ids if user_id in self.users}

    async def get_all(self) -> list[UserDB]:
        return list(self.users.values())

    async def append_blog(self, user_id: UUID, blog_id: UUID) -> None:
        db_user = self.users.get(user_id)
        if db_user is None:
            raise NotFoundError(f"User {user_id} not found")
        db_user.blogs = [*db_user.blogs, str(blog_id)]


def add_user(store: InMemoryUserStore, username: str, name: str) -> UserDB:
    """Insert a user directly, bypassing password hashing."""
    user = UserDB(
        uuid=uuid4(),
        username=username,
        name=name,
        password_hash="not-a-real-hash",
        blogs=[],
    )
    store.users[user.uuid] = user
    return user


def bearer(user: UserDB) -> dict[str, str]:
    token = create_access_token(
        user_id=user.uuid,
        username=user.username,
        expires_delta=timedelta(minutes=5),
    )
    return {"Authorization": f"Bearer {token}"}


@fixture
def blog_store() -> InMemoryBlogStore:
    return InMemoryBlogStore()


@fixture
def user_store() -> InMemoryUserStore:
    return InMemoryUserStore()


@fixture
def owner(user_store: InMemoryUserStore) -> UserDB:
    """User that creates blogs in the tests."""
    return add_user(user_store, "mluukkai", "Matti Luukkainen")


@fixture
def other_user(user_store: InMemoryUserStore) -> UserDB:
    """User that owns nothing."""
    return add_user(user_store, "hellas", "Arto Hellas")


@fixture
def owner_identity(owner: UserDB) -> Identity:
    return Identity(username=owner.username, user_id=owner.uuid)


@fixture
def other_identity(other_user: UserDB) -> Identity:
    return Identity(username=other_user.username, user_id=other_user.uuid)


@fixture
def blog_service(blog_store: InMemoryBlogStore, user_store: InMemoryUserStore) -> BlogService:
    return BlogService(blog_store, user_store)


@fixture
def strict_blog_service(
    blog_store: InMemoryBlogStore,
    user_store: InMemoryUserStore,
) -> BlogService:
    """Blog service that only lets owners update their blogs."""
    return BlogService(blog_store, user_store, enforce_ownership_on_update=True)


@fixture
def user_service(user_store: InMemoryUserStore, blog_store: InMemoryBlogStore) -> UserService:
    return UserService(user_store, blog_store)


@fixture
def make_user(user_store: InMemoryUserStore) -> Callable[[str, str], UserDB]:
    return partial(add_user, user_store)


@fixture
def headers_for() -> Callable[[UserDB], dict[str, str]]:
    return bearer


@fixture
def owner_headers(owner: UserDB) -> dict[str, str]:
    return bearer(owner)


@fixture
def other_headers(other_user: UserDB) -> dict[str, str]:
    return bearer(other_user)


@fixture
def override_stores(
    blog_store: InMemoryBlogStore,
    user_store: InMemoryUserStore,
) -> Generator[None]:
    """Route every repository dependency to the in-memory stores."""
    app.dependency_overrides[get_blog_repository] = lambda: blog_store
    app.dependency_overrides[get_user_repository] = lambda: user_store

    yield

    app.dependency_overrides = {}


@fixture
async def client(override_stores: None) -> AsyncGenerator[AsyncClient]:
    """Async HTTP client bound to the app, without lifespan or database."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
