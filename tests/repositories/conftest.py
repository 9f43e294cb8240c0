"""Fixtures running the repositories against an in-memory SQLite database."""

from collections.abc import AsyncGenerator, Iterator

import pytest
from sqlalchemy import event
from sqlalchemy.exc import OperationalError
from sqlalchemy.ext.asyncio import AsyncEngine, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession

from app.models import UserDB
from app.repositories import BlogRepository, UserRepository
from app.schemas import UserCreate

SQLITE_URL = "sqlite+aiosqlite:///:memory:"


@pytest.fixture
async def engine() -> AsyncGenerator[AsyncEngine]:
    engine = create_async_engine(SQLITE_URL, poolclass=StaticPool)

    # Let SQLAlchemy emit BEGIN itself so SAVEPOINTs nest properly
    @event.listens_for(engine.sync_engine, "connect")
    def do_connect(dbapi_connection: object, connection_record: object) -> None:
        dbapi_connection.isolation_level = None  # type: ignore[attr-defined]

    @event.listens_for(engine.sync_engine, "begin")
    def do_begin(conn: object) -> None:
        conn.exec_driver_sql("BEGIN")  # type: ignore[attr-defined]

    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)

    yield engine
    await engine.dispose()


@pytest.fixture
async def session(engine: AsyncEngine) -> AsyncGenerator[AsyncSession]:
    session_maker = async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
    )
    async with session_maker() as session:
        yield session


@pytest.fixture
def blog_repo(session: AsyncSession) -> BlogRepository:
    return BlogRepository(session)


@pytest.fixture
def user_repo(session: AsyncSession) -> UserRepository:
    return UserRepository(session)


@pytest.fixture
async def db_owner(user_repo: UserRepository) -> UserDB:
    user = UserCreate(username="mluukkai", name="Matti Luukkainen", password="salainen")
    return await user_repo.create(user, "hashed-salainen")


@pytest.fixture
def failing_user_updates() -> Iterator[None]:
    """Make every UPDATE of a user row fail for the duration of a test."""

    def fail(mapper: object, connection: object, target: UserDB) -> None:
        raise OperationalError("UPDATE users", {}, Exception("disk I/O error"))

    event.listen(UserDB, "before_update", fail)
    yield
    event.remove(UserDB, "before_update", fail)
