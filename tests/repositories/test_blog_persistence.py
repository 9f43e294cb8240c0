"""BlogService running on the SQL repositories."""

import pytest
from sqlmodel.ext.asyncio.session import AsyncSession

from app.models import UserDB
from app.repositories import BlogRepository, UserRepository
from app.schemas import Identity
from app.services import BlogService

TYPE_WARS = {"title": "Type wars", "author": "Robert C. Martin", "url": "http://blog.cleancoder.com/"}


@pytest.fixture
def service(blog_repo: BlogRepository, user_repo: UserRepository) -> BlogService:
    return BlogService(blog_repo, user_repo)


@pytest.fixture
def identity(db_owner: UserDB) -> Identity:
    return Identity(username=db_owner.username, user_id=db_owner.uuid)


class TestCreateBlog:
    async def test_links_entry_to_owner(
        self,
        service: BlogService,
        identity: Identity,
        db_owner: UserDB,
    ) -> None:
        created = await service.create_blog(identity, TYPE_WARS)

        assert created.user is not None
        assert created.user.id == db_owner.uuid
        assert db_owner.blogs == [str(created.id)]

    @pytest.mark.usefixtures("failing_user_updates")
    async def test_failed_link_keeps_entry(
        self,
        session: AsyncSession,
        service: BlogService,
        identity: Identity,
        blog_repo: BlogRepository,
        user_repo: UserRepository,
    ) -> None:
        created = await service.create_blog(identity, TYPE_WARS)

        assert created.title == "Type wars"
        assert created.user is not None
        assert created.user.name == "Matti Luukkainen"

        await session.commit()
        stored = await blog_repo.get_by_id(created.id)
        assert stored is not None
        assert stored.user_id == identity.user_id

        owner = await user_repo.get_by_id(identity.user_id)
        assert owner is not None
        await session.refresh(owner)
        assert owner.blogs == []

    async def test_listing_enriches_from_users_table(
        self,
        service: BlogService,
        identity: Identity,
    ) -> None:
        created = await service.create_blog(identity, TYPE_WARS)

        blogs = await service.list_blogs()

        assert [blog.id for blog in blogs] == [created.id]
        assert blogs[0].user is not None
        assert blogs[0].user.name == "Matti Luukkainen"
