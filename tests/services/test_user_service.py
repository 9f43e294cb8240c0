"""Tests for app/services/user.py module."""

import pytest

from app.errors import DuplicateEntryError
from app.models import UserDB
from app.schemas import Identity, UserCreate
from app.services import BlogService, UserService
from app.services.user import to_user_response


async def test_register_hashes_password(user_service: UserService, user_store) -> None:
    created = await user_service.register(
        UserCreate(username="root", name="Superuser", password="salainen"),
    )

    stored = user_store.users[created.id]
    assert stored.password_hash.startswith("$argon2")
    assert created.blogs == []


async def test_register_duplicate_username(user_service: UserService) -> None:
    user = UserCreate(username="root", name="Superuser", password="salainen")
    await user_service.register(user)

    with pytest.raises(DuplicateEntryError):
        await user_service.register(user)


async def test_list_users_resolves_blog_references(
    user_service: UserService,
    blog_service: BlogService,
    owner_identity: Identity,
) -> None:
    created = await blog_service.create_blog(
        owner_identity,
        {"title": "React patterns", "url": "https://reactpatterns.com/"},
    )

    users = await user_service.list_users()

    assert [b.id for b in users[0].blogs] == [created.id]


def test_malformed_references_are_skipped(owner: UserDB) -> None:
    owner.blogs = ["not-a-uuid"]
    assert to_user_response(owner, {}).blogs == []
