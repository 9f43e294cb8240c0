# app/dependencies/dependencies.py

"""Application dependencies wiring repositories and services per request."""

from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.configs import settings
from app.db import get_session
from app.repositories import BlogRepository, UserRepository
from app.services import AuthService, BlogService, UserService

SessionDep = Annotated[AsyncSession, Depends(get_session)]


def get_blog_repository(session: SessionDep) -> BlogRepository:
    """
    Resolve the `BlogRepository` dependency.

    Parameters
    ----------
    session : AsyncSession
        Database session.

    Returns
    -------
    BlogRepository
        Repository instance bound to the session.
    """
    return BlogRepository(session)


def get_user_repository(session: SessionDep) -> UserRepository:
    """Resolve the `UserRepository` dependency."""
    return UserRepository(session)


BlogRepoDep = Annotated[BlogRepository, Depends(get_blog_repository)]
UserRepoDep = Annotated[UserRepository, Depends(get_user_repository)]


def get_blog_service(blog_repo: BlogRepoDep, user_repo: UserRepoDep) -> BlogService:
    """
    Dependency to get BlogService.

    Update ownership enforcement follows ``ENFORCE_OWNERSHIP_ON_UPDATE``.
    """
    return BlogService(
        blog_repo,
        user_repo,
        enforce_ownership_on_update=settings.ENFORCE_OWNERSHIP_ON_UPDATE,
    )


def get_user_service(user_repo: UserRepoDep, blog_repo: BlogRepoDep) -> UserService:
    return UserService(user_repo, blog_repo)


def get_auth_service(user_repo: UserRepoDep) -> AuthService:
    return AuthService(user_repo)


BlogServiceDep = Annotated[BlogService, Depends(get_blog_service)]
UserServiceDep = Annotated[UserService, Depends(get_user_service)]
AuthServiceDep = Annotated[AuthService, Depends(get_auth_service)]
