# app/dependencies/__init__.py

from app.dependencies.dependencies import (
    AuthServiceDep,
    BlogRepoDep,
    BlogServiceDep,
    SessionDep,
    UserRepoDep,
    UserServiceDep,
    get_auth_service,
    get_blog_repository,
    get_blog_service,
    get_user_repository,
    get_user_service,
)

__all__ = [
    "AuthServiceDep",
    "BlogRepoDep",
    "BlogServiceDep",
    "SessionDep",
    "UserRepoDep",
    "UserServiceDep",
    "get_auth_service",
    "get_blog_repository",
    "get_blog_service",
    "get_user_repository",
    "get_user_service",
]
