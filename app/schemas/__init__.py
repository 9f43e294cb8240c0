from app.schemas.auth import Identity, LoginRequest, Token, TokenData
from app.schemas.blog import BlogCreate, BlogOwner, BlogResponse, BlogSummary, BlogUpdate
from app.schemas.statistics import (
    AuthorBlogsResponse,
    AuthorLikesResponse,
    BlogStatisticsResponse,
    FavoriteBlogResponse,
)
from app.schemas.user import UserCreate, UserResponse

__all__ = [
    "AuthorBlogsResponse",
    "AuthorLikesResponse",
    "BlogCreate",
    "BlogOwner",
    "BlogResponse",
    "BlogStatisticsResponse",
    "BlogSummary",
    "BlogUpdate",
    "FavoriteBlogResponse",
    "Identity",
    "LoginRequest",
    "Token",
    "TokenData",
    "UserCreate",
    "UserResponse",
]
