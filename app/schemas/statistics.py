from pydantic import BaseModel, ConfigDict


class FavoriteBlogResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    title: str
    author: str | None = None
    likes: int


class AuthorBlogsResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    author: str | None = None
    blogs: int


class AuthorLikesResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    author: str | None = None
    likes: int


class BlogStatisticsResponse(BaseModel):
    """Aggregate facts over every stored blog."""

    model_config = ConfigDict(from_attributes=True)

    total_likes: int
    favorite_blog: FavoriteBlogResponse | None = None
    most_blogs: AuthorBlogsResponse | None = None
    most_likes: AuthorLikesResponse | None = None
