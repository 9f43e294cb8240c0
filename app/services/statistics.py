"""
Aggregate statistics over collections of blog entries.

Every function here is pure and deterministic. Input records only need to
expose ``title``, ``author`` and ``likes``, either as attributes (ORM rows,
response models) or as mapping keys (plain dicts).

Ties are resolved in favour of the earliest occurrence in the input: the
earliest entry for ``favorite_blog`` and the author whose first entry comes
first for ``most_blogs`` and ``most_likes``.
"""

from collections import Counter, defaultdict
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from operator import itemgetter
from typing import Any, Protocol


class BlogRecord(Protocol):
    """Minimal shape of a blog entry consumed by the statistics functions."""

    title: str
    author: str | None
    likes: int


type BlogLike = BlogRecord | Mapping[str, Any]


class EmptyCollectionError(ValueError):
    """Raised when an aggregate needs at least one blog but got none."""

    def __init__(self, operation: str) -> None:
        super().__init__(f"{operation} requires at least one blog")
        self.operation = operation


@dataclass(frozen=True)
class FavoriteBlog:
    title: str
    author: str | None
    likes: int


@dataclass(frozen=True)
class AuthorBlogs:
    author: str | None
    blogs: int


@dataclass(frozen=True)
class AuthorLikes:
    author: str | None
    likes: int


@dataclass(frozen=True)
class BlogStatistics:
    """Bundle of every aggregate; the optional parts are None for no blogs."""

    total_likes: int
    favorite_blog: FavoriteBlog | None
    most_blogs: AuthorBlogs | None
    most_likes: AuthorLikes | None


def _field(blog: BlogLike, name: str) -> Any:
    if isinstance(blog, Mapping):
        return blog.get(name)
    return getattr(blog, name, None)


def _likes(blog: BlogLike) -> int:
    return _field(blog, "likes") or 0


def total_likes(blogs: Sequence[BlogLike]) -> int:
    """
    Sum the likes of every blog.

    Args:
        blogs: Blog entries

    Returns:
        int: Total likes, 0 for an empty sequence
    """
    return sum(_likes(blog) for blog in blogs)


def favorite_blog(blogs: Sequence[BlogLike]) -> FavoriteBlog:
    """
    Find the blog with the most likes.

    Args:
        blogs: Blog entries (must not be empty)

    Returns:
        FavoriteBlog: Projection of the earliest blog holding the maximum

    Raises:
        EmptyCollectionError: If ``blogs`` is empty
    """
    if not blogs:
        raise EmptyCollectionError("favorite_blog")

    # max() keeps the first of equal maxima
    fav = max(blogs, key=_likes)
    return FavoriteBlog(
        title=_field(fav, "title"),
        author=_field(fav, "author"),
        likes=_likes(fav),
    )


def _top_author(totals: Mapping[str | None, int]) -> tuple[str | None, int]:
    # dicts keep first-insertion order, so max() honours first occurrence
    return max(totals.items(), key=itemgetter(1))


def most_blogs(blogs: Sequence[BlogLike]) -> AuthorBlogs:
    """
    Find the author with the most blogs.

    Args:
        blogs: Blog entries (must not be empty)

    Returns:
        AuthorBlogs: Author and their blog count

    Raises:
        EmptyCollectionError: If ``blogs`` is empty
    """
    if not blogs:
        raise EmptyCollectionError("most_blogs")

    counts = Counter(_field(blog, "author") for blog in blogs)
    author, count = _top_author(counts)
    return AuthorBlogs(author=author, blogs=count)


def most_likes(blogs: Sequence[BlogLike]) -> AuthorLikes:
    """
    Find the author whose blogs have the most likes in total.

    Args:
        blogs: Blog entries (must not be empty)

    Returns:
        AuthorLikes: Author and their summed likes

    Raises:
        EmptyCollectionError: If ``blogs`` is empty
    """
    if not blogs:
        raise EmptyCollectionError("most_likes")

    totals: defaultdict[str | None, int] = defaultdict(int)
    for blog in blogs:
        totals[_field(blog, "author")] += _likes(blog)

    author, likes = _top_author(totals)
    return AuthorLikes(author=author, likes=likes)


def blog_statistics(blogs: Sequence[BlogLike]) -> BlogStatistics:
    """Compute every aggregate at once, tolerating an empty sequence."""
    if not blogs:
        return BlogStatistics(
            total_likes=0,
            favorite_blog=None,
            most_blogs=None,
            most_likes=None,
        )

    return BlogStatistics(
        total_likes=total_likes(blogs),
        favorite_blog=favorite_blog(blogs),
        most_blogs=most_blogs(blogs),
        most_likes=most_likes(blogs),
    )
