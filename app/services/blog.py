"""
Blog entry service.

Orchestrates create/read/update/delete of blog entries on top of injected
stores. Authentication failures, ownership denials, malformed input and
missing records surface as typed application errors.
"""

from collections.abc import Mapping
from logging import getLogger
from typing import Any
from uuid import UUID

from pydantic import ValidationError as PydanticValidationError

from app.auth.ownership import Decision, check_ownership, ensure_owner
from app.configs import (
    MALFORMATTED_ID,
    ONLY_CREATOR_MAY_DELETE,
    ONLY_CREATOR_MAY_UPDATE,
    file_logger,
)
from app.errors.auth import AuthenticationError, AuthorizationError
from app.errors.database import DatabaseError, NotFoundError
from app.errors.validation import ValidationError, from_pydantic
from app.models import BlogDB, UserDB
from app.repositories.protocols import BlogStore, UserStore
from app.schemas.auth import Identity
from app.schemas.blog import BlogCreate, BlogOwner, BlogResponse, BlogUpdate
from app.services.statistics import BlogStatistics, blog_statistics

logger = file_logger(getLogger(__name__))

BLOG_NOT_FOUND = "blog not found"
BODY_NOT_OBJECT = "request body must be a JSON object"


def parse_blog_id(raw_id: str | UUID) -> UUID:
    """
    Parse a blog identifier.

    Args:
        raw_id: Identifier as received from the client

    Returns:
        UUID: Parsed identifier

    Raises:
        ValidationError: If the identifier is not a valid UUID
    """
    if isinstance(raw_id, UUID):
        return raw_id
    try:
        return UUID(str(raw_id))
    except ValueError as e:
        raise ValidationError(detail=MALFORMATTED_ID) from e


def to_blog_response(blog: BlogDB, owner: UserDB | None) -> BlogResponse:
    """
    Build the external blog shape, attaching the owner's display name.

    Args:
        blog: Stored blog entry
        owner: Owning user, when it still exists

    Returns:
        BlogResponse: Response model exposing ``id`` and ``user``
    """
    return BlogResponse(
        id=blog.id,
        title=blog.title,
        author=blog.author,
        url=blog.url,
        likes=blog.likes,
        user=BlogOwner(id=owner.uuid, name=owner.name) if owner else None,
    )


def _parse[SchemaT: (BlogCreate, BlogUpdate)](
    schema: type[SchemaT],
    payload: SchemaT | Mapping[str, Any] | None,
) -> SchemaT:
    if isinstance(payload, schema):
        return payload
    if not isinstance(payload, Mapping):
        raise ValidationError(detail=BODY_NOT_OBJECT)
    try:
        return schema.model_validate(payload)
    except PydanticValidationError as e:
        raise from_pydantic(e) from e


class BlogService:
    """Service for blog entry operations."""

    def __init__(
        self,
        blog_repo: BlogStore,
        user_repo: UserStore,
        *,
        enforce_ownership_on_update: bool = False,
    ) -> None:
        """
        Initialize the blog service.

        Args:
            blog_repo: Store for blog entries
            user_repo: Store for users
            enforce_ownership_on_update: Require the owner's identity for updates
        """
        self.blog_repo = blog_repo
        self.user_repo = user_repo
        self.enforce_ownership_on_update = enforce_ownership_on_update

    async def _get_or_raise(self, blog_id: UUID) -> BlogDB:
        blog = await self.blog_repo.get_by_id(blog_id)
        if not blog:
            raise NotFoundError(detail=BLOG_NOT_FOUND)
        return blog

    async def _enrich(self, blog: BlogDB) -> BlogResponse:
        owner = await self.user_repo.get_by_id(blog.user_id)
        return to_blog_response(blog, owner)

    async def list_blogs(self) -> list[BlogResponse]:
        """
        Get every blog, each enriched with its owner's display name.

        Returns:
            list[BlogResponse]: Blogs in store order
        """
        blogs = await self.blog_repo.get_all()
        owners = await self.user_repo.get_by_ids(blog.user_id for blog in blogs)
        return [to_blog_response(blog, owners.get(blog.user_id)) for blog in blogs]

    async def get_blog(self, raw_id: str | UUID) -> BlogResponse:
        """
        Get a single blog.

        Raises:
            ValidationError: If the identifier is malformed
            NotFoundError: If no blog has the identifier
        """
        blog = await self._get_or_raise(parse_blog_id(raw_id))
        return await self._enrich(blog)

    async def create_blog(
        self,
        identity: Identity | None,
        payload: BlogCreate | Mapping[str, Any] | None,
    ) -> BlogResponse:
        """
        Create a blog owned by the caller.

        The entry write and the append to the owner's ``blogs`` list are two
        separate steps. If the append fails the entry is kept and the failure
        is logged; the back-reference is then missing for that entry.

        Args:
            identity: Authenticated caller, or None
            payload: Blog input, validated here if given as a mapping

        Returns:
            BlogResponse: The created blog

        Raises:
            AuthenticationError: If there is no identity or its user is gone
            ValidationError: If title or url is missing or the payload is invalid
        """
        if identity is None:
            raise AuthenticationError

        blog_in = _parse(BlogCreate, payload)

        owner = await self.user_repo.get_by_id(identity.user_id)
        if owner is None:
            raise AuthenticationError

        owner_id = owner.uuid
        blog = await self.blog_repo.create(blog_in, user_id=owner_id)
        # A failed append rolls back its SAVEPOINT and expires what it
        # touched, so nothing below may read from ``blog`` or ``owner``.
        response = to_blog_response(blog, owner)
        logger.info(f"Blog {response.id} created by {identity.username}")

        try:
            await self.user_repo.append_blog(owner_id, response.id)
        except DatabaseError:
            logger.exception(f"Blog {response.id} saved but not linked to user {owner_id}")

        return response

    async def update_blog(
        self,
        identity: Identity | None,
        raw_id: str | UUID,
        payload: BlogUpdate | Mapping[str, Any] | None,
    ) -> BlogResponse:
        """
        Replace the provided fields of a blog.

        Without ownership enforcement any caller may update any blog.

        Args:
            identity: Caller identity, or None
            raw_id: Blog identifier as received from the client
            payload: Fields to replace

        Returns:
            BlogResponse: The updated blog

        Raises:
            ValidationError: If the identifier or payload is malformed
            NotFoundError: If no blog has the identifier
            AuthenticationError: With enforcement on, if there is no identity
            AuthorizationError: With enforcement on, if the caller is not the owner
        """
        if self.enforce_ownership_on_update and identity is None:
            raise AuthenticationError

        blog_id = parse_blog_id(raw_id)
        changes = _parse(BlogUpdate, payload).changes()

        if self.enforce_ownership_on_update:
            existing = await self._get_or_raise(blog_id)
            ensure_owner(identity, existing.user_id, ONLY_CREATOR_MAY_UPDATE)

        blog = await self.blog_repo.update(blog_id, changes)
        if not blog:
            raise NotFoundError(detail=BLOG_NOT_FOUND)
        return await self._enrich(blog)

    async def delete_blog(self, identity: Identity | None, raw_id: str | UUID) -> None:
        """
        Delete a blog on behalf of its owner.

        Args:
            identity: Authenticated caller, or None
            raw_id: Blog identifier as received from the client

        Raises:
            AuthenticationError: If there is no identity
            ValidationError: If the identifier is malformed
            NotFoundError: If no blog has the identifier
            AuthorizationError: If the caller is not the blog's owner
        """
        if identity is None:
            raise AuthenticationError

        blog_id = parse_blog_id(raw_id)
        blog = await self._get_or_raise(blog_id)

        if check_ownership(identity, blog.user_id) is Decision.DENY:
            logger.warning(f"User {identity.username} denied deleting blog {blog_id}")
            raise AuthorizationError(ONLY_CREATOR_MAY_DELETE)

        await self.blog_repo.delete(blog_id)
        logger.info(f"Blog {blog_id} deleted by {identity.username}")

    async def statistics(self) -> BlogStatistics:
        """Compute aggregate statistics over every stored blog."""
        return blog_statistics(await self.blog_repo.get_all())
