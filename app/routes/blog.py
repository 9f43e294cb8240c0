# app/routes/blog.py

"""
Blog Routes.

Provides listing, statistics and CRUD endpoints for blog entries.

Summary
-------
Endpoints include:
  - List blogs
  - Blog statistics
  - Get blog by id
  - Create blog
  - Update blog
  - Delete blog

Dependencies
------------
  - `BlogServiceDep`: Service bound to the request's repositories.
  - `IdentityDep`: Caller identity resolved from the bearer header, or None.

Request bodies are optional and untyped here and validated by the service,
so a missing credential is reported before a malformed payload.
"""

from typing import Annotated, Any

from fastapi import APIRouter, Body
from fastapi.responses import ORJSONResponse
from starlette.responses import Response
from starlette.status import HTTP_201_CREATED, HTTP_204_NO_CONTENT

from app.auth import IdentityDep
from app.dependencies import BlogServiceDep
from app.schemas import BlogResponse, BlogStatisticsResponse

router = APIRouter(prefix="/api/blogs", tags=["📝 Blogs"])

BLOG_EXAMPLE = {
    "id": "123e4567-e89b-12d3-a456-426614174000",
    "title": "React patterns",
    "author": "Michael Chan",
    "url": "https://reactpatterns.com/",
    "likes": 7,
    "user": {"id": "123e4567-e89b-12d3-a456-426614174111", "name": "Matti Luukkainen"},
}

UNAUTHORIZED_RESPONSE = {
    "description": "Unauthorized",
    "content": {"application/json": {"example": {"error": "token missing or invalid"}}},
}
MALFORMED_ID_RESPONSE = {
    "description": "Bad request",
    "content": {"application/json": {"example": {"error": "malformatted id"}}},
}
NOT_FOUND_RESPONSE = {
    "description": "Not found",
    "content": {"application/json": {"example": {"error": "blog not found"}}},
}

BlogCreateBody = Annotated[
    Any,
    Body(
        openapi_examples={
            "basic": {
                "summary": "Basic blog creation",
                "value": {
                    "title": "React patterns",
                    "author": "Michael Chan",
                    "url": "https://reactpatterns.com/",
                },
            },
        },
    ),
]
BlogUpdateBody = Annotated[
    Any,
    Body(
        openapi_examples={
            "like": {
                "summary": "Add a like",
                "value": {"likes": 8},
            },
        },
    ),
]


@router.get(
    "",
    response_class=ORJSONResponse,
    response_model=list[BlogResponse],
    summary="List blogs",
    description="Retrieve every blog, each with its creator's display name.",
    responses={200: {"content": {"application/json": {"example": [BLOG_EXAMPLE]}}}},
    operation_id="blogs_list",
)
async def list_blogs(service: BlogServiceDep) -> list[BlogResponse]:
    """
    List all blogs.

    Parameters
    ----------
    service : BlogService
        Blog service dependency.

    Returns
    -------
    list[BlogResponse]
        Every stored blog.
    """
    return await service.list_blogs()


@router.get(
    "/stats",
    response_class=ORJSONResponse,
    response_model=BlogStatisticsResponse,
    summary="Blog statistics",
    description="Aggregate likes and authorship over every stored blog.",
    responses={
        200: {
            "content": {
                "application/json": {
                    "example": {
                        "total_likes": 36,
                        "favorite_blog": {
                            "title": "Canonical string reduction",
                            "author": "Edsger W. Dijkstra",
                            "likes": 12,
                        },
                        "most_blogs": {"author": "Robert C. Martin", "blogs": 3},
                        "most_likes": {"author": "Edsger W. Dijkstra", "likes": 17},
                    },
                },
            },
        },
    },
    operation_id="blogs_statistics",
)
async def blog_statistics(service: BlogServiceDep) -> BlogStatisticsResponse:
    """
    Compute statistics over every stored blog.

    Notes
    -----
    With no blogs stored, ``total_likes`` is 0 and every other field is null.
    """
    stats = await service.statistics()
    return BlogStatisticsResponse.model_validate(stats, from_attributes=True)


@router.get(
    "/{blog_id}",
    response_class=ORJSONResponse,
    response_model=BlogResponse,
    summary="Get blog by ID",
    description="Retrieve a single blog by its identifier.",
    responses={
        200: {"content": {"application/json": {"example": BLOG_EXAMPLE}}},
        400: MALFORMED_ID_RESPONSE,
        404: NOT_FOUND_RESPONSE,
    },
    operation_id="blogs_get_by_id",
)
async def get_blog(blog_id: str, service: BlogServiceDep) -> BlogResponse:
    """
    Get blog by ID.

    Parameters
    ----------
    blog_id : str
        Blog identifier, validated by the service.
    service : BlogService
        Blog service dependency.

    Returns
    -------
    BlogResponse
        Blog data.
    """
    return await service.get_blog(blog_id)


@router.post(
    "",
    response_class=ORJSONResponse,
    response_model=BlogResponse,
    status_code=HTTP_201_CREATED,
    summary="Create a new blog",
    description="Create a blog owned by the authenticated caller.",
    responses={
        201: {"content": {"application/json": {"example": BLOG_EXAMPLE}}},
        400: {
            "description": "Bad request",
            "content": {
                "application/json": {
                    "example": {
                        "error": "Validation failed: title",
                        "errors": [
                            {"field": "title", "message": "Field required", "type": "missing"},
                        ],
                    },
                },
            },
        },
        401: UNAUTHORIZED_RESPONSE,
    },
    operation_id="blogs_create",
)
async def create_blog(
    identity: IdentityDep,
    service: BlogServiceDep,
    payload: BlogCreateBody = None,
) -> BlogResponse:
    """
    Create a new blog.

    Parameters
    ----------
    identity : Identity | None
        Caller identity from the bearer header.
    service : BlogService
        Blog service dependency.
    payload : Any, optional
        JSON body with ``title`` and ``url`` required, ``author`` and
        ``likes`` optional. Left unchecked until the caller is known.

    Returns
    -------
    BlogResponse
        Created blog data.

    Raises
    ------
    AuthenticationError
        If the bearer credential is missing or invalid.
    ValidationError
        If the body is not a JSON object, or ``title`` or ``url`` is missing.
    """
    return await service.create_blog(identity, payload)


@router.put(
    "/{blog_id}",
    response_class=ORJSONResponse,
    response_model=BlogResponse,
    summary="Update blog",
    description="Replace the provided fields of a blog.",
    responses={
        200: {"content": {"application/json": {"example": BLOG_EXAMPLE}}},
        400: MALFORMED_ID_RESPONSE,
        401: UNAUTHORIZED_RESPONSE,
        403: {
            "description": "Forbidden",
            "content": {
                "application/json": {
                    "example": {"error": "only the blog's creator may update it"},
                },
            },
        },
        404: NOT_FOUND_RESPONSE,
    },
    operation_id="blogs_update",
)
async def update_blog(
    blog_id: str,
    identity: IdentityDep,
    service: BlogServiceDep,
    payload: BlogUpdateBody = None,
) -> BlogResponse:
    """
    Update blog.

    Notes
    -----
    Authentication and ownership are only checked when
    ``ENFORCE_OWNERSHIP_ON_UPDATE`` is enabled.
    """
    return await service.update_blog(identity, blog_id, payload)


@router.delete(
    "/{blog_id}",
    status_code=HTTP_204_NO_CONTENT,
    summary="Delete blog",
    description="Delete a blog. Only its creator may do so.",
    responses={
        204: {"description": "Blog deleted"},
        400: MALFORMED_ID_RESPONSE,
        401: UNAUTHORIZED_RESPONSE,
        403: {
            "description": "Forbidden",
            "content": {
                "application/json": {
                    "example": {"error": "only the blog's creator may delete it"},
                },
            },
        },
        404: NOT_FOUND_RESPONSE,
    },
    operation_id="blogs_delete",
)
async def delete_blog(
    blog_id: str,
    identity: IdentityDep,
    service: BlogServiceDep,
) -> Response:
    """
    Delete blog.

    Parameters
    ----------
    blog_id : str
        Blog identifier.
    identity : Identity | None
        Caller identity from the bearer header.
    service : BlogService
        Blog service dependency.

    Returns
    -------
    Response
        Empty response with status 204.
    """
    await service.delete_blog(identity, blog_id)
    return Response(status_code=HTTP_204_NO_CONTENT)
