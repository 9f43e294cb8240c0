# app/routes/user.py

"""
User Routes.

Registration and listing of user accounts.

Summary
-------
Endpoints include:
  - Create user
  - List users with their blogs
"""

from typing import Annotated

from fastapi import APIRouter, Body
from fastapi.responses import ORJSONResponse
from starlette.status import HTTP_201_CREATED

from app.dependencies import UserServiceDep
from app.schemas import UserCreate, UserResponse

router = APIRouter(prefix="/api/users", tags=["👤 Users"])


@router.post(
    "",
    response_class=ORJSONResponse,
    response_model=UserResponse,
    status_code=HTTP_201_CREATED,
    summary="Create a new user",
    description="Register a user account. Usernames must be unique.",
    responses={
        201: {
            "content": {
                "application/json": {
                    "example": {
                        "id": "123e4567-e89b-12d3-a456-426614174111",
                        "username": "mluukkai",
                        "name": "Matti Luukkainen",
                        "blogs": [],
                    },
                },
            },
        },
        400: {
            "description": "Bad request",
            "content": {
                "application/json": {
                    "example": {
                        "error": "Validation failed",
                        "errors": [
                            {
                                "field": "username",
                                "message": "String should have at least 3 characters",
                                "type": "string_too_short",
                            },
                        ],
                    },
                },
            },
        },
        409: {
            "description": "Conflict",
            "content": {"application/json": {"example": {"error": "username must be unique"}}},
        },
    },
    operation_id="users_create",
)
async def create_user(
    user: Annotated[
        UserCreate,
        Body(
            openapi_examples={
                "basic": {
                    "summary": "Basic registration",
                    "value": {
                        "username": "mluukkai",
                        "name": "Matti Luukkainen",
                        "password": "salainen",
                    },
                },
            },
        ),
    ],
    service: UserServiceDep,
) -> UserResponse:
    """
    Create a new user.

    Parameters
    ----------
    user : UserCreate
        Registration payload.
    service : UserService
        User service dependency.

    Returns
    -------
    UserResponse
        Created user, with an empty blog list.

    Raises
    ------
    DuplicateEntryError
        If the username is already taken.
    """
    return await service.register(user)


@router.get(
    "",
    response_class=ORJSONResponse,
    response_model=list[UserResponse],
    summary="List users",
    description="Retrieve every user with the blogs they created.",
    operation_id="users_list",
)
async def list_users(service: UserServiceDep) -> list[UserResponse]:
    """List all users."""
    return await service.list_users()
