"""Authentication routes for handling user login."""

from fastapi import APIRouter
from fastapi.responses import ORJSONResponse

from app.dependencies import AuthServiceDep
from app.schemas import LoginRequest, Token

router = APIRouter(prefix="/api", tags=["🔐 Auth"])


@router.post(
    "/login",
    response_class=ORJSONResponse,
    response_model=Token,
    summary="Login for access token",
    description="Authenticate with username and password to obtain a bearer token.",
    responses={
        200: {
            "content": {
                "application/json": {
                    "example": {
                        "token": "eyJhbGciOiJIUzI1NiIsInR5cCI6IkpXVCJ9...",
                        "username": "mluukkai",
                        "name": "Matti Luukkainen",
                    },
                },
            },
        },
        401: {
            "description": "Unauthorized",
            "content": {
                "application/json": {"example": {"error": "invalid username or password"}},
            },
        },
    },
    operation_id="auth_login",
)
async def login(credentials: LoginRequest, auth_service: AuthServiceDep) -> Token:
    """
    Login with username and password.

    Parameters
    ----------
    credentials : LoginRequest
        Username and password.
    auth_service : AuthService
        Authentication service dependency.

    Returns
    -------
    Token
        Bearer token together with the user's username and name.
    """
    return await auth_service.login(credentials)
