"""Users API routes: registration, login and current identity."""

from fastapi import APIRouter, Depends, Request

from api.dependencies.auth import CurrentUser
from api.v1.dependencies import get_user_service
from api.v1.schemas.user import (
    CurrentUserResponse,
    LoginRequest,
    RegisterRequest,
    TokenResponse,
    UserResponse,
)
from core.rate_limit import limiter
from domain.services.user_service import UserService

router = APIRouter(prefix="/users", tags=["users"])


@router.post(
    "/register",
    response_model=UserResponse,
    summary="Register a user",
    responses={
        200: {"description": "User created"},
        400: {"description": "Validation error or email already registered"},
    },
)
@limiter.limit("10/minute")  # type: ignore[untyped-decorator]
async def register(
    request: Request,
    body: RegisterRequest,
    service: UserService = Depends(get_user_service),
) -> UserResponse:
    """Create an account. The avatar is the Gravatar image for the email."""
    user = await service.register(body.model_dump(exclude_none=True))
    return UserResponse(
        id=user.id,
        name=user.name,
        email=user.email,
        avatar=user.avatar,
        created_at=user.created_at,
    )


@router.post(
    "/login",
    response_model=TokenResponse,
    summary="Log in and receive a token",
    responses={
        200: {"description": "Bearer token issued"},
        400: {"description": "Validation error or wrong password"},
        404: {"description": "No user with that email"},
    },
)
@limiter.limit("10/minute")  # type: ignore[untyped-decorator]
async def login(
    request: Request,
    body: LoginRequest,
    service: UserService = Depends(get_user_service),
) -> TokenResponse:
    """Check credentials and return `Bearer <jwt>`."""
    token = await service.login(body.model_dump(exclude_none=True))
    return TokenResponse(token=token)


@router.get(
    "/current",
    response_model=CurrentUserResponse,
    summary="Get the authenticated user",
    responses={
        200: {"description": "Current user"},
        401: {"description": "Missing or invalid token"},
    },
)
@limiter.limit("30/minute")  # type: ignore[untyped-decorator]
async def current_user(request: Request, user: CurrentUser) -> CurrentUserResponse:
    return CurrentUserResponse(id=user.id, name=user.name, email=user.email, avatar=user.avatar)
