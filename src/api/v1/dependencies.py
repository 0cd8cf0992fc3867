"""Dependency injection factories for API v1."""

from functools import lru_cache
from typing import Callable
from uuid import UUID

from core.exceptions import AppException
from domain.services.post_service import PostService
from domain.services.profile_service import ProfileService
from domain.services.user_service import UserService
from infrastructure.auth.jwt_provider import JWTAuthProvider
from infrastructure.database.session import async_session_factory
from infrastructure.database.sqlalchemy_uow import SQLAlchemyUnitOfWork


def get_uow_factory() -> Callable[[], SQLAlchemyUnitOfWork]:
    """Factory for creating Unit of Work instances."""

    def factory() -> SQLAlchemyUnitOfWork:
        return SQLAlchemyUnitOfWork(async_session_factory)

    return factory


@lru_cache
def get_user_service() -> UserService:
    """Get User service instance."""
    return UserService(get_uow_factory(), auth_provider=JWTAuthProvider())


@lru_cache
def get_profile_service() -> ProfileService:
    """Get Profile service instance."""
    return ProfileService(get_uow_factory())


@lru_cache
def get_post_service() -> PostService:
    """Get Post service instance."""
    return PostService(get_uow_factory())


def parse_id(value: str, not_found: AppException) -> UUID:
    """Parse a path identifier. A malformed one cannot match anything."""
    try:
        return UUID(value)
    except ValueError:
        raise not_found from None
