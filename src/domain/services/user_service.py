"""User service layer: registration, login and lookup."""

from typing import Any, Callable, Mapping
from uuid import UUID

import structlog
from sqlalchemy.exc import IntegrityError

from core.exceptions import (
    EmailTakenError,
    IncorrectPasswordError,
    UserNotFoundError,
    ValidationFailedError,
)
from core.security import gravatar_url, hash_password, verify_password
from domain.entities.user import User
from domain.repositories.unit_of_work import IUnitOfWork
from domain.validation import text_value, validate_login_input, validate_register_input
from infrastructure.auth.provider import IAuthProvider, TokenUser
from infrastructure.database.errors import is_unique_violation

logger = structlog.get_logger()


class UserService:
    """Service layer for User business logic."""

    def __init__(
        self,
        uow_factory: Callable[[], IUnitOfWork],
        auth_provider: IAuthProvider,
    ) -> None:
        self._uow_factory = uow_factory
        self._auth_provider = auth_provider

    async def register(self, data: Mapping[str, Any]) -> User:
        """Create a new user with a Gravatar avatar and hashed password."""
        errors, is_valid = validate_register_input(data)
        if not is_valid:
            raise ValidationFailedError(errors)

        email = text_value(data, "email").lower()
        async with self._uow_factory() as uow:
            if await uow.users.get_by_email(email):
                raise EmailTakenError()

            user = User(
                name=text_value(data, "name"),
                email=email,
                avatar=gravatar_url(email),
                password_hash=hash_password(str(data["password"])),
            )
            try:
                created = await uow.users.create(user)
                await uow.commit()
            except IntegrityError as exc:
                await uow.rollback()
                if is_unique_violation(exc, "email"):
                    raise EmailTakenError() from exc
                raise

        logger.info("user_registered", user_id=str(created.id))
        return created

    async def login(self, data: Mapping[str, Any]) -> str:
        """Check credentials and return a ``Bearer`` token string."""
        errors, is_valid = validate_login_input(data)
        if not is_valid:
            raise ValidationFailedError(errors)

        email = text_value(data, "email").lower()
        async with self._uow_factory() as uow:
            user = await uow.users.get_by_email(email)

        if not user:
            raise UserNotFoundError()
        if not verify_password(str(data["password"]), user.password_hash):
            raise IncorrectPasswordError()

        token = self._auth_provider.create_token(
            TokenUser(id=user.id, email=user.email, name=user.name, avatar=user.avatar)
        )
        return f"Bearer {token}"

    async def get_by_id(self, user_id: UUID) -> User | None:
        async with self._uow_factory() as uow:
            return await uow.users.get(user_id)
