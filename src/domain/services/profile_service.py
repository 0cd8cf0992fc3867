"""Profile service layer with business logic."""

from typing import Any, Callable, List, Mapping
from uuid import UUID

import structlog
from sqlalchemy.exc import IntegrityError

from core.exceptions import (
    EducationNotFoundError,
    ExperienceNotFoundError,
    HandleTakenError,
    ProfileNotFoundError,
    ValidationFailedError,
)
from domain.entities.profile import Education, Experience, Profile, SocialLinks
from domain.repositories.unit_of_work import IUnitOfWork
from domain.validation import (
    SOCIAL_FIELDS,
    parse_date,
    parse_skills,
    text_value,
    validate_education_input,
    validate_experience_input,
    validate_profile_input,
)
from infrastructure.database.errors import is_unique_violation

logger = structlog.get_logger()


def _optional(data: Mapping[str, Any], key: str) -> str | None:
    return text_value(data, key) or None


def _flag(data: Mapping[str, Any], key: str) -> bool:
    value = data.get(key)
    if isinstance(value, str):
        return value.strip().lower() in ("true", "1", "on", "yes")
    return bool(value)


class ProfileService:
    """Service layer for Profile business logic."""

    def __init__(self, uow_factory: Callable[[], IUnitOfWork]) -> None:
        self._uow_factory = uow_factory

    async def get_for_user(self, user_id: UUID) -> Profile:
        """Get the profile owned by a user."""
        async with self._uow_factory() as uow:
            profile = await uow.profiles.get_by_user(user_id)
        if not profile:
            raise ProfileNotFoundError()
        return profile

    async def get_by_handle(self, handle: str) -> Profile:
        async with self._uow_factory() as uow:
            profile = await uow.profiles.get_by_handle(handle)
        if not profile:
            raise ProfileNotFoundError()
        return profile

    async def get_all(self) -> List[Profile]:
        """Get every profile; an empty store is reported as not found."""
        async with self._uow_factory() as uow:
            profiles = await uow.profiles.get_all()
        if not profiles:
            raise ProfileNotFoundError("There are no profiles")
        return profiles

    async def upsert(self, user_id: UUID, data: Mapping[str, Any]) -> Profile:
        """Create the user's profile, or update it if one exists.

        The handle must not belong to any other user's profile.
        """
        errors, is_valid = validate_profile_input(data)
        if not is_valid:
            raise ValidationFailedError(errors)

        handle = text_value(data, "handle")
        async with self._uow_factory() as uow:
            existing = await uow.profiles.get_by_user(user_id)
            holder = await uow.profiles.get_by_handle(handle)
            if holder and holder.user_id != user_id:
                raise HandleTakenError()

            try:
                if existing:
                    self._apply_fields(existing, data)
                    saved = await uow.profiles.update(existing)
                else:
                    profile = Profile(
                        user_id=user_id, handle=handle, status=text_value(data, "status")
                    )
                    self._apply_fields(profile, data)
                    saved = await uow.profiles.create(profile)
                await uow.commit()
            except IntegrityError as exc:
                await uow.rollback()
                # Another user claimed the handle after the check above
                if is_unique_violation(exc, "handle"):
                    raise HandleTakenError() from exc
                raise

        logger.info(
            "profile_saved",
            user_id=str(user_id),
            handle=handle,
            created=existing is None,
        )
        return saved

    async def add_experience(self, user_id: UUID, data: Mapping[str, Any]) -> Profile:
        errors, is_valid = validate_experience_input(data)
        if not is_valid:
            raise ValidationFailedError(errors)

        async with self._uow_factory() as uow:
            profile = await uow.profiles.get_by_user(user_id)
            if not profile:
                raise ProfileNotFoundError()

            profile.add_experience(
                Experience(
                    title=text_value(data, "title"),
                    company=text_value(data, "company"),
                    location=_optional(data, "location"),
                    from_date=parse_date(data.get("from")),  # type: ignore[arg-type]
                    to_date=parse_date(data.get("to")),
                    current=_flag(data, "current"),
                    description=_optional(data, "description"),
                )
            )
            updated = await uow.profiles.update(profile)
            await uow.commit()
            return updated

    async def remove_experience(self, user_id: UUID, experience_id: UUID) -> Profile:
        async with self._uow_factory() as uow:
            profile = await uow.profiles.get_by_user(user_id)
            if not profile:
                raise ProfileNotFoundError()
            if not profile.remove_experience(experience_id):
                raise ExperienceNotFoundError()

            updated = await uow.profiles.update(profile)
            await uow.commit()
            return updated

    async def add_education(self, user_id: UUID, data: Mapping[str, Any]) -> Profile:
        errors, is_valid = validate_education_input(data)
        if not is_valid:
            raise ValidationFailedError(errors)

        async with self._uow_factory() as uow:
            profile = await uow.profiles.get_by_user(user_id)
            if not profile:
                raise ProfileNotFoundError()

            profile.add_education(
                Education(
                    school=text_value(data, "school"),
                    degree=text_value(data, "degree"),
                    field_of_study=text_value(data, "fieldofstudy"),
                    from_date=parse_date(data.get("from")),  # type: ignore[arg-type]
                    to_date=parse_date(data.get("to")),
                    current=_flag(data, "current"),
                    description=_optional(data, "description"),
                )
            )
            updated = await uow.profiles.update(profile)
            await uow.commit()
            return updated

    async def remove_education(self, user_id: UUID, education_id: UUID) -> Profile:
        async with self._uow_factory() as uow:
            profile = await uow.profiles.get_by_user(user_id)
            if not profile:
                raise ProfileNotFoundError()
            if not profile.remove_education(education_id):
                raise EducationNotFoundError()

            updated = await uow.profiles.update(profile)
            await uow.commit()
            return updated

    async def delete_account(self, user_id: UUID) -> None:
        """Delete the user's profile, then the user."""
        async with self._uow_factory() as uow:
            await uow.profiles.delete_for_user(user_id)
            await uow.users.delete(user_id)
            await uow.commit()

        logger.info("account_deleted", user_id=str(user_id))

    @staticmethod
    def _apply_fields(profile: Profile, data: Mapping[str, Any]) -> None:
        """Copy validated request fields onto the profile."""
        profile.handle = text_value(data, "handle")
        profile.status = text_value(data, "status")
        profile.company = _optional(data, "company")
        profile.website = _optional(data, "website")
        profile.location = _optional(data, "location")
        profile.bio = _optional(data, "bio")
        profile.github_username = _optional(data, "githubusername")
        profile.skills = parse_skills(data.get("skills"))
        profile.social = SocialLinks(**{key: _optional(data, key) for key in SOCIAL_FIELDS})
