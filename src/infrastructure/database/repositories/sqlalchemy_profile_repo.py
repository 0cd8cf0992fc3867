"""SQLAlchemy implementation of Profile repository."""

from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from domain.entities.profile import (
    Education,
    Experience,
    Profile,
    ProfileOwner,
    SocialLinks,
)
from infrastructure.database.models import EducationModel, ExperienceModel, ProfileModel


class SQLAlchemyProfileRepository:
    """SQLAlchemy implementation of IProfileRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def get_by_user(self, user_id: UUID) -> Profile | None:
        """Get the profile owned by a user."""
        model = await self._get_model_by_user(user_id)
        return self._to_entity(model) if model else None

    async def get_by_handle(self, handle: str) -> Profile | None:
        """Get a profile by its handle."""
        stmt = select(ProfileModel).where(ProfileModel.handle == handle)
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()
        return self._to_entity(model) if model else None

    async def get_all(self) -> list[Profile]:
        """Get all profiles, oldest first."""
        stmt = select(ProfileModel).order_by(ProfileModel.created_at)
        result = await self._session.execute(stmt)
        return [self._to_entity(model) for model in result.scalars()]

    async def create(self, profile: Profile) -> Profile:
        """Create a new profile."""
        model = ProfileModel(
            id=profile.id,
            user_id=profile.user_id,
            created_at=profile.created_at,
            experience=[],
            education=[],
        )
        self._apply(model, profile)
        self._session.add(model)
        await self._session.flush()
        await self._session.refresh(model, attribute_names=["user"])
        return self._to_entity(model)

    async def update(self, profile: Profile) -> Profile:
        """Update a profile, syncing both sub-entry lists."""
        model = await self._get_model_by_user(profile.user_id)

        if not model:
            raise ValueError(f"Profile {profile.id} not found")

        self._apply(model, profile)
        await self._session.flush()
        return self._to_entity(model)

    async def delete_for_user(self, user_id: UUID) -> bool:
        """Delete the profile owned by a user."""
        model = await self._get_model_by_user(user_id)
        if not model:
            return False

        await self._session.delete(model)
        await self._session.flush()
        return True

    async def _get_model_by_user(self, user_id: UUID) -> ProfileModel | None:
        stmt = select(ProfileModel).where(ProfileModel.user_id == user_id)
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none()

    def _apply(self, model: ProfileModel, entity: Profile) -> None:
        """Copy entity state onto the ORM model, rebuilding list order."""
        model.handle = entity.handle
        model.status = entity.status
        model.company = entity.company
        model.website = entity.website
        model.location = entity.location
        model.bio = entity.bio
        model.github_username = entity.github_username
        model.skills = list(entity.skills)
        model.social = entity.social.to_dict()

        existing_experience = {row.id: row for row in model.experience}
        model.experience = [
            self._experience_model(entry, position, existing_experience.get(entry.id))
            for position, entry in enumerate(entity.experience)
        ]

        existing_education = {row.id: row for row in model.education}
        model.education = [
            self._education_model(entry, position, existing_education.get(entry.id))
            for position, entry in enumerate(entity.education)
        ]

    @staticmethod
    def _experience_model(
        entry: Experience, position: int, row: ExperienceModel | None
    ) -> ExperienceModel:
        if row is None:
            row = ExperienceModel(id=entry.id)
        row.position = position
        row.title = entry.title
        row.company = entry.company
        row.location = entry.location
        row.from_date = entry.from_date
        row.to_date = entry.to_date
        row.current = entry.current
        row.description = entry.description
        return row

    @staticmethod
    def _education_model(
        entry: Education, position: int, row: EducationModel | None
    ) -> EducationModel:
        if row is None:
            row = EducationModel(id=entry.id)
        row.position = position
        row.school = entry.school
        row.degree = entry.degree
        row.field_of_study = entry.field_of_study
        row.from_date = entry.from_date
        row.to_date = entry.to_date
        row.current = entry.current
        row.description = entry.description
        return row

    def _to_entity(self, model: ProfileModel) -> Profile:
        """Convert ORM model to domain entity."""
        owner = None
        if model.user is not None:
            owner = ProfileOwner(id=model.user.id, name=model.user.name, avatar=model.user.avatar)

        return Profile(
            id=model.id,
            user_id=model.user_id,
            handle=model.handle,
            status=model.status,
            company=model.company,
            website=model.website,
            location=model.location,
            bio=model.bio,
            github_username=model.github_username,
            skills=list(model.skills or []),
            social=SocialLinks(**(model.social or {})),
            experience=[
                Experience(
                    id=row.id,
                    title=row.title,
                    company=row.company,
                    location=row.location,
                    from_date=row.from_date,
                    to_date=row.to_date,
                    current=row.current,
                    description=row.description,
                )
                for row in model.experience
            ],
            education=[
                Education(
                    id=row.id,
                    school=row.school,
                    degree=row.degree,
                    field_of_study=row.field_of_study,
                    from_date=row.from_date,
                    to_date=row.to_date,
                    current=row.current,
                    description=row.description,
                )
                for row in model.education
            ],
            owner=owner,
            created_at=model.created_at,
        )
