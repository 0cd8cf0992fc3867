"""Unit tests for ProfileService."""

from datetime import date
from uuid import UUID, uuid4

import pytest
from sqlalchemy.exc import IntegrityError

from core.exceptions import (
    EducationNotFoundError,
    ExperienceNotFoundError,
    HandleTakenError,
    ProfileNotFoundError,
    ValidationFailedError,
)
from domain.entities.profile import Education, Experience, Profile
from domain.services.profile_service import ProfileService
from tests.unit.conftest import FakeUnitOfWork, echo


@pytest.fixture
def service(uow: FakeUnitOfWork) -> ProfileService:
    return ProfileService(lambda: uow)


@pytest.fixture
def profile(user_id: UUID) -> Profile:
    return Profile(user_id=user_id, handle="jdoe", status="Developer", skills=["Python"])


def _form(**overrides: object) -> dict[str, object]:
    data: dict[str, object] = {"handle": "jdoe", "status": "Developer", "skills": "Python, SQL"}
    data.update(overrides)
    return data


# --- reads ---


class TestReads:
    @pytest.mark.asyncio
    async def test_get_for_user_raises_when_missing(
        self, service: ProfileService, uow: FakeUnitOfWork, user_id: UUID
    ):
        uow.profiles.get_by_user.return_value = None

        with pytest.raises(ProfileNotFoundError) as exc_info:
            await service.get_for_user(user_id)

        assert exc_info.value.errors == {"noprofile": "There is no profile for this user"}

    @pytest.mark.asyncio
    async def test_get_by_handle_raises_when_missing(
        self, service: ProfileService, uow: FakeUnitOfWork
    ):
        uow.profiles.get_by_handle.return_value = None

        with pytest.raises(ProfileNotFoundError) as exc_info:
            await service.get_by_handle("nobody")

        assert exc_info.value.status_code == 404

    @pytest.mark.asyncio
    async def test_get_all_reports_empty_store(self, service: ProfileService, uow: FakeUnitOfWork):
        uow.profiles.get_all.return_value = []

        with pytest.raises(ProfileNotFoundError) as exc_info:
            await service.get_all()

        assert exc_info.value.errors == {"noprofile": "There are no profiles"}


# --- upsert ---


class TestUpsert:
    @pytest.mark.asyncio
    async def test_creates_profile(self, service: ProfileService, uow: FakeUnitOfWork, user_id: UUID):
        uow.profiles.get_by_user.return_value = None
        uow.profiles.get_by_handle.return_value = None
        uow.profiles.create.side_effect = echo

        result = await service.upsert(
            user_id,
            _form(githubusername="jdoe-gh", youtube="https://youtube.com/jdoe"),
        )

        assert result.user_id == user_id
        assert result.skills == ["Python", "SQL"]
        assert result.github_username == "jdoe-gh"
        assert result.social.to_dict() == {"youtube": "https://youtube.com/jdoe"}
        uow.profiles.update.assert_not_called()
        assert uow.committed

    @pytest.mark.asyncio
    async def test_updates_existing_profile(
        self, service: ProfileService, uow: FakeUnitOfWork, profile: Profile, user_id: UUID
    ):
        uow.profiles.get_by_user.return_value = profile
        uow.profiles.get_by_handle.return_value = profile
        uow.profiles.update.side_effect = echo

        result = await service.upsert(user_id, _form(status="Senior Developer", bio="Hi"))

        assert result.id == profile.id
        assert result.status == "Senior Developer"
        assert result.bio == "Hi"
        uow.profiles.create.assert_not_called()

    @pytest.mark.asyncio
    async def test_rejects_handle_of_another_user(
        self, service: ProfileService, uow: FakeUnitOfWork, user_id: UUID, other_user_id: UUID
    ):
        uow.profiles.get_by_user.return_value = None
        uow.profiles.get_by_handle.return_value = Profile(
            user_id=other_user_id, handle="jdoe", status="Developer"
        )

        with pytest.raises(HandleTakenError) as exc_info:
            await service.upsert(user_id, _form())

        assert exc_info.value.errors == {"handle": "That handle already exists"}
        assert exc_info.value.status_code == 400
        uow.profiles.create.assert_not_called()
        assert not uow.committed

    @pytest.mark.asyncio
    async def test_rejects_handle_change_to_taken_handle(
        self,
        service: ProfileService,
        uow: FakeUnitOfWork,
        profile: Profile,
        user_id: UUID,
        other_user_id: UUID,
    ):
        uow.profiles.get_by_user.return_value = profile
        uow.profiles.get_by_handle.return_value = Profile(
            user_id=other_user_id, handle="taken", status="Developer"
        )

        with pytest.raises(HandleTakenError):
            await service.upsert(user_id, _form(handle="taken"))

        uow.profiles.update.assert_not_called()

    @pytest.mark.asyncio
    async def test_handle_claimed_concurrently_is_handle_taken(
        self, service: ProfileService, uow: FakeUnitOfWork, user_id: UUID
    ):
        uow.profiles.get_by_user.return_value = None
        uow.profiles.get_by_handle.return_value = None
        uow.profiles.create.side_effect = IntegrityError(
            "INSERT ...",
            {},
            Exception('duplicate key value violates unique constraint "profiles_handle_key"'),
        )

        with pytest.raises(HandleTakenError) as exc_info:
            await service.upsert(user_id, _form())

        assert exc_info.value.errors == {"handle": "That handle already exists"}
        assert uow.rolled_back
        assert not uow.committed

    @pytest.mark.asyncio
    async def test_unrelated_unique_violation_is_reraised(
        self, service: ProfileService, uow: FakeUnitOfWork, user_id: UUID
    ):
        uow.profiles.get_by_user.return_value = None
        uow.profiles.get_by_handle.return_value = None
        uow.profiles.create.side_effect = IntegrityError(
            "INSERT ...", {}, Exception("UNIQUE constraint failed: profiles.user_id")
        )

        with pytest.raises(IntegrityError):
            await service.upsert(user_id, _form())

    @pytest.mark.asyncio
    async def test_rejects_over_long_status(
        self, service: ProfileService, uow: FakeUnitOfWork, user_id: UUID
    ):
        with pytest.raises(ValidationFailedError) as exc_info:
            await service.upsert(user_id, _form(status="x" * 256))

        assert exc_info.value.errors == {"status": "Must be at most 255 characters"}
        uow.profiles.create.assert_not_called()

    @pytest.mark.asyncio
    async def test_validation_errors(self, service: ProfileService, uow: FakeUnitOfWork, user_id: UUID):
        with pytest.raises(ValidationFailedError) as exc_info:
            await service.upsert(user_id, {"handle": "j", "website": "notaurl"})

        errors = exc_info.value.errors
        assert errors["handle"] == "Handle needs to be between 2 and 40 characters"
        assert errors["status"] == "Status field is required"
        assert errors["skills"] == "Skills field is required"
        assert errors["website"] == "Not a valid URL"
        uow.profiles.get_by_user.assert_not_called()


# --- experience & education ---


class TestExperience:
    @pytest.mark.asyncio
    async def test_add_inserts_at_front(
        self, service: ProfileService, uow: FakeUnitOfWork, profile: Profile, user_id: UUID
    ):
        older = Experience(title="Intern", company="Acme", from_date=date(2018, 1, 1))
        profile.experience.append(older)
        uow.profiles.get_by_user.return_value = profile
        uow.profiles.update.side_effect = echo

        result = await service.add_experience(
            user_id,
            {"title": "Engineer", "company": "Initech", "from": "2020-03-01", "current": True},
        )

        assert [e.title for e in result.experience] == ["Engineer", "Intern"]
        assert result.experience[0].from_date == date(2020, 3, 1)
        assert result.experience[0].current is True
        assert uow.committed

    @pytest.mark.asyncio
    async def test_add_requires_profile(
        self, service: ProfileService, uow: FakeUnitOfWork, user_id: UUID
    ):
        uow.profiles.get_by_user.return_value = None

        with pytest.raises(ProfileNotFoundError):
            await service.add_experience(
                user_id, {"title": "Engineer", "company": "Initech", "from": "2020-03-01"}
            )

    @pytest.mark.asyncio
    async def test_remove_unknown_entry_leaves_list_unchanged(
        self, service: ProfileService, uow: FakeUnitOfWork, profile: Profile, user_id: UUID
    ):
        entry = Experience(title="Engineer", company="Initech", from_date=date(2020, 3, 1))
        profile.experience.append(entry)
        uow.profiles.get_by_user.return_value = profile

        with pytest.raises(ExperienceNotFoundError) as exc_info:
            await service.remove_experience(user_id, uuid4())

        assert exc_info.value.status_code == 404
        assert profile.experience == [entry]
        uow.profiles.update.assert_not_called()

    @pytest.mark.asyncio
    async def test_remove_by_id(
        self, service: ProfileService, uow: FakeUnitOfWork, profile: Profile, user_id: UUID
    ):
        keep = Experience(title="Engineer", company="Initech", from_date=date(2020, 3, 1))
        drop = Experience(title="Intern", company="Acme", from_date=date(2018, 1, 1))
        profile.experience.extend([keep, drop])
        uow.profiles.get_by_user.return_value = profile
        uow.profiles.update.side_effect = echo

        result = await service.remove_experience(user_id, drop.id)

        assert result.experience == [keep]


class TestEducation:
    @pytest.mark.asyncio
    async def test_add_inserts_at_front(
        self, service: ProfileService, uow: FakeUnitOfWork, profile: Profile, user_id: UUID
    ):
        profile.education.append(
            Education(school="High", degree="Diploma", field_of_study="General", from_date=date(2010, 9, 1))
        )
        uow.profiles.get_by_user.return_value = profile
        uow.profiles.update.side_effect = echo

        result = await service.add_education(
            user_id,
            {
                "school": "MIT",
                "degree": "BSc",
                "fieldofstudy": "Computer Science",
                "from": "2014-09-01",
                "to": "2018-06-30",
            },
        )

        assert [e.school for e in result.education] == ["MIT", "High"]
        assert result.education[0].field_of_study == "Computer Science"
        assert result.education[0].to_date == date(2018, 6, 30)

    @pytest.mark.asyncio
    async def test_add_validates_fields(self, service: ProfileService, user_id: UUID):
        with pytest.raises(ValidationFailedError) as exc_info:
            await service.add_education(user_id, {"from": "yesterday"})

        errors = exc_info.value.errors
        assert set(errors) == {"school", "degree", "fieldofstudy", "from"}
        assert errors["from"] == "From date is not a valid date"

    @pytest.mark.asyncio
    async def test_remove_unknown_entry(
        self, service: ProfileService, uow: FakeUnitOfWork, profile: Profile, user_id: UUID
    ):
        uow.profiles.get_by_user.return_value = profile

        with pytest.raises(EducationNotFoundError):
            await service.remove_education(user_id, uuid4())


# --- delete_account ---


class TestDeleteAccount:
    @pytest.mark.asyncio
    async def test_deletes_profile_then_user(
        self, service: ProfileService, uow: FakeUnitOfWork, user_id: UUID
    ):
        await service.delete_account(user_id)

        uow.profiles.delete_for_user.assert_called_once_with(user_id)
        uow.users.delete.assert_called_once_with(user_id)
        assert uow.committed
