"""Profile domain entities."""

from dataclasses import dataclass, field
from datetime import date, datetime
from uuid import UUID, uuid4


@dataclass(frozen=True, slots=True)
class ProfileOwner:
    """Read-only snapshot of the user a profile belongs to."""

    id: UUID
    name: str
    avatar: str | None = None


@dataclass
class SocialLinks:
    """Links to the owner's accounts on other networks."""

    youtube: str | None = None
    twitter: str | None = None
    facebook: str | None = None
    linkedin: str | None = None
    instagram: str | None = None

    def to_dict(self) -> dict[str, str]:
        """Only the links that are set."""
        return {key: value for key, value in vars(self).items() if value}


@dataclass
class Experience:
    """A job held by the profile owner."""

    title: str
    company: str
    from_date: date
    id: UUID = field(default_factory=uuid4)
    location: str | None = None
    to_date: date | None = None
    current: bool = False
    description: str | None = None


@dataclass
class Education:
    """A school attended by the profile owner."""

    school: str
    degree: str
    field_of_study: str
    from_date: date
    id: UUID = field(default_factory=uuid4)
    to_date: date | None = None
    current: bool = False
    description: str | None = None


@dataclass
class Profile:
    """Domain entity for a user's public profile.

    Experience and education are ordered newest-first: new entries go to
    the front of their list.
    """

    user_id: UUID
    handle: str
    status: str
    id: UUID = field(default_factory=uuid4)
    company: str | None = None
    website: str | None = None
    location: str | None = None
    bio: str | None = None
    github_username: str | None = None
    skills: list[str] = field(default_factory=list)
    social: SocialLinks = field(default_factory=SocialLinks)
    experience: list[Experience] = field(default_factory=list)
    education: list[Education] = field(default_factory=list)
    owner: ProfileOwner | None = None
    created_at: datetime = field(default_factory=datetime.utcnow)

    def add_experience(self, entry: Experience) -> None:
        """Put a new experience entry at the front of the list."""
        self.experience.insert(0, entry)

    def remove_experience(self, entry_id: UUID) -> bool:
        """Remove an experience entry by id. Returns False if absent."""
        return _remove_by_id(self.experience, entry_id)

    def add_education(self, entry: Education) -> None:
        """Put a new education entry at the front of the list."""
        self.education.insert(0, entry)

    def remove_education(self, entry_id: UUID) -> bool:
        """Remove an education entry by id. Returns False if absent."""
        return _remove_by_id(self.education, entry_id)


def _remove_by_id(entries: list, entry_id: UUID) -> bool:
    for index, entry in enumerate(entries):
        if entry.id == entry_id:
            del entries[index]
            return True
    return False
