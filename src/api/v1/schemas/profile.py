"""Pydantic schemas for Profile API.

Wire names follow the stored documents: ``_id``, ``user``, ``from``,
``to``, ``fieldofstudy``, ``githubusername`` and ``date``.
"""

from datetime import date, datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field


class ProfileRequest(BaseModel):
    """Create-or-update form. Skills may be a comma-separated string."""

    handle: str | None = None
    company: str | None = None
    website: str | None = None
    location: str | None = None
    status: str | None = None
    skills: str | list[str] | None = None
    bio: str | None = None
    githubusername: str | None = None
    youtube: str | None = None
    twitter: str | None = None
    facebook: str | None = None
    linkedin: str | None = None
    instagram: str | None = None


class ExperienceRequest(BaseModel):
    """Experience form."""

    model_config = ConfigDict(populate_by_name=True)

    title: str | None = None
    company: str | None = None
    location: str | None = None
    from_date: str | None = Field(None, alias="from")
    to_date: str | None = Field(None, alias="to")
    current: bool | None = None
    description: str | None = None


class EducationRequest(BaseModel):
    """Education form."""

    model_config = ConfigDict(populate_by_name=True)

    school: str | None = None
    degree: str | None = None
    fieldofstudy: str | None = None
    from_date: str | None = Field(None, alias="from")
    to_date: str | None = Field(None, alias="to")
    current: bool | None = None
    description: str | None = None


class ProfileOwnerResponse(BaseModel):
    """The ``user`` a profile belongs to."""

    model_config = ConfigDict(populate_by_name=True)

    id: UUID = Field(alias="_id")
    name: str | None = None
    avatar: str | None = None


class ExperienceResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: UUID = Field(alias="_id")
    title: str
    company: str
    location: str | None = None
    from_date: date = Field(alias="from")
    to_date: date | None = Field(None, alias="to")
    current: bool = False
    description: str | None = None


class EducationResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: UUID = Field(alias="_id")
    school: str
    degree: str
    field_of_study: str = Field(alias="fieldofstudy")
    from_date: date = Field(alias="from")
    to_date: date | None = Field(None, alias="to")
    current: bool = False
    description: str | None = None


class ProfileResponse(BaseModel):
    """Schema for a profile document."""

    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "_id": "456e4567-e89b-12d3-a456-426614174000",
                "user": {
                    "_id": "123e4567-e89b-12d3-a456-426614174000",
                    "name": "Jane Doe",
                    "avatar": "//www.gravatar.com/avatar/...",
                },
                "handle": "jdoe",
                "status": "Developer",
                "skills": ["Python", "SQL"],
                "social": {"twitter": "https://twitter.com/jdoe"},
                "experience": [],
                "education": [],
                "date": "2026-01-28T10:00:00",
            }
        },
    )

    id: UUID = Field(alias="_id")
    user: ProfileOwnerResponse
    handle: str
    company: str | None = None
    website: str | None = None
    location: str | None = None
    status: str
    skills: list[str] = Field(default_factory=list)
    bio: str | None = None
    github_username: str | None = Field(None, alias="githubusername")
    social: dict[str, str] = Field(default_factory=dict)
    experience: list[ExperienceResponse] = Field(default_factory=list)
    education: list[EducationResponse] = Field(default_factory=list)
    created_at: datetime = Field(alias="date")
