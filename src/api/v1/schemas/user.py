"""Pydantic schemas for Users API."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field


class RegisterRequest(BaseModel):
    """Registration form. Presence and format are checked by the service."""

    name: str | None = None
    email: str | None = None
    password: str | None = None
    password2: str | None = None


class LoginRequest(BaseModel):
    """Login form."""

    email: str | None = None
    password: str | None = None


class UserResponse(BaseModel):
    """Schema for a registered user. The password hash is never exposed."""

    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "_id": "123e4567-e89b-12d3-a456-426614174000",
                "name": "Jane Doe",
                "email": "jane@example.com",
                "avatar": "//www.gravatar.com/avatar/9e26471d35a78862c17e467d87cddedf?s=200&r=pg&d=mm",
                "date": "2026-01-28T10:00:00",
            }
        },
    )

    id: UUID = Field(alias="_id")
    name: str
    email: str
    avatar: str | None = None
    created_at: datetime = Field(alias="date")


class TokenResponse(BaseModel):
    """Successful login."""

    success: bool = True
    token: str


class CurrentUserResponse(BaseModel):
    """Identity of the authenticated caller."""

    id: UUID
    name: str | None = None
    email: str
    avatar: str | None = None
