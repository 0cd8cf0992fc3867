"""Pydantic schemas for Posts API."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field


class PostRequest(BaseModel):
    """Post or comment form. Name and avatar default to the author's account."""

    text: str | None = None
    name: str | None = None
    avatar: str | None = None


class LikeResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: UUID = Field(alias="_id")
    user_id: UUID = Field(alias="user")


class CommentResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: UUID = Field(alias="_id")
    user_id: UUID = Field(alias="user")
    text: str
    name: str | None = None
    avatar: str | None = None
    created_at: datetime = Field(alias="date")


class PostResponse(BaseModel):
    """Schema for a post document."""

    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "_id": "789e4567-e89b-12d3-a456-426614174000",
                "user": "123e4567-e89b-12d3-a456-426614174000",
                "text": "Hello developers, what are you building?",
                "name": "Jane Doe",
                "avatar": "//www.gravatar.com/avatar/...",
                "likes": [],
                "comments": [],
                "date": "2026-01-28T10:00:00",
            }
        },
    )

    id: UUID = Field(alias="_id")
    user_id: UUID = Field(alias="user")
    text: str
    name: str | None = None
    avatar: str | None = None
    likes: list[LikeResponse] = Field(default_factory=list)
    comments: list[CommentResponse] = Field(default_factory=list)
    created_at: datetime = Field(alias="date")
