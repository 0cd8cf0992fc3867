"""Client state tree and the messages that change it."""

from dataclasses import dataclass, field
from enum import StrEnum
from typing import Any


class ActionType(StrEnum):
    SET_CURRENT_USER = "SET_CURRENT_USER"
    GET_ERRORS = "GET_ERRORS"
    CLEAR_ERRORS = "CLEAR_ERRORS"
    PROFILE_LOADING = "PROFILE_LOADING"
    GET_PROFILE = "GET_PROFILE"
    GET_PROFILES = "GET_PROFILES"
    CLEAR_CURRENT_PROFILE = "CLEAR_CURRENT_PROFILE"
    POST_LOADING = "POST_LOADING"
    GET_POSTS = "GET_POSTS"
    GET_POST = "GET_POST"
    ADD_POST = "ADD_POST"
    UPDATE_POST = "UPDATE_POST"
    DELETE_POST = "DELETE_POST"


@dataclass(frozen=True)
class Action:
    type: ActionType
    payload: Any = None


@dataclass(frozen=True)
class AuthState:
    """Who is logged in. ``user`` holds the decoded token claims."""

    is_authenticated: bool = False
    user: dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class ProfileState:
    profile: dict[str, Any] | None = None
    profiles: list[dict[str, Any]] | None = None
    loading: bool = False


@dataclass(frozen=True)
class PostState:
    posts: list[dict[str, Any]] = field(default_factory=list)
    post: dict[str, Any] = field(default_factory=dict)
    loading: bool = False


@dataclass(frozen=True)
class RootState:
    auth: AuthState = field(default_factory=AuthState)
    errors: dict[str, Any] = field(default_factory=dict)
    profile: ProfileState = field(default_factory=ProfileState)
    post: PostState = field(default_factory=PostState)
