"""Pure reducers: ``(state, action) -> state``.

A reducer that does not handle an action returns the state object it was
given, so callers can detect "no change" by identity.
"""

from dataclasses import replace
from typing import Any

from client.state import (
    Action,
    ActionType,
    AuthState,
    PostState,
    ProfileState,
    RootState,
)


def auth_reducer(state: AuthState, action: Action) -> AuthState:
    if action.type == ActionType.SET_CURRENT_USER:
        user = dict(action.payload or {})
        return AuthState(is_authenticated=bool(user), user=user)
    return state


def errors_reducer(state: dict[str, Any], action: Action) -> dict[str, Any]:
    if action.type == ActionType.GET_ERRORS:
        return dict(action.payload or {})
    if action.type == ActionType.CLEAR_ERRORS:
        return {}
    return state


def profile_reducer(state: ProfileState, action: Action) -> ProfileState:
    kind = action.type
    if kind == ActionType.PROFILE_LOADING:
        return replace(state, loading=True)
    if kind == ActionType.GET_PROFILE:
        return replace(state, profile=action.payload, loading=False)
    if kind == ActionType.GET_PROFILES:
        return replace(state, profiles=action.payload, loading=False)
    if kind == ActionType.CLEAR_CURRENT_PROFILE:
        return replace(state, profile=None)
    if kind == ActionType.GET_ERRORS and state.loading:
        return replace(state, loading=False)
    return state


def post_reducer(state: PostState, action: Action) -> PostState:
    kind = action.type
    if kind == ActionType.POST_LOADING:
        return replace(state, loading=True)
    if kind == ActionType.GET_POSTS:
        return replace(state, posts=list(action.payload or []), loading=False)
    if kind == ActionType.GET_POST:
        return replace(state, post=action.payload or {}, loading=False)
    if kind == ActionType.ADD_POST:
        return replace(state, posts=[action.payload, *state.posts])
    if kind == ActionType.UPDATE_POST:
        updated = action.payload
        posts = [updated if p["_id"] == updated["_id"] else p for p in state.posts]
        post = updated if state.post.get("_id") == updated["_id"] else state.post
        return replace(state, posts=posts, post=post)
    if kind == ActionType.DELETE_POST:
        posts = [p for p in state.posts if p["_id"] != action.payload]
        post = {} if state.post.get("_id") == action.payload else state.post
        return replace(state, posts=posts, post=post)
    if kind == ActionType.GET_ERRORS and state.loading:
        return replace(state, loading=False)
    return state


def root_reducer(state: RootState, action: Action) -> RootState:
    """Apply every slice reducer; keep the same root object if nothing changed."""
    auth = auth_reducer(state.auth, action)
    errors = errors_reducer(state.errors, action)
    profile = profile_reducer(state.profile, action)
    post = post_reducer(state.post, action)

    if (
        auth is state.auth
        and errors is state.errors
        and profile is state.profile
        and post is state.post
    ):
        return state
    return RootState(auth=auth, errors=errors, profile=profile, post=post)
