"""Action creators.

Each creator issues one request through the ``ApiClient`` and dispatches
the result: the typed "loaded" message on success, ``GET_ERRORS`` with the
server's error map on failure. Creators that fetch collections or single
documents announce themselves with a loading message first.
"""

from typing import Any, Awaitable, Callable, Mapping

import structlog
from jose import jwt

from client.api import ApiClient, ApiError
from client.state import Action, ActionType

logger = structlog.get_logger()

Dispatch = Callable[[Action], Any]

_RESPONSE = object()


async def _run(
    dispatch: Dispatch,
    request: Awaitable[Any],
    success: ActionType,
    payload: Any = _RESPONSE,
) -> Any:
    """Await the request and dispatch its outcome. Returns the response data, or None."""
    try:
        data = await request
    except ApiError as e:
        dispatch(Action(ActionType.GET_ERRORS, e.data))
        return None
    dispatch(Action(success, data if payload is _RESPONSE else payload))
    return data


# Auth


async def register_user(api: ApiClient, dispatch: Dispatch, user_data: Mapping[str, Any]) -> Any:
    """Register a new account. Clears stale form errors on success."""
    return await _run(
        dispatch,
        api.post("/api/users/register", json=dict(user_data)),
        ActionType.CLEAR_ERRORS,
        payload=None,
    )


async def login_user(api: ApiClient, dispatch: Dispatch, user_data: Mapping[str, Any]) -> None:
    """Log in, keep the token on the client and publish its claims as the current user."""
    try:
        data = await api.post("/api/users/login", json=dict(user_data))
    except ApiError as e:
        dispatch(Action(ActionType.GET_ERRORS, e.data))
        return

    token: str = data["token"]
    api.set_auth_token(token)
    # The server verifies the signature; the client only reads the claims.
    claims = jwt.get_unverified_claims(token.removeprefix("Bearer ").strip())
    logger.info("user_logged_in", user_id=claims.get("sub"))
    dispatch(Action(ActionType.SET_CURRENT_USER, claims))


def logout_user(api: ApiClient, dispatch: Dispatch) -> None:
    api.set_auth_token(None)
    dispatch(Action(ActionType.SET_CURRENT_USER, {}))


# Profile


async def get_current_profile(api: ApiClient, dispatch: Dispatch) -> Any:
    dispatch(Action(ActionType.PROFILE_LOADING))
    return await _run(dispatch, api.get("/api/profile"), ActionType.GET_PROFILE)


async def get_profiles(api: ApiClient, dispatch: Dispatch) -> Any:
    dispatch(Action(ActionType.PROFILE_LOADING))
    return await _run(dispatch, api.get("/api/profile/all"), ActionType.GET_PROFILES)


async def get_profile_by_handle(api: ApiClient, dispatch: Dispatch, handle: str) -> Any:
    dispatch(Action(ActionType.PROFILE_LOADING))
    return await _run(dispatch, api.get(f"/api/profile/handle/{handle}"), ActionType.GET_PROFILE)


async def create_profile(
    api: ApiClient, dispatch: Dispatch, profile_data: Mapping[str, Any]
) -> Any:
    """Create or update the current user's profile."""
    return await _run(
        dispatch,
        api.post("/api/profile", json=dict(profile_data)),
        ActionType.GET_PROFILE,
    )


async def add_experience(api: ApiClient, dispatch: Dispatch, exp_data: Mapping[str, Any]) -> Any:
    return await _run(
        dispatch,
        api.post("/api/profile/experience", json=dict(exp_data)),
        ActionType.GET_PROFILE,
    )


async def add_education(api: ApiClient, dispatch: Dispatch, edu_data: Mapping[str, Any]) -> Any:
    return await _run(
        dispatch,
        api.post("/api/profile/education", json=dict(edu_data)),
        ActionType.GET_PROFILE,
    )


async def delete_experience(api: ApiClient, dispatch: Dispatch, exp_id: str) -> Any:
    return await _run(
        dispatch,
        api.delete(f"/api/profile/experience/{exp_id}"),
        ActionType.GET_PROFILE,
    )


async def delete_education(api: ApiClient, dispatch: Dispatch, edu_id: str) -> Any:
    return await _run(
        dispatch,
        api.delete(f"/api/profile/education/{edu_id}"),
        ActionType.GET_PROFILE,
    )


async def delete_account(api: ApiClient, dispatch: Dispatch) -> None:
    """Delete profile and user, then log out locally."""
    try:
        await api.delete("/api/profile")
    except ApiError as e:
        dispatch(Action(ActionType.GET_ERRORS, e.data))
        return

    api.set_auth_token(None)
    dispatch(Action(ActionType.SET_CURRENT_USER, {}))


def clear_current_profile(dispatch: Dispatch) -> None:
    dispatch(Action(ActionType.CLEAR_CURRENT_PROFILE))


# Posts


async def add_post(api: ApiClient, dispatch: Dispatch, post_data: Mapping[str, Any]) -> Any:
    return await _run(dispatch, api.post("/api/posts", json=dict(post_data)), ActionType.ADD_POST)


async def get_posts(api: ApiClient, dispatch: Dispatch) -> Any:
    dispatch(Action(ActionType.POST_LOADING))
    return await _run(dispatch, api.get("/api/posts"), ActionType.GET_POSTS)


async def get_post(api: ApiClient, dispatch: Dispatch, post_id: str) -> Any:
    dispatch(Action(ActionType.POST_LOADING))
    return await _run(dispatch, api.get(f"/api/posts/{post_id}"), ActionType.GET_POST)


async def delete_post(api: ApiClient, dispatch: Dispatch, post_id: str) -> Any:
    return await _run(
        dispatch,
        api.delete(f"/api/posts/{post_id}"),
        ActionType.DELETE_POST,
        payload=post_id,
    )


async def add_like(api: ApiClient, dispatch: Dispatch, post_id: str) -> Any:
    return await _run(dispatch, api.post(f"/api/posts/like/{post_id}"), ActionType.UPDATE_POST)


async def remove_like(api: ApiClient, dispatch: Dispatch, post_id: str) -> Any:
    return await _run(dispatch, api.delete(f"/api/posts/unlike/{post_id}"), ActionType.UPDATE_POST)


async def add_comment(
    api: ApiClient, dispatch: Dispatch, post_id: str, comment_data: Mapping[str, Any]
) -> Any:
    return await _run(
        dispatch,
        api.post(f"/api/posts/comment/{post_id}", json=dict(comment_data)),
        ActionType.GET_POST,
    )


async def delete_comment(
    api: ApiClient, dispatch: Dispatch, post_id: str, comment_id: str
) -> Any:
    return await _run(
        dispatch,
        api.delete(f"/api/posts/comment/{post_id}/{comment_id}"),
        ActionType.GET_POST,
    )
