"""Unit tests for the client reducers."""

from client.reducers import (
    auth_reducer,
    errors_reducer,
    post_reducer,
    profile_reducer,
    root_reducer,
)
from client.state import Action, ActionType, AuthState, PostState, ProfileState, RootState


def _post(post_id: str, **extra: object) -> dict[str, object]:
    return {"_id": post_id, "text": f"Post number {post_id}", "likes": [], **extra}


# --- auth ---


class TestAuthReducer:
    def test_sets_user_and_authenticated(self):
        claims = {"sub": "u1", "name": "Jane Doe"}

        state = auth_reducer(AuthState(), Action(ActionType.SET_CURRENT_USER, claims))

        assert state.is_authenticated is True
        assert state.user == claims

    def test_empty_user_logs_out(self):
        logged_in = AuthState(is_authenticated=True, user={"sub": "u1"})

        state = auth_reducer(logged_in, Action(ActionType.SET_CURRENT_USER, {}))

        assert state == AuthState()

    def test_ignores_other_actions(self):
        state = AuthState()

        assert auth_reducer(state, Action(ActionType.GET_POSTS, [])) is state


# --- errors ---


class TestErrorsReducer:
    def test_replaces_errors(self):
        state = errors_reducer({"old": "x"}, Action(ActionType.GET_ERRORS, {"email": "Email is invalid"}))

        assert state == {"email": "Email is invalid"}

    def test_clear(self):
        assert errors_reducer({"email": "x"}, Action(ActionType.CLEAR_ERRORS)) == {}

    def test_accepts_plain_string_action_type(self):
        state = errors_reducer({}, Action("GET_ERRORS", {"text": "Text field is required"}))  # type: ignore[arg-type]

        assert state == {"text": "Text field is required"}


# --- profile ---


class TestProfileReducer:
    def test_loading_then_loaded(self):
        state = profile_reducer(ProfileState(), Action(ActionType.PROFILE_LOADING))
        assert state.loading is True

        state = profile_reducer(state, Action(ActionType.GET_PROFILE, {"handle": "jdoe"}))

        assert state.loading is False
        assert state.profile == {"handle": "jdoe"}

    def test_get_profiles(self):
        state = profile_reducer(
            ProfileState(loading=True), Action(ActionType.GET_PROFILES, [{"handle": "jdoe"}])
        )

        assert state.profiles == [{"handle": "jdoe"}]
        assert state.loading is False

    def test_clear_current_profile(self):
        state = profile_reducer(
            ProfileState(profile={"handle": "jdoe"}), Action(ActionType.CLEAR_CURRENT_PROFILE)
        )

        assert state.profile is None

    def test_error_stops_loading(self):
        state = profile_reducer(
            ProfileState(loading=True), Action(ActionType.GET_ERRORS, {"noprofile": "x"})
        )

        assert state.loading is False
        assert state.profile is None


# --- posts ---


class TestPostReducer:
    def test_get_posts(self):
        state = post_reducer(PostState(loading=True), Action(ActionType.GET_POSTS, [_post("1")]))

        assert state.posts == [_post("1")]
        assert state.loading is False

    def test_add_post_prepends(self):
        state = PostState(posts=[_post("1")])

        state = post_reducer(state, Action(ActionType.ADD_POST, _post("2")))

        assert [p["_id"] for p in state.posts] == ["2", "1"]

    def test_update_post_replaces_in_list_and_detail(self):
        state = PostState(posts=[_post("1"), _post("2")], post=_post("2"))
        liked = _post("2", likes=[{"_id": "l1", "user": "u1"}])

        state = post_reducer(state, Action(ActionType.UPDATE_POST, liked))

        assert state.posts == [_post("1"), liked]
        assert state.post == liked

    def test_update_post_leaves_other_detail(self):
        state = PostState(posts=[_post("1")], post=_post("9"))

        state = post_reducer(state, Action(ActionType.UPDATE_POST, _post("1", text="edited text")))

        assert state.post == _post("9")

    def test_delete_post_filters_by_id(self):
        state = PostState(posts=[_post("1"), _post("2")])

        state = post_reducer(state, Action(ActionType.DELETE_POST, "1"))

        assert [p["_id"] for p in state.posts] == ["2"]

    def test_delete_clears_the_open_post(self):
        state = PostState(posts=[_post("1"), _post("2")], post=_post("1"))

        state = post_reducer(state, Action(ActionType.DELETE_POST, "1"))

        assert state.post == {}

    def test_delete_keeps_a_different_open_post(self):
        state = PostState(posts=[_post("1"), _post("2")], post=_post("2"))

        state = post_reducer(state, Action(ActionType.DELETE_POST, "1"))

        assert state.post == _post("2")

    def test_error_without_loading_is_no_change(self):
        state = PostState()

        assert post_reducer(state, Action(ActionType.GET_ERRORS, {})) is state


# --- root ---


class TestRootReducer:
    def test_unhandled_action_keeps_state_object(self):
        state = RootState()

        assert root_reducer(state, Action("SOMETHING_ELSE")) is state  # type: ignore[arg-type]

    def test_only_touched_slices_change(self):
        state = RootState()

        new_state = root_reducer(state, Action(ActionType.POST_LOADING))

        assert new_state.post.loading is True
        assert new_state.auth is state.auth
        assert new_state.profile is state.profile
        assert new_state.errors is state.errors

    def test_errors_reach_every_loading_slice(self):
        state = RootState(
            profile=ProfileState(loading=True),
            post=PostState(loading=True),
        )

        new_state = root_reducer(state, Action(ActionType.GET_ERRORS, {"error": "boom"}))

        assert new_state.errors == {"error": "boom"}
        assert new_state.profile.loading is False
        assert new_state.post.loading is False
