"""State container: holds the current tree and notifies subscribers."""

from typing import Callable

import structlog

from client.reducers import root_reducer
from client.state import Action, RootState

logger = structlog.get_logger()

Reducer = Callable[[RootState, Action], RootState]
Listener = Callable[[], None]


class Store:
    def __init__(
        self,
        reducer: Reducer = root_reducer,
        initial_state: RootState | None = None,
    ) -> None:
        self._reducer = reducer
        self._state = initial_state or RootState()
        self._listeners: list[Listener] = []

    def get_state(self) -> RootState:
        return self._state

    def dispatch(self, action: Action) -> Action:
        """Run the reducer, then call every subscriber."""
        self._state = self._reducer(self._state, action)
        logger.debug("action_dispatched", action_type=str(action.type))
        for listener in list(self._listeners):
            listener()
        return action

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register a listener. Returns a function that removes it."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe
