"""In-process store holding the application state.

All mutation goes through ``dispatch``. The store is driven from a single
asyncio event loop; it takes no locks, so a multi-threaded host must
serialize calls to ``dispatch`` itself.
"""

import logging
from collections.abc import Callable

from user_directory.application.state.actions import Action, ToastShown
from user_directory.application.state.reducers import AppState, reduce

logger = logging.getLogger(__name__)

Listener = Callable[[AppState, Action], None]


class UserDirectoryStore:
    """Holds ``AppState`` and applies actions through the reducer."""

    def __init__(self, initial: AppState | None = None) -> None:
        self._state = initial or AppState()
        self._listeners: list[Listener] = []

    @property
    def state(self) -> AppState:
        return self._state

    def dispatch(self, action: Action) -> AppState:
        logger.debug("dispatch %s", type(action).__name__)
        self._state = reduce(self._state, action)
        for listener in list(self._listeners):
            listener(self._state, action)
        return self._state

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register a listener; returns a function that unregisters it."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe


def log_notifications(state: AppState, action: Action) -> None:
    """Listener that records every notification shown to the user."""
    if isinstance(action, ToastShown):
        logger.info("Notification (%s): %s", action.kind.value, action.message)
