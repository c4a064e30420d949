"""History store for undox.

This module provides a small single-writer container that holds the current
history state and serializes dispatches.
"""

import threading
from collections.abc import Mapping, Sequence
from contextlib import contextmanager
from typing import Any, Callable, Optional

from ..config.schemas import UndoxConfig
from ..models import Action, UndoxState, group, redo, undo
from ..utils.logging import get_logger
from .base import Comparator, Reducer, resolve_comparator
from .reducer import undox
from .selectors import HistorySelectors, create_selectors

logger = get_logger(__name__)

Listener = Callable[[UndoxState], None]


class HistoryStore:
    """Holds an ``UndoxState`` and applies actions to it.

    Dispatches are serialized with a re-entrant lock so the store can be
    shared between threads. Subscribers are notified, in dispatch order and
    while the lock is held, after every dispatch or reset that produced a new
    state. A listener must not wait on another thread that dispatches to the
    same store.

    Attributes:
        reducer: Caller reducer
        selectors: Selectors bound to the caller reducer
    """

    def __init__(
        self,
        reducer: Reducer,
        init_action: Any = None,
        comparator: Optional[Comparator] = None,
        ignored_actions: Optional[Mapping[str, bool]] = None,
    ) -> None:
        """Initialize the store.

        Args:
            reducer: Caller reducer
            init_action: Action seeding the initial state
            comparator: No-op detector
            ignored_actions: Action tags that are never recorded
        """
        self.reducer = reducer
        self.selectors: HistorySelectors = create_selectors(reducer)
        self._history_reducer = undox(reducer, init_action, comparator, ignored_actions)
        self._state: UndoxState = self._history_reducer.initial_state  # type: ignore[attr-defined]
        self._listeners: list[Listener] = []
        self._version = 0
        self._lock = threading.RLock()

    @classmethod
    def from_config(cls, reducer: Reducer, config: UndoxConfig) -> "HistoryStore":
        """Create a store from configuration.

        Args:
            reducer: Caller reducer
            config: Validated undox configuration

        Returns:
            New store
        """
        return cls(
            reducer,
            init_action=Action(type=config.init_action_type),
            comparator=resolve_comparator(config.comparator),
            ignored_actions=config.ignored_actions,
        )

    @property
    def state(self) -> UndoxState:
        """Get the current history state."""
        return self._state

    @property
    def present(self) -> Any:
        """Get the present state value."""
        return self._state.present

    def dispatch(self, action: Any) -> UndoxState:
        """Apply an action and store the resulting history state.

        Args:
            action: Caller action or undo/redo/group action

        Returns:
            The new history state
        """
        with self._lock:
            previous = self._state
            state = self._history_reducer(previous, action)
            if state is previous:
                logger.debug("Dispatch produced no change")
                return state
            self._commit(state)
            return state

    def _commit(self, state: UndoxState) -> None:
        """Store a new state and notify listeners. Caller holds the lock.

        Listeners run under the lock so deliveries follow dispatch order. A
        listener that dispatches again supersedes the state being delivered,
        and the remaining listeners only see the newer state.
        """
        self._state = state
        self._version += 1
        version = self._version

        for listener in list(self._listeners):
            if self._version != version:
                logger.debug("Delivery superseded by a newer dispatch")
                break
            listener(state)

    def undo(self, n_states: int = 1) -> UndoxState:
        """Undo ``n_states`` steps."""
        return self.dispatch(undo(n_states))

    def redo(self, n_states: int = 1) -> UndoxState:
        """Redo ``n_states`` steps."""
        return self.dispatch(redo(n_states))

    def group(self, actions: Sequence[Any]) -> UndoxState:
        """Apply actions as a single history step."""
        return self.dispatch(group(actions))

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register a listener called with each new history state.

        Args:
            listener: Callback receiving the new state

        Returns:
            Function that removes the listener
        """
        with self._lock:
            self._listeners.append(listener)

        def unsubscribe() -> None:
            with self._lock:
                if listener in self._listeners:
                    self._listeners.remove(listener)

        return unsubscribe

    def reset(self) -> UndoxState:
        """Discard all history and return to the initial state.

        Listeners are notified unless the store already holds the initial state.

        Returns:
            The initial history state
        """
        with self._lock:
            initial_state = self._history_reducer.initial_state  # type: ignore[attr-defined]
            if self._state is not initial_state:
                self._commit(initial_state)
            return initial_state

    @contextmanager
    def atomic_update(self):
        """Context manager holding the dispatch lock.

        Yields:
            The store itself
        """
        self._lock.acquire()
        try:
            yield self
        finally:
            self._lock.release()
