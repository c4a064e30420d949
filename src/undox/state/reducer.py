"""The undox history reducer.

``undox`` wraps a caller reducer and returns a new reducer whose state is an
``UndoxState``. Undo, redo and group actions are handled here; every other
action is delegated to the caller reducer and recorded in the history.
"""

from collections.abc import Mapping
from types import MappingProxyType
from typing import Any, Callable, Optional

from ..config.schemas import UndoxConfig
from ..models import Action, GroupAction, RedoAction, UndoAction, UndoxState, parse_action
from . import handlers
from .base import (
    DEFAULT_INIT_ACTION,
    Comparator,
    Reducer,
    create_initial_state,
    default_comparator,
    resolve_comparator,
)

HistoryReducer = Callable[[Optional[UndoxState], Any], UndoxState]


def undox(
    reducer: Reducer,
    init_action: Any = None,
    comparator: Optional[Comparator] = None,
    ignored_actions: Optional[Mapping[str, bool]] = None,
) -> HistoryReducer:
    """Wrap a reducer with undo, redo and group support.

    Args:
        reducer: Caller reducer, called once with None for the init action
        init_action: Action seeding the initial state (default: ``undox/INIT``)
        comparator: No-op detector (default: identity or equality)
        ignored_actions: Action tags that update the present without being recorded

    Returns:
        History reducer ``(state, action) -> UndoxState``
    """
    if init_action is None:
        init_action = DEFAULT_INIT_ACTION
    if comparator is None:
        comparator = default_comparator
    ignored = MappingProxyType(dict(ignored_actions or {}))

    initial_state = create_initial_state(reducer, init_action)

    def history_reducer(state: Optional[UndoxState], action: Any) -> UndoxState:
        if state is None:
            state = initial_state

        action = parse_action(action)

        if isinstance(action, UndoAction):
            return handlers.undo(reducer, state, action)
        if isinstance(action, RedoAction):
            return handlers.redo(reducer, state, action)
        if isinstance(action, GroupAction):
            return handlers.group(state, action, reducer, comparator)
        return handlers.delegate(state, action, reducer, ignored, comparator)

    history_reducer.initial_state = initial_state  # type: ignore[attr-defined]
    return history_reducer


def undox_from_config(reducer: Reducer, config: UndoxConfig) -> HistoryReducer:
    """Build a history reducer from configuration.

    Args:
        reducer: Caller reducer
        config: Validated undox configuration

    Returns:
        History reducer
    """
    return undox(
        reducer,
        init_action=Action(type=config.init_action_type),
        comparator=resolve_comparator(config.comparator),
        ignored_actions=config.ignored_actions,
    )
