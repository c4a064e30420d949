"""Transition handlers for the undox history reducer.

Each handler takes the current history state and an incoming action and
returns a new history state. Handlers never mutate their input; a no-op
transition returns the very same state object.
"""

from collections.abc import Mapping
from functools import reduce
from typing import Any

from ..models import GroupAction, RedoAction, UndoAction, UndoxState, get_action_type
from ..utils.logging import get_logger
from .base import Comparator, Reducer, calculate_state

logger = get_logger(__name__)


def n_past_states_exist(state: UndoxState, n_states: int) -> bool:
    """Check whether at least n entries precede the present."""
    return state.index >= n_states


def n_future_states_exist(state: UndoxState, n_states: int) -> bool:
    """Check whether at least n entries follow the present."""
    return len(state.history) - 1 - state.index >= n_states


def undo(reducer: Reducer, state: UndoxState, action: UndoAction) -> UndoxState:
    """Move the present back by ``action.payload`` entries.

    When fewer entries exist the index is clamped to the start. The present
    state is rebuilt by replaying the history from the beginning.

    Args:
        reducer: Caller reducer
        state: Current history state
        action: Undo action

    Returns:
        History state with the new index and present
    """
    n_states = action.payload
    index = state.index - n_states if n_past_states_exist(state, n_states) else 0

    logger.debug(f"Undo {n_states} step(s): index {state.index} -> {index}")

    return state.model_copy(
        update={
            "index": index,
            "present": calculate_state(reducer, state.history[: index + 1]),
        }
    )


def redo(reducer: Reducer, state: UndoxState, action: RedoAction) -> UndoxState:
    """Move the present forward by ``action.payload`` entries.

    When fewer entries exist the index is clamped to the end. Only the
    traversed entries are applied on top of the current present.

    Args:
        reducer: Caller reducer
        state: Current history state
        action: Redo action

    Returns:
        History state with the new index and present
    """
    n_states = action.payload
    latest_future = state.history[state.index + 1 : state.index + 1 + n_states]

    if n_future_states_exist(state, n_states):
        index = state.index + n_states
    else:
        index = len(state.history) - 1

    logger.debug(f"Redo {n_states} step(s): index {state.index} -> {index}")

    return state.model_copy(
        update={
            "index": index,
            "present": calculate_state(reducer, latest_future, state.present),
        }
    )


def group(
    state: UndoxState,
    action: GroupAction,
    reducer: Reducer,
    comparator: Comparator,
) -> UndoxState:
    """Apply several actions and record them as one history entry.

    Any future entries are discarded. A group that leaves the present
    unchanged is not recorded at all.

    Args:
        state: Current history state
        action: Group action
        reducer: Caller reducer
        comparator: No-op detector

    Returns:
        New history state, or ``state`` itself for a no-op group
    """
    next_state = reduce(reducer, action.payload, state.present)

    if comparator(state.present, next_state):
        logger.debug(f"Group of {len(action.payload)} action(s) left state unchanged, skipped")
        return state

    return UndoxState(
        history=(*state.history[: state.index + 1], tuple(action.payload)),
        index=state.index + 1,
        present=next_state,
    )


def delegate(
    state: UndoxState,
    action: Any,
    reducer: Reducer,
    ignored_actions: Mapping[str, bool],
    comparator: Comparator,
) -> UndoxState:
    """Apply a caller action through the wrapped reducer.

    A real change always discards the future. Ignored actions update the
    present without being recorded.

    Args:
        state: Current history state
        action: Caller action
        reducer: Caller reducer
        ignored_actions: Mapping of action tags that must not be recorded
        comparator: No-op detector

    Returns:
        New history state, or ``state`` itself for a no-op action
    """
    next_present = reducer(state.present, action)

    if comparator(state.present, next_present):
        return state

    history = state.history[: state.index + 1]
    index = state.index

    action_type = get_action_type(action)
    if isinstance(action_type, str) and ignored_actions.get(action_type):
        logger.debug(f"Action {action_type} is ignored, not recorded in history")
    else:
        history = (*history, action)
        index += 1

    return UndoxState(history=history, index=index, present=next_present)
