"""Selectors for reading past and future states out of a history.

States are reconstructed on every call by replaying recorded actions through
the caller's reducer; nothing is cached.
"""

from functools import reduce
from typing import Any

from ..models import UndoxState
from .base import Reducer, flatten, is_group


class HistorySelectors:
    """Read-only derivations over an ``UndoxState``.

    Attributes:
        reducer: Caller reducer used to replay actions
    """

    def __init__(self, reducer: Reducer) -> None:
        """Initialize the selectors.

        Args:
            reducer: Caller reducer
        """
        self.reducer = reducer

    def _apply_entry(self, state: Any, entry: Any) -> Any:
        if is_group(entry):
            return reduce(self.reducer, entry, state)
        return self.reducer(state, entry)

    @staticmethod
    def get_present_state(state: UndoxState) -> Any:
        """Get the present state."""
        return state.present

    @staticmethod
    def get_present_action(state: UndoxState) -> Any:
        """Get the present entry (an action or a group tuple)."""
        return state.history[state.index]

    @staticmethod
    def get_past_actions(state: UndoxState) -> list[Any]:
        """Get all actions before the present, groups expanded."""
        return flatten(state.history[: state.index])

    @staticmethod
    def get_future_actions(state: UndoxState) -> list[Any]:
        """Get all actions after the present, groups expanded."""
        return flatten(state.history[state.index + 1 :])

    def get_past_states(self, state: UndoxState) -> list[Any]:
        """Reconstruct one state per past entry.

        The first entry is replayed from the reducer's default (None).

        Args:
            state: History state

        Returns:
            States in history order, oldest first
        """
        states: list[Any] = []
        current = None
        for entry in state.history[: state.index]:
            current = self._apply_entry(current, entry)
            states.append(current)
        return states

    def get_future_states(self, state: UndoxState) -> list[Any]:
        """Reconstruct one state per future entry.

        Replay starts from the present state.

        Args:
            state: History state

        Returns:
            States in history order, nearest first
        """
        states: list[Any] = []
        current = state.present
        for entry in state.history[state.index + 1 :]:
            current = self._apply_entry(current, entry)
            states.append(current)
        return states

    @staticmethod
    def can_undo(state: UndoxState) -> bool:
        """Check whether any past entry exists."""
        return state.index > 0

    @staticmethod
    def can_redo(state: UndoxState) -> bool:
        """Check whether any future entry exists."""
        return state.index < len(state.history) - 1


def create_selectors(reducer: Reducer) -> HistorySelectors:
    """Create selectors bound to a reducer.

    Args:
        reducer: Caller reducer

    Returns:
        HistorySelectors instance
    """
    return HistorySelectors(reducer)
