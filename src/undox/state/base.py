"""Base history helpers for undox.

This module provides the reducer and comparator types plus the replay
primitives shared by the transition handlers and the selectors.
"""

from collections.abc import Iterable
from functools import reduce
from typing import Any, Callable, Optional

from ..models import Action, UndoxState

# Caller reducer: invoked with None once to build the initial state
Reducer = Callable[[Optional[Any], Any], Any]

# Returns True when two states are considered equal (no-op transition)
Comparator = Callable[[Any, Any], bool]

DEFAULT_INIT_ACTION = Action(type="undox/INIT")


def default_comparator(s1: Any, s2: Any) -> bool:
    """Compare two states by identity, then by value.

    Args:
        s1: Previous state
        s2: Next state

    Returns:
        True if the states are equal
    """
    return s1 is s2 or s1 == s2


def identity_comparator(s1: Any, s2: Any) -> bool:
    """Compare two states by identity only."""
    return s1 is s2


def never_equal(s1: Any, s2: Any) -> bool:
    """Treat every transition as a change, recording all actions."""
    return False


COMPARATORS: dict[str, Comparator] = {
    "equality": default_comparator,
    "identity": identity_comparator,
    "never": never_equal,
}


def resolve_comparator(name: str) -> Comparator:
    """Look up a comparator by name.

    Args:
        name: One of "equality", "identity", "never"

    Returns:
        Comparator function

    Raises:
        ValueError: If the name is unknown
    """
    try:
        return COMPARATORS[name]
    except KeyError:
        raise ValueError(
            f"Unknown comparator: {name} (expected one of {', '.join(sorted(COMPARATORS))})"
        ) from None


def is_group(entry: Any) -> bool:
    """Check whether a history entry is a group of actions."""
    return isinstance(entry, (tuple, list))


def flatten(entries: Iterable[Any]) -> list[Any]:
    """Expand group entries into their member actions, keeping order.

    Args:
        entries: History entries

    Returns:
        Flat list of actions
    """
    actions: list[Any] = []
    for entry in entries:
        if is_group(entry):
            actions.extend(entry)
        else:
            actions.append(entry)
    return actions


def calculate_state(reducer: Reducer, entries: Iterable[Any], state: Any = None) -> Any:
    """Fold the reducer over history entries.

    Args:
        reducer: Caller reducer
        entries: History entries (groups are expanded)
        state: Starting state; None replays from the reducer's default

    Returns:
        Resulting state
    """
    return reduce(reducer, flatten(entries), state)


def create_initial_state(reducer: Reducer, init_action: Any = DEFAULT_INIT_ACTION) -> UndoxState:
    """Create the initial history state.

    Args:
        reducer: Caller reducer
        init_action: Action used to seed the present state

    Returns:
        History with the init action as its only entry
    """
    return UndoxState(
        history=(init_action,),
        index=0,
        present=reducer(None, init_action),
    )
