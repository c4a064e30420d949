"""History state management for undox."""

from .base import (
    COMPARATORS,
    DEFAULT_INIT_ACTION,
    Comparator,
    Reducer,
    calculate_state,
    create_initial_state,
    default_comparator,
    flatten,
    identity_comparator,
    never_equal,
    resolve_comparator,
)
from .reducer import HistoryReducer, undox, undox_from_config
from .selectors import HistorySelectors, create_selectors
from .store import HistoryStore

__all__ = [
    # Base
    "Reducer",
    "Comparator",
    "DEFAULT_INIT_ACTION",
    "COMPARATORS",
    "default_comparator",
    "identity_comparator",
    "never_equal",
    "resolve_comparator",
    "flatten",
    "calculate_state",
    "create_initial_state",
    # Reducer
    "HistoryReducer",
    "undox",
    "undox_from_config",
    # Selectors
    "HistorySelectors",
    "create_selectors",
    # Store
    "HistoryStore",
]
