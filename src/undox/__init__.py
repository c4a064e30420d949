"""undox.

Undo, redo and grouping for reducer-based state containers, without
modifying the reducer itself.
"""

__version__ = "0.1.0"

from .config import UndoxConfig, load_undox_config
from .models import (
    Action,
    GroupAction,
    RedoAction,
    UndoAction,
    UndoxState,
    UndoxTypes,
    get_action_type,
    group,
    redo,
    undo,
)
from .state import (
    HistorySelectors,
    HistoryStore,
    create_selectors,
    undox,
    undox_from_config,
)

__all__ = [
    # Version
    "__version__",
    # Actions
    "Action",
    "UndoxTypes",
    "UndoAction",
    "RedoAction",
    "GroupAction",
    "get_action_type",
    "undo",
    "redo",
    "group",
    # History
    "UndoxState",
    "undox",
    "undox_from_config",
    "create_selectors",
    "HistorySelectors",
    "HistoryStore",
    # Configuration
    "UndoxConfig",
    "load_undox_config",
]
