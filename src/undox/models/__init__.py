"""Data models for undox."""

from .action import (
    Action,
    GroupAction,
    RedoAction,
    UndoAction,
    UndoxAction,
    UndoxTypes,
    get_action_type,
    group,
    parse_action,
    redo,
    undo,
)
from .history import UndoxState

__all__ = [
    # Actions
    "Action",
    "UndoxTypes",
    "UndoAction",
    "RedoAction",
    "GroupAction",
    "UndoxAction",
    "get_action_type",
    "parse_action",
    # Action creators
    "undo",
    "redo",
    "group",
    # History
    "UndoxState",
]
