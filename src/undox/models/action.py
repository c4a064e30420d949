"""Action entities for undox.

This module defines the action vocabulary understood by the history reducer:
a generic ``Action`` model plus the three reserved actions (undo, redo, group)
and their creators.
"""

from collections.abc import Mapping, Sequence
from enum import Enum
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field


class UndoxTypes(str, Enum):
    """Reserved action tags."""

    UNDO = "undox/UNDO"
    REDO = "undox/REDO"
    GROUP = "undox/GROUP"
    INIT = "undox/INIT"


class Action(BaseModel):
    """A simple tagged action.

    Attributes:
        type: Action tag
        payload: Optional action data
    """

    model_config = ConfigDict(frozen=True)

    type: str = Field(..., description="Action tag")
    payload: Any = Field(None, description="Optional action data")


class UndoAction(Action):
    """Undo a number of steps.

    Attributes:
        payload: Number of steps to move backward (positive)
    """

    type: Literal["undox/UNDO"] = "undox/UNDO"
    payload: int = Field(default=1, ge=1, strict=True, description="Steps to undo")


class RedoAction(Action):
    """Redo a number of steps.

    Attributes:
        payload: Number of steps to move forward (positive)
    """

    type: Literal["undox/REDO"] = "undox/REDO"
    payload: int = Field(default=1, ge=1, strict=True, description="Steps to redo")


class GroupAction(Action):
    """Record several actions as one atomic history entry.

    Attributes:
        payload: Ordered, non-empty sequence of caller actions
    """

    type: Literal["undox/GROUP"] = "undox/GROUP"
    payload: tuple[Any, ...] = Field(..., min_length=1, description="Grouped actions")


UndoxAction = UndoAction | RedoAction | GroupAction

_RESERVED: dict[str, type[UndoxAction]] = {
    UndoxTypes.UNDO.value: UndoAction,
    UndoxTypes.REDO.value: RedoAction,
    UndoxTypes.GROUP.value: GroupAction,
}


def get_action_type(action: Any) -> Any:
    """Get the tag of an action.

    Works for ``Action`` models, any object with a ``type`` attribute and
    mappings with a ``"type"`` key. Enum tags are reduced to their value.

    Args:
        action: Action to inspect

    Returns:
        The action tag, or None if the action carries none
    """
    if isinstance(action, Mapping):
        action_type = action.get("type")
    else:
        action_type = getattr(action, "type", None)

    if isinstance(action_type, Enum):
        return action_type.value
    return action_type


def parse_action(action: Any) -> Any:
    """Normalize reserved actions into their typed models.

    Caller actions pass through untouched.

    Args:
        action: Incoming action

    Returns:
        An UndoAction, RedoAction or GroupAction for reserved tags, otherwise the action itself

    Raises:
        ValidationError: If a reserved action carries an invalid payload
    """
    if isinstance(action, (UndoAction, RedoAction, GroupAction)):
        return action

    action_type = get_action_type(action)
    model_class = _RESERVED.get(action_type) if isinstance(action_type, str) else None
    if model_class is None:
        return action

    if isinstance(action, Mapping):
        payload = action.get("payload")
    else:
        payload = getattr(action, "payload", None)

    data: dict[str, Any] = {"type": action_type}
    if payload is not None:
        data["payload"] = payload
    return model_class.model_validate(data)


def undo(n_states: int = 1) -> UndoAction:
    """Create an undo action.

    Args:
        n_states: Number of steps to undo

    Returns:
        UndoAction
    """
    return UndoAction(payload=n_states)


def redo(n_states: int = 1) -> RedoAction:
    """Create a redo action.

    Args:
        n_states: Number of steps to redo

    Returns:
        RedoAction
    """
    return RedoAction(payload=n_states)


def group(actions: Sequence[Any]) -> GroupAction:
    """Create a group action.

    Args:
        actions: Actions to record as a single step

    Returns:
        GroupAction
    """
    return GroupAction(payload=tuple(actions))
