"""Unit tests for action and history models."""

import pytest
from pydantic import ValidationError

from undox.models import (
    Action,
    GroupAction,
    RedoAction,
    UndoAction,
    UndoxState,
    UndoxTypes,
    get_action_type,
    group,
    parse_action,
    redo,
    undo,
)


class TestActionCreators:
    """Tests for undo/redo/group creators."""

    def test_undo_defaults_to_one_step(self):
        """Test undo() without arguments."""
        action = undo()
        assert action.type == UndoxTypes.UNDO
        assert action.payload == 1

    def test_redo_with_steps(self):
        """Test redo(n)."""
        action = redo(3)
        assert action.type == "undox/REDO"
        assert action.payload == 3

    def test_group_stores_tuple(self):
        """Test group() freezes its payload."""
        a = Action(type="a")
        b = Action(type="b")
        action = group([a, b])
        assert action.type == "undox/GROUP"
        assert action.payload == (a, b)

    @pytest.mark.parametrize("steps", [0, -1])
    def test_non_positive_steps_rejected(self, steps):
        """Test that step counts must be positive."""
        with pytest.raises(ValidationError):
            undo(steps)
        with pytest.raises(ValidationError):
            redo(steps)

    @pytest.mark.parametrize("steps", ["2", 2.0, True])
    def test_non_integer_steps_rejected(self, steps):
        """Test that step counts are not coerced from other types."""
        with pytest.raises(ValidationError):
            undo(steps)
        with pytest.raises(ValidationError):
            redo(steps)
        with pytest.raises(ValidationError):
            parse_action({"type": "undox/UNDO", "payload": steps})

    def test_empty_group_rejected(self):
        """Test that a group needs at least one action."""
        with pytest.raises(ValidationError):
            group([])

    def test_actions_are_frozen(self):
        """Test that actions cannot be modified."""
        action = undo(2)
        with pytest.raises(ValidationError):
            action.payload = 5


class TestGetActionType:
    """Tests for get_action_type."""

    def test_model(self):
        assert get_action_type(Action(type="increment")) == "increment"

    def test_mapping(self):
        assert get_action_type({"type": "increment", "payload": 1}) == "increment"

    def test_enum_is_reduced_to_value(self):
        assert get_action_type({"type": UndoxTypes.REDO}) == "undox/REDO"

    def test_object_without_type(self):
        assert get_action_type(object()) is None


class TestParseAction:
    """Tests for parse_action."""

    def test_caller_action_passes_through(self):
        """Test that ordinary actions are returned unchanged."""
        action = {"type": "increment"}
        assert parse_action(action) is action

    def test_typed_action_passes_through(self):
        action = undo(2)
        assert parse_action(action) is action

    def test_mapping_undo(self):
        """Test that a raw undo mapping becomes an UndoAction."""
        action = parse_action({"type": "undox/UNDO", "payload": 2})
        assert isinstance(action, UndoAction)
        assert action.payload == 2

    def test_generic_action_redo_without_payload(self):
        """Test that a missing payload falls back to one step."""
        action = parse_action(Action(type="undox/REDO"))
        assert isinstance(action, RedoAction)
        assert action.payload == 1

    def test_mapping_group(self):
        """Test that a raw group mapping becomes a GroupAction."""
        members = [{"type": "a"}, {"type": "b"}]
        action = parse_action({"type": "undox/GROUP", "payload": members})
        assert isinstance(action, GroupAction)
        assert action.payload == ({"type": "a"}, {"type": "b"})

    def test_invalid_reserved_payload(self):
        """Test that invalid reserved payloads raise."""
        with pytest.raises(ValidationError):
            parse_action({"type": "undox/UNDO", "payload": 0})
        with pytest.raises(ValidationError):
            parse_action({"type": "undox/GROUP", "payload": []})


class TestUndoxState:
    """Tests for UndoxState model."""

    def test_create_state(self):
        """Test creating a history state."""
        init = Action(type="undox/INIT")
        state = UndoxState(history=(init,), index=0, present=0)
        assert state.history == (init,)
        assert state.index == 0
        assert state.present == 0
        assert state.past_count == 0
        assert state.future_count == 0

    def test_counts(self):
        """Test past and future counts."""
        state = UndoxState(history=("a", "b", "c", "d"), index=1, present=None)
        assert state.past_count == 1
        assert state.future_count == 2

    def test_index_out_of_range(self):
        """Test that the index must point into the history."""
        with pytest.raises(ValidationError):
            UndoxState(history=("a",), index=1, present=None)
        with pytest.raises(ValidationError):
            UndoxState(history=("a",), index=-1, present=None)

    def test_empty_history_rejected(self):
        with pytest.raises(ValidationError):
            UndoxState(history=(), index=0, present=None)

    def test_state_is_frozen(self):
        """Test that a history state cannot be modified."""
        state = UndoxState(history=("a",), index=0, present=1)
        with pytest.raises(ValidationError):
            state.index = 0

    def test_present_is_not_copied(self):
        """Test that the present value is stored by reference."""
        present = {"items": [1, 2]}
        state = UndoxState(history=("a",), index=0, present=present)
        assert state.present is present
