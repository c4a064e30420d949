"""Unit tests for history selectors."""

import pytest

from undox import Action, create_selectors, group, redo, undo, undox

INIT = Action(type="undox/INIT")
INC = Action(type="increment")
DEC = Action(type="decrement")


@pytest.fixture
def selectors(counter):
    return create_selectors(counter)


@pytest.fixture
def history(counter):
    """History [INIT, INC, (INC, INC), DEC] with the present at the group."""
    reducer = undox(counter)
    state = None
    for action in [INC, group([INC, INC]), DEC, undo()]:
        state = reducer(state, action)
    return state


class TestSelectors:
    """Tests for HistorySelectors."""

    def test_present_state(self, selectors, history):
        assert selectors.get_present_state(history) == 3

    def test_present_action_is_group(self, selectors, history):
        assert selectors.get_present_action(history) == (INC, INC)

    def test_past_actions(self, selectors, history):
        assert selectors.get_past_actions(history) == [INIT, INC]

    def test_future_actions(self, selectors, history):
        assert selectors.get_future_actions(history) == [DEC]

    def test_past_states(self, selectors, history):
        """Test that past states are replayed from the start."""
        assert selectors.get_past_states(history) == [0, 1]

    def test_future_states(self, selectors, history):
        """Test that future states are replayed from the present."""
        assert selectors.get_future_states(history) == [2]

    def test_flattening_groups_in_past(self, counter, selectors, history):
        """Test that groups in the past are expanded and folded as one step."""
        state = undox(counter)(history, redo())
        assert selectors.get_past_actions(state) == [INIT, INC, INC, INC]
        assert selectors.get_past_states(state) == [0, 1, 3]
        assert selectors.get_future_states(state) == []

    def test_future_states_with_groups(self, counter, selectors):
        reducer = undox(counter)
        state = None
        for action in [INC, group([INC, INC, INC]), group([DEC, DEC]), undo(2)]:
            state = reducer(state, action)
        assert selectors.get_future_actions(state) == [INC, INC, INC, DEC, DEC]
        assert selectors.get_future_states(state) == [4, 2]

    def test_initial_state(self, counter, selectors):
        state = undox(counter).initial_state
        assert selectors.get_past_states(state) == []
        assert selectors.get_future_states(state) == []
        assert selectors.get_present_action(state) == INIT
        assert selectors.can_undo(state) is False
        assert selectors.can_redo(state) is False

    def test_can_undo_redo(self, selectors, history):
        assert selectors.can_undo(history) is True
        assert selectors.can_redo(history) is True

    def test_selectors_do_not_cache(self, counter):
        """Test that states are recomputed on every call."""
        calls = []

        def tracking(state, action):
            calls.append(action)
            return counter(state, action)

        state = undox(counter)(None, INC)
        selectors = create_selectors(tracking)
        selectors.get_past_states(state)
        selectors.get_past_states(state)
        assert calls == [INIT, INIT]
