#!/usr/bin/env python3
"""
Todo List Demo

This demo wraps a plain todo reducer with undo, redo and grouping using
HistoryStore, then walks backward and forward through the history.

Run this demo:
    python examples/demo/todo_demo.py
"""

import sys
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent.parent / "src"))

from undox import Action, HistoryStore
from undox.utils import setup_logging


def todos(state, action):
    """Reducer over a tuple of (title, done) pairs."""
    if state is None:
        state = ()

    if action.type == "add":
        return (*state, (action.payload, False))
    if action.type == "toggle":
        return tuple(
            (title, not done) if title == action.payload else (title, done)
            for title, done in state
        )
    if action.type == "remove":
        return tuple(item for item in state if item[0] != action.payload)
    return state


def show(store: HistoryStore, label: str) -> None:
    state = store.state
    items = ", ".join(f"{'x' if done else ' '} {title}" for title, done in state.present) or "(empty)"
    print(f"{label:<28} index={state.index} past={state.past_count} future={state.future_count}  [{items}]")


def main() -> None:
    setup_logging(level="DEBUG" if "-v" in sys.argv else "WARNING")

    print("=" * 70)
    print("undox - Todo List Demo")
    print("=" * 70)

    store = HistoryStore(todos)

    store.dispatch(Action(type="add", payload="write docs"))
    show(store, "add 'write docs'")
    store.dispatch(Action(type="add", payload="ship release"))
    show(store, "add 'ship release'")
    store.group([
        Action(type="toggle", payload="write docs"),
        Action(type="remove", payload="write docs"),
    ])
    show(store, "group(toggle, remove)")

    store.undo()
    show(store, "undo")
    store.undo(5)
    show(store, "undo(5) (clamped)")
    store.redo(2)
    show(store, "redo(2)")

    store.dispatch(Action(type="toggle", payload="missing"))
    show(store, "toggle 'missing' (no-op)")

    print()
    print("Past states:  ", store.selectors.get_past_states(store.state))
    print("Future states:", store.selectors.get_future_states(store.state))


if __name__ == "__main__":
    main()
