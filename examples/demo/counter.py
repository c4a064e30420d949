"""Counter reducer used by the command line demo.

Run from the repository root:
    PYTHONPATH=examples/demo undox replay examples/demo/counter_script.yaml --reducer counter:counter --config examples/demo/undox.yaml --states
"""


def counter(state, action):
    """Integer counter: increment, decrement and add(n)."""
    if state is None:
        state = 0

    if isinstance(action, dict):
        action_type, payload = action.get("type"), action.get("payload")
    else:
        action_type, payload = action.type, action.payload

    if action_type == "increment":
        return state + 1
    if action_type == "decrement":
        return state - 1
    if action_type == "add":
        return state + int(payload)
    return state
