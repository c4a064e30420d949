"""CLI command for replaying action scripts.

This module loads an action script, dispatches it through a history reducer
and prints the resulting history.
"""

import json
import sys
from collections.abc import Mapping
from pathlib import Path
from typing import Any, Optional

import click
from pydantic import BaseModel
from tabulate import tabulate

from ..config import load_replay_script, load_undox_config
from ..models import UndoxState, get_action_type
from ..state import HistorySelectors, HistoryStore, Reducer
from ..state.base import is_group
from ..utils import get_logger, import_from_path

logger = get_logger(__name__)


def describe_action(action: Any) -> str:
    """Render an action as ``type`` or ``type(payload)``.

    Args:
        action: Caller action

    Returns:
        Short description
    """
    action_type = get_action_type(action)
    if isinstance(action, Mapping):
        payload = action.get("payload")
    else:
        payload = getattr(action, "payload", None)
    return f"{action_type}({payload})" if payload is not None else str(action_type)


def describe_entry(entry: Any) -> str:
    """Render a history entry, listing group members in brackets."""
    if is_group(entry):
        return "[" + ", ".join(describe_action(a) for a in entry) + "]"
    return describe_action(entry)


def to_jsonable(value: Any) -> Any:
    """Convert actions, groups and states to JSON-compatible values."""
    if isinstance(value, BaseModel):
        return value.model_dump(mode="json")
    if isinstance(value, (list, tuple)):
        return [to_jsonable(v) for v in value]
    if isinstance(value, dict):
        return {str(k): to_jsonable(v) for k, v in value.items()}
    return value


def entry_states(state: UndoxState, selectors: HistorySelectors) -> list[Any]:
    """Reconstruct the state after each history entry.

    Args:
        state: History state
        selectors: Selectors bound to the caller reducer

    Returns:
        One state per entry, in history order
    """
    return [
        *selectors.get_past_states(state),
        selectors.get_present_state(state),
        *selectors.get_future_states(state),
    ]


def render_history(state: UndoxState, selectors: HistorySelectors, show_states: bool = False) -> str:
    """Render a history as a table.

    Args:
        state: History state
        selectors: Selectors bound to the caller reducer
        show_states: Include the reconstructed state per entry

    Returns:
        Table text
    """
    states = entry_states(state, selectors) if show_states else []
    rows = []
    for position, entry in enumerate(state.history):
        if position < state.index:
            marker = "past"
        elif position == state.index:
            marker = "present"
        else:
            marker = "future"
        row = [position, marker, describe_entry(entry)]
        if show_states:
            row.append(states[position])
        rows.append(row)

    headers = ["#", "Position", "Entry"]
    if show_states:
        headers.append("State")
    return tabulate(rows, headers=headers, tablefmt="grid")


def replay_script(
    script_path: Path,
    reducer_path: str,
    config_path: Optional[Path] = None,
    output_format: str = "table",
    show_states: bool = False,
) -> None:
    """Replay an action script and print the history.

    Args:
        script_path: YAML or JSON file with an ``actions`` list
        reducer_path: Reducer import path (module:function)
        config_path: Optional undox configuration file
        output_format: "table" or "json"
        show_states: Include reconstructed states
    """
    try:
        reducer: Reducer = import_from_path(reducer_path)
        config = load_undox_config(config_path)
        script = load_replay_script(script_path)
        store = HistoryStore.from_config(reducer, config)
        for action in script.actions:
            store.dispatch(action)
    except Exception as e:
        logger.debug(f"Replay failed: {e!r}")
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    logger.info(f"Replayed {len(script.actions)} action(s) from {script_path}")
    state = store.state
    selectors = store.selectors

    if output_format == "json":
        output: dict[str, Any] = {
            "index": state.index,
            "present": to_jsonable(state.present),
            "history": to_jsonable(list(state.history)),
        }
        if show_states:
            output["states"] = to_jsonable(entry_states(state, selectors))
        click.echo(json.dumps(output, indent=2, default=str))
        return

    click.echo(render_history(state, selectors, show_states))
    click.echo(f"Index: {state.index} ({state.past_count} past, {state.future_count} future)")
    click.echo(f"Present: {state.present!r}")


@click.command("replay")
@click.argument("script", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--reducer", "-r", "reducer_path", required=True, help="Reducer import path (module:function)")
@click.option("--config", "-c", "config_path", type=click.Path(exists=True, dir_okay=False, path_type=Path), help="undox configuration file")
@click.option("--format", "output_format", type=click.Choice(["table", "json"]), default="table", help="Output format")
@click.option("--states", "show_states", is_flag=True, help="Show the reconstructed state of every entry")
def replay_cmd(
    script: Path,
    reducer_path: str,
    config_path: Optional[Path],
    output_format: str,
    show_states: bool,
) -> None:
    """Replay SCRIPT through a reducer wrapped with undo history."""
    replay_script(script, reducer_path, config_path, output_format, show_states)
