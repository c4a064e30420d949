"""CLI module for undox."""

from .main import main
from .replay import replay_cmd, replay_script

__all__ = ["main", "replay_cmd", "replay_script"]
