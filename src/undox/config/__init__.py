"""Configuration management for undox."""

from .loader import (
    load_config_file,
    load_replay_script,
    load_undox_config,
    load_yaml_file,
)
from .schemas import (
    ReplayScript,
    UndoxConfig,
    validate_replay_script,
    validate_undox_config,
)

__all__ = [
    # Loader
    "load_config_file",
    "load_yaml_file",
    "load_undox_config",
    "load_replay_script",
    # Schemas
    "UndoxConfig",
    "ReplayScript",
    "validate_undox_config",
    "validate_replay_script",
]
