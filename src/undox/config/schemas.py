"""Configuration schemas for undox.

This module defines Pydantic models for validating configuration data.
"""

from typing import Any, Literal

from pydantic import BaseModel, Field, field_validator


class UndoxConfig(BaseModel):
    """Configuration for a history reducer."""

    init_action_type: str = Field(default="undox/INIT", min_length=1, description="Tag of the init action")
    comparator: Literal["equality", "identity", "never"] = Field(
        default="equality", description="No-op detection strategy"
    )
    ignored_actions: dict[str, bool] = Field(
        default_factory=dict, description="Action tags that are never recorded in history"
    )

    @field_validator("ignored_actions", mode="before")
    @classmethod
    def accept_tag_list(cls, v: Any) -> Any:
        """Accept a plain list of tags as shorthand for ``{tag: True}``."""
        if v is None:
            return {}
        if isinstance(v, (list, tuple, set)):
            return {str(tag): True for tag in v}
        return v


class ReplayScript(BaseModel):
    """An action script replayed by the command line."""

    actions: list[Any] = Field(default_factory=list, description="Actions dispatched in order")


# Validation functions


def validate_undox_config(data: dict[str, Any]) -> UndoxConfig:
    """Validate undox configuration data.

    Args:
        data: Raw configuration dictionary

    Returns:
        Validated UndoxConfig object

    Raises:
        ValidationError: If the configuration is invalid
    """
    return UndoxConfig(**data)


def validate_replay_script(data: dict[str, Any]) -> ReplayScript:
    """Validate a replay script.

    Args:
        data: Raw script dictionary

    Returns:
        Validated ReplayScript object

    Raises:
        ValidationError: If the script is invalid
    """
    return ReplayScript(**data)
