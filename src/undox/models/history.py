"""History state entity for undox.

This module defines the value threaded through every transition handler.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator


class UndoxState(BaseModel):
    """The state object of the undox reducer.

    The history is ordered as ``[...past, present, ...future]``. Each entry is
    either a single action or a tuple of actions recorded as one group.

    Attributes:
        history: Recorded entries
        index: Position of the present entry in ``history``
        present: State produced by replaying ``history[0..index]``
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    history: tuple[Any, ...] = Field(..., min_length=1, description="Recorded history entries")
    index: int = Field(..., ge=0, description="Index of the present entry")
    present: Any = Field(None, description="Materialized present state")

    @model_validator(mode="after")
    def check_index_in_bounds(self) -> "UndoxState":
        """Validate that the index points into the history."""
        if self.index >= len(self.history):
            raise ValueError(
                f"index {self.index} out of range for history of length {len(self.history)}"
            )
        return self

    @property
    def past_count(self) -> int:
        """Get the number of entries before the present.

        Returns:
            Number of past entries
        """
        return self.index

    @property
    def future_count(self) -> int:
        """Get the number of entries after the present.

        Returns:
            Number of future entries
        """
        return len(self.history) - 1 - self.index
