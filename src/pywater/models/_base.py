"""Base model and enum for pywater data.

Every read-surface model inherits from :class:`WaterBaseModel`, which is
frozen and rejects unknown fields so renderers cannot mutate tracker state
through a snapshot they were handed.
"""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, ConfigDict


class DayStatus(StrEnum):
    """Lifecycle of a single calendar day's record."""

    UNVISITED = "unvisited"
    """No entry exists for the day."""
    ZEROED = "zeroed"
    """An explicit ``0`` entry exists (the day was reset)."""
    IN_PROGRESS = "in_progress"
    GOAL_REACHED = "goal_reached"


class WaterBaseModel(BaseModel):
    """Frozen base for derived, read-only models."""

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
    )
