"""Tracker events pushed to renderers."""

from __future__ import annotations

from datetime import UTC, date, datetime
from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field


class TrackerEventKind(StrEnum):
    DATE_SELECTED = "date_selected"
    INTAKE_LOGGED = "intake_logged"
    DAY_RESET = "day_reset"
    GOAL_CHANGED = "goal_changed"
    INCREMENT_CHANGED = "increment_changed"
    GOAL_REACHED = "goal_reached"


class TrackerEvent(BaseModel):
    """A state change the renderer may want to react to."""

    model_config = ConfigDict(frozen=True)

    kind: TrackerEventKind
    date_key: str = Field(..., description="YYYY-MM-DD of the selected day")
    day: date
    current_intake: int = Field(..., ge=0)
    goal: int = Field(..., gt=0)
    previous_intake: int | None = Field(
        default=None,
        description="Intake before the change, for intake-changing events.",
    )
    persisted: bool = Field(
        default=True,
        description="False when the change could not be written to storage.",
    )
    emitted_at: datetime = Field(default_factory=lambda: datetime.now(UTC))
