"""Renderer-facing read models."""

from __future__ import annotations

from datetime import date

from pydantic import Field

from pywater._constants import UNIT_LABEL
from pywater.models._base import DayStatus, WaterBaseModel


class DayRecord(WaterBaseModel):
    """Raw total for one logged day, as shown in a history view."""

    day: date
    key: str = Field(..., description="YYYY-MM-DD")
    intake: int = Field(..., ge=0)
    goal: int = Field(..., gt=0)
    progress: float = Field(..., ge=0.0, le=1.0)
    status: DayStatus


class IntakeSnapshot(WaterBaseModel):
    """Everything a renderer needs for the selected day, in one read."""

    selected_date: date
    date_key: str
    current_intake: int = Field(..., ge=0)
    goal: int = Field(..., gt=0)
    increment_amount: int = Field(..., gt=0)
    progress: float = Field(..., ge=0.0, le=1.0)
    status: DayStatus
    goal_reached_pending: bool = False

    @property
    def percent(self) -> int:
        """Whole-number percentage of the goal, truncated."""
        return int(self.progress * 100)

    @property
    def label(self) -> str:
        """``"<intake> / <goal> oz"``."""
        return f"{self.current_intake} / {self.goal} {UNIT_LABEL}"
