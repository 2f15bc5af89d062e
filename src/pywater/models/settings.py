"""Persisted user settings."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from pywater._constants import (
    DEFAULT_GOAL,
    DEFAULT_INCREMENT,
    GOAL_MAX,
    GOAL_MIN,
    INCREMENT_MAX,
    INCREMENT_MIN,
)


class TrackerSettings(BaseModel):
    """Process-wide settings surviving restarts.

    Parameters
    ----------
    goal : int
        Daily intake target, 8-200 volume units.
    increment_amount : int
        Amount added by one log action, 1-32 volume units.
    """

    model_config = ConfigDict(frozen=True, extra="forbid", validate_default=True)

    goal: int = Field(DEFAULT_GOAL, ge=GOAL_MIN, le=GOAL_MAX)
    increment_amount: int = Field(DEFAULT_INCREMENT, ge=INCREMENT_MIN, le=INCREMENT_MAX)

    def with_goal(self, goal: int) -> TrackerSettings:
        """Validated copy with a new goal (raises ``ValueError`` when out of range)."""
        return TrackerSettings(goal=goal, increment_amount=self.increment_amount)

    def with_increment(self, increment_amount: int) -> TrackerSettings:
        """Validated copy with a new increment (raises ``ValueError`` when out of range)."""
        return TrackerSettings(goal=self.goal, increment_amount=increment_amount)
