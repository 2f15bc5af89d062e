"""Goal-vs-intake arithmetic.

Pure functions only; no storage and no session state.
"""

from __future__ import annotations

from pywater.models._base import DayStatus


def apply_increment(current: int, increment: int, goal: int) -> int:
    """Add *increment* to *current*, clamping at *goal*."""
    updated = current + increment
    if updated >= goal:
        return goal
    return updated


def reached_goal(updated: int, goal: int, notified_goal: int | None) -> bool:
    """Whether a log moved the day into the goal-reached state for *goal*.

    *notified_goal* is the goal the day last announced (``None`` if never).
    A day already announced at *goal* does not re-trigger. A day whose goal
    changed since (lowered onto or below its total) does, because the log
    crosses the new threshold.
    """
    return updated == goal and notified_goal != goal


def compute_progress(current: int, goal: int) -> float:
    """``current / goal`` clamped to ``[0.0, 1.0]``; ``0.0`` for a non-positive goal."""
    if goal <= 0:
        return 0.0
    return max(0.0, min(current / goal, 1.0))


def classify_day(amount: int | None, goal: int) -> DayStatus:
    if amount is None:
        return DayStatus.UNVISITED
    if amount == 0:
        return DayStatus.ZEROED
    if amount >= goal:
        return DayStatus.GOAL_REACHED
    return DayStatus.IN_PROGRESS
