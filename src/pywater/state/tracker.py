"""Session state and intents for one user's daily intake."""

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import UTC, date, datetime, tzinfo

from pywater.dates import date_key, parse_date_key, to_calendar_date
from pywater.models._base import DayStatus
from pywater.models.records import RecordMap
from pywater.models.settings import TrackerSettings
from pywater.models.snapshot import DayRecord, IntakeSnapshot
from pywater.state.events import TrackerEvent, TrackerEventKind
from pywater.state.policy import apply_increment, classify_day, compute_progress, reached_goal
from pywater.storage.records import RecordStore
from pywater.storage.settings import SettingsStore

_logger = logging.getLogger(__name__)

TrackerListener = Callable[[TrackerEvent], None]


def _utcnow() -> datetime:
    return datetime.now(UTC)


class IntakeTracker:
    """Business rules for logging intake against a daily goal.

    The record map and settings are loaded once at construction and written
    back in full after every mutation. Renderers read the derived values
    (:meth:`progress`, :attr:`current_intake`, :meth:`snapshot`, ...) and
    push intents (:meth:`select_date`, :meth:`log_intake`,
    :meth:`reset_today`, :meth:`set_goal`, :meth:`set_increment_amount`).

    Usage::

        tracker = IntakeTracker(RecordStore(backend), SettingsStore(backend))
        tracker.log_intake()
        if tracker.consume_goal_reached() is not None:
            show_congratulations()
    """

    def __init__(
        self,
        record_store: RecordStore,
        settings_store: SettingsStore,
        *,
        zone: tzinfo = UTC,
        clock: Callable[[], datetime] = _utcnow,
        selected_date: date | datetime | None = None,
    ) -> None:
        self._record_store = record_store
        self._settings_store = settings_store
        self._zone = zone
        self._clock = clock
        self._settings: TrackerSettings = settings_store.load()
        self._records: RecordMap = record_store.load()
        self._listeners: list[TrackerListener] = []
        self._pending_goal_reached: TrackerEvent | None = None
        # Day key -> goal at which the day last announced reaching it.
        self._notified_goal: dict[str, int] = {}
        self._selected_date = to_calendar_date(selected_date if selected_date is not None else clock(), zone)
        self._load_selected()

    # ------------------------------------------------------------------
    # Read surface
    # ------------------------------------------------------------------

    @property
    def settings(self) -> TrackerSettings:
        return self._settings

    @property
    def goal(self) -> int:
        return self._settings.goal

    @property
    def increment_amount(self) -> int:
        return self._settings.increment_amount

    @property
    def selected_date(self) -> date:
        return self._selected_date

    @property
    def selected_key(self) -> str:
        return self._selected_date.isoformat()

    @property
    def current_intake(self) -> int:
        return self._current_intake

    @property
    def records(self) -> dict[str, int]:
        """Copy of every stored day."""
        return self._records.to_dict()

    def today(self) -> date:
        """The current calendar day according to the tracker's clock and zone."""
        return to_calendar_date(self._clock(), self._zone)

    def key_for(self, day: date | datetime) -> str:
        return date_key(day, self._zone)

    def record_for(self, day: date | datetime) -> int | None:
        """Stored intake for *day*, or ``None`` if the day was never logged or reset."""
        return self._records.get(self.key_for(day))

    def status_for(self, day: date | datetime) -> DayStatus:
        return classify_day(self.record_for(day), self.goal)

    def progress(self) -> float:
        """Fraction of the goal reached on the selected day, in ``[0.0, 1.0]``."""
        return compute_progress(self._current_intake, self.goal)

    def history(
        self,
        start: date | datetime | None = None,
        end: date | datetime | None = None,
    ) -> list[DayRecord]:
        """Stored days in date order, optionally bounded (inclusive) by *start*/*end*.

        Progress and status are computed against the current goal.
        """
        first = to_calendar_date(start, self._zone) if start is not None else None
        last = to_calendar_date(end, self._zone) if end is not None else None
        rows: list[DayRecord] = []
        for key in sorted(self._records):
            day = parse_date_key(key)
            if first is not None and day < first:
                continue
            if last is not None and day > last:
                continue
            amount = self._records[key]
            rows.append(
                DayRecord(
                    day=day,
                    key=key,
                    intake=amount,
                    goal=self.goal,
                    progress=compute_progress(amount, self.goal),
                    status=classify_day(amount, self.goal),
                )
            )
        return rows

    def snapshot(self) -> IntakeSnapshot:
        """Everything a renderer needs for the selected day."""
        return IntakeSnapshot(
            selected_date=self._selected_date,
            date_key=self.selected_key,
            current_intake=self._current_intake,
            goal=self.goal,
            increment_amount=self.increment_amount,
            progress=self.progress(),
            status=classify_day(self._records.get(self.selected_key), self.goal),
            goal_reached_pending=self.goal_reached_pending,
        )

    # ------------------------------------------------------------------
    # Goal-reached notification
    # ------------------------------------------------------------------

    @property
    def goal_reached_pending(self) -> bool:
        return self._pending_goal_reached is not None

    def consume_goal_reached(self) -> TrackerEvent | None:
        """Return the pending goal-reached event once, then clear it."""
        event = self._pending_goal_reached
        self._pending_goal_reached = None
        return event

    def dismiss_goal_reached(self) -> None:
        self._pending_goal_reached = None

    # ------------------------------------------------------------------
    # Listeners
    # ------------------------------------------------------------------

    def subscribe(self, listener: TrackerListener) -> Callable[[], None]:
        """Register *listener* for every :class:`TrackerEvent`; returns an unsubscribe callable."""
        self._listeners.append(listener)

        def _unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return _unsubscribe

    def _emit(self, event: TrackerEvent) -> None:
        for listener in list(self._listeners):
            try:
                listener(event)
            except Exception:
                _logger.debug("Tracker listener %r failed on %s", listener, event.kind, exc_info=True)

    def _event(
        self,
        kind: TrackerEventKind,
        *,
        previous: int | None = None,
        persisted: bool = True,
    ) -> TrackerEvent:
        return TrackerEvent(
            kind=kind,
            date_key=self.selected_key,
            day=self._selected_date,
            current_intake=self._current_intake,
            goal=self.goal,
            previous_intake=previous,
            persisted=persisted,
            emitted_at=self._clock(),
        )

    # ------------------------------------------------------------------
    # Intents
    # ------------------------------------------------------------------

    def _stored(self, key: str) -> int:
        amount = self._records.get(key)
        return amount if amount is not None else 0

    def _load_selected(self) -> None:
        self._current_intake = self._stored(self.selected_key)
        # A day opened already sitting on the goal counts as announced.
        if self._current_intake == self.goal:
            self._notified_goal[self.selected_key] = self.goal

    def _persist(self) -> bool:
        self._records.set(self.selected_key, self._current_intake)
        saved = self._record_store.save(self._records)
        if not saved:
            _logger.warning("Intake for %s kept in memory only", self.selected_key)
        return saved

    def select_date(self, day: date | datetime) -> TrackerEvent:
        """Switch the session to *day* and load its stored intake.

        Never writes to storage and never creates an entry for *day*.
        """
        self._selected_date = to_calendar_date(day, self._zone)
        self._load_selected()
        _logger.debug("Selected %s (intake %d)", self.selected_key, self._current_intake)
        event = self._event(TrackerEventKind.DATE_SELECTED)
        self._emit(event)
        return event

    def log_intake(self) -> TrackerEvent:
        """Add one increment to the selected day and persist it.

        The total is clamped at the goal. Entering the goal-reached state
        arms the one-shot notification returned by
        :meth:`consume_goal_reached`.
        """
        previous = self._current_intake
        self._current_intake = apply_increment(previous, self.increment_amount, self.goal)
        persisted = self._persist()
        event = self._event(TrackerEventKind.INTAKE_LOGGED, previous=previous, persisted=persisted)
        self._emit(event)

        if reached_goal(self._current_intake, self.goal, self._notified_goal.get(self.selected_key)):
            self._notified_goal[self.selected_key] = self.goal
            _logger.info("Daily goal of %d reached for %s", self.goal, self.selected_key)
            reached = self._event(TrackerEventKind.GOAL_REACHED, previous=previous, persisted=persisted)
            self._pending_goal_reached = reached
            self._emit(reached)
        return event

    def reset_today(self) -> TrackerEvent:
        """Zero the selected day, keeping an explicit ``0`` entry for it."""
        previous = self._current_intake
        self._persist()
        self._current_intake = 0
        self._notified_goal.pop(self.selected_key, None)
        persisted = self._persist()
        _logger.debug("Reset %s from %d", self.selected_key, previous)
        event = self._event(TrackerEventKind.DAY_RESET, previous=previous, persisted=persisted)
        self._emit(event)
        return event

    def set_goal(self, goal: int) -> TrackerEvent:
        """Change the daily goal (8-200).

        Past records and the current intake are left as they are. Raises
        :class:`ValueError` for an out-of-range goal; clamp with
        :func:`pywater.clamp_goal` first when the value comes from free input.
        """
        self._settings = self._settings.with_goal(goal)
        persisted = self._settings_store.save(self._settings)
        event = self._event(TrackerEventKind.GOAL_CHANGED, persisted=persisted)
        self._emit(event)
        return event

    def set_increment_amount(self, amount: int) -> TrackerEvent:
        """Change the amount added per log action (1-32)."""
        self._settings = self._settings.with_increment(amount)
        persisted = self._settings_store.save(self._settings)
        event = self._event(TrackerEventKind.INCREMENT_CHANGED, persisted=persisted)
        self._emit(event)
        return event
