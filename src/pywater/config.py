"""Tracker configuration for pywater."""

from __future__ import annotations

import dataclasses
from collections.abc import Callable
from datetime import datetime, tzinfo
from pathlib import Path

from pywater._constants import (
    DEFAULT_GOAL,
    DEFAULT_INCREMENT,
    GOAL_MAX,
    GOAL_MIN,
    INCREMENT_MAX,
    INCREMENT_MIN,
)
from pywater.dates import resolve_zone
from pywater.exceptions import WaterConfigError
from pywater.state.tracker import IntakeTracker
from pywater.storage.backend import FileBackend, StorageBackend
from pywater.storage.records import RecordStore
from pywater.storage.settings import SettingsStore


def default_data_dir() -> Path:
    return Path.home() / ".pywater"


@dataclasses.dataclass(frozen=True)
class TrackerConfig:
    """Tracker configuration.

    Parameters
    ----------
    data_dir : Path
        Directory holding one JSON file per persisted entry.
        Defaults to ``~/.pywater``.
    time_zone : str
        IANA zone used to decide which calendar day a moment belongs to.
        Fixed per installation so storage keys never drift.
    default_goal : int
        Goal used until the user saves one (8-200).
    default_increment : int
        Log increment used until the user saves one (1-32).
    """

    data_dir: Path = dataclasses.field(default_factory=default_data_dir)
    time_zone: str = "UTC"
    default_goal: int = DEFAULT_GOAL
    default_increment: int = DEFAULT_INCREMENT

    def __post_init__(self) -> None:
        if not GOAL_MIN <= self.default_goal <= GOAL_MAX:
            raise WaterConfigError(f"default_goal must be between {GOAL_MIN} and {GOAL_MAX}, got {self.default_goal}")
        if not INCREMENT_MIN <= self.default_increment <= INCREMENT_MAX:
            raise WaterConfigError(
                f"default_increment must be between {INCREMENT_MIN} and {INCREMENT_MAX}, got {self.default_increment}"
            )
        object.__setattr__(self, "data_dir", Path(self.data_dir).expanduser())
        # Fail fast on a bad zone name instead of at first use.
        resolve_zone(self.time_zone)

    @property
    def zone(self) -> tzinfo:
        return resolve_zone(self.time_zone)

    def build_tracker(
        self,
        *,
        backend: StorageBackend | None = None,
        clock: Callable[[], datetime] | None = None,
    ) -> IntakeTracker:
        """Wire stores and an :class:`IntakeTracker` for this configuration.

        *backend* defaults to a :class:`~pywater.storage.backend.FileBackend`
        rooted at :attr:`data_dir`.
        """
        store_backend = backend if backend is not None else FileBackend(self.data_dir)
        settings_store = SettingsStore(
            store_backend,
            default_goal=self.default_goal,
            default_increment=self.default_increment,
        )
        extra: dict[str, Callable[[], datetime]] = {"clock": clock} if clock is not None else {}
        return IntakeTracker(RecordStore(store_backend), settings_store, zone=self.zone, **extra)
