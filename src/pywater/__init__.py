"""pywater - daily water-intake tracking with durable per-day records."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("pywater")
except PackageNotFoundError:
    __version__ = "0+local"
from pywater._constants import clamp_goal, clamp_increment
from pywater.config import TrackerConfig
from pywater.dates import date_key, format_display_date
from pywater.exceptions import (
    WaterConfigError,
    WaterDecodeError,
    WaterEncodeError,
    WaterError,
    WaterStorageError,
)
from pywater.models import DayRecord, DayStatus, IntakeSnapshot, RecordMap, TrackerSettings
from pywater.state.events import TrackerEvent, TrackerEventKind
from pywater.state.tracker import IntakeTracker
from pywater.storage import FileBackend, MemoryBackend, RecordStore, SettingsStore, StorageBackend

__all__ = [
    "__version__",
    "DayRecord",
    "DayStatus",
    "FileBackend",
    "IntakeSnapshot",
    "IntakeTracker",
    "MemoryBackend",
    "RecordMap",
    "RecordStore",
    "SettingsStore",
    "StorageBackend",
    "TrackerConfig",
    "TrackerEvent",
    "TrackerEventKind",
    "TrackerSettings",
    "WaterConfigError",
    "WaterDecodeError",
    "WaterEncodeError",
    "WaterError",
    "WaterStorageError",
    "clamp_goal",
    "clamp_increment",
    "date_key",
    "format_display_date",
]
