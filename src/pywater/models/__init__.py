"""Data models for tracker state and persisted entries."""

from pywater.models._base import DayStatus, WaterBaseModel
from pywater.models.records import Intake, RecordMap
from pywater.models.settings import TrackerSettings
from pywater.models.snapshot import DayRecord, IntakeSnapshot

__all__ = [
    "DayRecord",
    "DayStatus",
    "Intake",
    "IntakeSnapshot",
    "RecordMap",
    "TrackerSettings",
    "WaterBaseModel",
]
