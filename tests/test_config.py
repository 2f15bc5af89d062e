from __future__ import annotations

import json
from datetime import UTC, date, datetime
from pathlib import Path

import pytest

from pywater.config import TrackerConfig
from pywater.exceptions import WaterConfigError
from pywater.storage.backend import MemoryBackend


def test_defaults() -> None:
    config = TrackerConfig()
    assert config.data_dir == Path.home() / ".pywater"
    assert config.time_zone == "UTC"
    assert config.zone is UTC
    assert config.default_goal == 64
    assert config.default_increment == 8


def test_data_dir_is_coerced_to_path(tmp_path: Path) -> None:
    config = TrackerConfig(data_dir=str(tmp_path))  # type: ignore[arg-type]
    assert config.data_dir == tmp_path


@pytest.mark.parametrize("kwargs", [{"default_goal": 7}, {"default_goal": 201}, {"default_increment": 0}])
def test_out_of_range_defaults_rejected(kwargs: dict[str, int]) -> None:
    with pytest.raises(WaterConfigError):
        TrackerConfig(**kwargs)


def test_unknown_time_zone_rejected() -> None:
    with pytest.raises(WaterConfigError):
        TrackerConfig(time_zone="Mars/Olympus_Mons")


def test_build_tracker_uses_file_storage(tmp_path: Path) -> None:
    config = TrackerConfig(data_dir=tmp_path, default_goal=32)
    tracker = config.build_tracker(clock=lambda: datetime(2026, 10, 19, 12, 0, tzinfo=UTC))
    assert tracker.goal == 32
    assert tracker.selected_date == date(2026, 10, 19)

    tracker.log_intake()
    tracker.set_goal(48)

    assert json.loads((tmp_path / "waterRecords.json").read_text(encoding="utf-8")) == {"2026-10-19": 8}
    assert (tmp_path / "dailyGoalOz.json").read_text(encoding="utf-8") == "48"

    reopened = TrackerConfig(data_dir=tmp_path).build_tracker(
        clock=lambda: datetime(2026, 10, 19, 18, 0, tzinfo=UTC)
    )
    assert reopened.current_intake == 8
    assert reopened.goal == 48


def test_build_tracker_with_custom_backend() -> None:
    backend = MemoryBackend()
    tracker = TrackerConfig(default_increment=16).build_tracker(backend=backend)
    tracker.log_intake()
    assert tracker.current_intake == 16
    assert "waterRecords" in backend.keys()
