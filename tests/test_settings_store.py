from __future__ import annotations

import pytest
from pydantic import ValidationError

from pywater._constants import clamp_goal, clamp_increment
from pywater.exceptions import WaterStorageError
from pywater.models.settings import TrackerSettings
from pywater.storage.backend import MemoryBackend
from pywater.storage.settings import SettingsStore


def test_defaults_when_nothing_stored() -> None:
    settings = SettingsStore(MemoryBackend()).load()
    assert settings.goal == 64
    assert settings.increment_amount == 8


def test_custom_defaults() -> None:
    settings = SettingsStore(MemoryBackend(), default_goal=100, default_increment=4).load()
    assert settings == TrackerSettings(goal=100, increment_amount=4)


def test_save_then_load() -> None:
    backend = MemoryBackend()
    SettingsStore(backend).save(TrackerSettings(goal=120, increment_amount=16))
    assert SettingsStore(backend).load() == TrackerSettings(goal=120, increment_amount=16)
    assert backend.keys() == ["addAmountOz", "dailyGoalOz"]
    assert backend.read("dailyGoalOz") == b"120"


@pytest.mark.parametrize("raw", [b"oops", b"7", b"201", b"true", b'"64"', b"64.5"])
def test_bad_goal_falls_back_without_touching_increment(raw: bytes) -> None:
    backend = MemoryBackend({"dailyGoalOz": raw, "addAmountOz": b"12"})
    settings = SettingsStore(backend).load()
    assert settings.goal == 64
    assert settings.increment_amount == 12


def test_bad_increment_falls_back() -> None:
    backend = MemoryBackend({"dailyGoalOz": b"80", "addAmountOz": b"33"})
    assert SettingsStore(backend).load() == TrackerSettings(goal=80, increment_amount=8)


class TestTrackerSettings:
    def test_bounds_are_validated(self) -> None:
        TrackerSettings(goal=8, increment_amount=1)
        TrackerSettings(goal=200, increment_amount=32)
        with pytest.raises(ValidationError):
            TrackerSettings(goal=7)
        with pytest.raises(ValidationError):
            TrackerSettings(increment_amount=0)

    def test_with_goal_validates(self) -> None:
        settings = TrackerSettings()
        assert settings.with_goal(20).goal == 20
        with pytest.raises(ValueError):
            settings.with_goal(201)

    def test_with_increment_validates(self) -> None:
        settings = TrackerSettings()
        assert settings.with_increment(32).increment_amount == 32
        with pytest.raises(ValueError):
            settings.with_increment(33)


def test_clamp_helpers() -> None:
    assert clamp_goal(3) == 8
    assert clamp_goal(500) == 200
    assert clamp_goal(64) == 64
    assert clamp_increment(0) == 1
    assert clamp_increment(40) == 32
    assert clamp_increment(8) == 8


def test_deeply_nested_setting_falls_back_to_default() -> None:
    nested = b"[" * 100_000 + b"]" * 100_000
    backend = MemoryBackend({"dailyGoalOz": nested, "addAmountOz": nested})
    assert SettingsStore(backend).load() == TrackerSettings()


class _GoalWriteFails(MemoryBackend):
    def write(self, key: str, data: bytes) -> None:
        if key == "dailyGoalOz":
            raise WaterStorageError("disk full", key=key)
        super().write(key, data)


def test_failed_goal_write_leaves_stored_goal_untouched() -> None:
    backend = _GoalWriteFails({"dailyGoalOz": b"80", "addAmountOz": b"8"})
    store = SettingsStore(backend)
    assert store.save(TrackerSettings(goal=120, increment_amount=16)) is False
    assert store.load() == TrackerSettings(goal=80, increment_amount=16)
