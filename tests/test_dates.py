from __future__ import annotations

from datetime import UTC, date, datetime, timedelta, timezone

import pytest

from pywater.dates import (
    date_key,
    format_display_date,
    normalize_date_key,
    parse_date_key,
    resolve_zone,
    to_calendar_date,
)
from pywater.exceptions import WaterConfigError

_TOKYO = timezone(timedelta(hours=9))
_NEW_YORK = timezone(timedelta(hours=-4))


def test_date_key_is_iso() -> None:
    assert date_key(date(2026, 3, 7)) == "2026-03-07"


def test_date_key_ignores_time_of_day() -> None:
    morning = datetime(2026, 10, 19, 0, 0, 1)
    night = datetime(2026, 10, 19, 23, 59, 59)
    assert date_key(morning) == date_key(night) == date_key(date(2026, 10, 19))


def test_aware_datetime_uses_configured_zone() -> None:
    moment = datetime(2026, 10, 19, 20, 0, tzinfo=UTC)
    assert date_key(moment, UTC) == "2026-10-19"
    assert date_key(moment, _TOKYO) == "2026-10-20"
    assert date_key(moment, _NEW_YORK) == "2026-10-19"


def test_naive_datetime_is_wall_clock_in_zone() -> None:
    assert date_key(datetime(2026, 10, 19, 23, 0), _TOKYO) == "2026-10-19"


def test_to_calendar_date_rejects_other_types() -> None:
    with pytest.raises(TypeError):
        to_calendar_date("2026-10-19")  # type: ignore[arg-type]


def test_parse_date_key_is_strict() -> None:
    assert parse_date_key("2026-10-19") == date(2026, 10, 19)
    for bad in ("20261019", "2026-1-9", "Oct 19, 2026", "2026-13-01"):
        with pytest.raises(ValueError):
            parse_date_key(bad)


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("2026-10-19", "2026-10-19"),
        ("Oct 19, 2026", "2026-10-19"),
        ("Oct 5, 2026", "2026-10-05"),
        ("19 Oct 2026", "2026-10-19"),
        ("October 19, 2026", "2026-10-19"),
    ],
)
def test_normalize_date_key_migrates_legacy_formats(raw: str, expected: str) -> None:
    assert normalize_date_key(raw) == expected


def test_normalize_date_key_rejects_garbage() -> None:
    with pytest.raises(ValueError):
        normalize_date_key("yesterday")


def test_format_display_date_medium_style() -> None:
    assert format_display_date(date(2026, 10, 5)) == "Oct 5, 2026"


def test_resolve_zone() -> None:
    assert resolve_zone(None) is UTC
    assert resolve_zone("utc") is UTC
    with pytest.raises(WaterConfigError):
        resolve_zone("Not/A_Zone")


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("Sept 9, 2026", "2026-09-09"),
        ("Oct. 19, 2026", "2026-10-19"),
        ("oct 19, 2026", "2026-10-19"),
    ],
)
def test_legacy_month_names_do_not_depend_on_locale(raw: str, expected: str) -> None:
    assert normalize_date_key(raw) == expected


@pytest.mark.parametrize("raw", ["19.10.2026", "Feb 30, 2026", "Okt 19, 2026"])
def test_normalize_date_key_rejects_unknown_spellings(raw: str) -> None:
    with pytest.raises(ValueError):
        normalize_date_key(raw)
