"""Calendar-date normalisation for storage keys.

Every record is keyed by an ISO 8601 ``YYYY-MM-DD`` string computed in a
fixed time zone. Display-formatted strings (``"Oct 19, 2026"``) depend on
the locale of the process that wrote them, so they are only produced for
renderers and only accepted when reading legacy data.
"""

from __future__ import annotations

import re
from datetime import UTC, date, datetime, tzinfo
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pywater.exceptions import WaterConfigError

_ISO_KEY_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")

_MONTH_NAMES: tuple[str, ...] = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)
_MONTH_ABBR: tuple[str, ...] = tuple(name[:3] for name in _MONTH_NAMES)

# English month lookup, independent of LC_TIME. "sept" is a common en_GB spelling.
_MONTHS: dict[str, int] = {
    **{name.lower(): i for i, name in enumerate(_MONTH_NAMES, start=1)},
    **{abbr.lower(): i for i, abbr in enumerate(_MONTH_ABBR, start=1)},
    "sept": 9,
}

# Medium date styles written by earlier app versions: "Oct 19, 2026" (en_US), "19 Oct 2026" (en_GB).
_LEGACY_MDY_RE = re.compile(r"^([A-Za-z]+)\.? (\d{1,2}), (\d{4})$")
_LEGACY_DMY_RE = re.compile(r"^(\d{1,2}) ([A-Za-z]+)\.? (\d{4})$")


def resolve_zone(name: str | None) -> tzinfo:
    """Return the tzinfo for an IANA zone name (``None`` or ``"UTC"`` → UTC)."""
    if name is None or name.strip().upper() == "UTC":
        return UTC
    try:
        return ZoneInfo(name.strip())
    except (ZoneInfoNotFoundError, ValueError) as exc:
        raise WaterConfigError(f"unknown time zone: {name!r}") from exc


def to_calendar_date(value: date | datetime, zone: tzinfo = UTC) -> date:
    """Collapse *value* to the calendar day it falls on in *zone*.

    Aware datetimes are converted into *zone* first. Naive datetimes are
    taken as wall-clock time in *zone*, so only their date part matters.
    """
    if isinstance(value, datetime):
        if value.tzinfo is not None:
            value = value.astimezone(zone)
        return value.date()
    if isinstance(value, date):
        return value
    raise TypeError(f"expected date or datetime, got {type(value).__name__}")


def date_key(value: date | datetime, zone: tzinfo = UTC) -> str:
    """Storage key for the calendar day of *value*."""
    return to_calendar_date(value, zone).isoformat()


def parse_date_key(key: str) -> date:
    """Parse a strict ``YYYY-MM-DD`` key.

    Raises :class:`ValueError` for anything else.
    """
    if not isinstance(key, str) or not _ISO_KEY_RE.match(key):
        raise ValueError(f"not an ISO date key: {key!r}")
    return date.fromisoformat(key)


def _parse_legacy(raw: str) -> date | None:
    match = _LEGACY_MDY_RE.match(raw)
    if match is not None:
        month_name, day, year = match.groups()
    else:
        match = _LEGACY_DMY_RE.match(raw)
        if match is None:
            return None
        day, month_name, year = match.groups()
    month = _MONTHS.get(month_name.lower())
    if month is None:
        return None
    try:
        return date(int(year), month, int(day))
    except ValueError:
        return None


def normalize_date_key(key: str) -> str:
    """Return the ISO key for *key*, migrating legacy display formats.

    Raises :class:`ValueError` when *key* is neither ISO nor a known legacy
    format.
    """
    raw = key.strip() if isinstance(key, str) else key
    if isinstance(raw, str) and _ISO_KEY_RE.match(raw):
        return parse_date_key(raw).isoformat()
    if isinstance(raw, str):
        legacy = _parse_legacy(raw)
        if legacy is not None:
            return legacy.isoformat()
    raise ValueError(f"unrecognised date key: {key!r}")


def format_display_date(value: date | datetime, zone: tzinfo = UTC) -> str:
    """Medium-style display string (``Oct 19, 2026``). Never use as a key."""
    day = to_calendar_date(value, zone)
    return f"{_MONTH_ABBR[day.month - 1]} {day.day}, {day.year}"
