"""Custom exception hierarchy for pywater."""

from __future__ import annotations


class WaterError(Exception):
    """Base exception for all pywater errors."""


class WaterConfigError(WaterError):
    """Invalid or missing configuration."""


class WaterStorageError(WaterError):
    """Durable storage failure (unreadable entry, failed write)."""

    def __init__(self, message: str, *, key: str = "") -> None:
        self.key = key
        super().__init__(message)


class WaterDecodeError(WaterStorageError):
    """Persisted bytes could not be decoded into a valid value.

    The stores catch this and degrade to an empty record map or default
    settings; it only escapes from the raw ``decode`` helpers.
    """


class WaterEncodeError(WaterStorageError):
    """In-memory state could not be serialised.

    The stores catch this and skip the write, so a failed encode leaves the
    previous durable state in place.
    """
