"""Durable scalar settings: daily goal and log increment."""

from __future__ import annotations

import json
import logging
from typing import Annotated

from pydantic import Field, TypeAdapter, ValidationError

from pywater._constants import (
    DEFAULT_GOAL,
    DEFAULT_INCREMENT,
    GOAL_KEY,
    GOAL_MAX,
    GOAL_MIN,
    INCREMENT_KEY,
    INCREMENT_MAX,
    INCREMENT_MIN,
)
from pywater._preview import preview_for_log
from pywater.exceptions import WaterStorageError
from pywater.models.settings import TrackerSettings
from pywater.storage.backend import StorageBackend

_logger = logging.getLogger(__name__)

# Strict so JSON ``true``, ``"64"`` and ``64.5`` fall back to the default.
_GOAL_ADAPTER: TypeAdapter[int] = TypeAdapter(Annotated[int, Field(strict=True, ge=GOAL_MIN, le=GOAL_MAX)])
_INCREMENT_ADAPTER: TypeAdapter[int] = TypeAdapter(
    Annotated[int, Field(strict=True, ge=INCREMENT_MIN, le=INCREMENT_MAX)]
)


class SettingsStore:
    """Persists each setting as its own JSON integer entry.

    Entries are read independently: a corrupt goal does not reset the
    increment and vice versa.
    """

    def __init__(
        self,
        backend: StorageBackend,
        *,
        default_goal: int = DEFAULT_GOAL,
        default_increment: int = DEFAULT_INCREMENT,
    ) -> None:
        self._backend = backend
        self._defaults = TrackerSettings(goal=default_goal, increment_amount=default_increment)

    @property
    def defaults(self) -> TrackerSettings:
        return self._defaults

    def _read_int(self, key: str, default: int, adapter: TypeAdapter[int]) -> int:
        try:
            data = self._backend.read(key)
        except WaterStorageError as exc:
            _logger.warning("Setting %s unreadable, using %d: %s", key, default, exc)
            return default
        if data is None:
            return default
        try:
            return adapter.validate_json(data)
        except ValidationError as exc:
            _logger.warning(
                "Setting %s invalid (%d errors), using %d: %r",
                key,
                exc.error_count(),
                default,
                preview_for_log(data),
            )
            return default

    def load(self) -> TrackerSettings:
        """Return the persisted settings, falling back to defaults per entry."""
        goal = self._read_int(GOAL_KEY, self._defaults.goal, _GOAL_ADAPTER)
        increment = self._read_int(INCREMENT_KEY, self._defaults.increment_amount, _INCREMENT_ADAPTER)
        return TrackerSettings(goal=goal, increment_amount=increment)

    def save(self, settings: TrackerSettings) -> bool:
        """Write both entries. Returns ``False`` (after logging) on failure.

        The two entries are not written as one unit. The increment goes
        first, so a failure on the goal write can leave a new increment
        next to the old goal; the goal entry itself is never half-updated.
        """
        try:
            self._backend.write(INCREMENT_KEY, json.dumps(settings.increment_amount).encode("utf-8"))
            self._backend.write(GOAL_KEY, json.dumps(settings.goal).encode("utf-8"))
        except WaterStorageError as exc:
            _logger.warning("Skipped saving settings: %s", exc)
            return False
        return True
