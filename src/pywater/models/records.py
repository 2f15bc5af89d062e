"""Record map: calendar day → cumulative intake."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from typing import Annotated, Any

from pydantic import Field, RootModel, field_validator

from pywater._preview import preview_for_log
from pywater.dates import normalize_date_key, parse_date_key

_logger = logging.getLogger(__name__)

Intake = Annotated[int, Field(strict=True, ge=0)]
"""Non-negative whole volume units. Strict so ``True`` / ``"8"`` are rejected."""


def _is_intake(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and value >= 0


class RecordMap(RootModel[dict[str, Intake]]):
    """Mapping from ISO date key to the intake logged for that day.

    Keys are normalised on construction: legacy display keys are migrated
    and keys that are not recognisable dates are dropped (with a warning)
    so one stray entry cannot discard the rest of the history.
    Use :meth:`set` for writes so the non-negative invariant holds after
    construction too.
    """

    root: dict[str, Intake] = Field(default_factory=dict)

    @field_validator("root", mode="before")
    @classmethod
    def _normalize_keys(cls, value: Any) -> Any:
        if not isinstance(value, dict):
            return value
        normalized: dict[str, Any] = {}
        dropped: list[Any] = []
        for key, amount in value.items():
            try:
                iso = normalize_date_key(key)
            except ValueError:
                dropped.append(key)
                continue
            if iso not in normalized:
                normalized[iso] = amount
            elif not _is_intake(normalized[iso]):
                continue
            elif not _is_intake(amount):
                # Keep the bad value so strict validation rejects the payload.
                normalized[iso] = amount
            else:
                # Two spellings of the same day: keep the larger total.
                normalized[iso] = max(normalized[iso], amount)
        if dropped:
            _logger.warning("Dropping %d unrecognised day keys: %r", len(dropped), preview_for_log(dropped))
        return normalized

    def __contains__(self, key: object) -> bool:
        return key in self.root

    def __getitem__(self, key: str) -> int:
        return self.root[key]

    def __iter__(self) -> Iterator[str]:  # type: ignore[override]
        return iter(self.root)

    def __len__(self) -> int:
        return len(self.root)

    def get(self, key: str, default: int | None = None) -> int | None:
        return self.root.get(key, default)

    def set(self, key: str, amount: int) -> None:
        """Store *amount* for *key*, enforcing the key format and ``amount >= 0``."""
        parse_date_key(key)
        if isinstance(amount, bool) or not isinstance(amount, int):
            raise TypeError(f"intake must be an int, got {type(amount).__name__}")
        if amount < 0:
            raise ValueError(f"intake must be >= 0, got {amount}")
        self.root[key] = amount

    def to_dict(self) -> dict[str, int]:
        """Plain copy of the mapping."""
        return dict(self.root)
