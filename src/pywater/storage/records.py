"""Durable record map: load/save of the ``waterRecords`` entry."""

from __future__ import annotations

import json
import logging

from pydantic import ValidationError

from pywater._constants import RECORDS_KEY
from pywater._preview import preview_for_log
from pywater.exceptions import WaterDecodeError, WaterEncodeError, WaterStorageError
from pywater.models.records import RecordMap
from pywater.storage.backend import StorageBackend

_logger = logging.getLogger(__name__)


def encode_records(records: RecordMap) -> bytes:
    """Serialise *records* as a JSON object of date key → intake."""
    try:
        return json.dumps(records.to_dict(), sort_keys=True, separators=(",", ":")).encode("utf-8")
    except (TypeError, ValueError) as exc:
        raise WaterEncodeError(f"cannot encode records: {exc}", key=RECORDS_KEY) from exc


def decode_records(data: bytes | str) -> RecordMap:
    """Parse bytes written by :func:`encode_records`.

    Raises :class:`WaterDecodeError` for anything that is not a JSON object
    of valid date keys to non-negative integers.
    """
    try:
        return RecordMap.model_validate_json(data)
    except ValidationError as exc:
        raise WaterDecodeError(
            f"invalid records payload ({exc.error_count()} errors)", key=RECORDS_KEY
        ) from exc
    except ValueError as exc:
        raise WaterDecodeError(f"undecodable records payload: {exc}", key=RECORDS_KEY) from exc


class RecordStore:
    """Reads and writes the full record map through a storage backend.

    There is no incremental update: every :meth:`save` overwrites the whole
    entry.
    """

    def __init__(self, backend: StorageBackend, *, key: str = RECORDS_KEY) -> None:
        self._backend = backend
        self._key = key

    def load(self) -> RecordMap:
        """Return the persisted map, or an empty one if absent or unreadable."""
        try:
            data = self._backend.read(self._key)
        except WaterStorageError as exc:
            _logger.warning("Record storage unreadable, starting empty: %s", exc)
            return RecordMap()
        if data is None:
            _logger.debug("No %s entry yet", self._key)
            return RecordMap()
        try:
            records = decode_records(data)
        except WaterDecodeError as exc:
            _logger.warning(
                "Discarding corrupt %s entry (%s): %r",
                self._key,
                exc,
                preview_for_log(data),
            )
            return RecordMap()
        _logger.debug("Loaded %d day records", len(records))
        return records

    def save(self, records: RecordMap) -> bool:
        """Overwrite the persisted map.

        Returns ``False`` (after logging) when encoding or the write failed;
        the previous durable state is then left untouched.
        """
        try:
            payload = encode_records(records)
            self._backend.write(self._key, payload)
        except WaterStorageError as exc:
            _logger.warning("Skipped saving %s: %s", self._key, exc)
            return False
        return True
