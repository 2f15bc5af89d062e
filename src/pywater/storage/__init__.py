"""Durable storage layer.

Backends move named byte entries; the stores own the encoding of the record
map and the scalar settings on top of them.
"""

from pywater.storage.backend import FileBackend, MemoryBackend, StorageBackend
from pywater.storage.records import RecordStore, decode_records, encode_records
from pywater.storage.settings import SettingsStore

__all__ = [
    "FileBackend",
    "MemoryBackend",
    "RecordStore",
    "SettingsStore",
    "StorageBackend",
    "decode_records",
    "encode_records",
]
