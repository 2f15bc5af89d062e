"""Key/value byte storage backends.

Stores talk to storage only through :class:`StorageBackend`, so tests and
embedding hosts can swap in their own implementation.
"""

from __future__ import annotations

import logging
import os
import re
import tempfile
from pathlib import Path
from typing import Protocol

from pywater.exceptions import WaterStorageError

_logger = logging.getLogger(__name__)

_SAFE_KEY_RE = re.compile(r"^[A-Za-z0-9_.\-]+$")


class StorageBackend(Protocol):
    """Structural interface for named byte entries."""

    def read(self, key: str) -> bytes | None:
        """Return the stored bytes, or ``None`` when the entry is absent."""
        ...

    def write(self, key: str, data: bytes) -> None:
        """Replace the entry atomically. Raises :class:`WaterStorageError`."""
        ...


class MemoryBackend:
    """In-process backend; contents vanish with the object."""

    def __init__(self, initial: dict[str, bytes] | None = None) -> None:
        self._entries: dict[str, bytes] = dict(initial or {})

    def read(self, key: str) -> bytes | None:
        return self._entries.get(key)

    def write(self, key: str, data: bytes) -> None:
        self._entries[key] = bytes(data)

    def keys(self) -> list[str]:
        return sorted(self._entries)


class FileBackend:
    """One JSON file per entry under *root* (``<root>/<key>.json``).

    Writes go to a temporary file in the same directory which is then
    ``os.replace``-d over the target, so a reader sees either the old or the
    new content, never a partial write.
    """

    def __init__(self, root: str | os.PathLike[str]) -> None:
        self._root = Path(root).expanduser()

    @property
    def root(self) -> Path:
        return self._root

    def path_for(self, key: str) -> Path:
        if not _SAFE_KEY_RE.match(key) or key in {".", ".."}:
            raise WaterStorageError(f"invalid entry name: {key!r}", key=key)
        return self._root / f"{key}.json"

    def read(self, key: str) -> bytes | None:
        path = self.path_for(key)
        try:
            return path.read_bytes()
        except FileNotFoundError:
            return None
        except OSError as exc:
            raise WaterStorageError(f"cannot read {path}: {exc}", key=key) from exc

    def write(self, key: str, data: bytes) -> None:
        path = self.path_for(key)
        tmp_name: str | None = None
        try:
            self._root.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(prefix=f".{key}.", suffix=".tmp", dir=self._root)
            with os.fdopen(fd, "wb") as fh:
                fh.write(data)
                fh.flush()
                os.fsync(fh.fileno())
            os.replace(tmp_name, path)
            tmp_name = None
        except OSError as exc:
            raise WaterStorageError(f"cannot write {path}: {exc}", key=key) from exc
        finally:
            if tmp_name is not None:
                try:
                    os.unlink(tmp_name)
                except OSError:
                    _logger.debug("Could not remove temp file %s", tmp_name)
        _logger.debug("Wrote %s (%d bytes)", path, len(data))
