"""Helpers for safe debug logging.

Persisted entries can be arbitrarily large or binary when storage is
corrupt. This module trims them to a bounded, printable preview before
they are emitted in log records.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any


def preview_for_log(value: Any, *, max_string: int = 120, max_items: int = 20, _depth: int = 0) -> Any:
    """Return a bounded copy of *value* suitable for log messages."""
    if _depth > 10:
        return "<max-depth>"

    if value is None:
        return None

    if isinstance(value, str):
        if len(value) > max_string:
            return f"{value[:max_string]}…<truncated>"
        return value

    if isinstance(value, (int, float, bool)):
        return value

    if isinstance(value, (bytes, bytearray)):
        try:
            text = bytes(value).decode("utf-8")
        except UnicodeDecodeError:
            return f"<bytes:{len(value)}b>"
        return preview_for_log(text, max_string=max_string, max_items=max_items, _depth=_depth + 1)

    if isinstance(value, Mapping):
        items = list(value.items())
        preview: dict[str, Any] = {
            str(k): preview_for_log(v, max_string=max_string, max_items=max_items, _depth=_depth + 1)
            for k, v in items[:max_items]
        }
        if len(items) > max_items:
            preview["…"] = f"<{len(items) - max_items} more>"
        return preview

    if isinstance(value, Sequence):
        head = [
            preview_for_log(v, max_string=max_string, max_items=max_items, _depth=_depth + 1)
            for v in list(value)[:max_items]
        ]
        if len(value) > max_items:
            head.append(f"<{len(value) - max_items} more>")
        return head

    # Fallback: represent unknown objects without dumping internals.
    return repr(value)[:max_string]
