"""Cache collaborator used by the schema registry."""

from __future__ import annotations

import copy
import threading
import time
from collections.abc import Callable
from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class SchemaCache(Protocol):
    """Key-value store with per-entry time-to-live."""

    def get(self, key: str) -> Any | None:
        """Return the stored value, or None when missing or expired."""
        ...

    def set(self, key: str, value: Any, ttl_seconds: int) -> None:
        """Store a value for ``ttl_seconds``."""
        ...

    def delete(self, key: str) -> None:
        """Remove a key; missing keys are ignored."""
        ...


class InMemoryTTLCache:
    """Thread-safe in-process cache.

    Values are deep-copied on the way in and out, so callers never share
    mutable state with the store. A non-positive TTL means the value is not
    stored at all.
    """

    def __init__(self, clock: Callable[[], float] | None = None) -> None:
        self._clock = clock or time.monotonic
        self._entries: dict[str, tuple[float, Any]] = {}
        self._lock = threading.Lock()

    def get(self, key: str) -> Any | None:
        with self._lock:
            entry = self._entries.get(key)
            if entry is None:
                return None
            expires_at, value = entry
            if self._clock() >= expires_at:
                del self._entries[key]
                return None
            return copy.deepcopy(value)

    def set(self, key: str, value: Any, ttl_seconds: int) -> None:
        if ttl_seconds <= 0:
            self.delete(key)
            return
        stored = copy.deepcopy(value)
        with self._lock:
            self._entries[key] = (self._clock() + ttl_seconds, stored)

    def delete(self, key: str) -> None:
        with self._lock:
            self._entries.pop(key, None)

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)
