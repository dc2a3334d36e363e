"""
In-memory payload store with per-entry expiry.

Holds the two example payloads between the request that stores them and the
request that compares them. Owned by the application instance and handed to
route handlers explicitly; the diff engine never sees it.
"""

from __future__ import annotations

import threading
import time
from collections.abc import Callable
from dataclasses import dataclass
from enum import StrEnum
from typing import Any

import structlog

_log = structlog.get_logger(__name__)


class PayloadSlot(StrEnum):
    PAYLOAD1 = "payload1"
    PAYLOAD2 = "payload2"


@dataclass(frozen=True)
class _Entry:
    value: Any
    expires_at: float


class PayloadStore:
    """
    Keyed store whose entries vanish ``ttl_seconds`` after being written.

    Expired entries are dropped lazily on read.
    """

    def __init__(
        self,
        ttl_seconds: float,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._ttl = ttl_seconds
        self._clock = clock
        self._entries: dict[PayloadSlot, _Entry] = {}
        self._lock = threading.Lock()

    def put(self, slot: PayloadSlot, value: Any) -> None:
        with self._lock:
            self._entries[slot] = _Entry(value=value, expires_at=self._clock() + self._ttl)
        _log.info("payload_stored", slot=slot.value, ttl_seconds=self._ttl)

    def get(self, slot: PayloadSlot) -> Any | None:
        """Return the stored value, or None if absent or expired."""
        with self._lock:
            entry = self._entries.get(slot)
            if entry is None:
                return None
            if self._clock() >= entry.expires_at:
                del self._entries[slot]
                _log.info("payload_expired", slot=slot.value)
                return None
            return entry.value

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()

    def __len__(self) -> int:
        now = self._clock()
        with self._lock:
            return sum(1 for entry in self._entries.values() if now < entry.expires_at)
