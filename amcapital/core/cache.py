"""Time-bounded in-memory cache for market data lookups.

Entries carry their own expiry. Reads treat expired entries as misses;
removal happens only in ``sweep()``, which an external scheduler (or the
owning service) calls explicitly.
"""

from __future__ import annotations

import threading
import time
from typing import Any, Callable, Hashable


class TTLCache:
    """Thread-safe key/value cache with per-entry time-to-live."""

    def __init__(
        self,
        default_ttl: float = 600.0,
        max_entries: int = 1000,
        clock: Callable[[], float] = time.monotonic,
    ):
        """
        Args:
            default_ttl: Lifetime in seconds when ``set`` gets no ttl
            max_entries: Capacity before the oldest entry is dropped
            clock: Monotonic time source, injectable for tests
        """
        if max_entries < 1:
            raise ValueError("max_entries must be >= 1")
        self.default_ttl = default_ttl
        self.max_entries = max_entries
        self._clock = clock
        self._entries: dict[Hashable, tuple[float, Any]] = {}
        self._lock = threading.Lock()

    def get(self, key: Hashable, default: Any = None) -> Any:
        with self._lock:
            entry = self._entries.get(key)
            if entry is None:
                return default
            expires_at, value = entry
            if self._clock() >= expires_at:
                return default
            return value

    def set(self, key: Hashable, value: Any, ttl: float | None = None) -> None:
        lifetime = self.default_ttl if ttl is None else ttl
        with self._lock:
            if key not in self._entries and len(self._entries) >= self.max_entries:
                self._sweep_locked()
                if len(self._entries) >= self.max_entries:
                    oldest = next(iter(self._entries))
                    del self._entries[oldest]
            self._entries.pop(key, None)
            self._entries[key] = (self._clock() + lifetime, value)

    def sweep(self) -> int:
        """Remove expired entries and return how many were dropped."""
        with self._lock:
            return self._sweep_locked()

    def _sweep_locked(self) -> int:
        now = self._clock()
        expired = [k for k, (expires_at, _) in self._entries.items() if now >= expires_at]
        for k in expired:
            del self._entries[k]
        return len(expired)

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def __contains__(self, key: Hashable) -> bool:
        return self.get(key, _MISSING) is not _MISSING


_MISSING = object()
