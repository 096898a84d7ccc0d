"""
Time-gated resolution cache keyed by endpoint identity.

Endpoint values stay immutable; the mutable resolution state lives here,
one [CacheEntry][peerpoint.resolver.cache.CacheEntry] per distinct
``(host, port)``. Each entry owns its own lock, so concurrent resolutions
of the same endpoint serialize while different endpoints proceed
independently. Entries that have gone without an attempt for longer than a
maximum age are evicted by
[evict_stale()][peerpoint.resolver.cache.ResolutionCache.evict_stale].
"""

from __future__ import annotations

import threading
from dataclasses import dataclass, field
from typing import TYPE_CHECKING


if TYPE_CHECKING:
    from peerpoint.models.endpoint import EndpointSpec, ResolvedEndpoint


@dataclass(slots=True)
class CacheEntry:
    """Resolution state of one endpoint.

    ``last_resolution`` and ``resolved`` must only be read or written while
    holding ``lock``.

    Attributes:
        lock: Serializes resolution attempts for this endpoint.
        last_resolution: Clock reading of the last attempt (successful or
            not), ``None`` before the first one.
        resolved: Result of the last attempt, ``None`` if it failed.
        evicted: Set once the entry has been removed from its cache. A
            caller holding an evicted entry must fetch a new one.
    """

    lock: threading.Lock = field(default_factory=threading.Lock, repr=False)
    last_resolution: float | None = None
    resolved: ResolvedEndpoint | None = None
    evicted: bool = False

    def is_fresh(self, now: float, window: float) -> bool:
        """Whether the last attempt happened less than *window* seconds ago."""
        return self.last_resolution is not None and now - self.last_resolution < window

    def store(self, now: float, resolved: ResolvedEndpoint | None) -> None:
        """Replace the cached result and stamp the attempt time.

        The timestamp never moves backwards.
        """
        if self.last_resolution is None or now > self.last_resolution:
            self.last_resolution = now
        self.resolved = resolved


class ResolutionCache:
    """Mapping from endpoint to its [CacheEntry][peerpoint.resolver.cache.CacheEntry].

    The internal lock only guards the dictionary itself (entry creation and
    removal); it is never held during DNS I/O.
    """

    def __init__(self) -> None:
        self._entries: dict[EndpointSpec, CacheEntry] = {}
        self._lock = threading.Lock()

    def entry(self, spec: EndpointSpec) -> CacheEntry:
        """Return the unique entry for *spec*, creating it if needed."""
        with self._lock:
            entry = self._entries.get(spec)
            if entry is None:
                entry = self._entries[spec] = CacheEntry()
            return entry

    def get(self, spec: EndpointSpec) -> ResolvedEndpoint | None:
        """Return the cached result for *spec* without resolving."""
        with self._lock:
            entry = self._entries.get(spec)
        if entry is None:
            return None
        with entry.lock:
            return entry.resolved

    def invalidate(self, spec: EndpointSpec) -> None:
        """Mark *spec* stale so the next resolution queries DNS again.

        The previous result stays readable until it is replaced.
        """
        with self._lock:
            entry = self._entries.get(spec)
        if entry is not None:
            with entry.lock:
                entry.last_resolution = None

    def evict_stale(self, now: float, max_age: float) -> int:
        """Drop entries whose last attempt is *max_age* seconds old or older.

        Entries whose lock is held are skipped. Entries that were never
        resolved or were invalidated count as stale.

        Returns:
            Number of entries removed.
        """
        removed = 0
        with self._lock:
            for spec, entry in list(self._entries.items()):
                if not entry.lock.acquire(blocking=False):
                    continue
                try:
                    last = entry.last_resolution
                    if last is None or now - last >= max_age:
                        entry.evicted = True
                        del self._entries[spec]
                        removed += 1
                finally:
                    entry.lock.release()
        return removed

    def clear(self) -> None:
        """Forget every entry."""
        with self._lock:
            for entry in self._entries.values():
                entry.evicted = True
            self._entries.clear()

    def __contains__(self, spec: object) -> bool:
        with self._lock:
            return spec in self._entries

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)
