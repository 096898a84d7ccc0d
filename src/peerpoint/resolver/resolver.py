"""
Endpoint resolution with HTTPS-record hints and a time-gated cache.

[EndpointResolver.resolve()][peerpoint.resolver.resolver.EndpointResolver.resolve]
turns an [EndpointSpec][peerpoint.models.endpoint.EndpointSpec] into a
numeric endpoint:

1. Literal endpoints are returned as-is, without locking or I/O.
2. Otherwise the endpoint's cache entry is locked. A result younger than
   the freshness window is returned directly, even if it is ``None``.
3. A stale entry triggers one attempt: HTTPS-record hints first (IPv6 hint
   when the host has global IPv6, else IPv4 hint, both only with a port
   hint), then an ordinary address lookup preferring IPv4 with the
   original port. The attempt time is recorded even when it fails, which
   bounds the DNS query rate.

Entries without an attempt for ``cache_max_age`` seconds are swept from the
cache, at most once per ``cache_max_age``.

Note:
    ``resolve`` blocks on network I/O. Call it from a worker thread, or use
    [aresolve()][peerpoint.resolver.resolver.EndpointResolver.aresolve]
    from async code.
"""

from __future__ import annotations

import asyncio
import threading
import time
from typing import TYPE_CHECKING

from peerpoint.core.logger import Logger
from peerpoint.models.endpoint import EndpointSpec, ResolvedEndpoint
from peerpoint.models.hints import HttpsHints
from peerpoint.utils.dns import lookup_addresses, pick_address, query_https_hints
from peerpoint.utils.network import has_global_ipv6

from .cache import ResolutionCache
from .configs import ResolverConfig


if TYPE_CHECKING:
    from collections.abc import Callable


class EndpointResolver:
    """Resolves hostname endpoints and caches the result per endpoint.

    Args:
        config: Resolver settings; defaults to
            [ResolverConfig][peerpoint.resolver.configs.ResolverConfig]().
        cache: Cache to use; pass a shared instance to let several resolvers
            cooperate on the same entries.
        clock: Monotonic time source in seconds (injectable for tests).
    """

    def __init__(
        self,
        config: ResolverConfig | None = None,
        *,
        cache: ResolutionCache | None = None,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._config = config if config is not None else ResolverConfig()
        self._cache = cache if cache is not None else ResolutionCache()
        self._clock = clock
        self._sweep_lock = threading.Lock()
        self._last_sweep = clock()
        self._logger = Logger("resolver")

    @property
    def config(self) -> ResolverConfig:
        """The resolver configuration (read-only)."""
        return self._config

    @property
    def cache(self) -> ResolutionCache:
        """The cache holding per-endpoint resolution state."""
        return self._cache

    def resolve(self, spec: EndpointSpec) -> ResolvedEndpoint | None:
        """Return the current numeric endpoint for *spec*.

        Args:
            spec: Endpoint to resolve.

        Returns:
            *spec* itself when it is literal, the cached or freshly resolved
            endpoint otherwise, or ``None`` if the host could not be
            resolved during the last attempt.
        """
        if spec.is_literal:
            return spec

        self._sweep()
        while True:
            entry = self._cache.entry(spec)
            with entry.lock:
                if entry.evicted:
                    continue
                now = self._clock()
                if entry.is_fresh(now, self._config.freshness_window):
                    return entry.resolved

                resolved = self._attempt(spec)
                entry.store(self._clock(), resolved)
                return resolved

    async def aresolve(self, spec: EndpointSpec) -> ResolvedEndpoint | None:
        """Async variant of [resolve()][peerpoint.resolver.resolver.EndpointResolver.resolve].

        Runs the blocking resolution on a worker thread so the event loop
        stays responsive.
        """
        if spec.is_literal:
            return spec
        return await asyncio.to_thread(self.resolve, spec)

    def invalidate(self, spec: EndpointSpec) -> None:
        """Force the next ``resolve`` of *spec* to query DNS again."""
        self._cache.invalidate(spec)

    def _sweep(self) -> None:
        """Evict idle cache entries, at most once per ``cache_max_age``."""
        max_age = self._config.cache_max_age
        now = self._clock()
        with self._sweep_lock:
            if now - self._last_sweep < max_age:
                return
            self._last_sweep = now
        removed = self._cache.evict_stale(now, max_age)
        if removed:
            self._logger.debug("cache_evicted", entries=removed, remaining=len(self._cache))

    # -------------------------------------------------------------------------
    # Resolution attempt
    # -------------------------------------------------------------------------

    def _attempt(self, spec: EndpointSpec) -> ResolvedEndpoint | None:
        """Run one resolution attempt. Called with the entry lock held."""
        self._logger.debug("resolution_started", endpoint=spec)

        if self._config.use_https_hints:
            resolved = self._from_hints(spec)
            if resolved is not None:
                self._logger.info(
                    "resolution_succeeded", endpoint=spec, resolved=resolved, source="https"
                )
                return resolved

        try:
            addresses = lookup_addresses(spec.host)
        except (OSError, UnicodeError) as e:
            self._logger.warning(
                "resolution_failed", endpoint=spec, error=str(e) or type(e).__name__
            )
            return None

        address = pick_address(addresses)
        if address is None:
            self._logger.warning("resolution_failed", endpoint=spec, error="no addresses")
            return None

        resolved = EndpointSpec.from_address(address, spec.port)
        self._logger.info(
            "resolution_succeeded", endpoint=spec, resolved=resolved, source="lookup"
        )
        return resolved

    def _from_hints(self, spec: EndpointSpec) -> ResolvedEndpoint | None:
        has_ipv6 = has_global_ipv6()
        lookup = query_https_hints(
            spec.host,
            server=self._config.dns_server,
            port=self._config.dns_port,
            timeout=self._config.query_timeout,
        )
        if not isinstance(lookup, HttpsHints):
            self._logger.debug("https_hints_unavailable", endpoint=spec, reason=lookup.reason)
            return None

        resolved = lookup.select(has_ipv6=has_ipv6)
        if resolved is None:
            self._logger.debug("https_hints_insufficient", endpoint=spec, port=lookup.port)
        return resolved
