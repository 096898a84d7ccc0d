"""Endpoint resolution: DNS strategy, address-family policy and caching.

Attributes:
    EndpointResolver: Resolves hostname endpoints with HTTPS-record hints
        and a standard-lookup fallback, caching results per endpoint.
    ResolutionCache: Per-endpoint cache entries, each with its own lock.
    ResolverConfig: Pydantic settings (DNS server, timeouts, freshness
        window).
    resolve: Convenience function bound to a process-wide default resolver.

Examples:
    ```python
    from peerpoint.models import EndpointSpec
    from peerpoint.resolver import resolve

    spec = EndpointSpec.parse("vpn.example.com:51820")
    resolved = resolve(spec)  # blocking; call from a worker thread
    ```
"""

from __future__ import annotations

import threading

from peerpoint.models.endpoint import EndpointSpec, ResolvedEndpoint

from .cache import CacheEntry, ResolutionCache
from .configs import ResolverConfig
from .resolver import EndpointResolver


__all__ = [
    "CacheEntry",
    "EndpointResolver",
    "ResolutionCache",
    "ResolverConfig",
    "default_resolver",
    "resolve",
]

_default_resolver: EndpointResolver | None = None
_default_lock = threading.Lock()


def default_resolver() -> EndpointResolver:
    """Return the process-wide resolver, creating it on first use."""
    global _default_resolver  # noqa: PLW0603
    with _default_lock:
        if _default_resolver is None:
            _default_resolver = EndpointResolver()
        return _default_resolver


def resolve(spec: EndpointSpec) -> ResolvedEndpoint | None:
    """Resolve *spec* with the process-wide default resolver."""
    return default_resolver().resolve(spec)
