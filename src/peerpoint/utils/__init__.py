"""Blocking network primitives: DNS queries and interface probing.

Depends only on [peerpoint.models][peerpoint.models] and
[peerpoint.core][peerpoint.core]; consumed by
[peerpoint.resolver][peerpoint.resolver].

Attributes:
    dns: HTTPS-record hint queries (``dnspython``), platform address
        lookup and the IPv4-first address preference.
    network: Global IPv6 capability detection (``psutil``).
"""

from .dns import lookup_addresses, pick_address, query_https_hints
from .network import has_global_ipv6, is_global_ipv6


__all__ = [
    "has_global_ipv6",
    "is_global_ipv6",
    "lookup_addresses",
    "pick_address",
    "query_https_hints",
]
