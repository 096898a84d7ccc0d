"""Shared constants for the models layer.

Process-wide defaults for endpoint parsing and resolution. They are read
only; [ResolverConfig][peerpoint.resolver.configs.ResolverConfig] copies
them as field defaults so that deployments can override them from YAML.
"""

from __future__ import annotations

from enum import StrEnum


class AddressFamily(StrEnum):
    """Classification of an endpoint host.

    Attributes:
        IPV4: Numeric IPv4 literal (``203.0.113.7``).
        IPV6: Numeric IPv6 literal (``2001:db8::1``), bracketed when rendered.
        HOSTNAME: DNS name that must be resolved before use.
    """

    IPV4 = "ipv4"
    IPV6 = "ipv6"
    HOSTNAME = "hostname"


PORT_MIN = 0
PORT_MAX = 65_535

# Synthetic scheme prepended to raw endpoint text so it parses as an authority.
ENDPOINT_SCHEME = "wg"

# Recursive resolver queried for HTTPS records.
DEFAULT_DNS_SERVER = "8.8.8.8"
DEFAULT_DNS_PORT = 53

# Minimum seconds between two resolution attempts for the same endpoint.
DEFAULT_FRESHNESS_WINDOW = 60.0

# Upper bound in seconds for a single HTTPS-record query.
DEFAULT_QUERY_TIMEOUT = 5.0

# Seconds without a resolution attempt after which a cache entry is dropped.
DEFAULT_CACHE_MAX_AGE = 600.0
