"""Pure frozen dataclasses with zero I/O for peer endpoints.

The models layer is the foundation of the import DAG. Every model uses
``@dataclass(frozen=True, slots=True)``; validation happens at
construction so invalid instances never escape.

Attributes:
    EndpointSpec: Parsed ``host:port`` endpoint with literal-address
        detection and canonical rendering.
    ResolvedEndpoint: Alias of EndpointSpec used for resolution results
        (always literal).
    HttpsHints: Address/port hints from an HTTPS DNS record.
    NoHints: Explicit "no hint data, fall back" result.
    AddressFamily: Enum classifying an endpoint host.
"""

from .constants import (
    DEFAULT_CACHE_MAX_AGE,
    DEFAULT_DNS_PORT,
    DEFAULT_DNS_SERVER,
    DEFAULT_FRESHNESS_WINDOW,
    DEFAULT_QUERY_TIMEOUT,
    PORT_MAX,
    PORT_MIN,
    AddressFamily,
)
from .endpoint import EndpointSpec, ResolvedEndpoint
from .hints import HintLookup, HttpsHints, NoHints


__all__ = [
    "DEFAULT_CACHE_MAX_AGE",
    "DEFAULT_DNS_PORT",
    "DEFAULT_DNS_SERVER",
    "DEFAULT_FRESHNESS_WINDOW",
    "DEFAULT_QUERY_TIMEOUT",
    "PORT_MAX",
    "PORT_MIN",
    "AddressFamily",
    "EndpointSpec",
    "HintLookup",
    "HttpsHints",
    "NoHints",
    "ResolvedEndpoint",
]
