"""
Validated peer endpoint (host plus port) with literal-address detection.

Parses ``host:port`` and ``[ipv6]:port`` text by prefixing a synthetic
scheme and letting ``rfc3986`` split the authority, so bracketed IPv6
literals, IPv4 literals and hostnames share one grammar. The host is then
tried as a numeric address: literal endpoints never need DNS.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from ipaddress import IPv4Address, IPv6Address, ip_address
from typing import ClassVar, TypeAlias

from rfc3986 import uri_reference
from rfc3986.exceptions import InvalidAuthority, ValidationError
from rfc3986.validators import Validator

from peerpoint.core.exceptions import MalformedEndpointError

from .constants import ENDPOINT_SCHEME, PORT_MAX, PORT_MIN, AddressFamily


@dataclass(frozen=True, slots=True)
class EndpointSpec:
    """Immutable endpoint used to reach a tunnel peer.

    Equality and hashing consider only ``host`` and ``port``, which makes an
    instance usable as the structural cache key of
    [ResolutionCache][peerpoint.resolver.cache.ResolutionCache].

    Attributes:
        host: Numeric IPv4/IPv6 literal (brackets stripped) or DNS name.
        port: UDP port, 0-65535 inclusive.
        is_literal: True when ``host`` is a numeric address. Such endpoints
            resolve to themselves.

    Examples:
        ```python
        spec = EndpointSpec.parse("vpn.example.com:51820")
        spec.is_literal  # False
        str(EndpointSpec.parse("[2001:db8::1]:51820"))  # '[2001:db8::1]:51820'
        ```
    """

    host: str
    port: int
    is_literal: bool = field(default=False, compare=False)

    _FORBIDDEN_CHARACTERS: ClassVar[frozenset[str]] = frozenset("/?#")

    def __post_init__(self) -> None:
        if isinstance(self.port, bool) or not isinstance(self.port, int):
            raise TypeError(f"port must be an int, got {type(self.port).__name__}")
        if not PORT_MIN <= self.port <= PORT_MAX:
            raise MalformedEndpointError(f"{self.host}:{self.port}", "port out of range")
        if not self.host:
            raise MalformedEndpointError(f":{self.port}", "missing host")

    @classmethod
    def parse(cls, text: str) -> EndpointSpec:
        """Parse raw endpoint text.

        Args:
            text: ``host:port`` or ``[ipv6]:port``.

        Returns:
            A new EndpointSpec; ``is_literal`` is set when the host is a
            numeric address.

        Raises:
            MalformedEndpointError: If the text contains ``/``, ``?``, ``#``
                or null bytes, has no host or port, carries userinfo or
                percent-encoding, brackets a host that is not IPv6, or the
                port has leading zeros or is outside 0-65535.
        """
        if "\x00" in text:
            raise MalformedEndpointError(text, "contains null bytes")
        if any(c in cls._FORBIDDEN_CHARACTERS for c in text):
            raise MalformedEndpointError(text, "forbidden characters")

        uri = uri_reference(f"{ENDPOINT_SCHEME}://{text}")
        validator = (
            Validator().require_presence_of("host", "port").check_validity_of("host", "port")
        )
        try:
            validator.validate(uri)
            authority = uri.authority_info()
        except (ValidationError, InvalidAuthority):
            raise MalformedEndpointError(text, "missing/invalid host or port number") from None

        if authority["userinfo"] is not None:
            raise MalformedEndpointError(text, "userinfo is not allowed")

        host = authority["host"] or ""
        if "%" in host:
            raise MalformedEndpointError(text, "percent-encoding is not allowed")
        bracketed = host.startswith("[") and host.endswith("]")
        if bracketed:
            host = host[1:-1]
        if not host:
            raise MalformedEndpointError(text, "missing host")
        if bracketed and not isinstance(_numeric(host), IPv6Address):
            raise MalformedEndpointError(text, "bracketed host is not an IPv6 address")

        raw_port = authority["port"]
        if len(raw_port) > 1 and raw_port.startswith("0"):
            raise MalformedEndpointError(text, "port has leading zeros")
        port = int(raw_port)
        if not PORT_MIN <= port <= PORT_MAX:
            raise MalformedEndpointError(text, "missing/invalid port number")

        return cls(host=host, port=port, is_literal=_numeric(host) is not None)

    @classmethod
    def from_address(cls, address: str, port: int) -> EndpointSpec:
        """Build a literal endpoint from a numeric address.

        Raises:
            MalformedEndpointError: If *address* is not a numeric IPv4/IPv6
                address or *port* is out of range.
        """
        if _numeric(address) is None:
            raise MalformedEndpointError(f"{address}:{port}", "not a numeric address")
        return cls(host=address, port=port, is_literal=True)

    @property
    def family(self) -> AddressFamily:
        """Address family of the host, or ``HOSTNAME`` for DNS names."""
        if not self.is_literal:
            return AddressFamily.HOSTNAME
        if isinstance(ip_address(self.host), IPv6Address):
            return AddressFamily.IPV6
        return AddressFamily.IPV4

    def __str__(self) -> str:
        if self.is_literal and ":" in self.host:
            return f"[{self.host}]:{self.port}"
        return f"{self.host}:{self.port}"


# Resolution output: always a literal EndpointSpec.
ResolvedEndpoint: TypeAlias = EndpointSpec


def _numeric(host: str) -> IPv4Address | IPv6Address | None:
    try:
        return ip_address(host)
    except ValueError:
        return None
