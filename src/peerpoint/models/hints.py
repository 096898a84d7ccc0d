"""
HTTPS/SVCB hint lookup results.

An HTTPS-record query has two outcomes, modelled as explicit variants:

* [HttpsHints][peerpoint.models.hints.HttpsHints] -- an HTTPS record was
  found; it carries the ``ipv4hint``/``ipv6hint`` addresses and the
  ``port`` SvcParam (RFC 9460), each possibly empty.
* [NoHints][peerpoint.models.hints.NoHints] -- no usable answer (transport
  error, empty answer section, unparsable parameters). The resolver falls
  back to an ordinary address lookup.

Both are transient: only the endpoint derived from them is cached.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TypeAlias

from .endpoint import EndpointSpec


@dataclass(frozen=True, slots=True)
class HttpsHints:
    """Address and port hints extracted from one HTTPS record.

    Attributes:
        ipv4: IPv4 hint addresses in record order.
        ipv6: IPv6 hint addresses in record order.
        port: Port hint, ``0`` when the record has none.
    """

    ipv4: tuple[str, ...] = ()
    ipv6: tuple[str, ...] = ()
    port: int = 0

    def select(self, *, has_ipv6: bool) -> EndpointSpec | None:
        """Pick the endpoint the hints point to, if they are sufficient.

        Hints are only usable together with a nonzero port hint. IPv6 hints
        win when the host has global IPv6 connectivity, otherwise the first
        IPv4 hint is used.

        Args:
            has_ipv6: Whether a global IPv6 address is configured locally.

        Returns:
            A literal endpoint, or ``None`` when the caller must fall back
            to a standard lookup.
        """
        if self.port == 0:
            return None
        if has_ipv6 and self.ipv6:
            return EndpointSpec.from_address(self.ipv6[0], self.port)
        if self.ipv4:
            return EndpointSpec.from_address(self.ipv4[0], self.port)
        return None


@dataclass(frozen=True, slots=True)
class NoHints:
    """The HTTPS-record query produced nothing usable.

    Attributes:
        reason: Why no hints are available (for logging only).
    """

    reason: str


HintLookup: TypeAlias = HttpsHints | NoHints
