"""DNS primitives used by the endpoint resolver.

Two query paths are provided:

* [query_https_hints][peerpoint.utils.dns.query_https_hints] sends one
  HTTPS-type (RFC 9460) query to a fixed recursive resolver with
  ``dnspython`` and extracts the ``ipv4hint``, ``ipv6hint`` and ``port``
  SvcParams. Every DNS-layer failure is folded into a
  [NoHints][peerpoint.models.hints.NoHints] result.
* [lookup_addresses][peerpoint.utils.dns.lookup_addresses] is an
  ordinary forward lookup through the platform resolver
  (``socket.getaddrinfo``). Unknown hosts raise ``OSError`` so the caller
  can tell "no answer" apart from "no hints".

Note:
    All functions here block. They are meant to run on a worker thread,
    never on an event loop or UI thread.

See Also:
    [EndpointResolver][peerpoint.resolver.resolver.EndpointResolver]:
        Combines both paths with the address-family policy.
"""

from __future__ import annotations

import logging
import socket
from ipaddress import IPv4Address, ip_address
from typing import TYPE_CHECKING, cast

import dns.exception
import dns.message
import dns.name
import dns.query
import dns.rdataclass
import dns.rdatatype
from dns.rdtypes.svcbbase import ParamKey

from peerpoint.models.constants import DEFAULT_DNS_PORT, DEFAULT_DNS_SERVER, DEFAULT_QUERY_TIMEOUT
from peerpoint.models.hints import HintLookup, HttpsHints, NoHints


if TYPE_CHECKING:
    from collections.abc import Iterable

    from dns.rdtypes.IN.HTTPS import HTTPS
    from dns.rdtypes.svcbbase import IPv4HintParam, IPv6HintParam, PortParam


logger = logging.getLogger("peerpoint.utils.dns")

_DNS_ERRORS = (OSError, dns.exception.DNSException, ValueError)


def query_https_hints(
    host: str,
    *,
    server: str = DEFAULT_DNS_SERVER,
    port: int = DEFAULT_DNS_PORT,
    timeout: float = DEFAULT_QUERY_TIMEOUT,
) -> HintLookup:
    """Fetch address and port hints from the HTTPS record of *host*.

    Sends one ``HTTPS IN`` query over UDP (retried over TCP if the answer
    is truncated) and reads the first HTTPS record of the answer section.

    Args:
        host: DNS name to query (without trailing dot).
        server: IP address of the recursive resolver.
        port: Resolver port.
        timeout: Seconds before the query is abandoned.

    Returns:
        [HttpsHints][peerpoint.models.hints.HttpsHints] when an HTTPS record
        was found (its lists may be empty and its port ``0``), otherwise
        [NoHints][peerpoint.models.hints.NoHints].
    """
    try:
        query = dns.message.make_query(
            dns.name.from_text(host), dns.rdatatype.HTTPS, dns.rdataclass.IN
        )
        response, _ = dns.query.udp_with_fallback(query, server, timeout=timeout, port=port)
    except _DNS_ERRORS as e:
        logger.debug("https_query_failed host=%s server=%s error=%s", host, server, e)
        return NoHints(reason=str(e) or type(e).__name__)

    for rrset in response.answer:
        if rrset.rdtype != dns.rdatatype.HTTPS:
            continue
        for rdata in rrset:
            hints = _hints_from_record(cast("HTTPS", rdata))
            logger.debug(
                "https_hints host=%s ipv4=%s ipv6=%s port=%s",
                host,
                ",".join(hints.ipv4) or "-",
                ",".join(hints.ipv6) or "-",
                hints.port,
            )
            return hints

    logger.debug("https_no_record host=%s rcode=%s", host, response.rcode())
    return NoHints(reason="no HTTPS record in answer")


def _hints_from_record(record: HTTPS) -> HttpsHints:
    """Extract the RFC 9460 hint parameters, treating malformed ones as absent."""
    params = record.params
    ipv4: tuple[str, ...] = ()
    ipv6: tuple[str, ...] = ()
    port = 0

    ipv4_param = cast("IPv4HintParam | None", params.get(ParamKey.IPV4HINT))
    if ipv4_param is not None:
        ipv4 = tuple(_valid_addresses(getattr(ipv4_param, "addresses", ()), version=4))

    ipv6_param = cast("IPv6HintParam | None", params.get(ParamKey.IPV6HINT))
    if ipv6_param is not None:
        ipv6 = tuple(_valid_addresses(getattr(ipv6_param, "addresses", ()), version=6))

    port_param = cast("PortParam | None", params.get(ParamKey.PORT))
    if port_param is not None:
        value = getattr(port_param, "port", 0)
        if isinstance(value, int) and 0 < value <= 65_535:
            port = value

    return HttpsHints(ipv4=ipv4, ipv6=ipv6, port=port)


def _valid_addresses(addresses: Iterable[str], *, version: int) -> list[str]:
    valid = []
    for address in addresses:
        try:
            parsed = ip_address(address)
        except ValueError:
            continue
        if parsed.version == version:
            valid.append(str(parsed))
    return valid


def lookup_addresses(host: str) -> list[str]:
    """Resolve *host* through the platform resolver.

    Args:
        host: DNS name to resolve.

    Returns:
        Numeric addresses of every family, in the order the resolver
        returned them, without duplicates.

    Raises:
        OSError: If the host is unknown (``socket.gaierror``) or the
            resolver fails.
        UnicodeError: If the name cannot be IDNA-encoded.
    """
    infos = socket.getaddrinfo(host, None, type=socket.SOCK_DGRAM)
    addresses: list[str] = []
    for _family, _type, _proto, _canonname, sockaddr in infos:
        address = str(sockaddr[0])
        if address not in addresses:
            addresses.append(address)
    if not addresses:
        raise socket.gaierror(socket.EAI_NONAME, f"no addresses for {host}")
    return addresses


def pick_address(addresses: Iterable[str]) -> str | None:
    """Return the first IPv4 address, else the first address of any family."""
    first: str | None = None
    for address in addresses:
        if first is None:
            first = address
        try:
            if isinstance(ip_address(address.split("%", 1)[0]), IPv4Address):
                return address
        except ValueError:
            continue
    return first
