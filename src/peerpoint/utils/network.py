"""Local network capability probing.

Interface enumeration uses ``psutil``, which exposes per-interface
addresses and link state portably.
"""

from __future__ import annotations

import logging
import socket
from ipaddress import IPv6Address, ip_address
from typing import Any

import psutil


logger = logging.getLogger("peerpoint.utils.network")


def is_global_ipv6(address: str) -> bool:
    """Return True for an IPv6 address usable beyond the local link.

    Link-local, site-local (``fec0::/10``, deprecated) and loopback
    addresses do not count. A ``%zone`` suffix is ignored.
    """
    try:
        ip = ip_address(address.split("%", 1)[0])
    except ValueError:
        return False
    if not isinstance(ip, IPv6Address):
        return False
    return not (ip.is_link_local or ip.is_site_local or ip.is_loopback)


def has_global_ipv6() -> bool:
    """Return True if an up, non-loopback interface carries a global IPv6 address.

    Enumeration failures are logged and reported as "no IPv6".
    """
    try:
        stats = psutil.net_if_stats()
        addresses = psutil.net_if_addrs()
    except (OSError, psutil.Error) as e:
        logger.debug("interface_enumeration_failed error=%s", e)
        return False

    for name, addrs in addresses.items():
        stat = stats.get(name)
        if stat is None or not stat.isup:
            continue
        if _is_loopback(stat, addrs):
            continue
        for addr in addrs:
            if addr.family == socket.AF_INET6 and is_global_ipv6(addr.address):
                return True
    return False


def _is_loopback(stat: Any, addrs: list[Any]) -> bool:
    flags = getattr(stat, "flags", "")
    if flags:
        return "loopback" in flags.split(",")
    for addr in addrs:
        if addr.family not in (socket.AF_INET, socket.AF_INET6):
            continue
        try:
            if ip_address(addr.address.split("%", 1)[0]).is_loopback:
                return True
        except ValueError:
            continue
    return False
