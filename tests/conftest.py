"""
Pytest configuration and shared fixtures for Peerpoint tests.

Provides:
- A controllable monotonic clock
- Patches that keep every test off the network (HTTPS queries, platform
  lookups, interface enumeration)
"""

import logging
from collections.abc import Iterator
from unittest.mock import MagicMock, patch

import pytest

from peerpoint.models import EndpointSpec
from peerpoint.resolver import EndpointResolver, ResolverConfig


# ============================================================================
# Logging Configuration
# ============================================================================


@pytest.fixture(scope="session", autouse=True)
def setup_logging() -> None:
    """Configure logging for tests."""
    logging.basicConfig(level=logging.DEBUG)


# ============================================================================
# Clock
# ============================================================================


class FakeClock:
    """Monotonic clock advanced by hand."""

    def __init__(self, start: float = 1000.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def clock() -> FakeClock:
    """A fake clock starting at t=1000s."""
    return FakeClock()


# ============================================================================
# Network Patches
# ============================================================================

RESOLVER_MODULE = "peerpoint.resolver.resolver"


@pytest.fixture
def mock_hints() -> Iterator[MagicMock]:
    """Patch the HTTPS-record query used by the resolver."""
    with patch(f"{RESOLVER_MODULE}.query_https_hints") as mock:
        yield mock


@pytest.fixture
def mock_lookup() -> Iterator[MagicMock]:
    """Patch the platform address lookup used by the resolver."""
    with patch(f"{RESOLVER_MODULE}.lookup_addresses") as mock:
        yield mock


@pytest.fixture
def mock_ipv6() -> Iterator[MagicMock]:
    """Patch IPv6 capability detection (defaults to no IPv6)."""
    with patch(f"{RESOLVER_MODULE}.has_global_ipv6", return_value=False) as mock:
        yield mock


@pytest.fixture
def resolver(
    clock: FakeClock,
    mock_hints: MagicMock,
    mock_lookup: MagicMock,
    mock_ipv6: MagicMock,
) -> EndpointResolver:
    """An EndpointResolver with every network path patched."""
    return EndpointResolver(ResolverConfig(), clock=clock)


# ============================================================================
# Sample Data
# ============================================================================


@pytest.fixture
def hostname_spec() -> EndpointSpec:
    """A hostname endpoint that needs resolution."""
    return EndpointSpec.parse("vpn.example.com:51820")

