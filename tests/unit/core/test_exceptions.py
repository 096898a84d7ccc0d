"""Unit tests for the Peerpoint exception hierarchy.

Tests verify:
- issubclass relationships match the documented tree
- MalformedEndpointError carries the rejected text and reason
"""

import pytest

from peerpoint.core.exceptions import (
    ConfigurationError,
    MalformedEndpointError,
    PeerpointError,
)


# =============================================================================
# Hierarchy Tests
# =============================================================================


class TestExceptionHierarchy:
    """Verify issubclass relationships match the documented tree."""

    @pytest.mark.parametrize("exc_cls", [ConfigurationError, MalformedEndpointError])
    def test_inherit_from_peerpoint_error(self, exc_cls: type) -> None:
        assert issubclass(exc_cls, PeerpointError)

    def test_malformed_endpoint_is_value_error(self) -> None:
        assert issubclass(MalformedEndpointError, ValueError)

    def test_configuration_error_is_not_value_error(self) -> None:
        assert not issubclass(ConfigurationError, ValueError)

    def test_catch_as_base(self) -> None:
        with pytest.raises(PeerpointError):
            raise ConfigurationError("bad config")


# =============================================================================
# MalformedEndpointError
# =============================================================================


class TestMalformedEndpointError:
    """Message and attributes."""

    def test_attributes(self) -> None:
        err = MalformedEndpointError("host", "missing/invalid host or port number")
        assert err.text == "host"
        assert err.reason == "missing/invalid host or port number"

    def test_message(self) -> None:
        err = MalformedEndpointError("a:b", "bad port")
        assert str(err) == "Invalid endpoint 'a:b': bad port"

    def test_caught_as_value_error(self) -> None:
        with pytest.raises(ValueError, match="bad port"):
            raise MalformedEndpointError("a:b", "bad port")
