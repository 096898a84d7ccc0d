"""Tests for lazy import system in peerpoint.__init__."""

from __future__ import annotations

import importlib
import sys

import pytest


class TestLazyImports:
    """Test PEP 562 lazy loading in peerpoint.__init__."""

    def test_lazy_import_does_not_eagerly_load(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Verify that importing peerpoint does not eagerly load subpackages."""
        for mod in list(sys.modules):
            if mod == "peerpoint" or mod.startswith("peerpoint."):
                monkeypatch.delitem(sys.modules, mod)

        importlib.import_module("peerpoint")

        assert "peerpoint.core" not in sys.modules
        assert "peerpoint.models" not in sys.modules
        assert "peerpoint.resolver" not in sys.modules
        assert "peerpoint.utils" not in sys.modules

        # Drop the fresh copies so monkeypatch restores the originals intact
        for mod in list(sys.modules):
            if mod == "peerpoint" or mod.startswith("peerpoint."):
                del sys.modules[mod]

    def test_lazy_import_resolves_on_access(self) -> None:
        """Verify that lazy attributes resolve correctly."""
        from peerpoint import EndpointSpec
        from peerpoint.models.endpoint import EndpointSpec as DirectEndpointSpec

        assert EndpointSpec is DirectEndpointSpec

    def test_lazy_import_caches_after_first_access(self) -> None:
        """Verify that resolved attributes are cached in globals."""
        import peerpoint

        _ = peerpoint.EndpointResolver

        assert "EndpointResolver" in vars(peerpoint)

    def test_lazy_import_invalid_attribute(self) -> None:
        """Verify that invalid attributes raise AttributeError."""
        import peerpoint

        with pytest.raises(AttributeError, match="no_such_thing"):
            _ = getattr(peerpoint, "no_such_thing")  # noqa: B009

    def test_all_exports_are_in_lazy_imports(self) -> None:
        """Verify that __all__ and _LAZY_IMPORTS are in sync."""
        import peerpoint

        assert set(peerpoint.__all__) == set(peerpoint._LAZY_IMPORTS)

    def test_version(self) -> None:
        import peerpoint

        assert isinstance(peerpoint.__version__, str)
