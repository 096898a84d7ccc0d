r"""Peerpoint -- tunnel peer endpoint parsing and resolution.

Turns user-supplied ``host:port`` text into a numeric endpoint a tunnel can
connect to, and keeps that answer fresh as DNS changes. Hostnames are
resolved through HTTPS/SVCB record hints (RFC 9460) with a standard
address-lookup fallback; results are cached per endpoint behind a fixed
freshness window.

Imports flow strictly downward:

```text
             resolver          EndpointResolver, ResolutionCache, ResolverConfig
            /   |    \
        core  utils  models    logging/config/errors | DNS + interfaces | frozen dataclasses
```

Note:
    Top-level imports (``from peerpoint import EndpointSpec``) are loaded
    lazily on first access.
"""

import importlib
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version


try:
    __version__ = _get_version("peerpoint")
except PackageNotFoundError:
    __version__ = "0.0.0"

__all__ = [
    "ConfigurationError",
    "EndpointResolver",
    "EndpointSpec",
    "HttpsHints",
    "Logger",
    "MalformedEndpointError",
    "NoHints",
    "PeerpointError",
    "ResolutionCache",
    "ResolvedEndpoint",
    "ResolverConfig",
    "resolve",
]

_LAZY_IMPORTS: dict[str, tuple[str, str]] = {
    "ConfigurationError": ("peerpoint.core", "ConfigurationError"),
    "Logger": ("peerpoint.core", "Logger"),
    "MalformedEndpointError": ("peerpoint.core", "MalformedEndpointError"),
    "PeerpointError": ("peerpoint.core", "PeerpointError"),
    "EndpointSpec": ("peerpoint.models", "EndpointSpec"),
    "HttpsHints": ("peerpoint.models", "HttpsHints"),
    "NoHints": ("peerpoint.models", "NoHints"),
    "ResolvedEndpoint": ("peerpoint.models", "ResolvedEndpoint"),
    "EndpointResolver": ("peerpoint.resolver", "EndpointResolver"),
    "ResolutionCache": ("peerpoint.resolver", "ResolutionCache"),
    "ResolverConfig": ("peerpoint.resolver", "ResolverConfig"),
    "resolve": ("peerpoint.resolver", "resolve"),
}


def __getattr__(name: str) -> object:
    if name in _LAZY_IMPORTS:
        module_path, attr_name = _LAZY_IMPORTS[name]
        module = importlib.import_module(module_path)
        value = getattr(module, attr_name)
        globals()[name] = value
        return value
    raise AttributeError(f"module 'peerpoint' has no attribute {name!r}")


def __dir__() -> list[str]:
    return __all__
