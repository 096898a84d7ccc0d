"""Peerpoint exception hierarchy.

Only conditions the caller must act on are exceptions. DNS-layer failures
(unknown hosts, transport errors while fetching HTTPS hints, interface
enumeration errors) are absorbed by the resolver and surface as a ``None``
result instead.

Exception hierarchy:

```text
PeerpointError (base -- never raised directly)
├── ConfigurationError       -- config validation, missing keys, bad YAML
└── MalformedEndpointError   -- endpoint text cannot be parsed (also a ValueError)
```

See Also:
    [EndpointSpec.parse()][peerpoint.models.endpoint.EndpointSpec.parse]:
        Raises [MalformedEndpointError][peerpoint.core.exceptions.MalformedEndpointError].
    [ResolverConfig.from_yaml()][peerpoint.resolver.configs.ResolverConfig.from_yaml]:
        Raises [ConfigurationError][peerpoint.core.exceptions.ConfigurationError].
"""

from __future__ import annotations


class PeerpointError(Exception):
    """Base exception for all Peerpoint errors.

    Never raised directly -- always use a specific subclass.
    """


class ConfigurationError(PeerpointError):
    """Invalid or missing configuration (YAML, CLI flags)."""


class MalformedEndpointError(PeerpointError, ValueError):
    """Endpoint text could not be parsed into a host and port.

    Raised synchronously at parse time and never retried. Subclasses
    ``ValueError`` so callers validating user input with a plain
    ``except ValueError`` keep working.

    Attributes:
        text: The raw endpoint text that was rejected.
        reason: Short human-readable description of the problem.
    """

    def __init__(self, text: str, reason: str) -> None:
        super().__init__(f"Invalid endpoint {text!r}: {reason}")
        self.text = text
        self.reason = reason
