"""Ambient infrastructure shared by every Peerpoint layer.

Attributes:
    Logger: Structured logger supporting key=value and JSON output modes.
        See [Logger][peerpoint.core.logger.Logger].
    exceptions: The [PeerpointError][peerpoint.core.exceptions.PeerpointError]
        hierarchy.
    load_yaml: Safe YAML loading. See [load_yaml()][peerpoint.core.yaml.load_yaml].

Note:
    This package never imports from ``peerpoint.models``,
    ``peerpoint.utils`` or ``peerpoint.resolver``.
"""

from .exceptions import ConfigurationError, MalformedEndpointError, PeerpointError
from .logger import Logger, StructuredFormatter, format_kv_pairs
from .yaml import load_yaml


__all__ = [
    "ConfigurationError",
    "Logger",
    "MalformedEndpointError",
    "PeerpointError",
    "StructuredFormatter",
    "format_kv_pairs",
    "load_yaml",
]
