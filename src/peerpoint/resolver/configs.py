"""Resolver configuration models.

See Also:
    [EndpointResolver][peerpoint.resolver.resolver.EndpointResolver]: The
        class that consumes this configuration.
    [load_yaml()][peerpoint.core.yaml.load_yaml]: Loader used by
        ``from_yaml``.
"""

from __future__ import annotations

from ipaddress import ip_address
from pathlib import Path
from typing import Any, Self

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    ValidationError,
    field_validator,
    model_validator,
)

from peerpoint.core.exceptions import ConfigurationError
from peerpoint.core.yaml import load_yaml
from peerpoint.models.constants import (
    DEFAULT_CACHE_MAX_AGE,
    DEFAULT_DNS_PORT,
    DEFAULT_DNS_SERVER,
    DEFAULT_FRESHNESS_WINDOW,
    DEFAULT_QUERY_TIMEOUT,
)


class ResolverConfig(BaseModel):
    """Settings for DNS hint queries and the resolution cache.

    Examples:
        ```yaml
        dns_server: 1.1.1.1
        query_timeout: 3.0
        freshness_window: 60
        ```
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    dns_server: str = Field(
        default=DEFAULT_DNS_SERVER,
        description="IP address of the recursive resolver used for HTTPS records",
    )
    dns_port: int = Field(default=DEFAULT_DNS_PORT, ge=1, le=65_535)
    query_timeout: float = Field(
        default=DEFAULT_QUERY_TIMEOUT,
        gt=0.0,
        le=60.0,
        description="Seconds before an HTTPS-record query is abandoned",
    )
    freshness_window: float = Field(
        default=DEFAULT_FRESHNESS_WINDOW,
        ge=0.0,
        description="Minimum seconds between resolution attempts per endpoint",
    )
    cache_max_age: float = Field(
        default=DEFAULT_CACHE_MAX_AGE,
        gt=0.0,
        description="Seconds without a resolution attempt before an endpoint is evicted",
    )
    use_https_hints: bool = Field(
        default=True,
        description="Query HTTPS records for address/port hints before the standard lookup",
    )

    @field_validator("dns_server")
    @classmethod
    def validate_dns_server(cls, v: str) -> str:
        """Require a numeric address so the query never depends on DNS itself."""
        try:
            return str(ip_address(v))
        except ValueError:
            raise ValueError(f"dns_server must be an IP address, got {v!r}") from None

    @model_validator(mode="after")
    def validate_cache_max_age(self) -> ResolverConfig:
        """Ensure entries outlive the freshness window they are gated by."""
        if self.cache_max_age < self.freshness_window:
            raise ValueError(
                f"cache_max_age ({self.cache_max_age}) must be at least "
                f"freshness_window ({self.freshness_window})"
            )
        return self

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Self:
        """Build a config from a plain mapping.

        Raises:
            ConfigurationError: If the mapping fails validation.
        """
        try:
            return cls.model_validate(data)
        except ValidationError as e:
            raise ConfigurationError(f"Invalid resolver config: {e}") from e

    @classmethod
    def from_yaml(cls, config_path: str | Path) -> Self:
        """Load and validate a YAML config file.

        Raises:
            FileNotFoundError: If the file does not exist.
            ConfigurationError: If the YAML or its values are invalid.
        """
        return cls.from_dict(load_yaml(config_path))
