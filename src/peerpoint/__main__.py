"""CLI entry point for Peerpoint.

Parses one or more endpoints, resolves them concurrently and prints the
result. With ``--watch`` the endpoints are re-resolved periodically; the
freshness window keeps DNS traffic bounded however short the interval.

Examples:
    ```bash
    python -m peerpoint vpn.example.com:51820
    python -m peerpoint 203.0.113.7:51820 "[2001:db8::1]:51820" --log-level DEBUG
    python -m peerpoint vpn.example.com:51820 --config config/resolver.yaml --watch 30
    ```
"""

import argparse
import asyncio
import logging
import sys
from pathlib import Path

from peerpoint.core.exceptions import ConfigurationError, MalformedEndpointError
from peerpoint.core.logger import Logger, StructuredFormatter
from peerpoint.models.endpoint import EndpointSpec, ResolvedEndpoint
from peerpoint.resolver import EndpointResolver, ResolverConfig


EXIT_OK = 0
EXIT_UNRESOLVED = 1
EXIT_USAGE = 2

logger = Logger("cli")


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        prog="peerpoint",
        description="Resolve tunnel peer endpoints (host:port) to numeric addresses",
    )

    parser.add_argument(
        "endpoints",
        nargs="+",
        metavar="ENDPOINT",
        help="Endpoint as host:port or [ipv6]:port",
    )

    parser.add_argument(
        "--config",
        type=Path,
        help="Resolver config path (YAML); defaults are used when omitted",
    )

    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="WARNING",
        help="Log level (default: WARNING)",
    )

    parser.add_argument(
        "--watch",
        type=float,
        metavar="SECONDS",
        help="Re-resolve every SECONDS until interrupted",
    )

    return parser.parse_args(argv)


def setup_logging(level: str) -> None:
    """Install a ``StructuredFormatter`` on the root handler."""
    handler = logging.StreamHandler()
    handler.setFormatter(StructuredFormatter())
    logging.root.addHandler(handler)
    logging.root.setLevel(getattr(logging, level))


def format_result(spec: EndpointSpec, resolved: ResolvedEndpoint | None) -> str:
    """Render one ``input -> output`` line."""
    return f"{spec} -> {resolved if resolved is not None else 'unresolved'}"


async def resolve_all(
    resolver: EndpointResolver, specs: list[EndpointSpec]
) -> list[ResolvedEndpoint | None]:
    """Resolve every endpoint concurrently on worker threads."""
    return list(await asyncio.gather(*(resolver.aresolve(spec) for spec in specs)))


async def run(
    resolver: EndpointResolver,
    specs: list[EndpointSpec],
    *,
    watch: float | None = None,
) -> int:
    """Resolve and print the endpoints, once or repeatedly.

    Returns:
        ``0`` when every endpoint resolved on the last pass, ``1`` otherwise.
    """
    while True:
        results = await resolve_all(resolver, specs)
        for spec, resolved in zip(specs, results, strict=True):
            print(format_result(spec, resolved), flush=True)

        if watch is None:
            return EXIT_OK if all(r is not None for r in results) else EXIT_UNRESOLVED
        await asyncio.sleep(watch)


def main(argv: list[str] | None = None) -> int:
    """Entry point. Returns the process exit code."""
    args = parse_args(argv)
    setup_logging(args.log_level)

    try:
        config = ResolverConfig.from_yaml(args.config) if args.config else ResolverConfig()
    except (FileNotFoundError, ConfigurationError) as e:
        logger.error("config_invalid", path=str(args.config), error=str(e))
        return EXIT_USAGE

    specs: list[EndpointSpec] = []
    for text in args.endpoints:
        try:
            specs.append(EndpointSpec.parse(text))
        except MalformedEndpointError as e:
            print(f"peerpoint: {e}", file=sys.stderr)
            return EXIT_USAGE

    if args.watch is not None and args.watch <= 0:
        print("peerpoint: --watch must be positive", file=sys.stderr)
        return EXIT_USAGE

    resolver = EndpointResolver(config)
    try:
        return asyncio.run(run(resolver, specs, watch=args.watch))
    except KeyboardInterrupt:
        logger.info("interrupted")
        return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
