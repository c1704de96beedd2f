"""
Command-line interface for the pulse client.

Provides commands for broadcasting assets and monitoring their transactions.
"""

import argparse
import asyncio
import json
import logging
import sys
from typing import List, Optional

import structlog

from pulse import __version__
from pulse.config import PulseConfig
from pulse.core.asset import Asset
from pulse.core.client import PulseClient
from pulse.core.errors import PulseError


def setup_logging(level: str = "INFO", json_format: bool = False) -> None:
    """Configure structured logging."""
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.processors.JSONRenderer() if json_format
            else structlog.dev.ConsoleRenderer(),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    # Results go to stdout, logs to stderr
    logging.basicConfig(
        format="%(message)s",
        level=getattr(logging, level.upper()),
        stream=sys.stderr,
    )


def parse_asset(value: str) -> Asset:
    """
    Parse a SYMBOL:PRICE:TIMESTAMP argument.

    Raises:
        argparse.ArgumentTypeError: If the value is not in that form
    """
    parts = value.split(":")
    if len(parts) != 3:
        raise argparse.ArgumentTypeError(
            f"expected SYMBOL:PRICE:TIMESTAMP, got {value!r}"
        )
    symbol, price, timestamp = parts
    try:
        return Asset(symbol=symbol, price=int(price), timestamp=int(timestamp))
    except ValueError:
        raise argparse.ArgumentTypeError(
            f"price and timestamp must be integers, got {value!r}"
        )


def positive_float(value: str) -> float:
    """
    Parse a number of seconds that must be greater than zero.

    Raises:
        argparse.ArgumentTypeError: If the value is not a positive number
    """
    try:
        seconds = float(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected a number of seconds, got {value!r}")
    if not seconds > 0:
        raise argparse.ArgumentTypeError(f"must be greater than zero, got {value!r}")
    return seconds


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="asset-pulse",
        description="Broadcast asset prices and monitor their transactions",
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "--url",
        help="Service base URL (default: the mock node)",
    )
    parser.add_argument(
        "--interval",
        type=positive_float,
        help="Seconds between status checks (default: 3)",
    )
    parser.add_argument(
        "--timeout",
        type=positive_float,
        help="Deadline in seconds for monitoring each transaction (default: none)",
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="WARNING",
        help="Logging level (default: WARNING)",
    )
    parser.add_argument(
        "--log-json",
        action="store_true",
        help="Output logs in JSON format",
    )

    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    # Broadcast command
    broadcast_parser = subparsers.add_parser("broadcast", help="Broadcast asset prices")
    broadcast_parser.add_argument(
        "assets",
        nargs="+",
        type=parse_asset,
        metavar="SYMBOL:PRICE:TIMESTAMP",
        help="Assets to broadcast, e.g. ETH:4500:1678912345",
    )
    broadcast_parser.add_argument(
        "--monitor",
        action="store_true",
        help="Wait for each transaction to reach a final status",
    )

    # Monitor command
    monitor_parser = subparsers.add_parser("monitor", help="Monitor transaction hashes")
    monitor_parser.add_argument(
        "tx_hashes",
        nargs="+",
        metavar="TX_HASH",
        help="Transaction hashes returned by a broadcast",
    )

    return parser


def build_config(args: argparse.Namespace) -> PulseConfig:
    """Build the client configuration from command-line options."""
    overrides = {
        "log_level": args.log_level,
        "log_json": args.log_json,
    }
    if args.timeout is not None:
        overrides["monitor_timeout_seconds"] = args.timeout
    return PulseConfig.from_options(url=args.url, poll_interval=args.interval, **overrides)


async def run_broadcast(client: PulseClient, args: argparse.Namespace) -> List[dict]:
    """Broadcast (and optionally monitor) the given assets."""
    assets: List[Asset] = args.assets

    if args.monitor:
        if len(assets) == 1:
            records = [await client.broadcast_and_monitor(assets[0])]
        else:
            records = await client.multiple_broadcast_and_monitor(assets)
        return [record.to_dict() for record in records]

    if len(assets) == 1:
        hashes = [await client.broadcast(assets[0])]
    else:
        hashes = await client.multiple_broadcast(assets)
    return [{"symbol": asset.symbol, "tx_hash": tx_hash} for asset, tx_hash in zip(assets, hashes)]


async def run_monitor(client: PulseClient, args: argparse.Namespace) -> List[dict]:
    """Monitor the given transaction hashes."""
    if len(args.tx_hashes) == 1:
        records = [await client.monitor_status(args.tx_hashes[0])]
    else:
        records = await client.multiple_monitor_status(*args.tx_hashes)
    return [record.to_dict() for record in records]


async def run_command(
    args: argparse.Namespace,
    client: Optional[PulseClient] = None,
    config: Optional[PulseConfig] = None,
) -> List[dict]:
    """Run a parsed command and return its results."""
    client = client or PulseClient(config or build_config(args))

    async with client:
        if args.command == "broadcast":
            return await run_broadcast(client, args)
        return await run_monitor(client, args)


def main(argv: Optional[List[str]] = None) -> None:
    """Main entry point."""
    parser = create_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        sys.exit(1)

    config = build_config(args)
    setup_logging(config.log_level, config.log_json)

    try:
        results = asyncio.run(run_command(args, config=config))
    except PulseError as e:
        print(f"error: {e}", file=sys.stderr)
        sys.exit(1)

    for result in results:
        print(json.dumps(result))


if __name__ == "__main__":
    main()
