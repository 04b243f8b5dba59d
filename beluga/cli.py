"""Command-line payload builder.

Builds BelugaSwap contract payloads from human-friendly arguments and
prints them as JSON. Nothing is submitted.

Usage:
    beluga create-pool --creator G... --token-a USDC --token-b XLM \\
        --fee-tier VOLATILE --creator-fee 1 --price 1.0 \\
        --amount0 100 --amount1 100 --range-lower 0.95 --range-upper 1.05 \\
        --lock-days 7

    beluga swap --pool C... --sender G... --token-in USDC --amount-in 10 \\
        --expected-out 9.97 --slippage 1 --price-limit 0.95
"""

from __future__ import annotations

import argparse
import json
import logging
import os
import sys

import structlog
from pydantic import BaseModel, ValidationError

from beluga.config import FEE_TIERS
from beluga.errors import BelugaError
from beluga.models.params import (
    AddLiquidityParams,
    CollectFeesParams,
    CreatePoolParams,
    Permanent,
    RemoveLiquidityParams,
    SwapParams,
    TimedLock,
)
from beluga.sdk import BelugaSwapSDK

logger = structlog.get_logger()


def _add_position_args(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--pool", required=True, help="Pool contract address")
    parser.add_argument("--owner", required=True, help="Position owner address")
    parser.add_argument("--range-lower", required=True, help="Lower price of the range")
    parser.add_argument("--range-upper", required=True, help="Upper price of the range")
    parser.add_argument("--fee-tier", required=True, help="STABLE, VOLATILE or EXOTIC")


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for all subcommands."""
    parser = argparse.ArgumentParser(
        prog="beluga",
        description="Build BelugaSwap contract payloads from human-friendly inputs",
    )
    parser.add_argument(
        "--network",
        default=os.environ.get("BELUGA_NETWORK"),
        help="testnet or mainnet (default: $BELUGA_NETWORK)",
    )
    parser.add_argument("--rpc-url", default=os.environ.get("BELUGA_RPC_URL"))
    parser.add_argument("--network-passphrase", default=os.environ.get("BELUGA_NETWORK_PASSPHRASE"))
    parser.add_argument(
        "--factory",
        default=os.environ.get("BELUGA_FACTORY_ADDRESS"),
        help="Factory contract address (default: $BELUGA_FACTORY_ADDRESS)",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable verbose logging")

    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("fee-tiers", help="List fee tiers")

    create = subparsers.add_parser("create-pool", help="Build a create_pool payload")
    create.add_argument("--creator", required=True)
    create.add_argument("--token-a", required=True)
    create.add_argument("--token-b", required=True)
    create.add_argument("--fee-tier", required=True, help="STABLE, VOLATILE or EXOTIC")
    create.add_argument("--creator-fee", required=True, help="Creator fee in percent")
    create.add_argument("--price", required=True, help="Initial price")
    create.add_argument("--amount0", required=True)
    create.add_argument("--amount1", required=True)
    create.add_argument("--range-lower", required=True)
    create.add_argument("--range-upper", required=True)
    lock = create.add_mutually_exclusive_group()
    lock.add_argument("--lock-days", help="Lock duration in days (default: 7)")
    lock.add_argument("--permanent", action="store_true", help="Lock liquidity forever")

    add = subparsers.add_parser("add-liquidity", help="Build an add_liquidity payload")
    _add_position_args(add)
    add.add_argument("--amount0", required=True)
    add.add_argument("--amount1", required=True)

    remove = subparsers.add_parser("remove-liquidity", help="Build a remove_liquidity payload")
    _add_position_args(remove)
    remove.add_argument("--percent", required=True, help="Share of liquidity to remove")

    collect = subparsers.add_parser("collect-fees", help="Build a collect payload")
    _add_position_args(collect)

    swap = subparsers.add_parser("swap", help="Build a swap payload")
    swap.add_argument("--pool", required=True, help="Pool contract address")
    swap.add_argument("--sender", required=True)
    swap.add_argument("--token-in", required=True)
    swap.add_argument("--amount-in", required=True)
    swap.add_argument("--expected-out", required=True, help="Expected output amount")
    swap.add_argument("--slippage", required=True, help="Slippage tolerance in percent")
    swap.add_argument("--price-limit", help="Optional price limit")

    return parser


def run_command(sdk: BelugaSwapSDK, args: argparse.Namespace) -> BaseModel:
    """Build the payload for a parsed subcommand."""
    if args.command == "create-pool":
        if args.permanent:
            lock: Permanent | TimedLock | None = Permanent()
        elif args.lock_days is not None:
            lock = TimedLock(days=args.lock_days)
        else:
            lock = None
        return sdk.factory.create_pool(
            CreatePoolParams(
                creator=args.creator,
                token_a=args.token_a,
                token_b=args.token_b,
                fee_tier=args.fee_tier,
                creator_fee_percent=args.creator_fee,
                initial_price=args.price,
                amount0=args.amount0,
                amount1=args.amount1,
                price_range_lower=args.range_lower,
                price_range_upper=args.range_upper,
                lock=lock,
            )
        )

    pool = sdk.connect_pool(args.pool)

    if args.command == "swap":
        return pool.swap(
            SwapParams(
                sender=args.sender,
                token_in=args.token_in,
                amount_in=args.amount_in,
                expected_amount_out=args.expected_out,
                slippage_percent=args.slippage,
                price_limit=args.price_limit,
            )
        )

    position = {
        "owner": args.owner,
        "price_range_lower": args.range_lower,
        "price_range_upper": args.range_upper,
        "fee_tier": args.fee_tier,
    }
    if args.command == "add-liquidity":
        return pool.add_liquidity(
            AddLiquidityParams(**position, amount0=args.amount0, amount1=args.amount1)
        )
    if args.command == "remove-liquidity":
        return pool.remove_liquidity(
            RemoveLiquidityParams(**position, liquidity_percent=args.percent)
        )
    if args.command == "collect-fees":
        return pool.collect_fees(CollectFeesParams(**position))

    raise ValueError(f"Unknown command: {args.command}")


def main(argv: list[str] | None = None) -> int:
    """CLI entry point. Returns the process exit code."""
    parser = build_parser()
    args = parser.parse_args(argv)

    log_level = logging.DEBUG if args.verbose else logging.WARNING
    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
    )

    if args.command == "fee-tiers":
        tiers = [
            {"name": t.name, "bps": t.bps, "tick_spacing": t.tick_spacing, "percent": t.percent}
            for t in FEE_TIERS.values()
        ]
        print(json.dumps(tiers, indent=2))
        return 0

    if not args.factory:
        parser.error("--factory is required (or set BELUGA_FACTORY_ADDRESS)")

    try:
        sdk = BelugaSwapSDK(
            factory_address=args.factory,
            network=args.network,
            rpc_url=args.rpc_url,
            network_passphrase=args.network_passphrase,
        )
        result = run_command(sdk, args)
    except (BelugaError, ValidationError) as e:
        logger.error("payload_build_failed", command=args.command, error=type(e).__name__)
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(result.model_dump_json(indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
