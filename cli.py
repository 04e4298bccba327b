#!/usr/bin/env python3
"""Simple CLI for resolving a Uniswap pair context locally"""

import argparse
import asyncio
import json
import sys
from typing import Optional, Sequence

from uniswap_pair import UniswapError, UniswapPair, UniswapPairContext, UniswapPairSettings
from uniswap_pair.logging_config import setup_logging
from uniswap_pair.services.address import normalize_address


def print_context(context) -> None:
    """Pretty print a resolved pair context"""
    print(json.dumps(context.to_dict(), indent=2))


async def cli_resolve(args: argparse.Namespace) -> int:
    settings = None
    if args.slippage is not None or args.deadline_minutes is not None:
        overrides = {}
        if args.slippage is not None:
            overrides["slippage"] = args.slippage
        if args.deadline_minutes is not None:
            overrides["deadline_minutes"] = args.deadline_minutes
        try:
            settings = UniswapPairSettings(**overrides)
        except ValueError as e:
            print(f"❌ {e}", file=sys.stderr)
            return 2

    context = UniswapPairContext(
        from_token_contract_address=args.from_token,
        to_token_contract_address=args.to_token,
        ethereum_address=args.owner,
        chain_id=args.chain_id,
        provider_url=args.provider_url,
        settings=settings,
    )

    try:
        pair = UniswapPair(context)
    except UniswapError as e:
        print(f"❌ {e.code.value}: {e.message}", file=sys.stderr)
        return 1

    async with pair.network:
        try:
            factory_context = await pair.create_factory()
        except UniswapError as e:
            print(f"❌ {e.code.value}: {e.message}", file=sys.stderr)
            return 1
        print_context(factory_context)
    return 0


def cli_validate_address(address: str) -> int:
    canonical = normalize_address(address)
    if canonical is None:
        print(f"❌ {address} is not a valid address", file=sys.stderr)
        return 1
    print(canonical)
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Uniswap pair context CLI")
    parser.add_argument("--log-level", help="Override LOG_LEVEL")
    subparsers = parser.add_subparsers(dest="command")

    resolve_parser = subparsers.add_parser("resolve", help="Resolve a pair context")
    resolve_parser.add_argument("--from", dest="from_token", required=True, help="From token contract address")
    resolve_parser.add_argument("--to", dest="to_token", required=True, help="To token contract address")
    resolve_parser.add_argument("--owner", required=True, help="Owner (ethereum) address")
    resolve_parser.add_argument("--chain-id", type=int, help="Chain id (1, 3, 4, 5, 42)")
    resolve_parser.add_argument("--provider-url", help="JSON-RPC endpoint")
    resolve_parser.add_argument("--slippage", type=float, help="Slippage tolerance, e.g. 0.005")
    resolve_parser.add_argument("--deadline-minutes", type=int, help="Trade deadline in minutes")

    validate_parser = subparsers.add_parser("validate-address", help="Checksum-normalize an address")
    validate_parser.add_argument("address", help="Address to validate")

    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 0

    setup_logging(args.log_level)

    if args.command == "resolve":
        return asyncio.run(cli_resolve(args))

    if args.command == "validate-address":
        return cli_validate_address(args.address)

    print(f"❌ Unknown command: {args.command}")
    parser.print_help()
    return 2


if __name__ == "__main__":
    sys.exit(main())
