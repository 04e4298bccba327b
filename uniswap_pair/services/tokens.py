"""
Token metadata resolution.

Well-known tokens come from the static registry; everything else is read
on-chain with the ERC-20 ``symbol()``, ``name()`` and ``decimals()`` views.
Addresses are deduplicated by their checksummed form and fetched
concurrently.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Callable, Dict, Iterable, List, Optional

from ..core.abi import DECIMALS_CALL, NAME_CALL, SYMBOL_CALL, AbiDecodeError, decode_string, decode_uint
from ..core.errors import ErrorCode, ProviderError, UniswapError, token_not_found
from ..core.network import NetworkHandle
from ..core.tokens.models import Token
from ..core.tokens.registry import registry_lookup
from .address import normalize_address

logger = logging.getLogger(__name__)

RegistryLookup = Callable[[int, str], Optional[Token]]


class TokenMetadataResolver:
    """Fetch ``Token`` descriptors for a set of contract addresses."""

    def __init__(self, network: NetworkHandle, registry: RegistryLookup = registry_lookup):
        self.network = network
        self._registry = registry

    @staticmethod
    def _unique_addresses(addresses: Iterable[str]) -> List[str]:
        unique: List[str] = []
        seen = set()
        for raw in addresses:
            canonical = normalize_address(raw)
            if canonical is None:
                raise UniswapError(
                    f"{raw!r} is not a valid contract address",
                    ErrorCode.TOKEN_NOT_FOUND,
                )
            if canonical not in seen:
                seen.add(canonical)
                unique.append(canonical)
        return unique

    async def get_tokens(self, addresses: Iterable[str]) -> Dict[str, Token]:
        """Resolve every distinct address, keyed by checksummed address."""
        unique = self._unique_addresses(addresses)
        chain_id = await self.network.chain_id()
        logger.debug("resolving %d token(s) on chain %s", len(unique), chain_id)

        tokens = await asyncio.gather(*(self.get_token(chain_id, address) for address in unique))
        return {token.contract_address: token for token in tokens}

    async def get_token(self, chain_id: int, address: str) -> Token:
        static = self._registry(chain_id, address)
        if static is not None:
            logger.debug("registry hit %s -> %s", address, static.symbol)
            return static

        symbol_raw, name_raw, decimals_raw = await asyncio.gather(
            self._call(address, SYMBOL_CALL, "symbol"),
            self._call(address, NAME_CALL, "name"),
            self._call(address, DECIMALS_CALL, "decimals"),
        )

        try:
            symbol = decode_string(symbol_raw)
            name = decode_string(name_raw)
            decimals = decode_uint(decimals_raw, bits=8)
        except AbiDecodeError as exc:
            logger.warning("token metadata undecodable address=%s error=%s", address, exc)
            raise token_not_found(address) from exc

        if not symbol:
            raise token_not_found(address)

        return Token(
            chain_id=chain_id,
            contract_address=address,
            decimals=decimals,
            symbol=symbol,
            name=name,
        )

    async def _call(self, address: str, data: str, step: str) -> str:
        try:
            return await self.network.call(address, data)
        except ProviderError as exc:
            if exc.is_revert:
                raise token_not_found(address) from exc
            logger.warning("token metadata call failed address=%s step=%s error=%s", address, step, exc.message)
            raise exc.with_context(address, step) from exc


__all__ = ["TokenMetadataResolver", "RegistryLookup"]
