"""
Static descriptors for well-known tokens.

Resolving these never needs an ``eth_call``. Entries are keyed by chain id
and checksummed contract address.
"""

from __future__ import annotations

from typing import Dict, Iterable, Optional

from ..chain_types import ChainId
from .models import Token


def _weth(chain_id: ChainId, contract_address: str) -> Token:
    return Token(
        chain_id=int(chain_id),
        contract_address=contract_address,
        decimals=18,
        symbol="WETH",
        name="Wrapped Ether",
    )


WETH: Dict[ChainId, Token] = {
    ChainId.MAINNET: _weth(ChainId.MAINNET, "0xC02aaA39b223FE8D0A0e5C4F27eAD9083C756Cc2"),
    ChainId.ROPSTEN: _weth(ChainId.ROPSTEN, "0xc778417E063141139Fce010982780140Aa0cD5Ab"),
    ChainId.RINKEBY: _weth(ChainId.RINKEBY, "0xc778417E063141139Fce010982780140Aa0cD5Ab"),
    ChainId.GORLI: _weth(ChainId.GORLI, "0xB4FBF271143F4FBf7B91A5ded31805e42b2208d6"),
    ChainId.KOVAN: _weth(ChainId.KOVAN, "0xd0A1E359811322d97991E03f863a0C30C2cF029C"),
}

# Circle only deployed canonical USDC on mainnet among the supported chains.
USDC: Dict[ChainId, Token] = {
    ChainId.MAINNET: Token(
        chain_id=int(ChainId.MAINNET),
        contract_address="0xA0b86991c6218b36c1d19D4a2e9Eb0cE3606eB48",
        decimals=6,
        symbol="USDC",
        name="USD Coin",
    ),
}

WELL_KNOWN_TOKENS = (WETH, USDC)


def _index(tables: Iterable[Dict[ChainId, Token]]) -> Dict[int, Dict[str, Token]]:
    index: Dict[int, Dict[str, Token]] = {}
    for table in tables:
        for chain_id, token in table.items():
            index.setdefault(int(chain_id), {})[token.contract_address] = token
    return index


_REGISTRY = _index(WELL_KNOWN_TOKENS)


def token_for_chain(table: Dict[ChainId, Token], chain_id: int) -> Token:
    """Get a well-known token by chain id, e.g. ``token_for_chain(WETH, 1)``."""
    try:
        return table[ChainId(chain_id)]
    except (KeyError, ValueError):
        raise KeyError(f"{chain_id} is not allowed") from None


def registry_lookup(chain_id: int, contract_address: str) -> Optional[Token]:
    """Return the static descriptor for a checksummed address, or None."""
    return _REGISTRY.get(chain_id, {}).get(contract_address)


__all__ = [
    "WETH",
    "USDC",
    "WELL_KNOWN_TOKENS",
    "token_for_chain",
    "registry_lookup",
]
