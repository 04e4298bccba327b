"""
Chain identification types and utilities.

Only a closed set of Ethereum networks is supported. Anything outside
``SUPPORTED_CHAIN_IDS`` is rejected before token resolution is trusted.
"""

from __future__ import annotations

from enum import IntEnum
from typing import Any, Dict, Optional


class ChainId(IntEnum):
    MAINNET = 1
    ROPSTEN = 3
    RINKEBY = 4
    GORLI = 5
    KOVAN = 42


SUPPORTED_CHAIN_IDS = frozenset(ChainId)

# Network slugs used by managed endpoint providers (Infura style)
CHAIN_NETWORK_NAMES: Dict[ChainId, str] = {
    ChainId.MAINNET: "mainnet",
    ChainId.ROPSTEN: "ropsten",
    ChainId.RINKEBY: "rinkeby",
    ChainId.GORLI: "goerli",
    ChainId.KOVAN: "kovan",
}


def is_supported_chain_id(chain_id: Any) -> bool:
    """Return True if the value is one of the supported chain ids."""
    if isinstance(chain_id, bool) or not isinstance(chain_id, int):
        return False
    return chain_id in SUPPORTED_CHAIN_IDS


def to_chain_id(chain_id: Any) -> Optional[ChainId]:
    """Coerce a raw value into a ``ChainId`` or return None when unsupported."""
    if not is_supported_chain_id(chain_id):
        return None
    return ChainId(chain_id)


def network_name(chain_id: ChainId) -> str:
    return CHAIN_NETWORK_NAMES[chain_id]


def describe_supported_chains() -> str:
    """Human readable list, e.g. ``mainnet(1), ropsten(3), ...``."""
    return ", ".join(f"{CHAIN_NETWORK_NAMES[c]}({int(c)})" for c in ChainId)


__all__ = [
    "ChainId",
    "SUPPORTED_CHAIN_IDS",
    "CHAIN_NETWORK_NAMES",
    "is_supported_chain_id",
    "to_chain_id",
    "network_name",
    "describe_supported_chains",
]
