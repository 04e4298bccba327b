"""
Uniswap pair context resolution.

Validates a pair of token addresses, an owner address and a network access
description, then resolves both tokens into a ``UniswapPairFactoryContext``.
"""

from .core.chain_types import ChainId
from .core.errors import ErrorCategory, ErrorCode, PairContextInvariantError, ProviderError, UniswapError
from .core.pair import (
    PairState,
    UniswapPair,
    UniswapPairContext,
    UniswapPairFactoryContext,
    UniswapPairSettings,
)
from .core.tokens import Token

__all__ = [
    "ChainId",
    "ErrorCategory",
    "ErrorCode",
    "PairContextInvariantError",
    "ProviderError",
    "UniswapError",
    "PairState",
    "UniswapPair",
    "UniswapPairContext",
    "UniswapPairFactoryContext",
    "UniswapPairSettings",
    "Token",
]
