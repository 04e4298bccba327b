"""
Pair Context Module

Validates pair inputs, selects network access and assembles the
context consumed by the pair factory.
"""

from .models import UniswapPairContext, UniswapPairFactoryContext, UniswapPairSettings
from .uniswap_pair import TRANSITIONS, PairState, UniswapPair

__all__ = [
    # Builder
    "UniswapPair",
    "PairState",
    "TRANSITIONS",
    # Models
    "UniswapPairContext",
    "UniswapPairFactoryContext",
    "UniswapPairSettings",
]
