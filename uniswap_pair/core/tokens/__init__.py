from .models import Token
from .registry import USDC, WETH, registry_lookup, token_for_chain

__all__ = ["Token", "WETH", "USDC", "registry_lookup", "token_for_chain"]
