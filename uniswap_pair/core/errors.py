"""
Error Classification

Every failure raised while resolving a pair context is a ``UniswapError``
carrying a stable machine-readable ``ErrorCode``. Codes map onto a small
set of categories so callers can decide how to react without parsing
messages. Nothing here is retried internally.
"""

from enum import Enum
from typing import Any, Dict, Optional


class ErrorCategory(str, Enum):
    """Categories of errors, by who is expected to act on them."""

    INPUT = "input"                 # Caller supplied malformed data
    CONNECTIVITY = "connectivity"   # Transport / provider failure
    DOMAIN = "domain"               # Network reachable, state not usable
    INVARIANT = "invariant"         # Internal bookkeeping defect


class ErrorCode(str, Enum):
    FROM_TOKEN_CONTRACT_ADDRESS_REQUIRED = "FROM_TOKEN_CONTRACT_ADDRESS_REQUIRED"
    FROM_TOKEN_CONTRACT_ADDRESS_NOT_VALID = "FROM_TOKEN_CONTRACT_ADDRESS_NOT_VALID"
    TO_TOKEN_CONTRACT_ADDRESS_REQUIRED = "TO_TOKEN_CONTRACT_ADDRESS_REQUIRED"
    TO_TOKEN_CONTRACT_ADDRESS_NOT_VALID = "TO_TOKEN_CONTRACT_ADDRESS_NOT_VALID"
    ETHEREUM_ADDRESS_REQUIRED = "ETHEREUM_ADDRESS_REQUIRED"
    ETHEREUM_ADDRESS_NOT_VALID = "ETHEREUM_ADDRESS_NOT_VALID"
    MISSING_NETWORK_ACCESS_SPEC = "MISSING_NETWORK_ACCESS_SPEC"
    CHAIN_ID_NOT_SUPPORTED = "CHAIN_ID_NOT_SUPPORTED"
    TOKEN_NOT_FOUND = "TOKEN_NOT_FOUND"
    PROVIDER_ERROR = "PROVIDER_ERROR"
    INTERNAL_INVARIANT = "INTERNAL_INVARIANT"
    INVALID_STATE_TRANSITION = "INVALID_STATE_TRANSITION"


_CATEGORY_BY_CODE: Dict[ErrorCode, ErrorCategory] = {
    ErrorCode.FROM_TOKEN_CONTRACT_ADDRESS_REQUIRED: ErrorCategory.INPUT,
    ErrorCode.FROM_TOKEN_CONTRACT_ADDRESS_NOT_VALID: ErrorCategory.INPUT,
    ErrorCode.TO_TOKEN_CONTRACT_ADDRESS_REQUIRED: ErrorCategory.INPUT,
    ErrorCode.TO_TOKEN_CONTRACT_ADDRESS_NOT_VALID: ErrorCategory.INPUT,
    ErrorCode.ETHEREUM_ADDRESS_REQUIRED: ErrorCategory.INPUT,
    ErrorCode.ETHEREUM_ADDRESS_NOT_VALID: ErrorCategory.INPUT,
    ErrorCode.MISSING_NETWORK_ACCESS_SPEC: ErrorCategory.INPUT,
    ErrorCode.CHAIN_ID_NOT_SUPPORTED: ErrorCategory.DOMAIN,
    ErrorCode.TOKEN_NOT_FOUND: ErrorCategory.DOMAIN,
    ErrorCode.PROVIDER_ERROR: ErrorCategory.CONNECTIVITY,
    ErrorCode.INTERNAL_INVARIANT: ErrorCategory.INVARIANT,
    ErrorCode.INVALID_STATE_TRANSITION: ErrorCategory.INVARIANT,
}


class UniswapError(Exception):
    """Base error for pair context resolution."""

    def __init__(self, message: str, code: ErrorCode):
        super().__init__(message)
        self.message = message
        self.code = code

    @property
    def category(self) -> ErrorCategory:
        return _CATEGORY_BY_CODE[self.code]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "code": self.code.value,
            "category": self.category.value,
            "message": self.message,
        }

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"


class ProviderError(UniswapError):
    """
    A network provider failed to answer.

    Wraps transport errors, HTTP status errors and JSON-RPC error objects.
    ``address`` and ``step`` say which token and which call were in flight.
    """

    def __init__(
        self,
        message: str,
        provider: Optional[str] = None,
        method: Optional[str] = None,
        address: Optional[str] = None,
        step: Optional[str] = None,
        rpc_code: Optional[int] = None,
    ):
        super().__init__(message, ErrorCode.PROVIDER_ERROR)
        self.provider = provider
        self.method = method
        self.address = address
        self.step = step
        self.rpc_code = rpc_code

    @property
    def is_revert(self) -> bool:
        """True when the node reported an execution revert rather than a transport fault."""
        if self.rpc_code == 3:
            return True
        return "revert" in self.message.lower()

    def with_context(self, address: str, step: str) -> "ProviderError":
        return ProviderError(
            f"{step} failed for {address}: {self.message}",
            provider=self.provider,
            method=self.method,
            address=address,
            step=step,
            rpc_code=self.rpc_code,
        )

    def to_dict(self) -> Dict[str, Any]:
        payload = super().to_dict()
        payload.update(
            {
                "provider": self.provider,
                "method": self.method,
                "address": self.address,
                "step": self.step,
            }
        )
        return payload


class PairContextInvariantError(UniswapError):
    """The builder's bookkeeping is inconsistent. This is a defect, not bad input."""

    def __init__(self, message: str, code: ErrorCode = ErrorCode.INTERNAL_INVARIANT):
        super().__init__(message, code)


def token_not_found(address: str) -> UniswapError:
    return UniswapError(
        f"No ERC-20 token contract could be resolved at {address}",
        ErrorCode.TOKEN_NOT_FOUND,
    )


__all__ = [
    "ErrorCategory",
    "ErrorCode",
    "UniswapError",
    "ProviderError",
    "PairContextInvariantError",
    "token_not_found",
]
