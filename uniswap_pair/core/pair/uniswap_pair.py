"""
Pair context builder.

``UniswapPair`` turns a raw ``UniswapPairContext`` into a
``UniswapPairFactoryContext``. Construction is synchronous and local: it
validates the three addresses and selects network access, failing fast on
the first problem. ``create_factory`` then does the network I/O (chain id
discovery, token metadata) and emits the context.

States move strictly forward:

    UNVALIDATED -> ADDRESSES_VALIDATED -> NETWORK_RESOLVED
        -> TOKENS_RESOLVED -> READY

Any failure after construction moves the builder to FAILED. A builder is
scoped to one resolution attempt and is never reused.
"""

from __future__ import annotations

import dataclasses
import logging
from enum import Enum
from typing import Any, Dict, Mapping, Optional, Set, Tuple, Union

from ...services.address import normalize_address
from ...services.tokens import TokenMetadataResolver
from ..chain_types import is_supported_chain_id
from ..errors import ErrorCode, PairContextInvariantError, UniswapError
from ..network import (
    NetworkHandle,
    ProviderFactory,
    chain_not_supported,
    resolve_network_access,
    select_network_access,
)
from ..tokens.models import Token
from .models import UniswapPairContext, UniswapPairFactoryContext, UniswapPairSettings

logger = logging.getLogger(__name__)


class PairState(str, Enum):
    UNVALIDATED = "unvalidated"
    ADDRESSES_VALIDATED = "addresses_validated"
    NETWORK_RESOLVED = "network_resolved"
    TOKENS_RESOLVED = "tokens_resolved"
    READY = "ready"
    FAILED = "failed"


TRANSITIONS: Dict[PairState, Set[PairState]] = {
    PairState.UNVALIDATED: {PairState.ADDRESSES_VALIDATED, PairState.FAILED},
    PairState.ADDRESSES_VALIDATED: {PairState.NETWORK_RESOLVED, PairState.FAILED},
    PairState.NETWORK_RESOLVED: {PairState.TOKENS_RESOLVED, PairState.FAILED},
    PairState.TOKENS_RESOLVED: {PairState.READY, PairState.FAILED},
    PairState.READY: set(),
    PairState.FAILED: set(),
}

# (field, label, required code, invalid code), checked in this order
_ADDRESS_FIELDS: Tuple[Tuple[str, str, ErrorCode, ErrorCode], ...] = (
    (
        "from_token_contract_address",
        "contract address",
        ErrorCode.FROM_TOKEN_CONTRACT_ADDRESS_REQUIRED,
        ErrorCode.FROM_TOKEN_CONTRACT_ADDRESS_NOT_VALID,
    ),
    (
        "to_token_contract_address",
        "contract address",
        ErrorCode.TO_TOKEN_CONTRACT_ADDRESS_REQUIRED,
        ErrorCode.TO_TOKEN_CONTRACT_ADDRESS_NOT_VALID,
    ),
    (
        "ethereum_address",
        "address",
        ErrorCode.ETHEREUM_ADDRESS_REQUIRED,
        ErrorCode.ETHEREUM_ADDRESS_NOT_VALID,
    ),
)


class UniswapPair:
    def __init__(
        self,
        uniswap_pair_context: Union[UniswapPairContext, Mapping[str, Any]],
        provider_factory: Optional[ProviderFactory] = None,
    ):
        """
        Validate the context and select network access.

        Args:
            uniswap_pair_context: Raw caller input, or a mapping accepted by
                ``UniswapPairContext.from_dict``. It is copied, never mutated.
            provider_factory: Builds the provider for URL based access
                (default: ``JsonRpcProvider``).

        Raises:
            UniswapError: on the first invalid or missing input.
        """
        if isinstance(uniswap_pair_context, Mapping):
            uniswap_pair_context = UniswapPairContext.from_dict(uniswap_pair_context)
        self._context = dataclasses.replace(uniswap_pair_context)
        self._provider_factory = provider_factory
        self._state = PairState.UNVALIDATED
        self._network: Optional[NetworkHandle] = None
        self._chain_id: Optional[int] = None
        self._tokens: Optional[Dict[str, Token]] = None

        self._validate_addresses()
        self._resolve_network()

    @property
    def state(self) -> PairState:
        return self._state

    @property
    def network(self) -> Optional[NetworkHandle]:
        return self._network

    @property
    def from_token_contract_address(self) -> str:
        return self._context.from_token_contract_address

    @property
    def to_token_contract_address(self) -> str:
        return self._context.to_token_contract_address

    @property
    def ethereum_address(self) -> str:
        return self._context.ethereum_address

    def _ensure_can_transition(self, to_state: PairState) -> None:
        if to_state not in TRANSITIONS[self._state]:
            raise PairContextInvariantError(
                f"Cannot move pair builder from {self._state.value} to {to_state.value}",
                ErrorCode.INVALID_STATE_TRANSITION,
            )

    def _transition(self, to_state: PairState) -> None:
        self._ensure_can_transition(to_state)
        logger.debug("pair builder %s -> %s", self._state.value, to_state.value)
        self._state = to_state

    def _fail(self) -> None:
        if PairState.FAILED in TRANSITIONS[self._state]:
            self._transition(PairState.FAILED)

    def _validate_addresses(self) -> None:
        for field_name, label, required_code, invalid_code in _ADDRESS_FIELDS:
            raw = getattr(self._context, field_name)
            if not raw:
                raise UniswapError(f"Must have a `{field_name}` on the context", required_code)

            canonical = normalize_address(raw)
            if canonical is None:
                raise UniswapError(f"`{field_name}` is not a valid {label}", invalid_code)
            setattr(self._context, field_name, canonical)

        self._transition(PairState.ADDRESSES_VALIDATED)

    def _resolve_network(self) -> None:
        access = select_network_access(
            chain_id=self._context.chain_id,
            provider_url=self._context.provider_url,
            ethereum_provider=self._context.ethereum_provider,
        )
        self._network = resolve_network_access(access, self._provider_factory)
        self._transition(PairState.NETWORK_RESOLVED)

    async def resolve_tokens(self) -> Dict[str, Token]:
        """Discover the live chain id and fetch both token descriptors."""
        self._ensure_can_transition(PairState.TOKENS_RESOLVED)
        try:
            chain_id = await self._network.chain_id()
            if not is_supported_chain_id(chain_id):
                raise chain_not_supported(chain_id)
            resolver = TokenMetadataResolver(self._network)
            tokens = await resolver.get_tokens(
                [self._context.from_token_contract_address, self._context.to_token_contract_address]
            )
        except BaseException:
            # Cancellation included: partial state must not be reused.
            self._fail()
            raise

        self._tokens = tokens
        self._chain_id = chain_id
        self._transition(PairState.TOKENS_RESOLVED)
        return tokens

    def finalize(self) -> UniswapPairFactoryContext:
        """Assemble the factory context. Only valid once tokens are resolved."""
        self._ensure_can_transition(PairState.READY)
        try:
            factory_context = self._build_factory_context()
        except UniswapError:
            self._fail()
            raise

        self._transition(PairState.READY)
        logger.info(
            "pair context ready chain_id=%s from=%s to=%s",
            self._chain_id,
            factory_context.from_token.symbol,
            factory_context.to_token.symbol,
        )
        return factory_context

    def _build_factory_context(self) -> UniswapPairFactoryContext:
        if not is_supported_chain_id(self._chain_id):
            raise chain_not_supported(self._chain_id)

        from_token = self._tokens.get(self._context.from_token_contract_address)
        to_token = self._tokens.get(self._context.to_token_contract_address)
        if from_token is None or to_token is None:
            raise PairContextInvariantError(
                "Resolved tokens do not cover the requested pair: "
                f"requested={[self._context.from_token_contract_address, self._context.to_token_contract_address]} "
                f"resolved={sorted(self._tokens)}"
            )

        return UniswapPairFactoryContext(
            from_token=from_token,
            to_token=to_token,
            ethereum_address=self._context.ethereum_address,
            settings=self._context.settings or UniswapPairSettings(),
            network=self._network,
        )

    async def create_factory(self) -> UniswapPairFactoryContext:
        """Create the context the pair factory needs to call methods on the 2 tokens."""
        await self.resolve_tokens()
        return self.finalize()


__all__ = ["UniswapPair", "PairState", "TRANSITIONS"]
