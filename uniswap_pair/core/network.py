"""
Network access selection.

A pair context may describe network access as a chain id (with or without
an explicit provider url) or as an injected wallet provider. The caller's
object can carry several of these at once, so ``select_network_access``
collapses it into exactly one ``NetworkAccessSpec`` variant using a fixed
priority order, and ``resolve_network_access`` turns that variant into a
``NetworkHandle``. Neither step performs a network round trip.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, Optional, Union

from ..config import settings
from ..providers.base import NetworkProvider
from ..providers.injected import InjectedProvider
from ..providers.json_rpc import JsonRpcProvider
from .chain_types import ChainId, describe_supported_chains, network_name, to_chain_id
from .errors import ErrorCode, UniswapError

logger = logging.getLogger(__name__)

ProviderFactory = Callable[[str], NetworkProvider]


@dataclass(frozen=True)
class ChainIdAccess:
    chain_id: ChainId
    provider_url: Optional[str] = None


@dataclass(frozen=True)
class InjectedProviderAccess:
    ethereum_provider: Any


NetworkAccessSpec = Union[ChainIdAccess, InjectedProviderAccess]


def chain_not_supported(chain_id: Any) -> UniswapError:
    return UniswapError(
        f"ChainId - {chain_id} is not supported. This lib only supports {describe_supported_chains()}",
        ErrorCode.CHAIN_ID_NOT_SUPPORTED,
    )


def select_network_access(
    chain_id: Any = None,
    provider_url: Optional[str] = None,
    ethereum_provider: Any = None,
) -> NetworkAccessSpec:
    """
    Pick exactly one network access variant.

    Priority:
        1. chain id + provider url
        2. chain id alone (default managed endpoint)
        3. injected wallet provider (chain id discovered from the connection)

    Raises:
        UniswapError: ``CHAIN_ID_NOT_SUPPORTED`` for a declared chain id outside
            the supported set, ``MISSING_NETWORK_ACCESS_SPEC`` when nothing usable
            was supplied.
    """
    if chain_id:
        supported = to_chain_id(chain_id)
        if supported is None:
            raise chain_not_supported(chain_id)
        if provider_url:
            return ChainIdAccess(chain_id=supported, provider_url=provider_url)
        return ChainIdAccess(chain_id=supported)

    if ethereum_provider is not None:
        return InjectedProviderAccess(ethereum_provider=ethereum_provider)

    raise UniswapError(
        "You must supply a chain_id (optionally with a provider_url) or an ethereum_provider on the pair context",
        ErrorCode.MISSING_NETWORK_ACCESS_SPEC,
    )


class NetworkHandle:
    """Queryable connection to one network.

    When the access spec declared a chain id, ``chain_id()`` reports it without
    asking the node. Otherwise the id is read from the live connection once and
    cached.
    """

    def __init__(
        self,
        provider: NetworkProvider,
        access: NetworkAccessSpec,
        declared_chain_id: Optional[ChainId] = None,
    ):
        self.provider = provider
        self.access = access
        self.declared_chain_id = declared_chain_id
        self._live_chain_id: Optional[int] = None

    async def chain_id(self) -> int:
        if self.declared_chain_id is not None:
            return int(self.declared_chain_id)
        if self._live_chain_id is None:
            self._live_chain_id = await self.provider.chain_id()
            logger.debug("discovered chain id %s via %s", self._live_chain_id, self.provider.name)
        return self._live_chain_id

    async def call(self, address: str, data: str) -> str:
        return await self.provider.call(address, data)

    async def aclose(self) -> None:
        await self.provider.aclose()

    async def __aenter__(self) -> "NetworkHandle":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.aclose()

    def __repr__(self) -> str:
        return (
            f"NetworkHandle(provider={self.provider.name!r}, "
            f"access={type(self.access).__name__}, declared_chain_id={self.declared_chain_id})"
        )


def default_rpc_url(chain_id: ChainId) -> str:
    url = settings.rpc_url_for_chain(int(chain_id), network_name(chain_id))
    if not url:
        raise UniswapError(
            f"No default endpoint is configured for chain {int(chain_id)}; "
            "set INFURA_PROJECT_ID or RPC_URLS, or pass a provider_url",
            ErrorCode.MISSING_NETWORK_ACCESS_SPEC,
        )
    return url


def resolve_network_access(
    access: NetworkAccessSpec,
    provider_factory: Optional[ProviderFactory] = None,
) -> NetworkHandle:
    """Build the ``NetworkHandle`` for an access spec."""
    factory = provider_factory or JsonRpcProvider

    if isinstance(access, ChainIdAccess):
        url = access.provider_url or default_rpc_url(access.chain_id)
        logger.debug(
            "network access chain_id=%s explicit_url=%s",
            int(access.chain_id),
            access.provider_url is not None,
        )
        return NetworkHandle(factory(url), access, declared_chain_id=access.chain_id)

    if isinstance(access, InjectedProviderAccess):
        logger.debug("network access via injected provider")
        return NetworkHandle(InjectedProvider(access.ethereum_provider), access)

    raise TypeError(f"Unknown network access spec: {access!r}")


__all__ = [
    "ChainIdAccess",
    "InjectedProviderAccess",
    "NetworkAccessSpec",
    "NetworkHandle",
    "ProviderFactory",
    "chain_not_supported",
    "select_network_access",
    "resolve_network_access",
    "default_rpc_url",
]
