"""
Tests for network access selection and handle resolution.
"""

import pytest

from uniswap_pair.core.chain_types import ChainId
from uniswap_pair.core.errors import ErrorCode, UniswapError
from uniswap_pair.core.network import (
    ChainIdAccess,
    InjectedProviderAccess,
    NetworkHandle,
    resolve_network_access,
    select_network_access,
)
from uniswap_pair.providers.injected import InjectedProvider
from uniswap_pair.providers.json_rpc import JsonRpcProvider


class FakeWallet:
    def __init__(self, chain_id: str = "0x4"):
        self.chain_id = chain_id
        self.requests = []

    async def request(self, args):
        self.requests.append(args)
        if args["method"] == "eth_chainId":
            return self.chain_id
        return "0x"


# =============================================================================
# Selection priority
# =============================================================================

class TestSelectNetworkAccess:

    def test_chain_id_and_url_wins(self):
        access = select_network_access(
            chain_id=1,
            provider_url="http://localhost:8545",
            ethereum_provider=FakeWallet(),
        )
        assert access == ChainIdAccess(chain_id=ChainId.MAINNET, provider_url="http://localhost:8545")

    def test_chain_id_beats_injected_provider(self):
        access = select_network_access(chain_id=4, ethereum_provider=FakeWallet())
        assert access == ChainIdAccess(chain_id=ChainId.RINKEBY)

    def test_injected_provider_beats_bare_url(self):
        wallet = FakeWallet()
        access = select_network_access(provider_url="http://localhost:8545", ethereum_provider=wallet)
        assert isinstance(access, InjectedProviderAccess)
        assert access.ethereum_provider is wallet

    def test_url_without_chain_id_is_not_enough(self):
        with pytest.raises(UniswapError) as exc_info:
            select_network_access(provider_url="http://localhost:8545")
        assert exc_info.value.code == ErrorCode.MISSING_NETWORK_ACCESS_SPEC

    def test_nothing_supplied(self):
        with pytest.raises(UniswapError) as exc_info:
            select_network_access()
        assert exc_info.value.code == ErrorCode.MISSING_NETWORK_ACCESS_SPEC

    @pytest.mark.parametrize("chain_id", [56, 137, True])
    def test_unsupported_declared_chain_rejected(self, chain_id):
        with pytest.raises(UniswapError) as exc_info:
            select_network_access(chain_id=chain_id, provider_url="http://localhost:8545")
        assert exc_info.value.code == ErrorCode.CHAIN_ID_NOT_SUPPORTED


# =============================================================================
# Handle resolution
# =============================================================================

class TestResolveNetworkAccess:

    def test_explicit_url_used_instead_of_default(self, infura_settings, provider_factory):
        access = ChainIdAccess(chain_id=ChainId.MAINNET, provider_url="http://localhost:8545")
        handle = resolve_network_access(access, provider_factory)

        assert provider_factory.urls == ["http://localhost:8545"]
        assert handle.declared_chain_id == ChainId.MAINNET

    def test_default_endpoint_for_chain_id(self, infura_settings, provider_factory):
        resolve_network_access(ChainIdAccess(chain_id=ChainId.GORLI), provider_factory)
        assert provider_factory.urls == ["https://goerli.infura.io/v3/test-project"]

    def test_default_endpoint_requires_configuration(self, monkeypatch, provider_factory):
        from uniswap_pair.config import settings

        monkeypatch.setattr(settings, "infura_project_id", "")
        monkeypatch.setattr(settings, "rpc_urls", {})

        with pytest.raises(UniswapError) as exc_info:
            resolve_network_access(ChainIdAccess(chain_id=ChainId.MAINNET), provider_factory)
        assert exc_info.value.code == ErrorCode.MISSING_NETWORK_ACCESS_SPEC
        assert provider_factory.urls == []

    def test_default_provider_is_json_rpc(self):
        handle = resolve_network_access(
            ChainIdAccess(chain_id=ChainId.MAINNET, provider_url="http://localhost:8545")
        )
        assert isinstance(handle.provider, JsonRpcProvider)
        assert handle.provider.url == "http://localhost:8545"

    def test_injected_provider_is_wrapped(self):
        wallet = FakeWallet()
        handle = resolve_network_access(InjectedProviderAccess(ethereum_provider=wallet))
        assert isinstance(handle.provider, InjectedProvider)
        # Nothing is asked of the wallet until the chain id is needed
        assert wallet.requests == []


class TestNetworkHandle:

    @pytest.mark.asyncio
    async def test_declared_chain_id_skips_live_query(self, fake_network):
        handle = NetworkHandle(fake_network, ChainIdAccess(chain_id=ChainId.KOVAN), ChainId.KOVAN)
        assert await handle.chain_id() == 42
        assert fake_network.chain_id_requests == 0

    @pytest.mark.asyncio
    async def test_injected_chain_id_discovered_once(self):
        wallet = FakeWallet(chain_id="0x5")
        handle = resolve_network_access(InjectedProviderAccess(ethereum_provider=wallet))

        assert await handle.chain_id() == 5
        assert await handle.chain_id() == 5
        assert [r["method"] for r in wallet.requests] == ["eth_chainId"]

    @pytest.mark.asyncio
    async def test_context_manager_closes_provider(self, fake_network):
        async with NetworkHandle(fake_network, ChainIdAccess(chain_id=ChainId.MAINNET, provider_url="http://x")) as handle:
            assert handle.provider is fake_network
        assert fake_network.closed is True
