"""Shared fixtures: an in-memory ERC-20 network and well-known addresses."""

from typing import Dict, List, Optional, Tuple

import pytest

from uniswap_pair.core.abi import DECIMALS_CALL, NAME_CALL, SYMBOL_CALL
from uniswap_pair.core.errors import ProviderError
from uniswap_pair.providers.base import NetworkProvider


USDC_MAINNET = "0xA0b86991c6218b36c1d19D4a2e9Eb0cE3606eB48"
WETH_MAINNET = "0xC02aaA39b223FE8D0A0e5C4F27eAD9083C756Cc2"
WETH_RINKEBY = "0xc778417E063141139Fce010982780140Aa0cD5Ab"
DAI_MAINNET = "0x6B175474E89094C44Da98b954EedeAC495271d0F"
OWNER = "0xd8dA6BF26964aF9D7eEd9e03E53415D37aA96045"


def encode_uint(value: int) -> str:
    return "0x" + hex(value)[2:].rjust(64, "0")


def encode_string(value: str) -> str:
    raw = value.encode("utf-8")
    padded_len = ((len(raw) + 31) // 32) * 32
    return (
        "0x"
        + hex(32)[2:].rjust(64, "0")
        + hex(len(raw))[2:].rjust(64, "0")
        + raw.hex().ljust(padded_len * 2, "0")
    )


def encode_bytes32(value: str) -> str:
    return "0x" + value.encode("utf-8").hex().ljust(64, "0")


class FakeErc20Network(NetworkProvider):
    """Answers ERC-20 metadata calls from a dict and records every request."""

    name = "fake"

    def __init__(self, chain_id: int = 1, tokens: Optional[Dict[str, Tuple[str, str, int]]] = None):
        self._chain_id = chain_id
        self.tokens = {address.lower(): meta for address, meta in (tokens or {}).items()}
        self.calls: List[Tuple[str, str]] = []
        self.chain_id_requests = 0
        self.closed = False
        self.fail_with: Optional[ProviderError] = None

    async def chain_id(self) -> int:
        self.chain_id_requests += 1
        return self._chain_id

    async def call(self, address: str, data: str) -> str:
        self.calls.append((address, data))
        if self.fail_with is not None:
            raise self.fail_with
        meta = self.tokens.get(address.lower())
        if meta is None:
            return "0x"
        symbol, name, decimals = meta
        if data == SYMBOL_CALL:
            return encode_string(symbol)
        if data == NAME_CALL:
            return encode_string(name)
        if data == DECIMALS_CALL:
            return encode_uint(decimals)
        return "0x"

    async def aclose(self) -> None:
        self.closed = True

    @property
    def called_addresses(self) -> List[str]:
        return sorted({address for address, _ in self.calls})


class UntouchableNetwork(NetworkProvider):
    """Fails the test if anything tries to reach the network."""

    name = "untouchable"

    async def chain_id(self) -> int:
        raise AssertionError("network must not be queried")

    async def call(self, address: str, data: str) -> str:
        raise AssertionError("network must not be queried")


@pytest.fixture
def fake_network() -> FakeErc20Network:
    return FakeErc20Network(
        chain_id=1,
        tokens={
            WETH_RINKEBY: ("WETH", "Wrapped Ether", 18),
            DAI_MAINNET: ("DAI", "Dai Stablecoin", 18),
        },
    )


@pytest.fixture
def provider_factory(fake_network):
    """Provider factory that hands out ``fake_network`` and records the URLs asked for."""

    def factory(url: str) -> NetworkProvider:
        factory.urls.append(url)
        return fake_network

    factory.urls = []
    return factory


@pytest.fixture
def infura_settings(monkeypatch):
    from uniswap_pair.config import settings

    monkeypatch.setattr(settings, "infura_project_id", "test-project")
    monkeypatch.setattr(settings, "rpc_urls", {})
    return settings
