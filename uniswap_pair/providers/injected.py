import inspect
from typing import Any, List

from ..core.errors import ProviderError
from .base import NetworkProvider


class InjectedProvider(NetworkProvider):
    """Adapter around a caller-supplied EIP-1193 style wallet provider.

    The wrapped object must expose ``request({"method": ..., "params": [...]})``
    returning the result directly or as an awaitable. The wallet owns its
    connection, so ``aclose`` leaves it untouched.
    """

    name = "injected"

    def __init__(self, ethereum_provider: Any):
        if not callable(getattr(ethereum_provider, "request", None)):
            raise TypeError("Injected ethereum provider must expose a callable `request`")
        self.ethereum_provider = ethereum_provider

    async def request(self, method: str, params: List[Any]) -> Any:
        try:
            result = self.ethereum_provider.request({"method": method, "params": params})
            if inspect.isawaitable(result):
                result = await result
        except ProviderError:
            raise
        except Exception as exc:
            code = getattr(exc, "code", None)
            raise ProviderError(
                f"{method} failed on injected provider: {exc}",
                provider=self.name,
                method=method,
                rpc_code=code if isinstance(code, int) else None,
            ) from exc
        return result

    async def chain_id(self) -> int:
        result = await self.request("eth_chainId", [])
        if isinstance(result, int) and not isinstance(result, bool):
            return result
        try:
            return int(result, 16)
        except (TypeError, ValueError) as exc:
            raise ProviderError(
                f"eth_chainId returned an invalid value: {result!r}",
                provider=self.name,
                method="eth_chainId",
            ) from exc

    async def call(self, address: str, data: str) -> str:
        result = await self.request("eth_call", [{"to": address, "data": data}, "latest"])
        return result or "0x"
