import itertools
import logging
from typing import Any, List, Optional
from urllib.parse import urlsplit

import httpx

from ..config import settings
from ..core.errors import ProviderError
from .base import NetworkProvider

logger = logging.getLogger(__name__)


class JsonRpcProvider(NetworkProvider):
    """JSON-RPC 2.0 over HTTP.

    The ``httpx.AsyncClient`` is created on first use, so constructing the
    provider never touches the network.
    """

    name = "json_rpc"

    def __init__(
        self,
        url: str,
        timeout_s: Optional[float] = None,
        client: Optional[httpx.AsyncClient] = None,
    ):
        self.url = url
        self.timeout_s = timeout_s or settings.request_timeout_seconds
        self._client = client
        self._owns_client = client is None
        self._ids = itertools.count(1)

    @property
    def host(self) -> str:
        # Managed endpoints embed credentials in the path; only the host is logged.
        return urlsplit(self.url).netloc or self.url

    def _get_client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(timeout=self.timeout_s)
        return self._client

    async def request(self, method: str, params: List[Any]) -> Any:
        payload = {
            "jsonrpc": "2.0",
            "method": method,
            "params": params,
            "id": next(self._ids),
        }

        try:
            response = await self._get_client().post(
                self.url,
                json=payload,
                headers={"Content-Type": "application/json"},
            )
            response.raise_for_status()
            data = response.json()
        except httpx.HTTPStatusError as exc:
            raise ProviderError(
                f"{self.host} returned HTTP {exc.response.status_code} for {method}",
                provider=self.name,
                method=method,
            ) from exc
        except httpx.HTTPError as exc:
            raise ProviderError(
                f"{method} request to {self.host} failed: {exc!r}",
                provider=self.name,
                method=method,
            ) from exc
        except ValueError as exc:
            raise ProviderError(
                f"{self.host} returned a non-JSON body for {method}",
                provider=self.name,
                method=method,
            ) from exc

        if not isinstance(data, dict):
            raise ProviderError(
                f"{self.host} returned an unexpected payload for {method}",
                provider=self.name,
                method=method,
            )

        if "error" in data:
            error = data["error"]
            logger.debug("json-rpc error host=%s method=%s error=%s", self.host, method, error)
            if isinstance(error, dict):
                message, rpc_code = error.get("message", error), error.get("code")
            else:
                message, rpc_code = str(error), None
            raise ProviderError(
                f"{method} error from {self.host}: {message}",
                provider=self.name,
                method=method,
                rpc_code=rpc_code,
            )

        return data.get("result")

    async def chain_id(self) -> int:
        result = await self.request("eth_chainId", [])
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

    async def aclose(self) -> None:
        if self._owns_client and self._client is not None:
            await self._client.aclose()
            self._client = None
