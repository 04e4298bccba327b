from abc import ABC, abstractmethod


class NetworkProvider(ABC):
    """Base interface for read access to an EVM network"""

    name: str
    timeout_s: float = 30

    @abstractmethod
    async def chain_id(self) -> int:
        """Return the chain id reported by the live connection"""
        pass

    @abstractmethod
    async def call(self, address: str, data: str) -> str:
        """Execute a read-only ``eth_call`` and return the hex-encoded result"""
        pass

    async def aclose(self) -> None:
        """Release any connection owned by the provider"""
        return None
