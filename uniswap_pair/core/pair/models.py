"""Typed models used by the pair subsystem."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional

from ...config import settings as app_settings
from ..network import NetworkHandle
from ..tokens.models import Token


@dataclass(frozen=True)
class UniswapPairSettings:
    """Trade settings handed to the pair factory.

    Defaults come from the environment (``DEFAULT_SLIPPAGE`` etc.) so every
    ``UniswapPairSettings()`` built in one process compares equal.
    """

    slippage: float = field(default_factory=lambda: app_settings.default_slippage)
    deadline_minutes: int = field(default_factory=lambda: app_settings.default_deadline_minutes)
    disable_multihops: bool = field(default_factory=lambda: app_settings.default_disable_multihops)

    def __post_init__(self):
        if not 0 <= self.slippage <= 1:
            raise ValueError(f"slippage must be between 0 and 1, got {self.slippage}")
        if self.deadline_minutes <= 0:
            raise ValueError(f"deadline_minutes must be positive, got {self.deadline_minutes}")

    def to_dict(self) -> Dict[str, Any]:
        return {
            "slippage": self.slippage,
            "deadline_minutes": self.deadline_minutes,
            "disable_multihops": self.disable_multihops,
        }


@dataclass
class UniswapPairContext:
    """Raw caller input.

    Any combination of ``chain_id``, ``provider_url`` and ``ethereum_provider``
    may be set; the builder picks one network access route.
    """

    from_token_contract_address: Optional[str] = None
    to_token_contract_address: Optional[str] = None
    ethereum_address: Optional[str] = None
    chain_id: Optional[int] = None
    provider_url: Optional[str] = None
    ethereum_provider: Any = None
    settings: Optional[UniswapPairSettings] = None

    _CAMEL_KEYS = {
        "fromTokenContractAddress": "from_token_contract_address",
        "toTokenContractAddress": "to_token_contract_address",
        "ethereumAddress": "ethereum_address",
        "chainId": "chain_id",
        "providerUrl": "provider_url",
        "ethereumProvider": "ethereum_provider",
    }
    _CAMEL_SETTINGS_KEYS = {
        "deadlineMinutes": "deadline_minutes",
        "disableMultihops": "disable_multihops",
    }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "UniswapPairContext":
        """Build from a mapping using either snake_case or camelCase keys. Unknown keys are ignored."""
        kwargs: Dict[str, Any] = {}
        for key, value in data.items():
            name = cls._CAMEL_KEYS.get(key, key)
            if name not in cls.__dataclass_fields__:
                continue
            if name == "settings" and isinstance(value, Mapping):
                value = UniswapPairSettings(
                    **{cls._CAMEL_SETTINGS_KEYS.get(k, k): v for k, v in value.items()}
                )
            kwargs[name] = value
        return cls(**kwargs)


@dataclass(frozen=True)
class UniswapPairFactoryContext:
    """Fully validated input for the pair factory. Never mutated after construction."""

    from_token: Token
    to_token: Token
    ethereum_address: str
    settings: UniswapPairSettings
    network: NetworkHandle

    @property
    def chain_id(self) -> int:
        return self.from_token.chain_id

    def to_dict(self) -> Dict[str, Any]:
        return {
            "chain_id": self.chain_id,
            "from_token": self.from_token.to_dict(),
            "to_token": self.to_token.to_dict(),
            "ethereum_address": self.ethereum_address,
            "settings": self.settings.to_dict(),
        }
