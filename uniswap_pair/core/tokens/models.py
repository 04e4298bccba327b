"""Token descriptor model."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Dict


@dataclass(frozen=True)
class Token:
    """Metadata for an ERC-20 contract on one chain.

    ``contract_address`` is always the checksummed form.
    """

    chain_id: int
    contract_address: str
    decimals: int
    symbol: str
    name: str

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)
