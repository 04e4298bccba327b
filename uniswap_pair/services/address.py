"""Helpers for validating and checksum-normalizing EVM addresses."""

from __future__ import annotations

import re
from functools import lru_cache
from typing import Any, Optional

from eth_utils import is_checksum_address, to_checksum_address

_EVM_ADDRESS_RE = re.compile(r"^(0x)?([a-fA-F0-9]{40})$")


def _is_single_case(hex_part: str) -> bool:
    return hex_part == hex_part.lower() or hex_part == hex_part.upper()


@lru_cache(maxsize=1024)
def _normalize(raw: str) -> Optional[str]:
    match = _EVM_ADDRESS_RE.fullmatch(raw)
    if not match:
        return None
    prefixed = "0x" + match.group(2)
    # Mixed case carries an EIP-55 checksum that has to verify.
    if not _is_single_case(match.group(2)) and not is_checksum_address(prefixed):
        return None
    return to_checksum_address(prefixed)


def normalize_address(raw: Any) -> Optional[str]:
    """Return the checksummed form of ``raw`` or None when it is not a valid address."""

    if not isinstance(raw, str):
        return None
    return _normalize(raw)


def is_address(raw: Any) -> bool:
    return normalize_address(raw) is not None


__all__ = [
    "normalize_address",
    "is_address",
]
