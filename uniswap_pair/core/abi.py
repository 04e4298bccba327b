"""
ERC-20 metadata calldata builders and return-data decoders.

Only the three view functions needed to describe a token are covered.
"""

from __future__ import annotations

from typing import Optional

from eth_utils import keccak


class AbiDecodeError(ValueError):
    """Return data could not be decoded as the expected type."""


def _strip_0x(value: str) -> str:
    return value[2:] if value.startswith("0x") else value


def _selector_from_signature(signature: str) -> str:
    selector = keccak(text=signature)[:4].hex()
    return f"0x{selector}"


SYMBOL_CALL = _selector_from_signature("symbol()")
NAME_CALL = _selector_from_signature("name()")
DECIMALS_CALL = _selector_from_signature("decimals()")


def _to_bytes(result: Optional[str]) -> bytes:
    hex_data = _strip_0x(result or "")
    if len(hex_data) % 2 != 0:
        raise AbiDecodeError("Return data must have an even-length hex string")
    try:
        return bytes.fromhex(hex_data)
    except ValueError as exc:
        raise AbiDecodeError(f"Return data is not hex: {result!r}") from exc


def decode_uint(result: Optional[str], bits: int = 256) -> int:
    data = _to_bytes(result)
    if len(data) < 32:
        raise AbiDecodeError(f"Expected a 32-byte word, got {len(data)} bytes")
    value = int.from_bytes(data[:32], "big")
    if value >= 1 << bits:
        raise AbiDecodeError(f"Value {value} does not fit in uint{bits}")
    return value


def decode_string(result: Optional[str]) -> str:
    """
    Decode an ABI ``string`` return value.

    Legacy tokens (MKR, SAI) return ``bytes32`` instead, so a single 32-byte
    word is read as a NUL-padded UTF-8 string.
    """
    data = _to_bytes(result)
    if len(data) == 32:
        return data.rstrip(b"\x00").decode("utf-8", errors="replace")
    if len(data) < 64:
        raise AbiDecodeError(f"Return data too short for a string: {len(data)} bytes")

    offset = int.from_bytes(data[:32], "big")
    if offset + 32 > len(data):
        raise AbiDecodeError(f"String offset {offset} out of range")
    length = int.from_bytes(data[offset:offset + 32], "big")
    start = offset + 32
    if start + length > len(data):
        raise AbiDecodeError(f"String length {length} out of range")
    return data[start:start + length].decode("utf-8", errors="replace")


__all__ = [
    "AbiDecodeError",
    "SYMBOL_CALL",
    "NAME_CALL",
    "DECIMALS_CALL",
    "decode_uint",
    "decode_string",
]
