"""
Hashing Utilities
Hash-to-scalar transform and hex helpers for the signature scheme.

This module provides:
- SHA-256 hashing for raw bytes
- Hashing of text or bytes into a group scalar (the Schnorr challenge)
- Hex encoding/decoding with 0x prefix

Security/Determinism Notes:
- Always hash raw bytes exactly as given; text is encoded as UTF-8
- Every call uses a fresh hash object, so concurrent callers never share state
- All operations are deterministic
"""
from __future__ import annotations

import hashlib

from sigcore.groups.base import Group, Scalar


def sha256(data: bytes) -> bytes:
    """
    Compute SHA-256 hash of raw bytes.

    Args:
        data: Raw bytes to hash

    Returns:
        32-byte SHA-256 digest

    Example:
        >>> sha256(b"hello").hex()
        '2cf24dba5fb0a30e26e83b2ac5b9e29e1b161e5c1fa7425e73043362938b9824'
    """
    return hashlib.sha256(data).digest()


def hash_to_scalar(data: bytes | str, group: Group) -> Scalar:
    """
    Hash text or bytes into a scalar of the given group.

    The group's suite hash is instantiated fresh for this call, fed the
    input (UTF-8 for text) and finalized; the digest is then reduced with
    the group's canonical digest-to-scalar reduction.

    Args:
        data: Input to hash
        group: Group whose hash and scalar field are used

    Returns:
        Scalar derived from the digest

    Raises:
        TypeError: If data is neither bytes nor str
    """
    if isinstance(data, str):
        data = data.encode("utf-8")
    elif not isinstance(data, (bytes, bytearray, memoryview)):
        raise TypeError(f"Cannot hash value of type {type(data).__name__}")

    h = group.new_hash()
    h.update(bytes(data))
    return group.scalar_from_digest(h.digest())


def to_hex(data: bytes) -> str:
    """
    Convert bytes to hexadecimal string with 0x prefix.

    Args:
        data: Raw bytes

    Returns:
        Hex string with 0x prefix (e.g., "0x1234abcd")

    Example:
        >>> to_hex(bytes.fromhex("deadbeef"))
        '0xdeadbeef'
    """
    return "0x" + data.hex()


def from_hex(hex_string: str) -> bytes:
    """
    Convert hexadecimal string (with 0x prefix) to bytes.

    Args:
        hex_string: Hex string with 0x prefix

    Returns:
        Decoded bytes

    Raises:
        ValueError: If string doesn't start with 0x, has odd length,
                   or contains invalid hex characters

    Example:
        >>> from_hex("0xdeadbeef").hex()
        'deadbeef'
    """
    # Validate 0x prefix
    if not hex_string.startswith("0x"):
        raise ValueError(
            f"Hex string must start with '0x' prefix, got: {hex_string[:10]}..."
        )

    # Remove prefix
    hex_content = hex_string[2:]

    # Validate even length
    if len(hex_content) % 2 != 0:
        raise ValueError(
            f"Hex string must have even length after 0x prefix, "
            f"got length {len(hex_content)}"
        )

    # Decode (will raise ValueError for invalid hex chars)
    try:
        return bytes.fromhex(hex_content)
    except ValueError as e:
        raise ValueError(f"Invalid hex characters in string: {e}") from e


__all__ = [
    "sha256",
    "hash_to_scalar",
    "to_hex",
    "from_hex",
]
