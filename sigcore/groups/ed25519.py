"""
Ed25519 Group Suite

The prime-order subgroup of edwards25519, backed by libsodium via
PyNaCl (nacl.bindings).

- Scalars: 32 bytes, little-endian, reduced modulo L
- Points: 32-byte compressed encoding
- Hash: SHA-256, digest reduced with crypto_core_ed25519_scalar_reduce

libsodium refuses the identity point and small-order points as inputs and
outputs of scalar multiplication, so products involving the neutral element
or the zero scalar are resolved here before calling into it.
"""

from __future__ import annotations

import nacl.bindings
from nacl.exceptions import CryptoError

from .base import Group, Scalar

# Ed25519 group order (L)
CURVE_ORDER = 2**252 + 27742317777372353535851937790883648493

POINT_SIZE = nacl.bindings.crypto_core_ed25519_BYTES
SCALAR_SIZE = nacl.bindings.crypto_core_ed25519_SCALARBYTES
NONREDUCED_SCALAR_SIZE = nacl.bindings.crypto_core_ed25519_NONREDUCEDSCALARBYTES

# Compressed encodings: identity is (0, 1), base point y = 4/5
NEUTRAL_POINT = b"\x01" + b"\x00" * 31
BASE_POINT = b"\x58" + b"\x66" * 31


class Ed25519Group(Group):
    """Ed25519 suite (default)."""

    name = "ed25519"
    order = CURVE_ORDER
    scalar_size = SCALAR_SIZE
    point_size = POINT_SIZE
    scalar_byteorder = "little"
    hash_name = "sha256"

    def scalar_from_digest(self, digest: bytes) -> Scalar:
        if len(digest) > NONREDUCED_SCALAR_SIZE:
            raise ValueError(
                f"Digest longer than {NONREDUCED_SCALAR_SIZE} bytes cannot be reduced"
            )
        padded = digest.ljust(NONREDUCED_SCALAR_SIZE, b"\x00")
        reduced = nacl.bindings.crypto_core_ed25519_scalar_reduce(padded)
        return self.scalar(int.from_bytes(reduced, "little"))

    def base_element(self) -> bytes:
        return BASE_POINT

    def neutral_element(self) -> bytes:
        return NEUTRAL_POINT

    def point_add(self, a: bytes, b: bytes) -> bytes:
        if a == NEUTRAL_POINT:
            return b
        if b == NEUTRAL_POINT:
            return a
        try:
            return nacl.bindings.crypto_core_ed25519_add(a, b)
        except CryptoError as e:
            raise ValueError(f"Point addition failed: {e}") from e

    def point_mul(self, a: bytes, k: int) -> bytes:
        k %= self.order
        if k == 0 or a == NEUTRAL_POINT:
            return NEUTRAL_POINT
        n = k.to_bytes(SCALAR_SIZE, "little")
        try:
            if a == BASE_POINT:
                return nacl.bindings.crypto_scalarmult_ed25519_base_noclamp(n)
            return nacl.bindings.crypto_scalarmult_ed25519_noclamp(n, a)
        except CryptoError as e:
            raise ValueError(f"Scalar multiplication failed: {e}") from e

    def encode_point(self, a: bytes) -> bytes:
        return a

    def decode_point(self, data: bytes) -> bytes:
        data = bytes(data)
        if data == NEUTRAL_POINT:
            return data
        # Rejects non-canonical, small-order and out-of-subgroup encodings
        if not nacl.bindings.crypto_core_ed25519_is_valid_point(data):
            raise ValueError("Bytes do not encode a valid Ed25519 point")
        return data
