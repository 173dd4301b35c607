"""
Schnorr Groups modulo a Prime

The order-q subgroup of Z_p^* for a safe prime p = 2q + 1. Points are
residues in [1, p), the group operation is multiplication mod p and the
neutral element is 1. Encodings are big-endian; point and scalar widths
follow the bit lengths of p and q and need not be equal.

MODP_257_TEST is small enough to be fast in tests and deliberately gives a
33-byte point next to a 32-byte scalar. It is not meant for production keys.
"""

from __future__ import annotations

from .base import Group

# 257-bit safe prime p = 2q + 1 with q prime (256 bits)
MODP_257_P = int(
    "01CA7AD21CE36B339F31735916CA7451BD8130819C79287802F9F9B5AA4D9362DF", 16
)
MODP_257_Q = (MODP_257_P - 1) // 2
# 4 = 2^2 is a quadratic residue, so it generates the order-q subgroup
MODP_257_G = 4


def _byte_length(n: int) -> int:
    return (n.bit_length() + 7) // 8


class ModPGroup(Group):
    """Prime-order subgroup of the multiplicative group modulo p."""

    scalar_byteorder = "big"

    def __init__(self, name: str, p: int, q: int, g: int, hash_name: str = "sha256") -> None:
        if p != 2 * q + 1:
            raise ValueError("p must be a safe prime of the form 2q + 1")
        if not 1 < g < p or pow(g, q, p) != 1:
            raise ValueError("g must generate the order-q subgroup")
        self.name = name
        self.p = p
        self.order = q
        self.g = g
        self.hash_name = hash_name
        self.point_size = _byte_length(p)
        self.scalar_size = _byte_length(q)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ModPGroup):
            return NotImplemented
        return (self.name, self.p, self.g) == (other.name, other.p, other.g)

    def __hash__(self) -> int:
        return hash((self.name, self.p, self.g))

    def base_element(self) -> int:
        return self.g

    def neutral_element(self) -> int:
        return 1

    def point_add(self, a: int, b: int) -> int:
        return (a * b) % self.p

    def point_mul(self, a: int, k: int) -> int:
        return pow(a, k % self.order, self.p)

    def encode_point(self, a: int) -> bytes:
        return a.to_bytes(self.point_size, "big")

    def decode_point(self, data: bytes) -> int:
        value = int.from_bytes(data, "big")
        if not 1 <= value < self.p:
            raise ValueError("Point encoding out of range")
        if pow(value, self.order, self.p) != 1:
            raise ValueError("Point is not in the prime-order subgroup")
        return value


def modp_257_test() -> ModPGroup:
    return ModPGroup("modp-257-test", MODP_257_P, MODP_257_Q, MODP_257_G)
