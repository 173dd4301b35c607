"""
Core cryptographic utilities.

Hash-to-scalar transform, Schnorr signing and verification, and the
signature codec.
"""
from .hashing import (
    sha256,
    hash_to_scalar,
    to_hex,
    from_hex,
)
from .signatures import (
    Signature,
    sign,
    verify,
    encode_signature,
    decode_signature,
)

__all__ = [
    "sha256",
    "hash_to_scalar",
    "to_hex",
    "from_hex",
    "Signature",
    "sign",
    "verify",
    "encode_signature",
    "decode_signature",
]
