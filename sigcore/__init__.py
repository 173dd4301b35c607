"""
Schnorr signatures over prime-order groups.

Usage:
    from sigcore import get_group, sign, verify

    group = get_group("ed25519")
    keys = group.keypair()
    signature = sign("message", keys.secret)
    assert verify("message", signature, keys.public)
"""

from sigcore.crypto import (
    Signature,
    decode_signature,
    encode_signature,
    hash_to_scalar,
    sign,
    verify,
)
from sigcore.groups import Group, KeyPair, Point, Scalar, get_group, list_groups

__version__ = "0.1.0"

__all__ = [
    "Group",
    "KeyPair",
    "Point",
    "Scalar",
    "Signature",
    "decode_signature",
    "encode_signature",
    "get_group",
    "hash_to_scalar",
    "list_groups",
    "sign",
    "verify",
]
