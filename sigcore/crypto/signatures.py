"""
Schnorr Signatures

Signing, verification and the fixed-width binary codec for signatures over
any registered prime-order group.

    sign:    k <- random, R = k*G, e = H(m || R), s = k + x*e
    verify:  R + e*Y == s*G

The challenge binds the fixed binary encoding of R, never its display form.

Wire format: encode(R) || encode(s), no length prefix or version tag. The
total width is point_size + scalar_size of the group and the split happens at
point_size, so suites with unequal widths decode correctly.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from sigcore.groups import get_group
from sigcore.groups.base import Group, Point, Scalar
from sigcore.schemas.errors import (
    IncompleteSignatureException,
    InvalidInputException,
    InvalidKeyException,
    MalformedSignatureException,
)

from .hashing import hash_to_scalar, sha256


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Signature:
    """A Schnorr signature: commitment point R and response scalar s."""

    R: Optional[Point] = None
    s: Optional[Scalar] = None

    @property
    def group(self) -> Optional[Group]:
        if self.R is not None:
            return self.R.group
        if self.s is not None:
            return self.s.group
        return None

    @property
    def missing_fields(self) -> list[str]:
        """Names of fields that are unset or hold the neutral/zero value."""
        missing = []
        if self.R is None or self.R.is_neutral():
            missing.append("R")
        if self.s is None or self.s.is_zero():
            missing.append("s")
        return missing

    @property
    def is_complete(self) -> bool:
        if self.missing_fields:
            return False
        return self.R.group == self.s.group

    def __str__(self) -> str:
        r = str(self.R) if self.R is not None else "<unset>"
        s = str(self.s) if self.s is not None else "<unset>"
        return f"(R={r}, s={s})"

    def to_bytes(self) -> bytes:
        return encode_signature(self)

    @classmethod
    def from_bytes(cls, data: bytes, group: Optional[Group] = None) -> "Signature":
        return decode_signature(data, group)

    @staticmethod
    def size(group: Group) -> int:
        """Encoded width of a signature in the given group."""
        return group.point_size + group.scalar_size

    def verify(self, message: str | bytes, public_key: Point) -> bool:
        """Verify this signature on `message` under `public_key`."""
        return verify(message, self, public_key)


# =============================================================================
# Validation
# =============================================================================

def _message_bytes(message: str | bytes) -> bytes:
    if isinstance(message, str):
        data = message.encode("utf-8")
    elif isinstance(message, (bytes, bytearray)):
        data = bytes(message)
    else:
        raise InvalidInputException(
            f"Message must be str or bytes, got {type(message).__name__}"
        )
    if not data:
        raise InvalidInputException("Message must not be empty")
    return data


def _require_complete(signature: object) -> Signature:
    if not isinstance(signature, Signature):
        raise IncompleteSignatureException(
            f"Expected a Signature, got {type(signature).__name__}",
            missing=["R", "s"],
        )
    missing = signature.missing_fields
    if missing:
        raise IncompleteSignatureException(
            f"Signature is incomplete: {', '.join(missing)} unset or zero",
            missing=missing,
        )
    if signature.R.group != signature.s.group:
        raise IncompleteSignatureException(
            "Signature fields belong to different groups",
            details={"R": signature.R.group.name, "s": signature.s.group.name},
        )
    return signature


def _challenge(message: bytes, R: Point) -> Scalar:
    """e = H(m || encode(R))"""
    return hash_to_scalar(message + R.to_bytes(), R.group)


# =============================================================================
# Sign / Verify
# =============================================================================

def sign(message: str | bytes, private_key: Scalar) -> Signature:
    """
    Sign a message with a private scalar.

    Args:
        message: Non-empty text (UTF-8) or bytes
        private_key: Non-zero scalar; its group selects the suite

    Returns:
        Signature (R, s)

    Raises:
        InvalidInputException: If the message is empty or not text/bytes
        InvalidKeyException: If the private key is not a scalar or is zero
        RandomnessUnavailableException: If the nonce cannot be drawn
    """
    m = _message_bytes(message)

    if not isinstance(private_key, Scalar):
        raise InvalidKeyException(
            f"Private key must be a Scalar, got {type(private_key).__name__}"
        )
    group = private_key.group
    if private_key.is_zero():
        raise InvalidKeyException("Private key must not be zero", group=group.name)

    k = group.random_scalar()
    R = k * group.base()
    e = _challenge(m, R)
    s = k + private_key * e

    logger.debug(
        f"Signed message sha256={sha256(m).hex()[:16]} in group {group.name}"
    )
    return Signature(R=R, s=s)


def verify(message: str | bytes, signature: Signature, public_key: Point) -> bool:
    """
    Verify a signature.

    Returns False only for usable inputs whose signature does not match;
    unusable inputs raise instead.

    Args:
        message: Non-empty text (UTF-8) or bytes
        signature: Complete signature
        public_key: Non-neutral point in the signature's group

    Returns:
        True if R + e*Y == s*G

    Raises:
        InvalidInputException: If the message is empty or not text/bytes
        IncompleteSignatureException: If a signature field is unset or zero
        InvalidKeyException: If the public key is not a point, is neutral,
            or belongs to another group
    """
    m = _message_bytes(message)
    signature = _require_complete(signature)

    if not isinstance(public_key, Point):
        raise InvalidKeyException(
            f"Public key must be a Point, got {type(public_key).__name__}"
        )
    group = signature.R.group
    if public_key.group != group:
        raise InvalidKeyException(
            f"Public key group {public_key.group.name!r} does not match "
            f"signature group {group.name!r}",
            group=public_key.group.name,
        )
    if public_key.is_neutral():
        raise InvalidKeyException(
            "Public key must not be the neutral element", group=group.name
        )

    e = _challenge(m, signature.R)
    left = signature.R + e * public_key
    right = signature.s * group.base()
    valid = left == right

    logger.debug(
        f"Verified message sha256={sha256(m).hex()[:16]} in group {group.name}: "
        f"{'valid' if valid else 'invalid'}"
    )
    return valid


# =============================================================================
# Codec
# =============================================================================

def encode_signature(signature: Signature) -> bytes:
    """
    Encode a signature as encode(R) || encode(s).

    Raises:
        IncompleteSignatureException: If a field is unset or zero
    """
    signature = _require_complete(signature)
    return signature.R.to_bytes() + signature.s.to_bytes()


def decode_signature(data: bytes, group: Optional[Group] = None) -> Signature:
    """
    Decode encode(R) || encode(s) for the given group (default suite if None).

    The length is checked against point_size + scalar_size before splitting
    at point_size. A neutral R or zero s is rejected, so a decoded signature
    is always complete.

    Raises:
        MalformedSignatureException: On wrong type or length, invalid
            element encodings, or an incomplete result
    """
    if group is None:
        group = get_group()
    if not isinstance(data, (bytes, bytearray, memoryview)):
        raise MalformedSignatureException(
            f"Signature data must be bytes, got {type(data).__name__}"
        )
    data = bytes(data)

    expected = Signature.size(group)
    if len(data) != expected:
        raise MalformedSignatureException(
            f"Signature must be {expected} bytes for group {group.name}, got {len(data)}",
            expected_length=expected,
            actual_length=len(data),
        )

    try:
        R = group.point_from_bytes(data[:group.point_size])
        s = group.scalar_from_bytes(data[group.point_size:])
    except ValueError as e:
        raise MalformedSignatureException(
            f"Invalid signature encoding: {e}",
            details={"group": group.name},
        ) from e

    signature = Signature(R=R, s=s)
    missing = signature.missing_fields
    if missing:
        raise MalformedSignatureException(
            f"Decoded signature has neutral or zero fields: {', '.join(missing)}",
            details={"group": group.name, "missing": missing},
        )

    logger.debug(f"Decoded {len(data)}-byte signature in group {group.name}")
    return signature


__all__ = [
    "Signature",
    "sign",
    "verify",
    "encode_signature",
    "decode_signature",
]
