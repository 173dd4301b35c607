"""
Prime-Order Group Abstraction

Scalars, points and the Group interface that every suite implements.

A Group owns its arithmetic, its fixed-width encodings and its hash. Scalar
arithmetic is plain integer arithmetic modulo the group order and is shared
by all suites; point arithmetic is delegated to the concrete suite.

Scalars and points are immutable values. Mixing values from different
groups raises TypeError.
"""

from __future__ import annotations

import hashlib
import secrets
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any

from sigcore.schemas.errors import RandomnessUnavailableException


@dataclass(frozen=True, eq=False)
class Scalar:
    """An element of the scalar field, integers modulo the group order."""

    group: "Group"
    value: int

    def _check_group(self, other: "Scalar | Point") -> None:
        if other.group != self.group:
            raise TypeError(
                f"Cannot combine values from groups {self.group.name!r} "
                f"and {other.group.name!r}"
            )

    def __add__(self, other: Any) -> "Scalar":
        if not isinstance(other, Scalar):
            return NotImplemented
        self._check_group(other)
        return self.group.scalar(self.value + other.value)

    def __sub__(self, other: Any) -> "Scalar":
        if not isinstance(other, Scalar):
            return NotImplemented
        self._check_group(other)
        return self.group.scalar(self.value - other.value)

    def __mul__(self, other: Any) -> "Scalar | Point":
        if isinstance(other, Scalar):
            self._check_group(other)
            return self.group.scalar(self.value * other.value)
        if isinstance(other, Point):
            self._check_group(other)
            return Point(self.group, self.group.point_mul(other.element, self.value))
        return NotImplemented

    def __neg__(self) -> "Scalar":
        return self.group.scalar(-self.value)

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Scalar):
            return NotImplemented
        return self.group == other.group and self.value == other.value

    def __hash__(self) -> int:
        return hash((self.group.name, self.value))

    def __int__(self) -> int:
        return self.value

    def __bytes__(self) -> bytes:
        return self.to_bytes()

    def __str__(self) -> str:
        return self.to_bytes().hex()

    def __repr__(self) -> str:
        # Scalars are private keys and nonces; keep the value out of reprs.
        return f"Scalar(group={self.group.name!r})"

    def is_zero(self) -> bool:
        return self.value == 0

    def to_bytes(self) -> bytes:
        return self.group.encode_scalar(self.value)


@dataclass(frozen=True, eq=False)
class Point:
    """A group element. `element` is the suite's internal representation."""

    group: "Group"
    element: Any

    def _check_group(self, other: "Scalar | Point") -> None:
        if other.group != self.group:
            raise TypeError(
                f"Cannot combine values from groups {self.group.name!r} "
                f"and {other.group.name!r}"
            )

    def __add__(self, other: Any) -> "Point":
        if not isinstance(other, Point):
            return NotImplemented
        self._check_group(other)
        return Point(self.group, self.group.point_add(self.element, other.element))

    def __mul__(self, other: Any) -> "Point":
        if not isinstance(other, Scalar):
            return NotImplemented
        return other * self

    __rmul__ = __mul__

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Point):
            return NotImplemented
        return self.group == other.group and self.to_bytes() == other.to_bytes()

    def __hash__(self) -> int:
        return hash((self.group.name, self.to_bytes()))

    def __bytes__(self) -> bytes:
        return self.to_bytes()

    def __str__(self) -> str:
        return self.to_bytes().hex()

    def __repr__(self) -> str:
        return f"Point(group={self.group.name!r}, {self})"

    def is_neutral(self) -> bool:
        return self.to_bytes() == self.group.encode_point(self.group.neutral_element())

    def to_bytes(self) -> bytes:
        return self.group.encode_point(self.element)


@dataclass(frozen=True)
class KeyPair:
    """A signing key pair with public == secret * base."""

    secret: Scalar = field(repr=False)
    public: Point

    def __post_init__(self) -> None:
        if self.secret.group != self.public.group:
            raise TypeError("Key pair secret and public key belong to different groups")
        if self.secret * self.secret.group.base() != self.public:
            raise ValueError("Public key does not match secret * base")

    @property
    def group(self) -> "Group":
        return self.secret.group


class Group(ABC):
    """
    Interface for a prime-order group suite.

    Subclasses set `name`, `order`, `scalar_size`, `point_size`,
    `scalar_byteorder` and `hash_name`, and implement the point primitives.
    Point primitives work on the suite's internal element representation;
    callers use the Scalar and Point wrappers.
    """

    name: str
    order: int
    scalar_size: int
    point_size: int
    scalar_byteorder: str = "big"
    hash_name: str = "sha256"

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Group):
            return NotImplemented
        return (
            type(self) is type(other)
            and self.name == other.name
            and self.order == other.order
        )

    def __hash__(self) -> int:
        return hash((type(self).__name__, self.name, self.order))

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(name={self.name!r})"

    # -------------------------------------------------------------------------
    # Scalars
    # -------------------------------------------------------------------------

    def scalar(self, value: int) -> Scalar:
        """Build a scalar from an integer, reduced modulo the group order."""
        return Scalar(self, value % self.order)

    def zero_scalar(self) -> Scalar:
        return Scalar(self, 0)

    def random_scalar(self) -> Scalar:
        """
        Draw a uniform non-zero scalar from the OS entropy source.

        Raises:
            RandomnessUnavailableException: If the entropy source fails
        """
        try:
            value = secrets.randbelow(self.order - 1) + 1
        except (OSError, NotImplementedError) as e:
            raise RandomnessUnavailableException(
                f"Secure randomness unavailable: {e}",
                details={"group": self.name},
            ) from e
        return Scalar(self, value)

    def encode_scalar(self, value: int) -> bytes:
        return value.to_bytes(self.scalar_size, self.scalar_byteorder)

    def scalar_from_bytes(self, data: bytes) -> Scalar:
        """
        Decode a fixed-width scalar encoding.

        Raises:
            ValueError: On wrong length or a value not below the group order
        """
        if len(data) != self.scalar_size:
            raise ValueError(
                f"Scalar encoding must be {self.scalar_size} bytes, got {len(data)}"
            )
        value = int.from_bytes(data, self.scalar_byteorder)
        if value >= self.order:
            raise ValueError("Scalar encoding is not reduced modulo the group order")
        return Scalar(self, value)

    def scalar_from_digest(self, digest: bytes) -> Scalar:
        """Reduce a hash digest to a scalar."""
        return self.scalar(int.from_bytes(digest, self.scalar_byteorder))

    # -------------------------------------------------------------------------
    # Points
    # -------------------------------------------------------------------------

    def base(self) -> Point:
        return Point(self, self.base_element())

    def neutral(self) -> Point:
        return Point(self, self.neutral_element())

    def point_from_bytes(self, data: bytes) -> Point:
        """
        Decode a fixed-width point encoding.

        Raises:
            ValueError: On wrong length or bytes that are not a group element
        """
        if len(data) != self.point_size:
            raise ValueError(
                f"Point encoding must be {self.point_size} bytes, got {len(data)}"
            )
        return Point(self, self.decode_point(data))

    @abstractmethod
    def base_element(self) -> Any:
        ...

    @abstractmethod
    def neutral_element(self) -> Any:
        ...

    @abstractmethod
    def point_add(self, a: Any, b: Any) -> Any:
        ...

    @abstractmethod
    def point_mul(self, a: Any, k: int) -> Any:
        """Multiply element `a` by the integer `k` (0 <= k < order)."""
        ...

    @abstractmethod
    def encode_point(self, a: Any) -> bytes:
        ...

    @abstractmethod
    def decode_point(self, data: bytes) -> Any:
        """Validate and decode `point_size` bytes; raise ValueError if invalid."""
        ...

    # -------------------------------------------------------------------------
    # Hash and keys
    # -------------------------------------------------------------------------

    def new_hash(self) -> "hashlib._Hash":
        """Return a fresh hash object; state is never shared between calls."""
        return hashlib.new(self.hash_name)

    def keypair(self, secret: Scalar | int | None = None) -> KeyPair:
        """Derive a key pair from `secret`, or from a random scalar if omitted."""
        if secret is None:
            secret = self.random_scalar()
        elif isinstance(secret, int):
            secret = self.scalar(secret)
        return KeyPair(secret=secret, public=secret * self.base())
