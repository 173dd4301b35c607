"""
Prime-order group suites.

The signature scheme only talks to the Group interface; concrete suites are
looked up by name through the default registry.
"""

from __future__ import annotations

from typing import Optional

from .base import Group, KeyPair, Point, Scalar
from .ed25519 import Ed25519Group
from .modp import ModPGroup, modp_257_test
from .registry import GroupEntry, GroupRegistry

DEFAULT_GROUP = "ed25519"

_default_registry = GroupRegistry()
_default_registry.register(
    Ed25519Group(),
    description="Ed25519 prime-order subgroup (libsodium)",
)
_default_registry.register(
    modp_257_test(),
    description="257-bit safe-prime Schnorr group, unequal point/scalar widths",
    production=False,
)


def get_registry() -> GroupRegistry:
    """Get the process-wide group registry."""
    return _default_registry


def get_group(name: Optional[str] = None) -> Group:
    """Resolve a suite by name; None selects DEFAULT_GROUP."""
    return _default_registry.get(name or DEFAULT_GROUP)


def list_groups() -> list[str]:
    return _default_registry.names()


__all__ = [
    "DEFAULT_GROUP",
    "Ed25519Group",
    "Group",
    "GroupEntry",
    "GroupRegistry",
    "KeyPair",
    "ModPGroup",
    "Point",
    "Scalar",
    "get_group",
    "get_registry",
    "list_groups",
    "modp_257_test",
]
