"""
Common test fixtures shared by all modules.

Provides factory functions for key pairs and signatures in any registered
group suite.
"""

from typing import Optional

from sigcore.crypto.signatures import Signature, sign
from sigcore.groups import Group, KeyPair, get_group


GROUP_NAMES = ["ed25519", "modp-257-test"]


def make_keypair(group: Optional[Group] = None, secret: Optional[int] = None) -> KeyPair:
    """
    Create a key pair for testing.

    Args:
        group: Group suite (default: ed25519)
        secret: Fixed secret scalar value; random if omitted
    """
    group = group or get_group()
    return group.keypair(secret)


def make_signature(
    message: str = "message",
    group: Optional[Group] = None,
    keypair: Optional[KeyPair] = None,
) -> tuple[Signature, KeyPair]:
    """
    Sign a message with a fresh (or given) key pair.

    Returns:
        (signature, keypair)
    """
    keypair = keypair or make_keypair(group)
    return sign(message, keypair.secret), keypair
