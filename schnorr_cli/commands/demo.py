"""
CLI Demo Command

Walk through the whole flow with a throwaway key pair: sign, verify twice
(function and method form), encode, then decode into a fresh signature.

Usage:
    schnorr demo ["<message>"]
"""

from __future__ import annotations

from argparse import Namespace

from sigcore.crypto.signatures import Signature, sign, verify
from sigcore.schemas.errors import SchnorrException

from .common import (
    EXIT_SUCCESS,
    EXIT_VERIFICATION_FAILED,
    report_error,
    resolve_group,
)


def demo_cmd(args: Namespace) -> int:
    """Execute the demo command."""
    try:
        group = resolve_group(args)
        keys = group.keypair()

        signature = sign(args.message, keys.secret)
        print(f"group: {group.name}")
        print(f"signature: {signature}")

        check = verify(args.message, signature, keys.public)
        check2 = signature.verify(args.message, keys.public)
        print(f"check: {str(check).lower()}")
        print(f"check2: {str(check2).lower()}")

        data = signature.to_bytes()
        print(f"encoded ({len(data)} bytes): {data.hex()}")
        decoded = Signature.from_bytes(data, group)
        print(f"decoded: {decoded}")
    except SchnorrException as e:
        return report_error(e, False)

    if check and check2 and decoded == signature:
        return EXIT_SUCCESS
    return EXIT_VERIFICATION_FAILED
