"""
CLI Verify Command

Verify a hex-encoded signature on a message under a hex-encoded public key.

Usage:
    schnorr verify "<message>" --signature HEX --public-key HEX [--json]

Exit code 2 means the inputs were usable and the signature does not match;
exit code 1 means the inputs were rejected.
"""

from __future__ import annotations

import json
import logging
from argparse import Namespace
from dataclasses import asdict, dataclass

from sigcore.crypto.signatures import decode_signature, verify
from sigcore.schemas.errors import SchnorrException

from .common import (
    EXIT_SUCCESS,
    EXIT_VERIFICATION_FAILED,
    parse_hex,
    parse_public_key,
    report_error,
    resolve_group,
)


logger = logging.getLogger(__name__)


@dataclass
class VerifySummary:
    """Summary of signature verification for CLI output."""
    group: str = ""
    valid: bool = False
    display: str = ""

    def to_dict(self) -> dict[str, object]:
        return asdict(self)


def verify_cmd(args: Namespace) -> int:
    """
    Execute the verify command.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code
    """
    try:
        group = resolve_group(args)
        signature = decode_signature(parse_hex(args.signature, "signature"), group)
        public_key = parse_public_key(args.public_key, group)
        valid = verify(args.message, signature, public_key)
    except SchnorrException as e:
        return report_error(e, args.json)

    summary = VerifySummary(group=group.name, valid=valid, display=str(signature))

    if args.json:
        print(json.dumps(summary.to_dict(), indent=2))
    else:
        print(f"group: {summary.group}")
        print(f"signature: {summary.display}")
        print(f"valid: {str(summary.valid).lower()}")

    if valid:
        logger.info("Verification passed")
        return EXIT_SUCCESS
    logger.warning("Verification failed")
    return EXIT_VERIFICATION_FAILED
