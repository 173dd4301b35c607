"""
CLI Sign Command

Sign a message with a hex-encoded secret scalar.

Usage:
    schnorr sign "<message>" --secret HEX [--json]
"""

from __future__ import annotations

import json
import logging
from argparse import Namespace
from dataclasses import asdict, dataclass

from sigcore.crypto.signatures import encode_signature, sign
from sigcore.schemas.errors import SchnorrException

from .common import (
    EXIT_SUCCESS,
    parse_secret,
    report_error,
    resolve_group,
)


logger = logging.getLogger(__name__)


@dataclass
class SignSummary:
    """Summary of a signing operation for CLI output."""
    group: str = ""
    public_key: str = ""
    signature: str = ""
    display: str = ""

    def to_dict(self) -> dict[str, str]:
        return asdict(self)


def print_summary_human(summary: SignSummary) -> None:
    print(f"group: {summary.group}")
    print(f"public_key: {summary.public_key}")
    print(f"signature: {summary.signature}")
    print(f"display: {summary.display}")


def sign_cmd(args: Namespace) -> int:
    """
    Execute the sign command.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code
    """
    try:
        group = resolve_group(args)
        secret = parse_secret(args.secret, group)
        signature = sign(args.message, secret)
        public_key = secret * group.base()
    except SchnorrException as e:
        return report_error(e, args.json)

    summary = SignSummary(
        group=group.name,
        public_key=public_key.to_bytes().hex(),
        signature=encode_signature(signature).hex(),
        display=str(signature),
    )

    if args.json:
        print(json.dumps(summary.to_dict(), indent=2))
    else:
        print_summary_human(summary)

    logger.info("Message signed")
    return EXIT_SUCCESS
