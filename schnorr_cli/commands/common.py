"""
Shared helpers for CLI commands: exit codes, hex parsing, key decoding and
error reporting.
"""

from __future__ import annotations

import json
import sys
from argparse import Namespace

from sigcore.crypto.hashing import from_hex
from sigcore.groups import get_group
from sigcore.groups.base import Group, Point, Scalar
from sigcore.schemas.errors import (
    InvalidInputException,
    InvalidKeyException,
    SchnorrException,
)


# Exit codes
EXIT_SUCCESS = 0
EXIT_RUNTIME_ERROR = 1
EXIT_VERIFICATION_FAILED = 2


def parse_hex(value: str, what: str) -> bytes:
    """Parse hex with or without a 0x prefix."""
    text = value.strip()
    if not text.startswith("0x"):
        text = "0x" + text
    try:
        return from_hex(text)
    except ValueError as e:
        raise InvalidInputException(f"Invalid hex for {what}: {e}") from e


def resolve_group(args: Namespace) -> Group:
    """Group from --group, else from the loaded configuration."""
    name = getattr(args, "group", None)
    if not name:
        config = getattr(args, "cli_config", None)
        name = config.group if config is not None else None
    return get_group(name)


def parse_secret(value: str, group: Group) -> Scalar:
    data = parse_hex(value, "secret key")
    try:
        return group.scalar_from_bytes(data)
    except ValueError as e:
        raise InvalidKeyException(f"Invalid secret key: {e}", group=group.name) from e


def parse_public_key(value: str, group: Group) -> Point:
    data = parse_hex(value, "public key")
    try:
        return group.point_from_bytes(data)
    except ValueError as e:
        raise InvalidKeyException(f"Invalid public key: {e}", group=group.name) from e


def report_error(exc: SchnorrException, output_json: bool) -> int:
    """Print a scheme error and return the runtime error exit code."""
    if output_json:
        print(json.dumps({"ok": False, "error": exc.to_error_model().model_dump()}, indent=2))
    else:
        print(f"Error [{exc.code}]: {exc.message}", file=sys.stderr)
    return EXIT_RUNTIME_ERROR
