"""
CLI Inspect Command

Decode a hex-encoded signature and print its fields.

Usage:
    schnorr inspect HEX [--json]
"""

from __future__ import annotations

import json
from argparse import Namespace

from sigcore.crypto.signatures import decode_signature
from sigcore.schemas.errors import SchnorrException

from .common import EXIT_SUCCESS, parse_hex, report_error, resolve_group


def inspect_cmd(args: Namespace) -> int:
    """Execute the inspect command."""
    try:
        group = resolve_group(args)
        signature = decode_signature(parse_hex(args.signature, "signature"), group)
    except SchnorrException as e:
        return report_error(e, args.json)

    data = {
        "group": group.name,
        "R": str(signature.R),
        "s": str(signature.s),
        "point_size": group.point_size,
        "scalar_size": group.scalar_size,
    }
    if args.json:
        print(json.dumps(data, indent=2))
    else:
        print(f"group: {data['group']}")
        print(f"R ({group.point_size} bytes): {data['R']}")
        print(f"s ({group.scalar_size} bytes): {data['s']}")
    return EXIT_SUCCESS
