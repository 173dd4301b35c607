"""
CLI Main Entry Point

Parses command-line arguments and dispatches to subcommands.

Usage:
    python -m schnorr_cli sign "<message>" --secret HEX [--json]
    python -m schnorr_cli verify "<message>" --signature HEX --public-key HEX [--json]
    python -m schnorr_cli inspect HEX [--json]
    python -m schnorr_cli demo ["<message>"]
    python -m schnorr_cli groups [--json]
    python -m schnorr_cli config --init|--show

Environment Variables:
    SCHNORR_GROUP        Group suite (default: ed25519)
    SCHNORR_LOG_LEVEL    Log level (default: INFO)
    SCHNORR_LOG_FILE     Optional log file
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
import traceback
from pathlib import Path
from typing import Sequence

from sigcore.config import get_default_config_template, load_config
from sigcore.groups import get_registry

from schnorr_cli.commands import demo, inspect, sign, verify
from schnorr_cli.commands.common import (
    EXIT_RUNTIME_ERROR,
    EXIT_SUCCESS,
    EXIT_VERIFICATION_FAILED,
)

__all__ = [
    "EXIT_RUNTIME_ERROR",
    "EXIT_SUCCESS",
    "EXIT_VERIFICATION_FAILED",
    "create_parser",
    "main",
    "setup_logging",
]


def setup_logging(level: str = "INFO", log_file: str | None = None) -> None:
    """Configure logging for the CLI."""
    log_level = getattr(logging, level.upper(), logging.INFO)

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]

    if log_file:
        handlers.append(logging.FileHandler(log_file))

    logging.basicConfig(
        level=log_level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        handlers=handlers,
    )


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser with all subcommands."""
    parser = argparse.ArgumentParser(
        prog="schnorr",
        description="Schnorr signatures over prime-order groups - sign, verify and inspect signatures.",
    )
    parser.add_argument(
        "--version", action="version", version="%(prog)s 0.1.0"
    )
    parser.add_argument(
        "--config", "-c",
        type=Path,
        default=None,
        help="Path to configuration file (default: ./schnorr.json or ~/.config/schnorr/config.json)",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Log level (overrides config)",
    )
    parser.add_argument(
        "--group", "-g",
        type=str,
        default=None,
        help="Group suite name (overrides config; see 'groups')",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # --- sign command ---
    sign_parser = subparsers.add_parser(
        "sign",
        help="Sign a message",
        description="Sign a message with a hex-encoded secret scalar.",
    )
    sign_parser.add_argument("message", type=str, help="Message to sign")
    sign_parser.add_argument(
        "--secret", "-s",
        type=str,
        required=True,
        help="Secret scalar as hex (fixed width of the group)",
    )
    sign_parser.add_argument(
        "--json",
        action="store_true",
        default=False,
        help="Output machine-readable JSON",
    )
    sign_parser.set_defaults(func=sign.sign_cmd)

    # --- verify command ---
    verify_parser = subparsers.add_parser(
        "verify",
        help="Verify a signature",
        description="Verify a hex-encoded signature under a hex-encoded public key.",
    )
    verify_parser.add_argument("message", type=str, help="Signed message")
    verify_parser.add_argument(
        "--signature",
        type=str,
        required=True,
        help="Encoded signature as hex",
    )
    verify_parser.add_argument(
        "--public-key", "-k",
        type=str,
        required=True,
        help="Public key point as hex",
    )
    verify_parser.add_argument(
        "--json",
        action="store_true",
        default=False,
        help="Output machine-readable JSON",
    )
    verify_parser.set_defaults(func=verify.verify_cmd)

    # --- inspect command ---
    inspect_parser = subparsers.add_parser(
        "inspect",
        help="Decode a signature",
        description="Decode a hex-encoded signature and show R and s.",
    )
    inspect_parser.add_argument("signature", type=str, help="Encoded signature as hex")
    inspect_parser.add_argument("--json", action="store_true", help="JSON output")
    inspect_parser.set_defaults(func=inspect.inspect_cmd)

    # --- demo command ---
    demo_parser = subparsers.add_parser(
        "demo",
        help="Run a sign/verify/encode/decode walkthrough",
    )
    demo_parser.add_argument(
        "message",
        type=str,
        nargs="?",
        default="Tropical",
        help="Message to sign (default: Tropical)",
    )
    demo_parser.set_defaults(func=demo.demo_cmd)

    # --- groups command ---
    groups_parser = subparsers.add_parser(
        "groups",
        help="List registered group suites",
    )
    groups_parser.add_argument("--json", action="store_true", help="JSON output")
    groups_parser.set_defaults(func=groups_cmd)

    # --- config command ---
    config_parser = subparsers.add_parser(
        "config",
        help="Manage CLI configuration",
        description="Initialize or display configuration.",
    )
    config_parser.add_argument(
        "--init",
        action="store_true",
        default=False,
        help="Create a template configuration file",
    )
    config_parser.add_argument(
        "--show",
        action="store_true",
        default=False,
        help="Show current configuration",
    )
    config_parser.add_argument(
        "--path",
        type=str,
        default="schnorr.json",
        help="Path for config file (default: schnorr.json)",
    )
    config_parser.set_defaults(func=config_cmd)

    return parser


def config_cmd(args: argparse.Namespace) -> int:
    """Handle config command."""
    if args.init:
        config_path = Path(args.path)
        if config_path.exists():
            print(f"Error: Config file already exists: {config_path}", file=sys.stderr)
            return EXIT_RUNTIME_ERROR

        config_path.write_text(get_default_config_template())
        print(f"Created configuration file: {config_path}")
        print("You can also use environment variables (SCHNORR_* prefix).")
        return EXIT_SUCCESS

    if args.show:
        print(json.dumps(args.cli_config.to_dict(), indent=2))
        return EXIT_SUCCESS

    print("Usage: schnorr config [--init|--show]")
    print("  --init  Create a template configuration file")
    print("  --show  Show current configuration")
    return EXIT_SUCCESS


def groups_cmd(args: argparse.Namespace) -> int:
    """Handle groups command."""
    entries = get_registry().list_entries()

    if args.json:
        print(json.dumps([e.to_dict() for e in entries], indent=2))
        return EXIT_SUCCESS

    for entry in entries:
        marker = "" if entry.production else " [test only]"
        print(f"{entry.name}{marker}")
        print(f"  {entry.description}")
        print(
            f"  point={entry.group.point_size}B scalar={entry.group.scalar_size}B "
            f"signature={entry.group.point_size + entry.group.scalar_size}B "
            f"hash={entry.group.hash_name}"
        )
    return EXIT_SUCCESS


def main(argv: Sequence[str] | None = None) -> int:
    """
    Main entry point for the CLI.

    Args:
        argv: Command-line arguments (defaults to sys.argv[1:])

    Returns:
        Exit code (0=success, 1=error, 2=verification failed)
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return EXIT_RUNTIME_ERROR

    # Load configuration
    try:
        config = load_config(args.config)
    except Exception as e:
        print(f"Error loading configuration: {e}", file=sys.stderr)
        return EXIT_RUNTIME_ERROR

    # Setup logging
    log_level = args.log_level or config.log_level
    setup_logging(level=log_level, log_file=config.log_file)

    # Attach config to args for commands to use
    args.cli_config = config

    try:
        return args.func(args)
    except KeyboardInterrupt:
        print("\nInterrupted.", file=sys.stderr)
        return EXIT_RUNTIME_ERROR
    except Exception as e:
        if log_level.upper() == "DEBUG":
            traceback.print_exc()
        else:
            print(f"Error: {e}", file=sys.stderr)
        return EXIT_RUNTIME_ERROR


if __name__ == "__main__":
    sys.exit(main())
