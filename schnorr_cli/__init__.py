"""
Schnorr CLI

Command-line interface for signing, verifying and inspecting Schnorr
signatures.

Usage:
    python -m schnorr_cli sign "<message>" --secret HEX
    python -m schnorr_cli verify "<message>" --signature HEX --public-key HEX
    python -m schnorr_cli inspect HEX
    python -m schnorr_cli demo
    python -m schnorr_cli groups
"""

__version__ = "0.1.0"
