"""
Schemas
File: __init__.py

Purpose: Export the public error taxonomy.
"""

from .errors import (
    ConfigException,
    ErrorCodes,
    IncompleteSignatureException,
    InvalidInputException,
    InvalidKeyException,
    MalformedSignatureException,
    RandomnessUnavailableException,
    SchnorrError,
    SchnorrException,
    UnknownGroupException,
)

__all__ = [
    "ConfigException",
    "ErrorCodes",
    "IncompleteSignatureException",
    "InvalidInputException",
    "InvalidKeyException",
    "MalformedSignatureException",
    "RandomnessUnavailableException",
    "SchnorrError",
    "SchnorrException",
    "UnknownGroupException",
]
