"""
Schemas
File: errors.py

Purpose: Standard error taxonomy for signing, verification and decoding.
Defines both Pydantic models for structured error communication
and Python exceptions for control flow.

Every failure is signalled by raising one of the exceptions below; none of
them is retried internally. A raised exception from verify() means the inputs
were unusable and must never be read as "signature invalid".
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


# =============================================================================
# Error Codes (Machine-Readable Constants)
# =============================================================================

class ErrorCodes:
    """Stable machine-readable error codes."""

    # Input Errors
    INVALID_INPUT = "INVALID_INPUT"
    INVALID_KEY = "INVALID_KEY"

    # Signature Errors
    INCOMPLETE_SIGNATURE = "INCOMPLETE_SIGNATURE"
    MALFORMED_SIGNATURE = "MALFORMED_SIGNATURE"

    # Environment Errors
    RANDOMNESS_UNAVAILABLE = "RANDOMNESS_UNAVAILABLE"
    UNKNOWN_GROUP = "UNKNOWN_GROUP"
    CONFIG_ERROR = "CONFIG_ERROR"


# =============================================================================
# Pydantic Error Models (Structured Communication)
# =============================================================================

class SchnorrError(BaseModel):
    """
    Base error model for structured error communication.

    Used when an error has to cross a boundary as data (CLI JSON output,
    logs) instead of as a raised exception.
    """

    model_config = ConfigDict(
        extra="forbid",
        frozen=False,
        validate_assignment=True,
    )

    code: str = Field(
        ...,
        description="Stable machine-readable error code",
        examples=[ErrorCodes.MALFORMED_SIGNATURE],
    )
    message: str = Field(
        ...,
        description="Human-readable error message",
    )
    details: dict[str, Any] = Field(
        default_factory=dict,
        description="Additional structured details about the error",
    )
    retryable: bool = Field(
        default=False,
        description="Whether the operation can be retried",
    )

    def to_exception(self) -> "SchnorrException":
        """Convert this error model to a raised exception."""
        exc_type = _EXCEPTIONS_BY_CODE.get(self.code)
        if exc_type is None:
            return SchnorrException(
                code=self.code,
                message=self.message,
                details=self.details,
                retryable=self.retryable,
            )
        return exc_type(message=self.message, details=self.details)


# =============================================================================
# Python Exceptions (Control Flow)
# =============================================================================

class SchnorrException(Exception):
    """
    Base exception for all signature scheme errors.

    This exception carries structured error information and can be
    converted to/from SchnorrError models.
    """

    def __init__(
        self,
        message: str,
        code: str = "SCHNORR_ERROR",
        details: dict[str, Any] | None = None,
        retryable: bool = False,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.details = details or {}
        self.retryable = retryable

    def to_error_model(self) -> SchnorrError:
        """Convert this exception to a SchnorrError model."""
        return SchnorrError(
            code=self.code,
            message=self.message,
            details=self.details,
            retryable=self.retryable,
        )

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(code={self.code!r}, message={self.message!r})"


class InvalidInputException(SchnorrException):
    """Exception raised for an empty or non-text message."""

    def __init__(
        self,
        message: str,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message=message,
            code=ErrorCodes.INVALID_INPUT,
            details=details,
            retryable=False,
        )


class InvalidKeyException(SchnorrException):
    """Exception raised for a zero private scalar or a neutral public point."""

    def __init__(
        self,
        message: str,
        group: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        full_details = details or {}
        if group:
            full_details["group"] = group
        super().__init__(
            message=message,
            code=ErrorCodes.INVALID_KEY,
            details=full_details,
            retryable=False,
        )


class IncompleteSignatureException(SchnorrException):
    """Exception raised when a signature has a missing or default field."""

    def __init__(
        self,
        message: str,
        missing: list[str] | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        full_details = details or {}
        if missing:
            full_details["missing"] = missing
        super().__init__(
            message=message,
            code=ErrorCodes.INCOMPLETE_SIGNATURE,
            details=full_details,
            retryable=False,
        )


class MalformedSignatureException(SchnorrException):
    """Exception raised when signature bytes cannot be decoded."""

    def __init__(
        self,
        message: str,
        expected_length: int | None = None,
        actual_length: int | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        full_details = details or {}
        if expected_length is not None:
            full_details["expected_length"] = expected_length
        if actual_length is not None:
            full_details["actual_length"] = actual_length
        super().__init__(
            message=message,
            code=ErrorCodes.MALFORMED_SIGNATURE,
            details=full_details,
            retryable=False,
        )


class RandomnessUnavailableException(SchnorrException):
    """Exception raised when the entropy source fails while signing."""

    def __init__(
        self,
        message: str,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message=message,
            code=ErrorCodes.RANDOMNESS_UNAVAILABLE,
            details=details,
            retryable=False,
        )


class UnknownGroupException(SchnorrException):
    """Exception raised when a group suite name is not registered."""

    def __init__(
        self,
        message: str,
        name: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        full_details = details or {}
        if name:
            full_details["name"] = name
        super().__init__(
            message=message,
            code=ErrorCodes.UNKNOWN_GROUP,
            details=full_details,
            retryable=False,
        )


class ConfigException(SchnorrException):
    """Exception raised when configuration cannot be loaded or is invalid."""

    def __init__(
        self,
        message: str,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message=message,
            code=ErrorCodes.CONFIG_ERROR,
            details=details,
            retryable=False,
        )


_EXCEPTIONS_BY_CODE: dict[str, type[SchnorrException]] = {
    ErrorCodes.INVALID_INPUT: InvalidInputException,
    ErrorCodes.INVALID_KEY: InvalidKeyException,
    ErrorCodes.INCOMPLETE_SIGNATURE: IncompleteSignatureException,
    ErrorCodes.MALFORMED_SIGNATURE: MalformedSignatureException,
    ErrorCodes.RANDOMNESS_UNAVAILABLE: RandomnessUnavailableException,
    ErrorCodes.UNKNOWN_GROUP: UnknownGroupException,
    ErrorCodes.CONFIG_ERROR: ConfigException,
}
