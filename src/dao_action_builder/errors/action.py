"""
Errors raised while resolving, validating and encoding contract calls.
"""

from __future__ import annotations

from typing import Any, Dict, Optional

from dao_action_builder.errors.base import ActionBuilderError, ErrorCode


class InvalidAddressError(ActionBuilderError):
    """
    Raised when a contract address is not a 0x-prefixed 20-byte hex string.

    Example:
        >>> raise InvalidAddressError("0x123")
    """

    def __init__(
        self,
        address: str,
        *,
        message: str = "Invalid contract address",
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        details = details or {}
        details["address"] = address
        super().__init__(message, code=ErrorCode.INVALID_ADDRESS, details=details)
        self.address = address


class FunctionNotFoundError(ActionBuilderError):
    """Raised when a signature (or name) does not resolve against the ABI."""

    def __init__(
        self,
        message: str,
        *,
        signature: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        details = details or {}
        if signature:
            details["signature"] = signature
        super().__init__(message, code=ErrorCode.FUNCTION_NOT_FOUND, details=details)
        self.signature = signature


class InvalidParameterError(ActionBuilderError):
    """
    Raised when a function parameter is missing or fails type validation.

    Example:
        >>> raise InvalidParameterError("amount", "Value exceeds uint8 max")
    """

    def __init__(
        self,
        parameter: str,
        reason: str,
        *,
        missing: bool = False,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        details = details or {}
        details["parameter"] = parameter
        details["reason"] = reason

        if missing:
            message = f"Missing parameter: {parameter}"
        else:
            message = f"Invalid parameter {parameter}: {reason}"

        super().__init__(message, code=ErrorCode.INVALID_PARAMETER, details=details)
        self.parameter = parameter
        self.reason = reason
        self.missing = missing


class EncodingError(ActionBuilderError):
    """Raised when normalized values cannot be ABI-encoded."""

    def __init__(
        self,
        message: str,
        *,
        cause: Optional[BaseException] = None,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(
            message, code=ErrorCode.ENCODING_FAILED, details=details, cause=cause
        )


class NormalizationError(EncodingError):
    """
    Raised by the normalizer when a value does not have the shape its type needs.

    Normalization runs on values that already passed validation, so this
    signals a programming error or a bypassed validation step.
    """


class DecodingError(ActionBuilderError):
    """Raised when calldata cannot be decoded against the given descriptors."""

    def __init__(
        self,
        message: str,
        *,
        cause: Optional[BaseException] = None,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(
            message, code=ErrorCode.DECODING_FAILED, details=details, cause=cause
        )
