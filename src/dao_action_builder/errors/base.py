"""
Base exception class for the DAO action builder.

Every error raised by the package inherits from ActionBuilderError, which
carries a machine-readable ErrorCode plus free-form context details so that
failures can be logged or returned over an API as plain dictionaries.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Dict, Optional


class ErrorCode(str, Enum):
    """Error taxonomy shared by every raised error."""

    INVALID_ADDRESS = "INVALID_ADDRESS"
    INVALID_API_KEY = "INVALID_API_KEY"
    CONTRACT_NOT_FOUND = "CONTRACT_NOT_FOUND"
    ABI_FETCH_FAILED = "ABI_FETCH_FAILED"
    INVALID_PARAMETER = "INVALID_PARAMETER"
    ENCODING_FAILED = "ENCODING_FAILED"
    DECODING_FAILED = "DECODING_FAILED"
    FUNCTION_NOT_FOUND = "FUNCTION_NOT_FOUND"
    NETWORK_ERROR = "NETWORK_ERROR"
    RPC_ERROR = "RPC_ERROR"


class ActionBuilderError(Exception):
    """
    Base exception for all action builder errors.

    Attributes:
        message: Human-readable error description.
        code: Machine-readable error code.
        details: Additional error context.
        cause: Underlying exception, when the error wraps one.

    Example:
        >>> raise ActionBuilderError(
        ...     "Function not found: transfer(address,uint256)",
        ...     code=ErrorCode.FUNCTION_NOT_FOUND,
        ... )
    """

    def __init__(
        self,
        message: str,
        *,
        code: ErrorCode,
        details: Optional[Dict[str, Any]] = None,
        cause: Optional[BaseException] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code
        self.details = details or {}
        self.cause = cause

    def __str__(self) -> str:
        return f"[{self.code.value}] {self.message}"

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}("
            f"message={self.message!r}, "
            f"code={self.code.value!r}, "
            f"details={self.details!r})"
        )

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert exception to a dictionary for JSON serialization.

        Returns:
            Dictionary representation of the error.
        """
        return {
            "error": self.__class__.__name__,
            "code": self.code.value,
            "message": self.message,
            "details": self.details,
        }
