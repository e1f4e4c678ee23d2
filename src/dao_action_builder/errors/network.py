"""
Errors forwarded from the ABI-loading collaborators (block explorer, RPC).
"""

from __future__ import annotations

from typing import Any, Dict, Optional

from dao_action_builder.errors.base import ActionBuilderError, ErrorCode


class NetworkError(ActionBuilderError):
    """
    Raised when the block explorer cannot be reached or answers with an HTTP error.

    Example:
        >>> raise NetworkError("HTTP error: 502", status_code=502)
    """

    def __init__(
        self,
        message: str,
        *,
        status_code: Optional[int] = None,
        cause: Optional[BaseException] = None,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        details = details or {}
        if status_code is not None:
            details["status_code"] = status_code
        super().__init__(
            message, code=ErrorCode.NETWORK_ERROR, details=details, cause=cause
        )
        self.status_code = status_code


class InvalidApiKeyError(ActionBuilderError):
    """Raised when the block explorer rejects the configured API key."""

    def __init__(self, message: str = "Invalid Etherscan API key") -> None:
        super().__init__(message, code=ErrorCode.INVALID_API_KEY)


class ContractNotFoundError(ActionBuilderError):
    """Raised when the explorer has no verified ABI for an address."""

    def __init__(
        self,
        message: str,
        *,
        address: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        details = details or {}
        if address:
            details["address"] = address
        super().__init__(message, code=ErrorCode.CONTRACT_NOT_FOUND, details=details)
        self.address = address


class AbiFetchError(ActionBuilderError):
    """Raised when a fetched ABI payload cannot be parsed."""

    def __init__(
        self,
        message: str = "Failed to parse ABI JSON",
        *,
        cause: Optional[BaseException] = None,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(
            message, code=ErrorCode.ABI_FETCH_FAILED, details=details, cause=cause
        )


class RpcError(ActionBuilderError):
    """Raised when a JSON-RPC request to the chain node fails."""

    def __init__(
        self,
        message: str,
        *,
        cause: Optional[BaseException] = None,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(message, code=ErrorCode.RPC_ERROR, details=details, cause=cause)
