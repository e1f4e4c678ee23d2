"""
Exception hierarchy for the DAO action builder.
"""

from dao_action_builder.errors.base import ActionBuilderError, ErrorCode
from dao_action_builder.errors.action import (
    DecodingError,
    EncodingError,
    FunctionNotFoundError,
    InvalidAddressError,
    InvalidParameterError,
    NormalizationError,
)
from dao_action_builder.errors.network import (
    AbiFetchError,
    ContractNotFoundError,
    InvalidApiKeyError,
    NetworkError,
    RpcError,
)

__all__ = [
    "ActionBuilderError",
    "ErrorCode",
    # Action assembly
    "InvalidAddressError",
    "FunctionNotFoundError",
    "InvalidParameterError",
    "EncodingError",
    "NormalizationError",
    "DecodingError",
    # Collaborators
    "NetworkError",
    "InvalidApiKeyError",
    "ContractNotFoundError",
    "AbiFetchError",
    "RpcError",
]
