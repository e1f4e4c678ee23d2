"""
Type definitions for ABI descriptors and builder results.
"""

from dao_action_builder.types.abi import (
    AbiFunction,
    AbiParameter,
    FunctionLike,
    ParameterLike,
    StateMutability,
    as_function,
    as_parameters,
)
from dao_action_builder.types.action import (
    Action,
    DecodeCalldataResult,
    EncodeCalldataResult,
    LoadAbiResult,
    ParameterPresence,
)

__all__ = [
    # ABI descriptors
    "AbiFunction",
    "AbiParameter",
    "StateMutability",
    "FunctionLike",
    "ParameterLike",
    "as_function",
    "as_parameters",
    # Results
    "Action",
    "DecodeCalldataResult",
    "EncodeCalldataResult",
    "LoadAbiResult",
    "ParameterPresence",
]
