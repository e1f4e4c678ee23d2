"""
Calldata encoding for named or positional parameters.
"""

from __future__ import annotations

from typing import Any, Iterable, List, Mapping, Sequence

from eth_abi.exceptions import EncodingError as CodecEncodingError
from eth_abi.exceptions import ParseError as CodecParseError

from dao_action_builder.core.abi_utils import (
    find_function_by_signature,
    find_functions_by_name,
)
from dao_action_builder.core.codec import encode_function_call
from dao_action_builder.errors import EncodingError, FunctionNotFoundError, NormalizationError
from dao_action_builder.types.abi import AbiFunction, FunctionLike, as_function
from dao_action_builder.types.action import EncodeCalldataResult, ParameterPresence
from dao_action_builder.validation.normalizers import (
    normalize_parameter_value,
    prepare_parameters_for_encoding,
)

_CODEC_ERRORS = (CodecEncodingError, CodecParseError, ValueError, TypeError, OverflowError)


def _encode(function: AbiFunction, arguments: List[Any]) -> EncodeCalldataResult:
    try:
        calldata = encode_function_call(function, arguments)
    except _CODEC_ERRORS as e:
        raise EncodingError(
            f"Failed to encode calldata: {e}",
            cause=e,
            details={"signature": function.signature},
        ) from e
    return EncodeCalldataResult(calldata=calldata, function_signature=function.signature)


def encode_calldata(
    abi: Iterable[Any],
    function_signature: str,
    parameters: Mapping[str, Any],
) -> EncodeCalldataResult:
    """
    Encode a call from named parameter values.

    Args:
        abi: Functions to resolve against (AbiFunction models or ABI JSON)
        function_signature: Exact ``name(type,...)`` signature
        parameters: Input name to raw value (text or structured)

    Returns:
        EncodeCalldataResult with 0x calldata and the resolved signature.

    Raises:
        FunctionNotFoundError: If no function has that signature.
        EncodingError: If a parameter is missing or the codec rejects a value.
    """
    function = find_function_by_signature(function_signature, abi)
    if function is None:
        raise FunctionNotFoundError(
            f"Function not found: {function_signature}", signature=function_signature
        )

    try:
        arguments = prepare_parameters_for_encoding(parameters, function.inputs)
    except NormalizationError as e:
        raise EncodingError(
            f"Failed to encode calldata: {e.message}",
            cause=e,
            details={"signature": function.signature},
        ) from e

    return _encode(function, arguments)


def encode_calldata_by_name(
    abi: Iterable[Any],
    function_name: str,
    parameters: Sequence[Any],
) -> EncodeCalldataResult:
    """
    Encode a call from positional values, choosing the overload by arity.

    The first overload (in ABI order) whose input count equals
    ``len(parameters)`` is used.
    """
    candidates = find_functions_by_name(function_name, abi)
    if not candidates:
        raise FunctionNotFoundError(f"Function not found: {function_name}")

    function = next(
        (fn for fn in candidates if len(fn.inputs) == len(parameters)), None
    )
    if function is None:
        raise FunctionNotFoundError(
            f"No overload of {function_name} matches {len(parameters)} parameters"
        )

    try:
        arguments = [
            normalize_parameter_value(value, param.type, param.components)
            for value, param in zip(parameters, function.inputs)
        ]
    except NormalizationError as e:
        raise EncodingError(f"Failed to encode calldata: {e.message}", cause=e) from e

    return _encode(function, arguments)


def validate_function_parameters(
    function: FunctionLike,
    parameters: Mapping[str, Any],
) -> ParameterPresence:
    """Report which declared inputs have no value in ``parameters``."""
    missing = [
        param.name
        for param in as_function(function).inputs
        if parameters.get(param.name) is None
    ]
    return ParameterPresence(valid=not missing, missing=missing)
