"""
Calldata decoding back into display strings.
"""

from __future__ import annotations

import re
from typing import Any, Dict, Iterable, List, Optional, Sequence

from eth_abi.exceptions import DecodingError as CodecDecodingError
from eth_abi.exceptions import ParseError as CodecParseError
from eth_abi.grammar import TupleType
from eth_abi.grammar import parse as parse_codec_type

from dao_action_builder.core.abi_utils import parse_abi
from dao_action_builder.core.codec import (
    SELECTOR_LENGTH,
    calldata_to_bytes,
    decode_function_call,
    function_selector,
)
from dao_action_builder.errors import DecodingError
from dao_action_builder.types.abi import AbiFunction, AbiParameter
from dao_action_builder.types.action import DecodeCalldataResult
from dao_action_builder.utils.logging import get_logger
from dao_action_builder.validation.normalizers import denormalize_parameter_value
from dao_action_builder.validation.types import parse_type

_logger = get_logger(__name__)

_SIGNATURE_PATTERN = re.compile(r"^(.+?)\((.*)\)$")
_CODEC_ERRORS = (CodecDecodingError, CodecParseError, ValueError, TypeError)


def _calldata_payload(calldata: str) -> bytes:
    try:
        return calldata_to_bytes(calldata)
    except (ValueError, TypeError) as e:
        raise DecodingError(f"Failed to decode calldata: {e}", cause=e) from e


def _decode_with(
    function: AbiFunction,
    payload: bytes,
    function_signature: Optional[str] = None,
    parameter_types: Optional[List[str]] = None,
) -> DecodeCalldataResult:
    try:
        values = decode_function_call(function, payload)
    except _CODEC_ERRORS as e:
        raise DecodingError(
            f"Failed to decode calldata: {e}",
            cause=e,
            details={"signature": function.signature},
        ) from e

    parameters: Dict[str, str] = {}
    for index, (param, value) in enumerate(zip(function.inputs, values)):
        parameters[param.name or f"param{index}"] = denormalize_parameter_value(
            value, param.type, param.components
        )
    if parameter_types is None:
        parameter_types = [param.type for param in function.inputs]

    return DecodeCalldataResult(
        function_name=function.name,
        function_signature=function_signature or function.signature,
        parameters=parameters,
        parameter_types=parameter_types,
    )


def decode_calldata(calldata: str, abi: Iterable[Any]) -> DecodeCalldataResult:
    """
    Decode calldata by matching its selector against an ABI.

    Raises:
        DecodingError: If the calldata is malformed, no function selector
            matches, or the arguments do not decode against the match.
    """
    payload = _calldata_payload(calldata)
    selector = payload[:SELECTOR_LENGTH]

    for function in parse_abi(abi):
        if len(selector) == SELECTOR_LENGTH and function_selector(function) == selector:
            return _decode_with(function, payload)

    _logger.debug("No function selector matched", extra={"selector": "0x" + selector.hex()})
    raise DecodingError("Failed to decode calldata - no matching function found")


def _split_types(types: str) -> List[str]:
    """Split a comma-separated type list, keeping parenthesized tuples whole."""
    parts: List[str] = []
    depth = 0
    current = ""
    for char in types:
        if char == "," and depth == 0:
            parts.append(current.strip())
            current = ""
            continue
        if char == "(":
            depth += 1
        elif char == ")":
            depth -= 1
        current += char
    if current.strip() or parts:
        parts.append(current.strip())
    return parts


def _parameter_from_node(name: str, node: Any) -> AbiParameter:
    if isinstance(node, TupleType):
        suffix = "".join(
            f"[{dim[0] if dim else ''}]" for dim in (node.arrlist or ())
        )
        return AbiParameter(
            name=name,
            type=f"tuple{suffix}",
            components=[
                _parameter_from_node(f"field{index}", component)
                for index, component in enumerate(node.components)
            ],
        )
    return AbiParameter(name=name, type=node.to_type_str())


def _parameter_from_type(name: str, abi_type: str) -> AbiParameter:
    """
    Build a parameter from a signature type string.

    Expanded structs such as ``(address,uint256)[]`` get synthesized
    components named ``field0``, ``field1``, ... so they decode to JSON
    objects like any declared tuple.
    """
    if parse_type(abi_type).is_tuple:
        raise DecodingError(
            "Struct inputs must use expanded (type,...) form",
            details={"type": abi_type},
        )
    if not abi_type.startswith("("):
        return AbiParameter(name=name, type=abi_type)
    try:
        node = parse_codec_type(abi_type)
    except CodecParseError as e:
        raise DecodingError(f"Invalid parameter type: {abi_type}", cause=e) from e
    return _parameter_from_node(name, node)


def decode_calldata_by_signature(calldata: str, function_signature: str) -> DecodeCalldataResult:
    """
    Decode calldata knowing only the function signature.

    Inputs are named ``param0``, ``param1``, ... in the result. Struct
    inputs must be written in expanded ``(type,type)`` form, since a bare
    ``tuple`` carries no component types; their fields are named
    ``field0``, ``field1``, ...

    Raises:
        DecodingError: If the signature is malformed, uses a bare ``tuple``,
            does not match the selector, or the arguments do not decode.
    """
    match = _SIGNATURE_PATTERN.match(function_signature)
    if not match:
        raise DecodingError(f"Invalid function signature: {function_signature}")

    name, types = match.group(1), match.group(2)
    declared_types = _split_types(types)
    function = AbiFunction(
        name=name,
        inputs=[
            _parameter_from_type(f"param{index}", abi_type)
            for index, abi_type in enumerate(declared_types)
        ],
    )

    payload = _calldata_payload(calldata)
    try:
        expected = function_selector(function)
    except _CODEC_ERRORS as e:
        raise DecodingError(f"Failed to decode calldata: {e}", cause=e) from e
    if payload[:SELECTOR_LENGTH] != expected:
        raise DecodingError(
            "Failed to decode calldata",
            details={"signature": function_signature},
        )

    return _decode_with(function, payload, function_signature, declared_types)


def try_decode_calldata(
    calldata: str, abis: Sequence[Iterable[Any]]
) -> DecodeCalldataResult:
    """Decode against several ABIs at once; the first ABI wins on duplicate signatures."""
    combined: Dict[str, AbiFunction] = {}
    for abi in abis:
        for function in parse_abi(abi):
            combined.setdefault(function.signature, function)
    return decode_calldata(calldata, list(combined.values()))


def format_decoded_parameters(decoded: DecodeCalldataResult) -> str:
    """One-line ``type: value`` rendering of a decoded call."""
    return ", ".join(
        f"{decoded.parameter_types[index] if index < len(decoded.parameter_types) else 'unknown'}: {value}"
        for index, value in enumerate(decoded.parameters.values())
    )
