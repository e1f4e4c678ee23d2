"""
Boundary to the eth-abi binary codec.

The validators and normalizers work on text; eth-abi wants Python ints,
bytes and tuples, and type strings with struct components expanded
(``(address,uint256)[]`` rather than ``tuple[]``). This module converts
between the two and computes function selectors.
"""

from __future__ import annotations

from typing import Any, List, Sequence, Tuple, Union

from eth_abi import decode, encode
from eth_utils import keccak, to_bytes
from eth_utils.abi import collapse_if_tuple

from dao_action_builder.types.abi import AbiFunction, AbiParameter
from dao_action_builder.validation.literals import parse_integer_literal
from dao_action_builder.validation.types import parse_type
from dao_action_builder.validation.validators import FIXED_BYTES_PATTERN

SELECTOR_LENGTH = 4


def abi_type_string(param: AbiParameter) -> str:
    """Codec type string for a parameter, with tuple components expanded."""
    return collapse_if_tuple(param.to_abi_dict())


def canonical_signature(function: AbiFunction) -> str:
    """Signature used for selector hashing, e.g. ``f((address,uint256)[])``."""
    types = ",".join(abi_type_string(param) for param in function.inputs)
    return f"{function.name}({types})"


def function_selector(function: AbiFunction) -> bytes:
    """First four bytes of keccak256 over the canonical signature."""
    return keccak(text=canonical_signature(function))[:SELECTOR_LENGTH]


def to_codec_value(value: Any, param: AbiParameter) -> Any:
    """
    Convert a normalized value into the Python type eth-abi encodes.

    Decimal integer strings become ints, hex strings become bytes for
    ``bytes``/``bytesN``, tuple field lists become tuples. Everything else
    is handed over unchanged and left for eth-abi to judge.
    """
    parsed = parse_type(param.type)

    if parsed.is_array:
        element = param.model_copy(update={"type": parsed.element_type()})
        return [to_codec_value(item, element) for item in value]

    if parsed.is_tuple:
        return tuple(
            to_codec_value(item, component)
            for item, component in zip(value, param.components or [])
        )

    base_type = parsed.base_type
    if isinstance(value, str):
        if base_type.startswith("uint") or base_type.startswith("int"):
            number = parse_integer_literal(value)
            return value if number is None else number
        if base_type == "bytes" or FIXED_BYTES_PATTERN.match(base_type):
            return to_bytes(hexstr=value)
    return value


def encode_function_call(function: AbiFunction, arguments: Sequence[Any]) -> str:
    """
    Encode a call as 0x-prefixed calldata (selector + encoded arguments).

    Raises:
        Whatever eth-abi raises for values that do not fit their types.
    """
    if len(arguments) != len(function.inputs):
        raise ValueError(
            f"{function.name} expects {len(function.inputs)} arguments, got {len(arguments)}"
        )
    types = [abi_type_string(param) for param in function.inputs]
    values = [
        to_codec_value(argument, param)
        for argument, param in zip(arguments, function.inputs)
    ]
    return "0x" + (function_selector(function) + encode(types, values)).hex()


def calldata_to_bytes(calldata: str) -> bytes:
    """Convert 0x hex calldata to bytes; raises ValueError on malformed hex."""
    if not isinstance(calldata, str) or not calldata.startswith("0x"):
        raise ValueError("Calldata must be a 0x-prefixed hex string")
    return to_bytes(hexstr=calldata)


def decode_function_call(
    function: AbiFunction, calldata: Union[str, bytes]
) -> Tuple[Any, ...]:
    """
    Decode the arguments of a call to ``function``.

    The selector is skipped without being checked; callers match it first.
    """
    payload = calldata_to_bytes(calldata) if isinstance(calldata, str) else bytes(calldata)
    types: List[str] = [abi_type_string(param) for param in function.inputs]
    return tuple(decode(types, payload[SELECTOR_LENGTH:]))
